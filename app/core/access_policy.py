"""
Role-based access policy for offer records.

Maps a role to its capability set and redacts offer records before they are
returned to a caller of that role. Pure functions, no I/O.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping

from pydantic import BaseModel, ConfigDict

from app.config.permissions_config import (
    ADVERTISER_PRICE_FIELDS,
    BUYER_FIELDS,
    CAPABILITY_MATRIX,
    FINANCIAL_FIELDS,
    HIDDEN_SENTINEL,
    PRIVATE_SENTINEL,
    PUBLISHER_FIELDS,
    PUBLISHER_PAYOUT_FIELDS,
)


class UserRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    PUBLISHER = "publisher"
    ADVERTISER = "advertiser"
    VIEWER = "viewer"


class UserPermissions(BaseModel):
    model_config = ConfigDict(frozen=True)

    can_view_buyers: bool
    can_view_publishers: bool
    can_view_pricing: bool
    can_view_full_offer_details: bool
    can_edit_offers: bool
    can_delete_offers: bool
    can_export_data: bool
    can_view_financials: bool


def check_capability_matrix(matrix: Mapping[str, Any]) -> None:
    """Every role has an entry, and the config names no role outside the enum."""
    expected = {role.value for role in UserRole}
    if set(matrix) != expected:
        raise RuntimeError(
            f"Capability matrix roles {sorted(matrix)} do not match UserRole {sorted(expected)}"
        )


check_capability_matrix(CAPABILITY_MATRIX)

_PERMISSIONS: Dict[UserRole, UserPermissions] = {
    role: UserPermissions(**CAPABILITY_MATRIX[role.value]) for role in UserRole
}


def get_permissions(role: UserRole) -> UserPermissions:
    """Return the fixed capability set for a role."""
    return _PERMISSIONS[UserRole(role)]


def can_view_field(role: UserRole, field_name: str) -> bool:
    """Field-level visibility for a single offer field. Unknown fields are visible."""
    role = UserRole(role)
    permissions = get_permissions(role)

    if field_name in BUYER_FIELDS:
        return permissions.can_view_buyers

    if field_name in PUBLISHER_FIELDS:
        return permissions.can_view_publishers

    if field_name in ADVERTISER_PRICE_FIELDS:
        return permissions.can_view_financials

    # Direct role check, not routed through a capability
    if field_name in PUBLISHER_PAYOUT_FIELDS:
        return role is not UserRole.ADVERTISER

    if field_name in FINANCIAL_FIELDS:
        return permissions.can_view_financials

    return True


def filter_offer_for_role(offer: Mapping[str, Any], role: UserRole) -> Dict[str, Any]:
    """
    Return a redacted shallow copy of an offer for the given role.

    Withheld fields are removed from the copy. Buyer and publisher names are
    replaced by "[Private]"; pricing the role may not see is replaced by an
    "*_info" field set to "[Hidden]". The input mapping is left untouched.
    """
    role = UserRole(role)
    permissions = get_permissions(role)
    filtered = dict(offer)

    if not permissions.can_view_buyers:
        filtered.pop("buyer", None)
        filtered.pop("buyer_id", None)
        filtered["buyer_name"] = PRIVATE_SENTINEL

    if not permissions.can_view_publishers:
        filtered.pop("publisher", None)
        filtered.pop("publisher_id", None)
        filtered["publisher_name"] = PRIVATE_SENTINEL

    if role is UserRole.PUBLISHER:
        for field in ADVERTISER_PRICE_FIELDS:
            filtered.pop(field, None)
        filtered["advertiser_price_info"] = HIDDEN_SENTINEL

    if role is UserRole.ADVERTISER:
        for field in PUBLISHER_PAYOUT_FIELDS:
            filtered.pop(field, None)
        filtered["publisher_payout_info"] = HIDDEN_SENTINEL

    if not permissions.can_view_financials:
        for field in FINANCIAL_FIELDS:
            filtered.pop(field, None)
        # NOTE: notes are dropped together with financials. Pending product
        # review whether this coupling is intended.
        filtered.pop("notes", None)

    return filtered


def filter_offers_for_role(offers: Iterable[Mapping[str, Any]], role: UserRole) -> List[Dict[str, Any]]:
    return [filter_offer_for_role(offer, role) for offer in offers]


def visible_fields(role: UserRole, fields: Iterable[str]) -> List[str]:
    """Keep only the column names the role may see, preserving order."""
    return [field for field in fields if can_view_field(role, field)]
