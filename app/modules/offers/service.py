import logging
import re
import time
from datetime import datetime, timezone
from supabase import Client
from app.modules.offers.models import OFFER_SELECT
from app.modules.offers.schemas import OfferCreate, OfferUpdate, OfferMappingRow, price_range_errors
from app.core.exceptions import (
    OfferOpsError, NotFoundError, ValidationError, ConflictError, translate_backend_error
)
from typing import List, Optional, Dict, Any, Tuple

logger = logging.getLogger(__name__)


def generate_offer_id(vertical: str, now_ms: Optional[int] = None) -> str:
    """Public offer id: VERTICAL code (max 6 chars, no spaces) plus last three digits of the clock, e.g. FINALE-417"""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    vertical_code = "".join(vertical.upper().split())[:6]
    return f"{vertical_code}-{str(now_ms)[-3:]}"


# Characters with meaning inside a PostgREST or=(...) filter
_POSTGREST_RESERVED = re.compile(r"[,.:()*%\"\\]")


def clean_search_term(search: str) -> str:
    """Replace PostgREST filter syntax characters with spaces and collapse whitespace"""
    return " ".join(_POSTGREST_RESERVED.sub(" ", search).split())


def default_campaign_name(vertical: str, offer_type: str) -> str:
    return f"{vertical} {offer_type}"


class OfferService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_offers(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        vertical: Optional[str] = None,
        buyer_id: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> Tuple[List[Dict[str, Any]], int]:
        """Newest first, joined with buyer. Returns (page, total matching rows)."""
        try:
            query = self.supabase.table("offers").select(OFFER_SELECT, count="exact")
            if status:
                query = query.eq("status", status)
            if vertical:
                query = query.eq("vertical", vertical)
            if buyer_id:
                query = query.eq("buyer_id", buyer_id)
            term = clean_search_term(search) if search else ""
            if term:
                query = query.or_(f"offer_id.ilike.%{term}%,campaign_name.ilike.%{term}%")
            result = query.order("created_at", desc=True)\
                .limit(limit)\
                .offset(offset)\
                .execute()
            offers = result.data or []
            total = result.count if result.count is not None else len(offers)
            return offers, total
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Offer") from e

    def get_offer(self, offer_id: str) -> Dict[str, Any]:
        """Get offer by its public offer_id"""
        try:
            result = self.supabase.table("offers")\
                .select(OFFER_SELECT)\
                .eq("offer_id", offer_id)\
                .limit(1)\
                .execute()

            if not result.data:
                raise NotFoundError(f"Offer {offer_id} not found")

            return result.data[0]
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Offer") from e

    def create_offer(self, offer_data: OfferCreate) -> Dict[str, Any]:
        """Create a new offer, generating offer_id / campaign_name when omitted"""
        try:
            payload = offer_data.model_dump(exclude_none=True)
            if not payload.get("offer_id"):
                payload["offer_id"] = generate_offer_id(offer_data.vertical)
            if not payload.get("campaign_name"):
                payload["campaign_name"] = default_campaign_name(offer_data.vertical, offer_data.offer_type)

            existing = self.supabase.table("offers")\
                .select("id")\
                .eq("offer_id", payload["offer_id"])\
                .execute()
            if existing.data:
                raise ConflictError(f"Offer {payload['offer_id']} already exists")

            self._check_buyer_reference(payload.get("buyer_id"))

            result = self.supabase.table("offers").insert(payload).execute()
            if not result.data:
                raise OfferOpsError("Failed to create offer")

            logger.info(f"Created offer {payload['offer_id']}")
            return self.get_offer(payload["offer_id"])
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Offer") from e

    def update_offer(self, offer_id: str, offer_data: OfferUpdate) -> Dict[str, Any]:
        """Update offer; only fields set in the request are written"""
        try:
            current = self.get_offer(offer_id)
            update_data = offer_data.model_dump(exclude_unset=True)
            if not update_data:
                return current

            errors = price_range_errors({**current, **update_data})
            if errors:
                raise ValidationError("; ".join(errors))

            if "buyer_id" in update_data:
                self._check_buyer_reference(update_data["buyer_id"])

            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
            result = self.supabase.table("offers")\
                .update(update_data)\
                .eq("offer_id", offer_id)\
                .execute()

            if not result.data:
                raise NotFoundError(f"Offer {offer_id} not found")

            logger.info(f"Updated offer {offer_id}: {sorted(update_data)}")
            return self.get_offer(offer_id)
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Offer") from e

    def delete_offer(self, offer_id: str) -> bool:
        """Hard-delete an offer by offer_id"""
        try:
            result = self.supabase.table("offers")\
                .delete()\
                .eq("offer_id", offer_id)\
                .execute()

            if not result.data:
                raise NotFoundError(f"Offer {offer_id} not found")

            logger.info(f"Deleted offer {offer_id}")
            return True
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Offer") from e

    def list_offer_mappings(self) -> List[OfferMappingRow]:
        """offer_id -> buyer mapping for every offer, used as a recovery backup"""
        offers, _ = self.list_offers(limit=10000)
        rows = []
        for offer in offers:
            buyer = offer.get("buyer") or {}
            rows.append(OfferMappingRow(
                offer_id=offer["offer_id"],
                campaign_name=offer.get("campaign_name"),
                vertical=offer.get("vertical"),
                buyer_id=buyer.get("buyer_id") or "N/A",
                buyer_name=buyer.get("buyer_name") or "N/A",
                buyer_company=buyer.get("company_name") or "N/A",
                status=offer.get("status"),
                created_at=offer.get("created_at"),
                notes=offer.get("notes") or "",
            ))
        return rows

    def _check_buyer_reference(self, buyer_id: Optional[str]) -> None:
        """An offer's buyer_id, when set, must point at an existing buyer row"""
        if buyer_id is None:
            return
        result = self.supabase.table("buyers")\
            .select("id")\
            .eq("id", buyer_id)\
            .execute()
        if not result.data:
            raise ValidationError(f"Buyer {buyer_id} does not exist")
