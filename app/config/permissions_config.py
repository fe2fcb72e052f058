"""
Roles and Field Visibility Configuration
This config defines the capability matrix for every dashboard role and the
groups of offer fields whose visibility depends on those capabilities.
Consumed by app.core.access_policy; nothing here performs I/O.
"""

# Capabilities, in the order they are reported by /auth/me
CAPABILITIES = [
    "can_view_buyers",
    "can_view_publishers",
    "can_view_pricing",
    "can_view_full_offer_details",
    "can_edit_offers",
    "can_delete_offers",
    "can_export_data",
    "can_view_financials",
]

# Role definitions
ROLE_TYPES = {
    "admin": {
        "capabilities": CAPABILITIES,
        "description": "Full access to offers, partners and financials"
    },
    "manager": {
        "capabilities": [c for c in CAPABILITIES if c != "can_delete_offers"],
        "description": "Everything an admin can do except deleting offers"
    },
    "publisher": {
        # Only their payout, never buyer pricing
        "capabilities": ["can_view_pricing"],
        "description": "Traffic source; buyer identity hidden"
    },
    "advertiser": {
        # Only their pricing
        "capabilities": ["can_view_pricing"],
        "description": "Advertiser; buyer identity and publisher payouts hidden"
    },
    "viewer": {
        "capabilities": [],
        "description": "Read-only access without partner or pricing details"
    },
}

# Offer fields grouped by the rule that controls them
BUYER_FIELDS = frozenset({"buyer", "buyer_id", "buyer_name", "buyer_email"})
PUBLISHER_FIELDS = frozenset({"publisher", "publisher_id", "publisher_name"})
ADVERTISER_PRICE_FIELDS = frozenset({"advertiser_price_min", "advertiser_price_max"})
PUBLISHER_PAYOUT_FIELDS = frozenset({"publisher_payout_min", "publisher_payout_max"})
FINANCIAL_FIELDS = frozenset({"profit", "margin"})

# Placeholders written in place of withheld values
PRIVATE_SENTINEL = "[Private]"
HIDDEN_SENTINEL = "[Hidden]"


def get_capability_matrix():
    """
    Returns a dictionary mapping every role to its full capability set
    Format: {
        "admin": {"can_view_buyers": True, ..., "can_view_financials": True},
        ...
    }
    """
    matrix = {}
    for role_name, role_config in ROLE_TYPES.items():
        granted = set(role_config["capabilities"])
        matrix[role_name] = {capability: capability in granted for capability in CAPABILITIES}
    return matrix


CAPABILITY_MATRIX = get_capability_matrix()
