# Supabase table: offers
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

offers:
- id: uuid (primary key)
- offer_id: text (unique, not null) - public business key, e.g. "ACA-417"
- campaign_name: text (not null)
- vertical: text (not null)
- status: text (not null, default: 'Testing') - values: Active, Testing, Paused, Archived
- offer_type: text (not null, default: 'CPA') - values: CPA, CPL, Transfer, Inbound, Form Fill
- direction: text (not null, default: 'Selling') - values: Buying, Selling
- publisher_payout_min: numeric (nullable)
- publisher_payout_max: numeric (nullable)
- advertiser_price_min: numeric (nullable)
- advertiser_price_max: numeric (nullable)
- states_allowed: text[] (nullable) - two-letter US state codes
- age_range: text (nullable)
- hours_of_operation: text (nullable)
- compliance_requirements: text (nullable)
- payment_terms: text (nullable)
- notes: text (nullable)
- buyer_id: uuid (foreign key to buyers.id, nullable)
- publisher_id: uuid (foreign key to publishers.id, nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Reads embed the buyer row as "buyer" via select("*, buyer:buyers(*)").
"""

VERTICALS = [
    "ACA",
    "Final Expense",
    "Medicare",
    "SSDI",
    "U65",
    "Auto Insurance",
    "Mortgage",
    "Legal",
    "Debt Settlement",
    "Life Insurance",
    "Home Services",
]

STATUSES = ["Active", "Testing", "Paused", "Archived"]
OFFER_TYPES = ["CPA", "CPL", "Transfer", "Inbound", "Form Fill"]
DIRECTIONS = ["Buying", "Selling"]

US_STATES = [
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
]

OFFER_SELECT = "*, buyer:buyers(*)"
