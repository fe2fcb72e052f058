# Supabase table: buyers
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

buyers:
- id: uuid (primary key) - referenced by offers.buyer_id
- buyer_id: text (unique, not null) - public business key
- buyer_name: text (not null)
- company_name: text (nullable)
- email: text (nullable)
- status: text (not null, default: 'Active')
- payment_terms: text (nullable)
- quality_score: numeric (nullable)
- notes: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""
