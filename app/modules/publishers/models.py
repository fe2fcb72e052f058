# Supabase table: publishers
# Same shape as buyers, scoped to traffic sources

"""
Expected Supabase table structure:

publishers:
- id: uuid (primary key) - referenced by offers.publisher_id
- publisher_id: text (unique, not null) - public business key
- publisher_name: text (not null)
- company_name: text (nullable)
- email: text (nullable)
- status: text (not null, default: 'Active')
- notes: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""
