# Supabase table: inquiries (public contact form submissions)

"""
Expected Supabase table structure:

inquiries:
- id: uuid (primary key)
- company_name: text (nullable)
- person_name: text (not null)
- email: text (not null)
- phone: text (not null)
- inquiry_type: text (not null)
- product_category: text (nullable)
- message: text (not null)
- created_at: timestamp (default: now())

RLS: anonymous insert allowed, no anonymous select.
"""
