# Supabase table: history (company timeline shown on /company/history)

"""
Expected Supabase table structure:

history:
- id: uuid (primary key)
- year: text (not null) - e.g. "2019"
- month: text (not null) - e.g. "03"
- day: text (nullable)
- content_ko: text (not null)
- content_en: text (nullable)
- created_at: timestamp (default: now())
"""
