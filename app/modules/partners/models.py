# Supabase table: partners
# Logos are stored in the Supabase Storage bucket settings.partners_bucket

"""
Expected Supabase table structure:

partners:
- id: uuid (primary key)
- name_ko: text (not null)
- name_en: text (nullable)
- logo_url: text (nullable) - public Storage URL
- website_url: text (nullable)
- type: text (nullable) - values: client, supplier, manufacturer
- created_at: timestamp (default: now())
"""
