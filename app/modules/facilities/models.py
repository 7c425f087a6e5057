# Supabase table: facilities
# Facility photos are stored in the Supabase Storage bucket settings.facilities_bucket

"""
Expected Supabase table structure:

facilities:
- id: uuid (primary key)
- name_ko: text (not null)
- name_en: text (nullable)
- type: text (nullable)
- specs: text (nullable) - free-form specification text
- status: text (default: 'active')
- image_url: text (nullable)
- created_at: timestamp (default: now())
"""
