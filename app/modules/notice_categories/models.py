# Supabase table: notice_categories

"""
Expected Supabase table structure:

notice_categories:
- id: uuid (primary key)
- name_ko: text (not null) - notices.category stores this value
- name_en: text (nullable)
- is_active: boolean (default: true)
- sort_order: integer (default: 0)
- created_at: timestamp (default: now())
"""
