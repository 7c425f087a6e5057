# Supabase table: product_categories

"""
Expected Supabase table structure:

product_categories:
- id: uuid (primary key)
- code: text (unique, not null) - products.category_code references this
- name_ko: text (not null)
- name_en: text (nullable)
- created_at: timestamp (default: now())
"""
