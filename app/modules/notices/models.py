# Supabase table: notices
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

notices:
- id: uuid (primary key)
- title_ko: text (not null)
- title_en: text (nullable)
- body_ko: text (nullable) - sanitized rich-text HTML
- body_en: text (nullable) - sanitized rich-text HTML
- category: text (nullable) - matches notice_categories.name_ko
- status: text (default: 'draft') - values: draft, published
- is_pinned: boolean (default: false)
- image_url: text (nullable)
- views: integer (default: 0)
- published_at: timestamp (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""
