# Supabase table: home_settings (single row)
# Hero images are stored in the products bucket under hero/

"""
Expected Supabase table structure:

home_settings:
- id: int (primary key)
- hero_headline: text
- hero_subheadline: text
- hero_images: jsonb (default: []) - ordered list of image URLs
- show_products_section: boolean (default: true)
- updated_at: timestamp
"""
