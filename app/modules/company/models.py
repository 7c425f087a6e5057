# Supabase table: company_settings (single row)

"""
Expected Supabase table structure:

company_settings:
- id: uuid or int (primary key)
- company_name_ko / company_name_en: text
- ceo_name_ko / ceo_name_en: text
- establishment_ko / establishment_en: text
- employees_ko / employees_en: text
- revenue_ko / revenue_en: text
- address_ko / address_en: text
- mission_title_ko / mission_title_en: text
- mission_desc_ko / mission_desc_en: text
- vision_title_ko / vision_title_en: text
- vision_desc_ko / vision_desc_en: text
- ceo_message_title_ko / ceo_message_title_en: text
- ceo_message_content_ko / ceo_message_content_en: text (rich text, sanitized on write)
- core_values: jsonb (default: []) - [{title_ko, title_en, desc_ko, desc_en, icon}]
- factory_images: jsonb (default: []) - [{id, url, sort_order}]
- updated_at: timestamp
"""
