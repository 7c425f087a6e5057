# Supabase tables: products, product_partners, product_notices
# Product images are stored in the Supabase Storage bucket settings.products_bucket

"""
Expected Supabase table structure:

products:
- id: uuid (primary key)
- name_ko: text (not null)
- name_en: text (nullable)
- desc_ko: text (nullable)
- desc_en: text (nullable)
- category_code: text (nullable, references product_categories.code)
- model_no: text (nullable)
- capacity: text (nullable)
- specs: jsonb (default: {}) - spec label -> value
- features: jsonb (default: []) - list of feature strings
- status: text (default: 'active') - values: active, discontinued
- images: jsonb (default: []) - public Storage URLs, first is the cover
- is_featured: boolean (default: false) - shown in the home "recommended" strip
- created_at: timestamp (default: now())

product_partners:
- product_id: uuid (references products.id on delete cascade)
- partner_id: uuid (references partners.id on delete cascade)

product_notices:
- product_id: uuid (references products.id on delete cascade)
- notice_id: uuid (references notices.id on delete cascade)
"""
