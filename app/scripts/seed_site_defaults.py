"""
Seed Site Defaults Script
Creates the singleton settings rows (company, home, system) and the default
product/notice categories. Safe to run repeatedly.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from app.database.supabase_client import get_service_supabase
from app.modules.company.service import DEFAULT_COMPANY_PROFILE
from app.modules.home.service import DEFAULT_HOME_SETTINGS
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_CATEGORIES = [
    {"code": "blow-molding", "name_ko": "블로우 몰딩기", "name_en": "Blow Molding Machines"},
    {"code": "extrusion", "name_ko": "압출 라인", "name_en": "Extrusion Lines"},
    {"code": "auxiliary", "name_ko": "주변 기기", "name_en": "Auxiliary Equipment"},
]

DEFAULT_NOTICE_CATEGORIES = [
    {"name_ko": "공지사항", "name_en": "Announcements", "sort_order": 1, "is_active": True},
    {"name_ko": "뉴스", "name_en": "News", "sort_order": 2, "is_active": True},
    {"name_ko": "전시회", "name_en": "Exhibitions", "sort_order": 3, "is_active": True},
]

DEFAULT_SINGLETONS = {
    "company_settings": dict(DEFAULT_COMPANY_PROFILE, core_values=[], factory_images=[]),
    "home_settings": DEFAULT_HOME_SETTINGS.model_dump(exclude={"id", "updated_at"}),
    "system_settings": {"password_expiration_enabled": False, "password_expiration_days": 90},
}


def seed_singletons(supabase: Client):
    """Insert each settings row if its table is still empty; existing content is kept"""
    logger.info("Seeding settings rows...")
    created_count = 0

    for table, defaults in DEFAULT_SINGLETONS.items():
        try:
            existing = supabase.table(table).select("id").limit(1).execute()
            if existing.data:
                logger.debug(f"{table} already has a row")
                continue
            supabase.table(table).insert(defaults).execute()
            created_count += 1
            logger.debug(f"Created {table} row")
        except Exception as e:
            logger.error(f"Error seeding {table}: {e}")

    logger.info(f"Settings rows seeded: {created_count} created")
    return created_count


def seed_by_key(supabase: Client, table: str, key: str, rows: list):
    """Update rows whose key exists, insert the rest"""
    logger.info(f"Seeding {table}...")
    created_count = 0
    updated_count = 0

    for row in rows:
        try:
            existing = supabase.table(table)\
                .select("id")\
                .eq(key, row[key])\
                .execute()

            if existing.data:
                supabase.table(table)\
                    .update({k: v for k, v in row.items() if k != key})\
                    .eq(key, row[key])\
                    .execute()
                updated_count += 1
                logger.debug(f"Updated {table}: {row[key]}")
            else:
                supabase.table(table).insert(row).execute()
                created_count += 1
                logger.debug(f"Created {table}: {row[key]}")
        except Exception as e:
            logger.error(f"Error processing {table} {row[key]}: {e}")

    logger.info(f"{table} seeded: {created_count} created, {updated_count} updated")
    return created_count + updated_count


def main():
    """Main function to seed the site defaults"""
    try:
        supabase = get_service_supabase()

        logger.info("Starting site defaults seeding...")

        singleton_count = seed_singletons(supabase)
        product_category_count = seed_by_key(supabase, "product_categories", "code", DEFAULT_PRODUCT_CATEGORIES)
        notice_category_count = seed_by_key(supabase, "notice_categories", "name_ko", DEFAULT_NOTICE_CATEGORIES)

        logger.info("Seeding completed successfully!")
        logger.info(
            f"Total: {singleton_count} settings rows created, "
            f"{product_category_count} product categories, {notice_category_count} notice categories processed"
        )

    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
