"""
Read-only localized views backing the public pages (/{locale}/...).
"""

from fastapi import APIRouter, Depends, Request
from app.config import settings
from app.core.exceptions import NotFoundError
from app.core.sanitize import sanitize
from app.database.supabase_client import get_service_supabase, get_supabase
from app.modules.company.service import CompanyService
from app.modules.facilities.service import FacilityService
from app.modules.history.service import HistoryService
from app.modules.home.service import HomeService
from app.modules.notices.service import NoticeService
from app.modules.partners.service import PartnerService
from app.modules.products.service import ProductService
from app.modules.site.localize import localize
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/{locale}", tags=["site"])

LATEST_NOTICES = 3


def get_site_locale(request: Request, locale: str) -> str:
    """Locale from the URL; unsupported prefixes are not site pages"""
    if locale not in settings.get_locales_list():
        raise NotFoundError("Page not found")
    return getattr(request.state, "locale", locale)


def _dump(model) -> dict:
    return model.model_dump(mode="json")


@router.get("")
async def home_page(
    locale: str = Depends(get_site_locale),
    supabase: Client = Depends(get_supabase)
):
    home = HomeService(supabase).get_settings()
    products = ProductService(supabase).list_recommended()
    notices = NoticeService(supabase).list_notices(status="published", limit=LATEST_NOTICES)
    return {
        "locale": locale,
        "home": _dump(home),
        "products": localize([_dump(p) for p in products], locale),
        "notices": localize([_dump(n) for n in notices], locale),
    }


@router.get("/notices")
async def notices_page(
    category: Optional[str] = None,
    locale: str = Depends(get_site_locale),
    supabase: Client = Depends(get_supabase)
):
    notices = NoticeService(supabase).list_notices(status="published", category=category)
    return {"locale": locale, "notices": localize([_dump(n) for n in notices], locale)}


@router.get("/notices/{notice_id}")
async def notice_detail_page(
    notice_id: str,
    locale: str = Depends(get_site_locale),
    supabase: Client = Depends(get_supabase),
    admin_client: Client = Depends(get_service_supabase)
):
    """Published notice with its body sanitized; counts a view"""
    notice = NoticeService(supabase).get_notice(notice_id)
    if notice.status != "published":
        raise NotFoundError("Notice not found")
    # visitors cannot update notices under RLS
    notice = NoticeService(admin_client).increment_views(notice)
    data = _dump(notice)
    for field in ("body_ko", "body_en"):
        data[field] = sanitize(data.get(field))
    return {"locale": locale, "notice": localize(data, locale)}


@router.get("/products")
async def products_page(
    category: Optional[str] = None,
    locale: str = Depends(get_site_locale),
    supabase: Client = Depends(get_supabase)
):
    products = ProductService(supabase).list_products(status="active", category_code=category)
    return {"locale": locale, "products": localize([_dump(p) for p in products], locale)}


@router.get("/products/{product_id}")
async def product_detail_page(
    product_id: str,
    locale: str = Depends(get_site_locale),
    supabase: Client = Depends(get_supabase)
):
    product = ProductService(supabase).get_product(product_id)
    return {"locale": locale, "product": localize(_dump(product), locale)}


@router.get("/facilities")
async def facilities_page(
    locale: str = Depends(get_site_locale),
    supabase: Client = Depends(get_supabase)
):
    facilities = FacilityService(supabase).list_facilities(status="active")
    return {"locale": locale, "facilities": localize([_dump(f) for f in facilities], locale)}


@router.get("/company")
async def company_page(
    locale: str = Depends(get_site_locale),
    supabase: Client = Depends(get_supabase)
):
    company = CompanyService(supabase).get_settings()
    return {"locale": locale, "company": localize(_dump(company), locale)}


@router.get("/company/history")
async def company_history_page(
    locale: str = Depends(get_site_locale),
    supabase: Client = Depends(get_supabase)
):
    history = HistoryService(supabase).list_history()
    return {"locale": locale, "history": localize([_dump(h) for h in history], locale)}


@router.get("/partners")
async def partners_page(
    locale: str = Depends(get_site_locale),
    supabase: Client = Depends(get_supabase)
):
    partners = PartnerService(supabase).list_partners()
    return {"locale": locale, "partners": localize([_dump(p) for p in partners], locale)}
