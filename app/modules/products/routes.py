from fastapi import APIRouter, Depends, File, Form, UploadFile
from app.config import settings
from app.core.dependencies import require_section
from app.core.forms import build_form_model, parse_checkbox, parse_json_field, parse_json_list
from app.core.storage import SupabaseStorage
from app.database.supabase_client import get_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.products.schemas import (
    ProductCreate, ProductUpdate, ProductFeaturedUpdate, ProductResponse
)
from app.modules.products.service import ProductService
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(supabase: Client = Depends(get_supabase)) -> ProductService:
    return ProductService(supabase)


def get_product_storage(supabase: Client = Depends(get_supabase)) -> SupabaseStorage:
    return SupabaseStorage(supabase, settings.products_bucket)


def product_form(
    name_ko: str = Form(...),
    name_en: Optional[str] = Form(None),
    desc_ko: Optional[str] = Form(None),
    desc_en: Optional[str] = Form(None),
    category_code: Optional[str] = Form(None),
    model_no: Optional[str] = Form(None),
    capacity: Optional[str] = Form(None),
    status: str = Form("active"),
    is_featured: Optional[str] = Form(None),
    specs: Optional[str] = Form(None),
    features: Optional[str] = Form(None),
    partner_ids: Optional[str] = Form(None),
    notice_ids: Optional[str] = Form(None),
    current_images: Optional[str] = Form(None),
) -> ProductUpdate:
    """Collect the multipart product form; list and map fields arrive JSON-encoded"""
    return build_form_model(
        ProductUpdate,
        name_ko=name_ko,
        name_en=name_en,
        desc_ko=desc_ko,
        desc_en=desc_en,
        category_code=category_code or None,
        model_no=model_no,
        capacity=capacity,
        status=status,
        is_featured=parse_checkbox(is_featured),
        specs=parse_json_field(specs, "specs", {}),
        features=parse_json_list(features, "features"),
        partner_ids=parse_json_list(partner_ids, "partner_ids"),
        notice_ids=parse_json_list(notice_ids, "notice_ids"),
        current_images=parse_json_list(current_images, "current_images"),
    )


@router.get("", response_model=List[ProductResponse])
async def list_products(
    status: Optional[str] = None,
    category_code: Optional[str] = None,
    _: AdminResponse = Depends(require_section("products")),
    service: ProductService = Depends(get_product_service)
):
    return service.list_products(status=status, category_code=category_code)


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
    form: ProductUpdate = Depends(product_form),
    images: List[UploadFile] = File(default=[]),
    _: AdminResponse = Depends(require_section("products")),
    service: ProductService = Depends(get_product_service),
    storage: SupabaseStorage = Depends(get_product_storage)
):
    """Create a product with its images and partner/notice links"""
    product_data = ProductCreate(**form.model_dump(exclude={"current_images"}))
    image_urls = await storage.upload_many(images)
    return service.create_product(product_data, image_urls)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    _: AdminResponse = Depends(require_section("products")),
    service: ProductService = Depends(get_product_service)
):
    return service.get_product(product_id)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    form: ProductUpdate = Depends(product_form),
    images: List[UploadFile] = File(default=[]),
    _: AdminResponse = Depends(require_section("products")),
    service: ProductService = Depends(get_product_service),
    storage: SupabaseStorage = Depends(get_product_storage)
):
    """Replace a product: kept images come from current_images, new uploads are appended"""
    image_urls = await storage.upload_many(images)
    return service.update_product(product_id, form, image_urls)


@router.patch("/{product_id}/featured", response_model=ProductResponse)
async def set_featured(
    product_id: str,
    featured_data: ProductFeaturedUpdate,
    _: AdminResponse = Depends(require_section("products")),
    service: ProductService = Depends(get_product_service)
):
    return service.set_featured(product_id, featured_data.is_featured)


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: str,
    _: AdminResponse = Depends(require_section("products")),
    service: ProductService = Depends(get_product_service)
):
    service.delete_product(product_id)
    return None
