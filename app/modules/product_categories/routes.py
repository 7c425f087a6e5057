from fastapi import APIRouter, Depends
from app.core.dependencies import require_section
from app.database.supabase_client import get_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.product_categories.schemas import ProductCategoryCreate, ProductCategoryResponse
from app.modules.product_categories.service import ProductCategoryService
from supabase import Client
from typing import List

router = APIRouter(prefix="/product-categories", tags=["product-categories"])


def get_product_category_service(supabase: Client = Depends(get_supabase)) -> ProductCategoryService:
    return ProductCategoryService(supabase)


@router.get("", response_model=List[ProductCategoryResponse])
async def list_categories(
    _: AdminResponse = Depends(require_section("products")),
    service: ProductCategoryService = Depends(get_product_category_service)
):
    return service.list_categories()


@router.post("", response_model=ProductCategoryResponse, status_code=201)
async def create_category(
    category_data: ProductCategoryCreate,
    _: AdminResponse = Depends(require_section("products")),
    service: ProductCategoryService = Depends(get_product_category_service)
):
    """Create a category (409 if the code exists)"""
    return service.create_category(category_data)


@router.delete("/{code}", status_code=204)
async def delete_category(
    code: str,
    _: AdminResponse = Depends(require_section("products")),
    service: ProductCategoryService = Depends(get_product_category_service)
):
    """Delete a category no product uses (409 otherwise)"""
    service.delete_category(code)
    return None
