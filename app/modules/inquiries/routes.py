from fastapi import APIRouter, Depends, Request
from app.config import settings
from app.core.email import EmailService, get_email_service
from app.core.rate_limit import limiter
from app.database.supabase_client import get_supabase
from app.modules.inquiries.schemas import InquiryCreate, InquirySubmitted
from app.modules.inquiries.service import InquiryService
from supabase import Client

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


def get_inquiry_service(
    supabase: Client = Depends(get_supabase),
    email_service: EmailService = Depends(get_email_service)
) -> InquiryService:
    return InquiryService(supabase, email_service)


@router.post("", response_model=InquirySubmitted, status_code=201)
@limiter.limit(settings.inquiry_rate_limit)
async def submit_inquiry(
    request: Request,
    inquiry_data: InquiryCreate,
    service: InquiryService = Depends(get_inquiry_service)
):
    """Public contact form"""
    service.submit_inquiry(inquiry_data)
    return InquirySubmitted()
