from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class InquiryCreate(BaseModel):
    company_name: Optional[str] = None
    person_name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    inquiry_type: str = Field(min_length=1)
    product_category: Optional[str] = None
    message: str = Field(min_length=1)


class InquirySubmitted(BaseModel):
    success: bool = True
    message: str = "Inquiry submitted successfully"
