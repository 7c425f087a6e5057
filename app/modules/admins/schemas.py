from pydantic import BaseModel, EmailStr
from typing import Literal, Optional
from datetime import datetime

AdminRole = Literal["super_admin", "admin", "editor"]


class AdminCreate(BaseModel):
    email: EmailStr
    name: str
    role: AdminRole = "admin"


class AdminUpdate(BaseModel):
    name: Optional[str] = None
    role: Optional[AdminRole] = None


class AdminResponse(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    role: Optional[str] = None
    must_change_password: bool = False
    password_changed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AdminCreatedResponse(BaseModel):
    admin: AdminResponse
    temp_password: str
