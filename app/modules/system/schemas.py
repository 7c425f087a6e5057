from pydantic import BaseModel, Field
from typing import Optional, Union
from datetime import datetime


class PasswordExpirationUpdate(BaseModel):
    enabled: bool
    days: Optional[int] = Field(default=None, ge=1)


class SystemSettingsResponse(BaseModel):
    id: Optional[Union[int, str]] = None
    password_expiration_enabled: bool = False
    password_expiration_days: int = 90
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
