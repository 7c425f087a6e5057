from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str
    must_change_password: bool = False


class PasswordChangeRequest(BaseModel):
    new_password: str = Field(min_length=8)


class PasswordResetRequest(BaseModel):
    email: EmailStr
