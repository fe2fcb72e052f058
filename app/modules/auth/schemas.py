from pydantic import BaseModel, EmailStr
from typing import Optional

from app.core.access_policy import UserPermissions, UserRole


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str
    role: Optional[UserRole] = None


class CurrentUserResponse(BaseModel):
    id: str
    email: Optional[str] = None
    role: UserRole
    permissions: UserPermissions
