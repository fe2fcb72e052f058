from fastapi import APIRouter, Depends
from app.modules.auth.schemas import LoginRequest, TokenResponse, CurrentUserResponse
from app.modules.auth.service import AuthService
from app.core.dependencies import get_auth_service, get_current_user_id, get_current_role
from app.core.access_policy import UserRole, get_permissions
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    return service.login(login_data)


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(
    current_user: Dict = Depends(get_current_user_id),
    role: UserRole = Depends(get_current_role),
):
    """Get current authenticated user, their role and capability set (for frontend UI)."""
    return CurrentUserResponse(
        id=current_user["id"],
        email=current_user.get("email"),
        role=role,
        permissions=get_permissions(role),
    )
