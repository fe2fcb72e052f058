"""
Core dependencies for route protection and role resolution.

The caller's role is resolved per request from the authenticated user and
passed explicitly to every service call that needs it.
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.database.supabase_client import get_supabase
from app.modules.auth.service import AuthService, role_from_app_metadata
from app.core.access_policy import UserPermissions, UserRole, get_permissions
from app.core.exceptions import AuthorizationError
from supabase import Client
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Extract current user info from JWT token"""
    token = credentials.credentials
    user_data = auth_service.get_current_user(token)
    return user_data


def get_current_role(user_data: dict = Depends(get_current_user_id)) -> UserRole:
    """Role from the user's app_metadata. Users without a valid role are refused."""
    role = role_from_app_metadata(user_data.get("app_metadata"))
    if role is None:
        logger.warning(f"User {user_data.get('id')} has no dashboard role assigned")
        raise AuthorizationError("No dashboard role assigned to this user")
    return role


def get_current_permissions(role: UserRole = Depends(get_current_role)) -> UserPermissions:
    return get_permissions(role)


def require_capability(*capabilities: str):
    """Factory function to create a capability check dependency; all named capabilities are required"""
    def check_capability(role: UserRole = Depends(get_current_role)) -> UserRole:
        permissions = get_permissions(role)
        missing = [c for c in capabilities if not getattr(permissions, c)]
        if missing:
            raise AuthorizationError(
                f"Insufficient permissions. Required: {', '.join(missing)}"
            )
        return role
    return check_capability
