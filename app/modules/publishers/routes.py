from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.publishers.schemas import PublisherCreate, PublisherUpdate, PublisherResponse
from app.modules.publishers.service import PublisherService
from app.core.access_policy import UserRole
from app.core.dependencies import require_capability
from supabase import Client
from typing import List

router = APIRouter(prefix="/publishers", tags=["publishers"])


def get_publisher_service(supabase: Client = Depends(get_supabase)) -> PublisherService:
    return PublisherService(supabase)


@router.get("", response_model=List[PublisherResponse])
async def list_publishers(
    role: UserRole = Depends(require_capability("can_view_publishers")),
    service: PublisherService = Depends(get_publisher_service)
):
    """List publishers by name (requires can_view_publishers)"""
    return service.list_publishers()


@router.get("/{publisher_id}", response_model=PublisherResponse)
async def get_publisher(
    publisher_id: str,
    role: UserRole = Depends(require_capability("can_view_publishers")),
    service: PublisherService = Depends(get_publisher_service)
):
    """Get publisher by publisher_id (requires can_view_publishers)"""
    return service.get_publisher(publisher_id)


@router.post("", response_model=PublisherResponse, status_code=201)
async def create_publisher(
    publisher_data: PublisherCreate,
    role: UserRole = Depends(require_capability("can_view_publishers", "can_edit_offers")),
    service: PublisherService = Depends(get_publisher_service)
):
    """Create a publisher (requires can_view_publishers and can_edit_offers)"""
    return service.create_publisher(publisher_data)


@router.put("/{publisher_id}", response_model=PublisherResponse)
async def update_publisher(
    publisher_id: str,
    publisher_data: PublisherUpdate,
    role: UserRole = Depends(require_capability("can_view_publishers", "can_edit_offers")),
    service: PublisherService = Depends(get_publisher_service)
):
    """Update a publisher (requires can_view_publishers and can_edit_offers)"""
    return service.update_publisher(publisher_id, publisher_data)
