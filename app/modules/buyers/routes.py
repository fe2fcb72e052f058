from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.buyers.schemas import BuyerCreate, BuyerUpdate, BuyerResponse
from app.modules.buyers.service import BuyerService
from app.core.access_policy import UserRole
from app.core.dependencies import require_capability
from supabase import Client
from typing import List

router = APIRouter(prefix="/buyers", tags=["buyers"])


def get_buyer_service(supabase: Client = Depends(get_supabase)) -> BuyerService:
    return BuyerService(supabase)


@router.get("", response_model=List[BuyerResponse])
async def list_buyers(
    role: UserRole = Depends(require_capability("can_view_buyers")),
    service: BuyerService = Depends(get_buyer_service)
):
    """List buyers by name (requires can_view_buyers)"""
    return service.list_buyers()


@router.get("/{buyer_id}", response_model=BuyerResponse)
async def get_buyer(
    buyer_id: str,
    role: UserRole = Depends(require_capability("can_view_buyers")),
    service: BuyerService = Depends(get_buyer_service)
):
    """Get buyer by buyer_id (requires can_view_buyers)"""
    return service.get_buyer(buyer_id)


@router.post("", response_model=BuyerResponse, status_code=201)
async def create_buyer(
    buyer_data: BuyerCreate,
    role: UserRole = Depends(require_capability("can_view_buyers", "can_edit_offers")),
    service: BuyerService = Depends(get_buyer_service)
):
    """Create a buyer (requires can_view_buyers and can_edit_offers)"""
    return service.create_buyer(buyer_data)


@router.put("/{buyer_id}", response_model=BuyerResponse)
async def update_buyer(
    buyer_id: str,
    buyer_data: BuyerUpdate,
    role: UserRole = Depends(require_capability("can_view_buyers", "can_edit_offers")),
    service: BuyerService = Depends(get_buyer_service)
):
    """Update a buyer (requires can_view_buyers and can_edit_offers)"""
    return service.update_buyer(buyer_id, buyer_data)
