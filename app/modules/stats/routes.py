from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.stats.schemas import AggregateStats
from app.modules.stats.service import StatsService
from app.core.access_policy import UserRole
from app.core.dependencies import get_current_role
from supabase import Client

router = APIRouter(prefix="/stats", tags=["stats"])


def get_stats_service(supabase: Client = Depends(get_supabase)) -> StatsService:
    return StatsService(supabase)


@router.get("", response_model=AggregateStats)
async def get_stats(
    role: UserRole = Depends(get_current_role),
    service: StatsService = Depends(get_stats_service)
):
    """Dashboard KPI counts (any authenticated role)"""
    return service.get_aggregate_stats()
