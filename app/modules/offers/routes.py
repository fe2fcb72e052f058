from fastapi import APIRouter, Depends, Query, Response
from app.config import settings
from app.database.supabase_client import get_supabase
from app.modules.offers.schemas import OfferCreate, OfferUpdate, OfferPage, OfferMappingRow
from app.modules.offers.service import OfferService
from app.modules.offers import export
from app.core.access_policy import UserRole, filter_offer_for_role, filter_offers_for_role, visible_fields
from app.core.dependencies import get_current_role, require_capability
from supabase import Client
from typing import List, Optional, Dict, Any, Literal

router = APIRouter(prefix="/offers", tags=["offers"])


def get_offer_service(supabase: Client = Depends(get_supabase)) -> OfferService:
    return OfferService(supabase)


@router.get("", response_model=OfferPage)
async def list_offers(
    search: Optional[str] = None,
    status: Optional[str] = None,
    vertical: Optional[str] = None,
    buyer_id: Optional[str] = None,
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    offset: int = Query(default=0, ge=0),
    role: UserRole = Depends(get_current_role),
    service: OfferService = Depends(get_offer_service)
):
    """List offers newest first, redacted for the caller's role"""
    offers, total = service.list_offers(
        search=search, status=status, vertical=vertical, buyer_id=buyer_id, limit=limit, offset=offset
    )
    return OfferPage(items=filter_offers_for_role(offers, role), total=total, limit=limit, offset=offset)


@router.get("/export")
async def export_offers(
    format: Literal["csv", "xlsx"] = "csv",
    role: UserRole = Depends(require_capability("can_export_data")),
    service: OfferService = Depends(get_offer_service)
):
    """Download all offers as CSV or Excel (requires can_export_data)"""
    offers, _ = service.list_offers(limit=10000)
    rows = [filter_offer_for_role(export.flatten_offer(o), role) for o in offers]
    columns = visible_fields(role, export.OFFER_EXPORT_COLUMNS)
    if format == "xlsx":
        content = export.to_xlsx(rows, columns, sheet_title="offers")
        media_type = export.XLSX_MEDIA_TYPE
    else:
        content = export.to_csv(rows, columns)
        media_type = export.CSV_MEDIA_TYPE
    filename = export.export_filename(settings.export_filename_prefix, format)
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )


@router.get("/mapping", response_model=List[OfferMappingRow])
async def list_offer_mappings(
    role: UserRole = Depends(require_capability("can_view_buyers", "can_export_data")),
    service: OfferService = Depends(get_offer_service)
):
    """Offer ID -> buyer mapping (admins and managers)"""
    return service.list_offer_mappings()


@router.get("/mapping/export")
async def export_offer_mappings(
    role: UserRole = Depends(require_capability("can_view_buyers", "can_export_data")),
    service: OfferService = Depends(get_offer_service)
):
    """CSV backup of the offer ID -> buyer mapping"""
    rows = export.mapping_rows_as_dicts(service.list_offer_mappings())
    return Response(
        content=export.to_csv(rows, export.MAPPING_EXPORT_COLUMNS),
        media_type=export.CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{export.mapping_filename()}"'}
    )


@router.get("/{offer_id}", response_model=Dict[str, Any])
async def get_offer(
    offer_id: str,
    role: UserRole = Depends(get_current_role),
    service: OfferService = Depends(get_offer_service)
):
    """Get offer by offer_id, redacted for the caller's role"""
    return filter_offer_for_role(service.get_offer(offer_id), role)


@router.post("", response_model=Dict[str, Any], status_code=201)
async def create_offer(
    offer_data: OfferCreate,
    role: UserRole = Depends(require_capability("can_edit_offers")),
    service: OfferService = Depends(get_offer_service)
):
    """Create a new offer (requires can_edit_offers)"""
    return filter_offer_for_role(service.create_offer(offer_data), role)


@router.put("/{offer_id}", response_model=Dict[str, Any])
async def update_offer(
    offer_id: str,
    offer_data: OfferUpdate,
    role: UserRole = Depends(require_capability("can_edit_offers")),
    service: OfferService = Depends(get_offer_service)
):
    """Update offer (requires can_edit_offers)"""
    return filter_offer_for_role(service.update_offer(offer_id, offer_data), role)


@router.delete("/{offer_id}", status_code=204)
async def delete_offer(
    offer_id: str,
    role: UserRole = Depends(require_capability("can_delete_offers")),
    service: OfferService = Depends(get_offer_service)
):
    """Delete offer (requires can_delete_offers)"""
    service.delete_offer(offer_id)
    return None
