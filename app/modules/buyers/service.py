import logging
from datetime import datetime, timezone
from supabase import Client
from app.modules.buyers.schemas import BuyerCreate, BuyerUpdate, BuyerResponse
from app.core.exceptions import OfferOpsError, NotFoundError, ConflictError, translate_backend_error
from typing import List

logger = logging.getLogger(__name__)


class BuyerService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_buyers(self) -> List[BuyerResponse]:
        """All buyers sorted by name"""
        try:
            result = self.supabase.table("buyers")\
                .select("*")\
                .order("buyer_name")\
                .execute()
            return [BuyerResponse(**buyer) for buyer in result.data or []]
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Buyer") from e

    def get_buyer(self, buyer_id: str) -> BuyerResponse:
        """Get buyer by business key"""
        try:
            result = self.supabase.table("buyers")\
                .select("*")\
                .eq("buyer_id", buyer_id)\
                .limit(1)\
                .execute()

            if not result.data:
                raise NotFoundError(f"Buyer {buyer_id} not found")

            return BuyerResponse(**result.data[0])
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Buyer") from e

    def create_buyer(self, buyer_data: BuyerCreate) -> BuyerResponse:
        """Create a new buyer"""
        try:
            existing = self.supabase.table("buyers")\
                .select("id")\
                .eq("buyer_id", buyer_data.buyer_id)\
                .execute()
            if existing.data:
                raise ConflictError(f"Buyer {buyer_data.buyer_id} already exists")

            result = self.supabase.table("buyers").insert(buyer_data.model_dump(exclude_none=True)).execute()
            if not result.data:
                raise OfferOpsError("Failed to create buyer")

            logger.info(f"Created buyer {buyer_data.buyer_id}")
            return BuyerResponse(**result.data[0])
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Buyer") from e

    def update_buyer(self, buyer_id: str, buyer_data: BuyerUpdate) -> BuyerResponse:
        """Update buyer; only fields set in the request are written"""
        try:
            update_data = buyer_data.model_dump(exclude_unset=True)
            if not update_data:
                return self.get_buyer(buyer_id)
            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()

            result = self.supabase.table("buyers")\
                .update(update_data)\
                .eq("buyer_id", buyer_id)\
                .execute()

            if not result.data:
                raise NotFoundError(f"Buyer {buyer_id} not found")

            logger.info(f"Updated buyer {buyer_id}")
            return BuyerResponse(**result.data[0])
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Buyer") from e
