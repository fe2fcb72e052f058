import logging
from datetime import datetime, timezone
from supabase import Client
from app.modules.publishers.schemas import PublisherCreate, PublisherUpdate, PublisherResponse
from app.core.exceptions import OfferOpsError, NotFoundError, ConflictError, translate_backend_error
from typing import List

logger = logging.getLogger(__name__)


class PublisherService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_publishers(self) -> List[PublisherResponse]:
        """All publishers sorted by name"""
        try:
            result = self.supabase.table("publishers")\
                .select("*")\
                .order("publisher_name")\
                .execute()
            return [PublisherResponse(**publisher) for publisher in result.data or []]
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Publisher") from e

    def get_publisher(self, publisher_id: str) -> PublisherResponse:
        """Get publisher by business key"""
        try:
            result = self.supabase.table("publishers")\
                .select("*")\
                .eq("publisher_id", publisher_id)\
                .limit(1)\
                .execute()

            if not result.data:
                raise NotFoundError(f"Publisher {publisher_id} not found")

            return PublisherResponse(**result.data[0])
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Publisher") from e

    def create_publisher(self, publisher_data: PublisherCreate) -> PublisherResponse:
        """Create a new publisher"""
        try:
            existing = self.supabase.table("publishers")\
                .select("id")\
                .eq("publisher_id", publisher_data.publisher_id)\
                .execute()
            if existing.data:
                raise ConflictError(f"Publisher {publisher_data.publisher_id} already exists")

            result = self.supabase.table("publishers").insert(publisher_data.model_dump(exclude_none=True)).execute()
            if not result.data:
                raise OfferOpsError("Failed to create publisher")

            logger.info(f"Created publisher {publisher_data.publisher_id}")
            return PublisherResponse(**result.data[0])
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Publisher") from e

    def update_publisher(self, publisher_id: str, publisher_data: PublisherUpdate) -> PublisherResponse:
        """Update publisher; only fields set in the request are written"""
        try:
            update_data = publisher_data.model_dump(exclude_unset=True)
            if not update_data:
                return self.get_publisher(publisher_id)
            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()

            result = self.supabase.table("publishers")\
                .update(update_data)\
                .eq("publisher_id", publisher_id)\
                .execute()

            if not result.data:
                raise NotFoundError(f"Publisher {publisher_id} not found")

            logger.info(f"Updated publisher {publisher_id}")
            return PublisherResponse(**result.data[0])
        except OfferOpsError:
            raise
        except Exception as e:
            raise translate_backend_error(e, "Publisher") from e
