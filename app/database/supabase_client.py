import logging

from supabase import create_client, Client
from app.config import settings
from app.core.exceptions import TransientFailure

logger = logging.getLogger(__name__)


class SupabaseClient:
    _client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            if not settings.supabase_url or not settings.supabase_key:
                logger.error("SUPABASE_URL / SUPABASE_KEY not configured")
                raise TransientFailure("Backing store is not configured")
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
            logger.info("Supabase client created for %s", settings.supabase_url)
        return cls._client

    @classmethod
    def reset_client(cls):
        cls._client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def check_connection(supabase: Client) -> bool:
    """Readiness check: one cheap row read from the offers table."""
    try:
        supabase.table("offers").select("id").limit(1).execute()
        return True
    except Exception as e:
        logger.warning(f"Supabase readiness check failed: {e}")
        return False
