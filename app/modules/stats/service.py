import logging
from collections import Counter
from supabase import Client
from app.modules.stats.schemas import AggregateStats
from typing import List, Dict, Any

logger = logging.getLogger(__name__)


class StatsService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _fetch(self, table: str, columns: str) -> List[Dict[str, Any]]:
        """A failing table read is logged and counted as empty so the dashboard still renders"""
        try:
            result = self.supabase.table(table).select(columns).execute()
            return result.data or []
        except Exception as e:
            logger.error(f"Error fetching {table} for stats: {e}")
            return []

    def get_aggregate_stats(self) -> AggregateStats:
        """Counts of offers, buyers and publishers plus status / vertical histograms"""
        offers = self._fetch("offers", "id, status, vertical")
        buyers = self._fetch("buyers", "id")
        publishers = self._fetch("publishers", "id")

        by_status = Counter(o.get("status") for o in offers if o.get("status"))
        by_vertical = Counter(o.get("vertical") for o in offers if o.get("vertical"))

        stats = AggregateStats(
            total_offers=len(offers),
            total_buyers=len(buyers),
            total_publishers=len(publishers),
            active_offers=by_status.get("Active", 0),
            offers_by_status=dict(by_status),
            offers_by_vertical=dict(by_vertical),
        )
        logger.debug(f"Stats: {stats.model_dump()}")
        return stats
