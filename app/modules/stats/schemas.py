from pydantic import BaseModel
from typing import Dict


class AggregateStats(BaseModel):
    total_offers: int
    total_buyers: int
    total_publishers: int
    active_offers: int
    offers_by_status: Dict[str, int]
    offers_by_vertical: Dict[str, int]
