"""Flat-file (CSV / Excel) rendering of offer rows."""

import csv
import io
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from openpyxl import Workbook

logger = logging.getLogger(__name__)

OFFER_EXPORT_COLUMNS = [
    "offer_id",
    "campaign_name",
    "vertical",
    "status",
    "offer_type",
    "direction",
    "buyer_name",
    "publisher_name",
    "publisher_payout_min",
    "publisher_payout_max",
    "advertiser_price_min",
    "advertiser_price_max",
    "states_allowed",
    "age_range",
    "hours_of_operation",
    "compliance_requirements",
    "payment_terms",
    "notes",
    "created_at",
    "updated_at",
]

MAPPING_EXPORT_COLUMNS = [
    "offer_id",
    "campaign_name",
    "vertical",
    "buyer_id",
    "buyer_name",
    "buyer_company",
    "status",
    "created_at",
    "notes",
]

CSV_MEDIA_TYPE = "text/csv"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def flatten_offer(offer: Mapping[str, Any]) -> Dict[str, Any]:
    """Lift the embedded buyer's name onto the row so it can become a column."""
    row = dict(offer)
    buyer = row.get("buyer")
    if isinstance(buyer, Mapping) and "buyer_name" not in row:
        row["buyer_name"] = buyer.get("buyer_name")
    return row


def _cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ";".join(str(v) for v in value)
    if isinstance(value, Mapping):
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def to_csv(rows: Iterable[Mapping[str, Any]], columns: Sequence[str]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(columns), extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow({column: _cell(row.get(column)) for column in columns})
    return buffer.getvalue()


def to_xlsx(rows: Iterable[Mapping[str, Any]], columns: Sequence[str], sheet_title: str = "data") -> bytes:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = sheet_title
    worksheet.append(list(columns))
    count = 0
    for row in rows:
        worksheet.append([_cell(row.get(column)) for column in columns])
        count += 1
    buffer = io.BytesIO()
    workbook.save(buffer)
    logger.debug(f"Rendered {count} rows to xlsx")
    return buffer.getvalue()


def export_filename(prefix: str, extension: str, now: datetime = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"{prefix}_export_{int(now.timestamp() * 1000)}.{extension}"


def mapping_filename(now: datetime = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"offer-mapping-{now.date().isoformat()}.csv"


def mapping_rows_as_dicts(rows: Iterable[Any]) -> List[Dict[str, Any]]:
    return [row.model_dump() for row in rows]
