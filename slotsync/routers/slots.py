import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, Query, status

from slotsync.errors import APIError
from slotsync.models import Pagination, UnifiedSlot
from slotsync.normalizers import Normalizer, get_default_normalizer
from slotsync.upstream import SlotSource, UpstreamError, get_slot_source

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["slots"])

MAX_LIMIT = 50


# -------------------------------------------------------------------
# Helpers: filtering and pagination over normalized slots
# -------------------------------------------------------------------
def filter_slots(
    slots: List[UnifiedSlot], provider: Optional[str] = None, date: Optional[str] = None
) -> List[UnifiedSlot]:
    """Provider is a case-insensitive substring match; date is an exact match."""
    out = slots
    if provider:
        needle = provider.lower()
        out = [s for s in out if needle in s.provider.lower()]
        log.info("filtered by provider %r: %d slots", provider, len(out))
    if date:
        out = [s for s in out if s.date == date]
        log.info("filtered by date %r: %d slots", date, len(out))
    return out


def paginate(items: List[Any], page: int, limit: int) -> Tuple[List[Any], Pagination]:
    """Clamp page to >= 1 and limit to [1, MAX_LIMIT], then slice."""
    page = max(1, page)
    limit = max(1, min(MAX_LIMIT, limit))
    start = (page - 1) * limit
    total = len(items)
    meta = Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit))
    return items[start:start + limit], meta


# -------------------------------------------------------------------
# Public unified endpoint
# -------------------------------------------------------------------
@router.get("/available-slots")
def list_available_slots(
    provider: Optional[str] = Query(None, description="Provider name contains, case-insensitive"),
    date: Optional[str] = Query(None, description="Exact date match, YYYY-MM-DD"),
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(10, description=f"Page size, clamped to 1-{MAX_LIMIT}"),
    source: SlotSource = Depends(get_slot_source),
    normalizer: Normalizer = Depends(get_default_normalizer),
) -> Dict[str, Any]:
    """
    Fetch messy records from the scheduling system, normalize them,
    then filter and paginate.

    Response JSON:
      {
        "success": True,
        "data": [ {"date": ..., "start_time": ..., "provider": ...}, ... ],
        "message": "Available appointment slots",
        "pagination": {"page": 1, "limit": 10, "total": 29, "pages": 3}
      }
    """
    try:
        raw = source.fetch()
        slots = normalizer.normalize(raw)
        filtered = filter_slots(slots, provider=provider, date=date)
        page_items, meta = paginate(filtered, page, limit)
    except UpstreamError as e:
        log.error("upstream fetch failed: %s", e)
        raise APIError(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "Service unavailable",
            "External API temporarily unavailable",
        ) from e
    except Exception as e:
        log.exception("available-slots failed")
        raise APIError(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "Service unavailable",
            "Internal API temporarily unavailable",
        ) from e

    log.info("returning page %d of %d (%d slots)", meta.page, meta.pages, len(page_items))
    return {
        "success": True,
        "data": [s.model_dump() for s in page_items],
        "message": "Available appointment slots",
        "pagination": meta.model_dump(),
    }
