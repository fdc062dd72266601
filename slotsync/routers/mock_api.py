import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from slotsync.auth import require_basic_auth
from slotsync.errors import APIError
from slotsync.mock_data import MockDataSource

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/mock-external-api", tags=["mock-external-api"])

API_VERSION = "2.1"


def get_mock_data_source() -> MockDataSource:
    """A fresh emulator per request; nothing is shared between calls."""
    return MockDataSource()


@router.get("/slots")
def get_slots(
    username: str = Depends(require_basic_auth),
    source: MockDataSource = Depends(get_mock_data_source),
) -> Dict[str, Any]:
    """
    Simulated third-party scheduling system (requires Basic Auth).

    Returns appointment records in three deliberately inconsistent shapes:
      {
        "success": True,
        "data": [ {format A | B | C record}, ... ],
        "message": "Mock external API response",
        "api_version": "2.1",
        "timestamp": "<ISO-8601>",
        "total_records": <int>
      }
    """
    try:
        records = source.generate_messy_response()
    except Exception as e:
        log.exception("mock API failed for %s", username)
        raise APIError(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "Service unavailable",
            "Mock external API temporarily unavailable",
        ) from e

    return {
        "success": True,
        "data": records,
        "message": "Mock external API response",
        "api_version": API_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "total_records": len(records),
    }
