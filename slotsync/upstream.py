import logging
from typing import Any, Dict, List, Protocol

import requests

from slotsync import settings

log = logging.getLogger(__name__)

SLOTS_PATH = "/mock-external-api/slots"


class UpstreamError(Exception):
    """The scheduling system could not be reached or answered with garbage."""


class SlotSource(Protocol):
    def fetch(self) -> List[Dict[str, Any]]:
        """Return the raw (un-normalized) upstream records."""
        ...


class HttpSlotSource:
    """Fetches raw slot records from the scheduling system over HTTP with Basic Auth."""

    def __init__(
        self,
        base_url: str | None = None,
        email: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or settings.MOCK_API_BASE_URL).rstrip("/")
        self.email = email or settings.MOCK_API_EMAIL
        self.password = password or settings.MOCK_API_PASSWORD
        self.timeout = timeout or settings.UPSTREAM_TIMEOUT
        self.session = session or requests.Session()

    def fetch(self) -> List[Dict[str, Any]]:
        url = f"{self.base_url}{SLOTS_PATH}"
        log.info("requesting slots from %s", url)
        try:
            r = self.session.get(
                url,
                auth=(self.email, self.password),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"Mock API call failed: {e}") from e

        if not r.ok:
            raise UpstreamError(f"Mock API responded with {r.status_code}: {r.reason}")

        try:
            body = r.json()
        except ValueError as e:
            raise UpstreamError(f"Mock API returned invalid JSON: {e}") from e

        if not isinstance(body, dict) or not body.get("success"):
            msg = body.get("message") if isinstance(body, dict) else None
            raise UpstreamError(f"Mock API error: {msg}")

        data = body.get("data")
        if not isinstance(data, list):
            raise UpstreamError("Mock API error: 'data' is not a list")

        log.info("fetched %d records from mock API", len(data))
        return data


def get_slot_source() -> SlotSource:
    """FastAPI dependency; tests override this with an in-process source."""
    return HttpSlotSource()
