import logging

import uvicorn

from slotsync import settings
from slotsync.setup_logging import setup_logging

ENDPOINTS = [
    ("GET", "/", "Hello World"),
    ("GET", "/health", "Health check"),
    ("GET", "/api/available-slots", "Public unified appointment API"),
    ("GET", "/mock-external-api/slots", "Mock scheduling API (requires Basic Auth)"),
    ("GET", "/api-docs", "Swagger UI documentation"),
]


def main():
    setup_logging()
    log = logging.getLogger("slotsync")
    log.info("server starting on port %d (env=%s)", settings.PORT, settings.APP_ENV)
    for method, path, what in ENDPOINTS:
        log.info("  %-4s %-26s %s", method, path, what)
    # log_config=None keeps the handlers set up above
    uvicorn.run("slotsync.main:app", host="0.0.0.0", port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
