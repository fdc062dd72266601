import base64
import binascii
import logging
import secrets

from fastapi import Request, status

from slotsync import settings
from slotsync.errors import APIError

log = logging.getLogger(__name__)


def _unauthorized(message: str) -> APIError:
    return APIError(status.HTTP_401_UNAUTHORIZED, "Unauthorized", message)


def _bad_request(message: str) -> APIError:
    return APIError(status.HTTP_400_BAD_REQUEST, "Bad Request", message)


def decode_basic_auth(header: str | None) -> tuple[str, str]:
    """
    Parse an `Authorization: Basic <base64(user:pass)>` header.
    Raises APIError (401/400) describing what is wrong with it.
    """
    if not header:
        raise _unauthorized("Authorization header required")
    if not header.startswith("Basic "):
        raise _unauthorized("Basic Authentication required")

    try:
        decoded = base64.b64decode(header[len("Basic "):], validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        raise _bad_request("Invalid Authorization header format")

    username, _, password = decoded.partition(":")
    if not username or not password:
        raise _bad_request("Username and password required in Basic Auth")
    return username, password


def require_basic_auth(request: Request) -> str:
    """
    FastAPI dependency guarding the simulated scheduling system.
    Returns the authenticated username.
    """
    username, password = decode_basic_auth(request.headers.get("Authorization"))

    user_ok = secrets.compare_digest(username.encode(), settings.MOCK_API_EMAIL.encode())
    pass_ok = secrets.compare_digest(password.encode(), settings.MOCK_API_PASSWORD.encode())
    if not (user_ok and pass_ok):
        log.warning("invalid login attempt: %s", username)
        raise _unauthorized("Invalid username or password")

    log.info("authenticated request from: %s", username)
    return username
