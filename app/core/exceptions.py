"""
Error kinds raised by the persistence gateway and request dependencies.
Rendered as JSON by the handler registered in app.main.
"""

import logging
from typing import Optional

import httpx
from postgrest.exceptions import APIError

logger = logging.getLogger(__name__)

# PostgREST / Postgres error codes we translate
PG_NOT_NULL_VIOLATION = "23502"
PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"
PG_CHECK_VIOLATION = "23514"
PGRST_NO_ROWS = "PGRST116"


class OfferOpsError(Exception):
    """Base error; carries the HTTP status it maps to."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.code = self.__class__.__name__
        super().__init__(message)


class NotFoundError(OfferOpsError):
    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class ValidationError(OfferOpsError):
    status_code = 422

    def __init__(self, message: str = "Validation error"):
        super().__init__(message)


class ConflictError(OfferOpsError):
    status_code = 409

    def __init__(self, message: str = "Resource conflict"):
        super().__init__(message)


class AuthorizationError(OfferOpsError):
    status_code = 403

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message)


class TransientFailure(OfferOpsError):
    """Backing store unreachable or unavailable. Not retried."""

    status_code = 503

    def __init__(self, message: str = "Service temporarily unavailable"):
        super().__init__(message)


def translate_backend_error(exc: Exception, resource: str) -> OfferOpsError:
    """Map a Supabase client failure to one of our error kinds."""
    if isinstance(exc, OfferOpsError):
        return exc
    if isinstance(exc, APIError):
        code = exc.code or ""
        if code == PGRST_NO_ROWS:
            return NotFoundError(f"{resource} not found")
        if code == PG_UNIQUE_VIOLATION:
            return ConflictError(f"{resource} already exists")
        if code in (PG_NOT_NULL_VIOLATION, PG_FOREIGN_KEY_VIOLATION, PG_CHECK_VIOLATION):
            return ValidationError(exc.message or f"Invalid {resource.lower()} data")
        logger.error(f"Supabase API error on {resource}: {exc.message} ({code})")
        return OfferOpsError(exc.message or f"{resource} request failed")
    if isinstance(exc, httpx.HTTPError):
        logger.error(f"Supabase unreachable while accessing {resource}: {exc}")
        return TransientFailure()
    logger.exception(f"Unexpected error while accessing {resource}: {exc}")
    return OfferOpsError(str(exc))
