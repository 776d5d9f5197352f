"""
Domain exceptions.

Typed exceptions for explicit error handling.
Decode failures and transport failures are kept in separate branches
so callers can message them differently.
"""

from __future__ import annotations

from typing import Optional


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All recipe book exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# DECODE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class DecodeError(DomainError):
    """
    Response payload could not be decoded.

    Raised when:
    - Body is not valid JSON
    - Envelope is not a JSON object
    - A required meal field is missing or has the wrong type

    ``field`` is the logical field name (eg "area"), ``key`` the wire
    key it is read from (eg "strArea").

    Example:
        >>> raise DecodeError("Response body is not valid JSON")
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        key: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.key = key if key is not None else field


class MissingFieldError(DecodeError):
    """
    Required field absent (or null) in the raw meal object.

    Example:
        >>> error = MissingFieldError("area", key="strArea")
        >>> assert error.field == "area"
        >>> assert error.key == "strArea"
    """

    def __init__(self, field: str, key: Optional[str] = None) -> None:
        wire = key if key is not None else field
        super().__init__(f"Missing required field '{field}' ({wire})", field=field, key=key)


class TypeMismatchError(DecodeError):
    """
    Required field present but not of the expected type.

    Example:
        >>> error = TypeMismatchError("id", key="idMeal")
        >>> assert "idMeal" in str(error)
    """

    def __init__(self, field: str, expected: str = "string", key: Optional[str] = None) -> None:
        wire = key if key is not None else field
        super().__init__(
            f"Field '{field}' ({wire}) is not a valid {expected}",
            field=field,
            key=key,
        )
        self.expected = expected


# ═══════════════════════════════════════════════════════════
# EXTERNAL SERVICE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ExternalServiceError(DomainError):
    """
    External service call failed.

    Base class for all external service errors.
    """

    pass


class TransportError(ExternalServiceError):
    """
    Network round trip to TheMealDB failed.

    Raised when:
    - Host unreachable or connection reset
    - Request timed out
    - Non-2xx response status

    Example:
        >>> raise TransportError("TheMealDB API error: 503", status=503)
    """

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status
