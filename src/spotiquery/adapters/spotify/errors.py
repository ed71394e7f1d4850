"""Errors raised while building or executing Web API requests."""

from __future__ import annotations

from typing import ClassVar


class SpotifyError(RuntimeError):
    """Base class for every error raised by the request layer."""


class RequestValidationError(SpotifyError, ValueError):
    """Raised when a builder parameter violates its documented constraint."""

    def __init__(self, message: str, *, parameter: str | None = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class SpotifyTransportError(SpotifyError):
    """Raised when the HTTP exchange itself fails (timeouts, connection or decoding errors)."""


class ResponseParseError(SpotifyError):
    """Raised when a response body cannot be decoded into the expected model."""


class SpotifyApiError(SpotifyError):
    """Raised when the Web API answers with an error payload."""

    status_code: ClassVar[int | None] = None

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status if status is not None else self.status_code
        self.message = message

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.status}: {self.message}"


class BadRequestError(SpotifyApiError):
    status_code = 400


class UnauthorizedError(SpotifyApiError):
    status_code = 401


class ForbiddenError(SpotifyApiError):
    status_code = 403


class NotFoundError(SpotifyApiError):
    status_code = 404


class TooManyRequestsError(SpotifyApiError):
    status_code = 429

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message, status=status)
        self.retry_after = retry_after


class InternalServerError(SpotifyApiError):
    status_code = 500


class BadGatewayError(SpotifyApiError):
    status_code = 502


class ServiceUnavailableError(SpotifyApiError):
    status_code = 503


_ERRORS_BY_STATUS: dict[int, type[SpotifyApiError]] = {
    error.status_code: error
    for error in (
        BadRequestError,
        UnauthorizedError,
        ForbiddenError,
        NotFoundError,
        TooManyRequestsError,
        InternalServerError,
        BadGatewayError,
        ServiceUnavailableError,
    )
    if error.status_code is not None
}


def api_error_for_status(
    status: int | None,
    message: str,
    *,
    retry_after: int | None = None,
) -> SpotifyApiError:
    """Return the most specific API error for an upstream status code."""

    error_type = _ERRORS_BY_STATUS.get(status, SpotifyApiError) if status else SpotifyApiError
    if error_type is TooManyRequestsError:
        return TooManyRequestsError(message, status=status, retry_after=retry_after)
    return error_type(message, status=status)
