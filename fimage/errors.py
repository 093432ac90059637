"""
F-Image error definitions.

Errors fall into three groups: local errors raised before a request is sent
(validation, configuration), local transport errors raised while talking to
the server, and classified API errors built from non-2xx responses.
"""

import json
from enum import Enum
from http import HTTPStatus
from typing import Union


class FImageError(Exception):
    """Base exception for F-Image SDK errors."""

    pass


class FImageValidationError(FImageError, ValueError):
    """Invalid caller input, detected before any request is sent."""

    pass


class FImageConfigError(FImageError):
    """Client configuration could not be loaded."""

    pass


class FImageTransportError(FImageError):
    """Network failure while sending a request or reading the response."""

    pass


class FImageTimeoutError(FImageTransportError):
    """The request did not complete before its deadline."""

    pass


class FImageDecodeError(FImageTransportError):
    """A successful response carried a body that is not valid JSON."""

    pass


class ErrorKind(Enum):
    """Classification of an API error by HTTP status."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    QUOTA_EXCEEDED = "quota_exceeded"
    OTHER = "other"


class FImageAPIError(FImageError):
    """
    Error response returned by the F-Image API.

    Attributes:
        status_code: HTTP status code of the response
        message: Error message from the response body
    """

    kind = ErrorKind.OTHER

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        self.message = message
        super().__init__(f"f-image API error (status {status_code}): {message}")


class FImageBadRequestError(FImageAPIError):
    """Request parameters were rejected (400)."""

    kind = ErrorKind.BAD_REQUEST


class FImageAuthError(FImageAPIError):
    """API token is invalid or missing (401)."""

    kind = ErrorKind.UNAUTHORIZED


class FImageForbiddenError(FImageAPIError):
    """Access to the resource is denied (403)."""

    kind = ErrorKind.FORBIDDEN


class FImageNotFoundError(FImageAPIError):
    """Requested resource does not exist (404)."""

    kind = ErrorKind.NOT_FOUND


class FImageQuotaError(FImageAPIError):
    """Storage quota or upload size limit exceeded (402, 413)."""

    kind = ErrorKind.QUOTA_EXCEEDED


_STATUS_ERRORS = {
    400: FImageBadRequestError,
    401: FImageAuthError,
    402: FImageQuotaError,
    403: FImageForbiddenError,
    404: FImageNotFoundError,
    413: FImageQuotaError,
}


def _status_text(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def parse_api_error(status_code: int, body: Union[bytes, str]) -> FImageAPIError:
    """
    Build a classified error from a non-2xx response.

    The message is the body's ``error`` field if non-empty, else its
    ``message`` field, else the standard reason phrase for the status.
    A body that is not a JSON object with string fields is used verbatim.

    Args:
        status_code: HTTP status code
        body: Raw response body

    Returns:
        The FImageAPIError subclass matching the status code
    """
    if isinstance(body, bytes):
        text = body.decode("utf-8", errors="replace")
    else:
        text = body

    error_cls = _STATUS_ERRORS.get(status_code, FImageAPIError)

    try:
        payload = json.loads(text)
    except ValueError:
        return error_cls(status_code, text)

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return error_cls(status_code, text)

    error = payload.get("error") or ""
    message = payload.get("message") or ""
    if not isinstance(error, str) or not isinstance(message, str):
        return error_cls(status_code, text)

    return error_cls(status_code, error or message or _status_text(status_code))


def _has_status(err: BaseException, *codes: int) -> bool:
    return isinstance(err, FImageAPIError) and err.status_code in codes


def is_unauthorized(err: BaseException) -> bool:
    """True if err is an API error with status 401."""
    return _has_status(err, 401)


def is_forbidden(err: BaseException) -> bool:
    """True if err is an API error with status 403."""
    return _has_status(err, 403)


def is_not_found(err: BaseException) -> bool:
    """True if err is an API error with status 404."""
    return _has_status(err, 404)


def is_bad_request(err: BaseException) -> bool:
    """True if err is an API error with status 400."""
    return _has_status(err, 400)


def is_quota_exceeded(err: BaseException) -> bool:
    """True if err is an API error with status 402 or 413."""
    return _has_status(err, 402, 413)
