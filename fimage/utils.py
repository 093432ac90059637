"""Validation and query-string helpers shared by the services."""

from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlencode

from .errors import FImageValidationError


def validate_id(value: int, name: str) -> int:
    """
    Check that an identifier is a positive integer.

    Raises:
        FImageValidationError: If the identifier is missing or not positive
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise FImageValidationError(f"{name} is required")
    return value


def validate_optional_id(value: Optional[int], name: str) -> Optional[int]:
    if value is None:
        return None
    return validate_id(value, name)


def validate_ids(values: Iterable[int], name: str) -> List[int]:
    """
    Check that a collection of identifiers is non-empty and all positive.

    Returns:
        The identifiers as a list
    """
    ids = list(values or [])
    if not ids:
        raise FImageValidationError(f"{name} is required")
    for value in ids:
        validate_id(value, name)
    return ids


def validate_text(value: Optional[str], name: str) -> str:
    """Check that a required string is present and not blank."""
    if not value or not value.strip():
        raise FImageValidationError(f"{name} is required")
    return value


def page_query(page: int = 0, limit: int = 0) -> dict:
    """Build pagination query values; zero means server default."""
    query = {}
    if page > 0:
        query["page"] = page
    if limit > 0:
        query["limit"] = limit
    return query


def with_query(path: str, query: Optional[Dict[str, Any]]) -> str:
    """Append a URL-encoded query string to path, skipping None values."""
    params = {k: v for k, v in (query or {}).items() if v is not None}
    if not params:
        return path
    return f"{path}?{urlencode(sorted(params.items()))}"
