"""Trash operations: list, restore and permanent delete."""

from typing import TYPE_CHECKING, Iterable, Optional

from .models import DeleteResult, RestoreResponse, TrashListResponse, decode
from .utils import page_query, validate_id, validate_ids

if TYPE_CHECKING:
    from .client import FImageClient


class TrashService:
    """
    Handles soft-deleted files. Reach it through ``client.trash``.

    Permanent deletes report per-file failures (for example files that still
    have active share links) in the returned DeleteResult instead of raising.
    """

    def __init__(self, client: "FImageClient"):
        self._client = client

    def list(
        self, page: int = 0, limit: int = 0, timeout: Optional[float] = None
    ) -> TrashListResponse:
        data = self._client._request_with_query(
            "/api/trash", page_query(page, limit), timeout=timeout
        )
        return decode(TrashListResponse, data)

    def restore(self, file_id: int, timeout: Optional[float] = None) -> RestoreResponse:
        validate_id(file_id, "file_id")
        data = self._client._request(
            "POST", f"/api/trash/{file_id}/restore", timeout=timeout
        )
        return decode(RestoreResponse, data)

    def restore_many(
        self, file_ids: Iterable[int], timeout: Optional[float] = None
    ) -> RestoreResponse:
        ids = validate_ids(file_ids, "file_ids")
        data = self._client._request(
            "POST", "/api/trash/restore", {"file_ids": ids}, timeout=timeout
        )
        return decode(RestoreResponse, data)

    def permanent_delete(
        self, file_id: int, timeout: Optional[float] = None
    ) -> DeleteResult:
        """Permanently delete one file from the trash. Cannot be undone."""
        validate_id(file_id, "file_id")
        data = self._client._request("DELETE", f"/api/trash/{file_id}", timeout=timeout)
        return decode(DeleteResult, data)

    def empty(self, timeout: Optional[float] = None) -> DeleteResult:
        """Permanently delete everything in the trash. Cannot be undone."""
        data = self._client._request("DELETE", "/api/trash/empty", timeout=timeout)
        return decode(DeleteResult, data)
