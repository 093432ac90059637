"""File operations: upload, list, search, delete and move."""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Iterable, Optional, Union

from .errors import FImageDecodeError, FImageValidationError
from .models import (
    BatchDeleteResponse,
    FilesListResponse,
    MessageResponse,
    UploadResponse,
    decode,
)
from .utils import (
    page_query,
    validate_id,
    validate_ids,
    validate_optional_id,
    validate_text,
    with_query,
)

if TYPE_CHECKING:
    from .client import FImageClient

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "image.jpg"


class FilesService:
    """Handles file operations. Reach it through ``client.files``."""

    def __init__(self, client: "FImageClient"):
        self._client = client

    def upload(
        self,
        file: Union[str, Path, BinaryIO],
        filename: Optional[str] = None,
        description: str = "",
        album_id: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> UploadResponse:
        """
        Upload an image file.

        Args:
            file: Path to an image file or a binary file-like object
            filename: Name to store the file under (default: the path's name,
                the file object's name, or "image.jpg")
            description: Optional description for the file
            album_id: Optional album to add the file to
            timeout: Per-call timeout in seconds

        Returns:
            UploadResponse; ``data.is_flash`` is set when the server already
            had the same content

        Raises:
            FImageValidationError: If the file path does not exist
            FImageQuotaError: If the quota or size limit is exceeded
            FImageAuthError: If authentication fails

        Example:
            >>> resp = client.files.upload("photo.jpg", description="A sunset")
            >>> print(resp.data.url)
        """
        validate_optional_id(album_id, "album_id")

        fields = {}
        if description:
            fields["description"] = description
        if album_id is not None:
            fields["album_id"] = str(album_id)

        if isinstance(file, (str, Path)):
            path = Path(file)
            if not path.is_file():
                raise FImageValidationError(f"file not found: {path}")
            name = filename or path.name
            with open(path, "rb") as f:
                body = self._client._upload_multipart(
                    "/api/files/upload", f, name, fields, timeout=timeout
                )
        else:
            # Files opened from a descriptor carry an int name
            raw = getattr(file, "name", None)
            if not isinstance(raw, str) or not raw:
                raw = DEFAULT_FILENAME
            name = filename or Path(raw).name or DEFAULT_FILENAME
            body = self._client._upload_multipart(
                "/api/files/upload", file, name, fields, timeout=timeout
            )

        try:
            data = json.loads(body)
        except ValueError as e:
            raise FImageDecodeError(f"failed to decode response: {e}") from e

        resp = decode(UploadResponse, data)
        if resp.data is not None and resp.data.is_flash:
            logger.debug("Flash upload for %s (file %s)", name, resp.data.id)
        return resp

    def upload_from_url(
        self, url: str, timeout: Optional[float] = None
    ) -> UploadResponse:
        """
        Upload an image from a public URL.

        Example:
            >>> resp = client.files.upload_from_url("https://example.com/image.jpg")
        """
        validate_text(url, "url")
        data = self._client._request(
            "POST", "/api/files/upload_from_url", {"url": url}, timeout=timeout
        )
        return decode(UploadResponse, data)

    def list(
        self,
        page: int = 0,
        limit: int = 0,
        album_id: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> FilesListResponse:
        """
        List files, one page at a time.

        Args:
            page: Page number, 1-indexed (0 for server default)
            limit: Items per page, max 100 (0 for server default)
            album_id: Only files in this album; 0 selects files without one
        """
        query = page_query(page, limit)
        if album_id is not None:
            query["album_id"] = album_id

        data = self._client._request_with_query("/api/files", query, timeout=timeout)
        return decode(FilesListResponse, data)

    def search(
        self,
        query: str,
        page: int = 0,
        limit: int = 0,
        timeout: Optional[float] = None,
    ) -> FilesListResponse:
        """Search files by filename or description."""
        if not query:
            raise FImageValidationError("search query is required")

        params = page_query(page, limit)
        params["q"] = query

        data = self._client._request_with_query(
            "/api/files/search", params, timeout=timeout
        )
        return decode(FilesListResponse, data)

    def delete(self, file_id: int, timeout: Optional[float] = None) -> MessageResponse:
        """Move a file to the trash (soft delete)."""
        validate_id(file_id, "file_id")
        data = self._client._request("DELETE", f"/api/files/{file_id}", timeout=timeout)
        return decode(MessageResponse, data)

    def batch_delete(
        self, file_ids: Iterable[int], timeout: Optional[float] = None
    ) -> BatchDeleteResponse:
        """
        Move several files to the trash.

        Per-file failures are counted in the response, not raised.
        """
        ids = validate_ids(file_ids, "file_ids")
        data = self._client._request(
            "POST", "/api/files/batch-delete", {"file_ids": ids}, timeout=timeout
        )
        return decode(BatchDeleteResponse, data)

    def move(
        self,
        file_id: int,
        album_id: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> MessageResponse:
        """Move a file into an album, or out of its album when album_id is None."""
        validate_id(file_id, "file_id")
        validate_optional_id(album_id, "album_id")

        path = with_query(f"/api/files/{file_id}/move", {"album_id": album_id})
        data = self._client._request("PUT", path, timeout=timeout)
        return decode(MessageResponse, data)

    def move_many(
        self,
        file_ids: Iterable[int],
        album_id: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> MessageResponse:
        """Move several files into an album, or out of their albums."""
        ids = validate_ids(file_ids, "file_ids")
        validate_optional_id(album_id, "album_id")

        body = {"file_ids": ids}
        if album_id is not None:
            body["album_id"] = album_id

        data = self._client._request("PUT", "/api/files/move", body, timeout=timeout)
        return decode(MessageResponse, data)
