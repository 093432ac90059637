"""Tag operations."""

from typing import TYPE_CHECKING, List, Optional

from .errors import FImageValidationError
from .models import FilesListResponse, MessageResponse, Tag, decode, decode_list
from .utils import page_query, validate_id, validate_text, with_query

if TYPE_CHECKING:
    from .client import FImageClient


class TagsService:
    """Handles tags. Reach it through ``client.tags``."""

    def __init__(self, client: "FImageClient"):
        self._client = client

    def list(self, timeout: Optional[float] = None) -> List[Tag]:
        data = self._client._request("GET", "/api/tags", timeout=timeout)
        return decode_list(Tag, data)

    def create(
        self, name: str, color: str = "", timeout: Optional[float] = None
    ) -> Tag:
        """
        Create a tag.

        Args:
            name: Tag name
            color: Hex color, e.g. "#4CAF50"
        """
        body = {"name": validate_text(name, "tag name")}
        if color:
            body["color"] = color
        data = self._client._request("POST", "/api/tags", body, timeout=timeout)
        return decode(Tag, data)

    def update(
        self,
        tag_id: int,
        name: str = "",
        color: str = "",
        timeout: Optional[float] = None,
    ) -> Tag:
        """Change a tag's name, color or both. Empty values are left unchanged."""
        validate_id(tag_id, "tag_id")

        body = {}
        if name:
            body["name"] = name
        if color:
            body["color"] = color
        if not body:
            raise FImageValidationError("update options are required")

        data = self._client._request("PUT", f"/api/tags/{tag_id}", body, timeout=timeout)
        return decode(Tag, data)

    def delete(self, tag_id: int, timeout: Optional[float] = None) -> MessageResponse:
        """Delete a tag and remove it from all files."""
        validate_id(tag_id, "tag_id")
        data = self._client._request("DELETE", f"/api/tags/{tag_id}", timeout=timeout)
        return decode(MessageResponse, data)

    def tag_file(
        self, file_id: int, tag_id: int, timeout: Optional[float] = None
    ) -> MessageResponse:
        """Add a tag to a file."""
        return self._file_tag("POST", file_id, tag_id, timeout)

    def untag_file(
        self, file_id: int, tag_id: int, timeout: Optional[float] = None
    ) -> MessageResponse:
        """Remove a tag from a file."""
        return self._file_tag("DELETE", file_id, tag_id, timeout)

    def _file_tag(
        self, method: str, file_id: int, tag_id: int, timeout: Optional[float]
    ) -> MessageResponse:
        body = {
            "file_id": validate_id(file_id, "file_id"),
            "tag_id": validate_id(tag_id, "tag_id"),
        }
        data = self._client._request(method, "/api/tags/file", body, timeout=timeout)
        return decode(MessageResponse, data)

    def get_files(
        self,
        tag_id: int,
        page: int = 0,
        limit: int = 0,
        timeout: Optional[float] = None,
    ) -> FilesListResponse:
        """Return the files carrying a tag."""
        validate_id(tag_id, "tag_id")
        path = with_query(f"/api/tags/{tag_id}/files", page_query(page, limit))
        data = self._client._request("GET", path, timeout=timeout)
        return decode(FilesListResponse, data)
