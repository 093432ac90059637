"""Album operations."""

from typing import TYPE_CHECKING, List, Optional

from .models import Album, AlbumsListResponse, MessageResponse, decode
from .utils import validate_id, validate_text

if TYPE_CHECKING:
    from .client import FImageClient


def _album_body(name: str, description: str) -> dict:
    body = {"name": validate_text(name, "album name")}
    if description:
        body["description"] = description
    return body


class AlbumsService:
    """Handles album operations. Reach it through ``client.albums``."""

    def __init__(self, client: "FImageClient"):
        self._client = client

    def list(self, timeout: Optional[float] = None) -> List[Album]:
        """
        Return all albums of the authenticated user.

        Example:
            >>> for album in client.albums.list():
            ...     print(album.name, album.file_count)
        """
        data = self._client._request("GET", "/api/albums", timeout=timeout)
        return decode(AlbumsListResponse, data).albums

    def get(self, album_id: int, timeout: Optional[float] = None) -> Album:
        """
        Return one album by ID.

        Raises:
            FImageNotFoundError: If the album does not exist
        """
        validate_id(album_id, "album_id")
        data = self._client._request("GET", f"/api/albums/{album_id}", timeout=timeout)
        return decode(Album, data)

    def create(
        self, name: str, description: str = "", timeout: Optional[float] = None
    ) -> Album:
        """
        Create an album.

        Example:
            >>> album = client.albums.create("Vacation Photos", "Summer 2024")
            >>> print(album.id)
        """
        body = _album_body(name, description)
        data = self._client._request("POST", "/api/albums", body, timeout=timeout)
        return decode(Album, data)

    def update(
        self,
        album_id: int,
        name: str,
        description: str = "",
        timeout: Optional[float] = None,
    ) -> Album:
        """Rename an album and replace its description."""
        validate_id(album_id, "album_id")
        body = _album_body(name, description)
        data = self._client._request(
            "PUT", f"/api/albums/{album_id}", body, timeout=timeout
        )
        return decode(Album, data)

    def delete(self, album_id: int, timeout: Optional[float] = None) -> MessageResponse:
        """Delete an album. Its files are kept and left without an album."""
        validate_id(album_id, "album_id")
        data = self._client._request(
            "DELETE", f"/api/albums/{album_id}", timeout=timeout
        )
        return decode(MessageResponse, data)
