"""Share link operations, including public share access."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Optional
from urllib.parse import quote

from .errors import FImageValidationError
from .models import MessageResponse, ShareLink, SharedContent, SharesListResponse, decode
from .utils import page_query, validate_id, validate_optional_id, validate_text

if TYPE_CHECKING:
    from .client import FImageClient


@dataclass
class CreateShareOptions:
    """
    Options for a new share link. Exactly one of file_id or album_id is set.

    The with_* methods modify the options in place and return them, so they
    can be chained:

        >>> opts = share_file(123).with_password("secret").with_expiration(24)
    """

    file_id: Optional[int] = None
    album_id: Optional[int] = None
    password: str = ""
    # Hours until expiry; 0 means never
    expires_in: int = 0
    # 0 means unlimited
    max_views: int = 0

    def with_password(self, password: str) -> "CreateShareOptions":
        self.password = password
        return self

    def with_expiration(self, hours: int) -> "CreateShareOptions":
        self.expires_in = hours
        return self

    def with_max_views(self, max_views: int) -> "CreateShareOptions":
        self.max_views = max_views
        return self

    def expires_at(self) -> Optional[datetime]:
        """Expiry time counted from now, or None when the share never expires."""
        if self.expires_in <= 0:
            return None
        return datetime.now() + timedelta(hours=self.expires_in)

    def to_body(self) -> dict:
        if (self.file_id is None) == (self.album_id is None):
            raise FImageValidationError("exactly one of file_id or album_id is required")
        validate_optional_id(self.file_id, "file_id")
        validate_optional_id(self.album_id, "album_id")

        body = {}
        if self.file_id is not None:
            body["file_id"] = self.file_id
        if self.album_id is not None:
            body["album_id"] = self.album_id
        if self.password:
            body["password"] = self.password
        if self.expires_in:
            body["expires_in"] = self.expires_in
        if self.max_views:
            body["max_views"] = self.max_views
        return body


def share_file(file_id: int) -> CreateShareOptions:
    """Share options for a single file."""
    return CreateShareOptions(file_id=file_id)


def share_album(album_id: int) -> CreateShareOptions:
    """Share options for an album."""
    return CreateShareOptions(album_id=album_id)


def _token_path(token: str) -> str:
    return f"/api/s/{quote(validate_text(token, 'share token'), safe='')}"


class ShareService:
    """Handles share links. Reach it through ``client.share``."""

    def __init__(self, client: "FImageClient"):
        self._client = client

    def list(
        self, page: int = 0, limit: int = 0, timeout: Optional[float] = None
    ) -> SharesListResponse:
        """Return the authenticated user's share links."""
        data = self._client._request_with_query(
            "/api/shares", page_query(page, limit), timeout=timeout
        )
        return decode(SharesListResponse, data)

    def create(
        self, options: CreateShareOptions, timeout: Optional[float] = None
    ) -> ShareLink:
        """
        Create a share link for a file or an album.

        Example:
            >>> link = client.share.create(share_file(123).with_password("secret"))
            >>> print(link.share_url)

        Raises:
            FImageValidationError: Unless exactly one target is set
        """
        if options is None:
            raise FImageValidationError("exactly one of file_id or album_id is required")
        body = options.to_body()
        data = self._client._request("POST", "/api/shares", body, timeout=timeout)
        return decode(ShareLink, data)

    def update(
        self,
        share_id: int,
        password: Optional[str] = None,
        max_views: Optional[int] = None,
        is_active: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> ShareLink:
        """
        Update a share link. Arguments left as None are not changed.

        Args:
            share_id: Share link ID
            password: New password; an empty string removes the password
            max_views: New view limit
            is_active: Enable or disable the link
        """
        validate_id(share_id, "share_id")

        body = {}
        if password is not None:
            body["password"] = password
        if max_views is not None:
            body["max_views"] = max_views
        if is_active is not None:
            body["is_active"] = is_active
        if not body:
            raise FImageValidationError("update options are required")

        data = self._client._request(
            "PUT", f"/api/shares/{share_id}", body, timeout=timeout
        )
        return decode(ShareLink, data)

    def delete(self, share_id: int, timeout: Optional[float] = None) -> MessageResponse:
        validate_id(share_id, "share_id")
        data = self._client._request(
            "DELETE", f"/api/shares/{share_id}", timeout=timeout
        )
        return decode(MessageResponse, data)

    def access(self, token: str, timeout: Optional[float] = None) -> SharedContent:
        """
        Fetch the content behind a share link. Public endpoint.

        Check ``requires_password`` on the result and call verify_password
        when it is set.
        """
        data = self._client._request("GET", _token_path(token), timeout=timeout)
        return decode(SharedContent, data)

    def verify_password(
        self, token: str, password: str, timeout: Optional[float] = None
    ) -> SharedContent:
        """Unlock a password-protected share link. Public endpoint."""
        path = f"{_token_path(token)}/verify"
        # Sent verbatim; only an empty password is rejected
        if not password:
            raise FImageValidationError("password is required")
        data = self._client._request(
            "POST", path, {"password": password}, timeout=timeout
        )
        return decode(SharedContent, data)
