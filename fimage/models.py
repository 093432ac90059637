"""
Response records returned by the F-Image services.

Every record is built with ``from_dict``, which tolerates missing keys so
that an empty response body produces a default-valued record.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Type, TypeVar

from .errors import FImageDecodeError

T = TypeVar("T")


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)


def decode(cls: Type[T], data: Any) -> T:
    """
    Build a record from a decoded JSON response.

    None (empty body) gives the default-valued record.

    Raises:
        FImageDecodeError: If the response does not have the record's shape
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FImageDecodeError(
            f"malformed response: expected object, got {type(data).__name__}"
        )
    try:
        return cls.from_dict(data)
    except (AttributeError, TypeError, ValueError) as e:
        raise FImageDecodeError(f"malformed response: {e}") from e


def decode_list(cls: Type[T], data: Any) -> List[T]:
    """Build a list of records from a decoded JSON array."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise FImageDecodeError(
            f"malformed response: expected array, got {type(data).__name__}"
        )
    return [decode(cls, item) for item in data]


@dataclass
class UploadData:
    """Details of an uploaded file."""

    id: int = 0
    url: str = ""
    medium_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    original_name: str = ""
    description: str = ""
    size: int = 0
    width: int = 0
    height: int = 0
    mime_type: str = ""
    # Content already existed on the server (flash upload)
    is_flash: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UploadData":
        return cls(
            id=data.get("id", 0),
            url=data.get("url", ""),
            medium_url=data.get("medium_url"),
            thumbnail_url=data.get("thumbnail_url"),
            original_name=data.get("original_name", ""),
            description=data.get("description", ""),
            size=data.get("size", 0),
            width=data.get("width", 0),
            height=data.get("height", 0),
            mime_type=data.get("mime_type", ""),
            is_flash=data.get("is_flash", False),
        )


@dataclass
class UploadResponse:
    """Upload envelope: ``success``, ``status`` and ``data``."""

    success: bool = False
    status: int = 0
    data: Optional[UploadData] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UploadResponse":
        payload = data.get("data")
        return cls(
            success=data.get("success", False),
            status=data.get("status", 0),
            data=UploadData.from_dict(payload) if payload is not None else None,
        )


@dataclass
class File:
    """A file in the user's library (or in the trash)."""

    id: int = 0
    album_id: Optional[int] = None
    album_name: Optional[str] = None
    original_name: str = ""
    description: str = ""
    url: str = ""
    medium_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    size: int = 0
    width: int = 0
    height: int = 0
    mime_type: str = ""
    created_at: str = ""
    deleted_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "File":
        return cls(
            id=data.get("id", 0),
            album_id=data.get("album_id"),
            album_name=data.get("album_name"),
            original_name=data.get("original_name", ""),
            description=data.get("description", ""),
            url=data.get("url", ""),
            medium_url=data.get("medium_url"),
            thumbnail_url=data.get("thumbnail_url"),
            size=data.get("size", 0),
            width=data.get("width", 0),
            height=data.get("height", 0),
            mime_type=data.get("mime_type", ""),
            created_at=data.get("created_at", ""),
            deleted_at=data.get("deleted_at"),
        )


@dataclass
class FilesListResponse:
    """A page of files from list, search or tag queries."""

    files: List[File] = field(default_factory=list)
    total: int = 0
    page: int = 0
    limit: int = 0
    album_id: Optional[int] = None
    query: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilesListResponse":
        return cls(
            files=[File.from_dict(f) for f in data.get("files") or []],
            total=data.get("total", 0),
            page=data.get("page", 0),
            limit=data.get("limit", 0),
            album_id=data.get("album_id"),
            query=data.get("query", ""),
        )


@dataclass
class Album:
    id: int = 0
    name: str = ""
    description: str = ""
    file_count: int = 0
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Album":
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            description=data.get("description", ""),
            file_count=data.get("file_count", 0),
            created_at=data.get("created_at", ""),
        )


@dataclass
class AlbumsListResponse:
    albums: List[Album] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AlbumsListResponse":
        return cls(albums=[Album.from_dict(a) for a in data.get("albums") or []])


@dataclass
class ShareLink:
    """A share link for exactly one file or album."""

    id: int = 0
    token: str = ""
    share_url: str = ""
    file_id: Optional[int] = None
    album_id: Optional[int] = None
    file_name: Optional[str] = None
    album_name: Optional[str] = None
    has_password: bool = False
    expires_at: Optional[datetime] = None
    max_views: Optional[int] = None
    view_count: int = 0
    is_active: bool = False
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShareLink":
        return cls(
            id=data.get("id", 0),
            token=data.get("token", ""),
            share_url=data.get("share_url", ""),
            file_id=data.get("file_id"),
            album_id=data.get("album_id"),
            file_name=data.get("file_name"),
            album_name=data.get("album_name"),
            has_password=data.get("has_password", False),
            expires_at=_parse_time(data.get("expires_at")),
            max_views=data.get("max_views"),
            view_count=data.get("view_count", 0),
            is_active=data.get("is_active", False),
            created_at=_parse_time(data.get("created_at")),
        )


@dataclass
class SharesListResponse:
    shares: List[ShareLink] = field(default_factory=list)
    total: int = 0
    page: int = 0
    limit: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SharesListResponse":
        return cls(
            shares=[ShareLink.from_dict(s) for s in data.get("shares") or []],
            total=data.get("total", 0),
            page=data.get("page", 0),
            limit=data.get("limit", 0),
        )


@dataclass
class SharedContent:
    """
    Content behind a share link.

    ``type`` is "file" or "album". For file shares ``file`` is set; for
    album shares ``album`` and ``files`` are set.
    """

    type: str = ""
    file: Optional[File] = None
    album: Optional[Album] = None
    files: List[File] = field(default_factory=list)
    requires_password: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SharedContent":
        file_data = data.get("file")
        album_data = data.get("album")
        return cls(
            type=data.get("type", ""),
            file=File.from_dict(file_data) if file_data is not None else None,
            album=Album.from_dict(album_data) if album_data is not None else None,
            files=[File.from_dict(f) for f in data.get("files") or []],
            requires_password=data.get("requires_password", False),
        )


@dataclass
class Tag:
    id: int = 0
    name: str = ""
    # Hex color, e.g. "#4CAF50"
    color: str = ""
    file_count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tag":
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            color=data.get("color", ""),
            file_count=data.get("file_count", 0),
        )


@dataclass
class TrashListResponse:
    files: List[File] = field(default_factory=list)
    total: int = 0
    page: int = 0
    limit: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrashListResponse":
        return cls(
            files=[File.from_dict(f) for f in data.get("files") or []],
            total=data.get("total", 0),
            page=data.get("page", 0),
            limit=data.get("limit", 0),
        )


@dataclass
class FailedDeletion:
    """A file that could not be permanently deleted, and why."""

    file_id: int = 0
    file_name: str = ""
    reason: str = ""
    share_links: List[ShareLink] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FailedDeletion":
        return cls(
            file_id=data.get("file_id", 0),
            file_name=data.get("file_name", ""),
            reason=data.get("reason", ""),
            share_links=[ShareLink.from_dict(s) for s in data.get("share_links") or []],
        )


@dataclass
class DeleteResult:
    """Outcome of a permanent delete or of emptying the trash."""

    success: bool = False
    message: str = ""
    deleted_count: int = 0
    failed_count: int = 0
    failed_deletions: List[FailedDeletion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeleteResult":
        return cls(
            success=data.get("success", False),
            message=data.get("message", ""),
            deleted_count=data.get("deleted_count", 0),
            failed_count=data.get("failed_count", 0),
            failed_deletions=[
                FailedDeletion.from_dict(f) for f in data.get("failed_deletions") or []
            ],
        )


@dataclass
class BatchDeleteResponse:
    deleted: int = 0
    failed: int = 0
    message: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BatchDeleteResponse":
        return cls(
            deleted=data.get("deleted", 0),
            failed=data.get("failed", 0),
            message=data.get("message", ""),
        )


@dataclass
class RestoreResponse:
    message: str = ""
    restored: int = 0
    failed: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RestoreResponse":
        return cls(
            message=data.get("message", ""),
            restored=data.get("restored", 0),
            failed=data.get("failed", 0),
        )


@dataclass
class MessageResponse:
    message: str = ""
    info: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MessageResponse":
        return cls(message=data.get("message", ""), info=data.get("info", ""))
