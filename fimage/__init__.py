"""
F-Image Python SDK

Client library for the F-Image hosting API: uploads, albums, share links,
tags and trash.

Usage:
    from fimage import FImageAPIError, FImageClient, is_not_found, share_file

    # Initialize client
    client = FImageClient(
        api_token="fimg_live_your_token_here",
        base_url="https://f-image.com"  # optional, defaults to https://f-image.com
    )

    # Upload image
    resp = client.files.upload("photo.jpg", description="My photo")
    print(resp.data.url)

    # Organize it
    album = client.albums.create("Vacation Photos")
    client.files.move(resp.data.id, album_id=album.id)

    # Share it for 24 hours
    link = client.share.create(share_file(resp.data.id).with_expiration(24))

    # Classify errors
    try:
        client.albums.get(999)
    except FImageAPIError as e:
        if is_not_found(e):
            print("no such album")
"""

from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, VERSION, FImageClient
from .errors import (
    ErrorKind,
    FImageAPIError,
    FImageAuthError,
    FImageBadRequestError,
    FImageConfigError,
    FImageDecodeError,
    FImageError,
    FImageForbiddenError,
    FImageNotFoundError,
    FImageQuotaError,
    FImageTimeoutError,
    FImageTransportError,
    FImageValidationError,
    is_bad_request,
    is_forbidden,
    is_not_found,
    is_quota_exceeded,
    is_unauthorized,
    parse_api_error,
)
from .models import (
    Album,
    AlbumsListResponse,
    BatchDeleteResponse,
    DeleteResult,
    FailedDeletion,
    File,
    FilesListResponse,
    MessageResponse,
    RestoreResponse,
    SharedContent,
    ShareLink,
    SharesListResponse,
    Tag,
    TrashListResponse,
    UploadData,
    UploadResponse,
)
from .share import CreateShareOptions, share_album, share_file

__version__ = VERSION

__all__ = [
    "FImageClient",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    # Errors
    "ErrorKind",
    "FImageError",
    "FImageValidationError",
    "FImageConfigError",
    "FImageTransportError",
    "FImageTimeoutError",
    "FImageDecodeError",
    "FImageAPIError",
    "FImageBadRequestError",
    "FImageAuthError",
    "FImageForbiddenError",
    "FImageNotFoundError",
    "FImageQuotaError",
    "parse_api_error",
    "is_unauthorized",
    "is_forbidden",
    "is_not_found",
    "is_bad_request",
    "is_quota_exceeded",
    # Share options
    "CreateShareOptions",
    "share_file",
    "share_album",
    # Models
    "UploadData",
    "UploadResponse",
    "File",
    "FilesListResponse",
    "Album",
    "AlbumsListResponse",
    "ShareLink",
    "SharesListResponse",
    "SharedContent",
    "Tag",
    "TrashListResponse",
    "FailedDeletion",
    "DeleteResult",
    "BatchDeleteResponse",
    "RestoreResponse",
    "MessageResponse",
]
