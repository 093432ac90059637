"""
F-Image client implementation.

This module contains the FImageClient class, which owns the configuration
and the HTTP transport shared by every service. For usage examples, see the
package docstring: help(fimage)
"""

import json
import logging
import mimetypes
import os
from typing import Any, BinaryIO, Dict, Optional

import requests

from .albums import AlbumsService
from .errors import (
    FImageConfigError,
    FImageDecodeError,
    FImageTimeoutError,
    FImageTransportError,
    FImageValidationError,
    parse_api_error,
)
from .files import FilesService
from .share import ShareService
from .tags import TagsService
from .trash import TrashService
from .utils import with_query

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
DEFAULT_BASE_URL = "https://f-image.com"
DEFAULT_TIMEOUT = 30


class FImageClient:
    """
    F-Image API client.

    Args:
        api_token: Your API token (generate it in the dashboard under
            settings/api)
        base_url: Base URL of the F-Image API (default: https://f-image.com)
        timeout: Default request timeout in seconds (default: 30)
        user_agent: User-Agent header value (default: f-image-python/<version>)
        session: requests.Session to send requests with; a new one is
            created when omitted

    Services:
        files, albums, share, tags, trash
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_token = api_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent or f"f-image-python/{VERSION}"
        self.session = session if session is not None else requests.Session()

        self.files = FilesService(self)
        self.albums = AlbumsService(self)
        self.share = ShareService(self)
        self.tags = TagsService(self)
        self.trash = TrashService(self)

    @classmethod
    def from_env(cls, **kwargs) -> "FImageClient":
        """
        Create a client from environment variables.

        Reads FIMAGE_API_TOKEN (required), FIMAGE_BASE_URL and FIMAGE_TIMEOUT.
        Keyword arguments are passed to the constructor and take precedence.

        Raises:
            FImageConfigError: If the token is missing or the timeout is invalid
        """
        api_token = os.environ.get("FIMAGE_API_TOKEN", "").strip()
        if not api_token:
            raise FImageConfigError("missing environment variable: FIMAGE_API_TOKEN")

        base_url = os.environ.get("FIMAGE_BASE_URL", "").strip()
        if base_url:
            kwargs.setdefault("base_url", base_url)

        timeout = os.environ.get("FIMAGE_TIMEOUT", "").strip()
        if timeout:
            try:
                kwargs.setdefault("timeout", float(timeout))
            except ValueError as e:
                raise FImageConfigError(f"invalid FIMAGE_TIMEOUT: {timeout!r}") from e

        return cls(api_token, **kwargs)

    def close(self):
        """Release the underlying connection pool."""
        self.session.close()

    def __enter__(self) -> "FImageClient":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }

    def _send(
        self, method: str, path: str, timeout: Optional[float] = None, **kwargs
    ) -> requests.Response:
        """Send one request and raise on transport failure or non-2xx status."""
        url = f"{self.base_url}{path}"
        if timeout is None:
            timeout = self.timeout

        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=timeout, **kwargs)
        except requests.Timeout as e:
            raise FImageTimeoutError(f"request timed out: {e}") from e
        except requests.RequestException as e:
            raise FImageTransportError(f"request failed: {e}") from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        self._handle_errors(response)
        return response

    def _handle_errors(self, response: requests.Response):
        """Raise a classified error for any status outside 2xx."""
        if 200 <= response.status_code < 300:
            return
        err = parse_api_error(response.status_code, response.content)
        logger.warning(
            "F-Image API error (%d) for %s: %s",
            err.status_code,
            response.url,
            err.message,
        )
        raise err

    def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Send a request with an optional JSON body and decode the response.

        Args:
            method: HTTP method
            path: Path relative to base_url, including any query string
            body: JSON-serializable request body
            timeout: Per-call timeout in seconds (default: client timeout)

        Returns:
            The decoded JSON value, or None for an empty response body

        Raises:
            FImageValidationError: If the body cannot be serialized
            FImageTransportError: On network failure, timeout or malformed JSON
            FImageAPIError: On a non-2xx response
        """
        headers = self._headers()
        data = None
        if body is not None:
            try:
                data = json.dumps(body, allow_nan=False).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise FImageValidationError(f"failed to encode request body: {e}") from e
            headers["Content-Type"] = "application/json"

        response = self._send(method, path, timeout=timeout, headers=headers, data=data)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise FImageDecodeError(f"failed to decode response: {e}") from e

    def _request_with_query(
        self,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """GET request with query parameters appended to the path."""
        return self._request("GET", with_query(path, query), timeout=timeout)

    def _upload_multipart(
        self,
        path: str,
        stream: BinaryIO,
        filename: str,
        fields: Dict[str, str],
        timeout: Optional[float] = None,
    ) -> bytes:
        """
        POST a multipart/form-data upload.

        The stream is sent as the first part, named "file"; each entry in
        fields follows as a text part.

        Returns:
            The raw response body
        """
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        files = [("file", (filename, stream, content_type))]
        files += [(name, (None, value)) for name, value in fields.items()]

        response = self._send(
            "POST",
            path,
            timeout=timeout,
            headers=self._headers(),
            files=files,
        )
        return response.content
