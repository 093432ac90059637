"""Shared pytest fixtures for all tests."""

import io
import json

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from fimage import FImageClient

BASE_URL = "https://api.test"
TOKEN = "fimg_test_token"


class FakeAdapter(BaseAdapter):
    """
    Transport double mounted on a requests.Session.

    Records every prepared request and answers it with handler(request),
    which returns (status, body) or an exception to raise. A dict or list
    body is JSON-encoded; None means an empty body.
    """

    def __init__(self, handler):
        super().__init__()
        self.handler = handler
        self.requests = []
        self.timeouts = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        self.timeouts.append(timeout)

        result = self.handler(request)
        if isinstance(result, Exception):
            raise result

        status, body = result
        if body is None:
            content = b""
        elif isinstance(body, (dict, list)):
            content = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            content = body.encode("utf-8")
        else:
            content = body

        response = requests.Response()
        response.status_code = status
        response.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        response.raw = io.BytesIO(content)
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def make_client():
    """
    Build an FImageClient wired to a FakeAdapter.

    Returns:
        Factory taking a handler and client kwargs, returning (client, adapter)
    """
    def factory(handler, **kwargs):
        adapter = FakeAdapter(handler)
        session = requests.Session()
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        kwargs.setdefault("base_url", BASE_URL + "/")
        client = FImageClient(TOKEN, session=session, **kwargs)
        return client, adapter

    return factory


@pytest.fixture
def respond(make_client):
    """Client whose every request gets the same (status, body) answer."""
    def factory(status=200, body=None, **kwargs):
        return make_client(lambda request: (status, body), **kwargs)

    return factory


def json_body(request):
    """Decode the JSON body of a recorded request."""
    return json.loads(request.body)


def multipart_parts(request):
    """
    Split a recorded multipart/form-data request into its parts.

    Returns:
        List of (headers, content) tuples, headers as a decoded string
    """
    content_type = request.headers["Content-Type"]
    boundary = content_type.split("boundary=", 1)[1].encode("ascii")
    chunks = request.body.split(b"--" + boundary)[1:-1]

    parts = []
    for chunk in chunks:
        # Each chunk is "\r\n<headers>\r\n\r\n<content>\r\n"
        head, _, content = chunk[2:-2].partition(b"\r\n\r\n")
        parts.append((head.decode("utf-8"), content))
    return parts
