"""Unit tests for ShareService and share options."""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import BASE_URL, TOKEN, json_body
from fimage import CreateShareOptions, share_album, share_file
from fimage.errors import (
    FImageDecodeError,
    FImageForbiddenError,
    FImageValidationError,
    is_forbidden,
)

SHARE = {
    "id": 5,
    "token": "abc123token",
    "share_url": "https://f-image.com/s/abc123token",
    "file_id": 123,
    "has_password": True,
    "expires_at": "2024-06-02T10:00:00Z",
    "view_count": 0,
    "is_active": True,
    "created_at": "2024-06-01T10:00:00Z",
}


def test_create_without_target_sends_nothing(respond):
    """Test that a share with no target fails before any request."""
    client, adapter = respond(201, SHARE)

    with pytest.raises(FImageValidationError):
        client.share.create(CreateShareOptions())
    with pytest.raises(FImageValidationError):
        client.share.create(None)

    assert len(adapter.requests) == 0


def test_create_with_both_targets_sends_nothing(respond):
    client, adapter = respond(201, SHARE)

    with pytest.raises(FImageValidationError):
        client.share.create(CreateShareOptions(file_id=1, album_id=2))

    assert adapter.requests == []


def test_create_file_share(respond):
    client, adapter = respond(201, SHARE)

    link = client.share.create(share_file(123).with_password("secret123").with_expiration(24))

    assert adapter.last.method == "POST"
    assert adapter.last.url == f"{BASE_URL}/api/shares"
    assert json_body(adapter.last) == {
        "file_id": 123,
        "password": "secret123",
        "expires_in": 24,
    }
    assert link.token == "abc123token"
    assert link.has_password is True
    assert link.expires_at == datetime(2024, 6, 2, 10, 0, tzinfo=timezone.utc)
    assert link.album_id is None


def test_create_album_share(respond):
    client, adapter = respond(201, dict(SHARE, file_id=None, album_id=456, max_views=100))

    link = client.share.create(share_album(456).with_max_views(100))

    assert json_body(adapter.last) == {"album_id": 456, "max_views": 100}
    assert link.album_id == 456
    assert link.max_views == 100


@pytest.mark.parametrize("field,value", [("expires_at", "not-a-time"), ("created_at", 1717236000)])
def test_create_bad_timestamp_is_decode_error(respond, field, value):
    client, _ = respond(201, dict(SHARE, **{field: value}))

    with pytest.raises(FImageDecodeError):
        client.share.create(share_file(123))


def test_builder_chains_on_same_options():
    opts = share_file(1)

    assert opts.with_password("p") is opts
    assert opts.with_expiration(2) is opts
    assert opts.with_max_views(3) is opts
    assert (opts.password, opts.expires_in, opts.max_views) == ("p", 2, 3)


def test_expires_at():
    assert share_file(1).expires_at() is None

    before = datetime.now()
    expires = share_file(1).with_expiration(24).expires_at()

    assert before + timedelta(hours=24) <= expires <= datetime.now() + timedelta(hours=24)


def test_list(respond):
    client, adapter = respond(200, {"shares": [SHARE], "total": 1, "page": 1, "limit": 20})

    resp = client.share.list(page=1, limit=20)

    assert adapter.last.url == f"{BASE_URL}/api/shares?limit=20&page=1"
    assert resp.total == 1
    assert resp.shares[0].share_url == SHARE["share_url"]


def test_update_clears_password(respond):
    """Test that an empty password is sent so the server removes it."""
    client, adapter = respond(200, dict(SHARE, has_password=False))

    link = client.share.update(5, password="", is_active=False)

    assert adapter.last.method == "PUT"
    assert adapter.last.url == f"{BASE_URL}/api/shares/5"
    assert json_body(adapter.last) == {"password": "", "is_active": False}
    assert link.has_password is False


def test_update_requires_options(respond):
    client, adapter = respond(200, SHARE)

    with pytest.raises(FImageValidationError):
        client.share.update(5)

    assert adapter.requests == []


def test_delete(respond):
    client, adapter = respond(200, {"message": "Share deleted"})

    client.share.delete(5)

    assert adapter.last.method == "DELETE"
    assert adapter.last.url == f"{BASE_URL}/api/shares/5"


def test_access(respond):
    """Test public access still carries the credential."""
    client, adapter = respond(200, {"type": "album", "album": {"id": 2, "name": "Trip"},
                                    "files": [{"id": 1}, {"id": 2}], "requires_password": False})

    content = client.share.access("abc123token")

    assert adapter.last.method == "GET"
    assert adapter.last.url == f"{BASE_URL}/api/s/abc123token"
    assert adapter.last.headers["Authorization"] == f"Bearer {TOKEN}"
    assert content.type == "album"
    assert content.album.name == "Trip"
    assert len(content.files) == 2
    assert content.file is None


def test_access_requires_password(respond):
    client, _ = respond(200, {"type": "file", "requires_password": True})

    assert client.share.access("abc123token").requires_password is True


def test_verify_password(respond):
    client, adapter = respond(200, {"type": "file", "file": {"id": 1, "original_name": "a.jpg"}})

    content = client.share.verify_password("abc123token", "secret123")

    assert adapter.last.method == "POST"
    assert adapter.last.url == f"{BASE_URL}/api/s/abc123token/verify"
    assert json_body(adapter.last) == {"password": "secret123"}
    assert content.file.original_name == "a.jpg"


def test_verify_wrong_password(respond):
    client, _ = respond(403, {"error": "invalid password"})

    with pytest.raises(FImageForbiddenError) as exc_info:
        client.share.verify_password("abc123token", "nope")

    assert is_forbidden(exc_info.value)


@pytest.mark.parametrize("token,password", [("", "p"), ("abc", ""), (None, "p")])
def test_verify_requires_token_and_password(respond, token, password):
    client, adapter = respond(200, {})

    with pytest.raises(FImageValidationError):
        client.share.verify_password(token, password)

    assert adapter.requests == []


def test_verify_password_sent_verbatim(respond):
    """Test that a whitespace-only password is sent as is, not rejected."""
    client, adapter = respond(200, {"type": "file"})

    client.share.verify_password("abc123token", "   ")

    assert json_body(adapter.last) == {"password": "   "}
