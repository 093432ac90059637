"""Unit tests for TrashService."""

import pytest

from conftest import BASE_URL, json_body
from fimage.errors import FImageAuthError, FImageValidationError, is_unauthorized


def test_list(respond):
    client, adapter = respond(200, {
        "files": [{"id": 1, "original_name": "a.jpg", "deleted_at": "2024-06-01T10:00:00Z"}],
        "total": 1,
        "page": 1,
        "limit": 50,
    })

    resp = client.trash.list(limit=50)

    assert adapter.last.url == f"{BASE_URL}/api/trash?limit=50"
    assert resp.files[0].deleted_at == "2024-06-01T10:00:00Z"


def test_restore(respond):
    client, adapter = respond(200, {"message": "File restored"})

    resp = client.trash.restore(123)

    assert adapter.last.method == "POST"
    assert adapter.last.url == f"{BASE_URL}/api/trash/123/restore"
    assert adapter.last.body is None
    assert resp.message == "File restored"


def test_restore_many(respond):
    client, adapter = respond(200, {"message": "done", "restored": 2, "failed": 1})

    resp = client.trash.restore_many([1, 2, 3])

    assert adapter.last.url == f"{BASE_URL}/api/trash/restore"
    assert json_body(adapter.last) == {"file_ids": [1, 2, 3]}
    assert (resp.restored, resp.failed) == (2, 1)


def test_restore_many_requires_ids(respond):
    client, adapter = respond(200, {})

    with pytest.raises(FImageValidationError):
        client.trash.restore_many([])

    assert adapter.requests == []


def test_permanent_delete_blocked(respond):
    """Test that a delete blocked by share links is reported, not raised."""
    client, adapter = respond(200, {
        "success": False,
        "message": "File has active share links",
        "deleted_count": 0,
        "failed_count": 1,
        "failed_deletions": [{
            "file_id": 123,
            "file_name": "a.jpg",
            "reason": "active share links",
            "share_links": [{"id": 5, "token": "abc"}],
        }],
    })

    result = client.trash.permanent_delete(123)

    assert adapter.last.method == "DELETE"
    assert adapter.last.url == f"{BASE_URL}/api/trash/123"
    assert result.success is False
    assert result.failed_count == 1
    assert result.failed_deletions[0].share_links[0].token == "abc"


def test_empty_is_idempotent(respond):
    """Test emptying an empty trash twice reports zero counts both times."""
    client, adapter = respond(200, {
        "success": True,
        "message": "Trash is empty",
        "deleted_count": 0,
        "failed_count": 0,
    })

    first = client.trash.empty()
    second = client.trash.empty()

    for result in (first, second):
        assert result.deleted_count == 0
        assert result.failed_count == 0
        assert result.failed_deletions == []
    assert [r.url for r in adapter.requests] == [f"{BASE_URL}/api/trash/empty"] * 2
    assert all(r.method == "DELETE" for r in adapter.requests)


def test_empty_unauthorized(respond):
    client, _ = respond(401, {"message": "invalid API token"})

    with pytest.raises(FImageAuthError) as exc_info:
        client.trash.empty()

    assert is_unauthorized(exc_info.value)
    assert exc_info.value.message == "invalid API token"
