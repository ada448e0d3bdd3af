# =============================================================================
# Unit Tests: ResourceStoreClient
# =============================================================================
#
# The requests session is replaced by a MagicMock returning real
# requests.Response objects, so no server or network is needed.
# =============================================================================

import json
from unittest.mock import MagicMock

import pytest
import requests

from resource_store_client import ResourceStoreClient


def _response(status_code: int, payload=None) -> requests.Response:
    """Build a requests.Response with an optional JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://store.test/api"
    if payload is None:
        response._content = b""
    else:
        response._content = json.dumps(payload).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return ResourceStoreClient(base_url="http://store.test/", session=session, timeout=5)


class TestRequests:
    def test_list_users(self, api, session):
        users = [{"id": 1, "name": "John Doe", "email": "john@example.com"}]
        session.request.return_value = _response(200, users)

        data, error = api.list_users()

        assert error is None
        assert data == users
        session.request.assert_called_once_with(
            method="GET", url="http://store.test/api/users", json=None, timeout=5
        )

    def test_create_post_omits_missing_user_id(self, api, session):
        session.request.return_value = _response(201, {"id": 4, "title": "t", "body": "b", "userId": 1})

        data, error = api.create_post("t", "b")

        assert error is None
        assert data["id"] == 4
        assert session.request.call_args.kwargs["json"] == {"title": "t", "body": "b"}

    def test_replace_post_sends_user_id(self, api, session):
        session.request.return_value = _response(200, {"id": 1, "title": "t", "body": "b", "userId": 2})

        api.replace_post(1, "t", "b", user_id=2)

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["url"] == "http://store.test/api/posts/1"
        assert kwargs["json"] == {"title": "t", "body": "b", "userId": 2}

    def test_update_user_sends_only_changes(self, api, session):
        session.request.return_value = _response(200, {"id": 2, "name": "Jane", "email": "new@x.com"})

        api.update_user(2, email="new@x.com")

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PATCH"
        assert kwargs["json"] == {"email": "new@x.com"}

    def test_delete_returns_success_flag(self, api, session):
        session.request.return_value = _response(204)

        ok, error = api.delete_post(3)

        assert ok is True
        assert error is None

    def test_health(self, api, session):
        session.request.return_value = _response(200, {"status": "OK"})

        data, error = api.health()

        assert data == {"status": "OK"}
        assert session.request.call_args.kwargs["url"] == "http://store.test/health"


class TestErrors:
    def test_not_found_uses_error_message(self, api, session):
        session.request.return_value = _response(404, {"error": "User not found"})

        data, error = api.get_user(99)

        assert data is None
        assert error == {"status_code": 404, "message": "User not found"}

    def test_bad_request(self, api, session):
        session.request.return_value = _response(400, {"error": "Name and email are required"})

        data, error = api.create_user("", "")

        assert data is None
        assert error["status_code"] == 400
        assert error["message"] == "Name and email are required"

    def test_failed_list_returns_empty_list(self, api, session):
        session.request.return_value = _response(500)

        data, error = api.list_posts()

        assert data == []
        assert error["status_code"] == 500

    def test_failed_delete(self, api, session):
        session.request.return_value = _response(404, {"error": "Post not found"})

        ok, error = api.delete_post(9)

        assert ok is False
        assert error["message"] == "Post not found"

    def test_connection_error(self, api, session):
        session.request.side_effect = requests.ConnectionError("connection refused")

        data, error = api.get_post(1)

        assert data is None
        assert error["status_code"] is None
        assert "connection refused" in error["message"]
