import pytest
import requests

from frontend.services import api_client


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


@pytest.fixture()
def calls(monkeypatch):
    recorded = []
    replies = []

    def fake_request(method, url, **kwargs):
        recorded.append((method, url, kwargs))
        reply = replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    monkeypatch.setattr(api_client.requests, "request", fake_request)
    return recorded, replies


def test_login_posts_credentials(calls):
    recorded, replies = calls
    replies.append(FakeResponse(200, {"user": {"id": 1}, "token": "t"}))

    assert api_client.login("a@example.com", "pw")["token"] == "t"
    method, url, kwargs = recorded[0]
    assert method == "POST"
    assert url.endswith("/api/auth/login")
    assert kwargs["json"] == {"email": "a@example.com", "password": "pw"}
    assert kwargs["headers"] == {}


def test_token_and_params_are_sent(calls):
    recorded, replies = calls
    replies.append(FakeResponse(200, {"data": [], "pagination": {}}))

    api_client.get_my_inquiries("tok", status="pending")
    _, url, kwargs = recorded[0]
    assert url.endswith("/api/inquiries/my-inquiries")
    assert kwargs["headers"] == {"Authorization": "Bearer tok"}
    assert kwargs["params"] == {"status": "pending", "page": 1}


def test_server_detail_is_surfaced_verbatim(calls):
    _, replies = calls
    replies.append(FakeResponse(400, {"detail": "You cannot send an inquiry for your own product"}))

    with pytest.raises(api_client.ApiError) as exc:
        api_client.send_inquiry("tok", 1, "Hi", "Price?")
    assert exc.value.message == "You cannot send an inquiry for your own product"
    assert exc.value.status_code == 400


def test_non_json_error_body(calls):
    _, replies = calls
    replies.append(FakeResponse(502, None, text=""))

    with pytest.raises(api_client.ApiError) as exc:
        api_client.get_categories()
    assert exc.value.message == "HTTP 502"


def test_network_failure_has_generic_message(calls):
    _, replies = calls
    replies.append(requests.exceptions.ConnectionError("refused"))

    with pytest.raises(api_client.ApiError) as exc:
        api_client.get_products()
    assert exc.value.message == "Unable to reach the server"
    assert exc.value.status_code is None
