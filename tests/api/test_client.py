import httpx
import pytest

from hangar.api.client import ApiClient, ApiError, extract_error_message


@pytest.fixture(autouse=True)
def mock_log_api_call(mocker):
    return mocker.patch("hangar.api.client.log_api_call")


def _client(target, handler):
    return ApiClient(target, transport=httpx.MockTransport(handler))


def test_build_headers_adds_bearer_token(target):
    headers = ApiClient(target).build_headers({"X-Extra": "1"})

    assert headers["Authorization"] == "Bearer test-token"
    assert headers["Content-Type"] == "application/json"
    assert headers["X-Extra"] == "1"


def test_build_headers_without_token(target):
    target.token = None

    assert "Authorization" not in ApiClient(target).build_headers()


def test_make_http_request_success(target, mock_log_api_call):
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        return httpx.Response(200, json={"ok": True})

    response = _client(target, handler).make_http_request("/api/v1/info")

    assert response.json() == {"ok": True}
    assert seen == {"url": "https://ci.example.com/api/v1/info", "auth": "Bearer test-token"}
    assert mock_log_api_call.call_args.kwargs["status_code"] == 200


def test_make_http_request_sends_json_body(target):
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["body"] = request.content
        return httpx.Response(200)

    _client(target, handler).make_http_request("/x", method="put", json_body={"a": 1})

    assert seen["method"] == "PUT"
    assert b'"a"' in seen["body"]


def test_make_http_request_error_status(target, mock_log_api_call):
    def handler(request):
        return httpx.Response(403, json={"message": "not authorized"})

    with pytest.raises(ApiError) as exc_info:
        _client(target, handler).make_http_request("/x")

    assert str(exc_info.value) == "403 - not authorized"
    assert exc_info.value.status_code == 403
    assert mock_log_api_call.call_args.kwargs["error"] == "403 - not authorized"


def test_make_http_request_transport_failure(target, mock_log_api_call):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ApiError) as exc_info:
        _client(target, handler).make_http_request("/x")

    assert "connection refused" in str(exc_info.value)
    assert exc_info.value.status_code is None
    assert mock_log_api_call.call_args.kwargs["error"] == "connection refused"


def test_extract_error_message_keys():
    assert extract_error_message(httpx.Response(400, json={"error": "bad"})) == "bad"
    assert extract_error_message(httpx.Response(400, json={"reason": "nope"})) == "nope"
    assert (
        extract_error_message(httpx.Response(400, json={"errors": ["a", "b"]}))
        == "a; b"
    )


def test_extract_error_message_plain_text():
    assert extract_error_message(httpx.Response(500, text="boom")) == "boom"
