import json

import httpx
import pytest

from hangar.api import ApiError, BasicAuth, Team, TeamClient


@pytest.fixture(autouse=True)
def mock_log_api_call(mocker):
    return mocker.patch("hangar.api.client.log_api_call")


def test_create_or_update_created(target):
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": 7, "name": "devs"})

    client = TeamClient(target, transport=httpx.MockTransport(handler))
    saved, created, updated = client.create_or_update(
        "devs", Team(name="devs", basic_auth=BasicAuth("admin", "pw"))
    )

    assert seen["method"] == "PUT"
    assert seen["path"] == "/api/v1/teams/devs"
    assert seen["body"]["basic_auth"]["basic_auth_username"] == "admin"
    assert saved == {"id": 7, "name": "devs"}
    assert (created, updated) == (True, False)


def test_create_or_update_updated(target):
    def handler(request):
        return httpx.Response(200, json={"id": 7, "name": "devs"})

    client = TeamClient(target, transport=httpx.MockTransport(handler))
    _, created, updated = client.create_or_update("devs", Team(name="devs"))

    assert (created, updated) == (False, True)


def test_create_or_update_quotes_team_name(target):
    seen = {}

    def handler(request):
        seen["raw_path"] = request.url.raw_path
        return httpx.Response(200, json={})

    client = TeamClient(target, transport=httpx.MockTransport(handler))
    client.create_or_update("a/b", Team(name="a/b"))

    assert seen["raw_path"] == b"/api/v1/teams/a%2Fb"


def test_create_or_update_server_error(target):
    def handler(request):
        return httpx.Response(500, json={"error": "database down"})

    client = TeamClient(target, transport=httpx.MockTransport(handler))

    with pytest.raises(ApiError, match="500 - database down"):
        client.create_or_update("devs", Team(name="devs"))
