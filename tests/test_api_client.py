"""Unit tests for the panel API client against an ``httpx.MockTransport``."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from kubepanel.api import PanelApiClient, ResourceCreator, TemplateFetchError, TemplateSource
from kubepanel.models.enums import ResourceKind
from tests.conftest import INGRESS_TEMPLATE

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(requests: list[httpx.Request]) -> Callable[..., PanelApiClient]:
    def _make(handler: Handler, token: str = "") -> PanelApiClient:
        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(_record), base_url="http://panel.test")
        return PanelApiClient("http://panel.test", token_provider=lambda: token, client=http)

    return _make


def test_client_satisfies_endpoint_protocols() -> None:
    client = PanelApiClient("http://panel.test")
    assert isinstance(client, TemplateSource)
    assert isinstance(client, ResourceCreator)


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------


async def test_fetch_template(make_client, requests: list[httpx.Request]) -> None:
    client = make_client(lambda _r: httpx.Response(200, json={"code": 200, "data": INGRESS_TEMPLATE}))

    assert await client.fetch_template(ResourceKind.INGRESSES) == INGRESS_TEMPLATE
    assert requests[0].method == "GET"
    assert requests[0].url.path == "/api/template"
    assert requests[0].url.params["kind"] == "ingresses"


async def test_bearer_token_header(make_client, requests: list[httpx.Request]) -> None:
    client = make_client(lambda _r: httpx.Response(200, json={"data": "kind: Pod"}), token="abc123")

    await client.fetch_template(ResourceKind.PODS)
    assert requests[0].headers["Authorization"] == "Bearer abc123"


async def test_no_header_without_token(make_client, requests: list[httpx.Request]) -> None:
    client = make_client(lambda _r: httpx.Response(200, json={"data": "kind: Pod"}))

    await client.fetch_template(ResourceKind.PODS)
    assert "Authorization" not in requests[0].headers


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"code": 500, "message": "boom"}),
        httpx.Response(200, json={"code": 404, "message": "no template"}),
        httpx.Response(200, json={"code": 200, "data": {"unexpected": True}}),
        httpx.Response(200, text="<html>gateway</html>"),
        httpx.Response(200, json=["not", "an", "envelope"]),
    ],
)
async def test_fetch_template_failures(make_client, response: httpx.Response) -> None:
    client = make_client(lambda _r: response)
    with pytest.raises(TemplateFetchError):
        await client.fetch_template(ResourceKind.SECRETS)


async def test_fetch_template_transport_error(make_client) -> None:
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(_refuse)
    with pytest.raises(TemplateFetchError, match="connection refused"):
        await client.fetch_template(ResourceKind.SECRETS)


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------


async def test_create_resource_created(make_client, requests: list[httpx.Request]) -> None:
    manifest = "apiVersion: v1\nkind: Secret\n"
    client = make_client(lambda _r: httpx.Response(200, json={"code": 201, "data": {"message": "ok"}}))

    response = await client.create_resource(manifest, ResourceKind.SECRETS)

    assert response.status_code == 201
    assert response.data.message == "ok"
    assert requests[0].method == "POST"
    assert requests[0].url.path == "/api/create"
    assert json.loads(requests[0].content) == {"content": manifest, "kind": "secrets"}


async def test_create_resource_rejected_with_server_message(make_client) -> None:
    client = make_client(
        lambda _r: httpx.Response(409, json={"code": 409, "data": {"message": 'secrets "app" already exists'}})
    )

    response = await client.create_resource("kind: Secret", ResourceKind.SECRETS)
    assert response.status_code == 409
    assert response.data.message == 'secrets "app" already exists'


async def test_create_resource_falls_back_to_http_status(make_client) -> None:
    client = make_client(lambda _r: httpx.Response(502, text="Bad Gateway"))

    response = await client.create_resource("kind: Secret", ResourceKind.SECRETS)
    assert response.status_code == 502
    assert response.data.message == "Bad Gateway"


async def test_create_resource_envelope_message(make_client) -> None:
    client = make_client(lambda _r: httpx.Response(400, json={"code": 400, "message": "invalid yaml"}))

    response = await client.create_resource("kind: [", ResourceKind.SECRETS)
    assert response.data.message == "invalid yaml"


async def test_create_resource_transport_error_propagates(make_client) -> None:
    def _timeout(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(_timeout)
    with pytest.raises(httpx.ReadTimeout):
        await client.create_resource("kind: Secret", ResourceKind.SECRETS)


async def test_aclose_leaves_injected_client_open(make_client) -> None:
    client = make_client(lambda _r: httpx.Response(200, json={"data": "kind: Pod"}))
    await client.aclose()
    assert await client.fetch_template(ResourceKind.PODS) == "kind: Pod"
