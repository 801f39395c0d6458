"""Tests for the shared HTTP pipeline."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
import respx

from armkit.client.auth import StaticTokenCredential
from armkit.client.errors import (
    AuthenticationError,
    DecodeError,
    HttpResponseError,
    ResourceConflictError,
    ResourceNotFoundError,
    TransportError,
    UrlConstructionError,
)
from armkit.client.pipeline import ArmClient, ClientBuilder, decode
from armkit.models.base import ArmModel, ListResult

ENDPOINT = "https://management.azure.com"
API = "2021-12-01"


class Thing(ArmModel):
    name: str | None = None


class ThingList(ListResult[Thing]):
    pass


class ThingClient(ArmClient):
    api_version = API


class RecordingCredential(StaticTokenCredential):
    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.requested: list[tuple[str, ...]] = []

    async def get_token(self, *scopes: str, **kwargs: Any):
        self.requested.append(scopes)
        return await super().get_token(*scopes, **kwargs)


@pytest.fixture
def client(credential) -> ThingClient:
    return ThingClient(credential, endpoint=ENDPOINT)


class TestUrl:
    def test_path_params_encoded(self, client: ThingClient):
        url = client.url("/things/{name}", name="a b/c")
        assert str(url) == f"{ENDPOINT}/things/a%20b%2Fc"

    def test_empty_param_rejected(self, client: ThingClient):
        with pytest.raises(UrlConstructionError, match="name"):
            client.url("/things/{name}", name="")

    def test_missing_param_rejected(self, client: ThingClient):
        with pytest.raises(UrlConstructionError):
            client.url("/things/{name}")

    def test_raw_param_keeps_slashes(self, client: ThingClient):
        uri = "/subscriptions/s/resourceGroups/rg/providers/Microsoft.Kubernetes/connectedClusters/c1"
        url = client.url("/{uri}/providers/X/things", raw={"uri": uri})
        assert url.path == f"{uri}/providers/X/things"

    def test_endpoint_trailing_slash(self, credential):
        c = ThingClient(credential, endpoint=f"{ENDPOINT}/")
        assert str(c.url("/things")) == f"{ENDPOINT}/things"

    def test_continuation_keeps_query(self, client: ThingClient):
        link = f"{ENDPOINT}/things?api-version={API}&$skiptoken=abc"
        assert str(client.continuation_url(link)) == link

    def test_continuation_adds_api_version(self, client: ThingClient):
        url = client.continuation_url(f"{ENDPOINT}/things?$skiptoken=abc")
        assert url.params["$skiptoken"] == "abc"
        assert url.params.get_list("api-version") == [API]

    def test_continuation_relative(self, client: ThingClient):
        url = client.continuation_url("/things?page=2")
        assert url.host == "management.azure.com"
        assert url.params["page"] == "2"


class TestScopes:
    def test_default_scope(self, client: ThingClient):
        assert client.scopes == [f"{ENDPOINT}/.default"]

    def test_sovereign_cloud_scope(self, credential):
        c = ThingClient(credential, endpoint="https://management.chinacloudapi.cn")
        assert c.scopes == ["https://management.chinacloudapi.cn/.default"]

    @pytest.mark.asyncio
    async def test_scope_passed_to_credential(self):
        cred = RecordingCredential("tok")
        async with respx.mock(base_url=ENDPOINT) as router:
            router.get("/things").mock(return_value=httpx.Response(200, json={}))
            async with ThingClient(cred, scopes=["a/.default", "b"]) as c:
                await c.call("GET", c.url("/things"))
        assert cred.requested == [("a/.default b",)]


class TestSend:
    @pytest.mark.asyncio
    async def test_api_version_and_bearer(self, client: ThingClient):
        async with respx.mock(base_url=ENDPOINT) as router:
            route = router.get("/things/t1").mock(
                return_value=httpx.Response(200, json={"name": "t1"})
            )
            response = await client.call("GET", client.url("/things/{n}", n="t1"))
            assert decode(response, Thing).name == "t1"
        request = route.calls.last.request
        assert request.url.params["api-version"] == API
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_params_formatting(self, client: ThingClient):
        async with respx.mock(base_url=ENDPOINT) as router:
            route = router.delete("/things/t1").mock(return_value=httpx.Response(200))
            await client.call(
                "DELETE",
                client.url("/things/t1"),
                params={"forceDelete": True, "$expand": None},
            )
        params = route.calls.last.request.url.params
        assert params["forceDelete"] == "true"
        assert "$expand" not in params

    @pytest.mark.asyncio
    async def test_body_sent_with_wire_names(self, client: ThingClient):
        class Body(ArmModel):
            display_name: str | None = None
            note: str | None = None

        async with respx.mock(base_url=ENDPOINT) as router:
            route = router.put("/things/t1").mock(return_value=httpx.Response(200, json={}))
            await client.call("PUT", client.url("/things/t1"), body=Body(display_name="T"))
        assert json.loads(route.calls.last.request.content) == {"displayName": "T"}

    @pytest.mark.asyncio
    async def test_header_sent(self, client: ThingClient):
        async with respx.mock(base_url=ENDPOINT) as router:
            route = router.patch("/things/t1").mock(return_value=httpx.Response(200, json={}))
            await client.call(
                "PATCH", client.url("/things/t1"), headers={"If-Match": "etag-1"},
            )
        assert route.calls.last.request.headers["If-Match"] == "etag-1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "error"),
        [
            (401, AuthenticationError),
            (403, AuthenticationError),
            (404, ResourceNotFoundError),
            (409, ResourceConflictError),
            (500, HttpResponseError),
        ],
    )
    async def test_status_errors(self, client: ThingClient, status: int, error: type):
        body = {"error": {"code": "Oops", "message": "it broke"}}
        async with respx.mock(base_url=ENDPOINT) as router:
            router.get("/things").mock(return_value=httpx.Response(status, json=body))
            with pytest.raises(error, match="it broke") as exc_info:
                await client.call("GET", client.url("/things"))
        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_unexpected_success_status(self, client: ThingClient):
        async with respx.mock(base_url=ENDPOINT) as router:
            router.put("/things").mock(return_value=httpx.Response(202))
            with pytest.raises(HttpResponseError) as exc_info:
                await client.call("PUT", client.url("/things"), expected=(200, 201))
        assert exc_info.value.status_code == 202

    @pytest.mark.asyncio
    async def test_plain_text_error_detail(self, client: ThingClient):
        async with respx.mock(base_url=ENDPOINT) as router:
            router.get("/things").mock(return_value=httpx.Response(502, text="bad gateway"))
            with pytest.raises(HttpResponseError, match="bad gateway"):
                await client.call("GET", client.url("/things"))

    @pytest.mark.asyncio
    async def test_connect_error(self, client: ThingClient):
        async with respx.mock(base_url=ENDPOINT) as router:
            router.get("/things").mock(side_effect=httpx.ConnectError("refused"))
            with pytest.raises(TransportError, match="Cannot connect"):
                await client.call("GET", client.url("/things"))

    @pytest.mark.asyncio
    async def test_timeout(self, client: ThingClient):
        async with respx.mock(base_url=ENDPOINT) as router:
            router.get("/things").mock(side_effect=httpx.ReadTimeout("slow"))
            with pytest.raises(TransportError, match="timed out"):
                await client.call("GET", client.url("/things"))

    def test_decode_empty_body(self):
        response = httpx.Response(200, request=httpx.Request("GET", ENDPOINT))
        with pytest.raises(DecodeError, match="Empty 200"):
            decode(response, Thing)


class TestPaged:
    @pytest.mark.asyncio
    async def test_skiptoken_next_link_followed_verbatim(self, client: ThingClient):
        next_link = f"{ENDPOINT}/things?api-version={API}&$skiptoken=abc"
        async with respx.mock(base_url=ENDPOINT) as router:
            route = router.get("/things").mock(side_effect=[
                httpx.Response(200, json={"value": [{"name": "a"}], "nextLink": next_link}),
                httpx.Response(200, json={"value": [{"name": "b"}]}),
            ])
            items = await client.paged(
                "GET", client.url("/things"), ThingList, params={"$filter": "x"},
            ).collect()

        assert [t.name for t in items] == ["a", "b"]
        assert route.call_count == 2
        second = route.calls[1].request
        assert str(second.url) == next_link
        assert second.url.params.get_list("api-version") == [API]
        assert "$filter" not in second.url.params
        assert second.headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_continuation_reuses_method_without_body(self, client: ThingClient):
        class Query(ArmModel):
            kind: str | None = None

        async with respx.mock(base_url=ENDPOINT) as router:
            route = router.post("/things").mock(side_effect=[
                httpx.Response(200, json={"value": [], "nextLink": f"{ENDPOINT}/things?page=2"}),
                httpx.Response(200, json={"value": []}),
            ])
            await client.paged(
                "POST", client.url("/things"), ThingList, body=Query(kind="k"),
            ).collect()

        first, second = (call.request for call in route.calls)
        assert json.loads(first.content) == {"kind": "k"}
        assert second.method == "POST"
        assert second.content == b""
        assert second.url.params["api-version"] == API

    @pytest.mark.asyncio
    async def test_error_on_later_page(self, client: ThingClient):
        async with respx.mock(base_url=ENDPOINT) as router:
            router.get("/things").mock(side_effect=[
                httpx.Response(200, json={"value": [{"name": "a"}], "nextLink": f"{ENDPOINT}/things?p=2"}),
                httpx.Response(500, json={"error": {"message": "later"}}),
            ])
            seen = []
            with pytest.raises(HttpResponseError, match="later"):
                async for item in client.paged("GET", client.url("/things"), ThingList):
                    seen.append(item.name)
        assert seen == ["a"]


class TestBuilder:
    def test_fluent_build(self, credential):
        client = (
            ThingClient.builder(credential)
            .endpoint("https://management.usgovcloudapi.net")
            .timeout(5)
            .retry(0)
            .build()
        )
        assert isinstance(client, ThingClient)
        assert client.endpoint == "https://management.usgovcloudapi.net"
        assert client.scopes == ["https://management.usgovcloudapi.net/.default"]

    def test_explicit_scopes(self, credential):
        client = ClientBuilder(credential).scopes(["custom/.default"]).build(ThingClient)
        assert client.scopes == ["custom/.default"]

    def test_build_without_class(self, credential):
        with pytest.raises(TypeError):
            ClientBuilder(credential).build()

    def test_repr(self, client: ThingClient):
        assert "2021-12-01" in repr(client)
