"""Shared HTTP pipeline for service clients."""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar
from urllib.parse import quote

import httpx
from azure.core.credentials_async import AsyncTokenCredential
from loguru import logger

from armkit.client.auth import BearerTokenAuth
from armkit.client.errors import (
    DecodeError,
    HttpResponseError,
    TransportError,
    UrlConstructionError,
    error_for_status,
)
from armkit.client.paging import Pageable
from armkit.config.constants import (
    DEFAULT_ENDPOINT,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    default_scopes,
)
from armkit.models.base import ArmModel

C = TypeVar("C", bound="ArmClient")
M = TypeVar("M", bound=ArmModel)
T = TypeVar("T")

API_VERSION_PARAM = "api-version"


@dataclass(frozen=True)
class OperationResponse(Generic[T]):
    """Result of an operation whose success statuses mean different things.

    ``value`` is the decoded body for statuses that carry one and ``None``
    otherwise (e.g. 202 Accepted, 204 No Content).
    """

    status_code: int
    value: T | None = None


class ArmClient:
    """Async client for one resource provider at a fixed API version."""

    api_version: ClassVar[str] = ""

    def __init__(
        self,
        credential: AsyncTokenCredential,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        scopes: Sequence[str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = DEFAULT_MAX_RETRIES,
        verify: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.credential = credential
        self.scopes = list(scopes) if scopes else default_scopes(self.endpoint)
        if not verify:
            logger.warning("TLS certificate verification is disabled")
        self._http = httpx.AsyncClient(
            auth=BearerTokenAuth(credential, self.scopes),
            transport=transport or httpx.AsyncHTTPTransport(
                retries=retries, verify=verify,
            ),
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def builder(cls: type[C], credential: AsyncTokenCredential) -> ClientBuilder[C]:
        return ClientBuilder(credential, cls)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(endpoint={self.endpoint!r}, "
            f"api_version={self.api_version!r})"
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self: C) -> C:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    # -- URL construction ---------------------------------------------------

    def url(
        self,
        template: str,
        *,
        raw: Mapping[str, str] | None = None,
        **path_params: str,
    ) -> httpx.URL:
        """Expand *template* against the endpoint.

        Values in *path_params* are percent-encoded as single path segments.
        Values in *raw* are inserted as-is (resource URIs spanning several
        segments) with any leading slash dropped.
        """
        values: dict[str, str] = {}
        for name, value in path_params.items():
            if value is None or str(value) == "":
                raise UrlConstructionError(f"Path parameter '{name}' is empty")
            values[name] = quote(str(value), safe="")
        for name, value in (raw or {}).items():
            if not value:
                raise UrlConstructionError(f"Path parameter '{name}' is empty")
            values[name] = value.lstrip("/")
        try:
            path = template.format(**values)
        except KeyError as exc:
            raise UrlConstructionError(
                f"Missing path parameter {exc} for {template}"
            ) from exc
        try:
            return httpx.URL(f"{self.endpoint}{path}")
        except httpx.InvalidURL as exc:
            raise UrlConstructionError(f"Invalid URL for {path}: {exc}") from exc

    def continuation_url(self, link: str) -> httpx.URL:
        """Resolve a ``nextLink`` against the endpoint.

        Absolute links replace the endpoint. ``api-version`` is appended only
        when the link does not already carry one; the rest of the query is
        kept exactly as the service sent it.
        """
        try:
            url = httpx.URL(self.endpoint).join(link)
        except httpx.InvalidURL as exc:
            raise UrlConstructionError(f"Invalid continuation link {link!r}: {exc}") from exc
        if API_VERSION_PARAM not in url.params:
            separator = "&" if url.query else "?"
            url = httpx.URL(f"{url}{separator}{API_VERSION_PARAM}={self.api_version}")
        return url

    # -- sending ------------------------------------------------------------

    async def send(
        self,
        method: str,
        url: httpx.URL | str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
        body: ArmModel | None = None,
        expected: Collection[int] = (200,),
    ) -> httpx.Response:
        """Send one request and enforce the operation's success statuses."""
        query = {k: _format_param(v) for k, v in (params or {}).items() if v is not None}
        header_values = {
            k: _format_param(v) for k, v in (headers or {}).items() if v is not None
        }
        logger.debug(f"{method} {url}")
        try:
            response = await self._http.request(
                method,
                url,
                params=query or None,
                headers=header_values or None,
                json=body.to_wire() if body is not None else None,
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise UrlConstructionError(f"Invalid URL {url}: {exc}") from exc
        except httpx.TimeoutException as exc:
            logger.error(f"{method} {url} timed out: {exc}")
            raise TransportError(f"Request to {self.endpoint} timed out: {exc}") from exc
        except httpx.TransportError as exc:
            logger.error(f"{method} {url} failed: {exc}")
            raise TransportError(f"Cannot connect to {self.endpoint}: {exc}") from exc
        logger.debug(f"{method} {url} -> {response.status_code}")
        if response.status_code not in expected:
            raise self._status_error(response)
        return response

    async def call(
        self,
        method: str,
        url: httpx.URL,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
        body: ArmModel | None = None,
        expected: Collection[int] = (200,),
    ) -> httpx.Response:
        """Send an operation request, adding the client's ``api-version``."""
        query = {API_VERSION_PARAM: self.api_version, **(params or {})}
        return await self.send(
            method, url, params=query, headers=headers, body=body, expected=expected,
        )

    def paged(
        self,
        method: str,
        url: httpx.URL,
        model: type[M],
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
        body: ArmModel | None = None,
    ) -> Pageable[M]:
        """Build a lazy :class:`Pageable` for a list operation.

        Continuation requests reuse *method* and *headers* but carry no body
        and none of the first request's query parameters.
        """

        async def make_request(continuation: str | None) -> M:
            if continuation is None:
                response = await self.call(
                    method, url, params=params, headers=headers, body=body,
                )
            else:
                response = await self.send(
                    method, self.continuation_url(continuation), headers=headers,
                )
            return decode(response, model)

        return Pageable(make_request)

    def _status_error(self, response: httpx.Response) -> HttpResponseError:
        detail = response.text
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            error = payload.get("error")
            if isinstance(error, dict) and error.get("message"):
                detail = error["message"]
        logger.warning(
            f"{response.request.method} {response.request.url} "
            f"returned unexpected status {response.status_code}"
        )
        return error_for_status(response.status_code, detail)


def decode(response: httpx.Response, model: type[M]) -> M:
    """Decode a response body into *model*."""
    if not response.content:
        raise DecodeError(
            f"Empty {response.status_code} response, expected {model.__name__}"
        )
    return model.from_wire(response.content)


def _format_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class OperationGroup:
    """Operations on one REST resource, bound to a client."""

    def __init__(self, client: ArmClient) -> None:
        self._client = client

    def __repr__(self) -> str:
        return f"<{type(self).__name__} for {self._client!r}>"


class ClientBuilder(Generic[C]):
    """Fluent construction of a service client."""

    def __init__(
        self, credential: AsyncTokenCredential, client_cls: type[C] | None = None,
    ) -> None:
        self._credential = credential
        self._client_cls = client_cls
        self._endpoint = DEFAULT_ENDPOINT
        self._scopes: list[str] | None = None
        self._timeout = DEFAULT_TIMEOUT
        self._retries = DEFAULT_MAX_RETRIES
        self._verify = True
        self._transport: httpx.AsyncBaseTransport | None = None

    def endpoint(self, endpoint: str) -> ClientBuilder[C]:
        self._endpoint = endpoint
        return self

    def scopes(self, scopes: Sequence[str]) -> ClientBuilder[C]:
        self._scopes = list(scopes)
        return self

    def timeout(self, seconds: float) -> ClientBuilder[C]:
        self._timeout = seconds
        return self

    def retry(self, retries: int) -> ClientBuilder[C]:
        self._retries = retries
        return self

    def verify(self, verify: bool) -> ClientBuilder[C]:
        self._verify = verify
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> ClientBuilder[C]:
        self._transport = transport
        return self

    def build(self, client_cls: type[C] | None = None) -> C:
        cls = client_cls or self._client_cls
        if cls is None:
            raise TypeError("No client class given to build")
        return cls(
            self._credential,
            endpoint=self._endpoint,
            scopes=self._scopes,
            timeout=self._timeout,
            retries=self._retries,
            verify=self._verify,
            transport=self._transport,
        )
