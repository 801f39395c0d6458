"""Bearer-token authentication for ARM requests."""

from __future__ import annotations

import time
from collections.abc import AsyncGenerator, Sequence
from typing import Any

import httpx
from azure.core.credentials import AccessToken
from azure.core.credentials_async import AsyncTokenCredential
from loguru import logger

from armkit.config.models import ArmProfile

# Static tokens carry no expiry; report one far enough out to never refresh.
_STATIC_TOKEN_LIFETIME = 3600


class StaticTokenCredential(AsyncTokenCredential):
    """Credential that always returns the same pre-issued access token."""

    def __init__(self, token: str) -> None:
        self.token = token

    async def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        return AccessToken(self.token, int(time.time()) + _STATIC_TOKEN_LIFETIME)

    async def close(self) -> None:
        pass

    async def __aexit__(self, *args: Any) -> None:
        pass


class BearerTokenAuth(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` from an async credential.

    A token is requested on every request; any caching is the credential's
    business. The scopes are passed as one space-joined string.
    """

    def __init__(
        self, credential: AsyncTokenCredential, scopes: Sequence[str],
    ) -> None:
        self.credential = credential
        self.scopes = list(scopes)

    @property
    def scope(self) -> str:
        return " ".join(self.scopes)

    async def async_auth_flow(
        self, request: httpx.Request,
    ) -> AsyncGenerator[httpx.Request, httpx.Response]:
        token = await self.credential.get_token(self.scope)
        request.headers["Authorization"] = f"Bearer {token.token}"
        yield request


def resolve_credential(profile: ArmProfile) -> AsyncTokenCredential:
    """Resolve the credential for a profile.

    A configured token wins; otherwise fall back to the azure-identity chain
    (environment, managed identity, Azure CLI, ...).
    """
    if profile.token:
        return StaticTokenCredential(profile.token)
    from azure.identity.aio import DefaultAzureCredential

    logger.debug("No token configured, using DefaultAzureCredential")
    return DefaultAzureCredential()
