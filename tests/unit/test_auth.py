"""Tests for credentials and bearer authentication."""

from __future__ import annotations

import time

import httpx
import pytest

from armkit.client.auth import BearerTokenAuth, StaticTokenCredential, resolve_credential
from armkit.config.models import ArmProfile


class TestStaticTokenCredential:
    @pytest.mark.asyncio
    async def test_returns_token(self):
        token = await StaticTokenCredential("abc").get_token("scope/.default")
        assert token.token == "abc"
        assert token.expires_on > time.time()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with StaticTokenCredential("abc") as cred:
            assert (await cred.get_token("s")).token == "abc"


class TestBearerTokenAuth:
    @pytest.mark.asyncio
    async def test_sets_header(self):
        auth = BearerTokenAuth(StaticTokenCredential("abc"), ["https://x/.default"])
        request = httpx.Request("GET", "https://x/things")
        flow = auth.async_auth_flow(request)
        modified = await flow.__anext__()
        assert modified.headers["Authorization"] == "Bearer abc"

    def test_scope_joined(self):
        auth = BearerTokenAuth(StaticTokenCredential("abc"), ["a", "b"])
        assert auth.scope == "a b"


class TestResolveCredential:
    def test_static_token(self):
        cred = resolve_credential(ArmProfile(name="t", token="abc"))
        assert isinstance(cred, StaticTokenCredential)
        assert cred.token == "abc"

    @pytest.mark.asyncio
    async def test_default_chain(self):
        from azure.identity.aio import DefaultAzureCredential

        cred = resolve_credential(ArmProfile(name="t"))
        try:
            assert isinstance(cred, DefaultAzureCredential)
        finally:
            await cred.close()
