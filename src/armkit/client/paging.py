"""Lazy paging over ARM list operations that follow ``nextLink``."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from loguru import logger


@runtime_checkable
class Continuable(Protocol):
    """A page that knows whether another page follows it."""

    def continuation(self) -> str | None: ...


P = TypeVar("P", bound=Continuable)

PageRequest = Callable[[str | None], Awaitable[P]]


class Pageable(Generic[P]):
    """Forward-only async sequence of pages fetched on demand.

    *make_request* is called with ``None`` for the first page and with the
    previous page's continuation for every page after it. Iteration stops as
    soon as a page has no continuation. Nothing is fetched until iteration
    starts, and each iteration starts over from the first page (or from the
    token handed to :meth:`by_page`).

    ``async for item in pageable`` yields the items of each page's ``value``;
    :meth:`by_page` yields the pages themselves.
    """

    def __init__(self, make_request: PageRequest[P]) -> None:
        self._make_request = make_request
        self.continuation_token: str | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(continuation_token={self.continuation_token!r})"

    async def by_page(
        self, continuation_token: str | None = None,
    ) -> AsyncIterator[P]:
        """Yield whole pages, optionally resuming from a saved token."""
        token = continuation_token
        pages = 0
        while True:
            page = await self._make_request(token)
            pages += 1
            token = page.continuation()
            self.continuation_token = token
            logger.debug(f"Fetched page {pages}, more pages: {token is not None}")
            yield page
            if token is None:
                return

    async def _iter_items(self) -> AsyncIterator[Any]:
        async for page in self.by_page():
            for item in getattr(page, "value", None) or []:
                yield item

    def __aiter__(self) -> AsyncIterator[Any]:
        return self._iter_items()

    async def collect(self) -> list[Any]:
        """Drain every page and return all items."""
        return [item async for item in self]
