"""Tests for the lazy pager."""

from __future__ import annotations

import pytest

from armkit.client.paging import Continuable, Pageable
from armkit.models.base import ListResult


class Page(ListResult[int]):
    pass


def _pager(pages: dict[str | None, Page], calls: list[str | None]) -> Pageable[Page]:
    async def make_request(token: str | None) -> Page:
        calls.append(token)
        return pages[token]

    return Pageable(make_request)


PAGES = {
    None: Page(value=[1, 2], next_link="p2"),
    "p2": Page(value=[3], next_link="p3"),
    "p3": Page(value=[4, 5]),
}


class TestPageable:
    def test_page_is_continuable(self):
        assert isinstance(Page(), Continuable)

    @pytest.mark.asyncio
    async def test_nothing_fetched_until_iterated(self):
        calls: list[str | None] = []
        _pager(PAGES, calls)
        assert calls == []

    @pytest.mark.asyncio
    async def test_items_across_pages(self):
        calls: list[str | None] = []
        items = await _pager(PAGES, calls).collect()
        assert items == [1, 2, 3, 4, 5]
        assert calls == [None, "p2", "p3"]

    @pytest.mark.asyncio
    async def test_by_page(self):
        calls: list[str | None] = []
        pager = _pager(PAGES, calls)
        pages = [page async for page in pager.by_page()]
        assert [p.value for p in pages] == [[1, 2], [3], [4, 5]]
        assert pager.continuation_token is None

    @pytest.mark.asyncio
    async def test_resume_from_token(self):
        calls: list[str | None] = []
        pages = [page async for page in _pager(PAGES, calls).by_page("p3")]
        assert len(pages) == 1
        assert calls == ["p3"]

    @pytest.mark.asyncio
    async def test_empty_next_link_stops(self):
        calls: list[str | None] = []
        pages = {None: Page(value=[1], next_link="")}
        assert await _pager(pages, calls).collect() == [1]
        assert calls == [None]

    @pytest.mark.asyncio
    async def test_stop_early_keeps_token(self):
        calls: list[str | None] = []
        pager = _pager(PAGES, calls)
        async for page in pager.by_page():
            break
        assert pager.continuation_token == "p2"
        assert calls == [None]

    @pytest.mark.asyncio
    async def test_each_iteration_starts_over(self):
        calls: list[str | None] = []
        pager = _pager(PAGES, calls)
        await pager.collect()
        await pager.collect()
        assert calls == [None, "p2", "p3", None, "p2", "p3"]

    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        async def make_request(token: str | None) -> Page:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await Pageable(make_request).collect()
