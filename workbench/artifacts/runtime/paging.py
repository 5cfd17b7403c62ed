"""Lazy, demand-driven iteration over paged listings.

A listing is fetched one page at a time: the first page via ``fetch_first``,
every following page via ``fetch_next`` with the continuation token of the
page before it. Nothing is fetched ahead of the consumer, and a page without
a continuation token ends the iteration without another call.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Generic, TypeVar

from ..models.page import ResourcePage
from .telemetry import log_page_fetched

ItemT = TypeVar("ItemT")


class AsyncPager(Generic[ItemT]):
    """Single-pass async sequence of items backed by a continuation token.

    Iterate items with ``async for``, or whole pages with ``by_page()``.
    An instance may be consumed once, by one consumer; create a new pager
    to list again.
    """

    def __init__(
        self,
        fetch_first: Callable[[], Awaitable[ResourcePage[ItemT]]],
        fetch_next: Callable[[str], Awaitable[ResourcePage[ItemT]]],
    ) -> None:
        self._fetch_first = fetch_first
        self._fetch_next = fetch_next
        self._started = False
        self._items: AsyncIterator[ItemT] | None = None
        self.pages_fetched = 0

    def _claim(self) -> None:
        if self._started:
            raise RuntimeError("AsyncPager is single-pass and has already been iterated")
        self._started = True

    def by_page(self, continuation_token: str | None = None) -> AsyncIterator[ResourcePage[ItemT]]:
        """Iterate pages, optionally resuming from a continuation token."""
        self._claim()
        return self._pages(continuation_token)

    async def _pages(self, token: str | None) -> AsyncIterator[ResourcePage[ItemT]]:
        if token is None:
            page = await self._fetch_first()
        else:
            page = await self._fetch_next(token)
        while True:
            self.pages_fetched += 1
            log_page_fetched(
                page_index=self.pages_fetched - 1,
                items=len(page.value),
                has_next=not page.is_last,
            )
            yield page
            if page.is_last:
                return
            page = await self._fetch_next(page.next_link)

    async def _flatten(self) -> AsyncIterator[ItemT]:
        async for page in self._pages(None):
            for item in page.value:
                yield item

    def __aiter__(self) -> AsyncPager[ItemT]:
        self._claim()
        self._items = self._flatten()
        return self

    async def __anext__(self) -> ItemT:
        if self._items is None:
            self._claim()
            self._items = self._flatten()
        return await self._items.__anext__()

    async def to_list(self) -> list[ItemT]:
        """Drain the pager into a list."""
        return [item async for item in self]
