"""Page types returned by list endpoints.

Two pagination styles exist in the API:

- :class:`DefaultPageNumberPagination` for numbered pages
  (``page_number`` / ``page_size`` query parameters, items under ``items``).
- :class:`CursorPagePagination` for cursor listings
  (``iterator`` query parameter, items under ``data`` with ``iterator`` and
  ``done`` alongside).

A page wraps one decoded response. It never changes after construction;
asking for the following page issues a new request and returns a new page.

Example:
    >>> page = client.payments.list(page_size=50)
    >>> for payment in page.auto_paging_iter(max_items=200):
    ...     print(payment.payment_id)
"""

from collections.abc import AsyncIterator, Iterator, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from dodoclient._serialization import coerce
from dodoclient._types import PageRequest, RequestOptions
from dodoclient.exceptions import PaginationError

if TYPE_CHECKING:
    from dodoclient._base_client import BaseClient

__all__ = [
    'BasePage',
    'CursorPagePagination',
    'DefaultPageNumberPagination',
]

T = TypeVar('T')


class BasePage(Generic[T]):
    """One page of a list endpoint.

    Subclasses name the response field that holds the items and decide how the
    next request is built.

    Args:
        item_type: Type each raw item is validated into.
        client: Client used to fetch following pages.
        request: The descriptor that produced this page.
        options: Request options the page was fetched with.
        body: Decoded JSON response body.
    """

    items_field: ClassVar[str] = 'items'

    def __init__(
        self,
        *,
        item_type: Any,
        client: 'BaseClient',
        request: PageRequest,
        options: RequestOptions,
        body: Any,
    ) -> None:
        self._item_type = item_type
        self._client = client
        self.request = request
        self.options = options
        self.body: Mapping[str, Any] = body if isinstance(body, Mapping) else {}

        raw_items = self.body.get(self.items_field)
        if raw_items is None:
            self._items: list[T] = []
        else:
            self._items = coerce(list[item_type], raw_items)

    def get_items(self) -> list[T]:
        """Return the decoded items of this page (empty when absent)."""
        return list(self._items)

    def has_next_page(self) -> bool:
        raise NotImplementedError

    def next_request(self) -> PageRequest | None:
        """Return the descriptor for the following page, or ``None``."""
        raise NotImplementedError

    def _next_options(self) -> RequestOptions:
        return self.options

    def _require_next_request(self) -> PageRequest:
        if not self.has_next_page():
            raise PaginationError(type(self).__name__, 'this is the last page')
        next_request = self.next_request()
        if next_request is None:
            raise PaginationError(type(self).__name__, 'no continuation available')
        return next_request

    def get_next_page(self) -> 'BasePage[T]':
        """Fetch the following page.

        Raises:
            PaginationError: If :meth:`has_next_page` is false.
        """
        next_request = self._require_next_request()
        return self._client.fetch_page(
            type(self), self._item_type, next_request, self._next_options()
        )

    async def aget_next_page(self) -> 'BasePage[T]':
        """Async version of :meth:`get_next_page`."""
        next_request = self._require_next_request()
        return await self._client.afetch_page(
            type(self), self._item_type, next_request, self._next_options()
        )

    def iter_pages(self) -> Iterator['BasePage[T]']:
        """Yield this page and every following page."""
        page: BasePage[T] = self
        yield page
        while page.has_next_page():
            page = page.get_next_page()
            yield page

    async def aiter_pages(self) -> AsyncIterator['BasePage[T]']:
        """Async version of :meth:`iter_pages`."""
        page: BasePage[T] = self
        yield page
        while page.has_next_page():
            page = await page.aget_next_page()
            yield page

    def auto_paging_iter(self, *, max_items: int | None = None) -> Iterator[T]:
        """Yield items across pages, one at a time.

        Args:
            max_items: Maximum items to yield (default: unlimited).
        """
        items_yielded = 0
        if max_items is not None and max_items <= 0:
            return
        for page in self.iter_pages():
            for item in page.get_items():
                yield item
                items_yielded += 1
                if max_items is not None and items_yielded >= max_items:
                    return

    async def auto_paging_aiter(
        self, *, max_items: int | None = None
    ) -> AsyncIterator[T]:
        """Async version of :meth:`auto_paging_iter`."""
        items_yielded = 0
        if max_items is not None and max_items <= 0:
            return
        async for page in self.aiter_pages():
            for item in page.get_items():
                yield item
                items_yielded += 1
                if max_items is not None and items_yielded >= max_items:
                    return

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}(items={len(self._items)}, '
            f'path={self.request.path!r})'
        )


class DefaultPageNumberPagination(BasePage[T]):
    """Numbered pages (``page_number``, ``page_size``).

    The response does not say whether more pages exist, so a page is
    considered to have a successor while it is non-empty and, when a page size
    was requested, full.
    """

    items_field = 'items'

    @property
    def items(self) -> list[T]:
        return self.get_items()

    @property
    def current_page_number(self) -> int:
        """Page this response belongs to; the API counts from 0."""
        value = self.request.query.get('page_number')
        return int(value) if value is not None else 0

    def has_next_page(self) -> bool:
        if not self._items:
            return False
        page_size = self.request.query.get('page_size')
        if page_size is not None and len(self._items) < int(page_size):
            return False
        return True

    def next_request(self) -> PageRequest:
        return self.request.with_query(page_number=self.current_page_number + 1)

    def _next_options(self) -> RequestOptions:
        return self.options.merge(page_number=self.current_page_number + 1)


class CursorPagePagination(BasePage[T]):
    """Cursor pages (``iterator`` token, ``done`` flag).

    The items live under ``data``.
    """

    items_field = 'data'

    @property
    def data(self) -> list[T]:
        return self.get_items()

    @property
    def iterator(self) -> str | None:
        value = self.body.get('iterator')
        return str(value) if value is not None else None

    @property
    def done(self) -> bool | None:
        value = self.body.get('done')
        return bool(value) if value is not None else None

    def has_next_page(self) -> bool:
        # All three must hold; a missing token always ends the listing.
        return self.done is True and bool(self._items) and bool(self.iterator)

    def next_request(self) -> PageRequest | None:
        if not self.iterator:
            return None
        return self.request.with_query(iterator=self.iterator)
