"""HTTP request infrastructure shared by the API client.

:class:`BaseClient` owns the request plumbing: it builds a
:class:`~dodoclient._types.PageRequest`, sends it through httpx (sync or
async), turns transport and status failures into SDK exceptions, and decodes
the body into the declared response type or page class.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from httpx import AsyncClient, Client, Response, TimeoutException, TransportError

from dodoclient._serialization import coerce, format_path
from dodoclient._types import HeaderValue, HttpMethod, PageRequest, RequestOptions
from dodoclient._version import __version__
from dodoclient.exceptions import (
    APIConnectionError,
    APIResponseValidationError,
    APIStatusError,
    APITimeoutError,
)

if TYPE_CHECKING:
    from dodoclient.pagination import BasePage

__all__ = ['BaseClient', 'DEFAULT_TIMEOUT']

logger = logging.getLogger(__name__)

T = TypeVar('T')
PageT = TypeVar('PageT', bound='BasePage')

DEFAULT_TIMEOUT = 60.0

_JSON_CONTENT_TYPES = ('application/json', '+json')


class BaseClient:
    """Base HTTP client with request infrastructure.

    Resource classes call :meth:`request` / :meth:`arequest`; pages call
    :meth:`fetch_page` / :meth:`afetch_page` to reissue list requests.

    Args:
        base_url: Base URL for API requests.
        api_key: Bearer token sent in the ``Authorization`` header.
        timeout: Request timeout in seconds.
        headers: Default headers to include in all requests.
        http_client: Custom httpx.Client for sync requests.
        async_http_client: Custom httpx.AsyncClient for async requests.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        http_client: Client | None = None,
        async_http_client: AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout
        self.headers = headers or {}
        self._client = http_client
        self._async_client = async_http_client

    def close(self) -> None:
        """Close the sync httpx client passed at construction, if any."""
        if self._client is not None:
            self._client.close()

    async def aclose(self) -> None:
        """Close both httpx clients passed at construction, if any."""
        if self._async_client is not None:
            await self._async_client.aclose()
        self.close()

    def __enter__(self) -> 'BaseClient':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> 'BaseClient':
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @property
    def auth_headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        return {'Authorization': f'Bearer {self.api_key}'}

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            'User-Agent': f'dodoclient/{__version__}',
            **self.auth_headers,
            **self.headers,
        }

    def build_request(
        self,
        method: HttpMethod,
        path: str,
        *,
        path_params: Iterable[Any] = (),
        query: Mapping[str, Any] | None = None,
        headers: Mapping[str, HeaderValue] | None = None,
        body: Any = None,
        options: RequestOptions | None = None,
    ) -> PageRequest:
        """Assemble the request descriptor for one call."""
        options = options or RequestOptions()
        if options.extra_body and isinstance(body, Mapping):
            body = {**body, **options.extra_body}
        elif options.extra_body and body is None:
            body = dict(options.extra_body)
        merged_query = {**(query or {}), **options.extra_query}
        if options.page_number is not None:
            merged_query['page_number'] = options.page_number
        return PageRequest(
            method=method,
            path=format_path(path, *path_params),
            query=merged_query,
            headers={**(headers or {}), **options.extra_headers},
            body=body,
        )

    def _prepare(
        self, page_request: PageRequest, options: RequestOptions | None
    ) -> dict[str, Any]:
        merged_headers: dict[str, HeaderValue] = {
            **self.default_headers,
            **page_request.headers,
        }
        header_items = []
        for key, value in merged_headers.items():
            if value is None:
                continue
            if isinstance(value, list):
                header_items.extend((key, item) for item in value)
            else:
                header_items.append((key, value))

        filtered_params = {k: v for k, v in page_request.query.items() if v is not None}
        timeout = options.timeout if options and options.timeout is not None else None

        return {
            'method': page_request.method.upper(),
            'url': f'{self.base_url}/{page_request.path.lstrip("/")}',
            'params': filtered_params or None,
            'headers': header_items,
            'json': page_request.body,
            'timeout': timeout if timeout is not None else self.timeout,
        }

    def _request(
        self, page_request: PageRequest, options: RequestOptions | None = None
    ) -> Response:
        kwargs = self._prepare(page_request, options)
        logger.debug(f'Sending {kwargs["method"]} {kwargs["url"]}')
        try:
            if self._client:
                response = self._client.request(**kwargs)
            else:
                with Client() as client:
                    response = client.request(**kwargs)
        except TimeoutException as e:
            raise APITimeoutError(request=_request_of(e), cause=e) from e
        except TransportError as e:
            raise APIConnectionError(request=_request_of(e), cause=e) from e
        if response.is_error:
            logger.warning(
                f'{kwargs["method"]} {kwargs["url"]} failed with HTTP {response.status_code}'
            )
            raise APIStatusError.from_response(response)
        return response

    async def _request_async(
        self, page_request: PageRequest, options: RequestOptions | None = None
    ) -> Response:
        kwargs = self._prepare(page_request, options)
        logger.debug(f'Sending {kwargs["method"]} {kwargs["url"]}')
        try:
            if self._async_client:
                response = await self._async_client.request(**kwargs)
            else:
                async with AsyncClient() as client:
                    response = await client.request(**kwargs)
        except TimeoutException as e:
            raise APITimeoutError(request=_request_of(e), cause=e) from e
        except TransportError as e:
            raise APIConnectionError(request=_request_of(e), cause=e) from e
        if response.is_error:
            logger.warning(
                f'{kwargs["method"]} {kwargs["url"]} failed with HTTP {response.status_code}'
            )
            raise APIStatusError.from_response(response)
        return response

    def _parse_response(self, response: Response, cast_to: Any) -> Any:
        if cast_to is None:
            return None
        if cast_to is bytes:
            return response.content
        content_type = response.headers.get('content-type', '')
        if cast_to is str or not any(t in content_type for t in _JSON_CONTENT_TYPES):
            return response.text
        return coerce(cast_to, self._decode_json(response), response=response)

    def _decode_json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise APIResponseValidationError(
                'JSON', body=response.text, response=response
            ) from e

    def request(
        self,
        method: HttpMethod,
        path: str,
        *,
        path_params: Iterable[Any] = (),
        query: Mapping[str, Any] | None = None,
        headers: Mapping[str, HeaderValue] | None = None,
        body: Any = None,
        options: RequestOptions | None = None,
        cast_to: Any = None,
        page: type[PageT] | None = None,
    ) -> Any:
        """Send one request and decode the response.

        Args:
            method: HTTP verb.
            path: Path template relative to the base URL, with ``%N$s``
                placeholders for ``path_params``.
            query: Query parameters; ``None`` values are not sent.
            headers: Per-call headers; a ``None`` value removes a default.
            body: JSON body.
            options: Per-call overrides.
            cast_to: Response type (a model, ``list[...]``, ``str``, ``bytes``)
                or ``None`` when the endpoint returns no content. For paged
                endpoints this is the item type.
            page: Page class wrapping the response of a list endpoint.
        """
        page_request = self.build_request(
            method,
            path,
            path_params=path_params,
            query=query,
            headers=headers,
            body=body,
            options=options,
        )
        if page is not None:
            return self.fetch_page(page, cast_to, page_request, options)
        response = self._request(page_request, options)
        return self._parse_response(response, cast_to)

    async def arequest(
        self,
        method: HttpMethod,
        path: str,
        *,
        path_params: Iterable[Any] = (),
        query: Mapping[str, Any] | None = None,
        headers: Mapping[str, HeaderValue] | None = None,
        body: Any = None,
        options: RequestOptions | None = None,
        cast_to: Any = None,
        page: type[PageT] | None = None,
    ) -> Any:
        """Async version of :meth:`request`."""
        page_request = self.build_request(
            method,
            path,
            path_params=path_params,
            query=query,
            headers=headers,
            body=body,
            options=options,
        )
        if page is not None:
            return await self.afetch_page(page, cast_to, page_request, options)
        response = await self._request_async(page_request, options)
        return self._parse_response(response, cast_to)

    def fetch_page(
        self,
        page: type[PageT],
        item_type: Any,
        page_request: PageRequest,
        options: RequestOptions | None = None,
    ) -> PageT:
        """Send a list request and wrap the response in ``page``."""
        response = self._request(page_request, options)
        return page(
            item_type=item_type,
            client=self,
            request=page_request,
            options=options or RequestOptions(),
            body=self._decode_json(response),
        )

    async def afetch_page(
        self,
        page: type[PageT],
        item_type: Any,
        page_request: PageRequest,
        options: RequestOptions | None = None,
    ) -> PageT:
        """Async version of :meth:`fetch_page`."""
        response = await self._request_async(page_request, options)
        return page(
            item_type=item_type,
            client=self,
            request=page_request,
            options=options or RequestOptions(),
            body=self._decode_json(response),
        )


def _request_of(error: TransportError) -> Any:
    # httpx raises RuntimeError from .request when the error was not bound to one
    try:
        return error.request
    except RuntimeError:
        return None
