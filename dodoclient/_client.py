"""API Client.

:class:`DodoPayments` resolves its configuration and exposes every resource
group as an attribute. The HTTP plumbing lives in
:class:`~dodoclient._base_client.BaseClient`.
"""

import logging

from httpx import AsyncClient, Client

from dodoclient._base_client import BaseClient
from dodoclient.config import ENVIRONMENT_URLS, ClientSettings, Environment
from dodoclient.resources import (
    Addons,
    Balances,
    Brands,
    CheckoutSessions,
    Customers,
    Discounts,
    Disputes,
    Invoices,
    LicenseKeyInstances,
    LicenseKeys,
    Licenses,
    Meters,
    Misc,
    Payments,
    Payouts,
    Products,
    Refunds,
    Subscriptions,
    UsageEvents,
    Webhooks,
)

__all__ = ['DodoPayments']

logger = logging.getLogger(__name__)


class DodoPayments(BaseClient):
    """Client for the Dodo Payments API.

    Arguments win over settings; settings come from ``DODO_PAYMENTS_*``
    environment variables unless passed explicitly (see
    :func:`dodoclient.config.get_settings` for file-based settings).

    Example:
        >>> client = DodoPayments()
        >>> # api key from DODO_PAYMENTS_API_KEY, live environment

        >>> client = DodoPayments(api_key='sk_test_...', environment='test_mode')
        >>> payment = client.payments.retrieve('pay_123')

        >>> import httpx
        >>> with httpx.Client() as http_client:
        ...     client = DodoPayments(http_client=http_client)
        ...     # Use custom HTTP client (useful for testing/mocking)

    Args:
        api_key: Bearer token.
        base_url: Overrides the URL chosen by ``environment``.
        environment: ``'live_mode'`` or ``'test_mode'``.
        timeout: Request timeout in seconds.
        headers: Headers added to every request.
        http_client: Custom httpx.Client for sync requests.
        async_http_client: Custom httpx.AsyncClient for async requests.
        settings: Settings to fall back on; read from the environment when
            omitted.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        environment: Environment | str | None = None,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        http_client: Client | None = None,
        async_http_client: AsyncClient | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        settings = settings or ClientSettings()

        if base_url is None:
            if environment is not None:
                base_url = ENVIRONMENT_URLS[Environment(environment)]
            else:
                base_url = settings.resolved_base_url()

        super().__init__(
            base_url=base_url,
            api_key=api_key if api_key is not None else settings.api_key,
            timeout=timeout if timeout is not None else settings.timeout,
            headers={**settings.default_headers, **(headers or {})},
            http_client=http_client,
            async_http_client=async_http_client,
        )
        if not self.api_key:
            logger.debug('No API key configured; requests will be unauthenticated')

        self.payments = Payments(self)
        self.subscriptions = Subscriptions(self)
        self.invoices = Invoices(self)
        self.customers = Customers(self)
        self.refunds = Refunds(self)
        self.disputes = Disputes(self)
        self.payouts = Payouts(self)
        self.licenses = Licenses(self)
        self.license_keys = LicenseKeys(self)
        self.license_key_instances = LicenseKeyInstances(self)
        self.webhooks = Webhooks(self)
        self.meters = Meters(self)
        self.usage_events = UsageEvents(self)
        self.balances = Balances(self)
        self.discounts = Discounts(self)
        self.products = Products(self)
        self.addons = Addons(self)
        self.brands = Brands(self)
        self.checkout_sessions = CheckoutSessions(self)
        self.misc = Misc(self)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(base_url={self.base_url!r})'
