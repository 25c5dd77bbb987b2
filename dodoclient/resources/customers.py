"""Customers, with their portal sessions and wallets as sub-resources."""

from typing import TYPE_CHECKING, Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.customers import (
    Customer,
    CustomerCreateParams,
    CustomerGetPaymentMethodsResponse,
    CustomerListParams,
    CustomerPortalCreateParams,
    CustomerPortalSession,
    CustomerUpdateParams,
    CustomerWallet,
    CustomerWalletTransaction,
    LedgerEntryCreateParams,
    LedgerEntryListParams,
    WalletListResponse,
)

if TYPE_CHECKING:
    from dodoclient._base_client import BaseClient

__all__ = ['CustomerPortal', 'Customers', 'LedgerEntries', 'Wallets']


class CustomerPortal(APIResource):
    def create(
        self,
        customer_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> CustomerPortalSession:
        """Open a customer portal session and return its link.

        With ``send_email=True`` the link is also mailed to the customer.
        """
        return self._client.request(
            'post',
            'customers/%1$s/customer-portal/session',
            path_params=[customer_id],
            query=self._payload(CustomerPortalCreateParams, params, fields),
            options=options,
            cast_to=CustomerPortalSession,
        )

    async def acreate(
        self,
        customer_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> CustomerPortalSession:
        return await self._client.arequest(
            'post',
            'customers/%1$s/customer-portal/session',
            path_params=[customer_id],
            query=self._payload(CustomerPortalCreateParams, params, fields),
            options=options,
            cast_to=CustomerPortalSession,
        )


class LedgerEntries(APIResource):
    def create(
        self,
        customer_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> CustomerWallet:
        """Credit or debit a customer wallet; returns the updated wallet."""
        return self._client.request(
            'post',
            'customers/%1$s/wallets/ledger-entries',
            path_params=[customer_id],
            body=self._payload(LedgerEntryCreateParams, params, fields),
            options=options,
            cast_to=CustomerWallet,
        )

    async def acreate(
        self,
        customer_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> CustomerWallet:
        return await self._client.arequest(
            'post',
            'customers/%1$s/wallets/ledger-entries',
            path_params=[customer_id],
            body=self._payload(LedgerEntryCreateParams, params, fields),
            options=options,
            cast_to=CustomerWallet,
        )

    def list(
        self,
        customer_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> DefaultPageNumberPagination[CustomerWalletTransaction]:
        return self._client.request(
            'get',
            'customers/%1$s/wallets/ledger-entries',
            path_params=[customer_id],
            query=self._payload(LedgerEntryListParams, params, fields),
            options=options,
            cast_to=CustomerWalletTransaction,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self,
        customer_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> DefaultPageNumberPagination[CustomerWalletTransaction]:
        return await self._client.arequest(
            'get',
            'customers/%1$s/wallets/ledger-entries',
            path_params=[customer_id],
            query=self._payload(LedgerEntryListParams, params, fields),
            options=options,
            cast_to=CustomerWalletTransaction,
            page=DefaultPageNumberPagination,
        )


class Wallets(APIResource):
    def __init__(self, client: 'BaseClient') -> None:
        super().__init__(client)
        self.ledger_entries = LedgerEntries(client)

    def list(
        self, customer_id: str, *, options: RequestOptions | None = None
    ) -> WalletListResponse:
        """Return every wallet of the customer, one per currency."""
        return self._client.request(
            'get',
            'customers/%1$s/wallets',
            path_params=[customer_id],
            options=options,
            cast_to=WalletListResponse,
        )

    async def alist(
        self, customer_id: str, *, options: RequestOptions | None = None
    ) -> WalletListResponse:
        return await self._client.arequest(
            'get',
            'customers/%1$s/wallets',
            path_params=[customer_id],
            options=options,
            cast_to=WalletListResponse,
        )


class Customers(APIResource):
    def __init__(self, client: 'BaseClient') -> None:
        super().__init__(client)
        self.customer_portal = CustomerPortal(client)
        self.wallets = Wallets(client)

    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Customer:
        return self._client.request(
            'post',
            'customers',
            body=self._payload(CustomerCreateParams, params, fields),
            options=options,
            cast_to=Customer,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> Customer:
        return await self._client.arequest(
            'post',
            'customers',
            body=self._payload(CustomerCreateParams, params, fields),
            options=options,
            cast_to=Customer,
        )

    def retrieve(self, customer_id: str, *, options: RequestOptions | None = None) -> Customer:
        return self._client.request(
            'get', 'customers/%1$s', path_params=[customer_id], options=options, cast_to=Customer
        )

    async def aretrieve(
        self, customer_id: str, *, options: RequestOptions | None = None
    ) -> Customer:
        return await self._client.arequest(
            'get', 'customers/%1$s', path_params=[customer_id], options=options, cast_to=Customer
        )

    def update(
        self,
        customer_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> Customer:
        return self._client.request(
            'patch',
            'customers/%1$s',
            path_params=[customer_id],
            body=self._payload(CustomerUpdateParams, params, fields),
            options=options,
            cast_to=Customer,
        )

    async def aupdate(
        self,
        customer_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> Customer:
        return await self._client.arequest(
            'patch',
            'customers/%1$s',
            path_params=[customer_id],
            body=self._payload(CustomerUpdateParams, params, fields),
            options=options,
            cast_to=Customer,
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Customer]:
        return self._client.request(
            'get',
            'customers',
            query=self._payload(CustomerListParams, params, fields),
            options=options,
            cast_to=Customer,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Customer]:
        return await self._client.arequest(
            'get',
            'customers',
            query=self._payload(CustomerListParams, params, fields),
            options=options,
            cast_to=Customer,
            page=DefaultPageNumberPagination,
        )

    def retrieve_payment_methods(
        self, customer_id: str, *, options: RequestOptions | None = None
    ) -> CustomerGetPaymentMethodsResponse:
        return self._client.request(
            'get',
            'customers/%1$s/payment-methods',
            path_params=[customer_id],
            options=options,
            cast_to=CustomerGetPaymentMethodsResponse,
        )

    async def aretrieve_payment_methods(
        self, customer_id: str, *, options: RequestOptions | None = None
    ) -> CustomerGetPaymentMethodsResponse:
        return await self._client.arequest(
            'get',
            'customers/%1$s/payment-methods',
            path_params=[customer_id],
            options=options,
            cast_to=CustomerGetPaymentMethodsResponse,
        )
