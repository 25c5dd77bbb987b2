from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.balances import BalanceLedgerEntry, BalanceRetrieveLedgerParams

__all__ = ['Balances']


class Balances(APIResource):
    def retrieve_ledger(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[BalanceLedgerEntry]:
        return self._client.request(
            'get',
            'balances/ledger',
            query=self._payload(BalanceRetrieveLedgerParams, params, fields),
            options=options,
            cast_to=BalanceLedgerEntry,
            page=DefaultPageNumberPagination,
        )

    async def aretrieve_ledger(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[BalanceLedgerEntry]:
        return await self._client.arequest(
            'get',
            'balances/ledger',
            query=self._payload(BalanceRetrieveLedgerParams, params, fields),
            options=options,
            cast_to=BalanceLedgerEntry,
            page=DefaultPageNumberPagination,
        )
