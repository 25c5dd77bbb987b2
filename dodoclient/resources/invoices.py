"""Invoice PDFs for payments and refunds."""

from typing import TYPE_CHECKING

from dodoclient._types import RequestOptions
from dodoclient.resources._resource import APIResource

if TYPE_CHECKING:
    from dodoclient._base_client import BaseClient

__all__ = ['InvoicePayments', 'Invoices']

_PDF_HEADERS = {'Accept': 'application/pdf'}


class InvoicePayments(APIResource):
    """Raw PDF downloads; the bytes are returned as received."""

    def retrieve(self, payment_id: str, *, options: RequestOptions | None = None) -> bytes:
        return self._client.request(
            'get',
            'invoices/payments/%1$s',
            path_params=[payment_id],
            headers=_PDF_HEADERS,
            options=options,
            cast_to=bytes,
        )

    async def aretrieve(
        self, payment_id: str, *, options: RequestOptions | None = None
    ) -> bytes:
        return await self._client.arequest(
            'get',
            'invoices/payments/%1$s',
            path_params=[payment_id],
            headers=_PDF_HEADERS,
            options=options,
            cast_to=bytes,
        )

    def retrieve_refund(
        self, refund_id: str, *, options: RequestOptions | None = None
    ) -> bytes:
        return self._client.request(
            'get',
            'invoices/refunds/%1$s',
            path_params=[refund_id],
            headers=_PDF_HEADERS,
            options=options,
            cast_to=bytes,
        )

    async def aretrieve_refund(
        self, refund_id: str, *, options: RequestOptions | None = None
    ) -> bytes:
        return await self._client.arequest(
            'get',
            'invoices/refunds/%1$s',
            path_params=[refund_id],
            headers=_PDF_HEADERS,
            options=options,
            cast_to=bytes,
        )


class Invoices(APIResource):
    def __init__(self, client: 'BaseClient') -> None:
        super().__init__(client)
        self.payments = InvoicePayments(client)
