"""Subscriptions and their lifecycle operations."""

from typing import Any

from dodoclient._types import RequestOptions
from dodoclient.pagination import DefaultPageNumberPagination
from dodoclient.resources._resource import APIResource, Params
from dodoclient.types.subscriptions import (
    Subscription,
    SubscriptionChangePlanParams,
    SubscriptionChargeParams,
    SubscriptionChargeResponse,
    SubscriptionCreateParams,
    SubscriptionListParams,
    SubscriptionNewResponse,
    SubscriptionPreviewChangePlanParams,
    SubscriptionPreviewChangePlanResponse,
    SubscriptionRetrieveUsageHistoryParams,
    SubscriptionUpdateParams,
    SubscriptionUpdatePaymentMethodParams,
    SubscriptionUpdatePaymentMethodResponse,
    UsageHistoryPeriod,
)

__all__ = ['Subscriptions']


class Subscriptions(APIResource):
    def create(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> SubscriptionNewResponse:
        return self._client.request(
            'post',
            'subscriptions',
            body=self._payload(SubscriptionCreateParams, params, fields),
            options=options,
            cast_to=SubscriptionNewResponse,
        )

    async def acreate(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> SubscriptionNewResponse:
        return await self._client.arequest(
            'post',
            'subscriptions',
            body=self._payload(SubscriptionCreateParams, params, fields),
            options=options,
            cast_to=SubscriptionNewResponse,
        )

    def retrieve(
        self, subscription_id: str, *, options: RequestOptions | None = None
    ) -> Subscription:
        return self._client.request(
            'get',
            'subscriptions/%1$s',
            path_params=[subscription_id],
            options=options,
            cast_to=Subscription,
        )

    async def aretrieve(
        self, subscription_id: str, *, options: RequestOptions | None = None
    ) -> Subscription:
        return await self._client.arequest(
            'get',
            'subscriptions/%1$s',
            path_params=[subscription_id],
            options=options,
            cast_to=Subscription,
        )

    def update(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> Subscription:
        """Patch a subscription. Only the fields passed are sent."""
        return self._client.request(
            'patch',
            'subscriptions/%1$s',
            path_params=[subscription_id],
            body=self._payload(SubscriptionUpdateParams, params, fields),
            options=options,
            cast_to=Subscription,
        )

    async def aupdate(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> Subscription:
        return await self._client.arequest(
            'patch',
            'subscriptions/%1$s',
            path_params=[subscription_id],
            body=self._payload(SubscriptionUpdateParams, params, fields),
            options=options,
            cast_to=Subscription,
        )

    def list(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Subscription]:
        return self._client.request(
            'get',
            'subscriptions',
            query=self._payload(SubscriptionListParams, params, fields),
            options=options,
            cast_to=Subscription,
            page=DefaultPageNumberPagination,
        )

    async def alist(
        self, params: Params = None, *, options: RequestOptions | None = None, **fields: Any
    ) -> DefaultPageNumberPagination[Subscription]:
        return await self._client.arequest(
            'get',
            'subscriptions',
            query=self._payload(SubscriptionListParams, params, fields),
            options=options,
            cast_to=Subscription,
            page=DefaultPageNumberPagination,
        )

    def change_plan(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> None:
        """Move a subscription to another product.

        ``proration_billing_mode`` decides how the switch is charged.
        """
        return self._client.request(
            'post',
            'subscriptions/%1$s/change-plan',
            path_params=[subscription_id],
            body=self._payload(SubscriptionChangePlanParams, params, fields),
            options=options,
        )

    async def achange_plan(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> None:
        return await self._client.arequest(
            'post',
            'subscriptions/%1$s/change-plan',
            path_params=[subscription_id],
            body=self._payload(SubscriptionChangePlanParams, params, fields),
            options=options,
        )

    def preview_change_plan(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionPreviewChangePlanResponse:
        """Price a plan change without applying it.

        Takes the same arguments as :meth:`change_plan` and returns the
        immediate charge with its line items and the resulting subscription.
        """
        return self._client.request(
            'post',
            'subscriptions/%1$s/change-plan/preview',
            path_params=[subscription_id],
            body=self._payload(SubscriptionPreviewChangePlanParams, params, fields),
            options=options,
            cast_to=SubscriptionPreviewChangePlanResponse,
        )

    async def apreview_change_plan(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionPreviewChangePlanResponse:
        return await self._client.arequest(
            'post',
            'subscriptions/%1$s/change-plan/preview',
            path_params=[subscription_id],
            body=self._payload(SubscriptionPreviewChangePlanParams, params, fields),
            options=options,
            cast_to=SubscriptionPreviewChangePlanResponse,
        )

    def charge(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionChargeResponse:
        """Charge an on-demand subscription."""
        return self._client.request(
            'post',
            'subscriptions/%1$s/charge',
            path_params=[subscription_id],
            body=self._payload(SubscriptionChargeParams, params, fields),
            options=options,
            cast_to=SubscriptionChargeResponse,
        )

    async def acharge(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionChargeResponse:
        return await self._client.arequest(
            'post',
            'subscriptions/%1$s/charge',
            path_params=[subscription_id],
            body=self._payload(SubscriptionChargeParams, params, fields),
            options=options,
            cast_to=SubscriptionChargeResponse,
        )

    def retrieve_usage_history(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> DefaultPageNumberPagination[UsageHistoryPeriod]:
        return self._client.request(
            'get',
            'subscriptions/%1$s/usage-history',
            path_params=[subscription_id],
            query=self._payload(SubscriptionRetrieveUsageHistoryParams, params, fields),
            options=options,
            cast_to=UsageHistoryPeriod,
            page=DefaultPageNumberPagination,
        )

    async def aretrieve_usage_history(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> DefaultPageNumberPagination[UsageHistoryPeriod]:
        return await self._client.arequest(
            'get',
            'subscriptions/%1$s/usage-history',
            path_params=[subscription_id],
            query=self._payload(SubscriptionRetrieveUsageHistoryParams, params, fields),
            options=options,
            cast_to=UsageHistoryPeriod,
            page=DefaultPageNumberPagination,
        )

    def update_payment_method(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionUpdatePaymentMethodResponse:
        """Switch the subscription to a new or a saved payment method.

        Pass ``type='new'`` (optionally with ``return_url``) or
        ``type='existing'`` with ``payment_method_id``.
        """
        return self._client.request(
            'post',
            'subscriptions/%1$s/update-payment-method',
            path_params=[subscription_id],
            body=self._payload(SubscriptionUpdatePaymentMethodParams, params, fields),
            options=options,
            cast_to=SubscriptionUpdatePaymentMethodResponse,
        )

    async def aupdate_payment_method(
        self,
        subscription_id: str,
        params: Params = None,
        *,
        options: RequestOptions | None = None,
        **fields: Any,
    ) -> SubscriptionUpdatePaymentMethodResponse:
        return await self._client.arequest(
            'post',
            'subscriptions/%1$s/update-payment-method',
            path_params=[subscription_id],
            body=self._payload(SubscriptionUpdatePaymentMethodParams, params, fields),
            options=options,
            cast_to=SubscriptionUpdatePaymentMethodResponse,
        )
