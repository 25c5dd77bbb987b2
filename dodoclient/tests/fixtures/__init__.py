"""Test fixtures for dodoclient tests.

This module provides sample API payloads and a recording transport for
driving the client without a network.
"""

import json

import httpx

from dodoclient import ClientSettings, DodoPayments

BASE_URL = 'https://api.test'

CUSTOMER = {
    'customer_id': 'cus_1',
    'email': 'ada@example.com',
    'name': 'Ada Lovelace',
}

FULL_CUSTOMER = {
    **CUSTOMER,
    'business_id': 'bus_1',
    'created_at': '2025-01-01T00:00:00Z',
}

PAYMENT_LIST_ITEM = {
    'brand_id': 'brd_1',
    'created_at': '2025-01-15T10:00:00Z',
    'currency': 'USD',
    'customer': CUSTOMER,
    'digital_products_delivered': False,
    'metadata': {},
    'payment_id': 'pay_1',
    'total_amount': 1500,
    'status': 'succeeded',
}

PAYMENT = {
    'billing': {'country': 'US', 'city': 'Boston'},
    'brand_id': 'brd_1',
    'business_id': 'bus_1',
    'created_at': '2025-01-15T10:00:00Z',
    'currency': 'USD',
    'customer': CUSTOMER,
    'digital_products_delivered': True,
    'disputes': [],
    'metadata': {'order': '42'},
    'payment_id': 'pay_1',
    'refunds': [],
    'settlement_amount': 1500,
    'settlement_currency': 'USD',
    'total_amount': 1500,
    'status': 'succeeded',
}

REFUND = {
    'business_id': 'bus_1',
    'created_at': '2025-01-16T10:00:00Z',
    'customer': CUSTOMER,
    'is_partial': False,
    'payment_id': 'pay_1',
    'refund_id': 'ref_1',
    'status': 'succeeded',
    'amount': 1500,
    'currency': 'USD',
}

SUBSCRIPTION = {
    'addons': [],
    'billing': {'country': 'DE'},
    'cancel_at_next_billing_date': False,
    'created_at': '2025-01-01T00:00:00Z',
    'currency': 'EUR',
    'customer': CUSTOMER,
    'metadata': {},
    'next_billing_date': '2025-02-01T00:00:00Z',
    'on_demand': False,
    'payment_frequency_count': 1,
    'payment_frequency_interval': 'Month',
    'previous_billing_date': '2025-01-01T00:00:00Z',
    'product_id': 'pdt_1',
    'quantity': 1,
    'recurring_pre_tax_amount': 999,
    'status': 'active',
    'subscription_id': 'sub_1',
    'subscription_period_count': 12,
    'subscription_period_interval': 'Month',
    'tax_inclusive': True,
    'trial_period_days': 0,
}

LICENSE_KEY = {
    'id': 'lic_1',
    'business_id': 'bus_1',
    'created_at': '2025-01-01T00:00:00Z',
    'customer_id': 'cus_1',
    'instances_count': 0,
    'key': 'AAAA-BBBB',
    'payment_id': 'pay_1',
    'product_id': 'pdt_1',
    'status': 'active',
}

WEBHOOK_DETAILS = {
    'id': 'wh_1',
    'created_at': '2025-01-01T00:00:00Z',
    'description': 'orders',
    'metadata': {},
    'updated_at': '2025-01-01T00:00:00Z',
    'url': 'https://merchant.example.com/hooks',
    'filter_types': ['payment.succeeded'],
}

WEBHOOK_DELIVERY_HEADERS = {
    'Webhook-Id': 'msg_1',
    'Webhook-Signature': 'v1,c2lnbmF0dXJl',
    'Webhook-Timestamp': '1736935200',
}


def webhook_body(data: dict, event_type: str = 'payment.succeeded') -> str:
    return json.dumps(
        {
            'business_id': 'bus_1',
            'data': data,
            'timestamp': '2025-01-15T10:00:00Z',
            'type': event_type,
        }
    )


class Recorder:
    """MockTransport handler that records requests and replays responses.

    Each response is a ``(status, body)`` pair; dict and list bodies are sent
    as JSON, bytes as raw content. The last response repeats once the queue
    is down to one entry.
    """

    def __init__(self, *responses, headers: dict | None = None):
        self.responses = list(responses) or [(200, {})]
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(body, bytes):
            return httpx.Response(status, content=body, headers=self.headers)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


def make_client(recorder: Recorder, **kwargs) -> DodoPayments:
    transport = httpx.MockTransport(recorder)
    return DodoPayments(
        api_key=kwargs.pop('api_key', 'sk_test'),
        base_url=kwargs.pop('base_url', BASE_URL),
        http_client=httpx.Client(transport=transport),
        async_http_client=httpx.AsyncClient(transport=transport),
        settings=kwargs.pop('settings', ClientSettings()),
        **kwargs,
    )
