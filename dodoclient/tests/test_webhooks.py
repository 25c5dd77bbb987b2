"""Tests for webhook endpoint management and event decoding."""

import json
from unittest.mock import Mock

import pytest

from dodoclient import APIResponseValidationError, WebhookVerificationError
from dodoclient.types import (
    WEBHOOK_HEADER_NAMES,
    CreditBalanceLowData,
    PaymentData,
    RefundData,
    WebhookEventType,
    WebhookHeaders,
)

from .fixtures import (
    PAYMENT,
    REFUND,
    WEBHOOK_DELIVERY_HEADERS,
    WEBHOOK_DETAILS,
    Recorder,
    make_client,
    webhook_body,
)

CREDIT_BALANCE_LOW = {
    'payload_type': 'CreditBalanceLow',
    'available_balance': '10',
    'credit_entitlement_id': 'ce_1',
    'credit_entitlement_name': 'API credits',
    'customer_id': 'cus_1',
    'subscription_credits_amount': '100',
    'subscription_id': 'sub_1',
    'threshold_amount': '20',
    'threshold_percent': 20,
}


@pytest.fixture
def webhooks():
    return make_client(Recorder()).webhooks


class TestUnsafeUnwrap:
    """Tests for decoding events without verification."""

    def test_payment_event(self, webhooks):
        """Test that the payload type picks the data model."""
        body = webhook_body({**PAYMENT, 'payload_type': 'Payment'})

        event = webhooks.unsafe_unwrap(body)

        assert event.type is WebhookEventType.PAYMENT_SUCCEEDED
        assert isinstance(event.data, PaymentData)
        assert event.data.payment_id == 'pay_1'

    def test_refund_event_from_bytes(self, webhooks):
        """Test decoding a raw byte body."""
        body = webhook_body({**REFUND, 'payload_type': 'Refund'}, 'refund.succeeded')

        event = webhooks.unsafe_unwrap(body.encode())

        assert isinstance(event.data, RefundData)
        assert event.data.metadata is None

    def test_mapping_payload(self, webhooks):
        """Test decoding an already parsed body."""
        payload = json.loads(webhook_body(CREDIT_BALANCE_LOW, 'credit.balance_low'))

        event = webhooks.unsafe_unwrap(payload)

        assert isinstance(event.data, CreditBalanceLowData)
        assert event.data.threshold_percent == 20

    def test_unknown_event_type_is_kept(self, webhooks):
        """Test that an event type added later still decodes."""
        body = webhook_body({**PAYMENT, 'payload_type': 'Payment'}, 'payment.rerouted')

        event = webhooks.unsafe_unwrap(body)

        assert event.type == 'payment.rerouted'

    def test_invalid_json(self, webhooks):
        """Test that a malformed body is rejected."""
        with pytest.raises(APIResponseValidationError) as exc_info:
            webhooks.unsafe_unwrap('{"business_id": ')

        assert exc_info.value.type_name == 'JSON'

    def test_unknown_payload_type(self, webhooks):
        """Test that data with an unknown payload type fails validation."""
        body = webhook_body({**PAYMENT, 'payload_type': 'Invoice'})

        with pytest.raises(APIResponseValidationError):
            webhooks.unsafe_unwrap(body)


class TestUnwrap:
    """Tests for verified decoding."""

    def test_verified_delivery(self, webhooks):
        """Test that headers are matched case-insensitively and passed on."""
        body = webhook_body({**PAYMENT, 'payload_type': 'Payment'})
        verify = Mock(return_value=True)

        event = webhooks.unwrap(body, WEBHOOK_DELIVERY_HEADERS, verify=verify)

        assert event.data.payment_id == 'pay_1'
        verify.assert_called_once()
        raw, delivery = verify.call_args.args
        assert raw == body
        assert isinstance(delivery, WebhookHeaders)
        assert delivery.webhook_id == 'msg_1'
        assert delivery.webhook_timestamp == '1736935200'

    def test_rejected_delivery(self, webhooks):
        """Test that a falsy verifier result stops decoding."""
        body = webhook_body({**PAYMENT, 'payload_type': 'Payment'})

        with pytest.raises(WebhookVerificationError) as exc_info:
            webhooks.unwrap(body, WEBHOOK_DELIVERY_HEADERS, verify=lambda b, h: False)

        assert exc_info.value.webhook_id == 'msg_1'
        assert exc_info.value.cause is None

    def test_verifier_exception_is_wrapped(self, webhooks):
        """Test that an exception from the verifier becomes a verification error."""

        def verify(body, headers):
            raise ValueError('bad signature')

        with pytest.raises(WebhookVerificationError) as exc_info:
            webhooks.unwrap('{}', WEBHOOK_DELIVERY_HEADERS, verify=verify)

        assert isinstance(exc_info.value.cause, ValueError)
        assert 'bad signature' in str(exc_info.value)

    def test_missing_header(self, webhooks):
        """Test that a delivery without its signature header is rejected."""
        headers = {k: v for k, v in WEBHOOK_DELIVERY_HEADERS.items() if k != 'Webhook-Signature'}
        verify = Mock(return_value=True)

        with pytest.raises(WebhookVerificationError):
            webhooks.unwrap('{}', headers, verify=verify)

        verify.assert_not_called()

    def test_header_names(self):
        """Test the mapping between field names and header names."""
        assert WEBHOOK_HEADER_NAMES == {
            'webhook_id': 'webhook-id',
            'webhook_signature': 'webhook-signature',
            'webhook_timestamp': 'webhook-timestamp',
        }
        delivery = WebhookHeaders(
            webhook_id='msg_1', webhook_signature='sig', webhook_timestamp='1'
        )
        assert delivery.model_dump(by_alias=True) == {
            'webhook-id': 'msg_1',
            'webhook-signature': 'sig',
            'webhook-timestamp': '1',
        }


class TestEndpoints:
    """Tests for webhook endpoint management."""

    def test_create(self):
        """Test that filter types are sent as their wire values."""
        recorder = Recorder((200, WEBHOOK_DETAILS))

        endpoint = make_client(recorder).webhooks.create(
            url='https://merchant.example.com/hooks',
            filter_types=[WebhookEventType.PAYMENT_SUCCEEDED],
        )

        assert recorder.last_json() == {
            'url': 'https://merchant.example.com/hooks',
            'filter_types': ['payment.succeeded'],
        }
        assert endpoint.filter_types == [WebhookEventType.PAYMENT_SUCCEEDED]

    def test_secret_and_delete(self):
        """Test fetching the signing secret and deleting the endpoint."""
        recorder = Recorder((200, {'secret': 'whsec_1'}), (200, None))
        client = make_client(recorder)

        secret = client.webhooks.retrieve_secret('wh_1')
        secret_path = recorder.last.url.path
        client.webhooks.delete('wh_1')

        assert secret.secret == 'whsec_1'
        assert secret_path == '/webhooks/wh_1/secret'
        assert recorder.last.method == 'DELETE'
        assert recorder.last.url.path == '/webhooks/wh_1'

    def test_headers(self):
        """Test reading and replacing endpoint headers."""
        recorder = Recorder(
            (200, {'headers': {'X-Source': 'dodo'}, 'sensitive': ['Authorization']}),
            (200, None),
        )
        client = make_client(recorder)

        headers = client.webhooks.headers.retrieve('wh_1')
        client.webhooks.headers.update('wh_1', headers={'X-Source': 'shop'})

        assert headers.headers == {'X-Source': 'dodo'}
        assert headers.sensitive == ['Authorization']
        assert recorder.last.method == 'PATCH'
        assert recorder.last.url.path == '/webhooks/wh_1/headers'
        assert recorder.last_json() == {'headers': {'X-Source': 'shop'}}
