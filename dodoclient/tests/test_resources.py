"""Tests for the resource groups: paths, verbs, payloads and decoding."""

import pytest

from dodoclient import InvalidParametersError, NOT_GIVEN, RequestOptions
from dodoclient.types import (
    BrandVerificationStatus,
    CountryCode,
    CustomerUpdateParams,
    IntentStatus,
    LicenseKeyUpdateParams,
    NewPaymentMethod,
    PaymentCreateParams,
    PlanChangeAddonLineItem,
    PlanChangeMeterLineItem,
    PlanChangeSubscriptionLineItem,
    Subscription,
    TaxCategory,
)

from .fixtures import (
    FULL_CUSTOMER,
    LICENSE_KEY,
    PAYMENT,
    REFUND,
    SUBSCRIPTION,
    Recorder,
    make_client,
)

PDF = b'%PDF-1.7 fake invoice'

PAYMENT_CREATED = {
    'client_secret': 'secret',
    'customer': {'customer_id': 'cus_1', 'email': 'ada@example.com', 'name': 'Ada'},
    'metadata': {},
    'payment_id': 'pay_1',
    'total_amount': 1500,
    'payment_link': 'https://checkout.test/pay_1',
}


class TestPayments:
    """Tests for the payments resource."""

    def test_create_with_keywords(self):
        """Test that keyword arguments become the JSON body."""
        recorder = Recorder((200, PAYMENT_CREATED))

        created = make_client(recorder).payments.create(
            billing={'country': 'US', 'zipcode': '02110'},
            customer={'customer_id': 'cus_1'},
            product_cart=[{'product_id': 'pdt_1', 'quantity': 2}],
            payment_link=True,
        )

        assert recorder.last.method == 'POST'
        assert recorder.last.url.path == '/payments'
        assert recorder.last_json() == {
            'billing': {'country': 'US', 'zipcode': '02110'},
            'customer': {'customer_id': 'cus_1'},
            'product_cart': [{'product_id': 'pdt_1', 'quantity': 2}],
            'payment_link': True,
        }
        assert created.payment_link == 'https://checkout.test/pay_1'

    def test_create_with_model(self):
        """Test that a params model is sent without its unset fields."""
        recorder = Recorder((200, PAYMENT_CREATED))
        params = PaymentCreateParams(
            billing={'country': 'US'},
            customer={'email': 'new@example.com', 'name': 'New'},
            product_cart=[{'product_id': 'pdt_1', 'quantity': 1}],
        )

        make_client(recorder).payments.create(params)

        assert recorder.last_json() == {
            'billing': {'country': 'US'},
            'customer': {'email': 'new@example.com', 'name': 'New'},
            'product_cart': [{'product_id': 'pdt_1', 'quantity': 1}],
        }

    def test_keywords_override_model(self):
        """Test that keyword arguments are applied on top of a params model."""
        recorder = Recorder((200, {'items': []}))
        client = make_client(recorder)

        client.payments.list({'status': 'failed', 'page_size': 10}, page_size=20)

        assert recorder.last.url.params['status'] == 'failed'
        assert recorder.last.url.params['page_size'] == '20'

    def test_not_given_keyword_is_ignored(self):
        """Test that NOT_GIVEN keywords are left off the request."""
        recorder = Recorder((200, {'items': []}))

        make_client(recorder).payments.list(status=NOT_GIVEN, page_size=5)

        assert dict(recorder.last.url.params) == {'page_size': '5'}

    def test_retrieve(self):
        """Test that a payment is decoded with its enums."""
        recorder = Recorder((200, PAYMENT))

        payment = make_client(recorder).payments.retrieve('pay_1')

        assert payment.status is IntentStatus.SUCCEEDED
        assert payment.billing.country is CountryCode.US
        assert payment.metadata == {'order': '42'}

    def test_path_segments_are_escaped(self):
        """Test that identifiers cannot break out of their path segment."""
        recorder = Recorder((200, PAYMENT))

        make_client(recorder).payments.retrieve('pay/../1')

        assert recorder.last.url.raw_path == b'/payments/pay%2F..%2F1'

    def test_line_items(self):
        """Test the line items endpoint."""
        recorder = Recorder(
            (200, {'currency': 'USD', 'items': [
                {'amount': 1000, 'items_id': 'pdt_1', 'refundable_amount': 1000, 'tax': 0}
            ]})
        )

        line_items = make_client(recorder).payments.retrieve_line_items('pay_1')

        assert recorder.last.url.path == '/payments/pay_1/line-items'
        assert line_items.items[0].refundable_amount == 1000

    def test_invalid_params(self):
        """Test that malformed keywords are rejected before sending."""
        recorder = Recorder()

        with pytest.raises(InvalidParametersError):
            make_client(recorder).payments.create(billing={'country': 'US'})

        assert recorder.requests == []

    def test_misspelled_query_keyword_is_rejected(self):
        """Test that an unknown list parameter fails instead of being sent."""
        recorder = Recorder((200, {'items': []}))

        with pytest.raises(InvalidParametersError) as exc_info:
            make_client(recorder).payments.list(page_sise=2)

        assert 'PaymentListParams' in str(exc_info.value)
        assert recorder.requests == []

    def test_misspelled_body_keyword_is_rejected(self):
        """Test that an unknown body field in a mapping is rejected."""
        recorder = Recorder((200, FULL_CUSTOMER))

        with pytest.raises(InvalidParametersError):
            make_client(recorder).customers.update('cus_1', {'phone_numbr': None})

        assert recorder.requests == []

    def test_unmodelled_parameter_through_extra_query(self):
        """Test that extra_query remains the way to send an unmodelled key."""
        recorder = Recorder((200, {'items': []}))

        make_client(recorder).payments.list(
            options=RequestOptions(extra_query={'beta_flag': '1'})
        )

        assert recorder.last.url.params['beta_flag'] == '1'


class TestSubscriptions:
    """Tests for the subscriptions resource."""

    def test_update_sends_explicit_null(self):
        """Test that None clears a field while untouched fields stay out."""
        recorder = Recorder((200, SUBSCRIPTION))

        subscription = make_client(recorder).subscriptions.update(
            'sub_1', tax_id=None, cancel_at_next_billing_date=True
        )

        assert recorder.last.method == 'PATCH'
        assert recorder.last_json() == {'tax_id': None, 'cancel_at_next_billing_date': True}
        assert isinstance(subscription, Subscription)

    def test_change_plan_returns_none(self):
        """Test that an endpoint without a response body returns None."""
        recorder = Recorder((200, None))

        result = make_client(recorder).subscriptions.change_plan(
            'sub_1',
            product_id='pdt_2',
            proration_billing_mode='prorated_immediately',
            quantity=1,
        )

        assert result is None
        assert recorder.last.url.path == '/subscriptions/sub_1/change-plan'

    def test_preview_change_plan(self):
        """Test that a plan change preview decodes each kind of line item."""
        recorder = Recorder(
            (
                200,
                {
                    'immediate_charge': {
                        'line_items': [
                            {
                                'type': 'subscription',
                                'id': 'sub_1',
                                'currency': 'EUR',
                                'product_id': 'pdt_2',
                                'proration_factor': 0.5,
                                'quantity': 1,
                                'tax_inclusive': True,
                                'unit_price': 2000,
                            },
                            {
                                'type': 'addon',
                                'id': 'adn_1',
                                'currency': 'EUR',
                                'name': 'Seats',
                                'proration_factor': 0.5,
                                'quantity': 3,
                                'tax_category': 'saas',
                                'tax_inclusive': True,
                                'tax_rate': 19.0,
                                'unit_price': 500,
                            },
                            {
                                'type': 'meter',
                                'id': 'mtr_1',
                                'chargeable_units': '10',
                                'currency': 'EUR',
                                'free_threshold': 100,
                                'name': 'API calls',
                                'price_per_unit': '0.01',
                                'subtotal': 10,
                                'tax_inclusive': True,
                                'tax_rate': 19.0,
                                'units_consumed': '110',
                            },
                        ],
                        'summary': {
                            'currency': 'EUR',
                            'customer_credits': 0,
                            'settlement_amount': 1760,
                            'settlement_currency': 'EUR',
                            'total_amount': 1760,
                        },
                    },
                    'new_plan': {**SUBSCRIPTION, 'product_id': 'pdt_2'},
                },
            )
        )

        preview = make_client(recorder).subscriptions.preview_change_plan(
            'sub_1',
            product_id='pdt_2',
            proration_billing_mode='prorated_immediately',
            quantity=1,
        )

        assert recorder.last.method == 'POST'
        assert recorder.last.url.path == '/subscriptions/sub_1/change-plan/preview'
        assert recorder.last_json() == {
            'product_id': 'pdt_2',
            'proration_billing_mode': 'prorated_immediately',
            'quantity': 1,
        }
        line_items = preview.immediate_charge.line_items
        assert [type(item) for item in line_items] == [
            PlanChangeSubscriptionLineItem,
            PlanChangeAddonLineItem,
            PlanChangeMeterLineItem,
        ]
        assert line_items[1].tax_category is TaxCategory.SAAS
        assert preview.immediate_charge.summary.total_amount == 1760
        assert preview.new_plan.product_id == 'pdt_2'

    @pytest.mark.asyncio
    async def test_preview_change_plan_requires_mode(self):
        """Test that the preview validates its body like change_plan does."""
        recorder = Recorder()

        with pytest.raises(InvalidParametersError):
            await make_client(recorder).subscriptions.apreview_change_plan(
                'sub_1', product_id='pdt_2', quantity=1
            )

        assert recorder.requests == []

    @pytest.mark.parametrize(
        'params,expected',
        [
            (
                {'type': 'new', 'return_url': 'https://shop.test/done'},
                {'type': 'new', 'return_url': 'https://shop.test/done'},
            ),
            (
                {'type': 'existing', 'payment_method_id': 'pm_1'},
                {'type': 'existing', 'payment_method_id': 'pm_1'},
            ),
            ({'type': 'new'}, {'type': 'new'}),
        ],
    )
    def test_update_payment_method(self, params, expected):
        """Test both shapes of the payment method switch."""
        recorder = Recorder((200, {'payment_link': 'https://checkout.test/x'}))

        make_client(recorder).subscriptions.update_payment_method('sub_1', **params)

        assert recorder.last.url.path == '/subscriptions/sub_1/update-payment-method'
        assert recorder.last_json() == expected

    def test_update_payment_method_with_model(self):
        """Test passing a variant model directly."""
        recorder = Recorder((200, {}))

        make_client(recorder).subscriptions.update_payment_method(
            'sub_1', NewPaymentMethod(type='new')
        )

        assert recorder.last_json() == {'type': 'new'}

    def test_update_payment_method_rejects_unknown_variant(self):
        """Test that an unknown type tag is rejected."""
        with pytest.raises(InvalidParametersError):
            make_client(Recorder()).subscriptions.update_payment_method(
                'sub_1', type='wire'
            )

    def test_usage_history_is_paged(self):
        """Test that usage history uses numbered pages."""
        recorder = Recorder(
            (
                200,
                {
                    'items': [
                        {
                            'start_date': '2025-01-01T00:00:00Z',
                            'end_date': '2025-02-01T00:00:00Z',
                            'meters': [],
                        }
                    ]
                },
            )
        )

        page = make_client(recorder).subscriptions.retrieve_usage_history(
            'sub_1', page_size=1
        )

        assert recorder.last.url.path == '/subscriptions/sub_1/usage-history'
        assert len(page) == 1
        assert page.has_next_page()


class TestCustomers:
    """Tests for customers and their sub-resources."""

    def test_update_with_model_and_null(self):
        """Test that a model with an explicit None sends null."""
        recorder = Recorder((200, FULL_CUSTOMER))

        make_client(recorder).customers.update(
            'cus_1', CustomerUpdateParams(phone_number=None)
        )

        assert recorder.last_json() == {'phone_number': None}

    def test_portal_session(self):
        """Test that send_email travels as a query parameter."""
        recorder = Recorder((200, {'link': 'https://portal.test/s'}))

        session = make_client(recorder).customers.customer_portal.create(
            'cus_1', send_email=True
        )

        assert recorder.last.url.path == '/customers/cus_1/customer-portal/session'
        assert recorder.last.url.params['send_email'] == 'true'
        assert session.link == 'https://portal.test/s'

    def test_wallet_ledger_entry(self):
        """Test creating a wallet ledger entry."""
        recorder = Recorder(
            (
                200,
                {
                    'balance': 500,
                    'created_at': '2025-01-01T00:00:00Z',
                    'currency': 'USD',
                    'customer_id': 'cus_1',
                    'updated_at': '2025-01-02T00:00:00Z',
                },
            )
        )

        wallet = make_client(recorder).customers.wallets.ledger_entries.create(
            'cus_1', amount=500, currency='USD', entry_type='credit'
        )

        assert recorder.last.url.path == '/customers/cus_1/wallets/ledger-entries'
        assert recorder.last_json() == {
            'amount': 500,
            'currency': 'USD',
            'entry_type': 'credit',
        }
        assert wallet.balance == 500


class TestInvoices:
    """Tests for invoice PDF downloads."""

    def test_payment_invoice_bytes(self):
        """Test that the PDF is returned untouched and requested as PDF."""
        recorder = Recorder((200, PDF), headers={'content-type': 'application/pdf'})

        content = make_client(recorder).invoices.payments.retrieve('pay_1')

        assert content == PDF
        assert recorder.last.url.path == '/invoices/payments/pay_1'
        assert recorder.last.headers['Accept'] == 'application/pdf'

    @pytest.mark.asyncio
    async def test_refund_invoice_async(self):
        """Test the async refund invoice download."""
        recorder = Recorder((200, PDF), headers={'content-type': 'application/pdf'})

        content = await make_client(recorder).invoices.payments.aretrieve_refund('ref_1')

        assert content == PDF
        assert recorder.last.url.path == '/invoices/refunds/ref_1'


class TestLicenses:
    """Tests for license activation and license keys."""

    def test_activate(self):
        """Test activating a license key instance."""
        recorder = Recorder(
            (
                200,
                {
                    'id': 'lki_1',
                    'business_id': 'bus_1',
                    'created_at': '2025-01-01T00:00:00Z',
                    'customer': {'customer_id': 'cus_1', 'email': 'a@b.c', 'name': 'A'},
                    'license_key_id': 'lic_1',
                    'name': 'laptop',
                    'product': {'product_id': 'pdt_1'},
                },
            )
        )

        instance = make_client(recorder).licenses.activate(
            license_key='AAAA-BBBB', name='laptop'
        )

        assert recorder.last.url.path == '/licenses/activate'
        assert instance.name == 'laptop'

    def test_deactivate_returns_none(self):
        """Test that deactivation has no result."""
        recorder = Recorder((200, None))

        result = make_client(recorder).licenses.deactivate(
            license_key='AAAA-BBBB', license_key_instance_id='lki_1'
        )

        assert result is None

    def test_validate(self):
        """Test license validation."""
        recorder = Recorder((200, {'valid': False}))

        result = make_client(recorder).licenses.validate(license_key='AAAA-BBBB')

        assert result.valid is False
        assert recorder.last_json() == {'license_key': 'AAAA-BBBB'}

    def test_license_key_update_clears_expiry(self):
        """Test that expires_at=None is sent to remove the expiry."""
        recorder = Recorder((200, LICENSE_KEY))

        make_client(recorder).license_keys.update(
            'lic_1', LicenseKeyUpdateParams(expires_at=None)
        )

        assert recorder.last.method == 'PATCH'
        assert recorder.last.url.path == '/license_keys/lic_1'
        assert recorder.last_json() == {'expires_at': None}


class TestOtherResources:
    """Tests for the smaller resource groups."""

    def test_refund_list(self):
        """Test that refunds are listed as numbered pages."""
        recorder = Recorder((200, {'items': [REFUND]}))

        page = make_client(recorder).refunds.list(customer_id='cus_1')

        assert recorder.last.url.params['customer_id'] == 'cus_1'
        assert page.items[0].refund_id == 'ref_1'

    def test_supported_countries(self):
        """Test that unknown country codes survive decoding."""
        recorder = Recorder((200, ['US', 'DE', 'XX']))

        countries = make_client(recorder).misc.list_supported_countries()

        assert recorder.last.url.path == '/checkout/supported_countries'
        assert countries[0] is CountryCode.US
        assert countries[2] == 'XX'

    def test_ingest_usage_events(self):
        """Test that usage events are sent with typed metadata."""
        recorder = Recorder((200, {'ingested_count': 1}))

        result = make_client(recorder).usage_events.ingest(
            events=[
                {
                    'customer_id': 'cus_1',
                    'event_id': 'evt_1',
                    'event_name': 'api_call',
                    'metadata': {'tokens': 12, 'cached': False, 'model': 'small'},
                }
            ]
        )

        assert recorder.last.url.path == '/events/ingest'
        assert recorder.last_json()['events'][0]['metadata'] == {
            'tokens': 12,
            'cached': False,
            'model': 'small',
        }
        assert result.ingested_count == 1

    def test_meter_archive_and_unarchive(self):
        """Test the archive verbs of meters."""
        recorder = Recorder((200, None))
        client = make_client(recorder)

        client.meters.archive('mtr_1')
        archive = recorder.last
        client.meters.unarchive('mtr_1')

        assert (archive.method, archive.url.path) == ('DELETE', '/meters/mtr_1')
        assert (recorder.last.method, recorder.last.url.path) == (
            'POST',
            '/meters/mtr_1/unarchive',
        )

    def test_discount_by_code(self):
        """Test that discount codes are escaped into the path."""
        recorder = Recorder(
            (
                200,
                {
                    'amount': 540,
                    'business_id': 'bus_1',
                    'code': 'SPRING 25',
                    'created_at': '2025-03-01T00:00:00Z',
                    'discount_id': 'dsc_1',
                    'restricted_to': [],
                    'times_used': 0,
                    'type': 'percentage',
                },
            )
        )

        discount = make_client(recorder).discounts.retrieve_by_code('SPRING 25')

        assert recorder.last.url.raw_path == b'/discounts/code/SPRING%2025'
        assert discount.amount == 540

    def test_product_update_returns_none(self):
        """Test that a product update has no result."""
        recorder = Recorder((200, None))

        result = make_client(recorder).products.update('pdt_1', name='Renamed')

        assert result is None
        assert recorder.last.method == 'PATCH'
        assert recorder.last_json() == {'name': 'Renamed'}

    def test_product_update_files(self):
        """Test that file uploads are prepared with PUT."""
        recorder = Recorder((200, {'file_id': 'fil_1', 'url': 'https://upload.test/x'}))

        result = make_client(recorder).products.update_files('pdt_1', file_name='guide.pdf')

        assert recorder.last.method == 'PUT'
        assert recorder.last.url.path == '/products/pdt_1/files'
        assert result.file_id == 'fil_1'

    @pytest.mark.asyncio
    async def test_async_retrieve(self):
        """Test that async methods decode the same way."""
        recorder = Recorder((200, REFUND))

        refund = await make_client(recorder).refunds.aretrieve('ref_1')

        assert refund.refund_id == 'ref_1'
        assert recorder.last.url.path == '/refunds/ref_1'


ADDON = {
    'id': 'adn_1',
    'business_id': 'bus_1',
    'created_at': '2025-01-01T00:00:00Z',
    'currency': 'USD',
    'name': 'Extra seat',
    'price': 500,
    'tax_category': 'saas',
    'updated_at': '2025-01-01T00:00:00Z',
}

BRAND = {
    'brand_id': 'brd_1',
    'business_id': 'bus_1',
    'enabled': True,
    'statement_descriptor': 'ACME',
    'verification_enabled': True,
    'verification_status': 'Success',
}


class TestCatalog:
    """Tests for add-ons, brands, checkout sessions and product sub-resources."""

    def test_addon_create(self):
        """Test creating an add-on."""
        recorder = Recorder((200, ADDON))

        addon = make_client(recorder).addons.create(
            currency='USD', name='Extra seat', price=500, tax_category='saas'
        )

        assert (recorder.last.method, recorder.last.url.path) == ('POST', '/addons')
        assert recorder.last_json() == {
            'currency': 'USD',
            'name': 'Extra seat',
            'price': 500,
            'tax_category': 'saas',
        }
        assert addon.tax_category is TaxCategory.SAAS
        assert addon.description is None

    def test_addon_list_is_paged(self):
        """Test that add-ons are listed as numbered pages."""
        recorder = Recorder((200, {'items': [ADDON]}))

        page = make_client(recorder).addons.list(page_size=1)

        assert recorder.last.url.path == '/addons'
        assert page.items[0].id == 'adn_1'
        assert page.has_next_page()

    def test_addon_update_images(self):
        """Test that image upload URLs are requested with PUT."""
        recorder = Recorder((200, {'image_id': 'img_1', 'url': 'https://upload.test/a'}))

        result = make_client(recorder).addons.update_images('adn_1')

        assert (recorder.last.method, recorder.last.url.path) == (
            'PUT',
            '/addons/adn_1/images',
        )
        assert result.image_id == 'img_1'

    def test_brand_update_sends_explicit_null(self):
        """Test that a brand update keeps None values and drops omitted ones."""
        recorder = Recorder((200, {**BRAND, 'name': None}))

        brand = make_client(recorder).brands.update('brd_1', name=None)

        assert recorder.last.method == 'PATCH'
        assert recorder.last.url.path == '/brands/brd_1'
        assert recorder.last_json() == {'name': None}
        assert brand.statement_descriptor == 'ACME'

    def test_brand_list_is_not_paged(self):
        """Test that brands come back as one list with open-ended statuses."""
        recorder = Recorder(
            (
                200,
                {
                    'items': [
                        BRAND,
                        {**BRAND, 'brand_id': 'brd_2', 'verification_status': 'Pending'},
                    ]
                },
            )
        )

        brands = make_client(recorder).brands.list()

        assert recorder.last.url.path == '/brands'
        assert brands.items[0].verification_status is BrandVerificationStatus.SUCCESS
        assert brands.items[1].verification_status == 'Pending'

    def test_checkout_session_create(self):
        """Test creating a hosted checkout session."""
        recorder = Recorder(
            (200, {'checkout_url': 'https://checkout.test/cks_1', 'session_id': 'cks_1'})
        )

        session = make_client(recorder).checkout_sessions.create(
            product_cart=[{'product_id': 'pdt_1', 'quantity': 1}],
            customer={'email': 'ada@example.com', 'name': 'Ada'},
            customization={'theme': 'dark'},
            feature_flags={'allow_discount_code': True},
        )

        assert (recorder.last.method, recorder.last.url.path) == ('POST', '/checkouts')
        assert recorder.last_json() == {
            'product_cart': [{'product_id': 'pdt_1', 'quantity': 1}],
            'customer': {'email': 'ada@example.com', 'name': 'Ada'},
            'customization': {'theme': 'dark'},
            'feature_flags': {'allow_discount_code': True},
        }
        assert session.session_id == 'cks_1'

    def test_checkout_session_requires_cart(self):
        """Test that a session without a product cart is rejected locally."""
        recorder = Recorder()

        with pytest.raises(InvalidParametersError):
            make_client(recorder).checkout_sessions.create(return_url='https://shop.test')

        assert recorder.requests == []

    def test_checkout_session_retrieve(self):
        """Test reading the status of a session."""
        recorder = Recorder(
            (
                200,
                {
                    'id': 'cks_1',
                    'created_at': '2025-01-01T00:00:00Z',
                    'payment_id': 'pay_1',
                    'payment_status': 'succeeded',
                },
            )
        )

        status = make_client(recorder).checkout_sessions.retrieve('cks_1')

        assert recorder.last.url.path == '/checkouts/cks_1'
        assert status.payment_status is IntentStatus.SUCCEEDED
        assert status.customer_email is None

    @pytest.mark.asyncio
    async def test_checkout_session_preview(self):
        """Test pricing a cart without creating a session."""
        recorder = Recorder(
            (
                200,
                {
                    'billing_country': 'US',
                    'currency': 'USD',
                    'current_breakup': {'discount': 0, 'subtotal': 1000, 'total_amount': 1000},
                    'product_cart': [
                        {
                            'currency': 'USD',
                            'discounted_price': 1000,
                            'is_subscription': False,
                            'is_usage_based': False,
                            'meters': [],
                            'og_currency': 'USD',
                            'og_price': 1000,
                            'product_id': 'pdt_1',
                            'quantity': 1,
                            'tax_category': 'digital_products',
                            'tax_inclusive': False,
                            'tax_rate': 0,
                        }
                    ],
                    'total_price': 1000,
                },
            )
        )

        preview = await make_client(recorder).checkout_sessions.apreview(
            product_cart=[{'product_id': 'pdt_1', 'quantity': 1}]
        )

        assert recorder.last.url.path == '/checkouts/preview'
        assert preview.billing_country is CountryCode.US
        assert preview.product_cart[0].tax_category is TaxCategory.DIGITAL_PRODUCTS
        assert preview.recurring_breakup is None

    def test_product_image_force_update_is_a_query_parameter(self):
        """Test that force_update travels in the query string, not the body."""
        recorder = Recorder((200, {'url': 'https://upload.test/img'}))

        result = make_client(recorder).products.images.update('pdt_1', force_update=True)

        assert (recorder.last.method, recorder.last.url.path) == (
            'PUT',
            '/products/pdt_1/images',
        )
        assert recorder.last.url.params['force_update'] == 'true'
        assert recorder.last.content == b''
        assert result.image_id is None

    def test_short_link_create(self):
        """Test creating a short link for a product."""
        recorder = Recorder(
            (
                200,
                {
                    'full_url': 'https://checkout.test/buy/pdt_1',
                    'short_url': 'https://dodo.test/spring',
                },
            )
        )

        link = make_client(recorder).products.short_links.create(
            'pdt_1', slug='spring', static_checkout_params={'quantity': '2'}
        )

        assert recorder.last.url.path == '/products/pdt_1/short_links'
        assert recorder.last_json() == {
            'slug': 'spring',
            'static_checkout_params': {'quantity': '2'},
        }
        assert link.short_url == 'https://dodo.test/spring'

    def test_short_link_list(self):
        """Test that short links are listed across products as numbered pages."""
        recorder = Recorder(
            (
                200,
                {
                    'items': [
                        {
                            'created_at': '2025-01-01T00:00:00Z',
                            'full_url': 'https://checkout.test/buy/pdt_1',
                            'product_id': 'pdt_1',
                            'short_url': 'https://dodo.test/spring',
                        }
                    ]
                },
            )
        )

        page = make_client(recorder).products.short_links.list(product_id='pdt_1')

        assert recorder.last.url.path == '/products/short_links'
        assert recorder.last.url.params['product_id'] == 'pdt_1'
        assert page.items[0].product_id == 'pdt_1'
