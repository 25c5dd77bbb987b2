from dodoclient.resources.addons import Addons
from dodoclient.resources.balances import Balances
from dodoclient.resources.brands import Brands
from dodoclient.resources.checkout_sessions import CheckoutSessions
from dodoclient.resources.customers import (
    CustomerPortal,
    Customers,
    LedgerEntries,
    Wallets,
)
from dodoclient.resources.discounts import Discounts
from dodoclient.resources.disputes import Disputes
from dodoclient.resources.invoices import InvoicePayments, Invoices
from dodoclient.resources.license_keys import LicenseKeyInstances, LicenseKeys
from dodoclient.resources.licenses import Licenses
from dodoclient.resources.meters import Meters
from dodoclient.resources.misc import Misc
from dodoclient.resources.payments import Payments
from dodoclient.resources.payouts import Payouts
from dodoclient.resources.products import ProductImages, Products, ProductShortLinks
from dodoclient.resources.refunds import Refunds
from dodoclient.resources.subscriptions import Subscriptions
from dodoclient.resources.usage_events import UsageEvents
from dodoclient.resources.webhooks import Verifier, WebhookHeadersResource, Webhooks

__all__ = [
    'Addons',
    'Balances',
    'Brands',
    'CheckoutSessions',
    'CustomerPortal',
    'Customers',
    'Discounts',
    'Disputes',
    'InvoicePayments',
    'Invoices',
    'LedgerEntries',
    'LicenseKeyInstances',
    'LicenseKeys',
    'Licenses',
    'Meters',
    'Misc',
    'Payments',
    'Payouts',
    'ProductImages',
    'Products',
    'ProductShortLinks',
    'Refunds',
    'Subscriptions',
    'UsageEvents',
    'Verifier',
    'WebhookHeadersResource',
    'Webhooks',
]
