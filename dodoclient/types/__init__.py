"""Request and response models for every resource group.

Each submodule mirrors one resource group; everything is re-exported here.
"""

from dodoclient.types import (
    shared,
    payments,
    subscriptions,
    customers,
    refunds,
    disputes,
    payouts,
    licenses,
    license_keys,
    webhooks,
    webhook_events,
    meters,
    usage_events,
    balances,
    discounts,
    products,
    addons,
    brands,
    checkout_sessions,
)
from dodoclient.types.shared import *  # noqa: F403
from dodoclient.types.payments import *  # noqa: F403
from dodoclient.types.subscriptions import *  # noqa: F403
from dodoclient.types.customers import *  # noqa: F403
from dodoclient.types.refunds import *  # noqa: F403
from dodoclient.types.disputes import *  # noqa: F403
from dodoclient.types.payouts import *  # noqa: F403
from dodoclient.types.licenses import *  # noqa: F403
from dodoclient.types.license_keys import *  # noqa: F403
from dodoclient.types.webhooks import *  # noqa: F403
from dodoclient.types.webhook_events import *  # noqa: F403
from dodoclient.types.meters import *  # noqa: F403
from dodoclient.types.usage_events import *  # noqa: F403
from dodoclient.types.balances import *  # noqa: F403
from dodoclient.types.discounts import *  # noqa: F403
from dodoclient.types.products import *  # noqa: F403
from dodoclient.types.addons import *  # noqa: F403
from dodoclient.types.brands import *  # noqa: F403
from dodoclient.types.checkout_sessions import *  # noqa: F403

__all__ = [
    *shared.__all__,
    *payments.__all__,
    *subscriptions.__all__,
    *customers.__all__,
    *refunds.__all__,
    *disputes.__all__,
    *payouts.__all__,
    *licenses.__all__,
    *license_keys.__all__,
    *webhooks.__all__,
    *webhook_events.__all__,
    *meters.__all__,
    *usage_events.__all__,
    *balances.__all__,
    *discounts.__all__,
    *products.__all__,
    *addons.__all__,
    *brands.__all__,
    *checkout_sessions.__all__,
]
