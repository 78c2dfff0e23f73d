"""Helpers for :mod:`paystack_gateway.customer`."""

from paystack_gateway.customer import FetchResponse
from paystack_gateway.extension import extend


class FetchResponseExtension:
    @property
    def active_subscriptions(self) -> list:
        return [subscription for subscription in self.subscriptions or [] if subscription.status == "active"]

    @property
    def active_subscription_codes(self) -> list[str]:
        return [subscription.subscription_code for subscription in self.active_subscriptions]

    @property
    def reusable_authorizations(self) -> list:
        return [authorization for authorization in self.authorizations or [] if authorization.reusable]


extend(FetchResponse, FetchResponseExtension)
