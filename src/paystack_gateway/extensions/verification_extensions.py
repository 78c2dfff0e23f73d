"""Helpers for :mod:`paystack_gateway.verification`."""

from paystack_gateway.extension import extend
from paystack_gateway.verification import ResolveAccountNumberError, ResolveAccountNumberResponse


class ResolveAccountNumberResponseExtension:
    @property
    def account_valid(self) -> bool:
        return bool(self.status and self.account_name)


class ResolveAccountNumberErrorExtension:
    @property
    def invalid_account(self) -> bool:
        body = self.response_body
        return self.http_code == 422 and body is not None and body.status is False


extend(ResolveAccountNumberResponse, ResolveAccountNumberResponseExtension)
extend(ResolveAccountNumberError, ResolveAccountNumberErrorExtension)
