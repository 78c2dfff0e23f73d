"""Helpers for :mod:`paystack_gateway.transaction`."""

import re
from decimal import Decimal

from paystack_gateway.extension import extend
from paystack_gateway.transaction import (
    InitializeTransactionError,
    InitializeTransactionResponse,
    VerifyError,
    VerifyResponse,
)

SUCCESS_STATUSES = ("success", "reversed", "reversal_pending")
PENDING_STATUSES = ("pending", "ongoing")

_NOT_FOUND = re.compile(r"transaction reference not found", re.IGNORECASE)


class TransactionResponseExtension:
    """Status and amount helpers for responses whose ``data`` is a transaction."""

    @property
    def transaction_status(self) -> str | None:
        return self.data.status if self.data else None

    @property
    def transaction_success(self) -> bool:
        return self.transaction_status in SUCCESS_STATUSES

    @property
    def transaction_abandoned(self) -> bool:
        return self.transaction_status == "abandoned"

    @property
    def transaction_failed(self) -> bool:
        return self.transaction_status == "failed"

    @property
    def transaction_pending(self) -> bool:
        return self.transaction_status in PENDING_STATUSES

    @property
    def transaction_amount_in_major_units(self) -> Decimal:
        # amounts are in the currency's subunit (kobo, pesewas, cents)
        return Decimal(self.data.amount) / Decimal(100)

    @property
    def transaction_completed_at(self):
        return self.data.updatedAt if self.data else None

    @property
    def subaccount_amount_in_major_units(self) -> Decimal | None:
        if not self.data or not self.data.subaccount or not self.data.fees_split:
            return None
        return Decimal(self.data.fees_split.subaccount) / Decimal(100)

    @property
    def failure_reason(self) -> str | None:
        if not self.transaction_failed and not self.transaction_abandoned:
            return None
        return self.data.gateway_response or self.transaction_status or self.message


class InitializeTransactionResponseExtension:
    @property
    def payment_url(self) -> str | None:
        return self.authorization_url


class InitializeTransactionErrorExtension:
    @property
    def cancellable(self) -> bool:
        return self.network_error


class VerifyResponseExtension:
    @property
    def transaction_completed_at(self):
        return self.paid_at or super().transaction_completed_at


class VerifyErrorExtension:
    @property
    def transaction_not_found(self) -> bool:
        body = self.response_body
        if not body:
            return False
        return body.status is False and bool(_NOT_FOUND.search(body.message or ""))


extend(InitializeTransactionResponse, InitializeTransactionResponseExtension)
extend(InitializeTransactionError, InitializeTransactionErrorExtension)
extend(VerifyResponse, VerifyResponseExtension, TransactionResponseExtension)
extend(VerifyError, VerifyErrorExtension)
