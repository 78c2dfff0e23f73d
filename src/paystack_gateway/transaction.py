"""Transactions

Create and manage payments on your integration.

https://paystack.com/docs/api/transaction
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from paystack_gateway.api_error import ApiError
from paystack_gateway.cache import CacheOptions
from paystack_gateway.request import RequestModule
from paystack_gateway.response import Response

api = RequestModule("Transaction")


class InitializeTransactionResponse(Response):
    """Successful response from calling :func:`initialize_transaction`."""

    data_fields = ("authorization_url", "access_code", "reference")


class InitializeTransactionError(ApiError):
    """Error response from :func:`initialize_transaction`."""


@api.api_method
def initialize_transaction(
    *,
    email: str,
    amount: int,
    currency: str | None = None,
    reference: str | None = None,
    callback_url: str | None = None,
    channels: list[Literal["card", "bank", "ussd", "qr", "mobile_money", "bank_transfer"]] | None = None,
    metadata: str | None = None,
) -> InitializeTransactionResponse:
    """Initialize Transaction: POST /transaction/initialize

    Initialize a transaction from your backend.

    https://paystack.com/docs/api/transaction/#initialize_transaction

    :param email: (required) Customer's email address
    :param amount: (required) Amount in the subunit of the currency
    :param currency: The transaction currency
    :param reference: Unique transaction reference
    :param callback_url: URL to redirect to after payment
    :param channels: Payment channels to show the customer
    :param metadata: Stringified JSON object of custom data
    :raises InitializeTransactionError: if the request fails
    """
    return api.call(
        "initialize_transaction",
        "POST",
        "/transaction/initialize",
        {
            "email": email,
            "amount": amount,
            "currency": currency,
            "reference": reference,
            "callback_url": callback_url,
            "channels": channels,
            "metadata": metadata,
        },
        response_class=InitializeTransactionResponse,
        error_class=InitializeTransactionError,
    )


class VerifyResponse(Response):
    """Successful response from calling :func:`verify`."""

    data_fields = (
        "id",
        "reference",
        "amount",
        "currency",
        "channel",
        "gateway_response",
        "paid_at",
        "customer",
    )


class VerifyError(ApiError):
    """Error response from :func:`verify`."""


@api.api_method
def verify(*, reference: str, cache_options: CacheOptions | None = None) -> VerifyResponse:
    """Verify Transaction: GET /transaction/verify/{reference}

    Confirm the status of a transaction.

    https://paystack.com/docs/api/transaction/#verify

    :param reference: (required) Reference used to initiate the transaction
    :param cache_options: cache the response in the local file store
    :raises VerifyError: if the request fails
    """
    return api.call(
        "verify",
        "GET",
        f"/transaction/verify/{reference}",
        response_class=VerifyResponse,
        error_class=VerifyError,
        cache_options=cache_options,
    )


class ListResponse(Response):
    """Successful response from calling :func:`list`."""


class ListError(ApiError):
    """Error response from :func:`list`."""


@api.api_method
def list(
    *,
    per_page: int | None = None,
    page: int | None = None,
    customer: int | None = None,
    status: Literal["failed", "success", "abandoned"] | None = None,
    from_: datetime | None = None,
    to: datetime | None = None,
    amount: int | None = None,
    cache_options: CacheOptions | None = None,
) -> ListResponse:
    """List Transactions: GET /transaction

    List transactions carried out on your integration.

    https://paystack.com/docs/api/transaction/#list

    :param per_page: Number of records to fetch per page
    :param page: The section to retrieve
    :param customer: Filter by customer ID
    :param status: Filter transactions by status
    :param from_: A timestamp from which to start listing transactions
    :param to: A timestamp at which to stop listing transactions
    :param amount: Filter transactions by amount
    :param cache_options: cache the response in the local file store
    :raises ListError: if the request fails
    """
    return api.call(
        "list",
        "GET",
        "/transaction",
        {
            "perPage": per_page,
            "page": page,
            "customer": customer,
            "status": status,
            "from": from_,
            "to": to,
            "amount": amount,
        },
        response_class=ListResponse,
        error_class=ListError,
        cache_options=cache_options,
    )


class FetchResponse(Response):
    """Successful response from calling :func:`fetch`."""

    data_fields = ("id", "reference", "amount")


class FetchError(ApiError):
    """Error response from :func:`fetch`."""


@api.api_method
def fetch(*, id: int, cache_options: CacheOptions | None = None) -> FetchResponse:
    """Fetch Transaction: GET /transaction/{id}

    Get details of a transaction carried out on your integration.

    https://paystack.com/docs/api/transaction/#fetch

    :param id: (required) An ID for the transaction to fetch
    :param cache_options: cache the response in the local file store
    :raises FetchError: if the request fails
    """
    return api.call(
        "fetch",
        "GET",
        f"/transaction/{id}",
        response_class=FetchResponse,
        error_class=FetchError,
        cache_options=cache_options,
    )
