"""Verification

Perform KYC processes.

https://paystack.com/docs/api/verification
"""

from __future__ import annotations

from paystack_gateway.api_error import ApiError
from paystack_gateway.cache import CacheOptions
from paystack_gateway.request import RequestModule
from paystack_gateway.response import Response

api = RequestModule("Verification")


class ResolveAccountNumberResponse(Response):
    """Successful response from calling :func:`resolve_account_number`."""

    data_fields = ("account_number", "account_name")


class ResolveAccountNumberError(ApiError):
    """Error response from :func:`resolve_account_number`."""


@api.api_method
def resolve_account_number(*, account_number: str, bank_code: str, cache_options: CacheOptions | None = None) -> ResolveAccountNumberResponse:
    """Resolve Account Number: GET /bank/resolve

    Confirm an account belongs to the right customer.

    https://paystack.com/docs/api/verification/#resolve_account_number

    :param account_number: (required) Account number
    :param bank_code: (required) Bank code from the List Banks endpoint
    :param cache_options: cache the response in the local file store
    :raises ResolveAccountNumberError: if the request fails
    """
    return api.call(
        "resolve_account_number",
        "GET",
        "/bank/resolve",
        {"account_number": account_number, "bank_code": bank_code},
        response_class=ResolveAccountNumberResponse,
        error_class=ResolveAccountNumberError,
        cache_options=cache_options,
    )
