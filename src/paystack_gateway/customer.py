"""Customers

Create and manage customers on your integration.

https://paystack.com/docs/api/customer
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from paystack_gateway.api_error import ApiError
from paystack_gateway.cache import CacheOptions
from paystack_gateway.request import RequestModule
from paystack_gateway.response import Response

api = RequestModule("Customer")


class ListResponse(Response):
    """Successful response from calling :func:`list`."""


class ListError(ApiError):
    """Error response from :func:`list`."""


@api.api_method
def list(*, per_page: int | None = None, page: int | None = None, from_: datetime | None = None, to: datetime | None = None, cache_options: CacheOptions | None = None) -> ListResponse:
    """List Customers: GET /customer

    List customers available on your integration.

    https://paystack.com/docs/api/customer/#list

    :param per_page: Number of records to fetch per page
    :param page: The section to retrieve
    :param from_: A timestamp from which to start listing customers
    :param to: A timestamp at which to stop listing customers
    :param cache_options: cache the response in the local file store
    :raises ListError: if the request fails
    """
    return api.call(
        "list",
        "GET",
        "/customer",
        {"perPage": per_page, "page": page, "from": from_, "to": to},
        response_class=ListResponse,
        error_class=ListError,
        cache_options=cache_options,
    )


class CreateResponse(Response):
    """Successful response from calling :func:`create`."""

    data_fields = (
        "email",
        "integration",
        "domain",
        "customer_code",
        "id",
    )


class CreateError(ApiError):
    """Error response from :func:`create`."""


@api.api_method
def create(*, email: str, first_name: str | None = None, last_name: str | None = None, phone: str | None = None, metadata: dict | None = None) -> CreateResponse:
    """Create Customer: POST /customer

    https://paystack.com/docs/api/customer/#create

    :param email: (required) Customer's email address
    :param first_name: Customer's first name
    :param last_name: Customer's last name
    :param phone: Customer's phone number
    :param metadata: Key/value pairs to attach to the customer
    :raises CreateError: if the request fails
    """
    return api.call(
        "create",
        "POST",
        "/customer",
        {"email": email, "first_name": first_name, "last_name": last_name, "phone": phone, "metadata": metadata},
        response_class=CreateResponse,
        error_class=CreateError,
    )


class SetRiskActionResponse(Response):
    """Successful response from calling :func:`set_risk_action`."""

    data_fields = ("customer_code", "risk_action")


class SetRiskActionError(ApiError):
    """Error response from :func:`set_risk_action`."""


@api.api_method
def set_risk_action(*, customer: str, risk_action: Literal["default", "allow", "deny"] | None = None) -> SetRiskActionResponse:
    """Whitelist/Blacklist Customer: POST /customer/set_risk_action

    Whitelist or blacklist a customer on your integration.

    https://paystack.com/docs/api/customer/#set_risk_action

    :param customer: (required) Customer's code or email address
    :param risk_action: One of the possible risk actions
    :raises SetRiskActionError: if the request fails
    """
    return api.call(
        "set_risk_action",
        "POST",
        "/customer/set_risk_action",
        {"customer": customer, "risk_action": risk_action},
        response_class=SetRiskActionResponse,
        error_class=SetRiskActionError,
    )


class FetchResponse(Response):
    """Successful response from calling :func:`fetch`."""

    data_fields = (
        "id",
        "email",
        "customer_code",
        "subscriptions",
        "authorizations",
    )


class FetchError(ApiError):
    """Error response from :func:`fetch`."""


@api.api_method
def fetch(*, code: str, cache_options: CacheOptions | None = None) -> FetchResponse:
    """Fetch Customer: GET /customer/{code}

    Get details of a customer on your integration.

    https://paystack.com/docs/api/customer/#fetch

    :param code: (required) An email or customer code
    :param cache_options: cache the response in the local file store
    :raises FetchError: if the request fails
    """
    return api.call(
        "fetch",
        "GET",
        f"/customer/{code}",
        response_class=FetchResponse,
        error_class=FetchError,
        cache_options=cache_options,
    )
