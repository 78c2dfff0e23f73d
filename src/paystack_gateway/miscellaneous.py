"""Miscellaneous

Supporting APIs that provide further details to other API calls.

https://paystack.com/docs/api/miscellaneous
"""

from __future__ import annotations

from typing import Literal

from paystack_gateway.api_error import ApiError
from paystack_gateway.cache import CacheOptions
from paystack_gateway.request import RequestModule
from paystack_gateway.response import Response

api = RequestModule("Miscellaneous")


class ListBanksResponse(Response):
    """Successful response from calling :func:`list_banks`."""


class ListBanksError(ApiError):
    """Error response from :func:`list_banks`."""


@api.api_method
def list_banks(*, country: Literal["ghana", "kenya", "nigeria", "south africa"] | None = None, use_cursor: bool | None = None, per_page: int | None = None, currency: str | None = None, cache_options: CacheOptions | None = None) -> ListBanksResponse:
    """List Banks: GET /bank

    Get a list of all supported banks and their properties.

    https://paystack.com/docs/api/miscellaneous/#list_banks

    :param country: The country to list supported banks for
    :param use_cursor: Enable cursor pagination
    :param per_page: Number of records to fetch per page
    :param currency: Filter banks by currency
    :param cache_options: cache the response in the local file store
    :raises ListBanksError: if the request fails
    """
    return api.call(
        "list_banks",
        "GET",
        "/bank",
        {"country": country, "use_cursor": use_cursor, "perPage": per_page, "currency": currency},
        response_class=ListBanksResponse,
        error_class=ListBanksError,
        cache_options=cache_options,
    )


class ListCountriesResponse(Response):
    """Successful response from calling :func:`list_countries`."""


class ListCountriesError(ApiError):
    """Error response from :func:`list_countries`."""


@api.api_method
def list_countries(*, cache_options: CacheOptions | None = None) -> ListCountriesResponse:
    """List Countries: GET /country

    Get a list of countries that Paystack currently supports.

    https://paystack.com/docs/api/miscellaneous/#list_countries

    :param cache_options: cache the response in the local file store
    :raises ListCountriesError: if the request fails
    """
    return api.call(
        "list_countries",
        "GET",
        "/country",
        response_class=ListCountriesResponse,
        error_class=ListCountriesError,
        cache_options=cache_options,
    )
