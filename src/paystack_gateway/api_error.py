"""Errors raised by API functions."""

from typing import Any

import httpx

from paystack_gateway.mash import Mash

_ERROR_SUFFIX = "_error"


def _kind_name(name: str) -> str:
    return name[: -len(_ERROR_SUFFIX)] if name.endswith(_ERROR_SUFFIX) else name


class ApiError(Exception):
    """Raised when an exception occurs while fulfilling an API function.

    Error kinds are open-ended: any name can be checked against the message.

    * ``error.has_kind("foo")`` (or ``"foo_error"``) is true if the message is
      ``"foo"`` or ``"foo_error"``.
    * ``error.pin_kind("foo")`` makes every later ``has_kind("foo")`` true
      regardless of the message.

    Example::

        def initialize_transaction(**transaction_data):
            if not transaction_data.get("amount"):
                raise ApiError("invalid_amount", cancellable=True)
            ...

        try:
            initialize_transaction(amount=None)
        except ApiError as e:
            if e.has_kind("invalid_amount"):
                handle_invalid_amount_error(e)
            if e.cancellable:
                cancel_transaction()
    """

    def __init__(
        self,
        msg: str | None = None,
        *,
        original_error: BaseException | None = None,
        cancellable: bool = False,
    ) -> None:
        super().__init__(msg)
        self.message = msg
        self.original_error = original_error
        self._cancellable = cancellable
        self._pinned_kinds: set[str] = set()

    @property
    def cancellable(self) -> bool:
        return self._cancellable

    def has_kind(self, name: str) -> bool:
        kind = _kind_name(name)
        if kind in self._pinned_kinds:
            return True
        return self.message is not None and str(self.message) in (kind, kind + _ERROR_SUFFIX)

    def pin_kind(self, name: str) -> None:
        self._pinned_kinds.add(_kind_name(name))

    @property
    def network_error(self) -> bool:
        """True for connection and TLS failures and 5xx responses."""
        error = self.original_error
        if isinstance(error, httpx.ConnectError):
            return True
        if isinstance(error, httpx.HTTPStatusError):
            return error.response.is_server_error
        return False

    @property
    def response(self) -> httpx.Response | None:
        return getattr(self.original_error, "response", None)

    @property
    def http_code(self) -> int | None:
        response = self.response
        return response.status_code if response is not None else None

    @property
    def response_body(self) -> Mash | None:
        response = self.response
        if response is None:
            return None
        try:
            body: Any = response.json()
        except ValueError:
            return None
        return Mash(body) if isinstance(body, dict) else None
