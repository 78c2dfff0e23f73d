"""Wrapper for responses from Paystack."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from paystack_gateway.mash import Mash


def coerce_data(value: Any) -> Any:
    """Convert objects (and objects inside arrays) to :class:`Mash`; leave scalars alone."""
    if isinstance(value, list):
        return [coerce_data(item) for item in value]
    if isinstance(value, dict):
        return Mash(value)
    return value


class Response(BaseModel):
    """The ``status``/``message``/``data``/``meta`` envelope every endpoint returns.

    Subclasses list the keys of ``data`` that should also be readable on the
    response itself in ``data_fields``::

        class FetchResponse(Response):
            data_fields = ("email", "customer_code")

        response.customer_code  # same as response.data.customer_code
    """

    model_config = ConfigDict(extra="allow")

    data_fields: ClassVar[tuple[str, ...]] = ()

    status: bool | None = None
    message: str | None = None
    data: Any = None
    meta: Any = None

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, value: Any) -> Any:
        return coerce_data(value)

    def __getattr__(self, name: str) -> Any:
        try:
            return super().__getattr__(name)
        except AttributeError:
            if name in type(self).data_fields:
                return self.data[name] if isinstance(self.data, dict) and name in self.data else None
            raise
