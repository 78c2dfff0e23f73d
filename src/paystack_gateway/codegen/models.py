"""Data models for parsed OpenAPI operations.

The parser converts the OpenAPI document into these models; the emitter
renders Python source from them.
"""

import keyword

from pydantic import BaseModel

from paystack_gateway.codegen.inflection import underscore


def python_identifier(name: str) -> str:
    """snake_case ``name``, suffixed with ``_`` when it is a Python keyword."""
    identifier = underscore(name)
    return f"{identifier}_" if keyword.iskeyword(identifier) else identifier


class ParameterDescriptor(BaseModel):
    """A single call parameter (path, query, or request body property)."""

    name: str  # wire name, as sent to the API
    location: str  # path / query / body
    required: bool
    param_type: str  # rendered type label: str / int / list[str] / Literal[...] ...
    description: str = ""
    object_properties: list["ParameterDescriptor"] = []

    @property
    def python_name(self) -> str:
        return python_identifier(self.name)


class OperationDescriptor(BaseModel):
    """A single (path, HTTP method) pair with its derived call model."""

    path: str  # /customer/{code}
    http_method: str  # GET / POST / PUT / PATCH / DELETE
    tag: str
    operation_id: str
    method_name: str
    summary: str = ""
    description: str = ""
    parameters: list[ParameterDescriptor]
    success_schema: dict | None = None

    @property
    def path_parameters(self) -> list[ParameterDescriptor]:
        return [p for p in self.parameters if p.location == "path"]

    @property
    def request_parameters(self) -> list[ParameterDescriptor]:
        return [p for p in self.parameters if p.location != "path"]


class TagInfo(BaseModel):
    """Documentation for one tag, taken from the document's ``tags`` list."""

    name: str  # whitespace removed, e.g. DedicatedVirtualAccount
    title: str  # as written in the document, e.g. Dedicated Virtual Account
    product_name: str = ""
    description: str = ""
