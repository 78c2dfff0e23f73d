"""OpenAPI document parser.

Reads an OpenAPI 3.x document into OperationDescriptor models, grouped by tag.
"""

import re
from pathlib import Path
from typing import Any

import yaml

from .inflection import camelize, underscore
from .models import OperationDescriptor, ParameterDescriptor, TagInfo, python_identifier

HTTP_METHODS = ("get", "post", "put", "patch", "delete")

ENVELOPE_KEYS = ("status", "message", "data", "meta")

# Tags whose operationIds don't start with the lower-camel tag name.
OPERATION_ID_PREFIXES = {
    "DedicatedVirtualAccount": "dedicatedAccount",
    "TransferRecipient": "transferrecipient",
}

RENAMED_METHODS = {
    ("Transaction", "initialize"): "initialize_transaction",
}

_SUCCESS_STATUS = re.compile(r"2\d\d")


class UnhandledSchemaTypeError(ValueError):
    """Raised for a schema whose type has no rendering."""


def load_document(file_path: Path) -> dict:
    text = Path(file_path).read_text(encoding="utf-8")
    return yaml.safe_load(text)


def parse_openapi(file_path: Path) -> list[OperationDescriptor]:
    """Parse an OpenAPI file into a list of OperationDescriptor, in document order."""
    return OpenApiParser(load_document(file_path)).operations()


def group_by_tag(operations: list[OperationDescriptor]) -> dict[str, list[OperationDescriptor]]:
    groups: dict[str, list[OperationDescriptor]] = {}
    for operation in operations:
        groups.setdefault(operation.tag, []).append(operation)
    return groups


def tags_by_name(document: dict) -> dict[str, TagInfo]:
    tags = {}
    for tag in document.get("tags") or []:
        name = _tag_name(tag["name"])
        tags[name] = TagInfo(
            name=name,
            title=_squish(tag["name"]),
            product_name=_squish(tag.get("x-product-name") or ""),
            description=_squish(tag.get("description") or ""),
        )
    return tags


def method_name(tag: str, operation_id: str) -> str:
    """Derive the function name from an operationId, e.g. ``customer_list`` -> ``list``."""
    prefix = OPERATION_ID_PREFIXES.get(tag, camelize(tag, upper=False))
    name = operation_id.removeprefix(prefix).removeprefix("_")
    name = underscore(name)
    name = RENAMED_METHODS.get((tag, name), name)
    return python_identifier(name)


def response_data_fields(operation: OperationDescriptor) -> list[str]:
    """Required keys of the success response's ``data`` object, minus the envelope keys."""
    if not operation.success_schema:
        return []
    data_schema = (operation.success_schema.get("properties") or {}).get("data") or {}
    required = data_schema.get("required") or []
    return [key for key in required if key not in ENVELOPE_KEYS]


def schema_type(schema: dict) -> str:
    """Render a (ref-free) schema as a Python type label."""
    return OpenApiParser({}).schema_type(schema)


class OpenApiParser:
    """Walks one OpenAPI document, resolving local ``$ref`` pointers as it goes."""

    def __init__(self, document: dict):
        self.document = document

    def resolve(self, node: Any) -> Any:
        seen = set()
        while isinstance(node, dict) and "$ref" in node:
            ref = node["$ref"]
            if ref in seen or not ref.startswith("#/"):
                raise ValueError(f"Cannot resolve reference: {ref}")
            seen.add(ref)
            node = self._lookup(ref)
        return node

    def _lookup(self, ref: str) -> Any:
        node: Any = self.document
        for part in ref[2:].split("/"):
            part = part.replace("~1", "/").replace("~0", "~")
            try:
                node = node[part]
            except (KeyError, TypeError):
                raise ValueError(f"Cannot resolve reference: {ref}") from None
        return node

    # -- operations -----------------------------------------------------------

    def operations(self) -> list[OperationDescriptor]:
        operations = []
        for path, path_item in (self.document.get("paths") or {}).items():
            path_item = self.resolve(path_item) or {}
            for http_method in HTTP_METHODS:
                operation = path_item.get(http_method)
                if not operation:
                    continue

                tags = operation.get("tags") or []
                if not tags:
                    continue
                tag = _tag_name(tags[0])

                operation_id = operation.get("operationId") or _fallback_operation_id(http_method, path)
                operations.append(
                    OperationDescriptor(
                        path=path,
                        http_method=http_method.upper(),
                        tag=tag,
                        operation_id=operation_id,
                        method_name=method_name(tag, operation_id),
                        summary=_squish(operation.get("summary") or ""),
                        description=_squish(operation.get("description") or ""),
                        parameters=self.parameters(path_item, operation),
                        success_schema=self.success_schema(operation),
                    )
                )
        return operations

    def parameters(self, path_item: dict, operation: dict) -> list[ParameterDescriptor]:
        params = [
            *self.path_and_query_parameters(path_item, operation),
            *self.request_body_parameters(operation),
        ]

        unique: dict[str, ParameterDescriptor] = {}
        for param in params:
            unique.setdefault(param.python_name, param)

        # sorted() is stable: document order is kept within each bucket
        return sorted(unique.values(), key=lambda param: not param.required)

    def path_and_query_parameters(self, path_item: dict, operation: dict) -> list[ParameterDescriptor]:
        merged: dict[tuple[str, str], dict] = {}
        for raw in [*(path_item.get("parameters") or []), *(operation.get("parameters") or [])]:
            param = self.resolve(raw)
            merged[(param["name"], param.get("in", "query"))] = param

        result = []
        for (name, location), param in merged.items():
            if location not in ("path", "query"):
                continue
            result.append(
                ParameterDescriptor(
                    name=name,
                    location=location,
                    required=True if location == "path" else bool(param.get("required", False)),
                    param_type=self.schema_type(param.get("schema") or {}),
                    description=_squish(param.get("description") or ""),
                )
            )
        return result

    def request_body_parameters(self, operation: dict) -> list[ParameterDescriptor]:
        request_body = self.resolve(operation.get("requestBody"))
        if not request_body:
            return []
        json_body = (request_body.get("content") or {}).get("application/json")
        if not json_body or not json_body.get("schema"):
            return []

        schema = self.resolve(json_body["schema"])
        if schema.get("type") == "array":
            return self.array_properties(schema)
        return self.object_properties(schema)

    def object_properties(self, schema: dict) -> list[ParameterDescriptor]:
        schema = self.resolve(schema)
        if schema.get("allOf"):
            branches = [self.resolve(branch) for branch in schema["allOf"]]
            properties: dict = {}
            for branch in branches:
                properties.update(branch.get("properties") or {})
            required = [name for branch in branches for name in branch.get("required") or []] or None
        else:
            properties = schema.get("properties") or {}
            required = schema.get("required")

        result = []
        for name, property_schema in properties.items():
            property_schema = self.resolve(property_schema)
            result.append(
                ParameterDescriptor(
                    name=name,
                    location="body",
                    # no required list at all means every property is required
                    required=name in required if required is not None else True,
                    param_type=self.schema_type(property_schema),
                    description=self.schema_description(property_schema),
                    object_properties=self.object_properties(property_schema),
                )
            )
        return result

    def array_properties(self, schema: dict) -> list[ParameterDescriptor]:
        items = self.resolve(schema.get("items") or {})

        result = []
        for name, property_schema in (items.get("properties") or {}).items():
            property_schema = self.resolve(property_schema)
            # an array-valued item property documents its element schema
            element_schema = property_schema
            if property_schema.get("type") == "array":
                element_schema = self.resolve(property_schema.get("items") or {})
            result.append(
                ParameterDescriptor(
                    name=name,
                    location="body",
                    required=True,
                    param_type=f"list[{self.schema_type(element_schema)}]",
                    description=self.schema_description(property_schema),
                    object_properties=self.object_properties(element_schema),
                )
            )
        return result

    def success_schema(self, operation: dict) -> dict | None:
        responses = operation.get("responses") or {}
        code = next((code for code in responses if _SUCCESS_STATUS.fullmatch(str(code))), None)
        if code is None:
            return None

        response = self.resolve(responses[code]) or {}
        json_content = (response.get("content") or {}).get("application/json") or {}
        schema = self.resolve(json_content.get("schema"))
        if not schema:
            return None

        properties = {name: self.resolve(value) for name, value in (schema.get("properties") or {}).items()}
        return {**schema, "properties": properties}

    # -- schemas --------------------------------------------------------------

    def schema_type(self, schema: dict) -> str:
        schema = self.resolve(schema)
        schema_type = schema.get("type")

        if schema_type == "array":
            return f"list[{self.schema_type(schema.get('items') or {})}]"
        if schema_type == "string":
            if schema.get("format") == "date-time":
                return "datetime"
            if schema.get("enum"):
                return "Literal[{}]".format(", ".join(f'"{value}"' for value in schema["enum"]))
            return "str"
        if schema_type == "object":
            return "dict"
        if schema_type == "integer":
            return "int"
        if schema_type == "boolean":
            return "bool"
        if schema_type == "number":
            return "float"
        raise UnhandledSchemaTypeError(f"Unhandled schema type: {schema_type}")

    def schema_description(self, schema: dict) -> str:
        description = schema.get("description")
        if not description and isinstance(schema.get("items"), dict):
            description = self.resolve(schema["items"]).get("description")
        return _squish(description or "")


def _fallback_operation_id(method: str, path: str) -> str:
    sanitized = path.strip("/").replace("/", "_").replace("{", "").replace("}", "")
    return f"{method}_{sanitized or 'root'}"


def _squish(text: str) -> str:
    return " ".join(str(text).split())


def _tag_name(text: str) -> str:
    return "".join(str(text).split())
