"""Module emitter: renders one Python module per OpenAPI tag."""

import ast
import re
import textwrap

from paystack_gateway.codegen.inflection import camelize, parameterize, underscore
from paystack_gateway.codegen.models import OperationDescriptor, ParameterDescriptor, TagInfo
from paystack_gateway.codegen.parser import group_by_tag, response_data_fields
from paystack_gateway.response import Response

INDENT = "    "
WRAP_LINE_LENGTH = 80
MAX_INLINE_ENTRIES = 5
MAX_INLINE_DATA_FIELDS = 3

DOCS_URL = "https://paystack.com/docs/api"


class GenerationError(Exception):
    """Raised when rendered source fails validation."""


def check_syntax(filename: str, content: str) -> None:
    try:
        ast.parse(content, filename=filename)
    except SyntaxError as e:
        raise GenerationError(f"Generated module {filename} is not valid Python: {e.msg} (line {e.lineno})") from e


def module_filename(tag: str) -> str:
    return f"{underscore(tag)}.py"


def wrapped_text(text: str, initial_indent: str, subsequent_indent: str) -> list[str]:
    """Greedily pack words into lines of at most WRAP_LINE_LENGTH columns."""
    return textwrap.wrap(
        text,
        width=WRAP_LINE_LENGTH,
        initial_indent=initial_indent,
        subsequent_indent=subsequent_indent,
        break_long_words=False,
        break_on_hyphens=False,
    ) or [initial_indent.rstrip()]


def _docstring_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


class ModuleEmitter:
    """Renders endpoint modules from parsed operations."""

    def __init__(self, tags: dict[str, TagInfo] | None = None):
        self.tags = tags or {}

    def generate(self, operations: list[OperationDescriptor]) -> dict[str, str]:
        """Render every tag's module.

        Returns dict of {filename: content}. Raises GenerationError if any
        rendered module is not valid Python.
        """
        files = {module_filename(tag): self.render_module(tag, tag_operations)
                 for tag, tag_operations in group_by_tag(operations).items()}

        for filename, content in files.items():
            check_syntax(filename, content)
        return files

    # -- module ---------------------------------------------------------------

    def render_module(self, tag: str, operations: list[OperationDescriptor]) -> str:
        parts = [
            self._render_module_docstring(tag),
            "from __future__ import annotations",
            self._render_imports(operations),
            f'api = RequestModule("{tag}")',
        ]
        body = [self._render_operation(operation) for operation in operations]
        return "\n\n".join(parts) + "\n\n\n" + "\n\n\n".join(body) + "\n"

    def _render_module_docstring(self, tag: str) -> str:
        info = self.tags.get(tag)
        title = (info.product_name or info.title) if info else tag
        lines = [f'"""{_docstring_text(title)}', ""]
        if info and info.description:
            lines.extend(wrapped_text(_docstring_text(info.description), "", ""))
            lines.append("")
        lines.append(f"{DOCS_URL}/{self._docs_slug(tag)}")
        lines.append('"""')
        return "\n".join(lines)

    def _render_imports(self, operations: list[OperationDescriptor]) -> str:
        labels = [param.param_type for operation in operations for param in operation.parameters]

        stdlib = []
        if any(re.search(r"\bdatetime\b", label) for label in labels):
            stdlib.append("from datetime import datetime")
        if any("Literal[" in label for label in labels):
            stdlib.append("from typing import Literal")

        package = ["from paystack_gateway.api_error import ApiError"]
        if any(operation.http_method == "GET" for operation in operations):
            package.append("from paystack_gateway.cache import CacheOptions")
        package.append("from paystack_gateway.request import RequestModule")
        package.append("from paystack_gateway.response import Response")

        return "\n\n".join("\n".join(group) for group in (stdlib, package) if group)

    def _docs_slug(self, tag: str) -> str:
        info = self.tags.get(tag)
        return parameterize(info.title if info else tag)

    # -- per operation --------------------------------------------------------

    def _render_operation(self, operation: OperationDescriptor) -> str:
        return "\n\n\n".join([
            self._render_response_class(operation),
            self._render_error_class(operation),
            self._render_function(operation),
        ])

    def _response_class_name(self, operation: OperationDescriptor) -> str:
        return camelize(f"{operation.method_name}_response")

    def _error_class_name(self, operation: OperationDescriptor) -> str:
        return camelize(f"{operation.method_name}_error")

    def _render_response_class(self, operation: OperationDescriptor) -> str:
        lines = [
            f"class {self._response_class_name(operation)}(Response):",
            f'{INDENT}"""Successful response from calling :func:`{operation.method_name}`."""',
        ]

        fields = [
            name for name in response_data_fields(operation)
            if not name.startswith("_") and not hasattr(Response, name)
        ]
        if len(fields) > MAX_INLINE_DATA_FIELDS:
            lines.append("")
            lines.append(f"{INDENT}data_fields = (")
            lines.extend(f'{INDENT * 2}"{name}",' for name in fields)
            lines.append(f"{INDENT})")
        elif fields:
            quoted = ", ".join(f'"{name}"' for name in fields)
            trailing = "," if len(fields) == 1 else ""
            lines.append("")
            lines.append(f"{INDENT}data_fields = ({quoted}{trailing})")

        return "\n".join(lines)

    def _render_error_class(self, operation: OperationDescriptor) -> str:
        return "\n".join([
            f"class {self._error_class_name(operation)}(ApiError):",
            f'{INDENT}"""Error response from :func:`{operation.method_name}`."""',
        ])

    def _render_function(self, operation: OperationDescriptor) -> str:
        return "\n".join([
            "@api.api_method",
            self._render_signature(operation),
            self._render_docstring(operation),
            self._render_call(operation),
        ])

    def _render_signature(self, operation: OperationDescriptor) -> str:
        args = [
            f"{param.python_name}: {param.param_type}" if param.required
            else f"{param.python_name}: {param.param_type} | None = None"
            for param in operation.parameters
        ]
        if operation.http_method == "GET":
            args.append("cache_options: CacheOptions | None = None")

        returns = self._response_class_name(operation)
        if not args:
            return f"def {operation.method_name}() -> {returns}:"
        if len(args) > MAX_INLINE_ENTRIES:
            arg_lines = "".join(f"{INDENT}{arg},\n" for arg in ["*", *args])
            return f"def {operation.method_name}(\n{arg_lines}) -> {returns}:"
        return f"def {operation.method_name}(*, {', '.join(args)}) -> {returns}:"

    def _render_docstring(self, operation: OperationDescriptor) -> str:
        heading = f"{operation.http_method} {operation.path}"
        if operation.summary:
            heading = f"{operation.summary}: {heading}"

        lines = [f'{INDENT}"""{_docstring_text(heading)}', ""]
        if operation.description:
            lines.extend(wrapped_text(_docstring_text(operation.description), INDENT, INDENT))
            lines.append("")
        lines.append(f"{INDENT}{DOCS_URL}/{self._docs_slug(operation.tag)}/#{operation.method_name}")
        lines.append("")

        for param in operation.parameters:
            lines.extend(self._render_param_doc(param))
        if operation.http_method == "GET":
            lines.append(f"{INDENT}:param cache_options: cache the response in the local file store")
        lines.append(f"{INDENT}:raises {self._error_class_name(operation)}: if the request fails")
        lines.append(f'{INDENT}"""')
        return "\n".join(lines)

    def _render_param_doc(self, param: ParameterDescriptor) -> list[str]:
        text = f"(required) {param.description}" if param.required else param.description
        lines = wrapped_text(_docstring_text(text.strip()), f"{INDENT}:param {param.python_name}: ", INDENT * 2)
        lines[0] = lines[0].rstrip()

        if param.object_properties:
            lines.append("")
            for prop in param.object_properties:
                entry = f"``{prop.name}`` ({prop.param_type})"
                if prop.description:
                    entry = f"{entry}: {prop.description}"
                lines.extend(wrapped_text(_docstring_text(entry), f"{INDENT * 2}* ", INDENT * 3))
            lines.append("")
        return lines

    def _render_path(self, operation: OperationDescriptor) -> str:
        path = operation.path
        for param in operation.path_parameters:
            path = path.replace(f"{{{param.name}}}", f"{{{param.python_name}}}")
        return f'f"{path}"' if operation.path_parameters else f'"{path}"'

    def _render_params(self, operation: OperationDescriptor) -> list[str]:
        params = operation.request_parameters
        if not params:
            return []
        entries = [f'"{param.name}": {param.python_name}' for param in params]
        if len(entries) > MAX_INLINE_ENTRIES:
            return [f"{INDENT * 2}{{", *(f"{INDENT * 3}{entry}," for entry in entries), f"{INDENT * 2}}},"]
        return [f"{INDENT * 2}{{{', '.join(entries)}}},"]

    def _render_call(self, operation: OperationDescriptor) -> str:
        lines = [
            f"{INDENT}return api.call(",
            f'{INDENT * 2}"{operation.method_name}",',
            f'{INDENT * 2}"{operation.http_method}",',
            f"{INDENT * 2}{self._render_path(operation)},",
            *self._render_params(operation),
            f"{INDENT * 2}response_class={self._response_class_name(operation)},",
            f"{INDENT * 2}error_class={self._error_class_name(operation)},",
        ]
        if operation.http_method == "GET":
            lines.append(f"{INDENT * 2}cache_options=cache_options,")
        lines.append(f"{INDENT})")
        return "\n".join(lines)
