"""Keeps the package's ``# API Modules`` import block in sync with generated modules."""

from collections.abc import Iterable
from pathlib import Path

from paystack_gateway.codegen.inflection import underscore

MANIFEST_MARKER = "# API Modules"
PACKAGE = "paystack_gateway"


class ManifestMarkerNotFoundError(Exception):
    """Raised when the manifest has no ``# API Modules`` marker line."""


def import_line(module_name: str) -> str:
    return f"from {PACKAGE} import {underscore(module_name)}\n"


def update_manifest(manifest_path: Path, module_names: Iterable[str]) -> None:
    """Replace the import block following the marker with one sorted import per module.

    The block starts after the marker and any comment lines directly below it,
    and runs to the next blank line.
    """
    lines = Path(manifest_path).read_text(encoding="utf-8").splitlines(keepends=True)

    marker_index = next((i for i, line in enumerate(lines) if MANIFEST_MARKER in line), None)
    if marker_index is None:
        raise ManifestMarkerNotFoundError(f"Could not find '{MANIFEST_MARKER}' comment in {manifest_path}")

    start = marker_index + 1
    while start < len(lines) and lines[start].startswith("#"):
        start += 1

    end = start
    while end < len(lines) and lines[end].strip():
        end += 1

    imports = sorted({import_line(name) for name in module_names})
    lines[start:end] = imports
    Path(manifest_path).write_text("".join(lines), encoding="utf-8")
