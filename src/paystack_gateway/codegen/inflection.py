"""Identifier case conversion for generated names."""

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(name: str) -> str:
    """``listBanks`` -> ``list_banks``, ``ApplePay`` -> ``apple_pay``."""
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.replace("-", "_").replace(" ", "_").lower()


def camelize(name: str, upper: bool = True) -> str:
    """``fetch_response`` -> ``FetchResponse``; with ``upper=False`` -> ``fetchResponse``."""
    parts = [part for part in re.split(r"[_\s-]+", name) if part]
    camel = "".join(part[:1].upper() + part[1:] for part in parts)
    if not upper:
        return camel[:1].lower() + camel[1:]
    return camel


def parameterize(name: str) -> str:
    """URL slug form: ``Dedicated Virtual Account`` -> ``dedicated-virtual-account``."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
