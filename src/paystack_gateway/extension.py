"""Registry of hand-written helpers layered onto generated classes."""

import types
from typing import TypeVar

from paystack_gateway.configuration import get_config

T = TypeVar("T", bound=type)

_mixins: dict[type, list[type]] = {}
_extended: dict[type, type] = {}


def extend(target: type, *mixins: type) -> None:
    """Register ``mixins`` to be layered onto ``target`` when extensions are enabled."""
    registered = _mixins.setdefault(target, [])
    for mixin in mixins:
        if mixin not in registered:
            registered.append(mixin)
    _extended.pop(target, None)


def extended(cls: T) -> T:
    """Return ``cls`` combined with its registered mixins, or ``cls`` itself."""
    if not get_config().use_extensions or cls not in _mixins:
        return cls

    if cls not in _extended:
        bases = (*_mixins[cls], cls)
        _extended[cls] = types.new_class(
            cls.__name__,
            bases,
            exec_body=lambda ns: ns.update(
                {"__module__": cls.__module__, "__qualname__": cls.__qualname__}
            ),
        )
    return _extended[cls]  # type: ignore[return-value]
