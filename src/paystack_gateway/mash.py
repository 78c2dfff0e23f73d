"""Dictionary with attribute access, used for response payloads."""

from typing import Any


class Mash(dict):
    """A dict whose keys are also readable as attributes.

    Nested dicts (including those inside lists) are converted to ``Mash`` on
    assignment. Reading a missing key as an attribute returns ``None``.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__()
        self.update(*args, **kwargs)

    @classmethod
    def convert(cls, value: Any) -> Any:
        if isinstance(value, Mash):
            return value
        if isinstance(value, dict):
            return cls(value)
        if isinstance(value, list):
            return [cls.convert(item) for item in value]
        return value

    def __setitem__(self, key: Any, value: Any) -> None:
        super().__setitem__(key, self.convert(value))

    def update(self, *args: Any, **kwargs: Any) -> None:
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key: Any, default: Any = None) -> Any:
        if key not in self:
            self[key] = default
        return self[key]

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        return f"Mash({dict.__repr__(self)})"
