from typing import Any


class SemanticPointer:
    """
    A dotted message key built by attribute access: `L.generate.run.start`.

    Only the `_key` slot is a real attribute, so any public name extends the
    key.
    """

    __slots__ = ("_key",)

    def __init__(self, key: str = ""):
        object.__setattr__(self, "_key", key)

    def __getattr__(self, name: str) -> "SemanticPointer":
        if name.startswith("__"):
            raise AttributeError(name)
        return SemanticPointer(f"{self._key}.{name}" if self._key else name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("SemanticPointer is immutable")

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return f"L.{self._key}" if self._key else "L"

    def __eq__(self, other: Any) -> bool:
        return str(other) == self._key

    def __hash__(self) -> int:
        return hash(self._key)


L = SemanticPointer()
