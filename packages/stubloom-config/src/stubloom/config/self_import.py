from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from stubloom.spec import TypeInfo

Version = Tuple[int, int]

_CONSTRAINT_PREFIXES = (">=", "==", "~=")


class SelfImportStrategy(str, Enum):
    """Which module `Self` is imported from."""

    TYPING = "typing"
    TYPING_EXTENSIONS = "typing_extensions"

    def type_info(self) -> TypeInfo:
        return TypeInfo.with_module(f"{self.value}.Self", self.value)


@dataclass(frozen=True)
class RenderConfig:
    """Fixed for a whole generation run."""

    self_import: SelfImportStrategy = SelfImportStrategy.TYPING
    indent: int = 4


def _parse_version_fragment(fragment: str) -> Optional[Version]:
    cleaned = fragment.strip().lstrip("=").strip()
    cleaned = cleaned.lstrip("v")
    cleaned = cleaned.removesuffix(".*").rstrip("*")

    parts = cleaned.split(".")
    major_part = parts[0].strip()
    if not (major_part.isascii() and major_part.isdigit()):
        return None

    minor_part = parts[1].strip() if len(parts) > 1 else "0"
    # "11rc1" -> "11", "x" -> ""
    for idx, ch in enumerate(minor_part):
        if not ("0" <= ch <= "9"):
            minor_part = minor_part[:idx]
            break
    minor = int(minor_part) if minor_part else 0
    return int(major_part), minor


def parse_minimum_python_version(spec: str) -> Optional[Version]:
    """
    The effective minimum (major, minor) of a `requires-python` string.

    Only `>=`, `==` and `~=` clauses count; the largest of them wins.
    Clauses that do not parse are skipped.
    """
    minimum: Optional[Version] = None
    for token in spec.replace(",", " ").split():
        for prefix in _CONSTRAINT_PREFIXES:
            if token.startswith(prefix):
                candidate = _parse_version_fragment(token[len(prefix) :])
                break
        else:
            continue

        if candidate is not None:
            minimum = candidate if minimum is None else max(minimum, candidate)
    return minimum


def select_self_import_strategy(requires_python: Optional[str]) -> SelfImportStrategy:
    min_version = parse_minimum_python_version(requires_python or "")
    if min_version is None or min_version >= (3, 11):
        return SelfImportStrategy.TYPING
    return SelfImportStrategy.TYPING_EXTENSIONS
