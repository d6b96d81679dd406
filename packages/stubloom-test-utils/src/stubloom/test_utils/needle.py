from contextlib import contextmanager
from typing import Any, Dict

from stubloom.needle import needle


class MockNeedle:
    """Serves templates from a fixed table instead of the packaged catalogs."""

    def __init__(self, templates: Dict[str, str]):
        self._templates = templates

    def get(self, key: Any, lang: Any = None) -> str:
        key_str = str(key)
        return self._templates.get(key_str, key_str)

    @contextmanager
    def patch(self, monkeypatch: Any):
        # The bus holds the global catalog instance; patch its lookup in place.
        monkeypatch.setattr(needle, "get", self.get)
        yield self
