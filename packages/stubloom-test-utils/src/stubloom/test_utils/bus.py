from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import stubloom.common
from stubloom.common.messaging.bus import MessageId
from stubloom.needle import SemanticPointer


class SpyBus:
    """
    Records every message sent through the global `stubloom.common.bus`.

    Modules bind the instance with `from stubloom.common import bus`, so the
    instance is patched in place. Nothing is formatted or printed while the
    patch is active.
    """

    def __init__(self):
        self._messages: List[Dict[str, Any]] = []

    @contextmanager
    def patch(self, monkeypatch: Any):
        def record(level: str, msg_id: MessageId, **kwargs: Any) -> None:
            self._messages.append({"level": level, "id": str(msg_id), "params": kwargs})

        monkeypatch.setattr(stubloom.common.bus, "_render", record)
        yield self

    def get_messages(self) -> List[Dict[str, Any]]:
        return self._messages

    def ids(self, level: Optional[str] = None) -> List[str]:
        return [m["id"] for m in self._messages if level is None or m["level"] == level]

    def assert_id_called(self, msg_id: SemanticPointer, level: Optional[str] = None):
        key = str(msg_id)
        if key not in self.ids(level):
            raise AssertionError(
                f"Message with ID '{key}' was not sent.\nCaptured IDs: {self.ids()}"
            )
