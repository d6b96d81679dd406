import logging
from typing import Any, Dict, Optional, Union

from stubloom.needle import Needle, SemanticPointer
from .protocols import Renderer

MessageId = Union[str, SemanticPointer]

log = logging.getLogger("stubloom")

_LOG_LEVELS: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class MessageBus:
    """
    Delivers user-facing messages.

    A message is a catalog key plus format parameters. The formatted text goes
    to the installed renderer; with none installed (library use), it goes to
    the `stubloom` logger at the matching level.
    """

    def __init__(self, catalog: Needle):
        self._catalog = catalog
        self._renderer: Optional[Renderer] = None

    def set_renderer(self, renderer: Optional[Renderer]) -> None:
        self._renderer = renderer

    def _format(self, msg_id: MessageId, **kwargs: Any) -> str:
        template = self._catalog.get(msg_id)
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError):
            return f"<formatting_error for '{msg_id}'>"

    def _render(self, level: str, msg_id: MessageId, **kwargs: Any) -> None:
        message = self._format(msg_id, **kwargs)
        if self._renderer is None:
            log.log(_LOG_LEVELS[level], message)
            return
        self._renderer.render(message, level)

    def debug(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("debug", msg_id, **kwargs)

    def info(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("info", msg_id, **kwargs)

    def success(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("success", msg_id, **kwargs)

    def warning(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("warning", msg_id, **kwargs)

    def error(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("error", msg_id, **kwargs)
