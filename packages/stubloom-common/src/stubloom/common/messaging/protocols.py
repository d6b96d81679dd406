from typing import Protocol


class Renderer(Protocol):
    def render(self, message: str, level: str) -> None:
        """
        Show one formatted message. `level` is one of "debug", "info",
        "success", "warning" or "error"; filtering by level is up to the
        renderer.
        """
        ...
