__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from pathlib import Path

from stubloom.needle import needle
from .messaging.bus import MessageBus
from .transaction import TransactionManager

# Packaged catalogs: ./assets/needle/<lang>/*.json
needle.add_root(Path(__file__).parent / "assets")

bus = MessageBus(needle)

__all__ = ["bus", "MessageBus", "TransactionManager"]
