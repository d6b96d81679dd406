__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .pointer import L, SemanticPointer
from .catalog import load_catalog
from .runtime import Needle, needle

__all__ = ["L", "SemanticPointer", "load_catalog", "Needle", "needle"]
