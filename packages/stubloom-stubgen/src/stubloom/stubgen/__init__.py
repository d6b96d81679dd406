__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .builder import StubInfo, StubInfoBuilder, build_stub_info
from .runners import GenerateRunner
from .api import generate_stubs

__all__ = [
    "StubInfo",
    "StubInfoBuilder",
    "build_stub_info",
    "GenerateRunner",
    "generate_stubs",
]
