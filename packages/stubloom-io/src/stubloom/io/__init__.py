__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .docstring import format_docstring
from .stub_generator import StubGenerator
from .syntax import StubSyntaxChecker, StubSyntaxError

__all__ = ["StubGenerator", "StubSyntaxChecker", "StubSyntaxError", "format_docstring"]
