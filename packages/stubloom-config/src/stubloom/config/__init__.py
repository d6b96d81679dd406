__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .self_import import (
    RenderConfig,
    SelfImportStrategy,
    parse_minimum_python_version,
    select_self_import_strategy,
)
from .loader import ConfigError, StubloomConfig, load_config_from_path

__all__ = [
    "RenderConfig",
    "SelfImportStrategy",
    "parse_minimum_python_version",
    "select_self_import_strategy",
    "ConfigError",
    "StubloomConfig",
    "load_config_from_path",
]
