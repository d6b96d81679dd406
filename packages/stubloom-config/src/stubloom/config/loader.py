import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

from .self_import import RenderConfig, select_self_import_strategy


class ConfigError(Exception):
    pass


@dataclass
class StubloomConfig:
    module_name: str
    python_root: Path
    requires_python: Optional[str] = None
    check_syntax: bool = True
    render: RenderConfig = field(default_factory=RenderConfig)
    config_path: Optional[Path] = None


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while True:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        if current_dir.parent == current_dir:
            break
        current_dir = current_dir.parent
    raise ConfigError(f"Could not find pyproject.toml from '{search_path}'.")


def _module_name(data: Dict[str, Any]) -> Optional[str]:
    tool = data.get("tool", {})
    name = tool.get("stubloom", {}).get("module-name") or tool.get("maturin", {}).get(
        "module-name"
    )
    if name:
        return name
    project_name = data.get("project", {}).get("name")
    if project_name:
        return project_name.replace("-", "_")
    return None


def _python_root(data: Dict[str, Any], project_dir: Path) -> Path:
    tool = data.get("tool", {})
    source = tool.get("stubloom", {}).get("python-source") or tool.get(
        "maturin", {}
    ).get("python-source")
    if source:
        return project_dir / source
    return project_dir


def load_config_from_path(search_path: Path) -> StubloomConfig:
    config_path = _find_pyproject_toml(search_path)
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    module_name = _module_name(data)
    if not module_name:
        raise ConfigError(
            f"No module name in {config_path}: set [project].name or "
            "[tool.stubloom].module-name."
        )

    requires_python = data.get("project", {}).get("requires-python")
    stubloom_data: Dict[str, Any] = data.get("tool", {}).get("stubloom", {})

    return StubloomConfig(
        module_name=module_name,
        python_root=_python_root(data, config_path.parent),
        requires_python=requires_python,
        check_syntax=bool(stubloom_data.get("check-syntax", True)),
        render=RenderConfig(
            self_import=select_self_import_strategy(requires_python)
        ),
        config_path=config_path,
    )
