import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from stubloom.common import bus
from stubloom.config import ConfigError, load_config_from_path
from stubloom.needle import L, needle
from stubloom.spec import StubloomError
from stubloom.stubgen import generate_stubs

from ..targets import TargetError, load_registry

log = logging.getLogger(__name__)


def generate_command(
    target: str = typer.Argument(..., help=needle.get(L.cli.argument.target.help)),
    root: Path = typer.Option(
        Path("."), "--root", "-r", help=needle.get(L.cli.option.root.help)
    ),
    check_syntax: Optional[bool] = typer.Option(
        None,
        "--check-syntax/--no-check-syntax",
        help=needle.get(L.cli.option.check_syntax.help),
    ),
):
    try:
        config = load_config_from_path(root)
    except ConfigError as e:
        bus.error(L.config.error, error=e)
        raise typer.Exit(code=1)

    if check_syntax is not None:
        config = replace(config, check_syntax=check_syntax)
    bus.debug(
        L.config.loaded,
        path=config.config_path,
        module=config.module_name,
        strategy=config.render.self_import.value,
    )

    try:
        registry = load_registry(target)
    except TargetError:
        raise typer.Exit(code=1)

    try:
        generate_stubs(registry, config)
    except (StubloomError, OSError) as e:
        log.debug("Stub generation failed", exc_info=True)
        bus.error(L.generate.run.failed, error=e)
        raise typer.Exit(code=1)
