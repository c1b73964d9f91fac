"""Tyro CLI application entrypoint."""

from __future__ import annotations

from typing import Annotated

import tyro

from boomerang.cli import (
    commands_check,
    commands_frames,
    commands_resolve,
)
from boomerang.observability.logging import set_level


TopLevelCommand = Annotated[
    commands_resolve.ResolveCommand,
    tyro.conf.subcommand(name="resolve"),
] | Annotated[
    commands_frames.FramesCommand,
    tyro.conf.subcommand(name="frames"),
] | Annotated[
    commands_check.CheckCommand,
    tyro.conf.subcommand(name="check"),
]


def dispatch(command: TopLevelCommand) -> None:
    """Dispatch parsed top-level command object."""

    if command.log_level is not None:
        set_level(command.log_level)
    if isinstance(command, commands_resolve.ResolveCommand):
        commands_resolve.execute(command)
        return
    if isinstance(command, commands_frames.FramesCommand):
        commands_frames.execute(command)
        return
    if isinstance(command, commands_check.CheckCommand):
        commands_check.execute(command)
        return
    raise TypeError(f"Unsupported command type: {type(command).__name__}")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run requested command."""

    command = tyro.cli(TopLevelCommand, args=argv)
    dispatch(command)
