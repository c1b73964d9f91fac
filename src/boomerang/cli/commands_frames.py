"""`boomerang frames` command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from rich.console import Console
from rich.table import Table
import tyro

from boomerang.config.loader import build_player_options, load_user_inputs
from boomerang.sequence.descriptor import iter_frame_file_names


@dataclass(slots=True)
class FramesCommand:
    """List frame paths of a sequence."""

    frame_path: Annotated[str | None, tyro.conf.Positional] = None
    frame_count: int | None = None
    config: str | None = None
    log_level: str | None = None
    start: int = 0
    stop: int | None = None
    table: bool = False


def _frames_table(start: int, names: list[str]) -> Table:
    table = Table(title="Frames", expand=False)
    table.add_column("idx", justify="right")
    table.add_column("path")
    for offset, name in enumerate(names):
        table.add_row(str(start + offset), name)
    return table


def execute(command: FramesCommand) -> None:
    inputs = load_user_inputs(command.config, command.frame_path, command.frame_count)
    options = build_player_options(inputs)
    names = list(iter_frame_file_names(options.descriptor, command.start, command.stop))
    if command.table:
        Console().print(_frames_table(command.start, names))
        return
    for name in names:
        print(name)
