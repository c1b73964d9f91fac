"""`boomerang resolve` command."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import json
from typing import Annotated

import tyro

from boomerang.config.loader import build_player_options, load_user_inputs


@dataclass(slots=True)
class ResolveCommand:
    """Resolve player options and print the frame-sequence descriptor."""

    frame_path: Annotated[str | None, tyro.conf.Positional] = None
    frame_count: int | None = None
    config: str | None = None
    log_level: str | None = None


def execute(command: ResolveCommand) -> None:
    inputs = load_user_inputs(command.config, command.frame_path, command.frame_count)
    options = build_player_options(inputs)
    payload = {
        "identifier": options.identifier,
        "scroll_area": options.scroll_area,
        "descriptor": asdict(options.descriptor),
    }
    print(json.dumps(payload, indent=2, sort_keys=True))
