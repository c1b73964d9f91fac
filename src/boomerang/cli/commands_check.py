"""`boomerang check` command."""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Annotated

import tyro

from boomerang.config.loader import build_player_options, load_user_inputs
from boomerang.sequence.scanner import scan_sequence


@dataclass(slots=True)
class CheckCommand:
    """Check that every frame of a sequence exists under a directory."""

    frame_path: Annotated[str | None, tyro.conf.Positional] = None
    frame_count: int | None = None
    config: str | None = None
    log_level: str | None = None
    root: Path = Path(".")
    strict: bool = False


def execute(command: CheckCommand) -> None:
    inputs = load_user_inputs(command.config, command.frame_path, command.frame_count)
    options = build_player_options(inputs)
    scan = scan_sequence(options.descriptor, command.root, strict=command.strict)
    payload = {
        "root": str(command.root.resolve()),
        "frame_count": scan.frame_count,
        "present_count": scan.present_count,
        "missing_indices": scan.missing_indices,
        "first_frame": scan.frames[0].name if scan.frames else None,
        "last_frame": scan.frames[-1].name if scan.frames else None,
        "complete": scan.is_complete,
    }
    print(json.dumps(payload, indent=2, sort_keys=True))
