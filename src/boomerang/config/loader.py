"""Load player options from Python references or JSON files."""

from __future__ import annotations

from dataclasses import fields, replace
import importlib
import importlib.util
import json
from pathlib import Path
import re
from types import ModuleType
from typing import Any

from boomerang.config.schema import DEFAULT_IDENTIFIER, PlayerOptions, UserInputs
from boomerang.errors import InvalidOptionError, MissingOptionError
from boomerang.sequence.descriptor import resolve_descriptor


_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

# Keys accepted in option payloads, including the camelCase browser names.
_KEY_ALIASES = {
    "framePath": "frame_path",
    "frameCount": "frame_count",
    "scrollArea": "scroll_area",
}


def _import_reference_module(module_ref: str) -> ModuleType:
    """Import a dotted module name, or execute a ``.py`` file as a module."""

    source = Path(module_ref).expanduser()
    if not source.is_file():
        return importlib.import_module(module_ref)

    spec = importlib.util.spec_from_file_location(f"_boomerang_options_{source.stem}", source)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot import player options from {source}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def load_object(reference: str) -> Any:
    """Load object by `module_or_path:attribute` reference."""

    module_ref, sep, attr_path = reference.rpartition(":")
    if not sep or not module_ref or not attr_path:
        raise ValueError(
            f"Options reference '{reference}' must be in form 'module_or_path:attribute'."
        )

    target: Any = _import_reference_module(module_ref)
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ValueError(f"Options reference '{reference}' has no attribute '{part}'.") from exc
    return target


def parse_scroll_area(value: str | int) -> int:
    """Parse a scroll area such as ``300`` or ``"300px"`` into pixels."""

    if isinstance(value, int) and not isinstance(value, bool):
        return value
    match = _LEADING_INT.match(str(value))
    if match is None:
        raise InvalidOptionError(f"Scroll area {value!r} does not start with an integer.")
    return int(match.group(1))


def user_inputs_from_dict(payload: dict[str, Any]) -> UserInputs:
    """Build UserInputs from a plain dictionary."""

    known = {item.name for item in fields(UserInputs)}
    values: dict[str, Any] = {}
    given_as: dict[str, str] = {}
    for key, value in payload.items():
        name = _KEY_ALIASES.get(key, key)
        if name not in known:
            raise ValueError(f"Unknown player option: {key}")
        if name in given_as:
            raise ValueError(
                f"Player option {name} is given twice, as '{given_as[name]}' and '{key}'."
            )
        given_as[name] = key
        values[name] = value
    values.setdefault("frame_path", None)
    values.setdefault("frame_count", None)
    return UserInputs(**values)


def load_user_inputs(
    config_ref: str | None,
    frame_path: str | None = None,
    frame_count: int | None = None,
) -> UserInputs:
    """Load UserInputs from a reference, letting explicit arguments win."""

    if config_ref is None:
        return UserInputs(frame_path=frame_path, frame_count=frame_count)

    if config_ref.endswith(".json"):
        with Path(config_ref).expanduser().open("r", encoding="utf-8") as handle:
            loaded: Any = json.load(handle)
    else:
        loaded = load_object(config_ref)

    if isinstance(loaded, dict):
        inputs = user_inputs_from_dict(loaded)
    elif isinstance(loaded, UserInputs):
        inputs = replace(loaded)
    else:
        type_name = type(loaded).__name__
        raise TypeError(f"Config reference must resolve to UserInputs or dict, got {type_name}.")

    if frame_path is not None:
        inputs.frame_path = frame_path
    if frame_count is not None:
        inputs.frame_count = frame_count
    return inputs


def build_player_options(inputs: UserInputs) -> PlayerOptions:
    """Validate raw inputs and derive the sequence descriptor once."""

    if not inputs.frame_path:
        raise MissingOptionError("Frame path is not defined.")
    if not inputs.frame_count:
        raise MissingOptionError("Frame count is not defined.")

    scroll_area = 0
    if inputs.scroll_area:
        scroll_area = parse_scroll_area(inputs.scroll_area)

    return PlayerOptions(
        inputs=inputs,
        descriptor=resolve_descriptor(inputs.frame_path, inputs.frame_count),
        identifier=inputs.identifier or DEFAULT_IDENTIFIER,
        scroll_area=scroll_area,
    )
