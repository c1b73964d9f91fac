from __future__ import annotations

import json
from pathlib import Path

import pytest

from boomerang.config.loader import (
    build_player_options,
    load_object,
    load_user_inputs,
    parse_scroll_area,
    user_inputs_from_dict,
)
from boomerang.config.schema import UserInputs
from boomerang.errors import InvalidOptionError, MissingOptionError, SequenceOverflowError


def test_defaults_applied():
    options = build_player_options(UserInputs(frame_path="images/frame_001.jpg", frame_count=50))

    assert options.identifier == "boomerang"
    assert options.scroll_area == 0
    assert options.path == "images/"
    assert options.count == 50
    assert options.descriptor.prefix == "frame_"


def test_missing_frame_path():
    with pytest.raises(MissingOptionError, match="Frame path is not defined"):
        build_player_options(UserInputs(frame_path="", frame_count=10))


def test_missing_frame_count():
    with pytest.raises(MissingOptionError, match="Frame count is not defined"):
        build_player_options(UserInputs(frame_path="images/frame_001.jpg", frame_count=0))


def test_descriptor_errors_propagate():
    with pytest.raises(SequenceOverflowError):
        build_player_options(UserInputs(frame_path="a/b/shot_00.png", frame_count=100))


@pytest.mark.parametrize(
    ("value", "expected"),
    [("300", 300), ("300px", 300), (" 12.5vh", 12), (640, 640), ("-20", -20)],
)
def test_parse_scroll_area(value, expected):
    assert parse_scroll_area(value) == expected


def test_parse_scroll_area_rejects_non_numeric():
    with pytest.raises(InvalidOptionError):
        parse_scroll_area("auto")


def test_scrollable_area_is_measured_only_when_unset():
    measured = build_player_options(UserInputs(frame_path="images/frame_001.jpg", frame_count=5))
    measured.set_scrollable_area(1800)
    assert measured.scroll_area == 1800

    fixed = build_player_options(
        UserInputs(
            frame_path="images/frame_001.jpg",
            frame_count=5,
            identifier="hero",
            scroll_area="900px",
        )
    )
    fixed.set_scrollable_area(1800)
    assert fixed.identifier == "hero"
    assert fixed.scroll_area == 900


def test_user_inputs_accept_camel_case_keys():
    inputs = user_inputs_from_dict(
        {"framePath": "a/f_01.png", "frameCount": 12, "scrollArea": "50px", "identifier": "x"}
    )
    assert inputs == UserInputs(frame_path="a/f_01.png", frame_count=12, identifier="x", scroll_area="50px")


def test_user_inputs_reject_unknown_keys():
    with pytest.raises(ValueError, match="fps"):
        user_inputs_from_dict({"frame_path": "a/f_01.png", "fps": 30})


def test_load_without_reference_uses_arguments():
    assert load_user_inputs(None, "a/f_01.png", 3) == UserInputs(frame_path="a/f_01.png", frame_count=3)


def test_load_json_reference(tmp_path: Path):
    cfg = tmp_path / "options.json"
    cfg.write_text(json.dumps({"framePath": "seq/img_001.jpg", "frameCount": 40}))

    inputs = load_user_inputs(str(cfg))
    assert inputs.frame_path == "seq/img_001.jpg"
    assert inputs.frame_count == 40

    overridden = load_user_inputs(str(cfg), frame_count=7)
    assert overridden.frame_count == 7


def test_load_python_reference(tmp_path: Path):
    module = tmp_path / "player_cfg.py"
    module.write_text(
        "from boomerang.config.schema import UserInputs\n"
        "OPTIONS = UserInputs(frame_path='seq/a_01.png', frame_count=4, identifier='hero')\n"
        "RAW = {'framePath': 'seq/b_001.png', 'frameCount': 9}\n"
        "NOT_OPTIONS = 42\n"
    )

    inputs = load_user_inputs(f"{module}:OPTIONS", frame_path="other/a_01.png")
    assert inputs.frame_path == "other/a_01.png"
    assert inputs.identifier == "hero"

    # Overrides must not leak into the module-level object.
    original = load_object(f"{module}:OPTIONS")
    assert original.frame_path == "seq/a_01.png"

    assert load_user_inputs(f"{module}:RAW").frame_count == 9

    with pytest.raises(TypeError, match="int"):
        load_user_inputs(f"{module}:NOT_OPTIONS")


def test_load_object_requires_attribute():
    with pytest.raises(ValueError, match="module_or_path:attribute"):
        load_object("example_options")


def test_example_options_module_resolves():
    example = Path(__file__).resolve().parents[1] / "example_options.py"
    options = build_player_options(load_user_inputs(f"{example}:OPTIONS"))

    assert options.identifier == "hero-boomerang"
    assert options.scroll_area == 4000
    assert options.descriptor.pad_width == 4
    assert options.path == "assets/sequences/hero/"


@pytest.mark.parametrize(
    "payload",
    [
        {"framePath": "a/f_01.png", "frame_path": "b/f_01.png", "frameCount": 3},
        {"frame_path": "a/f_01.png", "frameCount": 3, "frame_count": 4},
    ],
)
def test_user_inputs_reject_aliased_duplicates(payload):
    with pytest.raises(ValueError, match="given twice"):
        user_inputs_from_dict(payload)


def test_load_object_missing_attribute(tmp_path: Path):
    module = tmp_path / "empty_cfg.py"
    module.write_text("VALUE = 1\n")

    with pytest.raises(ValueError, match="has no attribute 'MISSING'"):
        load_object(f"{module}:MISSING")


def test_load_object_dotted_module_name():
    assert load_object("boomerang.config.schema:UserInputs") is UserInputs
