"""Derive frame-sequence descriptors from the path of a first frame.

A descriptor captures everything needed to name any frame of a numbered image
sequence: ``images/frame_001.jpg`` with 50 frames resolves to base path
``images/``, prefix ``frame_``, start index 1 and padding width 3, so frame 10
is ``images/frame_011.jpg``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import logging
import re

from boomerang.errors import (
    BadSequenceFormatError,
    IndexOutOfRangeError,
    InvalidFrameCountError,
    MissingOptionError,
    PaddingOverflowError,
    SequenceOverflowError,
    UnsupportedExtensionError,
)
from boomerang.observability.logging import get_logger, log_event


SUPPORTED_EXTENSIONS = ("jpg", "jpeg", "png")
MIN_PAD_WIDTH = 2

# Digit run anchored at the end of the base name.
_TRAILING_DIGITS = re.compile(r"[0-9]+\Z")

_LOGGER = get_logger("boomerang.sequence")


@dataclass(frozen=True, slots=True)
class FrameSequenceDescriptor:
    """Immutable structure of a numbered image sequence."""

    base_path: str
    prefix: str
    start_index: int
    pad_width: int
    suffix: str
    extension: str
    frame_count: int


def split_base_path(first_frame_path: str) -> tuple[str, str]:
    """Split a ``/``-delimited path into ``(base_path, filename)``.

    The base path always ends in ``/``; a bare filename yields ``"/"``.
    """

    segments = first_frame_path.split("/")
    filename = segments.pop()
    return f"{'/'.join(segments)}/", filename


def image_extension(filename: str) -> str:
    """Return the dotted extension of a supported image filename."""

    _, dot, ext = filename.rpartition(".")
    if not dot or ext.lower() not in SUPPORTED_EXTENSIONS:
        shown = ext if dot else ""
        raise UnsupportedExtensionError(
            f"Image with extension ['{shown}'] is not supported in '{filename}'. "
            f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}."
        )
    return f".{ext}"


def trailing_digit_run(name: str) -> re.Match[str]:
    """Locate the zero-padded frame number at the end of ``name``."""

    match = _TRAILING_DIGITS.search(name)
    if match is None or len(match.group()) < MIN_PAD_WIDTH:
        raise BadSequenceFormatError(
            f"Bad image sequence format in '{name}'. The name must end in a frame "
            f"number of at least {MIN_PAD_WIDTH} digits, e.g. \"frame_01.jpg\"."
        )
    return match


def resolve_descriptor(first_frame_path: str, frame_count: int) -> FrameSequenceDescriptor:
    """Parse the first frame's path and frame count into a descriptor."""

    if not isinstance(first_frame_path, str) or not first_frame_path:
        raise MissingOptionError("Frame path is not defined.")
    if isinstance(frame_count, bool) or not isinstance(frame_count, int) or frame_count < 1:
        raise InvalidFrameCountError(
            f"Frame count must be a positive integer, got {frame_count!r}."
        )

    base_path, filename = split_base_path(first_frame_path)
    extension = image_extension(filename)
    name = filename[: -len(extension)]
    run = trailing_digit_run(name)
    digits = run.group()

    if len(str(frame_count)) > len(digits):
        raise SequenceOverflowError(
            f"Frame count {frame_count} needs more digits than the {len(digits)}-digit "
            f"frame number in '{filename}'. Add leading zeros to the first frame."
        )

    descriptor = FrameSequenceDescriptor(
        base_path=base_path,
        prefix=name[: run.start()],
        start_index=int(digits),
        pad_width=len(digits),
        suffix=name[run.end():],
        extension=extension,
        frame_count=frame_count,
    )
    log_event(
        _LOGGER,
        "sequence_resolved",
        level=logging.DEBUG,
        first_frame=first_frame_path,
        frame_count=frame_count,
        pad_width=descriptor.pad_width,
        start_index=descriptor.start_index,
    )
    return descriptor


def frame_file_name(descriptor: FrameSequenceDescriptor, index: int) -> str:
    """Return the path of frame ``index`` (0 is the first frame)."""

    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Frame index must be an int, got {type(index).__name__}.")
    if not 0 <= index < descriptor.frame_count:
        raise IndexOutOfRangeError(
            f"Frame index {index} is outside [0, {descriptor.frame_count})."
        )

    number = str(descriptor.start_index + index)
    if len(number) > descriptor.pad_width:
        raise PaddingOverflowError(
            f"Frame number {number} for index {index} exceeds the padding width "
            f"of {descriptor.pad_width} digits."
        )
    return (
        f"{descriptor.base_path}{descriptor.prefix}{number.zfill(descriptor.pad_width)}"
        f"{descriptor.suffix}{descriptor.extension}"
    )


def iter_frame_file_names(
    descriptor: FrameSequenceDescriptor,
    start: int = 0,
    stop: int | None = None,
) -> Iterator[str]:
    """Yield frame paths for indices in ``range(start, stop)``."""

    end = descriptor.frame_count if stop is None else stop
    for index in range(start, end):
        yield frame_file_name(descriptor, index)
