"""Error taxonomy for descriptor resolution and player options."""

from __future__ import annotations


class BoomerangError(ValueError):
    """Base class for every validation failure raised by Boomerang."""


class MissingOptionError(BoomerangError):
    """A required player option is absent or empty."""


class InvalidOptionError(BoomerangError):
    """A player option is present but malformed."""


class InvalidFrameCountError(BoomerangError):
    """Declared frame count is not a positive integer."""


class UnsupportedExtensionError(BoomerangError):
    """First frame uses an image extension the player cannot display."""


class BadSequenceFormatError(BoomerangError):
    """First frame name lacks a zero-padded trailing frame number."""


class SequenceOverflowError(BoomerangError):
    """Declared frame count does not fit the first frame's padding width."""


class IndexOutOfRangeError(BoomerangError, IndexError):
    """Requested frame index lies outside the sequence."""


class PaddingOverflowError(BoomerangError):
    """Rendered frame number is wider than the padding width."""
