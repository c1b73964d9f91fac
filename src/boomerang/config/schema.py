"""Dataclass-based configuration schema for Boomerang players."""

from __future__ import annotations

from dataclasses import dataclass

from boomerang.sequence.descriptor import FrameSequenceDescriptor


DEFAULT_IDENTIFIER = "boomerang"


@dataclass(slots=True)
class UserInputs:
    """Raw player options as supplied by the caller."""

    frame_path: str | None
    frame_count: int | None
    identifier: str | None = None
    scroll_area: str | int | None = None


@dataclass(slots=True)
class PlayerOptions:
    """Fully resolved player options."""

    inputs: UserInputs
    descriptor: FrameSequenceDescriptor
    identifier: str = DEFAULT_IDENTIFIER
    scroll_area: int = 0

    @property
    def path(self) -> str:
        return self.descriptor.base_path

    @property
    def count(self) -> int:
        return self.descriptor.frame_count

    def set_scrollable_area(self, height: int) -> None:
        """Use a measured height unless the caller configured one."""

        if self.scroll_area:
            return
        self.scroll_area = height
