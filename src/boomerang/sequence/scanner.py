"""Check a resolved frame sequence against files on local disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from boomerang.observability.logging import get_logger, log_event
from boomerang.sequence.descriptor import FrameSequenceDescriptor, iter_frame_file_names


_LOGGER = get_logger("boomerang.scanner")


@dataclass(slots=True)
class FrameRef:
    frame_idx: int
    name: str
    path: Path
    exists: bool


@dataclass(slots=True)
class SequenceScanResult:
    root: Path
    frames: list[FrameRef]
    missing_indices: list[int]

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def present_count(self) -> int:
        return self.frame_count - len(self.missing_indices)

    @property
    def is_complete(self) -> bool:
        return not self.missing_indices


def scan_sequence(
    descriptor: FrameSequenceDescriptor,
    root: Path,
    strict: bool = True,
) -> SequenceScanResult:
    """Resolve every frame beneath ``root`` and report the missing ones."""

    if not root.exists():
        raise FileNotFoundError(f"Sequence root does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Sequence root must be a directory: {root}")

    frames: list[FrameRef] = []
    missing: list[int] = []
    for idx, name in enumerate(iter_frame_file_names(descriptor)):
        path = root / name.lstrip("/")
        exists = path.is_file()
        if not exists:
            missing.append(idx)
        frames.append(FrameRef(frame_idx=idx, name=name, path=path, exists=exists))

    log_event(
        _LOGGER,
        "sequence_scanned",
        root=str(root),
        frame_count=len(frames),
        missing_count=len(missing),
    )

    if strict and missing:
        joined = ", ".join(str(x) for x in missing[:20])
        suffix = "" if len(missing) <= 20 else ", ..."
        raise ValueError(f"Missing sequence frames at indices: {joined}{suffix}")

    return SequenceScanResult(root=root, frames=frames, missing_indices=missing)
