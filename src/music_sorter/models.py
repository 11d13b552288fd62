"""Core enums, constants, and data records for the music sorter.

Enums:
    Stage        -- Pipeline stage (scan, extract, copy, report), in run order.
    CopyOutcome  -- Per-file result of the copy stage (copied, skipped, failed).

Records:
    Tags       -- Artist/album/title strings read from a file's tag container.
    TagProbe   -- Result of opening a file with the tag reader (audio? tags?).
    AudioFile  -- One discovered file, enriched stage by stage.
    RunStats   -- found/copied/skipped/failed counters, mergeable per stage.
    RunContext -- Roots, discovered files, and the merged stats for one run.
"""

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from pathlib import Path


class Stage(StrEnum):
    SCAN = "scan"
    EXTRACT = "extract"
    COPY = "copy"
    REPORT = "report"


class CopyOutcome(StrEnum):
    COPIED = "copied"
    SKIPPED = "skipped"
    FAILED = "failed"


STAGE_ORDER: list[Stage] = [
    Stage.SCAN,
    Stage.EXTRACT,
    Stage.COPY,
    Stage.REPORT,
]

# Substituted for a missing artist or album tag
UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Tags:
    artist: str = ""
    album: str = ""
    title: str = ""


@dataclass(frozen=True)
class TagProbe:
    """Outcome of one tag-reader open.

    is_audio is False when the reader rejected the file outright.
    tags is None when the file opened but carries no tag container.
    """

    is_audio: bool
    tags: Tags | None = None


@dataclass
class AudioFile:
    """A discovered audio file.

    source_path is fixed at creation. The tag fields stay empty until the
    extract stage fills them; destination_path is set once, right after.
    """

    source_path: Path
    probe: TagProbe | None = None
    artist: str = ""
    album: str = ""
    title: str = ""
    extension: str = ""
    title_from_filename: bool = False
    destination_path: Path | None = None
    outcome: CopyOutcome | None = None


@dataclass
class RunStats:
    """Counters for one run. Stages return deltas that the runner merges."""

    found: int = 0
    copied: int = 0
    skipped: int = 0
    failed: int = 0

    def merge(self, other: "RunStats") -> "RunStats":
        self.found += other.found
        self.copied += other.copied
        self.skipped += other.skipped
        self.failed += other.failed
        return self

    def record(self, outcome: CopyOutcome) -> None:
        if outcome == CopyOutcome.COPIED:
            self.copied += 1
        elif outcome == CopyOutcome.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1

    @property
    def processed(self) -> int:
        return self.copied + self.skipped + self.failed

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass
class RunContext:
    """State shared by the stages of a single run."""

    source_root: Path
    destination_root: Path
    files: list[AudioFile] = field(default_factory=list)
    stats: RunStats = field(default_factory=RunStats)
