from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

FingerprintMap = Dict[str, str]


@dataclass(frozen=True)
class ClassEntry:
    name: str
    content: bytes = field(repr=False)


@dataclass(frozen=True)
class Collision:
    digest: str
    previous: str
    current: str


@dataclass(frozen=True)
class SkippedArchive:
    path: Path
    reason: str


@dataclass
class FingerprintRun:
    """Result of one aggregation pass over a dependency closure."""

    algorithm: str
    fingerprints: FingerprintMap = field(default_factory=dict)
    archives_scanned: int = 0
    classes_hashed: int = 0
    collisions: List[Collision] = field(default_factory=list)
    skipped: List[SkippedArchive] = field(default_factory=list)

    @property
    def class_count(self) -> int:
        return len(self.fingerprints)
