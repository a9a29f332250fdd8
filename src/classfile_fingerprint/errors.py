from __future__ import annotations

from pathlib import Path
from typing import Optional

from .constants import ExitCode


class FingerprintError(Exception):
    """Base exception for all fingerprinting errors."""

    exit_code: ExitCode = ExitCode.ERROR


class ConfigError(FingerprintError):
    """Configuration validation failed."""


class UnsupportedAlgorithm(FingerprintError):
    """Requested digest algorithm does not exist."""

    def __init__(self, algorithm: str):
        super().__init__(f"Unsupported digest algorithm: {algorithm!r}")
        self.algorithm = algorithm


class ArchiveUnreadable(FingerprintError):
    """Archive could not be opened (recoverable, the archive is skipped)."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not open archive {path}: {reason}")
        self.path = path
        self.reason = reason


class EntryReadError(FingerprintError):
    """Entry inside an open archive could not be extracted (fatal)."""

    def __init__(self, path: Path, entry: str, reason: str):
        super().__init__(f"Could not read entry {entry!r} in {path}: {reason}")
        self.path = path
        self.entry = entry
        self.reason = reason


class WriteError(FingerprintError):
    """Fingerprint file could not be persisted."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        message = f"Could not write fingerprint file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = path
