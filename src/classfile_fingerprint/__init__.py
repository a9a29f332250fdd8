"""Content-addressed fingerprints of compiled classes across dependency archives."""

from .aggregator import aggregate, run
from .errors import (
    ArchiveUnreadable,
    ConfigError,
    EntryReadError,
    FingerprintError,
    UnsupportedAlgorithm,
    WriteError,
)
from .hasher import digest, digest_size, digest_stream, resolve_algorithm
from .manifest import fingerprint_file_path, render_fingerprints, write_fingerprint_file
from .models import ClassEntry, Collision, FingerprintMap, FingerprintRun, SkippedArchive
from .scanner import iter_class_entries, open_archive, scan

__version__ = "0.1.0"

__all__ = [
    "ArchiveUnreadable",
    "ClassEntry",
    "Collision",
    "ConfigError",
    "EntryReadError",
    "FingerprintError",
    "FingerprintMap",
    "FingerprintRun",
    "SkippedArchive",
    "UnsupportedAlgorithm",
    "WriteError",
    "aggregate",
    "digest",
    "digest_size",
    "digest_stream",
    "fingerprint_file_path",
    "iter_class_entries",
    "open_archive",
    "render_fingerprints",
    "resolve_algorithm",
    "run",
    "scan",
    "write_fingerprint_file",
]
