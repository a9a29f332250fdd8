from __future__ import annotations

from enum import Enum


class ExitCode(int, Enum):
    """Process exit codes."""

    SUCCESS = 0
    ERROR = 2


CLASS_SUFFIX = ".class"
DEFAULT_ALGORITHM = "SHA-256"
DEFAULT_OUTPUT_DIR = "target"
FINGERPRINT_FILE_PREFIX = "classfile"
FIELD_SEPARATOR = "  "
