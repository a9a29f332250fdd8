from __future__ import annotations

import zipfile
import zlib
from pathlib import Path
from typing import Iterator, Union

from .constants import CLASS_SUFFIX
from .errors import ArchiveUnreadable, EntryReadError
from .models import ClassEntry

_ENTRY_READ_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    OSError,
    NotImplementedError,
    RuntimeError,
)


def is_class_entry(info: zipfile.ZipInfo) -> bool:
    return not info.is_dir() and info.filename.endswith(CLASS_SUFFIX)


def open_archive(path: Union[str, Path]) -> zipfile.ZipFile:
    """
    Open an archive for reading.

    Raises ArchiveUnreadable when the path is missing, is a directory, or is
    not a valid ZIP/JAR file. Callers own the returned handle.
    """
    archive_path = Path(path)
    try:
        return zipfile.ZipFile(archive_path, "r")
    except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile, ValueError) as exc:
        raise ArchiveUnreadable(archive_path, str(exc) or type(exc).__name__) from exc


def iter_class_entries(archive: zipfile.ZipFile) -> Iterator[ClassEntry]:
    """
    Yield compiled-class entries in central-directory order.

    The class suffix is stripped from the name; content is the entry's full
    decompressed bytes. Any extraction failure is fatal (EntryReadError).
    """
    archive_path = Path(archive.filename or "<memory>")
    for info in archive.infolist():
        if not is_class_entry(info):
            continue
        try:
            content = archive.read(info)
        except _ENTRY_READ_ERRORS as exc:
            raise EntryReadError(archive_path, info.filename, str(exc) or type(exc).__name__) from exc
        yield ClassEntry(name=info.filename[: -len(CLASS_SUFFIX)], content=content)


def scan(path: Union[str, Path]) -> Iterator[ClassEntry]:
    """Lazily scan one archive; the handle is released when iteration stops."""
    archive = open_archive(path)
    with archive:
        yield from iter_class_entries(archive)
