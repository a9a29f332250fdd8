from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from .errors import ArchiveUnreadable
from .hasher import digest, resolve_algorithm
from .logging import FingerprintLogger
from .models import Collision, FingerprintMap, FingerprintRun, SkippedArchive
from .scanner import iter_class_entries, open_archive


def aggregate(
    archive_paths: Iterable[Union[str, Path]],
    algorithm: str,
    logger: Optional[FingerprintLogger] = None,
) -> FingerprintRun:
    """
    Hash every class entry across the supplied archives.

    Archives are processed in the order given and entries in their natural
    archive order; a later entry with an already-seen digest replaces the
    earlier name (last write wins) and is recorded as a collision.

    Unreadable archives are logged and skipped. UnsupportedAlgorithm and
    EntryReadError propagate to the caller.
    """
    # Fail before touching any archive.
    resolve_algorithm(algorithm)

    run = FingerprintRun(algorithm=algorithm)
    fingerprints: FingerprintMap = run.fingerprints

    for raw_path in archive_paths:
        path = Path(raw_path)
        if logger:
            logger.info("Resolved artifact", path=path)

        try:
            archive = open_archive(path)
        except ArchiveUnreadable as exc:
            if logger:
                logger.error("Could not open archive", path=path, error=exc.reason)
            run.skipped.append(SkippedArchive(path=path, reason=exc.reason))
            continue

        with archive:
            for entry in iter_class_entries(archive):
                if logger:
                    logger.debug("Found class", path=path, entry=entry.name)
                hex_digest = digest(entry.content, algorithm)
                previous = fingerprints.get(hex_digest)
                if previous is not None:
                    run.collisions.append(
                        Collision(digest=hex_digest, previous=previous, current=entry.name)
                    )
                fingerprints[hex_digest] = entry.name
                run.classes_hashed += 1
        run.archives_scanned += 1

    if logger and run.collisions:
        logger.warning(
            "Digest collisions replaced earlier class names",
            collision_count=len(run.collisions),
        )
    return run


def run(
    archive_paths: Iterable[Union[str, Path]],
    algorithm: str,
    logger: Optional[FingerprintLogger] = None,
) -> FingerprintMap:
    """Convenience wrapper returning only the digest -> class name map."""
    return aggregate(archive_paths, algorithm, logger=logger).fingerprints
