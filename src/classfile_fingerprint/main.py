from __future__ import annotations

import argparse
import os
import sys
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .aggregator import aggregate
from .config import FingerprintConfig
from .constants import ExitCode
from .errors import ConfigError, FingerprintError
from .logging import FingerprintLogger
from .manifest import fingerprint_file_path, write_fingerprint_file
from .models import FingerprintRun


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classfile-fingerprint",
        description="Fingerprint every compiled class across a dependency closure",
    )
    parser.add_argument("archives", nargs="*", type=Path, help="Dependency archives (JARs), in order")
    parser.add_argument("--algorithm", help="Digest algorithm (default: SHA-256)")
    parser.add_argument("--output-dir", type=Path, help="Directory receiving classfile.<algorithm>")
    parser.add_argument("--classpath", help="Path-separator joined classpath to scan after the archives")
    parser.add_argument(
        "--archives-file",
        type=Path,
        help="File listing one archive path per line ('#' starts a comment)",
    )
    parser.add_argument("--verbose", action="store_true", default=None, help="Log every class entry")
    return parser


def _read_archives_file(path: Path) -> list[Path]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read archives file {path}: {exc}") from exc

    paths: list[Path] = []
    for line in text.splitlines():
        line = line.split("#", 1)[0].strip()
        if line:
            paths.append(Path(line))
    return paths


def load_config(argv: Optional[List[str]] = None) -> FingerprintConfig:
    """Merge CLI arguments over INPUT_* environment values."""
    args = _build_parser().parse_args(argv)

    overrides: Dict[str, Any] = {}
    archives = list(args.archives)
    if args.archives_file is not None:
        archives.extend(_read_archives_file(args.archives_file))
    if archives:
        overrides["archives"] = archives
    if args.algorithm is not None:
        overrides["algorithm"] = args.algorithm
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.classpath is not None:
        overrides["classpath"] = args.classpath
    if args.verbose is not None:
        overrides["verbose"] = args.verbose

    try:
        return FingerprintConfig(**overrides)
    except ValidationError as exc:
        raise ConfigError(f"Configuration error: {exc}") from exc


def _write_github_outputs(fingerprint_file: Path, run: FingerprintRun) -> None:
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        return

    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"fingerprint_file={fingerprint_file.as_posix()}\n")
        f.write(f"class_count={run.class_count}\n")
        f.write(f"collision_count={len(run.collisions)}\n")
        f.write(f"skipped_count={len(run.skipped)}\n")


def generate(config: FingerprintConfig, logger: FingerprintLogger) -> Path:
    """Scan, hash and write the fingerprint file for one configuration."""
    with logger.stage("scan"):
        run = aggregate(config.archive_paths(), config.algorithm, logger=logger)

    fingerprint_file = fingerprint_file_path(config.output_dir, config.algorithm)
    with logger.stage("write"):
        write_fingerprint_file(run.fingerprints, fingerprint_file)

    logger.info(
        "Wrote fingerprint",
        path=fingerprint_file,
        class_count=run.class_count,
        classes_hashed=run.classes_hashed,
        archives_scanned=run.archives_scanned,
        skipped_count=len(run.skipped),
        collision_count=len(run.collisions),
    )
    _write_github_outputs(fingerprint_file, run)
    return fingerprint_file


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    logger = FingerprintLogger(str(uuid.uuid4()))
    try:
        config = load_config(argv)
        logger.verbose = config.verbose
        logger.info(
            "classfile-fingerprint starting",
            algorithm=config.algorithm,
            output_dir=config.output_dir,
        )
        generate(config, logger)
    except FingerprintError as exc:
        logger.error(str(exc), error_type=type(exc).__name__)
        return int(exc.exit_code)
    return int(ExitCode.SUCCESS)


if __name__ == "__main__":
    sys.exit(main())
