from __future__ import annotations

from pathlib import Path
from typing import Mapping, Union

from .constants import FIELD_SEPARATOR, FINGERPRINT_FILE_PREFIX
from .errors import WriteError

_LINE_BREAKS = ("\n", "\r")


def fingerprint_file_path(output_dir: Union[str, Path], algorithm: str) -> Path:
    """
    Output path for an algorithm, e.g. ``target/classfile.sha-256``.

    Path separators in the name become ``_`` so ``SHA-512/256`` maps to
    ``classfile.sha-512_256`` directly inside ``output_dir``.
    """
    suffix = algorithm.strip().lower().replace("/", "_").replace("\\", "_")
    return Path(output_dir) / f"{FINGERPRINT_FILE_PREFIX}.{suffix}"


def render_fingerprints(fingerprints: Mapping[str, str]) -> str:
    """
    Render the map as ``<digest>  <class name>`` lines.

    Lines are sorted by digest so the same closure always renders the same
    bytes. No trailing newline. A class name containing a line break raises
    ValueError, since it would split one entry across lines.
    """
    lines = []
    for hex_digest, name in sorted(fingerprints.items()):
        if any(brk in name for brk in _LINE_BREAKS):
            raise ValueError(f"Class name contains a line break: {name!r}")
        lines.append(f"{hex_digest}{FIELD_SEPARATOR}{name}")
    return "\n".join(lines)


def write_fingerprint_file(fingerprints: Mapping[str, str], output_path: Union[str, Path]) -> Path:
    """Write the fingerprint file, replacing any previous one."""
    path = Path(output_path)
    try:
        data = render_fingerprints(fingerprints).encode("utf-8")
    except ValueError as exc:
        raise WriteError(path, str(exc)) from exc
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise WriteError(path, str(exc)) from exc
    return path
