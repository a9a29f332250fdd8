from __future__ import annotations

import sys
import zipfile
from pathlib import Path
from typing import Callable, Dict

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest


@pytest.fixture
def make_jar(tmp_path: Path) -> Callable[..., Path]:
    """Build a JAR in tmp_path from an ordered {entry name: bytes} mapping."""

    def _make_jar(name: str, entries: Dict[str, bytes]) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as jar:
            for entry_name, content in entries.items():
                jar.writestr(entry_name, content)
        return path

    return _make_jar


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "target"
