from __future__ import annotations

import re
from pathlib import Path

import pytest

from classfile_fingerprint.errors import WriteError
from classfile_fingerprint.manifest import (
    fingerprint_file_path,
    render_fingerprints,
    write_fingerprint_file,
)

LINE_RE = re.compile(r"^[0-9a-f]{64}  [^\n]*$")


def test_fingerprint_file_path_lowercases_algorithm(tmp_path: Path) -> None:
    assert fingerprint_file_path(tmp_path, "SHA-256") == tmp_path / "classfile.sha-256"
    assert fingerprint_file_path("target", "MD5") == Path("target") / "classfile.md5"


def test_render_sorts_by_digest_without_trailing_newline() -> None:
    fingerprints = {"b" * 64: "pkg/Second", "a" * 64: "pkg/First"}

    rendered = render_fingerprints(fingerprints)

    assert rendered == f"{'a' * 64}  pkg/First\n{'b' * 64}  pkg/Second"
    assert not rendered.endswith("\n")


def test_render_empty_map() -> None:
    assert render_fingerprints({}) == ""


def test_write_creates_parent_directories(tmp_path: Path) -> None:
    output = tmp_path / "nested" / "target" / "classfile.sha-256"

    written = write_fingerprint_file({"c" * 64: "x/Y"}, output)

    assert written == output
    lines = output.read_text(encoding="utf-8").split("\n")
    assert len(lines) == 1
    assert all(LINE_RE.match(line) for line in lines)


def test_write_empty_map_creates_empty_file(tmp_path: Path) -> None:
    output = tmp_path / "classfile.sha-256"
    write_fingerprint_file({}, output)
    assert output.exists()
    assert output.read_bytes() == b""


def test_write_overwrites_previous_file(tmp_path: Path) -> None:
    output = tmp_path / "classfile.sha-256"
    output.write_text("stale content\nfrom last run\n", encoding="utf-8")

    write_fingerprint_file({"d" * 64: "a/B"}, output)

    assert output.read_text(encoding="utf-8") == f"{'d' * 64}  a/B"


def test_write_preserves_utf8_class_names(tmp_path: Path) -> None:
    output = tmp_path / "classfile.sha-256"
    write_fingerprint_file({"e" * 64: "ünï/Cödé"}, output)
    assert output.read_bytes().decode("utf-8").endswith("ünï/Cödé")


def test_write_error_when_parent_is_a_file(tmp_path: Path) -> None:
    blocker = tmp_path / "target"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(WriteError) as excinfo:
        write_fingerprint_file({}, blocker / "classfile.sha-256")
    assert excinfo.value.path == blocker / "classfile.sha-256"


def test_fingerprint_file_path_flattens_slash_in_algorithm(tmp_path: Path) -> None:
    path = fingerprint_file_path(tmp_path, "SHA-512/256")

    assert path == tmp_path / "classfile.sha-512_256"
    assert path.parent == tmp_path


def test_write_with_slashed_algorithm_lands_in_output_dir(tmp_path: Path) -> None:
    written = write_fingerprint_file({"f" * 64: "a/B"}, fingerprint_file_path(tmp_path, "SHA-512/224"))

    assert [p.name for p in tmp_path.iterdir()] == ["classfile.sha-512_224"]
    assert written.is_file()


@pytest.mark.parametrize("name", ["a/Evil\nB", "a/Evil\rB"])
def test_render_rejects_line_breaks_in_class_names(name: str) -> None:
    with pytest.raises(ValueError):
        render_fingerprints({"a" * 64: name})


def test_write_refuses_class_name_with_newline(tmp_path: Path) -> None:
    output = tmp_path / "classfile.sha-256"

    with pytest.raises(WriteError):
        write_fingerprint_file({"a" * 64: "ok/A", "b" * 64: "bad/\nB"}, output)
    assert not output.exists()
