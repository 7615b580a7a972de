import os
from pathlib import Path

from website_compressor.utils.textio import read_text, resolve_charset, write_text


def test_read_normalizes_line_endings(tmp_path: Path):
    path = tmp_path / "mixed.css"
    path.write_bytes(b"a\r\nb\rc\nd")
    assert read_text(path, "utf-8") == os.linesep.join(["a", "b", "c", "d"]) + os.linesep


def test_read_empty_file(tmp_path: Path):
    path = tmp_path / "empty.css"
    path.write_bytes(b"")
    assert read_text(path, "utf-8") == ""


def test_read_uses_charset(tmp_path: Path):
    path = tmp_path / "latin.css"
    path.write_bytes("/* café */".encode("latin-1"))
    assert read_text(path, "latin-1") == "/* café */" + os.linesep


def test_write_overwrites_verbatim(tmp_path: Path):
    path = tmp_path / "out.js"
    path.write_text("a much longer original content")
    write_text(path, "a\nb", "utf-8")
    assert path.read_bytes() == b"a\nb"


def test_resolve_charset():
    assert resolve_charset("latin-1") == "latin-1"
    assert resolve_charset("bogus-name") == "utf-8"
    assert resolve_charset("base64") == "utf-8"
    assert resolve_charset(None) == "utf-8"
