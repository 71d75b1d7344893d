# tests/utils_tests/test_file_provider.py
# This file is part of PCEx - Presence Condition Extraction
#
# Test suite for directory traversal and tolerant text reading

"""Tests for FileProvider and read_lines."""

from pathlib import Path
from utils.file_provider import FileProvider, PC_FILE_REGEX, read_lines


def touch(path: Path, content: str = "x\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class TestFileProvider:
    """Test cases for file discovery."""

    def test_pattern_hidden_and_excludes(self, tmp_path):
        """Test name filtering, hidden directories and excluded subtrees."""
        touch(tmp_path / "b" / "two.c.pc")
        touch(tmp_path / "a" / "one.c.pc")
        touch(tmp_path / "a" / "one.c")
        touch(tmp_path / ".git" / "hidden.c.pc")
        touch(tmp_path / "vendor" / "deep" / "skip.c.pc")

        provider = FileProvider(tmp_path, PC_FILE_REGEX, excludes=[Path("vendor")])
        found = [path.relative_to(tmp_path).as_posix() for path in provider.files()]

        assert found == ["a/one.c.pc", "b/two.c.pc"]

    def test_add_exclude(self, tmp_path):
        """Test excludes added after construction."""
        touch(tmp_path / "keep" / "k.c.pc")
        touch(tmp_path / "drop" / "d.c.pc")

        provider = FileProvider(tmp_path, PC_FILE_REGEX)
        provider.add_exclude(Path("drop"))

        assert [p.name for p in provider.files()] == ["k.c.pc"]

    def test_no_pattern_yields_everything(self, tmp_path):
        """Test that without a pattern every visible file is returned."""
        touch(tmp_path / "x.txt")
        touch(tmp_path / "y.c.pc")

        assert [p.name for p in FileProvider(tmp_path).files()] == ["x.txt", "y.c.pc"]


class TestReadLines:
    """Test cases for line splitting and encoding fallback."""

    def test_trailing_terminator(self, tmp_path):
        """Test that a final newline does not add an empty line."""
        path = tmp_path / "f.txt"
        path.write_text("a\n\nb\n", encoding="utf-8")

        assert read_lines(path) == ["a", "", "b"]

    def test_latin1_fallback(self, tmp_path):
        """Test fallback to ISO-8859-1 for bytes that are not UTF-8."""
        path = tmp_path / "legacy.txt"
        path.write_bytes(b"gr\xfc\xdf\n")

        assert read_lines(path) == ["grüß"]
