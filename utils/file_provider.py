# utils/file_provider.py
# This file is part of PCEx - Presence Condition Extraction
#
# Directory traversal and tolerant text reading for source and .pc files

import os
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence
from utils.logger import get_logger

PC_FILE_REGEX = r".+[.](pc)\Z"

ENCODINGS = ("utf-8", "iso-8859-1")


class FileProvider:
    """Walks a directory tree and yields the files selected by a name pattern.

    Directories whose name starts with a dot are never entered, neither are the
    configured excludes (given relative to the root).

    Attributes:
        root: Directory to walk
        file_name_regex: Pattern a file name must match, or None for all files
    """

    def __init__(
        self,
        root: Path,
        file_name_regex: Optional[str] = None,
        excludes: Iterable[Path] = (),
    ):
        self.root = Path(root)
        self.file_name_regex = file_name_regex
        self._excludes: List[Path] = []
        for exclude in excludes:
            self.add_exclude(exclude)

    def add_exclude(self, path: Path) -> None:
        self._excludes.append((self.root / path).resolve())

    def _is_excluded(self, directory: Path) -> bool:
        resolved = directory.resolve()
        return any(
            resolved == exclude or exclude in resolved.parents
            for exclude in self._excludes
        )

    def files(self) -> Iterator[Path]:
        """Yield matching regular files, in sorted walk order."""
        pattern = re.compile(self.file_name_regex) if self.file_name_regex else None

        for current, dirnames, filenames in os.walk(self.root):
            current_path = Path(current)
            dirnames[:] = sorted(
                d
                for d in dirnames
                if not d.startswith(".") and not self._is_excluded(current_path / d)
            )
            for filename in sorted(filenames):
                if pattern is not None and not pattern.match(filename):
                    continue
                path = current_path / filename
                if path.is_file() and os.access(path, os.R_OK):
                    yield path


def read_lines(path: Path, encodings: Sequence[str] = ENCODINGS) -> List[str]:
    """Read a text file into lines, trying each encoding in turn.

    Line terminators are removed; a final terminator does not produce an
    empty trailing line.

    Raises:
        OSError: The file cannot be read
        UnicodeDecodeError: No encoding could decode the file
    """
    logger = get_logger()
    last_error: Optional[UnicodeDecodeError] = None

    for encoding in encodings:
        try:
            with open(path, "r", encoding=encoding) as file:
                content = file.read()
        except UnicodeDecodeError as exc:
            logger.debug(f"{path} is not readable as {encoding}")
            last_error = exc
            continue

        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    assert last_error is not None
    raise last_error
