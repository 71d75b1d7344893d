# extraction/pc_files.py
# This file is part of PCEx - Presence Condition Extraction
#
# Reading and writing the per-file .pc intermediate format

"""The ``.pc`` intermediate format.

One ``.pc`` file per analyzed source file. Line 1 holds the path of the source
file relative to the analyzed system, every following line the presence
condition of the corresponding source line; an empty line means the source
line is unconditional.
"""

from pathlib import Path, PurePosixPath
from typing import Iterator, List, Optional, Sequence, Tuple

from utils.file_provider import FileProvider, PC_FILE_REGEX, read_lines
from utils.logger import get_logger
from .composer import ConditionalOccurrence, compose_presence_conditions

PC_SUFFIX = ".pc"

PCFileContent = Tuple[PurePosixPath, List[str]]


def pc_file_path(extract_dir: Path, relative_path: PurePosixPath) -> Path:
    """Location of the ``.pc`` file for a source file inside an extraction directory."""
    return Path(extract_dir) / relative_path.parent / (relative_path.name + PC_SUFFIX)


def write_pc_file(
    extract_dir: Path, relative_path: PurePosixPath, lines: Sequence[str]
) -> Path:
    """Write the conditions of one source file, replacing an earlier file.

    Raises:
        OSError: The file cannot be written
    """
    output_file = pc_file_path(extract_dir, relative_path)
    output_file.unlink(missing_ok=True)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w", encoding="utf-8", newline="\n") as file:
        file.write(f"{relative_path.as_posix()}\n")
        for line in lines:
            file.write(f"{line}\n")

    get_logger().debug(f"Wrote {len(lines)} line conditions to {output_file}")
    return output_file


def extract_file(
    extract_dir: Path,
    relative_path: PurePosixPath,
    occurrences: Sequence[ConditionalOccurrence],
    line_count: int,
) -> Path:
    """Compose the conditions of a source file and write its ``.pc`` file."""
    lines = compose_presence_conditions(occurrences, line_count)
    return write_pc_file(extract_dir, relative_path, lines)


def read_pc_file(path: Path) -> Optional[PCFileContent]:
    """Read one ``.pc`` file.

    Returns:
        The source path and its line conditions, or None if the file cannot
        be read or is empty
    """
    logger = get_logger()
    try:
        lines = read_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"Cannot read {path}: {exc}")
        return None

    if not lines:
        logger.warning(f"{path} has no header line")
        return None

    return PurePosixPath(lines[0]), lines[1:]


def iter_pc_files(extract_dir: Path) -> Iterator[PCFileContent]:
    """Yield the content of every readable ``.pc`` file below a directory."""
    provider = FileProvider(extract_dir, PC_FILE_REGEX)
    for path in provider.files():
        content = read_pc_file(path)
        if content is not None:
            yield content
