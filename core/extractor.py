# core/extractor.py
# This file is part of PCEx - Presence Condition Extraction
#
# Orchestration of composition, normalization and grouping with artifact reuse

"""End-to-end extraction pipeline.

Output layout below the output directory:
    extract/<system>/...        .pc files, one per analyzed source file
    pclist/<system>/pclist_fm.json
    pclist/<system>/filtered_pcs.list
    pclist/<system>/grouped_<strategy>.json

Persisted artifacts are reused on later runs; delete them to force a rerun.
"""

from pathlib import Path, PurePosixPath
from typing import Iterable, Optional, Sequence, Tuple

from convert import AUDIT_FILE_NAME, Converter, Grouper, Grouping
from extraction import ConditionalOccurrence, extract_file
from model import CNF, Expressions, PresenceConditionList
from utils import storage
from utils.logger import get_logger

DEFAULT_GROUPING = Grouping.ALL
PC_LIST_FILE_NAME = f"pclist_fm.{storage.FILE_EXTENSION}"

SourceOccurrences = Tuple[PurePosixPath, Sequence[ConditionalOccurrence], int]


def grouped_file_name(grouping: Grouping) -> str:
    return f"grouped_{grouping.value}.{storage.FILE_EXTENSION}"


class PCExtractor:
    """Runs the pipeline for one output directory.

    Attributes:
        output_path: Root directory of all artifacts
        grouping: Strategy used by the grouping stage
        save_results: Whether intermediate and final artifacts are written
    """

    def __init__(
        self,
        output_path: Path,
        grouping: Grouping = DEFAULT_GROUPING,
        save_results: bool = True,
    ):
        self.output_path = Path(output_path).absolute()
        self.grouping = grouping
        self.save_results = save_results

    @property
    def extract_dir(self) -> Path:
        return self.output_path / "extract"

    def pc_list_dir(self, system_name: str) -> Path:
        return self.output_path / "pclist" / system_name

    def extract_sources(self, system_name: str, sources: Iterable[SourceOccurrences]) -> int:
        """Write ``.pc`` files for the occurrences reported by a directive tracker.

        Args:
            system_name: Name of the analyzed system
            sources: Relative source path, occurrences and line count per file

        Returns:
            Number of ``.pc`` files written
        """
        logger = get_logger()
        sources = list(sources)
        system_dir = self.extract_dir / system_name

        written = 0
        for counter, (relative_path, occurrences, line_count) in enumerate(sources, start=1):
            relative_path = PurePosixPath(system_name) / PurePosixPath(relative_path)
            logger.file_progress(counter, len(sources), str(relative_path))
            try:
                extract_file(
                    self.extract_dir, relative_path, occurrences, line_count
                )
                written += 1
            except (OSError, ValueError) as e:
                logger.error(f"Skipping {relative_path}: {e}")

        logger.debug(f"Wrote {written} .pc files below {system_dir}")
        return written

    def run(
        self,
        fm_formula: Optional[CNF],
        system_name: str,
        extract_dir: Optional[Path] = None,
    ) -> Optional[Expressions]:
        """Convert and group the ``.pc`` files of a system.

        Args:
            fm_formula: Feature model, or None to number the discovered names
            system_name: Name of the analyzed system
            extract_dir: Directory with ``.pc`` files (default: ``extract/<system>``)

        Returns:
            Grouped expressions, or None if there is nothing to do
        """
        source_dir = Path(extract_dir) if extract_dir else self.extract_dir / system_name
        pc_list_dir = self.pc_list_dir(system_name)

        pc_list = self.convert(fm_formula, source_dir, pc_list_dir)
        if pc_list is None:
            return None
        return self.group(pc_list, pc_list_dir)

    def convert(
        self, fm_formula: Optional[CNF], source_dir: Path, pc_list_dir: Path
    ) -> Optional[PresenceConditionList]:
        logger = get_logger()
        pc_list_file = pc_list_dir / PC_LIST_FILE_NAME

        if pc_list_file.exists():
            loaded = storage.load_pc_list(pc_list_file)
            if loaded is not None:
                logger.artifact_reused(str(pc_list_file))
                return loaded

        audit_path = pc_list_dir / AUDIT_FILE_NAME if self.save_results else None
        pc_list = Converter().convert(fm_formula, source_dir, audit_path)
        if pc_list is not None and self.save_results:
            storage.save_pc_list(pc_list, pc_list_file)
        return pc_list

    def group(
        self, pc_list: PresenceConditionList, pc_list_dir: Path
    ) -> Optional[Expressions]:
        logger = get_logger()
        expressions_file = pc_list_dir / grouped_file_name(self.grouping)

        if expressions_file.exists():
            loaded = storage.load_expressions(expressions_file)
            if loaded is not None:
                logger.artifact_reused(str(expressions_file))
                return loaded

        expressions = Grouper().group(pc_list, self.grouping)
        if expressions is not None and self.save_results:
            storage.save_expressions(expressions, expressions_file)
        return expressions

    def load_expressions(self, system_name: str) -> Optional[Expressions]:
        """Load the grouped expressions of an earlier run."""
        return storage.load_expressions(
            self.pc_list_dir(system_name) / grouped_file_name(self.grouping)
        )
