# convert/converter.py
# This file is part of PCEx - Presence Condition Extraction
#
# Normalization of per-line conditions into presence condition clause sets

"""Converts per-line condition strings into presence conditions.

Every distinct condition is read into a tree, its variables are numbered, and
the tree is converted twice: into DNF, and into CNF whose literals are then
negated, which yields the DNF of the negated condition. Both forms are cached
by the raw condition text, so a condition repeated across files is converted
only once and merely paired with each new file.

Conditions that reduce to a constant, or whose clause sets vanish during
cleanup, are trivial for t-wise generation and are left out of the result.
"""

import threading
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from expression import ExpressionReader, ErrorHandling, Symbols, format_short, iter_variables
from expression.ast_nodes import Expr
from expression.normal_forms import NormalForm, NormalFormTransformer
from extraction.pc_files import iter_pc_files
from model import (
    CNF,
    ClauseList,
    PresenceCondition,
    PresenceConditionList,
    VariableMap,
    canonical_clause_list,
    clean_clause,
    negate_clause_list,
)
from model.clauses import is_trivial
from utils.logger import get_logger

AUDIT_FILE_NAME = "filtered_pcs.list"


@dataclass(frozen=True)
class _PendingCondition:
    text: str
    tree: Expr
    source_path: PurePosixPath


class NormalizationContext:
    """State shared by all conversions of one extraction run.

    Holds the cache of converted conditions keyed by raw condition text and the
    variable names discovered while reading. Both are written under a lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._cache: Dict[str, PresenceCondition] = {}
        self._trees: Dict[str, Expr] = {}
        self._pc_names: Dict[str, None] = {}

    def add_names(self, names: Iterable[str]) -> None:
        with self._lock:
            for name in names:
                self._pc_names.setdefault(name, None)

    @property
    def pc_names(self) -> List[str]:
        """Discovered variable names, in discovery order."""
        return list(self._pc_names)

    def lookup(self, text: str) -> Optional[PresenceCondition]:
        return self._cache.get(text)

    def store(self, text: str, condition: PresenceCondition, tree: Expr) -> PresenceCondition:
        """Cache a converted condition; the first stored value for a text wins."""
        with self._lock:
            cached = self._cache.setdefault(text, condition)
            if not cached.is_empty:
                self._trees.setdefault(text, tree)
            return cached

    def surviving_formulas(self) -> List[Expr]:
        """Trees of all distinct conditions that produced a presence condition."""
        return list(self._trees.values())


def _distinct_conditions(lines: Sequence[str]) -> List[str]:
    return list(dict.fromkeys(line for line in lines if line))


def _clauses(terms: NormalForm, variables: VariableMap) -> ClauseList:
    """Map term clauses onto the numbering, dropping vacuous clauses.

    Raises:
        UnknownVariableError: A name is not part of the numbering
    """
    clauses = []
    for clause in terms:
        cleaned = clean_clause(variables.literal(name, positive) for name, positive in clause)
        if cleaned is not None:
            clauses.append(cleaned)
    return tuple(clauses)


class Converter:
    """Builds presence condition lists from per-line condition strings.

    Attributes:
        reader: Condition reader with C symbols that drops unusable parts
    """

    def __init__(self):
        self.reader = ExpressionReader(
            symbols=Symbols.C,
            ignore_missing_features=ErrorHandling.REMOVE,
            ignore_unparsable_sub_expressions=ErrorHandling.REMOVE,
        )

    def convert(
        self,
        fm_formula: Optional[CNF],
        extraction_path: Path,
        audit_path: Optional[Path] = None,
    ) -> Optional[PresenceConditionList]:
        """Convert all ``.pc`` files below a directory.

        Args:
            fm_formula: Feature model, or None to number the discovered names
            extraction_path: Directory holding ``.pc`` files
            audit_path: Where to write the audit listing, if anywhere

        Returns:
            The presence condition list, or None if the directory is unreadable
        """
        extraction_path = Path(extraction_path)
        if not extraction_path.is_dir():
            get_logger().error(f"{extraction_path} is not a readable directory")
            return None
        return self.convert_files(fm_formula, iter_pc_files(extraction_path), audit_path)

    def convert_files(
        self,
        fm_formula: Optional[CNF],
        files: Iterable[Tuple[PurePosixPath, Sequence[str]]],
        audit_path: Optional[Path] = None,
    ) -> PresenceConditionList:
        """Convert in-memory ``(source path, line conditions)`` pairs.

        Args:
            fm_formula: Feature model, or None to number the discovered names
            files: Source path and per-line conditions of each file
            audit_path: Where to write the audit listing, if anywhere

        Returns:
            Presence conditions of all files, empty sentinels removed
        """
        logger = get_logger()
        context = NormalizationContext()

        self.reader.set_variable_names(
            fm_formula.variables.names if fm_formula is not None else None
        )

        pending: List[_PendingCondition] = []
        file_count = 0
        for source_path, lines in files:
            file_count += 1
            source_path = PurePosixPath(source_path)
            for text in _distinct_conditions(lines):
                tree = self.reader.read(text)
                if tree is None:
                    continue
                context.add_names(iter_variables(tree))
                pending.append(_PendingCondition(text, tree, source_path))

        model_formula = (
            fm_formula if fm_formula is not None else CNF.from_names(context.pc_names)
        )

        transformer = NormalFormTransformer()
        conditions: List[PresenceCondition] = []
        for item in pending:
            condition = context.lookup(item.text)
            if condition is None:
                condition = context.store(
                    item.text,
                    self._create(item, model_formula.variables, transformer),
                    item.tree,
                )
            else:
                condition = condition.with_file(item.source_path)

            if not condition.is_empty:
                conditions.append(condition)

        if audit_path is not None:
            write_audit_file(audit_path, context.surviving_formulas())

        logger.conversion_summary(
            file_count,
            len({item.text for item in pending}),
            len(conditions),
            len(model_formula.variables),
        )
        return PresenceConditionList.of(conditions, model_formula, context.pc_names)

    def _create(
        self,
        item: _PendingCondition,
        variables: VariableMap,
        transformer: NormalFormTransformer,
    ) -> PresenceCondition:
        dnf_terms = transformer.to_dnf(item.tree)
        cnf_terms = transformer.to_cnf(item.tree)
        if dnf_terms is None or cnf_terms is None:
            return PresenceCondition.empty()

        dnf = _clauses(dnf_terms, variables)
        cnf = _clauses(cnf_terms, variables)
        if is_trivial(dnf) or is_trivial(cnf):
            get_logger().debug(f"Condition '{item.text}' is trivial")
            return PresenceCondition.empty()

        negated_dnf = canonical_clause_list(negate_clause_list(cnf))
        return PresenceCondition(item.source_path, dnf, negated_dnf)


def write_audit_file(path: Path, formulas: Sequence[Expr]) -> bool:
    """Rewrite the audit listing, one formula per line in short notation."""
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as file:
            for formula in formulas:
                file.write(f"{format_short(formula)}\n")
        return True
    except OSError as exc:
        get_logger().error(f"Cannot write {path}: {exc}")
        return False
