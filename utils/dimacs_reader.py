# utils/dimacs_reader.py
# This file is part of PCEx - Presence Condition Extraction
#
# DIMACS reader for feature-model formulas with a variable directory

from pathlib import Path
from typing import Dict, List

from model import CNF, VariableMap
from model.clauses import sort_clause
from utils.logger import get_logger


class DimacsFormatError(Exception):
    """Exception raised when a DIMACS file contains invalid format or data."""

    pass


def read_dimacs(filepath: Path) -> CNF:
    """Read a feature model in DIMACS format.

    Comment lines of the form ``c <index> <name>`` form the variable
    directory. Variables without a directory entry are named after their
    index.

    Expected format:
        c 1 CONFIG_A
        c 2 CONFIG_B
        p cnf 2 1
        -1 2 0

    Args:
        filepath: Path to the DIMACS file

    Returns:
        CNF over a numbering that follows the DIMACS indices

    Raises:
        DimacsFormatError: If the file is missing or malformed
    """
    logger = get_logger()
    path = Path(filepath)

    try:
        with open(path, "r", encoding="utf-8") as file:
            lines = file.readlines()
    except OSError as e:
        raise DimacsFormatError(f"Cannot open DIMACS file: {filepath}") from e

    names: Dict[int, str] = {}
    clauses: List[tuple] = []
    current: List[int] = []
    variable_count = None

    for line_num, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        if line.startswith("c"):
            parts = line.split(maxsplit=2)
            if len(parts) == 3 and parts[1].isdigit():
                names[int(parts[1])] = parts[2].strip()
            continue

        if line.startswith("p"):
            parts = line.split()
            if len(parts) != 4 or parts[1] != "cnf":
                raise DimacsFormatError(f"Malformed problem line {line_num}: {line}")
            try:
                variable_count = int(parts[2])
            except ValueError as e:
                raise DimacsFormatError(f"Malformed problem line {line_num}: {line}") from e
            continue

        if variable_count is None:
            raise DimacsFormatError(f"Clause before problem line at line {line_num}")

        for token in line.split():
            try:
                literal = int(token)
            except ValueError as e:
                raise DimacsFormatError(f"Invalid literal '{token}' at line {line_num}") from e
            if literal == 0:
                clauses.append(sort_clause(current))
                current = []
            elif abs(literal) > variable_count:
                raise DimacsFormatError(f"Literal {literal} out of range at line {line_num}")
            else:
                current.append(literal)

    if variable_count is None:
        raise DimacsFormatError("Missing problem line")
    if current:
        clauses.append(sort_clause(current))

    variables = VariableMap(names.get(i, str(i)) for i in range(1, variable_count + 1))
    if len(variables) != variable_count:
        raise DimacsFormatError("Variable directory contains duplicate names")

    logger.debug(f"Read {variable_count} variables and {len(clauses)} clauses from {path}")
    return CNF(variables, tuple(clauses))
