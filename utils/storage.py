# utils/storage.py
# This file is part of PCEx - Presence Condition Extraction
#
# JSON persistence for presence condition lists and grouped expressions

import json
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional

from model import CNF, Expressions, PresenceCondition, PresenceConditionList, VariableMap
from utils.logger import get_logger

FILE_EXTENSION = "json"


def _clause_lists_to_json(clauses) -> List[List[int]]:
    return [list(clause) for clause in clauses]


def _clause_lists_from_json(data) -> tuple:
    return tuple(tuple(int(literal) for literal in clause) for clause in data)


def _formula_to_json(formula: CNF) -> Dict[str, Any]:
    return {
        "variables": formula.variables.names,
        "clauses": _clause_lists_to_json(formula.clauses),
    }


def _formula_from_json(data: Dict[str, Any]) -> CNF:
    return CNF(VariableMap(data["variables"]), _clause_lists_from_json(data["clauses"]))


def pc_list_to_json(pc_list: PresenceConditionList) -> Dict[str, Any]:
    return {
        "formula": _formula_to_json(pc_list.formula),
        "pc_names": list(pc_list.pc_names),
        "conditions": [
            {
                "file": condition.file_path.as_posix(),
                "dnf": _clause_lists_to_json(condition.dnf),
                "negated_dnf": _clause_lists_to_json(condition.negated_dnf),
            }
            for condition in pc_list
        ],
    }


def pc_list_from_json(data: Dict[str, Any]) -> PresenceConditionList:
    conditions = [
        PresenceCondition(
            PurePosixPath(entry["file"]),
            _clause_lists_from_json(entry["dnf"]),
            _clause_lists_from_json(entry["negated_dnf"]),
        )
        for entry in data["conditions"]
    ]
    return PresenceConditionList.of(
        conditions, _formula_from_json(data["formula"]), data.get("pc_names", [])
    )


def expressions_to_json(expressions: Expressions) -> Dict[str, Any]:
    return {
        "formula": _formula_to_json(expressions.formula),
        "groups": [
            [_clause_lists_to_json(clauses) for clauses in group]
            for group in expressions.groups
        ],
    }


def expressions_from_json(data: Dict[str, Any]) -> Expressions:
    groups = [
        [_clause_lists_from_json(clauses) for clauses in group]
        for group in data["groups"]
    ]
    return Expressions(_formula_from_json(data["formula"]), groups)


def _save(payload: Dict[str, Any], path: Path) -> bool:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as file:
            json.dump(payload, file)
        return True
    except OSError as e:
        get_logger().error(f"Cannot write {path}: {e}")
        return False


def _load(path: Path) -> Optional[Dict[str, Any]]:
    try:
        with open(path, "r", encoding="utf-8") as file:
            return json.load(file)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        get_logger().error(f"Cannot read {path}: {e}")
        return None


def save_pc_list(pc_list: PresenceConditionList, path: Path) -> bool:
    """Persist a presence condition list; False if it could not be written."""
    return _save(pc_list_to_json(pc_list), Path(path))


def load_pc_list(path: Path) -> Optional[PresenceConditionList]:
    """Load a persisted presence condition list; None if missing or malformed."""
    data = _load(Path(path))
    if data is None:
        return None
    try:
        return pc_list_from_json(data)
    except (KeyError, TypeError, ValueError) as e:
        get_logger().error(f"Malformed presence condition list {path}: {e}")
        return None


def save_expressions(expressions: Expressions, path: Path) -> bool:
    """Persist grouped expressions; False if they could not be written."""
    return _save(expressions_to_json(expressions), Path(path))


def load_expressions(path: Path) -> Optional[Expressions]:
    """Load persisted grouped expressions; None if missing or malformed."""
    data = _load(Path(path))
    if data is None:
        return None
    try:
        return expressions_from_json(data)
    except (KeyError, TypeError, ValueError) as e:
        get_logger().error(f"Malformed expressions file {path}: {e}")
        return None
