# tests/conftest.py
# This file is part of PCEx - Presence Condition Extraction
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the PCEx test suite.

This module provides pytest configuration, fixtures, and utilities shared by
all test modules. It makes the project packages importable from a source
checkout and provides small feature models and presence condition files used
across the suites.
"""

import sys
import pytest
from pathlib import Path, PurePosixPath

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import expression
        import model
        import convert
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def abc_model():
    """Feature model over the variables A, B and C (indices 1, 2, 3)."""
    from model import CNF

    return CNF.from_names(["A", "B", "C"])


@pytest.fixture
def sample_files():
    """In-memory ``.pc`` content of two small source files.

    Returns:
        List[Tuple[PurePosixPath, List[str]]]: Source path and line conditions
    """
    return [
        (PurePosixPath("sys/src/a.c"), ["", "A", "A", "A&&B", "", "A||B"]),
        (PurePosixPath("sys/src/b.c"), ["A", "", "!A"]),
        (PurePosixPath("sys/lib/c.c"), ["C&&VERSION>2", "X>1"]),
    ]


@pytest.fixture
def dimacs_file(tmp_path):
    """DIMACS feature model with a named variable directory."""
    path = tmp_path / "model.dimacs"
    path.write_text(
        "c 1 A\n"
        "c 2 B\n"
        "c 3 C\n"
        "p cnf 3 2\n"
        "-1 2 0\n"
        "2 3 0\n",
        encoding="utf-8",
    )
    return path
