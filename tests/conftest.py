"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Working tree with a.txt, b.log and dir/c.txt."""
    root = tmp_path / "tree"
    (root / "dir").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "b.log").write_text("b")
    (root / "dir" / "c.txt").write_text("c")
    return root


@pytest.fixture
def gerrit_person_json() -> str:
    """GitPersonInfo record as returned by the Gerrit REST API."""
    return """{
  "name": "John Doe",
  "email": "john.doe@example.com",
  "date": "2017-12-01 17:33:30.000000000",
  "tz": -300
}"""
