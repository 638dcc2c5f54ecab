"""Composable path predicates.

A path predicate is any callable taking a Path and returning a bool.
Predicates are plain functions, so anything with that shape (a lambda,
a bound method, a compiled glob) can be combined with the helpers here.
"""

from collections.abc import Callable, Iterable
from pathlib import Path

PathPredicate = Callable[[Path], bool]


def ALL_FILES(path: Path) -> bool:  # noqa: N802
    """Match every path."""
    return True


def any_of(predicates: Iterable[PathPredicate]) -> PathPredicate:
    """Build a predicate that matches if any of the given predicates does.

    Predicates are evaluated in order and evaluation stops at the first
    match. An empty collection yields a predicate that matches nothing.

    Args:
        predicates: Predicates to combine. The iterable is consumed once
            here, so later changes to a list passed in do not leak into
            the combined predicate.

    Returns:
        Combined predicate.
    """
    members = tuple(predicates)

    def matches(path: Path) -> bool:
        return any(predicate(path) for predicate in members)

    return matches


def negate(predicate: PathPredicate) -> PathPredicate:
    """Build a predicate matching exactly the paths the given one rejects."""

    def matches(path: Path) -> bool:
        return not predicate(path)

    return matches
