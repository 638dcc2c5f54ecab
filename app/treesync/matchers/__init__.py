"""Path matchers.

This module exports the path predicate type, its combinators and the
glob compiler.
"""

from treesync.matchers.glob import GlobPatternError, glob_matcher, relative_glob
from treesync.matchers.predicates import ALL_FILES, PathPredicate, any_of, negate

__all__ = [
    "ALL_FILES",
    "GlobPatternError",
    "PathPredicate",
    "any_of",
    "glob_matcher",
    "negate",
    "relative_glob",
]
