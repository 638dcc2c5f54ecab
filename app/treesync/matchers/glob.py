"""Glob compilation into path predicates.

Globs follow gitignore wildmatch rules, as implemented by pathspec:

- ``*`` matches within a single path component, ``**`` spans directories.
- A pattern without a slash matches at any depth (``*.txt`` matches both
  ``a.txt`` and ``dir/c.txt``).
- A leading slash or a slash inside the pattern anchors it to the base
  directory (``/*.txt`` only matches top-level files).
- A ``**`` opening a path component also spans directories, so
  ``dir/**.java`` is read as ``dir/**/*.java``. Any other ``**`` inside a
  component is rejected.

Include globs match a path by its own name only: ``*.txt`` does not select
``notes.txt/keep.bin``. Exclude globs keep the gitignore reading where a
matched directory covers everything below it, so excluding ``build``
protects the whole ``build/`` tree.

Patterns are always evaluated against the path relative to a base
directory. The base itself and paths outside it never match.
"""

from collections.abc import Iterable
from pathlib import Path, PurePath

from pathspec import PathSpec, lookup_pattern

from treesync.matchers.predicates import PathPredicate, any_of, negate

_GitIgnorePattern = lookup_pattern("gitignore")

# Trailing alternative that lets a gitignore pattern match every path below a
# matched directory.
_DESCENDANTS_SUFFIX = "(?:/|$)"


class GlobPatternError(ValueError):
    """Raised when a glob cannot be compiled."""


class _OwnPathPattern(_GitIgnorePattern):
    """Gitignore pattern that never matches through a parent directory."""

    __slots__ = ()

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> tuple[str | None, bool | None]:
        regex, include = super().pattern_to_regex(pattern)
        if regex is not None and regex.endswith(_DESCENDANTS_SUFFIX):
            regex = regex[: -len(_DESCENDANTS_SUFFIX)] + "$"
        return regex, include


def _expand_globstar(glob: str) -> str:
    """Rewrite ``**name`` components to ``**/*name``.

    Raises:
        GlobPatternError: If ``**`` appears inside a component elsewhere.
    """
    components = glob.split("/")
    for i, component in enumerate(components):
        if component == "**" or "**" not in component:
            continue
        rest = component.lstrip("*")
        if "**" in rest:
            msg = f"Invalid glob pattern {glob!r}: '**' must start a path component"
            raise GlobPatternError(msg)
        components[i] = f"**/*{rest}"
    return "/".join(components)


def _compile(glob: str, *, descendants: bool) -> PathSpec:
    if not glob.strip():
        msg = "Glob pattern cannot be empty"
        raise GlobPatternError(msg)
    if glob.startswith(("!", "#")):
        msg = f"Invalid glob pattern {glob!r}: negation and comments are not supported"
        raise GlobPatternError(msg)

    expanded = _expand_globstar(glob)
    factory = _GitIgnorePattern if descendants else _OwnPathPattern
    try:
        return PathSpec.from_lines(factory, [expanded])
    except ValueError as e:
        raise GlobPatternError(f"Invalid glob pattern {glob!r}: {e}") from e


def relative_glob(base: Path, glob: str, *, descendants: bool = False) -> PathPredicate:
    """Create a predicate matching paths under ``base`` against ``glob``.

    For example ``relative_glob(root, "dir/**.java")`` matches any java
    file somewhere below ``root/dir``.

    Args:
        base: Directory the glob is relative to.
        glob: Gitignore-style wildmatch pattern.
        descendants: Also match every path below a directory the glob
            matches, as a ``.gitignore`` entry would.

    Returns:
        Predicate over paths. No filesystem access happens on evaluation.

    Raises:
        GlobPatternError: If the pattern is empty or malformed.
    """
    spec = _compile(glob, descendants=descendants)
    base_path = PurePath(base)

    def matches(path: Path) -> bool:
        try:
            relative = PurePath(path).relative_to(base_path)
        except ValueError:
            return False
        if not relative.parts:
            return False
        return spec.match_file(relative.as_posix())

    return matches


def glob_matcher(
    base: Path,
    include: Iterable[str],
    exclude: Iterable[str] = (),
) -> PathPredicate:
    """Combine include and exclude globs into a single predicate.

    A path matches when any include glob matches it and no exclude glob
    does. An empty include list matches nothing. Exclude globs also cover
    everything below a directory they match.

    Args:
        base: Directory all globs are relative to.
        include: Globs selecting paths.
        exclude: Globs removing paths from the selection.

    Returns:
        Combined predicate.

    Raises:
        GlobPatternError: If any pattern is empty or malformed.
    """
    included = any_of(relative_glob(base, g) for g in include)
    excluded = [relative_glob(base, g, descendants=True) for g in exclude]
    if not excluded:
        return included

    kept = negate(any_of(excluded))
    return lambda path: included(path) and kept(path)
