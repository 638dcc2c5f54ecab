"""Filtered recursive file deletion.

Deletes every file below a root directory that satisfies a path
predicate. Only files are removed: directories are walked but always
left in place, even when they end up empty. Most version control
systems do not track empty directories, so pruning them is left to
the caller.

Traversal is sequential and never follows symbolic links. A link is a
leaf entry like any regular file: when it matches, the link itself is
unlinked and its target is left alone. This holds for the root too.
"""

import logging
import os
import stat
from pathlib import Path

from treesync.matchers.predicates import PathPredicate

logger = logging.getLogger(__name__)


class TreeDeletionError(Exception):
    """Raised when a tree cannot be traversed or a matched file removed.

    Attributes:
        path: Entry that could not be listed or deleted.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


def delete_files_recursively(root: Path, matcher: PathPredicate) -> int:
    """Delete the files below ``root`` that match ``matcher``.

    Directories are never deleted, only the files inside them. The order
    in which entries are visited is unspecified.

    Args:
        root: Root of the tree to clean.
        matcher: Predicate selecting the files to delete.

    Returns:
        Number of files deleted.

    Raises:
        TreeDeletionError: If the root does not exist, a directory cannot be
            listed, or a matched file cannot be removed. The operation stops
            at the first failure; files deleted before it stay deleted.
    """
    root = Path(root)
    try:
        mode = root.lstat().st_mode
    except OSError as e:
        raise TreeDeletionError(root, f"Cannot access tree root ({e.strerror or e})") from e

    if not stat.S_ISDIR(mode):
        return 1 if _delete_if_matching(root, matcher) else 0

    deleted = 0
    pending: list[Path] = [root]
    while pending:
        directory = pending.pop()
        for entry in _list_directory(directory):
            path = Path(entry.path)
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                raise TreeDeletionError(path, f"Cannot stat entry ({e.strerror or e})") from e

            if is_dir:
                pending.append(path)
            elif _delete_if_matching(path, matcher):
                deleted += 1

    logger.debug("Deleted %d file(s) under %s", deleted, root)
    return deleted


def _list_directory(directory: Path) -> list[os.DirEntry[str]]:
    """Read all entries of a directory.

    Raises:
        TreeDeletionError: If the directory cannot be read.
    """
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as e:
        raise TreeDeletionError(directory, f"Cannot list directory ({e.strerror or e})") from e


def _delete_if_matching(path: Path, matcher: PathPredicate) -> bool:
    """Unlink ``path`` if it matches.

    Returns:
        True if the file was deleted.

    Raises:
        TreeDeletionError: If the file matched but could not be removed.
    """
    if not matcher(path):
        return False

    try:
        path.unlink()
    except OSError as e:
        raise TreeDeletionError(path, f"Cannot delete file ({e.strerror or e})") from e

    logger.debug("Deleted %s", path)
    return True
