"""Filesystem operations on materialized working trees."""

from treesync.filesystem.deleter import TreeDeletionError, delete_files_recursively

__all__ = [
    "TreeDeletionError",
    "delete_files_recursively",
]
