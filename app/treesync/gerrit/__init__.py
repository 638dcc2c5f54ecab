"""Gerrit REST API records.

This module exports the commit person model and the timestamp helpers
used to decode it.
"""

from treesync.gerrit.person import GitPersonInfo, PersonInfoError
from treesync.gerrit.timestamps import (
    TimestampParseError,
    decode_timestamp,
    fixed_offset,
    parse_timestamp,
)

__all__ = [
    "GitPersonInfo",
    "PersonInfoError",
    "TimestampParseError",
    "decode_timestamp",
    "fixed_offset",
    "parse_timestamp",
]
