"""Duplicate detection and resolution package."""

from .grouper import group_by_name
from .existence import DuplicateSet, find_duplicate_sets
from .resolver import DuplicateResolver, ResolutionResult, MoveFailure

__all__ = [
    "group_by_name",
    "DuplicateSet",
    "find_duplicate_sets",
    "DuplicateResolver",
    "ResolutionResult",
    "MoveFailure",
]
