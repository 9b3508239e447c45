"""Git repository facts for hookfacts.

This package provides the cached repository query layer used by the hooks
runner: GitRepository and the GitQuery catalogue with its output shaping.
"""

from hookfacts.git._queries import GitQuery, split_lines, trim_output
from hookfacts.git._repository import GitRepository

__all__ = [
    "GitQuery",
    "GitRepository",
    "split_lines",
    "trim_output",
]
