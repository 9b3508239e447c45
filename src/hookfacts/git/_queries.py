"""Repository queries and output shaping.

Each GitQuery names one cached repository fact and carries the git argument
string used to compute it.
"""

import re
from enum import StrEnum

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class GitQuery(StrEnum):
    """Repository facts computed by running git."""

    GIT_PATH = "git path"
    GIT_DIR = "git directory"
    CURRENT_BRANCH = "current branch"
    HOOKS_PATH = "hooks path"
    STAGED_FILES = "staged files"
    LAST_COMMIT_FILES = "last commit files"
    TRACKED_FILES = "tracked files"

    @property
    def args(self) -> str:
        """Return the git argument string for this query."""
        return _QUERY_ARGS[self]

    @property
    def is_list(self) -> bool:
        """Return True if the query yields a list of paths."""
        return self in _LIST_QUERIES

    @property
    def error_message(self) -> str:
        """Return the message used when this query fails."""
        if self.is_list:
            return f"Could not find the {self.value}"
        return f"Could not find {self.value}"


_QUERY_ARGS: dict[GitQuery, str] = {
    GitQuery.GIT_PATH: "rev-parse --show-toplevel",
    GitQuery.GIT_DIR: "rev-parse --path-format=relative --git-dir",
    GitQuery.CURRENT_BRANCH: "branch --show-current",
    GitQuery.HOOKS_PATH: "config --get core.hooksPath",
    GitQuery.STAGED_FILES: "diff --diff-filter=d --name-only --staged",
    GitQuery.LAST_COMMIT_FILES: "diff --diff-filter=d --name-only HEAD^",
    GitQuery.TRACKED_FILES: "ls-files",
}

_LIST_QUERIES = frozenset(
    {
        GitQuery.STAGED_FILES,
        GitQuery.LAST_COMMIT_FILES,
        GitQuery.TRACKED_FILES,
    }
)


def trim_output(text: str) -> str:
    """Strip leading and trailing whitespace from command output."""
    return text.strip()


def split_lines(text: str) -> tuple[str, ...]:
    """Split command output into non-empty lines.

    Accepts CRLF, CR and LF separators. Output is trimmed first, empty
    segments are dropped and order is preserved.

    Args:
        text: Raw standard output.

    Returns:
        Tuple of lines.

    Example:
        >>> split_lines("a.txt\\nb.txt\\r\\n\\nc.txt")
        ('a.txt', 'b.txt', 'c.txt')
    """
    return tuple(line for line in _LINE_BREAK.split(trim_output(text)) if line)
