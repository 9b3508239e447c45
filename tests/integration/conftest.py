import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def _isolate_git_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user and system git config (such as core.hooksPath) out of tests."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", "/dev/null")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


def git(path: Path, *args: str) -> str:
    """Run git in the given directory and return its standard output."""
    result = subprocess.run(
        ["git", *args],
        cwd=str(path),
        capture_output=True,
        check=True,
        text=True,
    )
    return result.stdout


def init_git_repo(path: Path) -> None:
    """Initialize a minimal git repository in the given path."""
    git(path, "init", "--initial-branch=main")
    git(path, "config", "user.email", "test@example.com")
    git(path, "config", "user.name", "Test User")
    git(path, "config", "commit.gpgsign", "false")


@dataclass(frozen=True, slots=True)
class GitTestRepo:
    """A temporary repository with two commits and a staged change.

    History:
        1. README.md, src/app.py, old.txt
        2. modify src/app.py, add docs/guide.md, delete old.txt
    Index:
        staged new.txt and a modification of README.md; untracked scratch.txt
    """

    root: Path

    def git(self, *args: str) -> str:
        return git(self.root, *args)


@pytest.fixture
def git_repo(tmp_path: Path) -> GitTestRepo:
    """Create a repository with history, staged changes and untracked files."""
    root = tmp_path / "project"
    root.mkdir()
    init_git_repo(root)
    repo = GitTestRepo(root=root)

    (root / "src").mkdir()
    (root / "README.md").write_text("# project\n")
    (root / "src" / "app.py").write_text("print('v1')\n")
    (root / "old.txt").write_text("old\n")
    repo.git("add", "-A")
    repo.git("commit", "-m", "initial")

    (root / "src" / "app.py").write_text("print('v2')\n")
    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("guide\n")
    (root / "old.txt").unlink()
    repo.git("add", "-A")
    repo.git("commit", "-m", "second")

    (root / "new.txt").write_text("new\n")
    (root / "README.md").write_text("# project\n\nmore\n")
    repo.git("add", "new.txt", "README.md")
    (root / "scratch.txt").write_text("scratch\n")

    return repo
