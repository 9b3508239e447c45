"""Tests for hookfacts.utils._logging module."""

import json
from pathlib import Path

import pytest

from hookfacts.utils import create_logger, create_null_logger


def _read_entries(path: Path) -> list[dict[str, object]]:
    return [json.loads(line) for line in path.read_text().splitlines() if line]


class TestCreateLogger:
    def test_writes_json_entries(self, tmp_path: Path) -> None:
        log_file = tmp_path / "hooks.log"
        logger = create_logger(log_format="json", log_file=str(log_file))

        logger.info("git_query_completed", query="staged files")

        entries = _read_entries(log_file)
        assert len(entries) == 1
        assert entries[0]["event"] == "git_query_completed"
        assert entries[0]["query"] == "staged files"
        assert entries[0]["level"] == "info"
        assert "timestamp" in entries[0]

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "nested" / "hooks.log"
        logger = create_logger(log_file=str(log_file))
        logger.info("hello")
        assert log_file.exists()

    def test_filters_below_level(self, tmp_path: Path) -> None:
        log_file = tmp_path / "hooks.log"
        logger = create_logger(level="info", log_format="json", log_file=str(log_file))

        logger.debug("hidden")
        logger.warning("shown")

        events = [entry["event"] for entry in _read_entries(log_file)]
        assert events == ["shown"]

    def test_debug_env_overrides_level(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HOOKFACTS_DEBUG", "1")
        log_file = tmp_path / "hooks.log"
        logger = create_logger(level="error", log_format="json", log_file=str(log_file))

        logger.debug("verbose")

        events = [entry["event"] for entry in _read_entries(log_file)]
        assert events == ["verbose"]

    def test_binds_extra_values(self, tmp_path: Path) -> None:
        log_file = tmp_path / "hooks.log"
        logger = create_logger(
            log_format="json", log_file=str(log_file), component="git"
        )

        logger.info("hello")

        assert _read_entries(log_file)[0]["component"] == "git"

    def test_text_format(self, tmp_path: Path) -> None:
        log_file = tmp_path / "hooks.log"
        logger = create_logger(log_format="text", log_file=str(log_file))

        logger.info("git_query_failed", query="hooks path")

        content = log_file.read_text()
        assert "git_query_failed" in content
        assert "query=" in content

    def test_writes_to_stderr_without_file(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        logger = create_logger(log_format="json")

        logger.info("to_stderr")

        captured = capsys.readouterr()
        assert "to_stderr" in captured.err


class TestCreateNullLogger:
    def test_drops_entries(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = create_null_logger()

        logger.debug("nothing")
        logger.error("still nothing")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
