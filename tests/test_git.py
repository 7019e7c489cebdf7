"""Tests for git helpers."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from envupdate import git
from envupdate.errors import CommandNotFound


def _completed(returncode=0, stdout=""):
    return MagicMock(returncode=returncode, stdout=stdout)


class TestExecute:
    """Tests for git.execute."""

    def test_passes_cwd_and_args(self, tmp_path):
        with patch("subprocess.run", return_value=_completed(0, "ok\n")) as mock_run:
            result = git.execute(["status"], tmp_path)

        assert result.ok
        assert result.output == "ok\n"
        argv = mock_run.call_args[0][0]
        assert argv == ["git", "status"]
        assert mock_run.call_args.kwargs["cwd"] == tmp_path
        assert mock_run.call_args.kwargs["env"]["GIT_TERMINAL_PROMPT"] == "0"

    def test_missing_git(self, tmp_path):
        with patch("subprocess.run", side_effect=FileNotFoundError("git")):
            with pytest.raises(CommandNotFound):
                git.execute(["status"], tmp_path)

    def test_missing_directory_is_a_failed_result(self, tmp_path):
        with patch("subprocess.run", side_effect=FileNotFoundError("cwd")):
            result = git.execute(["status"], tmp_path / "gone")
        assert not result.ok


class TestHelpers:
    """Tests for the parsing helpers."""

    def test_current_branch(self, tmp_path):
        with patch("subprocess.run", return_value=_completed(0, "main\n")):
            assert git.current_branch(tmp_path) == "main"

    def test_current_branch_detached(self, tmp_path):
        with patch("subprocess.run", return_value=_completed(0, "HEAD\n")):
            assert git.current_branch(tmp_path) is None

    def test_rev_parse_failure(self, tmp_path):
        with patch("subprocess.run", return_value=_completed(128, "fatal: bad revision\n")):
            assert git.rev_parse("origin/main", tmp_path) is None

    def test_count_commits(self, tmp_path):
        with patch("subprocess.run", return_value=_completed(0, "4\n")) as mock_run:
            assert git.count_commits("abc", "def", tmp_path) == 4
        assert mock_run.call_args[0][0] == ["git", "rev-list", "--count", "abc..def"]

    def test_count_commits_unparseable(self, tmp_path):
        with patch("subprocess.run", return_value=_completed(0, "???\n")):
            assert git.count_commits("abc", "def", tmp_path) == 0

    def test_incoming_log_range(self, tmp_path):
        with patch("subprocess.run", return_value=_completed(0, "* abc1234 fix\n")) as mock_run:
            assert git.incoming_log("origin/main", tmp_path) == "* abc1234 fix"
        assert mock_run.call_args[0][0][-1] == "HEAD..origin/main"
