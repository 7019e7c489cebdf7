"""Tests for spinner runner and captured logs."""

import os
import sys

import pytest

from envupdate.errors import CommandNotFound
from envupdate.runner import captured_log, contains_any, read_log, run_with_spinner


class TestCapturedLog:
    """Tests for the scoped temp log."""

    def test_removed_after_normal_exit(self):
        with captured_log("test") as log:
            assert log.exists()
            assert log.name.startswith("envupdate-test-")
        assert not log.exists()

    def test_removed_after_exception(self):
        with pytest.raises(RuntimeError):
            with captured_log("test") as log:
                log.write_text("partial")
                raise RuntimeError("boom")
        assert not log.exists()

    def test_removed_after_system_exit(self):
        with pytest.raises(SystemExit):
            with captured_log("test") as log:
                sys.exit(1)
        assert not log.exists()

    def test_tolerates_early_deletion(self):
        with captured_log("test") as log:
            log.unlink()
        assert not log.exists()


class TestRunWithSpinner:
    """Tests for run_with_spinner."""

    def test_captures_stdout_and_stderr(self):
        code = "import sys; print('out'); print('err', file=sys.stderr)"
        with captured_log("run") as log:
            status = run_with_spinner([sys.executable, "-c", code], "Running...", log=log)
            output = read_log(log)
        assert status == 0
        assert "out" in output
        assert "err" in output

    def test_appends_across_calls(self):
        with captured_log("run") as log:
            run_with_spinner([sys.executable, "-c", "print('first')"], "1", log=log)
            run_with_spinner([sys.executable, "-c", "print('second')"], "2", log=log)
            output = read_log(log)
        assert output.index("first") < output.index("second")

    def test_returns_exit_code(self):
        status = run_with_spinner([sys.executable, "-c", "raise SystemExit(3)"], "Failing...")
        assert status == 3

    def test_runs_in_cwd(self, tmp_path):
        with captured_log("run") as log:
            run_with_spinner(
                [sys.executable, "-c", "import os; print(os.getcwd())"],
                "cwd", log=log, cwd=tmp_path,
            )
            output = read_log(log)
        assert str(tmp_path.resolve()) in output

    def test_missing_executable(self):
        with pytest.raises(CommandNotFound) as exc_info:
            run_with_spinner(["envupdate-no-such-binary"], "Missing...")
        assert exc_info.value.command == "envupdate-no-such-binary"


def test_contains_any_returns_first_marker():
    assert contains_any("fatal: bad ref", ("Error", "fatal")) == "fatal"
    assert contains_any("all good", ("Error", "fatal")) is None


def test_passes_environment():
    env = dict(os.environ, ENVUPDATE_MARKER="from-env")
    code = "import os; print(os.environ['ENVUPDATE_MARKER'])"
    with captured_log("run") as log:
        status = run_with_spinner([sys.executable, "-c", code], "env", log=log, env=env)
        output = read_log(log)
    assert status == 0
    assert "from-env" in output
