"""Shared test fixtures."""

import pytest

from envupdate.config import Config


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point config lookup at an empty temp directory."""
    xdg = tmp_path / "xdg"
    xdg.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    for key in (
        "ENVUPDATE_CONFIG", "DOTFILES", "DOTFILES_BRANCH", "DOTFILES_REMOTE",
        "BREW", "NVIM", "NVIM_SYNC", "ZSH_PLUGINS_FILE", "ZSH_REGISTRY_VAR",
    ):
        monkeypatch.delenv(key, raising=False)
    return xdg


@pytest.fixture
def dotfiles_repo(tmp_path):
    """Create an (empty) dotfiles directory."""
    repo = tmp_path / "dotfiles"
    repo.mkdir()
    return repo


@pytest.fixture
def config(tmp_path, dotfiles_repo):
    """Config with every path under tmp_path."""
    return Config(
        dotfiles=dotfiles_repo,
        plugins_file=tmp_path / "plugins.yaml",
    )


@pytest.fixture
def fake_spinner():
    """Build a run_with_spinner stand-in that replays scripted (output, exit code) pairs.

    Each call appends its output to the log (when one is given) and records
    (argv, log, cwd, env) in ``.calls``.
    """
    def make(*script):
        steps = list(script)
        calls = []

        def run(argv, message, log=None, cwd=None, env=None):
            calls.append((list(argv), log, cwd, env))
            output, code = steps.pop(0) if steps else ("", 0)
            if log is not None:
                with open(log, "a") as f:
                    f.write(output)
            return code

        run.calls = calls
        return run
    return make
