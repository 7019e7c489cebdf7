"""Git command execution."""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Optional

from .errors import CommandNotFound
from .models import CommandResult

logger = logging.getLogger(__name__)


def git_env() -> dict:
    """Get environment for non-interactive git execution."""
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def execute(args: list[str], cwd: Path) -> CommandResult:
    """Run git in cwd and capture combined output."""
    logger.debug("RUN git %s (cwd=%s)", shlex.join(args), cwd)
    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            env=git_env(),
        )
    except FileNotFoundError as e:
        if not Path(cwd).is_dir():
            return CommandResult(exit_code=1, output=f"No such directory: {cwd}")
        raise CommandNotFound("git") from e
    return CommandResult(exit_code=result.returncode, output=result.stdout or "")


def _stdout_or_none(args: list[str], cwd: Path) -> Optional[str]:
    result = execute(args, cwd)
    if not result.ok:
        logger.debug("git %s failed in %s: %s", args[0], cwd, result.output.strip())
        return None
    return result.output.strip()


def current_branch(cwd: Path) -> Optional[str]:
    """Get the checked-out branch, or None if detached/error."""
    branch = _stdout_or_none(["rev-parse", "--abbrev-ref", "HEAD"], cwd)
    return branch if branch != "HEAD" else None


def rev_parse(rev: str, cwd: Path) -> Optional[str]:
    """Resolve a revision to its commit hash."""
    return _stdout_or_none(["rev-parse", rev], cwd)


def count_commits(before: str, after: str, cwd: Path) -> int:
    """Count commits reachable from after but not before."""
    out = _stdout_or_none(["rev-list", "--count", f"{before}..{after}"], cwd)
    try:
        return int(out) if out else 0
    except ValueError:
        return 0


def last_subject(cwd: Path) -> Optional[str]:
    """Subject line of the HEAD commit."""
    return _stdout_or_none(["log", "-1", "--format=%s"], cwd)


def incoming_log(ref: str, cwd: Path) -> str:
    """One-line graph of commits in ref that are not in HEAD."""
    return _stdout_or_none(
        ["log", "--oneline", "--graph", "--decorate", f"HEAD..{ref}"], cwd
    ) or ""
