"""Spinner-wrapped command execution and scoped capture logs."""

import logging
import os
import shlex
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Sequence

from rich.console import Console

from .errors import CommandNotFound

logger = logging.getLogger(__name__)

console = Console(stderr=True)


@contextmanager
def captured_log(name: str) -> Iterator[Path]:
    """Yield a temp file for command output; it is removed on every exit path."""
    tmp = tempfile.NamedTemporaryFile(
        prefix=f"envupdate-{name}-", suffix=".log", delete=False
    )
    tmp.close()
    path = Path(tmp.name)
    try:
        yield path
    finally:
        if path.exists():
            os.unlink(path)


def run_with_spinner(
    argv: Sequence[str],
    message: str,
    log: Optional[Path] = None,
    cwd: Optional[Path] = None,
    env: Optional[dict] = None,
) -> int:
    """Run a command behind a spinner. Returns its exit code.

    Combined stdout/stderr is appended to ``log`` when given, discarded otherwise.
    """
    logger.debug("RUN %s (cwd=%s)", shlex.join(argv), cwd or ".")
    try:
        with console.status(message):
            if log is None:
                result = subprocess.run(
                    list(argv),
                    cwd=cwd,
                    env=env,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                )
            else:
                with open(log, "a") as out:
                    result = subprocess.run(
                        list(argv),
                        cwd=cwd,
                        env=env,
                        stdin=subprocess.DEVNULL,
                        stdout=out,
                        stderr=subprocess.STDOUT,
                    )
    except FileNotFoundError as e:
        raise CommandNotFound(argv[0]) from e

    logger.debug("EXIT %d %s", result.returncode, argv[0])
    return result.returncode


def read_log(log: Path) -> str:
    """Return captured output, tolerating undecodable bytes."""
    return log.read_text(errors="replace")


def contains_any(text: str, markers: Sequence[str]) -> Optional[str]:
    """Return the first marker found in text, or None."""
    for marker in markers:
        if marker in text:
            return marker
    return None
