"""Homebrew package update."""

import logging

from ..config import Config
from ..output import fmt_title_underline, log_error, log_info, log_success
from ..runner import captured_log, contains_any, read_log, run_with_spinner

logger = logging.getLogger(__name__)

FAILURE_MARKERS = ("Error", "fatal", "Failed")
SECTION_MARKER = "=>"


def _is_separator(line: str) -> bool:
    stripped = line.strip()
    return not stripped or set(stripped) <= {"-", "="}


def summarize(output: str) -> list[str]:
    """Lines that follow each "=>" section heading, without separators."""
    lines = []
    in_section = False
    for line in output.splitlines():
        if SECTION_MARKER in line:
            in_section = True
            continue
        if in_section and not _is_separator(line):
            lines.append(line.rstrip())
    return lines


def update_brew(config: Config) -> bool:
    """Run brew update + upgrade. Returns True on success."""
    print(fmt_title_underline("Homebrew"))

    with captured_log("brew") as log:
        status = run_with_spinner(
            [config.brew, "update"], "Updating Homebrew...", log=log
        )
        if status == 0:
            status = run_with_spinner(
                [config.brew, "upgrade"], "Upgrading packages...", log=log
            )
        output = read_log(log)

    marker = contains_any(output, FAILURE_MARKERS)
    if status != 0 or marker:
        logger.debug("brew exit=%d marker=%r", status, marker)
        log_error("Homebrew update failed")
        if config.verbose:
            log_info(output)
        return False

    updates = summarize(output)
    if not updates:
        log_success("No Homebrew updates found")
        return True

    for line in updates:
        log_info(f"  {line.strip()}")
    log_success("Homebrew updated")
    return True
