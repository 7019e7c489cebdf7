"""Neovim plugin sync."""

import logging
import re

from ..config import Config
from ..output import fmt_title_underline, log_error, log_info, log_success
from ..runner import captured_log, contains_any, read_log, run_with_spinner

logger = logging.getLogger(__name__)

FAILURE_MARKERS = ("Error", "ERROR", "Could not", "not installed")
CHANGE_PATTERN = re.compile(r"updated|installed|removed", re.IGNORECASE)


def changed_lines(output: str) -> list[str]:
    return [line.strip() for line in output.splitlines() if CHANGE_PATTERN.search(line)]


def update_nvim(config: Config) -> bool:
    """Sync editor plugins headlessly. Returns True on success."""
    print(fmt_title_underline("Neovim plugins"))

    argv = [config.nvim, "--headless", config.nvim_sync, "+qa"]
    with captured_log("nvim") as log:
        status = run_with_spinner(argv, "Syncing Neovim plugins...", log=log)
        output = read_log(log)

    marker = contains_any(output, FAILURE_MARKERS)
    if status != 0 or marker:
        logger.debug("nvim exit=%d marker=%r", status, marker)
        log_error("Neovim plugin sync failed")
        if config.verbose:
            log_info(output)
        return False

    lines = changed_lines(output)
    if not lines:
        log_success("No plugin updates found")
        return True

    for line in lines:
        log_info(f"  {line}")
    log_success("Neovim plugins synced")
    return True
