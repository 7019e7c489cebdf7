"""Dotfiles repository update."""

import logging

from .. import git
from ..config import Config
from ..output import (
    fmt_key,
    fmt_title_underline,
    fmt_value,
    log_error,
    log_info,
    log_success,
    log_warning,
)
from ..runner import captured_log, read_log, run_with_spinner

logger = logging.getLogger(__name__)


def update_dotfiles(config: Config) -> bool:
    """Fast-forward the dotfiles repo from its remote. Returns True on success.

    The repo must be on its primary branch; otherwise nothing is fetched.
    """
    print(fmt_title_underline("Dotfiles"))
    repo = config.require_dotfiles()
    branch = config.dotfiles_branch
    remote_ref = f"{config.dotfiles_remote}/{branch}"

    current = git.current_branch(repo)
    if current is None and git.rev_parse("HEAD", repo) is None:
        log_error(f"{repo} is not a git repository")
        return False
    if current != branch:
        log_warning(
            f"Dotfiles are on {current or 'a detached HEAD'}, not {branch}; skipping"
        )
        return False

    log_info(f"{fmt_key('repository')}: {fmt_value(repo)}")

    with captured_log("dotfiles") as log:
        status = run_with_spinner(
            ["git", "fetch", config.dotfiles_remote, branch],
            f"Fetching {remote_ref}...",
            log=log,
            cwd=repo,
            env=git.git_env(),
        )
        if status != 0:
            log_error(f"Failed to fetch {remote_ref}")
            log_info(read_log(log))
            return False

        local = git.rev_parse("HEAD", repo)
        remote = git.rev_parse(remote_ref, repo)
        if remote is None:
            log_error(f"Cannot resolve {remote_ref}")
            return False
        if local == remote:
            log_success("Dotfiles already up to date")
            return True

        log_info("Incoming commits:")
        log_info(git.incoming_log(remote_ref, repo))

        status = run_with_spinner(
            ["git", "pull", "--ff-only", config.dotfiles_remote, branch],
            "Pulling dotfiles...",
            log=log,
            cwd=repo,
            env=git.git_env(),
        )
        if status != 0:
            log_error("Dotfiles pull failed (not a fast-forward?)")
            log_info(read_log(log))
            return False

    log_success("Dotfiles updated")
    return True
