"""Command handlers for the update CLI."""

from ..errors import UpdateError
from ..ops import update_brew, update_dotfiles, update_nvim, update_zsh
from ..output import log_error


COMMANDS = {}

ALL_ORDER = ("nvim", "homebrew", "zsh", "dotfiles")


def command(name, aliases=()):
    """Register a command under its name and aliases."""
    def decorator(fn):
        COMMANDS[name] = fn
        for alias in aliases:
            COMMANDS[alias] = fn
        return fn
    return decorator


@command("nvim", aliases=["vim"])
def cmd_nvim(args, config):
    return update_nvim(config)


@command("homebrew", aliases=["brew"])
def cmd_homebrew(args, config):
    return update_brew(config)


@command("zsh")
def cmd_zsh(args, config):
    return update_zsh(config)


@command("dotfiles")
def cmd_dotfiles(args, config):
    return update_dotfiles(config)


@command("all")
def cmd_all(args, config):
    ok = True
    for name in ALL_ORDER:
        try:
            if not COMMANDS[name](args, config):
                ok = False
        except UpdateError as e:
            log_error(str(e))
            ok = False
    return ok
