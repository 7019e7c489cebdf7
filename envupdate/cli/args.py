"""Argument parsing for the update CLI."""

import argparse
import sys

from .. import __version__
from ..output import log_error

USAGE = "update [options] <command>"

EPILOG = """\
commands:
  nvim, vim        update editor plugins
  homebrew, brew   update package manager packages
  dotfiles         update the configuration repository
  zsh              update shell-framework plugins
  all              run editor, package-manager, shell, then dotfiles updates in sequence
"""


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message):
        log_error(message)
        self.print_help()
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    p = UsageParser(
        prog="update",
        usage=USAGE,
        description="Refresh editor plugins, packages, shell plugins and dotfiles",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Show captured output on failure")
    p.add_argument("--version", action="version", version=f"envupdate {__version__}")
    p.add_argument("command", nargs="?", metavar="<command>", help="Command to run")
    return p


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments.

    The first non-flag token is the command; later tokens are ignored.
    An unrecognized option is reported like an unknown command.
    """
    p = build_parser()
    args, extras = p.parse_known_args(argv)
    flags = [token for token in extras if token.startswith("-")]
    if flags:
        p.error(f"Unknown command: {flags[0]}")
    args.parser = p
    return args
