"""Command-line interface for envupdate."""

import logging
import sys

from ..config import Config
from ..errors import UpdateError
from ..output import die, log_error

from .args import parse_args
from .handlers import COMMANDS


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv=None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    if not args.command:
        args.parser.print_help()
        sys.exit(0)

    handler = COMMANDS.get(args.command)
    if handler is None:
        log_error(f"Unknown command: {args.command}")
        args.parser.print_help()
        sys.exit(1)

    _setup_logging(args.verbose)

    try:
        config = Config.load(verbose=args.verbose)
        ok = handler(args, config)
    except KeyboardInterrupt:
        log_error("Interrupted")
        sys.exit(130)
    except UpdateError as e:
        die(str(e))

    sys.exit(0 if ok else 1)
