"""Terminal output formatting."""

import sys

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
BOLD = "\033[1m"
NC = "\033[0m"


def fmt_title_underline(title: str) -> str:
    """Format a section title with an underline of matching width."""
    return f"\n{BOLD}{title}{NC}\n{'=' * len(title)}"


def fmt_key(key: str) -> str:
    return f"{BLUE}{key}{NC}"


def fmt_value(value) -> str:
    return f"{GREEN}{value}{NC}"


def log_info(msg: str) -> None:
    """Log a plain informational line."""
    print(msg)


def log_step(msg: str) -> None:
    """Log a step in progress."""
    print(f"{YELLOW}-> {msg}{NC}")


def log_success(msg: str) -> None:
    """Log a successful operation."""
    print(f"{GREEN}OK {msg}{NC}")


def log_warning(msg: str) -> None:
    """Log a warning to stderr."""
    print(f"{YELLOW}WARN: {msg}{NC}", file=sys.stderr)


def log_error(msg: str) -> None:
    """Log an error to stderr."""
    print(f"{RED}ERROR: {msg}{NC}", file=sys.stderr)


def die(msg: str) -> None:
    """Log error and exit."""
    log_error(msg)
    sys.exit(1)
