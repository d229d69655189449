"""Terminal UI helpers with colors and formatting."""

import sys

# ANSI color codes
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

# Colors
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"

# Debug flag - set by the CLI
DEBUG = False


def debug(msg: str):
    """Print debug message if DEBUG is enabled."""
    if DEBUG:
        print(f"  {DIM}[debug] {msg}{RESET}")


def print_system(msg: str):
    """Print a system message."""
    print(f"{DIM}[System]: {msg}{RESET}")


def print_error(msg: str):
    """Print an error message to stderr."""
    print(f"{RED}{BOLD}An error occurred: {msg}{RESET}", file=sys.stderr)


def print_tick(text: str):
    """Overwrite the current terminal line with the remaining time."""
    color = YELLOW if text.startswith("00:") else GREEN
    sys.stdout.write(f"\r{BOLD}{color}{text}{RESET} ")
    sys.stdout.flush()


def end_ticks():
    """Move past the line used by print_tick."""
    sys.stdout.write("\n")
    sys.stdout.flush()
