#!/usr/bin/env python3
"""timerfile CLI - write a running countdown into a text file."""

import argparse
import sys
from pathlib import Path

from . import __version__
from . import ui
from .config import (
    DEFAULT_COUNTDOWN_MINUTES,
    DEFAULT_PRESET,
    DEFAULT_PROFILE,
    MAX_COUNTDOWN_MINUTES,
    MAX_POLL_INTERVAL_MS,
    PRESETS,
)
from .errors import TimerFileError
from .models import WRITE_POLICIES, TimerSettings
from .profile import Profile, load_profile
from .session import start_countdown


def countdown_minutes(value: str) -> int:
    """argparse type for the countdown length."""
    try:
        minutes = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of minutes: {value!r}") from None
    if not 0 <= minutes <= MAX_COUNTDOWN_MINUTES:
        raise argparse.ArgumentTypeError(f"must be between 0 and {MAX_COUNTDOWN_MINUTES}, got {minutes}")
    return minutes


def interval_ms(value: str) -> int:
    """argparse type for the tick interval."""
    try:
        ms = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid interval: {value!r}") from None
    if not 0 < ms <= MAX_POLL_INTERVAL_MS:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_POLL_INTERVAL_MS}, got {ms}")
    return ms


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timerfile",
        description="Count down and keep a text file updated with the time left (MM:SS).",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"timerfile {__version__}",
    )
    parser.add_argument(
        "-f", "--filename",
        help="File to write the remaining time into",
    )
    parser.add_argument(
        "-c", "--countdown",
        type=countdown_minutes,
        help=f"Countdown length in minutes, 0-{MAX_COUNTDOWN_MINUTES} (default: {DEFAULT_COUNTDOWN_MINUTES})",
    )
    parser.add_argument(
        "--config",
        help=f"YAML profile with settings (default: {DEFAULT_PROFILE} if present)",
    )

    # Write behaviour
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        help="Named settings bundle",
    )
    parser.add_argument(
        "--write-policy",
        choices=WRITE_POLICIES,
        help="on_change skips unchanged writes, always rewrites every tick",
    )
    parser.add_argument(
        "--interval",
        type=interval_ms,
        dest="poll_interval_ms",
        metavar="MS",
        help=f"Milliseconds between ticks, 1-{MAX_POLL_INTERVAL_MS}",
    )
    existing = parser.add_mutually_exclusive_group()
    existing.add_argument(
        "--require-existing",
        dest="require_existing_file",
        action="store_const",
        const=True,
        help="Fail unless the file already exists",
    )
    existing.add_argument(
        "--create-missing",
        dest="require_existing_file",
        action="store_const",
        const=False,
        help="Create the file (and, after asking, its directory) if missing",
    )

    parser.add_argument(
        "--echo",
        action="store_true",
        help="Also show the countdown in the terminal",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


def find_profile(path: str | None) -> Profile | None:
    """Load the profile named on the command line, or the default one if it exists."""
    if path is not None:
        return load_profile(path)
    if Path(DEFAULT_PROFILE).is_file():
        ui.debug(f"Using {DEFAULT_PROFILE}")
        return load_profile(DEFAULT_PROFILE)
    return None


def resolve_settings(args: argparse.Namespace, profile: Profile | None) -> TimerSettings:
    """Preset, then profile values, then command line flags."""
    if profile is not None:
        settings = profile.build_settings(args.preset)
    else:
        settings = TimerSettings.from_preset(args.preset or DEFAULT_PRESET)
    return settings.merged({
        "write_policy": args.write_policy,
        "poll_interval_ms": args.poll_interval_ms,
        "require_existing_file": args.require_existing_file,
    })


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    ui.DEBUG = args.debug

    try:
        profile = find_profile(args.config)
        settings = resolve_settings(args, profile)
    except TimerFileError as e:
        ui.print_error(str(e))
        sys.exit(1)

    filename = args.filename or (profile.filename if profile else None)
    if not filename:
        parser.error("the following arguments are required: -f/--filename")

    countdown = args.countdown
    if countdown is None and profile is not None:
        countdown = profile.countdown
    if countdown is None:
        countdown = DEFAULT_COUNTDOWN_MINUTES

    ui.debug(
        f"{filename}: {countdown} min, {settings.write_policy}, "
        f"{settings.poll_interval_ms}ms, require_existing_file={settings.require_existing_file}"
    )

    on_tick = ui.print_tick if args.echo else None
    try:
        start_countdown(filename, countdown, settings, on_tick=on_tick)
    except TimerFileError as e:
        ui.print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        if args.echo:
            ui.end_ticks()
        ui.print_system("Interrupted")
        sys.exit(1)

    if args.echo:
        ui.end_ticks()
    print("Countdown complete!")


if __name__ == "__main__":
    main()
