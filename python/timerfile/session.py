"""Countdown session - the write loop behind a running timer."""

import time
from typing import BinaryIO, Callable

from .config import TEXT_ENCODING
from .errors import TimerFileError, WriteError
from .models import TimerSettings, check_countdown
from .provision import open_target
from . import ui


def format_remaining(seconds: float) -> str:
    """
    Render remaining time as MM:SS.

    Partial seconds are dropped. Minutes are never capped, so 125 minutes
    and 3 seconds renders as "125:03".
    """
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


class CountdownSession:
    """One countdown, from start until expiry or the first write failure."""

    def __init__(
        self,
        handle: BinaryIO,
        duration_minutes: int,
        settings: TimerSettings | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        on_tick: Callable[[str], None] | None = None,
    ):
        self.handle = handle
        self.settings = settings or TimerSettings()
        self.clock = clock
        self.sleep = sleep
        self.on_tick = on_tick
        self._end_time = clock() + check_countdown(duration_minutes) * 60
        self.last_rendered: str | None = None
        self.writes = 0
        self.skipped = 0

    @property
    def end_time(self) -> float:
        return self._end_time

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        """Release the file handle."""
        try:
            self.handle.close()
        except OSError as e:
            # A failed write leaves bytes buffered, so close fails the same way
            if exc_type is None:
                name = getattr(self.handle, "name", "countdown file")
                raise WriteError(f"Cannot write to {name}: {e}") from e
            ui.debug(f"Ignoring error while closing after {exc_type.__name__}: {e}")

    def run(self):
        """Tick until the end time is reached."""
        debounce = self.settings.write_policy == "on_change"

        while True:
            now = self.clock()
            if now >= self._end_time:
                break

            text = format_remaining(self._end_time - now)
            if debounce and text == self.last_rendered:
                self.skipped += 1
            else:
                self.write(text)

            self.sleep(self.settings.poll_interval)

        ui.debug(f"Finished after {self.writes} writes ({self.skipped} skipped)")

    def write(self, text: str):
        """Replace the whole file content with text."""
        try:
            self.handle.truncate(0)
            self.handle.seek(0)
            self.handle.write(text.encode(TEXT_ENCODING))
            self.handle.flush()
        except OSError as e:
            name = getattr(self.handle, "name", "countdown file")
            raise WriteError(f"Cannot write to {name}: {e}") from e

        self.last_rendered = text
        self.writes += 1
        ui.debug(f"Wrote {text}")
        if self.on_tick:
            self.on_tick(text)


def run_countdown(
    handle: BinaryIO,
    duration_minutes: int,
    settings: TimerSettings | None = None,
    **kwargs,
) -> CountdownSession:
    """Run a countdown on an open handle. The handle is closed afterwards."""
    try:
        session = CountdownSession(handle, duration_minutes, settings, **kwargs)
    except TimerFileError:
        handle.close()
        raise

    with session:
        session.run()
    return session


def start_countdown(
    filename: str,
    duration_minutes: int,
    settings: TimerSettings | None = None,
    **kwargs,
) -> CountdownSession:
    """Open (or create) the target file and run a countdown on it."""
    settings = settings or TimerSettings()
    check_countdown(duration_minutes)
    handle = open_target(filename, require_existing_file=settings.require_existing_file)
    return run_countdown(handle, duration_minutes, settings, **kwargs)
