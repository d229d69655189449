"""Data classes for countdown settings."""

from dataclasses import dataclass, fields, replace
from typing import Any, Literal

from .config import (
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_WRITE_POLICY,
    MAX_COUNTDOWN_MINUTES,
    MAX_POLL_INTERVAL_MS,
    PRESETS,
)
from .errors import SettingsError

WritePolicy = Literal["on_change", "always"]
WRITE_POLICIES = ("on_change", "always")


@dataclass(frozen=True)
class TimerSettings:
    """How a countdown session writes to its file."""
    # "on_change" = skip the write when the text is unchanged
    # "always" = rewrite the file on every tick
    write_policy: WritePolicy = DEFAULT_WRITE_POLICY
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    # True = the target file must already exist, missing directories are errors
    require_existing_file: bool = False

    def __post_init__(self):
        if self.write_policy not in WRITE_POLICIES:
            raise SettingsError(
                f"Unknown write policy {self.write_policy!r} "
                f"(expected one of: {', '.join(WRITE_POLICIES)})"
            )
        if isinstance(self.poll_interval_ms, bool) or not isinstance(self.poll_interval_ms, int):
            raise SettingsError(f"poll_interval_ms must be an integer, got {self.poll_interval_ms!r}")
        if not 0 < self.poll_interval_ms <= MAX_POLL_INTERVAL_MS:
            raise SettingsError(
                f"poll_interval_ms must be between 1 and {MAX_POLL_INTERVAL_MS}, got {self.poll_interval_ms}"
            )
        if not isinstance(self.require_existing_file, bool):
            raise SettingsError(
                f"require_existing_file must be true or false, got {self.require_existing_file!r}"
            )

    @property
    def poll_interval(self) -> float:
        """Sleep between ticks, in seconds."""
        return self.poll_interval_ms / 1000

    @classmethod
    def from_preset(cls, name: str) -> "TimerSettings":
        """Build settings from a named preset."""
        if not isinstance(name, str) or name not in PRESETS:
            raise SettingsError(
                f"Unknown preset {name!r} (expected one of: {', '.join(PRESETS)})"
            )
        return cls(**PRESETS[name])

    def merged(self, overrides: dict[str, Any]) -> "TimerSettings":
        """Return a copy with the non-None overrides applied."""
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(changes) - known
        if unknown:
            raise SettingsError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)


def check_countdown(value) -> int:
    """Validate a countdown length in whole minutes."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsError(f"countdown must be a whole number of minutes, got {value!r}")
    if not 0 <= value <= MAX_COUNTDOWN_MINUTES:
        raise SettingsError(f"countdown must be between 0 and {MAX_COUNTDOWN_MINUTES}, got {value}")
    return value
