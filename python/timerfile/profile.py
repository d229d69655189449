"""Profile loading and parsing."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .config import DEFAULT_PRESET
from .errors import SettingsError
from .models import TimerSettings, check_countdown

PROFILE_KEYS = {
    "filename",
    "countdown",
    "preset",
    "write_policy",
    "poll_interval_ms",
    "require_existing_file",
}


@dataclass
class Profile:
    """Countdown arguments and settings read from a YAML file."""
    preset: str | None = None
    overrides: dict[str, Any] = field(default_factory=dict)
    filename: str | None = None
    countdown: int | None = None

    @property
    def settings(self) -> TimerSettings:
        return self.build_settings()

    def build_settings(self, preset: str | None = None) -> TimerSettings:
        """Preset settings (argument, then profile, then default) with this profile's values applied."""
        base = TimerSettings.from_preset(preset or self.preset or DEFAULT_PRESET)
        return base.merged(self.overrides)

    @classmethod
    def from_file(cls, path: str | Path) -> "Profile":
        """Load a profile from a YAML file."""
        path = Path(path)
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise SettingsError(f"Cannot read profile {path}: {e}") from e
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in profile {path}: {e}") from e
        return cls.from_dict(data or {}, base_path=path.parent)

    @classmethod
    def from_dict(cls, data: dict, base_path: Path | None = None) -> "Profile":
        """Parse a profile from a dictionary."""
        if not isinstance(data, dict):
            raise SettingsError("Profile must be a mapping of settings")

        unknown = set(data) - PROFILE_KEYS
        if unknown:
            raise SettingsError(f"Unknown profile key(s): {', '.join(sorted(unknown))}")

        overrides = {
            key: data[key]
            for key in ("write_policy", "poll_interval_ms", "require_existing_file")
            if data.get(key) is not None
        }

        # Relative filenames are resolved against the profile's directory
        filename = data.get("filename")
        if filename is not None:
            filename = str(filename)
            if base_path is not None and not Path(filename).is_absolute():
                filename = str(base_path / filename)

        countdown = data.get("countdown")
        if countdown is not None:
            countdown = check_countdown(countdown)

        profile = cls(
            preset=data.get("preset"),
            overrides=overrides,
            filename=filename,
            countdown=countdown,
        )
        # Fail on bad values now rather than when the timer starts
        profile.build_settings()
        return profile


def load_profile(path: str | Path) -> Profile:
    """Load a profile from file."""
    return Profile.from_file(path)
