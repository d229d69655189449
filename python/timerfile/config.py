"""Configuration and settings."""

# Countdown defaults
DEFAULT_COUNTDOWN_MINUTES = 10
MAX_COUNTDOWN_MINUTES = 255

# Write loop
DEFAULT_WRITE_POLICY = "on_change"
DEFAULT_POLL_INTERVAL_MS = 100
MAX_POLL_INTERVAL_MS = 60_000
TEXT_ENCODING = "ascii"

# Named settings bundles (write_policy, poll_interval_ms, require_existing_file)
PRESETS = {
    "debounced": {
        "write_policy": "on_change",
        "poll_interval_ms": 100,
        "require_existing_file": False,
    },
    "unconditional": {
        "write_policy": "always",
        "poll_interval_ms": 250,
        "require_existing_file": True,
    },
}
DEFAULT_PRESET = "debounced"

# Profile file looked up when --config is not given
DEFAULT_PROFILE = "timerfile.yaml"
