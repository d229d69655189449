"""Shared fixtures for timerfile tests."""

import pytest

from timerfile import ui


class FakeClock:
    """Clock and sleep pair that advances time only when sleep is called."""

    def __init__(self, start: float = 1000.0):
        # Whole milliseconds keep tick arithmetic exact
        self.ms = int(start * 1000)
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.ms / 1000

    def sleep(self, seconds: float):
        self.sleeps.append(seconds)
        self.ms += round(seconds * 1000)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def reset_debug(monkeypatch):
    """Keep --debug from leaking between tests."""
    monkeypatch.setattr(ui, "DEBUG", False)


@pytest.fixture
def answer(monkeypatch):
    """Script the operator's reply to the directory prompt."""
    replies = []

    def fake_input(prompt=""):
        if not replies:
            raise EOFError
        return replies.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return replies
