"""Tests for target file provisioning."""

import pytest

from timerfile.errors import FilesystemError, InvalidPathError, UserAbortedError
from timerfile.provision import confirm, open_target, resolve_target


def test_creates_missing_file(tmp_path):
    path = tmp_path / "timer.txt"
    with open_target(str(path)) as handle:
        handle.write(b"05:00")
    assert path.read_bytes() == b"05:00"


def test_keeps_existing_content_until_first_write(tmp_path):
    path = tmp_path / "timer.txt"
    path.write_bytes(b"10:00")
    handle = open_target(str(path))
    handle.close()
    assert path.read_bytes() == b"10:00"


@pytest.mark.parametrize("reply", ["y", "Y", " y\n"])
def test_prompt_yes_creates_directories(tmp_path, answer, capsys, reply):
    path = tmp_path / "out" / "nested" / "timer.txt"
    answer.append(reply)

    open_target(str(path)).close()

    assert path.parent.is_dir()
    assert path.exists()
    out = capsys.readouterr().out
    assert f"Directory {path.parent} does not exist. Create it? [y/N]" in out


@pytest.mark.parametrize("reply", ["", "n", "N", "yes", "no"])
def test_prompt_refusal_aborts(tmp_path, answer, capsys, reply):
    path = tmp_path / "out" / "timer.txt"
    answer.append(reply)

    with pytest.raises(UserAbortedError):
        open_target(str(path))

    assert not (tmp_path / "out").exists()
    assert "Aborting." in capsys.readouterr().out


def test_prompt_end_of_input_aborts(tmp_path, answer):
    with pytest.raises(UserAbortedError):
        open_target(str(tmp_path / "out" / "timer.txt"))
    assert not (tmp_path / "out").exists()


def test_confirm(answer):
    answer.extend(["y", "maybe"])
    assert confirm("Proceed?") is True
    assert confirm("Proceed?") is False
    assert confirm("Proceed?") is False


def test_require_existing_file_missing(tmp_path):
    with pytest.raises(FilesystemError, match="does not exist"):
        open_target(str(tmp_path / "timer.txt"), require_existing_file=True)
    assert not (tmp_path / "timer.txt").exists()


def test_require_existing_file_never_prompts(tmp_path, monkeypatch):
    def no_input(prompt=""):
        raise AssertionError("should not prompt")

    monkeypatch.setattr("builtins.input", no_input)
    with pytest.raises(FilesystemError):
        open_target(str(tmp_path / "out" / "timer.txt"), require_existing_file=True)
    assert not (tmp_path / "out").exists()


def test_require_existing_file_present(tmp_path):
    path = tmp_path / "timer.txt"
    path.write_bytes(b"")
    open_target(str(path), require_existing_file=True).close()


def test_parent_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(FilesystemError, match="not a directory"):
        open_target(str(blocker / "timer.txt"))


def test_target_is_a_directory(tmp_path):
    (tmp_path / "dir").mkdir()
    with pytest.raises(FilesystemError):
        open_target(str(tmp_path / "dir"))


@pytest.mark.parametrize("filename", ["", "   ", ".", ".."])
def test_invalid_paths(filename):
    with pytest.raises(InvalidPathError, match="Invalid path"):
        resolve_target(filename)


def test_resolve_target_expands_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert resolve_target("~/timer.txt") == tmp_path / "timer.txt"
