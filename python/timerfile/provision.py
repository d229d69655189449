"""Target file provisioning: directory checks, the creation prompt, and opening."""

from pathlib import Path
from typing import BinaryIO

from .errors import FilesystemError, InvalidPathError, UserAbortedError
from . import ui


def confirm(question: str) -> bool:
    """Ask a yes/no question on the console. Only "y" or "Y" counts as yes."""
    print(f"{question} [y/N]")
    try:
        answer = input()
    except EOFError:
        return False
    return answer.strip().lower() == "y"


def prompt_directory_creation(directory: Path):
    """Create a missing directory (and its parents) if the operator agrees."""
    if directory.exists():
        return

    if not confirm(f"Directory {directory} does not exist. Create it?"):
        print("Aborting.")
        raise UserAbortedError(f"Directory {directory} was not created")

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Cannot create directory {directory}: {e}") from e
    ui.debug(f"Created directory {directory}")


def resolve_target(filename: str) -> Path:
    """Turn a filename argument into a path with a usable file name."""
    if not filename or not filename.strip():
        raise InvalidPathError("Invalid path: filename is empty")

    path = Path(filename).expanduser()
    if not path.name or path.name in (".", ".."):
        raise InvalidPathError(f"Invalid path: {filename!r} does not name a file")
    return path


def open_target(filename: str, require_existing_file: bool = False) -> BinaryIO:
    """
    Open the countdown file for writing and return the handle.

    With require_existing_file the file (and so its directory) must already
    exist. Otherwise a missing directory is offered for creation and a
    missing file is created. Existing content is left alone until the first
    write.
    """
    path = resolve_target(filename)
    parent = path.parent

    if not parent.is_dir():
        if parent.exists():
            raise FilesystemError(f"{parent} is not a directory")
        if require_existing_file:
            raise FilesystemError(f"Directory {parent} does not exist")
        prompt_directory_creation(parent)

    try:
        if not require_existing_file:
            path.touch(exist_ok=True)
        handle = open(path, "r+b")
    except FileNotFoundError as e:
        raise FilesystemError(f"File {path} does not exist") from e
    except OSError as e:
        raise FilesystemError(f"Cannot open {path}: {e}") from e

    ui.debug(f"Opened {path}")
    return handle
