"""Exceptions raised while provisioning or running a countdown."""


class TimerFileError(Exception):
    """Base class for every error the CLI reports."""


class InvalidPathError(TimerFileError):
    """The target path has no usable file name or parent."""


class FilesystemError(TimerFileError):
    """Creating directories or opening the target file failed."""


class WriteError(TimerFileError):
    """Truncating, writing or flushing the target file failed."""


class UserAbortedError(TimerFileError):
    """The operator declined to create a missing directory."""


class SettingsError(TimerFileError):
    """A profile file, setting or countdown length is invalid."""
