"""Exceptions raised while validating a request or writing the file."""

from pathlib import Path


class DummyFileError(Exception):
    """Base class for every error this tool reports."""


class UsageError(DummyFileError):
    """The command line could not be turned into a fill request.

    Raised before any output file is touched.
    """


class InvalidSizeError(UsageError):
    def __init__(self, token: str) -> None:
        super().__init__(f"First parameter must be file size in bytes: {token}")
        self.token = token


class InvalidByteSequenceError(UsageError):
    def __init__(self, message: str, option: str) -> None:
        super().__init__(f"{message}: {option}")
        self.option = option


class MissingParameterError(UsageError):
    pass


class UnrecognizedOptionError(UsageError):
    def __init__(self, option: str) -> None:
        super().__init__(f"Option not recognized: {option}")
        self.option = option


class TooManyParametersError(UsageError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Too many parameters on command line: {token}")
        self.token = token


class FillIOError(DummyFileError):
    """The output file could not be created, written or closed.

    The underlying OSError is kept as ``__cause__``.
    """

    def __init__(self, path: Path | str, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"Error while writing file {path}: {reason}")
        self.path = Path(path)
