"""Error taxonomy for building, validating and resolving a Composite run.

Every error renders as its message, followed by the wrapped cause (if any)
on its own line, so the messages stay stable for callers that match on them.
"""


class CompositeError(Exception):
    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}\n{self.cause}"


class InputError(CompositeError):
    """An action input or workflow variable is syntactically malformed."""


class ConfigValidationError(CompositeError):
    """A built Config is not coherent enough to run."""


class DownloadError(CompositeError):
    """The remote checks file could not be fetched."""


class ChecksParseError(CompositeError):
    """The checks declaration is not a valid YAML sequence of checks."""
