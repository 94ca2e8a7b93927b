"""
Radiant Custom Exceptions

Simple exception hierarchy for error handling.
"""


class RadiantError(Exception):
    """Base exception for Radiant."""

    pass


class ConfigurationError(RadiantError):
    """Configuration is invalid."""

    pass


class MessanaConnectionError(RadiantError):
    """Cannot reach the Messana API or the request failed."""

    pass


class EndpointNotFoundError(MessanaConnectionError):
    """The Messana API has no such endpoint (unknown zone or path)."""

    pass


class ResponseFormatError(RadiantError):
    """Response body is not valid JSON or lacks the expected field."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class PartialWriteError(RadiantError):
    """Only some of a sequence of independent writes succeeded.

    Attributes:
        completed: paths written successfully, in order
        failed: path -> exception for each write that failed
    """

    def __init__(self, completed: list[str], failed: dict[str, Exception]):
        details = ", ".join(f"{path} ({err})" for path, err in failed.items())
        super().__init__(f"Partial write: completed {completed}, failed {details}")
        self.completed = completed
        self.failed = failed
