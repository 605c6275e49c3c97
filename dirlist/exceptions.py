"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class PathError(FileRepositoryError):
    """Exception raised when a listed path cannot be collected."""

    default_reason = "Cannot access path"

    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        self.reason = reason or self.default_reason
        super().__init__(f"{self.reason}: {path}")


class PathNotFoundError(PathError):
    """Exception raised when a listed path does not exist."""

    default_reason = "No such file or directory"


class PathUnreadableError(PathError):
    """Exception raised when a listed path exists but cannot be read."""

    default_reason = "Permission denied"


class MetadataUnavailableError(BaseAppError):
    """Exception raised when a single attribute of an entry cannot be read."""

    pass


class NameResolutionError(BaseAppError):
    """Exception raised when a numeric owner or group id has no name."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
