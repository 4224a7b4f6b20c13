"""Exception hierarchy for safe backup operations."""

from typing import Optional


class SafeBackupError(Exception):
    """Base exception for all safe backup errors."""

    pass


class InvalidPathError(SafeBackupError):
    """Raised when a filename fails validation or is not a regular file."""

    def __init__(self, filename: str, reason: str, message: str):
        self.filename = filename
        self.reason = reason
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"Invalid path: {self.message}"


class FileMissingError(SafeBackupError):
    """Raised when an expected file does not exist."""

    def __init__(self, filename: str, message: str):
        self.filename = filename
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"File not found: {self.message}"


class OperationIOError(SafeBackupError):
    """Wraps an underlying read, write, open, flush or delete failure."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"IO error: {self.message}: {self.cause}"
        return f"IO error: {self.message}"


class AuditLogError(OperationIOError):
    """Raised when an audit record cannot be appended."""

    pass


class PermissionDeniedError(SafeBackupError):
    """Reserved for permission checks; not raised by any current check."""

    def __str__(self) -> str:
        return f"Permission denied: {self.args[0] if self.args else ''}"


class ConfigurationError(SafeBackupError):
    """Raised when the configuration file is missing or invalid."""

    pass
