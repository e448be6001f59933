"""File Locker exception classes."""

class FileLockerError(Exception):
    """Base exception for all File Locker errors."""
    pass


class AuthenticationError(FileLockerError):
    """Raised when the lock service rejects our credentials."""
    pass


class NetworkError(FileLockerError):
    """Raised when the lock service cannot be reached."""
    pass


class LockServiceError(FileLockerError):
    """Raised when a lock service operation fails."""
    pass


class FileNotTrackedError(LockServiceError):
    """Raised when a path is not on a managed drive."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class ValidationError(FileLockerError):
    """Raised when input validation fails."""
    pass


class ConfigError(FileLockerError):
    """Raised when the configuration file cannot be used."""
    pass
