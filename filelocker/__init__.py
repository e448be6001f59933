"""File Locker - keeps managed-drive file locks in step with open documents."""

from .client import AdcClient, LockClient
from .config import Settings, load_settings
from .coordinator import DocumentLockCoordinator
from .exceptions import (
    FileLockerError,
    AuthenticationError,
    NetworkError,
    LockServiceError,
    FileNotTrackedError,
    ValidationError,
    ConfigError,
)
from .host import HostAdapter, HostEvents
from .models import (
    LockState,
    FileInfo,
    Outcome,
    HandlerResult,
    DocumentOpenEvent,
    DocumentCloseEvent,
    CompanionDocument,
    LoadResult,
)
from .notify import ConsoleNotifier, Notifier
from .plugin import FileLockerPlugin
from .scheduler import PathSerialExecutor

__version__ = "1.0.0"
__all__ = [
    "AdcClient",
    "LockClient",
    "Settings",
    "load_settings",
    "DocumentLockCoordinator",
    "FileLockerError",
    "AuthenticationError",
    "NetworkError",
    "LockServiceError",
    "FileNotTrackedError",
    "ValidationError",
    "ConfigError",
    "HostAdapter",
    "HostEvents",
    "LockState",
    "FileInfo",
    "Outcome",
    "HandlerResult",
    "DocumentOpenEvent",
    "DocumentCloseEvent",
    "CompanionDocument",
    "LoadResult",
    "ConsoleNotifier",
    "Notifier",
    "FileLockerPlugin",
    "PathSerialExecutor",
]
