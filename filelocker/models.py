"""File Locker data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LockState(str, Enum):
    """Remote lock state of a file."""
    UNLOCKED = "unlocked"
    LOCKED_BY_SELF = "locked_by_self"
    LOCKED_BY_OTHER = "locked_by_other"


@dataclass
class FileInfo:
    """Information about a file on a managed drive."""
    path: str
    lock_state: LockState
    lock_owner: Optional[str] = None
    lock_timestamp: Optional[str] = None

    @property
    def is_locked_by_other(self) -> bool:
        return self.lock_state is LockState.LOCKED_BY_OTHER


class Outcome(str, Enum):
    """What a coordinator handler did with an event."""
    SKIPPED = "skipped"
    NOT_TRACKED = "not_tracked"
    LOCKED_BY_OTHER = "locked_by_other"
    LOCK_REQUESTED = "lock_requested"
    UNLOCK_REQUESTED = "unlock_requested"
    FAILED = "failed"


@dataclass
class HandlerResult:
    """Result of handling a single host event."""
    ok: bool
    outcome: Outcome
    reason: Optional[str] = None

    @classmethod
    def success(cls, outcome: Outcome) -> "HandlerResult":
        return cls(ok=True, outcome=outcome)

    @classmethod
    def failure(cls, reason: str) -> "HandlerResult":
        return cls(ok=False, outcome=Outcome.FAILED, reason=reason)


@dataclass
class DocumentOpenEvent:
    """The host finished opening a model document."""
    file_name: Optional[str]
    imported: bool = False


@dataclass
class DocumentCloseEvent:
    """The host is closing a model document. path is None if never saved."""
    path: Optional[str]


@dataclass
class CompanionDocument:
    """A document of the companion visual-programming tool."""
    file_path: Optional[str] = None

    @property
    def is_file_path_defined(self) -> bool:
        return bool(self.file_path)


@dataclass
class LoadResult:
    """Result of loading the plugin into a host."""
    ok: bool
    error: Optional[str] = None
