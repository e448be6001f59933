"""Document lock coordination.

Turns "document opened" and "document closed" notifications into calls on a
remote lock client. The remote service is the only source of truth for lock
ownership: nothing is remembered between an open and the matching close.
"""

import logging
from typing import Optional

from .client import LockClient
from .config import Settings
from .models import HandlerResult, Outcome
from .notify import Notifier
from .scheduler import PathSerialExecutor
from .utils import clear_read_only, file_extension, file_name, set_read_only

logger = logging.getLogger(__name__)

LOCKED_TITLE = "File is locked!"


class DocumentLockCoordinator:
    """Locks files on open and releases them on close."""

    def __init__(self, client: LockClient, notifier: Notifier, settings: Settings,
                 executor: PathSerialExecutor = None):
        self.client = client
        self.notifier = notifier
        self.settings = settings
        self.executor = executor or PathSerialExecutor(max_workers=settings.max_workers)

    def on_open(self, path: Optional[str], imported: bool = False,
                extension: Optional[str] = None) -> HandlerResult:
        """Handle a document that has just been opened."""
        try:
            if not path:
                return HandlerResult.success(Outcome.SKIPPED)
            if imported:
                logger.debug("Skipping imported file %s", path)
                return HandlerResult.success(Outcome.SKIPPED)
            ext = (extension or file_extension(path)).lower()
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in self.settings.native_extensions:
                logger.debug("Skipping non-native file %s", path)
                return HandlerResult.success(Outcome.SKIPPED)
            return self._check_in(path)
        except Exception as e:
            logger.exception("Failed handling open of %s", path)
            return HandlerResult.failure(str(e) or type(e).__name__)

    def on_close(self, path: Optional[str]) -> HandlerResult:
        """Handle a document that is closing. A None path means it was never saved."""
        try:
            if not path:
                return HandlerResult.success(Outcome.SKIPPED)
            return self._check_out(path)
        except Exception as e:
            logger.exception("Failed handling close of %s", path)
            return HandlerResult.failure(str(e) or type(e).__name__)

    def flush(self, timeout: float = None) -> bool:
        """Wait for background lock work to finish."""
        return self.executor.flush(timeout=timeout)

    def shutdown(self) -> None:
        self.executor.shutdown(wait=True)

    def _check_in(self, path: str) -> HandlerResult:
        if not self.client.contains(path):
            logger.debug("File is not on a managed drive %s", path)
            return HandlerResult.success(Outcome.NOT_TRACKED)

        if self.client.is_locked_by_other(path):
            self._notify_locked_by_other(path)
            return HandlerResult.success(Outcome.LOCKED_BY_OTHER)

        self.executor.submit(path, lambda: self._lock(path))
        self.notifier.status(f'Locked "{file_name(path)}"')
        return HandlerResult.success(Outcome.LOCK_REQUESTED)

    def _check_out(self, path: str) -> HandlerResult:
        if not self.client.contains(path):
            logger.debug("File is not on a managed drive %s", path)
            return HandlerResult.success(Outcome.NOT_TRACKED)

        if self.client.is_locked_by_other(path):
            if self.settings.set_read_only:
                clear_read_only(path)
            return HandlerResult.success(Outcome.LOCKED_BY_OTHER)

        self.executor.submit(path, lambda: self._unlock_and_sync(path))
        self.notifier.status(f'UnLocked "{file_name(path)}"')
        return HandlerResult.success(Outcome.UNLOCK_REQUESTED)

    def _notify_locked_by_other(self, path: str) -> None:
        info = self.client.get_file_info(path)
        owner = info.lock_owner or "unknown"
        lock_time = info.lock_timestamp or "unknown"
        logger.debug("File is already locked by %s @ %s %s", owner, lock_time, path)

        if self.settings.set_read_only:
            set_read_only(path)

        self.notifier.alert(
            LOCKED_TITLE,
            f'"{file_name(path)}" was locked by:\n\n'
            f"Lock Owner:  {owner}\n"
            f"Lock Time:   {lock_time}\n\n"
            f"Any edits you make may be sent to recycle bin!",
        )

    def _lock(self, path: str) -> None:
        logger.debug("Locking %s", path)
        if not self.client.lock_file(path):
            logger.warning("Failed locking %s", path)

    def _unlock_and_sync(self, path: str) -> None:
        logger.debug("Unlocking %s", path)
        if not self.client.unlock_file(path):
            logger.warning("Failed unlocking %s", path)
        logger.debug("Syncing %s", path)
        self.client.sync_file(path, force=True)
