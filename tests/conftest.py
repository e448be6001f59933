"""Shared fixtures: in-memory lock client and recording notifier."""

import pytest

from filelocker.config import Settings
from filelocker.coordinator import DocumentLockCoordinator
from filelocker.models import FileInfo, LockState
from filelocker.scheduler import PathSerialExecutor


class FakeClient:
    """Lock client double that records every call in order."""

    def __init__(self, tracked=True, locked_by_other=False, owner=None,
                 timestamp=None, lock_ok=True, unlock_ok=True):
        self.tracked = tracked
        self.locked_by_other = locked_by_other
        self.owner = owner
        self.timestamp = timestamp
        self.lock_ok = lock_ok
        self.unlock_ok = unlock_ok
        self.calls = []

    def names(self):
        return [name for name, *_ in self.calls]

    def contains(self, path):
        self.calls.append(("contains", path))
        return self.tracked

    def is_locked_by_other(self, path):
        self.calls.append(("is_locked_by_other", path))
        return self.locked_by_other

    def lock_file(self, path):
        self.calls.append(("lock_file", path))
        return self.lock_ok

    def unlock_file(self, path):
        self.calls.append(("unlock_file", path))
        return self.unlock_ok

    def sync_file(self, path, force=False):
        self.calls.append(("sync_file", path, force))

    def get_file_info(self, path):
        self.calls.append(("get_file_info", path))
        state = LockState.LOCKED_BY_OTHER if self.locked_by_other else LockState.UNLOCKED
        return FileInfo(path=path, lock_state=state,
                        lock_owner=self.owner, lock_timestamp=self.timestamp)


class RecordingNotifier:
    def __init__(self):
        self.statuses = []
        self.alerts = []

    def status(self, message):
        self.statuses.append(message)

    def alert(self, title, message):
        self.alerts.append((title, message))


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def coordinator(client, notifier, settings):
    coord = DocumentLockCoordinator(client, notifier, settings, PathSerialExecutor(max_workers=2))
    yield coord
    coord.shutdown()
