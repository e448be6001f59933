"""Plugin load/unload lifecycle."""

import logging
from typing import Optional

from rich.console import Console

from .client import AdcClient, LockClient
from .config import Settings
from .coordinator import DocumentLockCoordinator
from .host import HostAdapter, HostEvents
from .models import LoadResult
from .notify import ConsoleNotifier, Notifier
from .scheduler import PathSerialExecutor

logger = logging.getLogger(__name__)

console = Console(stderr=True)


class FileLockerPlugin:
    """Wires the lock client, coordinator and host adapter together."""

    def __init__(self, settings: Settings = None, client: LockClient = None,
                 notifier: Notifier = None):
        self.settings = settings or Settings()
        self._client = client
        self._owns_client = False
        self._notifier = notifier
        self.coordinator: Optional[DocumentLockCoordinator] = None
        self.adapter: Optional[HostAdapter] = None

    @property
    def loaded(self) -> bool:
        return self.adapter is not None

    def load(self, events: HostEvents) -> LoadResult:
        """Connect to the lock service and start listening to host events."""
        try:
            logging.getLogger("filelocker").setLevel(self.settings.log_level.upper())
            if self._client is None:
                self._client = AdcClient(
                    self.settings.base_url,
                    token=self.settings.token,
                    timeout=self.settings.timeout,
                )
                self._owns_client = True
            if hasattr(self._client, "health"):
                self._client.health()

            notifier = self._notifier or ConsoleNotifier(self.settings.plugin_name)
            executor = PathSerialExecutor(max_workers=self.settings.max_workers)
            self.coordinator = DocumentLockCoordinator(self._client, notifier, self.settings, executor)
            self.adapter = HostAdapter(self.coordinator)
            self.adapter.attach(events)
        except Exception as e:
            console.print(f"[bold red]Error loading {self.settings.plugin_name}: {e}[/bold red]")
            logger.exception("Error loading %s", self.settings.plugin_name)
            self._teardown()
            return LoadResult(ok=False, error=str(e) or type(e).__name__)

        logger.debug("Successfully connected to %s", self.settings.base_url)
        return LoadResult(ok=True)

    def unload(self) -> None:
        """Stop listening and finish queued lock work.

        A client built by the plugin is closed; an injected client is left
        open for its owner.
        """
        self._teardown()

    def _teardown(self) -> None:
        if self.adapter is not None:
            self.adapter.detach()
            self.adapter = None
        if self.coordinator is not None:
            self.coordinator.shutdown()
            self.coordinator = None
        if self._owns_client:
            self._client.close()
            self._client = None
            self._owns_client = False
