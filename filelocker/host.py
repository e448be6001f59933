"""Host application glue.

The host raises four lifecycle events. ``HostAdapter`` listens for them on a
``HostEvents`` registry and forwards file paths to the coordinator.
"""

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List

from .coordinator import DocumentLockCoordinator
from .models import CompanionDocument, DocumentCloseEvent, DocumentOpenEvent
from .utils import file_extension

logger = logging.getLogger(__name__)

DOCUMENT_OPEN = "document-open"
DOCUMENT_CLOSE = "document-close"
COMPANION_DOCUMENT_ADDED = "companion-document-added"
COMPANION_DOCUMENT_REMOVED = "companion-document-removed"

EVENTS = (DOCUMENT_OPEN, DOCUMENT_CLOSE, COMPANION_DOCUMENT_ADDED, COMPANION_DOCUMENT_REMOVED)


class HostEvents:
    """Minimal event registry a host integration raises events on."""

    def __init__(self):
        self._handlers: Dict[str, List[Callable[[Any], None]]] = defaultdict(list)

    def connect(self, event: str, handler: Callable[[Any], None]) -> None:
        if event not in EVENTS:
            raise ValueError(f"Unknown host event: {event}")
        self._handlers[event].append(handler)

    def disconnect(self, event: str, handler: Callable[[Any], None]) -> None:
        try:
            self._handlers[event].remove(handler)
        except ValueError:
            pass

    def emit(self, event: str, payload: Any) -> None:
        for handler in list(self._handlers[event]):
            handler(payload)

    def handlers(self, event: str) -> List[Callable[[Any], None]]:
        return list(self._handlers[event])


class HostAdapter:
    def __init__(self, coordinator: DocumentLockCoordinator):
        self.coordinator = coordinator
        self._events = None

    def attach(self, events: HostEvents) -> None:
        events.connect(DOCUMENT_OPEN, self.on_document_opened)
        events.connect(DOCUMENT_CLOSE, self.on_document_closed)
        events.connect(COMPANION_DOCUMENT_ADDED, self.on_companion_added)
        events.connect(COMPANION_DOCUMENT_REMOVED, self.on_companion_removed)
        self._events = events

    def detach(self) -> None:
        if self._events is None:
            return
        self._events.disconnect(DOCUMENT_OPEN, self.on_document_opened)
        self._events.disconnect(DOCUMENT_CLOSE, self.on_document_closed)
        self._events.disconnect(COMPANION_DOCUMENT_ADDED, self.on_companion_added)
        self._events.disconnect(COMPANION_DOCUMENT_REMOVED, self.on_companion_removed)
        self._events = None

    # The coordinator already swallows its own failures; these guards cover
    # malformed payloads from the host.

    def on_document_opened(self, event: DocumentOpenEvent) -> None:
        try:
            if event.file_name:
                self.coordinator.on_open(
                    event.file_name, imported=event.imported,
                    extension=file_extension(event.file_name),
                )
        except Exception:
            logger.exception("Failed handling document-open event")

    def on_document_closed(self, event: DocumentCloseEvent) -> None:
        try:
            self.coordinator.on_close(event.path)
        except Exception:
            logger.exception("Failed handling document-close event")

    def on_companion_added(self, doc: CompanionDocument) -> None:
        try:
            if isinstance(doc, CompanionDocument) and doc.is_file_path_defined:
                self.coordinator.on_open(doc.file_path)
        except Exception:
            logger.exception("Failed handling companion document-added event")

    def on_companion_removed(self, doc: CompanionDocument) -> None:
        try:
            if isinstance(doc, CompanionDocument) and doc.is_file_path_defined:
                self.coordinator.on_close(doc.file_path)
        except Exception:
            logger.exception("Failed handling companion document-removed event")
