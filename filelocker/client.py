"""Remote lock service client."""

import logging
from typing import Optional, Protocol

import httpx

from .exceptions import (
    AuthenticationError,
    FileNotTrackedError,
    LockServiceError,
    NetworkError,
    ValidationError,
)
from .models import FileInfo, LockState

logger = logging.getLogger(__name__)


class LockClient(Protocol):
    """Operations the coordinator needs from a document-management backend."""

    def contains(self, path: str) -> bool: ...

    def is_locked_by_other(self, path: str) -> bool: ...

    def lock_file(self, path: str) -> bool: ...

    def unlock_file(self, path: str) -> bool: ...

    def sync_file(self, path: str, force: bool = False) -> None: ...

    def get_file_info(self, path: str) -> FileInfo: ...


class AdcClient:
    """Document-management drive client speaking the lock service HTTP API."""

    def __init__(self, base_url: str, token: str = None, timeout: float = 30.0,
                 transport: Optional[httpx.BaseTransport] = None):
        """Initialize the client.

        Args:
            base_url: The base URL of the lock service
            token: Bearer token for authentication
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.client = httpx.Client(
            headers={"Authorization": f"Bearer {token}"} if token else {},
            timeout=timeout,
            transport=transport,
        )

    def _url(self, endpoint: str) -> str:
        # keeps any path prefix of base_url
        return f"{self.base_url}{endpoint}"

    def _validate_path(self, path: str) -> None:
        if not path or not path.strip():
            raise ValidationError("File path must not be empty")

    def _handle_response(self, response: httpx.Response):
        """Handle HTTP response and raise appropriate exceptions."""
        if response.status_code == 401:
            raise AuthenticationError("Invalid or missing authentication token")
        elif response.status_code >= 400:
            try:
                message = response.json().get("error", f"HTTP {response.status_code}")
            except ValueError:
                message = f"HTTP {response.status_code}: {response.text}"
            raise LockServiceError(message)

        try:
            return response.json() if response.content else {}
        except ValueError as e:
            raise NetworkError(f"Failed to parse response: {e}")

    def _post(self, endpoint: str, payload: dict, action: str) -> httpx.Response:
        try:
            return self.client.post(self._url(endpoint), json=payload)
        except httpx.RequestError as e:
            raise NetworkError(f"Network error {action}: {e}")

    def health(self) -> str:
        """Check API health status."""
        try:
            response = self.client.get(self._url("/health"))
        except httpx.RequestError as e:
            raise NetworkError(f"Network error during health check: {e}")
        if response.status_code == 401:
            raise AuthenticationError("Invalid or missing authentication token")
        if response.status_code != 200:
            raise NetworkError(f"Health check failed: HTTP {response.status_code}")
        return response.text.strip('"')

    def get_file_info(self, path: str) -> FileInfo:
        """Get lock information for a file on a managed drive.

        Raises:
            FileNotTrackedError: if the path is not on a managed drive
        """
        self._validate_path(path)

        try:
            response = self.client.get(self._url("/files"), params={"path": path})
        except httpx.RequestError as e:
            raise NetworkError(f"Network error getting file info: {e}")

        if response.status_code == 404:
            raise FileNotTrackedError(f"File is not on a managed drive: {path}", path=path)

        data = self._handle_response(response)
        return FileInfo(
            path=data.get("path", path),
            lock_state=LockState(data["lock_state"]),
            lock_owner=data.get("lock_owner"),
            lock_timestamp=data.get("lock_timestamp"),
        )

    def contains(self, path: str) -> bool:
        """Whether the path lives on a managed drive."""
        try:
            self.get_file_info(path)
        except FileNotTrackedError:
            return False
        return True

    def is_locked_by_other(self, path: str) -> bool:
        """Whether another party currently holds the lock on the path."""
        return self.get_file_info(path).is_locked_by_other

    def lock_file(self, path: str) -> bool:
        """Lock a file.

        Returns:
            False if the service refused the lock, True otherwise
        """
        self._validate_path(path)
        response = self._post("/files/lock", {"path": path}, "locking file")
        if response.status_code == 409:
            logger.debug("Lock refused for %s: %s", path, response.text)
            return False
        return bool(self._handle_response(response).get("locked", True))

    def unlock_file(self, path: str) -> bool:
        """Unlock a file.

        Returns:
            False if the service refused to unlock, True otherwise
        """
        self._validate_path(path)
        response = self._post("/files/unlock", {"path": path}, "unlocking file")
        if response.status_code == 409:
            logger.debug("Unlock refused for %s: %s", path, response.text)
            return False
        return bool(self._handle_response(response).get("unlocked", True))

    def sync_file(self, path: str, force: bool = False) -> None:
        """Ask the drive to synchronize a file, immediately when force is set."""
        self._validate_path(path)
        response = self._post("/files/sync", {"path": path, "force": force}, "syncing file")
        self._handle_response(response)

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
