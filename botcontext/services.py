"""Lock-guarded service registry shared by the stages of a turn."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload

from botcontext.asserts import service_id_not_blank

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceKey(Generic[T]):
    """
    Typed slot in a service registry.

    A key carries the static type of the service stored under it; at runtime
    it resolves to ``name``, so ``ServiceKey("state")`` and ``"state"`` address
    the same entry.
    """

    name: str

    def __post_init__(self) -> None:
        service_id_not_blank(self.name)


def _resolve(service_id: str | ServiceKey[Any]) -> str:
    key = service_id.name if isinstance(service_id, ServiceKey) else service_id
    service_id_not_blank(key)
    return key


class ServiceRegistry:
    """
    Registry of services keyed by non-blank, case-sensitive strings.

    Every read and write holds the lock for a single lookup or insert.
    """

    def __init__(self) -> None:
        """
        Initialize an empty service registry.
        """
        self._services: dict[str, Any] = {}
        self._lock = threading.Lock()

    def set(self, service_id: str | ServiceKey[Any], value: Any) -> None:
        """
        Register or overwrite a service.

        Args:
            service_id (str | ServiceKey[Any]): The service key.
            value (Any): The service. Last write for a key wins.

        Raises:
            InvalidArgumentError: If the key is blank.
        """
        key = _resolve(service_id)
        with self._lock:
            self._services[key] = value

    @overload
    def get(self, service_id: ServiceKey[T]) -> T | None: ...

    @overload
    def get(self, service_id: ServiceKey[T], default: T) -> T: ...

    @overload
    def get(self, service_id: str, default: Any = None) -> Any: ...

    def get(self, service_id, default=None):
        """
        Look up a service.

        Args:
            service_id (str | ServiceKey): The service key.
            default (Any, optional): Returned when the key is unmapped. Defaults to None.

        Returns:
            Any: The registered service, or ``default``.

        Raises:
            InvalidArgumentError: If the key is blank.
        """
        key = _resolve(service_id)
        with self._lock:
            return self._services.get(key, default)

    def __contains__(self, service_id: object) -> bool:
        """Whether a service is registered; blank or non-key values never are."""
        if isinstance(service_id, ServiceKey):
            key = service_id.name
        elif isinstance(service_id, str) and service_id.strip():
            key = service_id
        else:
            return False
        with self._lock:
            return key in self._services

    def __len__(self) -> int:
        """Number of registered services."""
        with self._lock:
            return len(self._services)

    def keys(self) -> list[str]:
        """
        Return a snapshot of registered keys.

        Returns:
            list[str]: Sorted list of registered keys.
        """
        with self._lock:
            return sorted(self._services.keys())
