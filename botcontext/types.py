"""Shared interface for turn contexts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from botcontext.schema import Activity, ConversationReference
from botcontext.services import ServiceKey, ServiceRegistry

if TYPE_CHECKING:
    from botcontext.adapter import BotAdapter


class TurnContext(Protocol):
    """Capabilities shared by ``BotContext`` and its decorators."""

    @property
    def adapter(self) -> BotAdapter:  # pragma: no cover - interface
        """The adapter that created the context."""
        ...

    @property
    def request(self) -> Activity | None:  # pragma: no cover - interface
        """The inbound activity, or None for proactive contexts."""
        ...

    @property
    def responses(self) -> list[Activity]:  # pragma: no cover - interface
        """Outgoing activities queued during the turn."""
        ...

    @responses.setter
    def responses(self, value: list[Activity]) -> None:  # pragma: no cover - interface
        ...

    @property
    def conversation_reference(
        self,
    ) -> ConversationReference:  # pragma: no cover - interface
        """Identity of the conversation this turn belongs to."""
        ...

    @property
    def services(self) -> ServiceRegistry:  # pragma: no cover - interface
        """The service registry shared by the stages of the turn."""
        ...

    def reply(
        self, activity_or_text: Activity | str, speak: str | None = None
    ) -> TurnContext:  # pragma: no cover - interface
        """Queue an outgoing activity and return the context for chaining."""
        ...

    def get(
        self, service_id: str | ServiceKey[Any], default: Any = None
    ) -> Any:  # pragma: no cover - interface
        """Return the service registered under ``service_id``."""
        ...

    def set(
        self, service_id: str | ServiceKey[Any], value: Any
    ) -> None:  # pragma: no cover - interface
        """Register a service under ``service_id``."""
        ...
