"""Forwarding wrappers for layering behavior onto a turn context."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

from botcontext.asserts import context_not_null
from botcontext.schema import Activity, ConversationReference
from botcontext.services import ServiceKey, ServiceRegistry
from botcontext.types import TurnContext
from botcontext.utils.env_cfg import load_logging_env

if TYPE_CHECKING:
    from botcontext.adapter import BotAdapter


class ContextDecorator(TurnContext):
    """
    Wraps one context and forwards every operation to it.

    Subclasses override only the operations they intercept. ``reply`` returns
    the decorator rather than the inner context, so chained calls keep going
    through the same layer.
    """

    def __init__(self, inner: TurnContext) -> None:
        """
        Initialize the ContextDecorator.

        Args:
            inner (TurnContext): The context to wrap.

        Raises:
            InvalidArgumentError: If ``inner`` is None.
        """
        context_not_null(inner)
        self._inner = inner

    @property
    def inner(self) -> TurnContext:
        """The wrapped context."""
        return self._inner

    @property
    def adapter(self) -> BotAdapter:
        """The inner context's adapter."""
        return self._inner.adapter

    @property
    def request(self) -> Activity | None:
        """The inner context's inbound activity."""
        return self._inner.request

    @property
    def responses(self) -> list[Activity]:
        """The inner context's queued activities."""
        return self._inner.responses

    @responses.setter
    def responses(self, value: list[Activity]) -> None:
        """Replace the inner context's queued activities."""
        self._inner.responses = value

    @property
    def conversation_reference(self) -> ConversationReference:
        """The inner context's conversation reference."""
        return self._inner.conversation_reference

    @property
    def services(self) -> ServiceRegistry:
        """The inner context's service registry."""
        return self._inner.services

    def reply(
        self, activity_or_text: Activity | str, speak: str | None = None
    ) -> ContextDecorator:
        """Forward the reply to the inner context and return this decorator."""
        self._inner.reply(activity_or_text, speak)
        return self

    def get(self, service_id: str | ServiceKey[Any], default: Any = None) -> Any:
        """Look up a service on the inner context."""
        return self._inner.get(service_id, default)

    def set(self, service_id: str | ServiceKey[Any], value: Any) -> None:
        """Register a service on the inner context."""
        self._inner.set(service_id, value)


class LoggingContextDecorator(ContextDecorator):
    """
    Logs every reply and service registration before forwarding it.
    """

    def __init__(
        self,
        inner: TurnContext,
        log_reply_text: bool | None = None,
        preview_chars: int | None = None,
    ) -> None:
        """
        Initialize the LoggingContextDecorator.

        Args:
            inner (TurnContext): The context to wrap.
            log_reply_text (bool | None, optional): Include a text preview in reply logs.
                Defaults to the ``LOG_REPLY_TEXT`` setting.
            preview_chars (int | None, optional): Maximum preview length.
                Defaults to the ``LOG_REPLY_PREVIEW_CHARS`` setting.
        """
        super().__init__(inner)
        cfg = load_logging_env()
        self.log_reply_text = (
            cfg.log_reply_text if log_reply_text is None else log_reply_text
        )
        self.preview_chars = (
            cfg.reply_preview_chars if preview_chars is None else preview_chars
        )

    def _preview(self, text: str | None) -> str:
        """Text shown in reply logs; empty unless previews are enabled."""
        if not self.log_reply_text or not text:
            return ""
        if len(text) > self.preview_chars:
            return text[: self.preview_chars] + "..."
        return text

    def reply(
        self, activity_or_text: Activity | str, speak: str | None = None
    ) -> LoggingContextDecorator:
        """
        Log the reply, then forward it to the wrapped context.

        Args:
            activity_or_text (Activity | str): Text of the reply, or a prepared activity.
            speak (str | None, optional): Speech markup for a text reply. Defaults to None.

        Returns:
            LoggingContextDecorator: This decorator.
        """
        if isinstance(activity_or_text, str):
            activity_type, text = "message", activity_or_text
        else:
            activity_type = getattr(activity_or_text, "type", None)
            text = getattr(activity_or_text, "text", None)
        super().reply(activity_or_text, speak)
        logger.debug(
            "Reply #{} queued [{}] {}",
            len(self.responses),
            activity_type,
            self._preview(text),
        )
        return self

    def set(self, service_id: str | ServiceKey[Any], value: Any) -> None:
        """Register the service, then log its key."""
        super().set(service_id, value)
        key = service_id.name if isinstance(service_id, ServiceKey) else service_id
        logger.debug("Service registered: {}", key)
