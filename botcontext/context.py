"""Per-turn conversation context."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

from botcontext.asserts import (
    InvalidArgumentError,
    activity_not_null,
    adapter_not_null,
    conversation_reference_not_null,
    not_null,
)
from botcontext.schema import Activity, ConversationReference
from botcontext.services import ServiceKey, ServiceRegistry
from botcontext.types import TurnContext

if TYPE_CHECKING:
    from botcontext.adapter import BotAdapter


def get_conversation_reference(activity: Activity) -> ConversationReference:
    """
    Derive the conversation reference of an activity.

    Args:
        activity (Activity): The activity to read identity fields from.

    Returns:
        ConversationReference: The reference addressing the activity's conversation.

    Raises:
        InvalidArgumentError: If ``activity`` is None.
    """
    activity_not_null(activity)
    return ConversationReference(
        activity_id=activity.id,
        user=activity.from_property,
        bot=activity.recipient,
        conversation=activity.conversation,
        channel_id=activity.channel_id,
        service_url=activity.service_url,
    )


def apply_conversation_reference(
    activity: Activity,
    reference: ConversationReference,
    is_incoming: bool = False,
) -> Activity:
    """
    Stamp a conversation reference's addressing onto an activity.

    Outgoing activities are sent from the bot to the user; incoming ones the
    other way round.

    Args:
        activity (Activity): The activity to update in place.
        reference (ConversationReference): The reference to copy from.
        is_incoming (bool, optional): Address as an inbound activity. Defaults to False.

    Returns:
        Activity: The updated activity.
    """
    activity_not_null(activity)
    conversation_reference_not_null(reference)
    activity.channel_id = reference.channel_id
    activity.service_url = reference.service_url
    activity.conversation = reference.conversation
    if is_incoming:
        activity.from_property = reference.user
        activity.recipient = reference.bot
        if reference.activity_id:
            activity.id = reference.activity_id
    else:
        activity.from_property = reference.bot
        activity.recipient = reference.user
        if reference.activity_id:
            activity.reply_to_id = reference.activity_id
    return activity


class BotContext(TurnContext):
    """
    Execution context for a single turn.

    Owns the inbound request, the conversation reference derived from it, the
    replies queued during the turn, and a lock-guarded service registry. The
    context is created and retired by its adapter; cross-turn state belongs in
    a registered service.
    """

    def __init__(
        self,
        adapter: BotAdapter,
        request: Activity | ConversationReference | None,
    ) -> None:
        """
        Initialize the context.

        Args:
            adapter (BotAdapter): The adapter that owns the turn.
            request (Activity | ConversationReference | None): The inbound activity,
                or a stored conversation reference for proactive messaging.

        Raises:
            InvalidArgumentError: If ``adapter`` or ``request`` is None.
        """
        adapter_not_null(adapter)
        not_null(request, "request")
        self._adapter = adapter
        self._responses: list[Activity] = []
        self._services = ServiceRegistry()
        if isinstance(request, ConversationReference):
            self._request: Activity | None = None
            self._conversation_reference = request
        else:
            self._request = request
            self._conversation_reference = get_conversation_reference(request)
        logger.debug(
            "Context created for conversation {} on {}",
            getattr(self._conversation_reference.conversation, "id", None),
            self._conversation_reference.channel_id,
        )

    @classmethod
    def from_conversation_reference(
        cls, adapter: BotAdapter, reference: ConversationReference
    ) -> BotContext:
        """
        Create a context for proactive messaging, without an inbound request.

        Args:
            adapter (BotAdapter): The adapter that owns the turn.
            reference (ConversationReference): The stored conversation reference.

        Returns:
            BotContext: A context whose ``request`` is None.

        Raises:
            InvalidArgumentError: If either argument is None.
        """
        adapter_not_null(adapter)
        conversation_reference_not_null(reference)
        return cls(adapter, reference)

    @property
    def adapter(self) -> BotAdapter:
        """The adapter that owns the turn."""
        return self._adapter

    @property
    def request(self) -> Activity | None:
        """The inbound activity, or None for proactive contexts."""
        return self._request

    @property
    def responses(self) -> list[Activity]:
        """Outgoing activities queued during the turn, in reply order."""
        return self._responses

    @responses.setter
    def responses(self, value: list[Activity]) -> None:
        """Replace the queued activities as a whole."""
        not_null(value, "responses")
        self._responses = value

    @property
    def conversation_reference(self) -> ConversationReference:
        """Identity of the conversation, fixed at construction."""
        return self._conversation_reference

    @property
    def services(self) -> ServiceRegistry:
        """The lock-guarded service registry for the turn."""
        return self._services

    def reply(
        self, activity_or_text: Activity | str, speak: str | None = None
    ) -> BotContext:
        """
        Queue an outgoing activity.

        A string becomes a message addressed back to the sender; ``speak`` is
        attached only when it is not blank. Any other value is queued as is,
        and ``speak`` must then be left blank: set ``speak`` on the activity.

        Args:
            activity_or_text (Activity | str): Text of the reply, or a prepared activity.
            speak (str | None, optional): Speech markup for a text reply. Defaults to None.

        Returns:
            BotContext: This context.

        Raises:
            InvalidArgumentError: If ``activity_or_text`` is None, or ``speak`` is
                given together with an activity.
        """
        if isinstance(activity_or_text, str):
            reply = self._conversation_reference.get_post_to_user_message()
            reply.text = activity_or_text
            if speak is not None and speak.strip():
                reply.speak = speak
            self.responses.append(reply)
            return self

        activity_not_null(activity_or_text)
        if speak is not None and speak.strip():
            raise InvalidArgumentError(
                "speak", "speak applies to text replies only"
            )
        self.responses.append(activity_or_text)
        return self

    def set(self, service_id: str | ServiceKey[Any], value: Any) -> None:
        """
        Register a service for the rest of the turn.

        Args:
            service_id (str | ServiceKey[Any]): Non-blank, case-sensitive key.
            value (Any): The service. Last write wins.

        Raises:
            InvalidArgumentError: If ``service_id`` is blank.
        """
        self._services.set(service_id, value)

    def get(self, service_id: str | ServiceKey[Any], default: Any = None) -> Any:
        """
        Return a registered service.

        Args:
            service_id (str | ServiceKey[Any]): Non-blank, case-sensitive key.
            default (Any, optional): Returned for an unmapped key. Defaults to None.

        Returns:
            Any: The service, or ``default``.

        Raises:
            InvalidArgumentError: If ``service_id`` is blank.
        """
        return self._services.get(service_id, default)
