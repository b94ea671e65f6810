"""Adapter contract: builds contexts, runs turns, flushes replies."""

from abc import ABC, abstractmethod
from typing import Callable

from loguru import logger

from botcontext.asserts import (
    activity_not_null,
    context_not_null,
    conversation_reference_not_null,
    not_null,
)
from botcontext.context import BotContext, apply_conversation_reference
from botcontext.schema import Activity, ConversationReference
from botcontext.types import TurnContext

TurnHandler = Callable[[TurnContext], None]


class BotAdapter(ABC):
    """
    Base class for adapters that own turn dispatch and outbound transport.

    A context is open while its handler runs; once ``run_turn`` has flushed
    its responses the context is retired and should be dropped.
    """

    @abstractmethod
    def send_activities(
        self, context: TurnContext, activities: list[Activity]
    ) -> None:  # pragma: no cover - interface
        """
        Deliver outgoing activities over the adapter's transport.

        Args:
            context (TurnContext): The turn the activities belong to.
            activities (list[Activity]): Activities in reply order.
        """
        ...

    def create_context(self, request: Activity) -> BotContext:
        """
        Create a context for an inbound activity.

        Args:
            request (Activity): The inbound activity.

        Returns:
            BotContext: A fresh context owned by this adapter.
        """
        activity_not_null(request)
        return BotContext(self, request)

    def create_proactive_context(self, reference: ConversationReference) -> BotContext:
        """
        Create a context from a stored conversation reference.

        Args:
            reference (ConversationReference): The stored reference.

        Returns:
            BotContext: A context with no inbound request.
        """
        return BotContext.from_conversation_reference(self, reference)

    def run_turn(self, context: TurnContext, handler: TurnHandler) -> list[Activity]:
        """
        Run a handler for one turn, then flush its responses.

        Args:
            context (TurnContext): The (possibly decorated) context for the turn.
            handler (TurnHandler): Callable invoked with the context.

        Returns:
            list[Activity]: The activities that were sent.
        """
        context_not_null(context)
        not_null(handler, "handler")
        handler(context)
        responses = list(context.responses)
        if responses:
            self.send_activities(context, responses)
        logger.debug(
            "Turn flushed {} response(s) to conversation {}",
            len(responses),
            getattr(context.conversation_reference.conversation, "id", None),
        )
        return responses

    def process_activity(
        self, request: Activity, handler: TurnHandler
    ) -> list[Activity]:
        """
        Handle an inbound activity end to end.

        Args:
            request (Activity): The inbound activity.
            handler (TurnHandler): Callable invoked with the new context.

        Returns:
            list[Activity]: The activities that were sent.
        """
        return self.run_turn(self.create_context(request), handler)

    def continue_conversation(
        self, reference: ConversationReference, handler: TurnHandler
    ) -> list[Activity]:
        """
        Send proactive messages to a conversation identified by a stored reference.

        Args:
            reference (ConversationReference): The stored reference.
            handler (TurnHandler): Callable invoked with the proactive context.

        Returns:
            list[Activity]: The activities that were sent.
        """
        conversation_reference_not_null(reference)
        return self.run_turn(self.create_proactive_context(reference), handler)


class InMemoryAdapter(BotAdapter):
    """
    Adapter that keeps sent activities in memory.
    Useful for tests and local runs.
    """

    def __init__(self) -> None:
        self.sent: list[Activity] = []

    def send_activities(self, context: TurnContext, activities: list[Activity]) -> None:
        """
        Address each activity to the turn's conversation and record it.

        Args:
            context (TurnContext): The turn the activities belong to.
            activities (list[Activity]): Activities in reply order.
        """
        reference = context.conversation_reference
        for activity in activities:
            self.sent.append(apply_conversation_reference(activity, reference))
