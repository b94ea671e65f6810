"""Per-turn execution context for conversational bots.

Provides the turn context, forwarding decorators for middleware, a lock-guarded
service registry, and a minimal adapter contract.
"""

from botcontext.asserts import InvalidArgumentError
from botcontext.schema import (
    Activity,
    ActivityTypes,
    ChannelAccount,
    ConversationAccount,
    ConversationReference,
)
from botcontext.services import ServiceKey, ServiceRegistry
from botcontext.types import TurnContext
from botcontext.context import (
    BotContext,
    apply_conversation_reference,
    get_conversation_reference,
)
from botcontext.decorator import ContextDecorator, LoggingContextDecorator
from botcontext.adapter import BotAdapter, InMemoryAdapter, TurnHandler

__all__ = [
    "Activity",
    "ActivityTypes",
    "BotAdapter",
    "BotContext",
    "ChannelAccount",
    "ContextDecorator",
    "ConversationAccount",
    "ConversationReference",
    "InMemoryAdapter",
    "InvalidArgumentError",
    "LoggingContextDecorator",
    "ServiceKey",
    "ServiceRegistry",
    "TurnContext",
    "TurnHandler",
    "apply_conversation_reference",
    "get_conversation_reference",
]
