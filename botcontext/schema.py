"""Minimal activity schema shared by contexts and adapters."""

from dataclasses import dataclass, field
from typing import Any


class ActivityTypes:
    """
    Known activity type names.
    """

    MESSAGE = "message"
    TYPING = "typing"
    END_OF_CONVERSATION = "endOfConversation"
    EVENT = "event"


@dataclass
class ChannelAccount:
    """A user or bot account on a channel."""

    id: str | None = None
    name: str | None = None


@dataclass
class ConversationAccount:
    """A conversation on a channel."""

    id: str | None = None
    name: str | None = None
    is_group: bool = False


@dataclass
class Activity:
    """
    One inbound or outbound unit of conversation.

    ``from_property`` holds the sender, since ``from`` is a reserved word.
    """

    type: str = ActivityTypes.MESSAGE
    id: str | None = None
    from_property: ChannelAccount | None = None
    recipient: ChannelAccount | None = None
    conversation: ConversationAccount | None = None
    channel_id: str | None = None
    service_url: str | None = None
    reply_to_id: str | None = None
    text: str | None = None
    speak: str | None = None
    input_hint: str | None = None
    channel_data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ConversationReference:
    """
    Identity of a conversation, sufficient to address it for proactive messages.
    """

    activity_id: str | None = None
    user: ChannelAccount | None = None
    bot: ChannelAccount | None = None
    conversation: ConversationAccount | None = None
    channel_id: str | None = None
    service_url: str | None = None

    def get_post_to_user_message(self) -> Activity:
        """
        Create a message activity addressed from the bot back to the user.

        Returns:
            Activity: A new message activity carrying this reference's addressing.
        """
        return Activity(
            type=ActivityTypes.MESSAGE,
            from_property=self.bot,
            recipient=self.user,
            conversation=self.conversation,
            channel_id=self.channel_id,
            service_url=self.service_url,
            reply_to_id=self.activity_id,
        )
