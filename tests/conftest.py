from typing import Generator

import pytest
from loguru import logger

from botcontext import (
    Activity,
    BotContext,
    ChannelAccount,
    ConversationAccount,
    InMemoryAdapter,
)


@pytest.fixture
def adapter() -> InMemoryAdapter:
    """
    Fixture providing an adapter that records sent activities.

    Returns:
        InMemoryAdapter: The adapter instance.
    """
    return InMemoryAdapter()


@pytest.fixture
def request_activity() -> Activity:
    """
    Fixture providing an inbound message activity.

    Returns:
        Activity: The inbound activity.
    """
    return Activity(
        id="a1",
        from_property=ChannelAccount(id="userX"),
        recipient=ChannelAccount(id="bot1"),
        conversation=ConversationAccount(id="c1"),
        channel_id="test",
        service_url="http://x",
        text="hello",
    )


@pytest.fixture
def context(adapter: InMemoryAdapter, request_activity: Activity) -> BotContext:
    """
    Fixture providing a reactive context for ``request_activity``.

    Args:
        adapter (InMemoryAdapter): The adapter fixture.
        request_activity (Activity): The inbound activity fixture.

    Returns:
        BotContext: The context instance.
    """
    return BotContext(adapter, request_activity)


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """
    Fixture capturing loguru messages emitted during a test.

    Returns:
        Generator[list[str], None, None]: The captured messages.
    """
    messages: list[str] = []
    handler_id = logger.add(
        lambda msg: messages.append(msg.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)
