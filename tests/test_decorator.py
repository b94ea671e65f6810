import pytest

from botcontext import (
    Activity,
    BotContext,
    ContextDecorator,
    InvalidArgumentError,
    LoggingContextDecorator,
    ServiceKey,
)


class _UppercaseDecorator(ContextDecorator):
    """Rewrites text replies in upper case; everything else passes through."""

    def reply(self, activity_or_text, speak=None):  # type: ignore[override]
        if isinstance(activity_or_text, str):
            activity_or_text = activity_or_text.upper()
        return super().reply(activity_or_text, speak)


def test_decorator_requires_inner() -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        ContextDecorator(None)  # type: ignore[arg-type]
    assert exc_info.value.param_name == "context"


def test_decorator_reply_returns_itself(context: BotContext) -> None:
    decorator = ContextDecorator(context)

    result = decorator.reply("x")

    assert result is decorator
    assert result is not context
    assert [r.text for r in context.responses] == ["x"]


def test_decorator_passes_properties_through(context: BotContext) -> None:
    decorator = ContextDecorator(context)

    assert decorator.inner is context
    assert decorator.adapter is context.adapter
    assert decorator.request is context.request
    assert decorator.conversation_reference is context.conversation_reference
    assert decorator.responses is context.responses
    assert decorator.services is context.services


def test_decorator_responses_setter_replaces_inner(context: BotContext) -> None:
    decorator = ContextDecorator(context)
    replacement = [Activity(text="rewritten")]

    decorator.responses = replacement

    assert context.responses is replacement


def test_decorator_services_pass_through(context: BotContext) -> None:
    decorator = ContextDecorator(context)
    key = ServiceKey[dict]("state")

    decorator.set(key, {"a": 1})
    context.set("other", 2)

    assert context.get("state") == {"a": 1}
    assert decorator.get("other") == 2
    assert decorator.get("missing") is None
    with pytest.raises(InvalidArgumentError):
        decorator.get("")


def test_decorator_reply_activity_and_none(context: BotContext) -> None:
    decorator = ContextDecorator(context)
    activity = Activity(text="raw")

    assert decorator.reply(activity) is decorator
    assert context.responses[-1] is activity
    with pytest.raises(InvalidArgumentError):
        decorator.reply(None)  # type: ignore[arg-type]


def test_chained_calls_stay_in_outer_layer(context: BotContext) -> None:
    outer = _UppercaseDecorator(ContextDecorator(context))

    outer.reply("hi").reply("bye", speak="bye")

    assert [r.text for r in context.responses] == ["HI", "BYE"]
    assert context.responses[1].speak == "bye"


def test_logging_decorator_logs_replies_and_services(
    context: BotContext, log_messages: list[str]
) -> None:
    decorator = LoggingContextDecorator(context, log_reply_text=True, preview_chars=5)

    result = decorator.reply("hello world").reply(Activity(type="typing"))
    decorator.set("secret", "value")

    assert result is decorator
    assert len(context.responses) == 2
    assert "Reply #1 queued [message] hello..." in log_messages
    assert any(m.startswith("Reply #2 queued [typing]") for m in log_messages)
    assert "Service registered: secret" in log_messages
    assert not any("value" in m for m in log_messages)


def test_logging_decorator_hides_text_by_default(
    context: BotContext, log_messages: list[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("LOG_REPLY_TEXT", raising=False)
    decorator = LoggingContextDecorator(context)

    decorator.reply("private")

    assert not any("private" in m for m in log_messages)
    assert context.responses[0].text == "private"


def test_nested_decorators_expose_inner_services(context: BotContext) -> None:
    outer = ContextDecorator(LoggingContextDecorator(context))

    outer.set("state", {"turns": 1})

    assert outer.services is context.services
    assert "state" in outer.services
    assert "" not in outer.services
    assert len(outer.services) == 1


@pytest.mark.parametrize("cls", [BotContext, ContextDecorator])
def test_public_members_are_documented(cls: type) -> None:
    names = [
        "adapter",
        "request",
        "responses",
        "conversation_reference",
        "services",
        "reply",
        "get",
        "set",
    ]
    for name in names:
        member = getattr(cls, name)
        assert member.__doc__, f"{cls.__name__}.{name} has no docstring"
