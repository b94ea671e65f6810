"""Argument guards raising ``InvalidArgumentError``."""

from typing import Any


class InvalidArgumentError(ValueError):
    """
    Raised when a required argument is missing or blank.
    """

    def __init__(self, param_name: str, message: str | None = None) -> None:
        """
        Initialize the error.

        Args:
            param_name (str): Name of the offending parameter.
            message (str | None, optional): Override for the default message. Defaults to None.
        """
        self.param_name = param_name
        super().__init__(message or f"{param_name} is required")


def not_null(value: Any, param_name: str) -> None:
    """
    Raise if ``value`` is None.

    Args:
        value (Any): The value to check.
        param_name (str): Parameter name reported in the error.

    Raises:
        InvalidArgumentError: If ``value`` is None.
    """
    if value is None:
        raise InvalidArgumentError(param_name)


def adapter_not_null(adapter: Any) -> None:
    """Raise if the adapter is None."""
    not_null(adapter, "adapter")


def activity_not_null(activity: Any) -> None:
    """Raise if the activity is None."""
    not_null(activity, "activity")


def context_not_null(context: Any) -> None:
    """Raise if the context is None."""
    not_null(context, "context")


def conversation_reference_not_null(reference: Any) -> None:
    """Raise if the conversation reference is None."""
    not_null(reference, "conversation_reference")


def service_id_not_blank(service_id: Any) -> None:
    """
    Raise if ``service_id`` is None, empty, or whitespace only.

    Args:
        service_id (Any): The service key to check.

    Raises:
        InvalidArgumentError: If the key is blank.
    """
    if not isinstance(service_id, str) or not service_id.strip():
        raise InvalidArgumentError(
            "service_id", "service_id must be a non-empty string"
        )
