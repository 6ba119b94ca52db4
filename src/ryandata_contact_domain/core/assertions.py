"""Argument and state checks shared by the domain model.

Messages are ``%s`` templates formatted with the offending value, so the
value always appears in the raised error.
"""

from __future__ import annotations

from typing import Any, TypeVar

from ryandata_contact_domain.core.errors import RyanDataArgumentError, RyanDataStateError

T = TypeVar("T")


def _format(message: str, *args: Any) -> str:
    return message % args if args else message


def require(value: T | None, message: str, *args: Any) -> T:
    """Return ``value`` when it is not None.

    Raises:
        RyanDataArgumentError: If ``value`` is None.
    """
    if value is None:
        raise RyanDataArgumentError.create(_format(message, *args), value)
    return value


def require_text(value: str | None, message: str) -> str:
    """Return ``value`` when it is a non-blank string.

    ``message`` is formatted with the rejected value.

    Raises:
        RyanDataArgumentError: If ``value`` is None, not a string or blank.
    """
    if not isinstance(value, str) or not value.strip():
        raise RyanDataArgumentError.create(message % (value,), value)
    return value


def is_true(condition: bool, message: str, *args: Any, value: Any = None) -> None:
    """Raise an argument error unless ``condition`` holds."""
    if not condition:
        raise RyanDataArgumentError.create(_format(message, *args), value)


def require_state(value: T | None, message: str, *args: Any) -> T:
    """Return ``value`` when it is set.

    Raises:
        RyanDataStateError: If ``value`` is None.
    """
    if value is None:
        raise RyanDataStateError.create(_format(message, *args), value)
    return value


def extract_digits(text: str | None) -> str:
    """Return only the ASCII digits of ``text`` (empty for None)."""
    if not text:
        return ""
    return "".join(char for char in text if char.isascii() and char.isdigit())
