"""Exceptions raised while reading, querying and editing JSON documents."""

from __future__ import annotations

__all__ = [
    "JsonError",
    "NoPathProvidedError",
    "InvalidPathError",
    "InvalidJsonError",
    "CannotInsertIntoValueError",
    "NotIntegerError",
    "NotFloatError",
    "NotBoolError",
    "NotStringError",
]


class JsonError(Exception):
    """Base class of every error raised by this package."""

    default_message = "Json error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class NoPathProvidedError(JsonError):
    """A lookup was given an empty key path."""

    default_message = "An empty path is an invalid path."


class InvalidPathError(JsonError):
    """The key path does not lead to a value."""

    default_message = "Invalid path to value."


class InvalidJsonError(JsonError):
    """The token stream does not form a well-shaped document."""

    default_message = "Invalid Json"


class CannotInsertIntoValueError(JsonError):
    """An insertion targeted a key whose value is not an object."""

    default_message = "Cannot insert into a value."


class NotIntegerError(JsonError):
    """The value is not an integer."""

    default_message = "Json value is not an integer."


class NotFloatError(JsonError):
    """The value is not a float."""

    default_message = "Json value is not a float."


class NotBoolError(JsonError):
    """The value is not a boolean."""

    default_message = "Json value is not a boolean."


class NotStringError(JsonError):
    """The value is not a string."""

    default_message = "Json value is not a String."