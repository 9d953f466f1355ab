"""Tokens produced by the lexer and consumed by the document model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

__all__ = ["TokenType", "Token"]


class TokenType(Enum):
    """The kinds of token a JSON text is split into."""

    OPENING_BRACE = auto()  # {
    CLOSING_BRACE = auto()  # }
    LEFT_BRACKET = auto()  # [
    RIGHT_BRACKET = auto()  # ]
    KEY = auto()  # "key": value
    ASSIGNER = auto()  # key: value (the colon)
    VALUE = auto()  # key: "value"
    SEPARATOR = auto()  # the comma between members


@dataclass(frozen=True)
class Token:
    """A single token; keys and values carry their text, punctuation does not."""

    kind: TokenType
    lexeme: str | None = None