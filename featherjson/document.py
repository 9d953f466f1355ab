"""A token-backed JSON document that can be queried, edited and printed."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from decimal import Decimal
from os import PathLike

from .errors import (
    CannotInsertIntoValueError,
    InvalidJsonError,
    InvalidPathError,
    NoPathProvidedError,
    NotBoolError,
    NotFloatError,
    NotIntegerError,
    NotStringError,
)
from .lexer import lex, lex_from_file
from .tokens import Token, TokenType

__all__ = [
    "JsonValue",
    "parse_value",
    "value_to_text",
    "quoted",
    "expect_int",
    "expect_float",
    "expect_bool",
    "expect_str",
    "Json",
    "JsonBuilder",
]

JsonValue = bool | int | float | str

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_PLAIN_TEXT = {
    TokenType.OPENING_BRACE: "{",
    TokenType.CLOSING_BRACE: "}",
    TokenType.LEFT_BRACKET: "[",
    TokenType.RIGHT_BRACKET: "]",
    TokenType.ASSIGNER: ":",
    TokenType.SEPARATOR: ",",
}


def parse_value(text: str) -> JsonValue:
    """Turn a value lexeme into the most specific Python value it denotes.

    ``true``/``false`` become booleans, 32-bit integers become ``int``,
    other numbers become ``float``; anything else, quoted strings included,
    is returned unchanged.
    """
    if text == "true":
        return True
    if text == "false":
        return False
    if _INT_RE.fullmatch(text):
        number = int(text)
        if _INT_MIN <= number <= _INT_MAX:
            return number
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    return text


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def value_to_text(value: JsonValue) -> str:
    """Return the lexeme written for ``value``; strings are used verbatim."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_text(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"unsupported JSON value type: {type(value).__name__}")


def quoted(text: str) -> str:
    """Wrap ``text`` in double quotes, making it a JSON string lexeme."""
    return f'"{text}"'


def expect_int(value: JsonValue) -> int:
    """Return ``value`` if it is an integer, else raise NotIntegerError."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise NotIntegerError()


def expect_float(value: JsonValue) -> float:
    """Return ``value`` if it is a float, else raise NotFloatError."""
    if isinstance(value, float):
        return value
    raise NotFloatError()


def expect_bool(value: JsonValue) -> bool:
    """Return ``value`` if it is a boolean, else raise NotBoolError."""
    if isinstance(value, bool):
        return value
    raise NotBoolError()


def expect_str(value: JsonValue) -> str:
    """Return ``value`` if it is a string, else raise NotStringError."""
    if isinstance(value, str):
        return value
    raise NotStringError()


def _member(key: str) -> list[Token]:
    return [Token(TokenType.KEY, quoted(key)), Token(TokenType.ASSIGNER)]


def _ends_with_newline(parts: list[str]) -> bool:
    for part in reversed(parts):
        if part:
            return part.endswith("\n")
    return False


class Json:
    """A JSON document held as a flat token stream."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: list[Token] = list(tokens)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Json:
        """Read and tokenise a JSON file."""
        return cls(lex_from_file(path))

    @classmethod
    def from_string(cls, data: str) -> Json:
        """Tokenise JSON text."""
        return cls(lex(data))

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> Json:
        """Wrap an existing token stream."""
        return cls(tokens)

    @property
    def tokens(self) -> tuple[Token, ...]:
        """The document's tokens."""
        return tuple(self._tokens)

    def _find_key_index(self, keys: Sequence[str]) -> int:
        if not keys:
            raise NoPathProvidedError()

        last = len(self._tokens) - 1
        found = 0
        level = 0
        for index, token in enumerate(self._tokens):
            # The outermost braces do not count towards nesting.
            if 0 < index < last:
                if token.kind is TokenType.OPENING_BRACE:
                    level += 1
                elif token.kind is TokenType.CLOSING_BRACE:
                    level -= 1

            if token.kind is TokenType.KEY and level == found:
                lexeme = token.lexeme or ""
                if lexeme[1:-1] == keys[found]:
                    found += 1
                    if found == len(keys):
                        return index

        raise InvalidPathError()

    def _token_at(self, index: int) -> Token:
        if index >= len(self._tokens):
            raise InvalidJsonError()
        return self._tokens[index]

    def get(self, keys: Sequence[str]) -> JsonValue:
        """Return the value reached by following ``keys`` from the root."""
        token = self._token_at(self._find_key_index(keys) + 2)
        if token.kind is TokenType.OPENING_BRACE or token.lexeme is None:
            raise InvalidPathError()
        return parse_value(token.lexeme)

    def _insert_tokens(self, keys: Sequence[str], new_tokens: list[Token]) -> None:
        try:
            key_index = self._find_key_index(keys)
        except NoPathProvidedError:
            insert_at = 1
        else:
            if self._token_at(key_index + 2).kind is not TokenType.OPENING_BRACE:
                raise CannotInsertIntoValueError()
            insert_at = key_index + 3

        if insert_at >= len(self._tokens):
            raise InvalidJsonError()

        following = self._tokens[insert_at]
        if following.kind is not TokenType.CLOSING_BRACE:
            new_tokens = [*new_tokens, Token(TokenType.SEPARATOR)]
        self._tokens[insert_at:insert_at] = new_tokens

    def insert_value(self, keys: Sequence[str], key: str, value: JsonValue) -> None:
        """Insert ``key: value`` at the start of the object named by ``keys``.

        An empty ``keys`` targets the root object. Strings are written
        verbatim, so a JSON string must already carry its quotes.
        """
        self._insert_tokens(
            keys, [*_member(key), Token(TokenType.VALUE, value_to_text(value))]
        )

    def insert_object(self, keys: Sequence[str], key: str) -> None:
        """Insert ``key: {}`` at the start of the object named by ``keys``."""
        self._insert_tokens(
            keys,
            [
                *_member(key),
                Token(TokenType.OPENING_BRACE),
                Token(TokenType.CLOSING_BRACE),
            ],
        )

    def to_string(self) -> str:
        """Return the document as compact text."""
        return "".join(
            token.lexeme or "" if token.lexeme is not None else _PLAIN_TEXT[token.kind]
            for token in self._tokens
        )

    def __str__(self) -> str:
        return self.to_string()

    def _close(self, parts: list[str], index: int, level: int, bracket: str) -> None:
        parts.append("\t" * level)
        if index + 1 < len(self._tokens):
            parts.append(bracket)
            if self._tokens[index + 1].kind is not TokenType.SEPARATOR:
                parts.append("\n")
        elif level == 0:
            parts.append(bracket + "\n")
        else:
            raise InvalidJsonError()

    def to_string_format(self) -> str:
        """Return the document indented with tabs, one member per line."""
        parts: list[str] = []
        level = 0

        for index, token in enumerate(self._tokens):
            kind = token.kind
            if kind in (TokenType.OPENING_BRACE, TokenType.LEFT_BRACKET):
                level += 1
            elif kind in (TokenType.CLOSING_BRACE, TokenType.RIGHT_BRACKET):
                level -= 1

            if kind is TokenType.OPENING_BRACE:
                parts.append("{\n")
            elif kind is TokenType.CLOSING_BRACE:
                self._close(parts, index, level, "}")
            elif kind is TokenType.LEFT_BRACKET:
                if index == 0 or self._tokens[index - 1].kind is not TokenType.ASSIGNER:
                    parts.append("\t" * (level - 1))
                parts.append("[\n")
            elif kind is TokenType.RIGHT_BRACKET:
                self._close(parts, index, level, "]")
            elif kind is TokenType.KEY:
                parts.append("\t" * level)
                parts.append(token.lexeme or "")
            elif kind is TokenType.VALUE:
                # Array elements start on a fresh line and need indenting.
                if _ends_with_newline(parts):
                    parts.append("\t" * level)
                parts.append(token.lexeme or "")
                if self._token_at(index + 1).kind is not TokenType.SEPARATOR:
                    parts.append("\n")
            elif kind is TokenType.ASSIGNER:
                parts.append(": ")
            else:
                parts.append(",\n")

        return "".join(parts)

    def write(self, path: str | PathLike[str]) -> None:
        """Write the compact text to ``path``."""
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(self.to_string())

    def write_format(self, path: str | PathLike[str]) -> None:
        """Write the indented text to ``path``."""
        text = self.to_string_format()
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)


class JsonBuilder:
    """Builds a document member by member, with chained calls."""

    def __init__(self) -> None:
        self._tokens: list[Token] = [Token(TokenType.OPENING_BRACE)]

    def _separate(self) -> None:
        if self._tokens and self._tokens[-1].kind in (
            TokenType.VALUE,
            TokenType.CLOSING_BRACE,
        ):
            self._tokens.append(Token(TokenType.SEPARATOR))

    def object(self, name: str) -> JsonBuilder:
        """Open a nested object called ``name``."""
        self._separate()
        self._tokens.extend([*_member(name), Token(TokenType.OPENING_BRACE)])
        return self

    def value(self, key: str, value: JsonValue) -> JsonBuilder:
        """Add ``key: value``; strings are quoted automatically."""
        self._separate()
        text = quoted(value) if isinstance(value, str) else value_to_text(value)
        self._tokens.extend([*_member(key), Token(TokenType.VALUE, text)])
        return self

    def object_end(self) -> JsonBuilder:
        """Close the most recently opened object."""
        self._tokens.append(Token(TokenType.CLOSING_BRACE))
        return self

    def build(self) -> Json:
        """Close the root object and return the document."""
        return Json.from_tokens([*self._tokens, Token(TokenType.CLOSING_BRACE)])