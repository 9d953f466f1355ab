"""Splits JSON text into a flat list of tokens."""

from __future__ import annotations

from os import PathLike

from .tokens import Token, TokenType

__all__ = ["lex", "lex_from_file"]

_PUNCTUATION_ONLY = {
    "{": TokenType.OPENING_BRACE,
    "[": TokenType.LEFT_BRACKET,
}

_CLOSERS = {
    "}": TokenType.CLOSING_BRACE,
    "]": TokenType.RIGHT_BRACKET,
    ",": TokenType.SEPARATOR,
}

_IGNORED = {"\n", "\r", "\t"}


def lex(data: str) -> list[Token]:
    """Return the tokens of ``data``.

    Spaces are kept only inside a lexeme that starts with a double quote;
    newlines, carriage returns and tabs are always dropped.
    """
    tokens: list[Token] = []
    lexeme: list[str] = []

    for ch in data:
        if ch in _PUNCTUATION_ONLY:
            tokens.append(Token(_PUNCTUATION_ONLY[ch]))
        elif ch in _CLOSERS:
            if lexeme:
                tokens.append(Token(TokenType.VALUE, "".join(lexeme)))
            tokens.append(Token(_CLOSERS[ch]))
            lexeme.clear()
        elif ch == ":":
            tokens.append(Token(TokenType.KEY, "".join(lexeme)))
            tokens.append(Token(TokenType.ASSIGNER))
            lexeme.clear()
        elif ch == " ":
            if lexeme and lexeme[0] == '"':
                lexeme.append(ch)
        elif ch in _IGNORED:
            continue
        else:
            lexeme.append(ch)

    return tokens


def lex_from_file(path: str | PathLike[str]) -> list[Token]:
    """Read a UTF-8 file and return its tokens."""
    with open(path, encoding="utf-8") as handle:
        return lex(handle.read())