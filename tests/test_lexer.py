import pytest

from featherjson.lexer import lex, lex_from_file
from featherjson.tokens import Token, TokenType

OPEN = Token(TokenType.OPENING_BRACE)
CLOSE = Token(TokenType.CLOSING_BRACE)
LEFT = Token(TokenType.LEFT_BRACKET)
RIGHT = Token(TokenType.RIGHT_BRACKET)
ASSIGN = Token(TokenType.ASSIGNER)
SEP = Token(TokenType.SEPARATOR)


def key(text):
    return Token(TokenType.KEY, text)


def value(text):
    return Token(TokenType.VALUE, text)


def test_empty_input_gives_no_tokens():
    assert lex("") == []


def test_single_member():
    assert lex('{"a": 1}') == [OPEN, key('"a"'), ASSIGN, value("1"), CLOSE]


def test_members_are_separated():
    assert lex('{"a": 1, "b": true}') == [
        OPEN, key('"a"'), ASSIGN, value("1"), SEP,
        key('"b"'), ASSIGN, value("true"), CLOSE,
    ]


def test_nested_object():
    assert lex('{"a": {"b": 2}}') == [
        OPEN, key('"a"'), ASSIGN, OPEN, key('"b"'), ASSIGN, value("2"), CLOSE, CLOSE,
    ]


def test_array_values():
    assert lex('{"a": [1, 2]}') == [
        OPEN, key('"a"'), ASSIGN, LEFT, value("1"), SEP, value("2"), RIGHT, CLOSE,
    ]


def test_spaces_kept_inside_quoted_lexeme():
    tokens = lex('{"my key": "b c"}')
    assert tokens[1] == key('"my key"')
    assert tokens[3] == value('"b c"')


def test_spaces_dropped_outside_quotes():
    assert lex('{"a": 1 2}')[3] == value("12")


def test_layout_whitespace_is_ignored():
    compact = lex('{"a":1,"b":{"c":2}}')
    spread = lex('{\n\t"a": 1,\r\n\t"b": {\n\t\t"c": 2\n\t}\n}\n')
    assert spread == compact


def test_colon_with_empty_lexeme_makes_empty_key():
    assert lex(":") == [key(""), ASSIGN]


def test_closer_without_pending_lexeme_adds_no_value():
    assert lex("{}") == [OPEN, CLOSE]
    assert lex("[]") == [LEFT, RIGHT]


def test_lex_from_file_matches_lex(tmp_path):
    text = '{\n\t"name": "feather",\n\t"size": 3\n}\n'
    path = tmp_path / "doc.json"
    path.write_text(text, encoding="utf-8")
    assert lex_from_file(path) == lex(text)
    assert lex_from_file(str(path)) == lex(text)


def test_lex_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        lex_from_file(tmp_path / "missing.json")