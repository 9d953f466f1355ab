import pytest

from featherjson.errors import (
    CannotInsertIntoValueError,
    InvalidJsonError,
    InvalidPathError,
    JsonError,
    NoPathProvidedError,
    NotBoolError,
    NotFloatError,
    NotIntegerError,
    NotStringError,
)


def _classify(error):
    try:
        raise error
    except NoPathProvidedError:
        return "no_path"
    except InvalidPathError:
        return "invalid_path"
    except JsonError:
        return "other"


@pytest.mark.parametrize(
    ("error_class", "text"),
    [
        (NoPathProvidedError, "An empty path is an invalid path."),
        (InvalidPathError, "Invalid path to value."),
        (InvalidJsonError, "Invalid Json"),
        (NotIntegerError, "Json value is not an integer."),
        (NotFloatError, "Json value is not a float."),
        (NotBoolError, "Json value is not a boolean."),
        (NotStringError, "Json value is not a String."),
    ],
)
def test_default_messages(error_class, text):
    error = error_class()
    assert str(error) == text
    assert error.message == text


def test_value_error_caught_by_base_class():
    error = NotFloatError()
    with pytest.raises(JsonError) as info:
        raise error
    assert info.value is error


def test_insert_error_caught_by_base_class():
    error = CannotInsertIntoValueError()
    with pytest.raises(JsonError) as info:
        raise error
    assert info.value is error


def test_path_error_caught_by_base_class():
    error = NoPathProvidedError()
    with pytest.raises(JsonError) as info:
        raise error
    assert info.value is error
    assert str(info.value) == "An empty path is an invalid path."


def test_custom_message_overrides_default_for_path_error():
    error = InvalidPathError("custom detail")
    assert str(error) == "custom detail"
    assert error.message == "custom detail"


def test_custom_message_overrides_default_for_value_error():
    error = NotStringError("custom detail")
    assert str(error) == "custom detail"
    assert error.message == "custom detail"


def test_custom_message_overrides_default_for_insert_error():
    error = CannotInsertIntoValueError("custom detail")
    assert str(error) == "custom detail"
    assert error.message == "custom detail"


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (NoPathProvidedError(), "no_path"),
        (InvalidPathError(), "invalid_path"),
        (InvalidJsonError(), "other"),
        (CannotInsertIntoValueError(), "other"),
        (NotStringError(), "other"),
    ],
)
def test_distinct_errors_are_not_confused(error, expected):
    assert _classify(error) == expected


def test_each_error_has_its_own_message():
    messages = {
        str(NoPathProvidedError()),
        str(InvalidPathError()),
        str(InvalidJsonError()),
        str(CannotInsertIntoValueError()),
        str(NotIntegerError()),
        str(NotFloatError()),
        str(NotBoolError()),
        str(NotStringError()),
    }
    assert len(messages) == 8