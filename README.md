# featherjson

A small JSON toolkit that works on a flat token stream instead of a full
object tree. It reads a document, looks values up by a path of keys,
inserts new values and objects, and writes the result back out in either
compact or tab-indented form. A builder assembles new documents from
scratch. It has no third-party dependencies.

## Installing

```
pip install .
```

## Reading values

```python
from featherjson.document import Json

doc = Json.from_string('{"server": {"port": 8080, "debug": true}}')

doc.get(["server", "port"])    # 8080
doc.get(["server", "debug"])   # True
```

`Json.from_file(path)` loads a document from a UTF-8 file, and
`Json.from_tokens(tokens)` wraps an existing token list.

Values are typed on the way out by `parse_value`: `true` and `false`
become booleans, whole numbers in the 32-bit range become integers, other
numbers become floats, and everything else comes back as text. String
values keep their double quotes, so `get` on `"name": "demo"` returns
`'"demo"'`.

A path that leads to an object, or to no key at all, raises
`featherjson.errors.InvalidPathError`; an empty path raises
`NoPathProvidedError`.

The helpers `expect_int`, `expect_float`, `expect_bool` and `expect_str`
in `featherjson.document` return a value unchanged when it has the
expected type and otherwise raise `NotIntegerError`, `NotFloatError`,
`NotBoolError` or `NotStringError`.

## Editing

```python
doc.insert_value(["server"], "host", '"localhost"')
doc.insert_object([], "logging")
doc.insert_value(["logging"], "level", 3)
```

New members are placed at the start of the target object; an empty path
targets the top-level object. Strings given to `insert_value` are written
exactly as passed, so a JSON string must carry its own quotes (the
`quoted` helper adds them). Inserting under a key whose value is not an
object raises `CannotInsertIntoValueError`; a token stream too short to
hold the insertion raises `InvalidJsonError`.

## Building

```python
from featherjson.document import JsonBuilder

doc = (
    JsonBuilder()
    .value("name", "demo")
    .object("limits")
    .value("max", 10)
    .object_end()
    .build()
)

print(doc.to_string())
# {"name":"demo","limits":{"max":10}}
```

`JsonBuilder.value` quotes strings for you and writes booleans, integers
and floats as JSON literals. `object` opens a nested object and
`object_end` closes it; `build` closes the top-level object and returns a
`Json`.

## Writing

```python
doc.to_string()          # compact, no whitespace; also str(doc)
doc.to_string_format()   # one member per line, tab-indented
doc.write("out.json")
doc.write_format("pretty.json")
```

`to_string_format` raises `InvalidJsonError` when the token stream ends
with brackets still open.

All errors derive from `featherjson.errors.JsonError`.

## Low-level access

`featherjson.lexer.lex(text)` turns text into a list of
`featherjson.tokens.Token` objects, each with a `kind` (a `TokenType`)
and an optional `lexeme`; `lex_from_file(path)` does the same for a file.
`Json.tokens` returns a document's tokens as a tuple.

## Limitations

- The lexer is deliberately simple: it does not validate the input, does
  not interpret escape sequences, and drops spaces outside quoted text.
- Arrays survive reading and printing, but `get` cannot return an array
  or an element of one, and the builder and insert methods cannot create
  arrays.
- There is no command-line tool; the package is used as a library.