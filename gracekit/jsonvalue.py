"""JSON values with a lenient reader and a compact or indented writer.

The reader skips whitespace, ``//`` line comments, ``/* */`` block comments
and trailing commas. Strings are taken verbatim up to the next double quote,
with no escape handling, and are written back the same way.
"""

from __future__ import annotations

import enum
import math
import re
from typing import IO, Any

__all__ = [
    "ValueType",
    "JsonParseError",
    "Value",
    "parse",
    "load",
    "dumps",
    "dump",
]


class ValueType(enum.Enum):
    """Kind of data a :class:`Value` holds."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    INVALID = "invalid"


class JsonParseError(ValueError):
    """Raised when text cannot be read as a JSON value."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.message = message
        self.position = position


_MISSING = object()
_INVALID_TEXT = "/*Invalid value*/"


def _convert(value: Any) -> tuple[ValueType, Any]:
    if value is _MISSING:
        return ValueType.INVALID, None
    if isinstance(value, Value):
        kind = value._type
        if kind is ValueType.ARRAY:
            return kind, [Value(item) for item in value._data]
        if kind is ValueType.OBJECT:
            return kind, {key: Value(item) for key, item in value._data.items()}
        return kind, value._data
    if value is None:
        return ValueType.NULL, None
    if isinstance(value, bool):
        return ValueType.BOOLEAN, value
    if isinstance(value, (int, float)):
        return ValueType.NUMBER, float(value)
    if isinstance(value, str):
        return ValueType.STRING, value
    if isinstance(value, (list, tuple)):
        return ValueType.ARRAY, [Value(item) for item in value]
    if isinstance(value, dict):
        data = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be str, not {type(key).__name__}")
            data[key] = Value(item)
        return ValueType.OBJECT, data
    raise TypeError(f"cannot hold a {type(value).__name__} in a JSON value")


class Value:
    """A single JSON value: null, boolean, number, string, array or object.

    A value created with no argument is invalid and is written as
    ``/*Invalid value*/``.
    """

    __slots__ = ("_type", "_data")

    def __init__(self, value: Any = _MISSING) -> None:
        self._type, self._data = _convert(value)

    def type(self) -> ValueType:
        """Return the kind of data held."""
        return self._type

    def is_null(self) -> bool:
        return self._type is ValueType.NULL

    def is_bool(self) -> bool:
        return self._type is ValueType.BOOLEAN

    def is_number(self) -> bool:
        return self._type is ValueType.NUMBER

    def is_integer(self) -> bool:
        """True for a number with no fractional part."""
        if not self.is_number():
            return False
        number = self._data
        return math.isinf(number) or number.is_integer()

    def is_float(self) -> bool:
        """True for a number with a fractional part."""
        return self.is_number() and not self.is_integer()

    def is_string(self) -> bool:
        return self._type is ValueType.STRING

    def is_array(self) -> bool:
        return self._type is ValueType.ARRAY

    def is_object(self) -> bool:
        return self._type is ValueType.OBJECT

    def _require(self, kind: ValueType) -> Any:
        if self._type is not kind:
            raise TypeError(f"value is {self._type.value}, not {kind.value}")
        return self._data

    def to_bool(self) -> bool:
        return self._require(ValueType.BOOLEAN)

    def to_int(self) -> int:
        """Return the number truncated toward zero."""
        return int(self._require(ValueType.NUMBER))

    def to_float(self) -> float:
        return self._require(ValueType.NUMBER)

    def to_str(self) -> str:
        return self._require(ValueType.STRING)

    def at(self, key: str) -> Value:
        """Return the member named ``key``; raise KeyError if it is absent."""
        return self._require(ValueType.OBJECT)[key]

    def __getitem__(self, key: int | str) -> Value:
        """Index an array, or look up an object member.

        A missing object member is created as an invalid value.
        """
        if isinstance(key, str):
            members = self._require(ValueType.OBJECT)
            if key not in members:
                members[key] = Value()
            return members[key]
        if isinstance(key, int) and not isinstance(key, bool):
            return self._require(ValueType.ARRAY)[key]
        raise TypeError(f"JSON values are indexed by int or str, not {type(key).__name__}")

    def __setitem__(self, key: int | str, value: Any) -> None:
        if isinstance(key, str):
            self._require(ValueType.OBJECT)[key] = Value(value)
        elif isinstance(key, int) and not isinstance(key, bool):
            self._require(ValueType.ARRAY)[key] = Value(value)
        else:
            raise TypeError(f"JSON values are indexed by int or str, not {type(key).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            try:
                other = Value(other)
            except TypeError:
                return NotImplemented
        return self._type is other._type and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return dumps(self)

    def __repr__(self) -> str:
        return f"Value({dumps(self)})"


# ---------------------------------------------------------------- reading

_NUMBER_CHARS = re.compile(r"[0-9.+\-eE]*")
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPACE = " \t\n\v\f\r"


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos : self.pos + 1]

    def fail(self, message: str) -> JsonParseError:
        return JsonParseError(message, self.pos)

    def skip(self) -> None:
        """Skip whitespace and comments; a lone slash is dropped as well."""
        text = self.text
        while True:
            while self.pos < len(text) and text[self.pos] in _SPACE:
                self.pos += 1
            if self.peek() != "/":
                return
            self.pos += 1
            following = self.peek()
            if following == "/":
                end = text.find("\n", self.pos)
                self.pos = len(text) if end < 0 else end + 1
            elif following == "*":
                self.pos += 1
                while self.peek() == "/":
                    self.pos += 1
                end = text.find("*/", self.pos)
                if end < 0:
                    raise self.fail("unterminated comment")
                self.pos = end + 2

    def value(self) -> Value:
        self.skip()
        char = self.peek()
        if char == "n":
            return self._null()
        if char in ("t", "f"):
            return self._boolean()
        if char and char in "-0123456789":
            return self._number()
        if char == '"':
            return Value(self._string())
        if char == "[":
            return self._array()
        if char == "{":
            return self._object()
        raise self.fail("unexpected character" if char else "unexpected end of input")

    def _null(self) -> Value:
        start = self.pos
        chunk = self.text[start : start + 4]
        self.pos += len(chunk)
        if chunk != "null":
            raise JsonParseError("invalid literal", start)
        return Value(None)

    def _boolean(self) -> Value:
        start = self.pos
        chunk = self.text[start : start + 4]
        self.pos += len(chunk)
        if chunk == "true":
            return Value(True)
        if chunk == "fals" and self.peek() == "e":
            self.pos += 1
            return Value(False)
        raise JsonParseError("invalid literal", start)

    def _number(self) -> Value:
        start = self.pos
        token = _NUMBER_CHARS.match(self.text, start).group()
        self.pos = start + len(token)
        prefix = _NUMBER_PREFIX.match(token)
        if prefix is None:
            raise JsonParseError("invalid number", start)
        number = float(prefix.group())
        if math.isinf(number):
            raise JsonParseError("number out of range", start)
        return Value(number)

    def _string(self) -> str:
        start = self.pos
        self.pos += 1
        end = self.text.find('"', self.pos)
        if end < 0:
            rest = self.text[self.pos :]
            if not rest:
                raise JsonParseError("unterminated string", start)
            self.pos = len(self.text)
            return rest
        content = self.text[self.pos : end]
        self.pos = end + 1
        return content

    def _array(self) -> Value:
        result = Value([])
        items = result._data
        self.pos += 1
        while self.peek() != "]":
            self.skip()
            items.append(self.value())
            self.skip()
            if self.peek() == "]":
                break
            if self.peek() != ",":
                raise self.fail("expected ',' or ']'")
            self.pos += 1
            self.skip()
        if self.peek() != "]":
            raise self.fail("expected ']'")
        self.pos += 1
        return result

    def _object(self) -> Value:
        result = Value({})
        members = result._data
        self.pos += 1
        while self.peek() != "}":
            self.skip()
            key_start = self.pos
            key = self.value()
            if not key.is_string():
                raise JsonParseError("object key must be a string", key_start)
            self.skip()
            if self.peek() != ":":
                raise self.fail("expected ':'")
            self.pos += 1
            members[key.to_str()] = self.value()
            self.skip()
            if self.peek() == "}":
                break
            if self.peek() != ",":
                raise self.fail("expected ',' or '}'")
            self.pos += 1
            self.skip()
        if self.peek() != "}":
            raise self.fail("expected '}'")
        self.pos += 1
        return result


def parse(text: str) -> Value:
    """Read one JSON value from the start of ``text``.

    Anything after the first complete value is left unread.
    """
    return _Reader(text).value()


def load(stream: IO[str]) -> Value:
    """Read one JSON value from a text stream."""
    return parse(stream.read())


# ---------------------------------------------------------------- writing


def _format_double(number: float) -> str:
    return "%g" % number


def _render(value: Value, depth: int, tabsize: int) -> str:
    formatted = tabsize >= 0
    newline = "\n" if formatted else ""

    def pad(level: int) -> str:
        return " " * (tabsize * level) if formatted else ""

    kind = value._type
    if kind is ValueType.NULL:
        return "null"
    if kind is ValueType.BOOLEAN:
        return "true" if value._data else "false"
    if kind is ValueType.NUMBER:
        number = value._data
        if value.is_float() or not math.isfinite(number):
            return _format_double(number)
        return str(int(number))
    if kind is ValueType.STRING:
        return f'"{value._data}"'
    if kind is ValueType.ARRAY:
        inner = [pad(depth + 1) + _render(item, depth + 1, tabsize) for item in value._data]
        body = ("," + newline).join(inner) + newline if inner else ""
        return "[" + newline + body + pad(depth) + "]"
    if kind is ValueType.OBJECT:
        separator = " " if formatted else ""
        inner = [
            f'{pad(depth + 1)}"{key}":{separator}{_render(item, depth + 1, tabsize)}'
            for key, item in value._data.items()
        ]
        body = ("," + newline).join(inner) + newline if inner else ""
        return "{" + newline + body + pad(depth) + "}"
    return _INVALID_TEXT


def dumps(value: Any, tabsize: int = -1) -> str:
    """Write ``value`` as JSON text.

    A negative ``tabsize`` gives compact output; otherwise each nesting
    level is indented by ``tabsize`` spaces.
    """
    if not isinstance(value, Value):
        value = Value(value)
    return _render(value, 0, tabsize)


def dump(value: Any, stream: IO[str], tabsize: int = -1) -> None:
    """Write ``value`` as JSON text to a text stream."""
    stream.write(dumps(value, tabsize))