# gracekit

A small library with two parts:

- `gracekit.jsonvalue` reads JSON that may contain `//` and `/* */` comments
  and trailing commas. It writes JSON back either compact or indented.
- `gracekit.declarative` keeps named blocks in a registry. You can declare a
  block by name and look it up again later.

It has no dependencies outside the standard library.

## Installation

```
pip install gracekit
```

## JSON values

```python
from gracekit.jsonvalue import parse, dumps, ValueType

data = parse('''
{
    // a person
    "name": "Grace",
    "age": 25,
    "hobbies": ["reading", "swimming",],
}
''')

data["name"].to_str()         # 'Grace'
data["age"].to_int()          # 25
data["hobbies"][0].to_str()   # 'reading'
data.type() is ValueType.OBJECT

print(dumps(data, 4))         # indented by four spaces per level
print(dumps(data))            # compact, with no extra whitespace
```

### Reading

- `parse(text)` reads one value from the start of `text`. It does not read
  anything after the first complete value.
- `load(stream)` reads the whole text stream and then parses it.
- When the input is malformed, both raise `JsonParseError`, which is a
  `ValueError`. Its `message` and `position` attributes describe the problem.
- Comments and trailing commas are skipped when reading. They are not kept.
- A string runs from one double quote to the next. Its text is taken exactly
  as written: escape sequences such as `\n` or `\"` are not interpreted.
- A number is stored as a `float`.

### Values

A `Value` holds one of the kinds in `ValueType`: `NULL`, `BOOLEAN`, `NUMBER`,
`STRING`, `ARRAY`, `OBJECT`, or `INVALID`. You can build a value from Python
data. `None`, `bool`, `int`/`float`, `str`, `list`/`tuple` and `dict` (with
`str` keys) are accepted. `Value()` with no argument is invalid.

- Type checks: `is_null`, `is_bool`, `is_number`, `is_integer` (a number with
  no fractional part), `is_float`, `is_string`, `is_array`, `is_object`.
- Accessors: `to_bool`, `to_int` (truncates toward zero), `to_float`, and
  `to_str`. Each raises `TypeError` if the value holds a different kind.
- `value[i]` indexes an array.
- `value["key"]` looks up an object member. If the member is missing, it is
  created as an invalid value.
- `value.at("key")` raises `KeyError` for a missing member.
- Item assignment converts the assigned Python data into a `Value`.
- Values compare equal to other values, and to plain Python data of the same
  content.

### Writing

- `dumps(value, tabsize=-1)` returns the text. A negative `tabsize` gives
  compact output. Otherwise each nesting level is indented by `tabsize`
  spaces, and object members are written as `"key": value`.
- `dump(value, stream, tabsize=-1)` writes the same text to a stream.
- `str(value)` is the compact form.
- Whole numbers are written without a decimal point. Other numbers are written
  with `%g`, which gives six significant digits.
- Strings are written between quotes exactly as held, without escaping.
- An invalid value is written as `/*Invalid value*/`.

## Declarative blocks

```python
from gracekit.declarative import DeclarativeUIManager, declare, block

declare("Button1", lambda: {"text": ""}, lambda it: it.update(text="Button1"))

block("Button1")["text"]      # 'Button1'

manager = DeclarativeUIManager.instance()
manager.find_name(block("Button1"))   # 'Button1'
manager.remove_block("Button1")
```

`declare(name, factory, content=None)` builds a block in three steps:

1. It calls `factory()` to create the block.
2. It registers the block under `name` in the shared registry.
3. If `content` is given, it calls `content(block)`.

The block is registered before `content` runs. So the callback, and any blocks
it declares, can already find the block with `block(name)`. `declare` returns
the created block.

`DeclarativeUIManager.instance()` returns the shared registry. You can also
create separate registries with `DeclarativeUIManager()`. A registry has these
operations:

- `add_block(name, block)` raises `DuplicateBlockError` if the name is already
  taken.
- `replace_block(name, block)` adds the block, or overwrites the one already
  registered under that name.
- `remove_block(name)` does nothing if the name is unknown.
- `find_block(name)` returns `None` if the name is unknown.
- `find_name(block)` finds the block by identity. It returns `''` if the block
  is not registered.
- `name in registry`, `len(registry)`, and iterating over the registered
  names.

## What this package does not do

The registry stores any Python objects you hand it. The package provides no
widgets, windows, layouts, event handling or drawing. A block is whatever your
factory returns.