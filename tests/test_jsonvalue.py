import io

import pytest

from gracekit.jsonvalue import (
    JsonParseError,
    Value,
    ValueType,
    dump,
    dumps,
    load,
    parse,
)

SAMPLE = '{"name": "Grace", "age": 25, "city": "Beijing", "hobbies": ["reading", "swimming"]}'


def test_sample_member_access():
    data = parse(SAMPLE)
    assert data["name"].to_str() == "Grace"
    assert data["age"].to_int() == 25
    assert data["hobbies"][0].to_str() == "reading"


def test_sample_formatted_output():
    data = parse(SAMPLE)
    expected = (
        "{\n"
        '    "name": "Grace",\n'
        '    "age": 25,\n'
        '    "city": "Beijing",\n'
        '    "hobbies": [\n'
        '        "reading",\n'
        '        "swimming"\n'
        "    ]\n"
        "}"
    )
    assert dumps(data, 4) == expected


def test_sample_compact_output():
    data = parse(SAMPLE)
    assert dumps(data) == '{"name":"Grace","age":25,"city":"Beijing","hobbies":["reading","swimming"]}'
    assert str(data) == dumps(data, -1)


def test_wrong_type_access_raises():
    data = parse(SAMPLE)
    with pytest.raises(TypeError):
        data["age"].to_str()


def test_comments_and_trailing_commas():
    text = """
    // leading comment
    { /* block */ "a": [1, 2, 3,], // after a member
      "b": true, "c": false, "d": null, }
    """
    data = parse(text)
    assert data == {"a": [1, 2, 3], "b": True, "c": False, "d": None}
    assert data["d"].is_null()
    assert data["b"].to_bool() is True


def test_block_comment_with_stars():
    assert parse("/** note **/ 7").to_int() == 7


@pytest.mark.parametrize(
    "text",
    ["", "@", "nul", "tru", "falsy", "-", "[1 2]", "{1: 2}", '{"a" 1}', "[1,", '"', "/* open"],
)
def test_invalid_input_raises(text):
    with pytest.raises(JsonParseError):
        parse(text)


def test_error_position():
    with pytest.raises(JsonParseError) as info:
        parse("  @")
    assert info.value.position == 2


def test_number_prefix_is_taken():
    assert parse("1-2").to_float() == 1.0


def test_number_overflow_raises():
    with pytest.raises(JsonParseError):
        parse("1e999")


def test_numbers_and_output():
    assert parse("-12.5").to_float() == -12.5
    assert dumps(parse("1.5e3")) == "1500"
    assert dumps(Value(3.5)) == "3.5"
    assert dumps(Value(1 / 3)) == "0.333333"
    assert dumps(Value(-7.0)) == "-7"


def test_integer_and_float_predicates():
    assert Value(2.0).is_integer()
    assert not Value(2.0).is_float()
    assert Value(2.25).is_float()
    assert not Value("2").is_integer()
    assert Value(-2.9).to_int() == -2


def test_unterminated_string_takes_rest():
    assert parse('"abc').to_str() == "abc"


def test_string_without_escapes():
    assert parse(r'"a\b"').to_str() == "a\\b"


def test_empty_containers():
    assert dumps(parse("[]")) == "[]"
    assert dumps(parse("{}"), 2) == "{\n}"
    assert dumps(Value({"a": []}), 2) == '{\n  "a": [\n  ]\n}'


def test_zero_tabsize_uses_newlines():
    assert dumps(Value([1, 2]), 0) == "[\n1,\n2\n]"


def test_invalid_value_output():
    value = Value()
    assert value.type() is ValueType.INVALID
    assert dumps(value) == "/*Invalid value*/"


def test_constructor_types():
    assert Value(None).type() is ValueType.NULL
    assert Value(True).type() is ValueType.BOOLEAN
    assert Value(5).type() is ValueType.NUMBER
    assert Value("x").type() is ValueType.STRING
    assert Value([1]).type() is ValueType.ARRAY
    assert Value({"k": 1}).type() is ValueType.OBJECT


def test_constructor_rejects_unknown():
    with pytest.raises(TypeError):
        Value(object())
    with pytest.raises(TypeError):
        Value({1: 2})


def test_bool_is_not_number():
    assert Value(True) != Value(1)


def test_copy_is_independent():
    original = Value([1, 2])
    copy = Value(original)
    copy[0] = 9
    assert original[0].to_int() == 1
    assert copy[0].to_int() == 9


def test_missing_member_created_invalid():
    data = Value({})
    assert data["missing"].type() is ValueType.INVALID
    assert dumps(data) == '{"missing":/*Invalid value*/}'


def test_at_missing_raises():
    with pytest.raises(KeyError):
        Value({}).at("x")
    assert Value({"x": 1}).at("x").to_int() == 1


def test_setitem():
    data = Value({"list": [0]})
    data["name"] = "Grace"
    data["list"][0] = False
    assert data == {"list": [False], "name": "Grace"}


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Value([])[0]


def test_round_trip():
    original = Value({"a": [1, 2.5, "s", None, True], "b": {"c": False}})
    assert parse(dumps(original)) == original
    assert parse(dumps(original, 3)) == original


def test_load_and_dump_streams():
    value = load(io.StringIO(SAMPLE))
    out = io.StringIO()
    dump(value, out, 2)
    assert parse(out.getvalue()) == value
    assert out.getvalue().startswith('{\n  "name": "Grace"')


def test_duplicate_keys_keep_last():
    assert parse('{"a": 1, "a": 2}')["a"].to_int() == 2