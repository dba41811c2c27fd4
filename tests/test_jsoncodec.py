import pytest

from pcskit.jsoncodec import JsonParseError, dumps, minify, parse, parse_prefix
from pcskit.jsonnode import JsonNode, JsonType


def test_parse_literals():
    assert parse("null").type == JsonType.NULL
    assert parse("false").type == JsonType.FALSE
    node = parse("  true")
    assert node.type == JsonType.TRUE
    assert node.value_int == 1


@pytest.mark.parametrize("text", ["0", "-7", "3.25", "-12.5e1", "4E-2", "1e+3"])
def test_parse_numbers(text):
    node = parse(text)
    assert node.type == JsonType.NUMBER
    assert node.value_double == pytest.approx(float(text))
    assert node.value_int == int(float(text))


def test_parse_string_escapes():
    assert parse('"a\\nb\\tc"').value_string == "a\nb\tc"
    assert parse('"q\\"x\\/"').value_string == 'q"x/'
    assert parse("'single'").value_string == "single"


def test_parse_unicode_escapes():
    assert parse('"\\u00e9"').value_string == "\u00e9"
    assert parse('"\\ud83d\\ude00"').value_string == "\U0001F600"
    # A lone low surrogate is dropped.
    assert parse('"a\\udc00b"').value_string == "ab"


def test_parse_nested_structure():
    node = parse('{"list": [1, "two", null], "Obj": {"k": false}}')
    assert node.type == JsonType.OBJECT
    assert len(node) == 2
    items = node.get_item("list")
    assert [child.type for child in items] == [
        JsonType.NUMBER,
        JsonType.STRING,
        JsonType.NULL,
    ]
    assert node.get_item("obj").get_item("k").type == JsonType.FALSE


def test_parse_skips_comments():
    node = parse("/* head */ [1, // one\n 2 /* two */]")
    assert len(node) == 2
    assert node.get_index(1).value_double == 2.0


@pytest.mark.parametrize("text", ["", "[1,", "{1:2}", '{"a" 1}', "[1 2]", "nope"])
def test_parse_errors(text):
    with pytest.raises(JsonParseError):
        parse(text)


def test_parse_error_position():
    with pytest.raises(JsonParseError) as info:
        parse("  x")
    assert info.value.position == 2


def test_trailing_text():
    assert len(parse("[1] rest")) == 1
    assert len(parse("[1] /* c */ ", True)) == 1
    with pytest.raises(JsonParseError):
        parse("[1] rest", True)


def test_parse_prefix_end():
    text = "[1,2]  tail"
    node, end = parse_prefix(text)
    assert len(node) == 2
    assert end == text.index(" ")


@pytest.mark.parametrize(
    "text",
    ['[1,2,3]', '{"a":true,"b":null}', '"x"', "[]", '{"n":{"m":[]}}', "-5"],
)
def test_unformatted_round_trip(text):
    assert dumps(parse(text), False) == text


def test_formatted_output():
    assert dumps(parse('{"a":[1,2]}'), True) == '{\n\t"a":\t[1, 2]\n}'
    assert dumps(JsonNode.object(), True) == "{\n}"
    assert dumps(JsonNode.object(), False) == "{}"


def test_formatted_reparses_to_same():
    text = '{"a":{"b":[1,{"c":"d"}]},"e":false}'
    pretty = dumps(parse(text), True)
    assert dumps(parse(pretty), False) == text


@pytest.mark.parametrize("value", [42, 0.5, 1e20, 1e-7, 123456.75, -3])
def test_number_round_trip(value):
    text = dumps(JsonNode.number(value), False)
    assert float(text) == pytest.approx(value)


def test_integer_number_text():
    assert dumps(JsonNode.number(42), False) == "42"


def test_string_escaping_round_trip():
    original = 'a"b\\c\n\x01\u00e9'
    text = dumps(JsonNode.string(original), False)
    assert parse(text).value_string == original
    assert dumps(JsonNode.string("\x01"), False) == '"\\u0001"'


def test_minify():
    text = '{ "a" : 1 , // c\n "b": "x y" /* z */ }'
    assert minify(text) == '{"a":1,"b":"x y"}'
    assert minify('["a\\" b"]') == '["a\\" b"]'


def test_minify_preserves_meaning():
    text = '[ 1, /* c */ { "k" : "v w" } ]\n'
    assert dumps(parse(minify(text)), False) == dumps(parse(text), False)