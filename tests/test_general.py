import pytest

from pepser import Input, Failure, ParseError
from pepser.general import digits, json_number, quoted_string, json_value, parse_json


def test_digits():
    assert digits.parse("123abc") == "123"
    assert not digits(Input("abc"))


@pytest.mark.parametrize(("src", "expected"), [
    ("0", 0),
    ("42", 42),
    ("-7", -7),
    ("3.25", 3.25),
    ("-15.3E2", -1530.0),
    ("1e3", 1000.0),
    ("2.5e-1", 0.25),
    ("1E+2", 100.0),
])
def test_json_number(src, expected):
    r = json_number(Input(src))
    assert r.value == expected
    assert type(r.value) is type(expected)
    assert r.remaining.is_eof()


@pytest.mark.parametrize("src", ["-", "abc", "-x", "1.", "1.e3"])
def test_json_number_fails_at_original_input(src):
    inp = Input(src)
    assert json_number(inp) == Failure(inp)


def test_json_number_leading_zero():
    r = json_number(Input("012"))
    assert r.value == 0
    assert r.remaining.rest() == "12"


def test_quoted_string():
    assert quoted_string.parse('"hello" world') == "hello"
    assert quoted_string.parse('""') == ""


def test_quoted_string_escapes():
    assert quoted_string.parse(r'"a\"b\\c\/d\n\t\r\b\f"') == 'a"b\\c/d\n\t\r\b\f'
    assert quoted_string.parse(r'"\u00e9\u0041"') == "éA"


@pytest.mark.parametrize("src", ['"unterminated', '"bad \\q escape"', '"\\u12"', '"line\nbreak"'])
def test_quoted_string_invalid(src):
    inp = Input(src)
    assert quoted_string(inp) == Failure(inp)


@pytest.mark.parametrize(("src", "expected"), [
    ("null", None),
    ("true", True),
    ("false", False),
    ("[]", []),
    ("[ ]", []),
    ("{}", {}),
    ("{ }", {}),
    ("[true, false, [false]]", [True, False, [False]]),
    ('{"a": 1, "b": [1, 2.5, "x"]}', {"a": 1, "b": [1, 2.5, "x"]}),
    ('  {"nested" : {"deep": [null]} }  ', {"nested": {"deep": [None]}}),
])
def test_parse_json(src, expected):
    assert parse_json(src) == expected


def test_parse_json_document():
    src = """
    {
        "description": "the description of the test case",
        "schema": {"the schema that should" : "be validated against"},
        "tests": [
            {
                "description": "a specific test of a valid instance",
                "data": "the instance",
                "valid": true
            },
            {
                "description": "another specific test this time, invalid",
                "data": -15.3E2,
                "valid": false
            }
        ]
    }
    """
    result = parse_json(src)
    assert result["schema"] == {"the schema that should": "be validated against"}
    assert result["tests"][0]["valid"] is True
    assert result["tests"][1]["data"] == -1530.0


@pytest.mark.parametrize("src", ["", "[1,]", "[1 2]", '{"a" 1}', "{1: 2}", "nul", "[1] x", "[", '{"a": }'])
def test_parse_json_invalid(src):
    with pytest.raises(ParseError):
        parse_json(src)


def test_json_value_leaves_rest():
    r = json_value(Input("[1, 2] tail"))
    assert r.value == [1, 2]
    assert r.remaining.rest() == "tail"
