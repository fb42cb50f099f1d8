"""
General purpose parsers built from the combinators. Can also be used as examples.

```
from pepser.general import parse_json

parse_json('{"a": [1, 2.5, true, null]}')   # {'a': [1, 2.5, True, None]}
```
"""

from __future__ import annotations
from typing import Any

from pepser import *

ws = whitespace(const.JSON_WHITESPACES).named("ws")

def is_digit(c: str) -> bool:
    return c in const.DECIMAL

digits: Parser[str, str] = take_while1(is_digit).named("digits")
"""One or more decimal digits."""

# numbers

def _to_number(parts: tuple[Any, ...]) -> int | float:
    sign, integral, fraction, exponent = parts
    text = (sign or "") + integral
    if fraction is None and exponent is None:
        return int(text)
    if fraction is not None:
        text += "." + fraction
    if exponent is not None:
        _, exponent_sign, exponent_digits = exponent
        text += "e" + (exponent_sign or "") + exponent_digits
    return float(text)

_integral_part = or_(
    "0",
    and_(one_of(const.NONZERO_DECIMAL), take_while(is_digit)) >> (lambda pair: pair[0] + pair[1]),
)
_decimal_part = parse_if(".", digits)
_exponent_part = opt(seq(one_of("eE"), opt(one_of("+-")), digits))

json_number: Parser[str, int | float] = seq(opt("-"), _integral_part, _decimal_part, _exponent_part).map(_to_number).named("json_number")
"""
A JSON number.

`int` if there's neither a fractional part nor an exponent, `float` otherwise.
"""

# quoted string

# must be escaped inside a string
_NOT_LITERAL = frozenset({'"', '\\'} | {chr(i) for i in range(0x20)})

_hex_digit = one_of(const.HEXADECIMAL)
_unicode_escape = discard("u", seq(_hex_digit, _hex_digit, _hex_digit, _hex_digit)) >> (lambda code: chr(int("".join(code), base=16)))
_simple_escape = one_of(const.JSON_ESCAPES) >> const.JSON_ESCAPES.__getitem__
_escape = discard("\\", _simple_escape | _unicode_escape)

quoted_string: Parser[str, str] = wrapped('"', many(none_of(_NOT_LITERAL) | _escape) >> "".join, '"').named("quoted_string")
"""A double quoted JSON string, with the escapes decoded."""

# json

null = value(None, "null").named("null")
boolean = (value(True, "true") | value(False, "false")).named("boolean")

json_value: Forward[str, Any] = Forward(name="json_value")
"""Any JSON value, with the whitespace around it skipped."""

json_array: Parser[str, list[Any]] = wrapped("[", sep_by(json_value, ","), discard(ws, "]")).named("json_array")

_member = and_(wrapped(ws, quoted_string, ws), discard(":", json_value))
json_object: Parser[str, dict[str, Any]] = wrapped("{", sep_by(_member, ","), discard(ws, "}")).map(dict).named("json_object")

json_value.define(wrapped(
    ws,
    choice(null, boolean, json_number, quoted_string, json_array, json_object),
    ws,
))

def parse_json(text: str) -> Any:
    """
    Parses a whole JSON document.

    Raises `ParseError` if `text` isn't exactly one JSON value. (Whitespace around it is allowed.)
    """
    return json_value.parse(text, complete=True)
