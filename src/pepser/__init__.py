"""
Parser combinators over immutable input views.

See the objects for more explanations.

See the `pepser.general` module for general purpose parsers you can use as examples.

Defining parsers:
```
digit = one_of("0123456789")
number = many1(digit) >> (lambda ds: int("".join(ds)))
pair = wrapped("(", and_(number, discard(",", number)), ")")
```

Using parsers:
```
r = pair(Input("(1,23)"))
if r:
    ... # `r` is a `Success`, `r.value` is (1, 23)
else:
    ... # `r` is a `Failure`, `r.remaining` is the input it received

pair.parse("(1,23)")    # (1, 23), or raises `ParseError`
```
"""

import pepser.const as const
import pepser.main
from pepser.main import (
    Input,
    Success,
    Failure,
    Outcome,
    ParseError,
    ParserLike,
    Parser,
    Forward,
    apply,
    literal,
    one_of,
    none_of,
    take_while,
    take_while1,
    whitespace,
    regex,
    eof,
    map_,
    and_,
    or_,
    choice,
    seq,
    many,
    many1,
    opt,
    discard,
    discard_after,
    wrapped,
    sep_by,
    value,
    parse_if,
    lookahead,
    drop_until,
)
import pepser.general as general
