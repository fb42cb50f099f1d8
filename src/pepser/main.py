"""
The implementations of the main classes, the primitive parsers and the combinators.
"""

from __future__ import annotations
from typing import Any, Self, Literal, TypeVar, Generic, Final, Callable, Sequence, Protocol, Union

from collections.abc import Container, Iterable
import logging
import re

import pepser.const as const


log = logging.getLogger("pepser")

debug = False
"""
When `True`, every `Parser.apply()` call is logged at the debug level.

```
import logging
logging.basicConfig(level=logging.DEBUG)
import pepser.main
pepser.main.debug = True
```
"""


_T = TypeVar("_T")
_ElemT = TypeVar("_ElemT")
_V = TypeVar("_V")
_InputCovT = TypeVar("_InputCovT", covariant=True)
_ValueCovT = TypeVar("_ValueCovT", covariant=True)



class Input(Generic[_ElemT]):
    """
    An immutable view over a sequence. (Usually a string.)

    Consuming never changes the view, it returns a new one over the same source that starts further along.
    Older views stay valid, which is what makes backtracking free:
    ```
    inp = Input("abc")
    rest = inp.advance(1)   # <Input 1/3 'bc'>
    inp                     # still <Input 0/3 'abc'>
    ```
    """
    __slots__ = ("src", "pos")

    def __init__(self, src: Sequence[_ElemT], pos: int = 0) -> None:
        """
        `src`: The sequence that's being parsed.
        `pos`: The index of the first element of the view.
        """
        if not 0 <= pos <= len(src):
            raise ValueError(f"Position {pos} is outside of the source (length {len(src)}).")
        self.src: Final[Sequence[_ElemT]] = src
        """The sequence that's being parsed."""
        self.pos: Final[int] = pos
        """The index of the first element of the view."""

    def __len__(self) -> int:
        """The number of remaining elements."""
        return len(self.src) - self.pos

    def __bool__(self) -> bool:
        """Whether there are any elements left to parse. The opposite of `is_eof()`"""
        return self.pos < len(self.src)

    def is_eof(self) -> bool:
        """Whether the end of the input has been reached. The opposite of `__bool__()`"""
        return self.pos >= len(self.src)

    def has_items(self, amount: int) -> bool:
        """Whether there are at least that many elements left."""
        return self.pos+amount <= len(self.src)

    def peek(self) -> _ElemT | None:
        """
        Retrieves the first element without consuming.

        If there are no elements left, returns `None`.
        """
        if self.pos >= len(self.src):
            return None
        return self.src[self.pos]

    def rest(self) -> Sequence[_ElemT]:
        """The remaining elements, as a slice of the source."""
        return self.src[self.pos:]

    def advance(self, amount: int) -> Input[_ElemT]:
        """Returns a view that starts `amount` elements further along."""
        if amount < 0 or not self.has_items(amount):
            raise ValueError(f"Cannot advance by {amount} with {len(self)} elements left.")
        return Input(self.src, self.pos+amount)

    def take(self, amount: int) -> tuple[Sequence[_ElemT], Input[_ElemT]] | None:
        """
        Splits off the specified amount of elements.

        If there aren't enough elements, returns `None`.
        """
        if amount < 0 or not self.has_items(amount):
            return None
        return self.src[self.pos:self.pos+amount], Input(self.src, self.pos+amount)

    def strip_prefix(self, prefix: Sequence[_ElemT]) -> Input[_ElemT] | None:
        """
        Returns the view after `prefix` if the input starts with exactly `prefix`.

        If it doesn't (or there aren't enough elements), returns `None`.
        """
        end = self.pos+len(prefix)
        if end > len(self.src):
            return None
        if any(self.src[self.pos+i] != item for i, item in enumerate(prefix)):
            return None
        return Input(self.src, end)

    def split_while(self, predicate: Callable[[_ElemT], Any]) -> tuple[Sequence[_ElemT], Input[_ElemT]]:
        """Splits off the longest prefix (possibly empty) whose elements all satisfy `predicate`."""
        end = self.pos
        while end < len(self.src) and predicate(self.src[end]):
            end += 1
        return self.src[self.pos:end], Input(self.src, end)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Input):
            return NotImplemented
        return self.pos == other.pos and (self.src is other.src or self.src == other.src)

    def __hash__(self) -> int:
        return hash((self.pos, len(self.src)))

    def __repr__(self) -> str:
        rest = self.rest()
        shown = rest if len(rest) <= 20 else rest[:20]
        return f"<Input {self.pos}/{len(self.src)} {shown!r}{'...' if len(rest) > 20 else ''}>"


class Success(Generic[_InputCovT, _ValueCovT]):
    """
    Returned from a parser when it has matched.

    ```
    r = parser(inp)
    if r:
        r.value, r.remaining    # `r` is a `Success`
    else:
        r.remaining             # `r` is a `Failure`
    ```
    """
    __slots__ = ("remaining", "value")

    def __init__(self, remaining: _InputCovT, value: _ValueCovT) -> None:
        self.remaining: Final[_InputCovT] = remaining
        """The input left after the match."""
        self.value: Final[_ValueCovT] = value
        """The produced value."""

    def map(self, f: Callable[[_ValueCovT], _T]) -> Success[_InputCovT, _T]:
        """Creates a new success with the value transformed by `f`."""
        return Success(self.remaining, f(self.value))

    def __bool__(self) -> Literal[True]:
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Success):
            return NotImplemented
        return self.remaining == other.remaining and self.value == other.value

    def __repr__(self) -> str:
        return f"Success({self.remaining!r}, {self.value!r})"

class Failure(Generic[_InputCovT]):
    """
    Returned from a parser when it hasn't matched.

    `remaining` is the input to resume from. For the parsers in this library it's always the input the parser itself received.

    Can be converted into a `ParseError`.
    """
    __slots__ = ("remaining",)

    def __init__(self, remaining: _InputCovT) -> None:
        self.remaining: Final[_InputCovT] = remaining
        """The input to resume from."""

    def map(self, f: Callable[[Any], Any]) -> Self:
        """Failures have no value to transform, returns itself."""
        return self

    def error(self) -> ParseError:
        """Converts this to a ParseError."""
        return ParseError(self.remaining)

    def __bool__(self) -> Literal[False]:
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return self.remaining == other.remaining

    def __repr__(self) -> str:
        return f"Failure({self.remaining!r})"

Outcome = Union[Success[_InputCovT, _ValueCovT], Failure[_InputCovT]]
"""
The result of applying a parser.

When used for typing: `Outcome[Input[str], int]`
"""


class ParseError(Exception):
    """
    Raised by `Parser.parse()` when the caller asks for a value and there is none.

    The parsers themselves never raise it, failing to match isn't exceptional.
    """

    def __init__(self, remaining: Any) -> None:
        """`remaining`: The input where parsing stopped."""
        self.remaining = remaining
        self.pos: int | None = getattr(remaining, "pos", None)
        if self.pos is None:
            super().__init__("Failed to parse.")
        else:
            super().__init__(f"Failed to parse at position {self.pos}.")


class ParserLike(Protocol[_ElemT, _ValueCovT]):
    """
    A protocol for anything that can be used as a parser.

    Takes an input view and returns an `Outcome`. Plain functions are fine:
    ```
    def nothing(inp: Input[str]) -> Outcome[Input[str], None]:
        return Success(inp, None)
    ```
    """
    def __call__(self, inp: Input[_ElemT], /) -> Outcome[Input[_ElemT], _ValueCovT]: ...


class Parser(Generic[_ElemT, _V]):
    """
    The object every primitive and combinator returns.

    Parsers only run when applied to an input. They hold no state between calls, so they can be built once and applied any number of times.

    When used for typing: `Parser[ElementType, ValueType]`

    Example: `Parser[str, int]`
    """

    def __init__(self, fn: ParserLike[_ElemT, _V], name: str | None = None) -> None:
        """
        `fn`: The function that does the parsing.
        `name`: Shown in the debug log. Defaults to the function's name.
        """
        self.fn: ParserLike[_ElemT, _V] = fn
        self.name: str = name if name is not None else getattr(fn, "__name__", repr(fn))

    def apply(self, inp: Input[_ElemT]) -> Outcome[Input[_ElemT], _V]:
        """Runs the parser. Same as `Parser.__call__()`."""
        if not debug:
            return self.fn(inp)
        log.debug("trying %s at %d", self.name, inp.pos)
        outcome = self.fn(inp)
        if outcome:
            log.debug("matched %s, now at %d", self.name, outcome.remaining.pos)
        else:
            log.debug("failed %s at %d", self.name, inp.pos)
        return outcome

    def __call__(self, inp: Input[_ElemT]) -> Outcome[Input[_ElemT], _V]:
        """Runs the parser. Same as `Parser.apply()`."""
        return self.apply(inp)

    def named(self, name: str) -> Self:
        """Sets the name shown in the debug log."""
        self.name = name
        return self

    def parse(self, src: Sequence[_ElemT] | Input[_ElemT], *, complete: bool = False) -> _V:
        """
        Parses `src` and returns the value.

        Raises `ParseError` if the parser fails, or if `complete` is set and the parser didn't consume everything.
        """
        inp = src if isinstance(src, Input) else Input(src)
        outcome = self.apply(inp)
        if not outcome:
            raise outcome.error()
        if complete and outcome.remaining:
            raise ParseError(outcome.remaining)
        return outcome.value

    def map(self, f: Callable[[_V], _T]) -> Parser[_ElemT, _T]:
        """Same as `map_(self, f)`."""
        return map_(self, f)

    def and_(self, other: FactoryParameter) -> Parser[_ElemT, tuple[_V, Any]]:
        """Same as `and_(self, other)`."""
        return and_(self, other)

    def or_(self, other: FactoryParameter) -> Parser[_ElemT, Any]:
        """Same as `or_(self, other)`."""
        return or_(self, other)

    def many(self) -> Parser[_ElemT, list[_V]]:
        """Same as `many(self)`."""
        return many(self)

    def opt(self) -> Parser[_ElemT, _V | None]:
        """Same as `opt(self)`."""
        return opt(self)

    def value(self, constant: _T) -> Parser[_ElemT, _T]:
        """Same as `value(constant, self)`."""
        return value(constant, self)

    def __add__(self, other: FactoryParameter) -> Parser[_ElemT, tuple[_V, Any]]:
        """`p + q` is `and_(p, q)`."""
        return and_(self, other)

    def __or__(self, other: FactoryParameter) -> Parser[_ElemT, Any]:
        """`p | q` is `or_(p, q)`."""
        return or_(self, other)

    def __rshift__(self, f: Callable[[_V], _T]) -> Parser[_ElemT, _T]:
        """`p >> f` is `map_(p, f)`."""
        return map_(self, f)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"


class Forward(Parser[_ElemT, _V]):
    """
    A parser that is declared before it is defined. Used for recursive grammars.

    ```
    expr = Forward(name="expr")
    parens = wrapped("(", expr, ")")
    expr.define(parens | literal("x"))
    ```
    """

    def __init__(self, name: str | None = None) -> None:
        super().__init__(self._undefined, name if name is not None else "forward")
        self.defined: bool = False

    def _undefined(self, inp: Input[_ElemT]) -> Outcome[Input[_ElemT], _V]:
        raise RuntimeError(f"The forward parser `{self.name}` was used before being defined.")

    def define(self, parser: FactoryParameter) -> None:
        """
        Sets the parser this one stands for.

        Raises `RuntimeError` if it was already defined.
        """
        if self.defined:
            raise RuntimeError(f"The forward parser `{self.name}` was already defined.")
        self.fn = convert_factory_parameter(parser).apply
        self.defined = True


def apply(parser: FactoryParameter, inp: Input[Any]) -> Outcome[Input[Any], Any]:
    """Applies the parser to the input."""
    return convert_factory_parameter(parser)(inp)


FactoryParameter = Parser[Any, Any] | ParserLike[Any, Any] | str | re.Pattern

def convert_factory_parameter(parser: FactoryParameter) -> Parser[Any, Any]:
    """
    Turns a combinator parameter into a `Parser`.

    - `Parser`: as-is
    - `str`: `literal(...)`
    - `re.Pattern`: `regex(...)`
    - other callables: wrapped in a `Parser`
    """
    if isinstance(parser, Parser):
        return parser
    elif isinstance(parser, str):
        return literal(parser)
    elif isinstance(parser, re.Pattern):
        return regex(parser)
    elif callable(parser):
        return Parser(parser)
    else:
        raise TypeError(f"Can't use {parser!r} as a parser.")

def convert_factory_parameters(parsers: tuple[FactoryParameter, ...]) -> tuple[Parser[Any, Any], ...]:
    return tuple(convert_factory_parameter(parser) for parser in parsers)



# primitives

def literal(text: Sequence[_ElemT]) -> Parser[_ElemT, Sequence[_ElemT]]:
    """
    Matches `text` exactly. The value is the matched slice.

    Elements are compared one by one, so `text` can be any sequence type: `literal((1, 2))` matches a list source.

    Fails if there aren't enough elements left.
    """
    def _literal(inp: Input[_ElemT]) -> Outcome[Input[_ElemT], Sequence[_ElemT]]:
        rest = inp.strip_prefix(text)
        if rest is None:
            return Failure(inp)
        return Success(rest, inp.src[inp.pos:rest.pos])
    return Parser(_literal, repr(text))

def one_of(items: Iterable[_ElemT]) -> Parser[_ElemT, _ElemT]:
    """
    Matches a single element that's in `items`. The value is the element.

    `one_of("0123456789")`
    """
    members = frozenset(items)
    def _one_of(inp: Input[_ElemT]) -> Outcome[Input[_ElemT], _ElemT]:
        if not inp or inp.peek() not in members:
            return Failure(inp)
        return Success(inp.advance(1), inp.src[inp.pos])
    return Parser(_one_of, f"one_of({''.join(sorted(map(str, members)))!r})")

def none_of(items: Iterable[_ElemT]) -> Parser[_ElemT, _ElemT]:
    """
    Matches a single element that's not in `items`. The value is the element.

    Fails at the end of the input.
    """
    members = frozenset(items)
    def _none_of(inp: Input[_ElemT]) -> Outcome[Input[_ElemT], _ElemT]:
        if not inp or inp.peek() in members:
            return Failure(inp)
        return Success(inp.advance(1), inp.src[inp.pos])
    return Parser(_none_of, f"none_of({''.join(sorted(map(str, members)))!r})")

def take_while(predicate: Callable[[_ElemT], Any]) -> Parser[_ElemT, Sequence[_ElemT]]:
    """
    Matches the longest prefix whose elements all satisfy `predicate`.

    Always succeeds, possibly with an empty match. Use `take_while1()` to require at least one element.
    """
    def _take_while(inp: Input[_ElemT]) -> Outcome[Input[_ElemT], Sequence[_ElemT]]:
        taken, rest = inp.split_while(predicate)
        return Success(rest, taken)
    return Parser(_take_while, f"take_while({getattr(predicate, '__name__', 'predicate')})")

def take_while1(predicate: Callable[[_ElemT], Any]) -> Parser[_ElemT, Sequence[_ElemT]]:
    """Same as `take_while()`, but fails if not even the first element satisfies `predicate`."""
    def _take_while1(inp: Input[_ElemT]) -> Outcome[Input[_ElemT], Sequence[_ElemT]]:
        taken, rest = inp.split_while(predicate)
        if not taken:
            return Failure(inp)
        return Success(rest, taken)
    return Parser(_take_while1, f"take_while1({getattr(predicate, '__name__', 'predicate')})")

def whitespace(whitespaces: Container[Any] = const.WHITESPACES) -> Parser[str, str]:
    """
    Matches zero or more whitespaces. Always succeeds.

    Usually used with `discard()` to skip whitespace between tokens.
    """
    return take_while(lambda c: c in whitespaces).named("whitespace")

def regex(pattern: str | re.Pattern, flags: int | re.RegexFlag = 0) -> Parser[str, re.Match[str]]:
    """
    Matches the regex at the start of the input. The value is the `re.Match`.

    Only works on string inputs.
    """
    compiled = re.compile(pattern, flags)
    def _regex(inp: Input[str]) -> Outcome[Input[str], re.Match[str]]:
        m = compiled.match(inp.src, inp.pos) # type: ignore[call-overload]
        if m is None:
            return Failure(inp)
        return Success(Input(inp.src, m.end()), m)
    return Parser(_regex, f"regex({compiled.pattern!r})")

def eof() -> Parser[Any, None]:
    """Matches only at the end of the input."""
    def _eof(inp: Input[Any]) -> Outcome[Input[Any], None]:
        if inp:
            return Failure(inp)
        return Success(inp, None)
    return Parser(_eof, "eof")



# combinators

def map_(parser: FactoryParameter, f: Callable[[Any], _T]) -> Parser[Any, _T]:
    """
    Transforms the value of the parser with `f`.

    Failures are passed through unchanged.
    """
    p = convert_factory_parameter(parser)
    def _map(inp: Input[Any]) -> Outcome[Input[Any], _T]:
        return p(inp).map(f)
    return Parser(_map, p.name)

def and_(first: FactoryParameter, second: FactoryParameter) -> Parser[Any, tuple[Any, Any]]:
    """
    Matches `first`, then `second`. The value is a pair of both values.

    If either fails, fails at the input given to this parser.
    """
    p, q = convert_factory_parameters((first, second))
    def _and(inp: Input[Any]) -> Outcome[Input[Any], tuple[Any, Any]]:
        if not (r1 := p(inp)):
            return Failure(inp)
        if not (r2 := q(r1.remaining)):
            return Failure(inp)
        return Success(r2.remaining, (r1.value, r2.value))
    return Parser(_and, f"({p.name}, {q.name})")

def or_(first: FactoryParameter, second: FactoryParameter) -> Parser[Any, Any]:
    """
    Matches `first`, or if it fails, `second` from the same input.

    The first match wins.
    """
    p, q = convert_factory_parameters((first, second))
    def _or(inp: Input[Any]) -> Outcome[Input[Any], Any]:
        if r := p(inp):
            return r
        if r := q(inp):
            return r
        return Failure(inp)
    return Parser(_or, f"{p.name} | {q.name}")

def choice(*parsers: FactoryParameter) -> Parser[Any, Any]:
    """
    Attempts to match any of the parsers, in sequence, until one matches. If none match, fails.
    """
    if len(parsers) < 2:
        raise ValueError("At least two parsers required.")
    new_parsers = convert_factory_parameters(parsers)
    def _choice(inp: Input[Any]) -> Outcome[Input[Any], Any]:
        for parser in new_parsers:
            if r := parser(inp):
                return r
        return Failure(inp)
    return Parser(_choice, " | ".join(parser.name for parser in new_parsers))

def seq(*parsers: FactoryParameter) -> Parser[Any, tuple[Any, ...]]:
    """
    All the given parsers must match in sequence for the parser to succeed. The value is a tuple of their values.
    """
    if len(parsers) < 2:
        raise ValueError("At least two parsers required.")
    new_parsers = convert_factory_parameters(parsers)
    def _seq(inp: Input[Any]) -> Outcome[Input[Any], tuple[Any, ...]]:
        values: list[Any] = []
        current = inp
        for parser in new_parsers:
            if not (r := parser(current)):
                return Failure(inp)
            values.append(r.value)
            current = r.remaining
        return Success(current, tuple(values))
    return Parser(_seq, "(" + ", ".join(parser.name for parser in new_parsers) + ")")

def many(parser: FactoryParameter) -> Parser[Any, list[Any]]:
    """
    Repeatedly matches the parser until it fails. The value is the list of values.

    Always succeeds. Stops at an iteration that succeeds without consuming anything, and doesn't collect its value.
    """
    p = convert_factory_parameter(parser)
    def _many(inp: Input[Any]) -> Outcome[Input[Any], list[Any]]:
        values: list[Any] = []
        current = inp
        while r := p(current):
            if len(r.remaining) == len(current):
                break
            values.append(r.value)
            current = r.remaining
        return Success(current, values)
    return Parser(_many, f"many({p.name})")

def many1(parser: FactoryParameter) -> Parser[Any, list[Any]]:
    """Same as `many()`, but fails if not even one iteration matches."""
    p = convert_factory_parameter(parser)
    repeated = many(p)
    def _many1(inp: Input[Any]) -> Outcome[Input[Any], list[Any]]:
        r = repeated(inp)
        if not r or not r.value:
            return Failure(inp)
        return r
    return Parser(_many1, f"many1({p.name})")

def opt(parser: FactoryParameter) -> Parser[Any, Any]:
    """
    Optionally matches the parser. Never fails.

    If the parser fails, the value is `None` and nothing is consumed.
    """
    p = convert_factory_parameter(parser)
    def _opt(inp: Input[Any]) -> Outcome[Input[Any], Any]:
        if r := p(inp):
            return r
        return Success(inp, None)
    return Parser(_opt, f"opt({p.name})")

def discard(first: FactoryParameter, second: FactoryParameter) -> Parser[Any, Any]:
    """
    Matches `first`, then `second`. Only keeps the value of `second`.

    If either fails, fails at the input given to this parser.
    """
    p, q = convert_factory_parameters((first, second))
    def _discard(inp: Input[Any]) -> Outcome[Input[Any], Any]:
        if not (r1 := p(inp)):
            return Failure(inp)
        if not (r2 := q(r1.remaining)):
            return Failure(inp)
        return r2
    return Parser(_discard, q.name)

def discard_after(first: FactoryParameter, second: FactoryParameter) -> Parser[Any, Any]:
    """
    Matches `first`, then `second`. Only keeps the value of `first`.

    If either fails, fails at the input given to this parser.
    """
    p, q = convert_factory_parameters((first, second))
    def _discard_after(inp: Input[Any]) -> Outcome[Input[Any], Any]:
        if not (r1 := p(inp)):
            return Failure(inp)
        if not (r2 := q(r1.remaining)):
            return Failure(inp)
        return Success(r2.remaining, r1.value)
    return Parser(_discard_after, p.name)

def wrapped(prefix: FactoryParameter, body: FactoryParameter, suffix: FactoryParameter) -> Parser[Any, Any]:
    """
    Matches `prefix`, `body` and `suffix` in sequence. Only keeps the value of `body`.

    `wrapped("(", expr, ")")`
    """
    p = discard(prefix, discard_after(body, suffix))
    return p.named(f"wrapped({p.name})")

def sep_by(item: FactoryParameter, separator: FactoryParameter) -> Parser[Any, list[Any]]:
    """
    Matches zero or more `item`s separated by `separator`. The value is the list of item values.

    Always succeeds. A trailing separator is left unconsumed.
    """
    p, s = convert_factory_parameters((item, separator))
    def _sep_by(inp: Input[Any]) -> Outcome[Input[Any], list[Any]]:
        if not (r := p(inp)):
            return Success(inp, [])
        values: list[Any] = [r.value]
        current = r.remaining
        while True:
            if not (sep := s(current)):
                break
            if not (r := p(sep.remaining)):
                break
            if len(r.remaining) == len(current):
                break
            values.append(r.value)
            current = r.remaining
        return Success(current, values)
    return Parser(_sep_by, f"sep_by({p.name}, {s.name})")

def value(constant: _T, parser: FactoryParameter) -> Parser[Any, _T]:
    """Matches the parser, replacing its value with `constant`."""
    p = convert_factory_parameter(parser)
    def _value(inp: Input[Any]) -> Outcome[Input[Any], _T]:
        if not (r := p(inp)):
            return Failure(inp)
        return Success(r.remaining, constant)
    return Parser(_value, p.name)

def parse_if(condition: FactoryParameter, then: FactoryParameter) -> Parser[Any, Any]:
    """
    If `condition` matches, `then` must match after it. The value is the value of `then`.

    If `condition` fails, succeeds with `None` without consuming anything. If `then` fails, fails.

    `parse_if(".", digits)`
    """
    c, t = convert_factory_parameters((condition, then))
    def _parse_if(inp: Input[Any]) -> Outcome[Input[Any], Any]:
        if not (r := c(inp)):
            return Success(inp, None)
        if not (r := t(r.remaining)):
            return Failure(inp)
        return r
    return Parser(_parse_if, f"parse_if({c.name}, {t.name})")

def lookahead(parser: FactoryParameter) -> Parser[Any, Any]:
    """Matches without advancing. The value is kept."""
    p = convert_factory_parameter(parser)
    def _lookahead(inp: Input[Any]) -> Outcome[Input[Any], Any]:
        if not (r := p(inp)):
            return Failure(inp)
        return Success(inp, r.value)
    return Parser(_lookahead, f"lookahead({p.name})")

def drop_until(parser: FactoryParameter) -> Parser[Any, Any]:
    """
    Skips elements until the parser matches. The value is the value of the parser.

    Fails if there's no position with elements left where it matches.
    """
    p = convert_factory_parameter(parser)
    def _drop_until(inp: Input[Any]) -> Outcome[Input[Any], Any]:
        for offset in range(len(inp)):
            if r := p(inp.advance(offset)):
                return r
        return Failure(inp)
    return Parser(_drop_until, f"drop_until({p.name})")
