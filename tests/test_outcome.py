import logging

import pytest

import pepser.main
from pepser import Input, Success, Failure, ParseError, Parser, Forward, apply, literal, wrapped


def test_success_is_truthy():
    r = Success(Input("a", 1), "a")
    assert r
    assert r.value == "a"
    assert r.remaining == Input("a", 1)


def test_failure_is_falsy():
    r = Failure(Input("a"))
    assert not r
    assert r.remaining == Input("a")


def test_map_creates_new_outcome():
    r = Success(Input("ab", 1), "a")
    mapped = r.map(str.upper)
    assert mapped == Success(Input("ab", 1), "A")
    assert r.value == "a"
    f = Failure(Input("ab"))
    assert f.map(str.upper) is f


def test_failure_error():
    err = Failure(Input("abc", 2)).error()
    assert isinstance(err, ParseError)
    assert err.pos == 2
    assert err.remaining == Input("abc", 2)


def test_plain_function_as_parser():
    def anything(inp):
        return Success(inp.advance(len(inp)), inp.rest())

    assert apply(anything, Input("xyz")) == Success(Input("xyz", 3), "xyz")
    assert Parser(anything).name == "anything"


def test_apply_converts_strings():
    assert apply("ab", Input("abc")) == Success(Input("abc", 2), "ab")


def test_parse_returns_value():
    assert literal("ab").parse("abc") == "ab"


def test_parse_raises_on_failure():
    with pytest.raises(ParseError) as info:
        literal("ab").parse("xy")
    assert info.value.pos == 0


def test_parse_complete():
    with pytest.raises(ParseError) as info:
        literal("ab").parse("abc", complete=True)
    assert info.value.pos == 2
    assert literal("ab").parse("ab", complete=True) == "ab"


def test_parser_is_reusable():
    p = wrapped("(", "x", ")")
    inp = Input("(x)")
    assert p(inp) == p(inp)
    assert inp == Input("(x)")


def test_forward():
    expr = Forward(name="expr")
    expr.define(wrapped("(", expr, ")") | literal("x"))
    assert expr.parse("((x))") == "x"
    assert not expr(Input("((x)"))


def test_undefined_forward():
    with pytest.raises(RuntimeError):
        Forward(name="later")(Input("x"))


def test_unconvertible_parameter():
    with pytest.raises(TypeError):
        wrapped("(", 5, ")")


def test_debug_logging(caplog, monkeypatch):
    monkeypatch.setattr(pepser.main, "debug", True)
    with caplog.at_level(logging.DEBUG, logger="pepser"):
        literal("ab").named("ab").parse("abc")
        assert not literal("ab").named("ab")(Input("x"))
    messages = [record.getMessage() for record in caplog.records]
    assert "trying ab at 0" in messages
    assert "matched ab, now at 2" in messages
    assert "failed ab at 0" in messages


def test_no_logging_by_default(caplog):
    with caplog.at_level(logging.DEBUG, logger="pepser"):
        literal("ab").parse("abc")
    assert caplog.records == []


def test_forward_defined_once():
    expr = Forward(name="expr")
    assert not expr.defined
    expr.define("x")
    assert expr.defined
    with pytest.raises(RuntimeError):
        expr.define("y")
    assert expr.parse("x") == "x"
