import pytest

from pepser import Input


def test_length_and_emptiness():
    inp = Input("abc")
    assert len(inp) == 3
    assert inp
    assert not inp.is_eof()
    end = inp.advance(3)
    assert len(end) == 0
    assert not end
    assert end.is_eof()


def test_advance_returns_new_view():
    inp = Input("abc")
    rest = inp.advance(1)
    assert rest.rest() == "bc"
    assert inp.rest() == "abc"
    assert rest.src is inp.src


def test_advance_past_end():
    with pytest.raises(ValueError):
        Input("ab").advance(3)


def test_position_outside_source():
    with pytest.raises(ValueError):
        Input("ab", 3)


def test_peek():
    assert Input("xy").peek() == "x"
    assert Input("xy", 2).peek() is None


def test_take():
    taken, rest = Input("hello").take(2)
    assert taken == "he"
    assert rest.rest() == "llo"
    assert Input("hi").take(3) is None


def test_strip_prefix():
    inp = Input("hello")
    assert inp.strip_prefix("he") == Input("hello", 2)
    assert inp.strip_prefix("hex") is None
    assert inp.strip_prefix("hello world") is None
    assert inp.strip_prefix("") == inp


def test_split_while():
    taken, rest = Input("123abc").split_while(str.isdigit)
    assert taken == "123"
    assert rest.rest() == "abc"
    taken, rest = Input("abc").split_while(str.isdigit)
    assert taken == ""
    assert rest == Input("abc")


def test_equality():
    assert Input("abc", 1) == Input("abc", 1)
    assert Input("abc", 1) != Input("abc", 2)
    assert Input("abc") != Input("abd")
    assert hash(Input("abc", 1)) == hash(Input("abc", 1))


def test_non_string_sequences():
    inp = Input([1, 2, 3])
    assert inp.strip_prefix([1, 2]).rest() == [3]
    assert inp.peek() == 1


def test_take_negative_amount():
    assert Input("abc", 2).take(-1) is None


def test_strip_prefix_compares_elements():
    inp = Input([1, 2, 3])
    assert inp.strip_prefix((1, 2)) == Input([1, 2, 3], 2)
    assert inp.strip_prefix((1, 3)) is None
