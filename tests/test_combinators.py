"""
Test del núcleo de combinadores
===============================

Primitivas, secuencia, elección comprometida, repetición, plegado y bind.
"""

import pytest

from propcomb.infrastructure.combinators import (
    NOTHING,
    Failure,
    Pair,
    Success,
    and_then,
    bind,
    convert,
    expect_code_point,
    expect_code_points,
    expect_not_code_point,
    expect_several,
    expect_string,
    first,
    once_or_more,
    optional,
    or_else,
    repeat_and_fold_left,
    repeated,
    second,
    succeed,
)
from propcomb.infrastructure.input_source import string_to_input
from propcomb.infrastructure.lexical import expect_identifier


def test_expect_code_point():
    source = string_to_input("AB")
    result = expect_code_point("A")(source)
    assert result == Success("A", result.remaining)
    assert result.remaining.current_code_point() == "B"

    failed = expect_code_point("B")(source)
    assert isinstance(failed, Failure)
    assert failed.remaining is source


def test_expect_code_points():
    source = string_to_input("大熊猫")

    result = expect_code_points("大熊")(source)
    assert isinstance(result, Success)
    assert result.value == ("大", "熊")
    assert result.remaining.current_code_point() == "猫"

    for missing in ("熊", "大猫", "大熊猫猫"):
        failed = expect_code_points(missing)(source)
        assert isinstance(failed, Failure)
        assert failed.remaining is source


@pytest.mark.parametrize("text", ["A", "hello world", "熊猫", 'say "hi"'])
def test_expect_string_consumes_exact_text(text):
    result = expect_string(text)(string_to_input(text))
    assert isinstance(result, Success)
    assert result.value == text
    assert result.remaining is None


def test_expect_not_code_point():
    assert expect_not_code_point('"')(string_to_input("a")).value == "a"
    assert isinstance(expect_not_code_point('"')(string_to_input('"')), Failure)
    assert isinstance(expect_not_code_point('"')(string_to_input("")), Failure)
    assert isinstance(expect_not_code_point('"')(None), Failure)


def test_expect_several_uses_both_classes():
    parser = expect_several(lambda c: c == "-", str.isdigit)
    result = parser(string_to_input("-12x"))
    assert result.value == "-12"
    assert result.remaining.current_code_point() == "x"

    source = string_to_input("12")
    failed = parser(source)
    assert isinstance(failed, Failure)
    assert failed.remaining is source


def test_repeated():
    """Repeated consume las A hasta la B y nunca falla."""
    parser = repeated(expect_code_point("A"))

    result = parser(string_to_input("AAABCD"))
    assert result.value == ["A", "A", "A"]
    assert result.remaining.current_code_point() == "B"

    for text in ("B", ""):
        source = string_to_input(text)
        result = parser(source)
        assert isinstance(result, Success)
        assert result.value == []
        assert result.remaining is source


def test_repeated_stops_without_progress():
    source = string_to_input("ab")
    result = repeated(succeed("x"))(source)
    assert result.value == ["x"]
    assert result.remaining is source


def test_once_or_more():
    parser = once_or_more(expect_code_point("A"))

    result = parser(string_to_input("AAABCD"))
    assert len(result.value) == 3
    assert result.remaining.current_code_point() == "B"

    for text in ("B", ""):
        source = string_to_input(text)
        failed = parser(source)
        assert isinstance(failed, Failure)
        assert failed.remaining is source


def test_or_else_is_committed_choice():
    parser = or_else(expect_string("A"), expect_string("B"))

    result = parser(string_to_input("AC"))
    assert result.value == "A"
    assert result.remaining.current_code_point() == "C"

    result = parser(string_to_input("BC"))
    assert result.value == "B"
    assert result.remaining.current_code_point() == "C"


def test_or_else_never_tries_longer_alternative():
    parser = or_else(expect_string("A"), expect_string("AB"))
    result = parser(string_to_input("AB"))
    assert result.value == "A"
    assert result.remaining.current_code_point() == "B"


def test_and_then():
    parser = and_then(expect_code_point("A"), expect_code_point("B"))

    source = string_to_input("A")
    failed = parser(source)
    assert isinstance(failed, Failure)
    assert failed.remaining is source

    result = parser(string_to_input("AB"))
    assert result.value == Pair("A", "B")
    assert result.remaining is None

    result = parser(string_to_input("ABC"))
    assert result.value == Pair("A", "B")
    assert result.remaining.current_code_point() == "C"


def test_and_then_failure_restores_outer_input():
    source = string_to_input("AAC")
    parser = and_then(expect_string("AA"), expect_code_point("B"))
    failed = parser(source)
    assert isinstance(failed, Failure)
    assert failed.remaining is source


def test_convert_first_second():
    pair = and_then(expect_code_point("A"), expect_code_point("B"))
    source = string_to_input("AB")

    assert convert(pair, lambda _: 42)(source).value == 42
    assert first(pair)(source).value == "A"
    assert second(pair)(source).value == "B"
    # proyectar algo que no es un par lo deja igual
    assert first(expect_code_point("A"))(source).value == "A"

    failed = convert(expect_code_point("X"), lambda _: 42)(source)
    assert isinstance(failed, Failure)


def test_optional():
    source = string_to_input("y")

    result = optional(expect_code_point("x"))(source)
    assert result.value is NOTHING
    assert result.remaining is source

    result = optional(succeed(""))(source)
    assert result.value == ""

    result = optional(expect_code_point("y"))(source)
    assert result.value == "y"
    assert result.remaining is None


def test_repeat_and_fold_left():
    count_a = repeat_and_fold_left(expect_code_point("a"), 0, lambda n, _: n + 1)

    result = count_a(string_to_input("aaabcde"))
    assert result.value == 3
    assert result.remaining.current_code_point() == "b"

    result = count_a(string_to_input("abcde"))
    assert result.value == 1

    source = string_to_input("bcde")
    result = count_a(source)
    assert result.value == 0
    assert result.remaining is source


def test_repeat_and_fold_left_tries_exhausted_input():
    """Sobre la entrada agotada el parser se prueba una vez."""
    result = repeated(succeed("x"))(None)
    assert result.value == ["x"]
    assert result.remaining is None

    count_a = repeat_and_fold_left(expect_code_point("a"), 0, lambda n, _: n + 1)
    result = count_a(string_to_input("aa"))
    assert result.value == 2
    assert result.remaining is None


def test_repeat_and_fold_left_keeps_seed_untouched():
    seed = object()
    source = string_to_input("zzz")
    result = repeat_and_fold_left(expect_code_point("a"), seed, lambda acc, _: acc)(source)
    assert result.value is seed
    assert result.remaining is source


def test_bind():
    """El segundo parser depende del identificador leído."""
    def same_name_again(name):
        return second(and_then(expect_code_point(" "), expect_string(name)))

    parser = bind(expect_identifier, same_name_again)

    result = parser(string_to_input("ning ning"))
    assert result.value == "ning"
    assert result.remaining is None

    source = string_to_input("ning nong")
    failed = parser(source)
    assert isinstance(failed, Failure)
    assert failed.remaining is source


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
