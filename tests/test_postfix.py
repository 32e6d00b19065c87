import io
import math

import pytest

from drillbook.postfix import PostfixError, evaluate_postfix, format_result, main


@pytest.mark.parametrize("left,right", [(3.0, 4.0), (-2.5, 8.0), (10.0, 0.5)])
def test_binary_operators_match_float_arithmetic(left, right):
    assert evaluate_postfix(f"{left} {right} +") == left + right
    assert evaluate_postfix(f"{left} {right} -") == left - right
    assert evaluate_postfix(f"{left} {right} *") == left * right
    assert evaluate_postfix(f"{left} {right} /") == left / right


def test_operand_order_is_left_then_right():
    assert evaluate_postfix("2 10 -") == -evaluate_postfix("10 2 -")


def test_power_and_modulo_of_whole_numbers():
    assert evaluate_postfix("2 10 ^") == 2.0**10
    assert evaluate_postfix("17 5 %") == math.fmod(17.0, 5.0)


def test_modulo_by_zero_is_nan():
    result = evaluate_postfix("5 0 %")
    assert str(result) == "nan"


def test_fractional_power_of_negative_is_nan():
    result = evaluate_postfix("-8 0.5 ^")
    assert str(result) == "nan"


def test_nested_expression_equals_stepwise_evaluation():
    inner = evaluate_postfix("1 2 +")
    outer = evaluate_postfix(f"{inner} 4 *")
    assert evaluate_postfix("1 2 + 4 *") == outer


def test_top_of_stack_is_returned():
    assert evaluate_postfix("1 2 3") == evaluate_postfix("3")


@pytest.mark.parametrize("expression", ["+", "1 +", "1 2 + *"])
def test_missing_operand_raises(expression):
    with pytest.raises(PostfixError):
        evaluate_postfix(expression)


def test_bad_token_raises():
    with pytest.raises(PostfixError):
        evaluate_postfix("1 x +")


def test_empty_expression_raises():
    with pytest.raises(PostfixError):
        evaluate_postfix("   ")


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("1 0 /")


def test_format_whole_number():
    assert format_result(7.0) == "7"


def test_format_uses_six_significant_digits():
    assert format_result(1234567.0) == "1.23457e+06"


@pytest.mark.parametrize("value", [1 / 3, 2.0 / 7.0, 123.456789, -0.000123456789])
def test_format_round_trip_is_close(value):
    assert math.isclose(float(format_result(value)), value, rel_tol=1e-5)


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 4 +\nignored line\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == format_result(7.0) + "\n"


def test_main_division_by_zero_prints_nothing(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 0 /\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_underflow_returns_one(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 +\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == ""