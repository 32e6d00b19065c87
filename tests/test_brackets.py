import io

import pytest

from drillbook.brackets import is_balanced, main


@pytest.mark.parametrize("text", ["", "()", "[]", "{}", "{[()]}", "()[]{}"])
def test_balanced_strings(text):
    assert is_balanced(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "{{", "}{", "[[]"])
def test_unbalanced_strings(text):
    assert is_balanced(text) is False


@pytest.mark.parametrize("inner", ["", "()", "[{}]", "{[()]}()"])
@pytest.mark.parametrize("pair", ["()", "[]", "{}"])
def test_wrapping_balanced_stays_balanced(inner, pair):
    assert is_balanced(pair[0] + inner + pair[1]) is True


@pytest.mark.parametrize("left", ["()", "{[]}", "[()]"])
@pytest.mark.parametrize("right", ["{}", "([])", "[]{}"])
def test_concatenation_of_balanced_is_balanced(left, right):
    assert is_balanced(left + right) is True


@pytest.mark.parametrize("text", ["()", "{[()]}", "[]{}"])
def test_dropping_last_character_breaks_balance(text):
    assert is_balanced(text[:-1]) is False


def test_main_prints_yes_and_no(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n{[()]}\n{[(])}\n{{[[(())]]}}\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "YES\nNO\nYES\n"


def test_main_honours_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n()\n(\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["YES"]


def test_main_with_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out == ""