"""Tests for console input parsing."""

from decimal import Decimal

import pytest

from cli.prompts import (
    parse_account_number,
    parse_amount,
    parse_choice,
    read_account_number,
    read_amount,
)
from errors import InputParseError, InvalidMenuChoiceError


class TestParsing:
    """Tests for the parse_* functions."""

    def test_parse_account_number(self):
        assert parse_account_number(" 100 \n") == 100

    @pytest.mark.parametrize("text", ["", "abc", "12.5", "1e3"])
    def test_parse_account_number_rejects(self, text):
        with pytest.raises(InputParseError, match="Invalid number. Try again."):
            parse_account_number(text)

    @pytest.mark.parametrize(
        "text,expected",
        [("500", Decimal("500")), ("500.0", Decimal("500.0")), ("-3.25", Decimal("-3.25"))],
    )
    def test_parse_amount(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize(
        "text", ["", "ten", "NaN", "inf", "-Infinity", "1e1000000", "1e16", "-12345678901234567"]
    )
    def test_parse_amount_rejects(self, text):
        with pytest.raises(InputParseError):
            parse_amount(text)

    def test_parse_amount_accepts_largest_amount(self):
        assert parse_amount("9999999999999999.99") == Decimal("9999999999999999.99")

    def test_parse_choice_rejects_text(self):
        with pytest.raises(InvalidMenuChoiceError) as exc_info:
            parse_choice("exit")

        assert exc_info.value.choice == "exit"


class TestReadHelpers:
    """Tests for the re-prompting read_* helpers."""

    def test_read_account_number_reprompts(self, feed_input, capsys):
        feed_input("abc", "", "42")

        assert read_account_number() == 42

        out = capsys.readouterr().out
        assert out.count("Invalid number. Try again.") == 2

    def test_read_amount_reprompts(self, feed_input, capsys):
        feed_input("nan", "12.50")

        assert read_amount("Enter amount: ") == Decimal("12.50")
        assert "Invalid number. Try again." in capsys.readouterr().out

    def test_read_propagates_end_of_input(self, feed_input):
        feed_input()

        with pytest.raises(EOFError):
            read_amount("Enter amount: ")
