"""Console input parsing.

Numbers that fail to parse raise InputParseError; the read_* helpers print the
error and ask again for the same field. EOFError is left to the caller.
"""

from decimal import Decimal, InvalidOperation

from errors import InputParseError, InvalidMenuChoiceError

# Largest accepted amount is below 10**16
MAX_AMOUNT_EXPONENT = 15


def parse_account_number(text: str) -> int:
    """Parse an account number.

    Raises:
        InputParseError: If text is not an integer.
    """
    try:
        return int(text.strip())
    except ValueError:
        raise InputParseError(text)


def parse_amount(text: str) -> Decimal:
    """Parse a money amount as a finite Decimal.

    Raises:
        InputParseError: If text is not a finite decimal number, or its
            magnitude is 10**16 or more.
    """
    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        raise InputParseError(text)

    if not amount.is_finite() or amount.adjusted() > MAX_AMOUNT_EXPONENT:
        raise InputParseError(text)
    return amount


def parse_choice(text: str) -> int:
    """Parse a menu selection.

    Raises:
        InvalidMenuChoiceError: If text is not an integer.
    """
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidMenuChoiceError(text)


def read_account_number(prompt: str = "Enter Account Number: ") -> int:
    while True:
        try:
            return parse_account_number(input(prompt))
        except InputParseError as e:
            print(e)


def read_amount(prompt: str) -> Decimal:
    while True:
        try:
            return parse_amount(input(prompt))
        except InputParseError as e:
            print(e)
