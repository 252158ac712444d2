"""Ledger exceptions.

Every error carries the message shown to the user at the menu.
"""


class LedgerError(Exception):
    """Base class for recoverable ledger errors."""


class DuplicateAccountError(LedgerError):
    """Raised when creating an account whose number is already taken."""

    def __init__(self, account_number: int):
        super().__init__("Account already exists!")
        self.account_number = account_number


class AccountNotFoundError(LedgerError):
    """Raised when an operation addresses a missing account number."""

    def __init__(self, account_number: int):
        super().__init__("Account not found.")
        self.account_number = account_number


class InvalidAmountError(LedgerError):
    """Raised for a non-positive deposit or withdrawal amount."""


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal exceeds the balance."""


class InvalidMenuChoiceError(LedgerError):
    """Raised for a menu selection with no matching action."""

    def __init__(self, choice: object = None):
        super().__init__("Invalid choice. Try again.")
        self.choice = choice


class InputParseError(LedgerError):
    """Raised when console input cannot be parsed as the expected number."""

    def __init__(self, text: str):
        super().__init__("Invalid number. Try again.")
        self.text = text
