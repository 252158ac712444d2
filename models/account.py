from dataclasses import dataclass, field
from decimal import Decimal, DecimalException, Inexact, localcontext
from typing import List

from errors import InsufficientFundsError, InvalidAmountError


def format_amount(amount: Decimal) -> str:
    """Render an amount the way history entries record it, e.g. 500.000000."""
    return f"{amount:.6f}"


def _exact(operation, message: str) -> Decimal:
    """Run a balance calculation that must not round or overflow.

    Raises:
        InvalidAmountError: With message, if the result is not exact.
    """
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            return operation()
        except DecimalException:
            raise InvalidAmountError(message)


@dataclass
class Account:
    account_number: int  # unique key in the registry
    name: str
    balance: Decimal  # never driven below zero by a withdrawal
    transaction_history: List[str] = field(default_factory=list)  # oldest first

    @classmethod
    def open(cls, account_number: int, name: str, initial_balance: Decimal) -> "Account":
        """Create an Account whose history starts with the opening balance.

        The initial balance is taken as given, negative values included.
        """
        account = cls(account_number=account_number, name=name, balance=initial_balance)
        account.transaction_history.append(
            f"Account created with balance Rs. {format_amount(initial_balance)}"
        )
        return account

    def deposit(self, amount: Decimal) -> Decimal:
        """Add a strictly positive amount to the balance.

        Returns:
            The new balance.

        Raises:
            InvalidAmountError: If amount is zero or negative,
                or the new balance cannot be held exactly.
        """
        if amount <= 0:
            raise InvalidAmountError("Invalid amount.")

        self.balance = _exact(lambda: self.balance + amount, "Invalid amount.")
        self.transaction_history.append(f"Deposited Rs. {format_amount(amount)}")
        return self.balance

    def withdraw(self, amount: Decimal) -> Decimal:
        """Take a strictly positive amount, no larger than the balance.

        Returns:
            The new balance.

        Raises:
            InvalidAmountError: If amount is zero or negative.
            InvalidAmountError: If the new balance cannot be held exactly.
            InsufficientFundsError: If amount exceeds the balance.
        """
        if amount <= 0:
            raise InvalidAmountError("Invalid or insufficient amount.")
        if amount > self.balance:
            raise InsufficientFundsError("Invalid or insufficient amount.")

        self.balance = _exact(
            lambda: self.balance - amount, "Invalid or insufficient amount."
        )
        self.transaction_history.append(f"Withdrawn Rs. {format_amount(amount)}")
        return self.balance

    def display(self) -> str:
        """Render the account number, name and balance, one per line."""
        return "\n".join(
            [
                f"Account Number: {self.account_number}",
                f"Name: {self.name}",
                f"Balance: Rs. {self.balance:.2f}",
            ]
        )

    def show_history(self) -> str:
        """Render the transaction history, oldest entry first."""
        lines = ["--- Transaction History ---"]
        lines.extend(self.transaction_history)
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert account to dictionary for summaries and logging."""
        return {
            "account_number": self.account_number,
            "name": self.name,
            "balance": str(self.balance),
            "transactions": len(self.transaction_history),
        }
