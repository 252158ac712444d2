"""Account service for ledger operations."""

from decimal import Decimal
from typing import List, Optional

from errors import AccountNotFoundError, LedgerError
from logger import get_logger
from models.account import Account

logger = get_logger()


class AccountService:
    """Service for managing accounts held in a registry."""

    def __init__(self, registry):
        """Initialize the account service.

        Args:
            registry: AccountRegistry holding the session's accounts.
        """
        self.registry = registry

    def find(self, account_number: int) -> Optional[Account]:
        """Get a single account by number.

        Returns:
            Account object if found, None otherwise.
        """
        return self.registry.find(account_number)

    def get(self, account_number: int) -> Account:
        """Get a single account by number, raising if it is missing.

        Raises:
            AccountNotFoundError: If no account has this number.
        """
        account = self.registry.find(account_number)
        if account is None:
            logger.info(f"Account {account_number} not found")
            raise AccountNotFoundError(account_number)
        return account

    def find_all(self) -> List[Account]:
        """Get all accounts, ordered by account number."""
        return self.registry.find_all()

    def search_by_name(self, keyword: str) -> List[Account]:
        """Get accounts whose holder name contains keyword (case-insensitive)."""
        return self.registry.find_by_name(keyword)

    def exists(self, account_number: int) -> bool:
        return account_number in self.registry

    def create(self, account_number: int, name: str, initial_balance: Decimal) -> Account:
        """Open a new account.

        Raises:
            DuplicateAccountError: If the account number is taken.
        """
        account = self.registry.create(account_number, name, initial_balance)
        logger.info(f"Created account {account_number} ({name}) with balance {initial_balance}")
        if initial_balance < 0:
            logger.warning(f"Account {account_number} opened with negative balance {initial_balance}")
        return account

    def deposit(self, account_number: int, amount: Decimal) -> Account:
        """Deposit into an account.

        Raises:
            AccountNotFoundError: If the account does not exist.
            InvalidAmountError: If amount is not positive, or the new
                balance cannot be held exactly.
        """
        account = self.get(account_number)
        try:
            account.deposit(amount)
        except LedgerError as e:
            logger.info(f"Rejected deposit of {amount} to {account_number}: {e}")
            raise

        logger.info(f"Deposited {amount} to {account_number}, balance {account.balance}")
        return account

    def withdraw(self, account_number: int, amount: Decimal) -> Account:
        """Withdraw from an account.

        Raises:
            AccountNotFoundError: If the account does not exist.
            InvalidAmountError: If amount is not positive, or the new
                balance cannot be held exactly.
            InsufficientFundsError: If amount exceeds the balance.
        """
        account = self.get(account_number)
        try:
            account.withdraw(amount)
        except LedgerError as e:
            logger.info(f"Rejected withdrawal of {amount} from {account_number}: {e}")
            raise

        logger.info(f"Withdrew {amount} from {account_number}, balance {account.balance}")
        return account

    def history(self, account_number: int) -> List[str]:
        """Get an account's transaction history, oldest first.

        Raises:
            AccountNotFoundError: If the account does not exist.
        """
        return list(self.get(account_number).transaction_history)

    def close(self, account_number: int) -> None:
        """Close an account, discarding its balance and history.

        Raises:
            AccountNotFoundError: If the account does not exist.
        """
        if not self.registry.delete(account_number):
            logger.info(f"Close requested for missing account {account_number}")
            raise AccountNotFoundError(account_number)

        logger.info(f"Closed account {account_number}")
