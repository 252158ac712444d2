"""In-memory account registry."""

from decimal import Decimal
from typing import Dict, List, Optional

from errors import DuplicateAccountError
from models.account import Account


class AccountRegistry:
    """Mapping from account number to Account.

    The registry lives as long as the session that owns it; nothing is
    persisted.
    """

    def __init__(self):
        self._accounts: Dict[int, Account] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_number: int) -> bool:
        return account_number in self._accounts

    def find(self, account_number: int) -> Optional[Account]:
        """Get a single account by number.

        Args:
            account_number: The account number to find.

        Returns:
            Account object if found, None otherwise.
        """
        return self._accounts.get(account_number)

    def find_all(self) -> List[Account]:
        """Get all accounts, ordered by account number."""
        return [self._accounts[number] for number in sorted(self._accounts)]

    def find_by_name(self, keyword: str) -> List[Account]:
        """Get accounts whose name contains keyword, ignoring case.

        Args:
            keyword: Substring to look for. An empty keyword matches every account.

        Returns:
            Matching accounts, ordered by account number.
        """
        keyword = keyword.lower()
        return [account for account in self.find_all() if keyword in account.name.lower()]

    def create(self, account_number: int, name: str, initial_balance: Decimal) -> Account:
        """Create and register a new account.

        Args:
            account_number: Number for the new account (must be unique).
            name: Account holder name.
            initial_balance: Opening balance, accepted as given.

        Returns:
            The created Account.

        Raises:
            DuplicateAccountError: If the number is already registered.
        """
        if self.find(account_number) is not None:
            raise DuplicateAccountError(account_number)

        account = Account.open(account_number, name, initial_balance)
        self._accounts[account_number] = account
        return account

    def delete(self, account_number: int) -> bool:
        """Remove an account regardless of its balance.

        Returns:
            True if account was deleted, False if not found.
        """
        return self._accounts.pop(account_number, None) is not None
