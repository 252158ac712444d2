"""Account reporting tools."""

from decimal import Decimal
from typing import Dict, Union


def get_bank_summary(services) -> Dict[str, Union[int, Decimal]]:
    """Summarize the accounts currently held by the session.

    Args:
        services: Services container with account service.

    Returns:
        Dictionary with:
        - "total_accounts": number of open accounts
        - "total_balance": sum of all balances (Decimal)

    Example:
        {"total_accounts": 2, "total_balance": Decimal("1250.00")}
    """
    accounts = services.accounts.find_all()
    total_balance = sum((account.balance for account in accounts), Decimal("0"))

    return {
        "total_accounts": len(accounts),
        "total_balance": total_balance,
    }
