#!/usr/bin/env python3

from cli.prompts import read_account_number, read_amount
from errors import LedgerError
from logger import get_logger
from tools.accounts import get_bank_summary

logger = get_logger()


def cmd_create(services):
    """Interactively open a new account."""
    account_number = read_account_number()

    # Duplicates are rejected before asking for the rest of the fields
    if services.accounts.exists(account_number):
        print("Account already exists!")
        logger.info(f"Rejected duplicate account {account_number}")
        return

    name = input("Enter Name: ")
    initial_balance = read_amount("Enter Initial Balance: ")

    try:
        services.accounts.create(account_number, name, initial_balance)
    except LedgerError as e:
        print(e)
        return

    print("Account created successfully.")


def cmd_deposit(services):
    """Deposit money into an existing account."""
    account_number = read_account_number()
    if services.accounts.find(account_number) is None:
        print("Account not found.")
        return

    amount = read_amount("Enter amount to deposit: ")
    try:
        services.accounts.deposit(account_number, amount)
    except LedgerError as e:
        print(e)
        return

    print("Amount deposited successfully.")


def cmd_withdraw(services):
    """Withdraw money from an existing account."""
    account_number = read_account_number()
    if services.accounts.find(account_number) is None:
        print("Account not found.")
        return

    amount = read_amount("Enter amount to withdraw: ")
    try:
        services.accounts.withdraw(account_number, amount)
    except LedgerError as e:
        print(e)
        return

    print("Amount withdrawn successfully.")


def _show_account(services, prompt, found_message=None):
    account = services.accounts.find(read_account_number(prompt))
    if account is None:
        print("Account not found.")
        return

    if found_message:
        print(found_message)
    print(account.display())


def cmd_display(services):
    """Display an account's number, name and balance."""
    _show_account(services, "Enter Account Number: ")


def cmd_search(services):
    """Look up an account by number and display it."""
    _show_account(services, "Enter Account Number to search: ", "Account found!")


def cmd_history(services):
    """Print an account's transaction history, oldest first."""
    account = services.accounts.find(read_account_number())
    if account is None:
        print("Account not found.")
        return

    print()
    print(account.show_history())


def cmd_close(services):
    """Close an account unconditionally."""
    account_number = read_account_number("Enter Account Number to close: ")
    try:
        services.accounts.close(account_number)
    except LedgerError as e:
        print(e)
        return

    print("Account closed successfully.")


def cmd_list(services):
    """List all accounts ordered by account number."""
    accounts = services.accounts.find_all()

    if not accounts:
        print("No accounts found.")
        return

    print("\nAccounts:")
    print("=" * 40)
    for account in accounts:
        print(account.display())
        print("-" * 40)

    print(f"Total accounts: {len(accounts)}")


def cmd_search_by_name(services):
    """Find accounts whose holder name contains a keyword."""
    keyword = input("Enter name to search: ").strip()
    accounts = services.accounts.search_by_name(keyword)

    if not accounts:
        print("No matching accounts found.")
        return

    for account in accounts:
        print(account.display())
        print("-" * 40)

    print(f"Matching accounts: {len(accounts)}")


def cmd_summary(services):
    """Print the number of accounts and their total balance."""
    summary = get_bank_summary(services)

    print(f"Total accounts: {summary['total_accounts']}")
    print(f"Total balance: Rs. {summary['total_balance']:.2f}")
