"""Interactive menu loop."""

from cli import accounts
from cli.prompts import parse_choice
from errors import InvalidMenuChoiceError
from logger import get_logger

logger = get_logger()

EXIT_CHOICE = 8

# (choice, label, handler); the exit entry has no handler
MENU = [
    (1, "Create Account", accounts.cmd_create),
    (2, "Deposit Money", accounts.cmd_deposit),
    (3, "Withdraw Money", accounts.cmd_withdraw),
    (4, "Display Account", accounts.cmd_display),
    (5, "Search Account", accounts.cmd_search),
    (6, "Transaction History", accounts.cmd_history),
    (7, "Close Account", accounts.cmd_close),
    (EXIT_CHOICE, "Exit", None),
    (9, "List Accounts", accounts.cmd_list),
    (10, "Search by Name", accounts.cmd_search_by_name),
    (11, "Bank Summary", accounts.cmd_summary),
]

HANDLERS = {choice: handler for choice, _, handler in MENU if handler is not None}


def print_menu():
    print("\n====== Bank Management System ======")
    for choice, label, _ in MENU:
        print(f"{choice}. {label}")


def dispatch(choice: int, services) -> None:
    """Run the handler for a menu choice.

    Raises:
        InvalidMenuChoiceError: If no handler is registered for choice.
    """
    handler = HANDLERS.get(choice)
    if handler is None:
        raise InvalidMenuChoiceError(choice)
    handler(services)


def run_session(services) -> None:
    """Show the menu and dispatch choices until exit or end of input."""
    logger.debug("Session started")

    while True:
        print_menu()
        try:
            text = input("Enter your choice: ")
            choice = parse_choice(text)
            if choice == EXIT_CHOICE:
                break
            dispatch(choice, services)
        except InvalidMenuChoiceError as e:
            logger.debug(f"Invalid menu choice {e.choice!r}")
            print(e)
        except EOFError:
            print()
            logger.debug("Input closed")
            break

    print("Thank you for using the system!")
    logger.debug(f"Session ended with {len(services.registry)} open accounts")
