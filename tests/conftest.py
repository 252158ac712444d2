"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from services.base import Services


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "tally",
        log_level="DEBUG",
        console_log_level="WARNING",
        log_dir=tmp_path / "tally" / "logs",
    )


@pytest.fixture
def services(test_config):
    """Create a Services container with a fresh, empty registry.

    Args:
        test_config: Test configuration fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config)


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of answers.

    Once the answers run out, input() raises EOFError like a closed stdin.

    Returns:
        Callable taking the answers, in order.
    """

    def _feed(*answers):
        remaining = list(answers)

        def fake_input(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed
