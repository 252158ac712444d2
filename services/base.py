"""Base services container for dependency injection."""

from config import Config
from services.registry import AccountRegistry


class Services:
    """Container for all application services.

    One container is built per console session and owns that session's
    account registry, so tests can inject a fresh or pre-filled registry.

    Args:
        config: Application configuration object.
        registry: Optional account registry for testing. A new, empty one is
            created when omitted.
    """

    def __init__(self, config: Config, registry=None):
        self.config = config
        self.registry = registry if registry is not None else AccountRegistry()

        # Lazy import to avoid circular dependencies
        from services.accounts import AccountService

        self.accounts = AccountService(self.registry)
