"""
Centralized configuration for the page calculator.

All configurable values are loaded from environment variables with sensible defaults.
"""

import os


def _env_bool(name: str, default: str) -> bool:
    """Read a boolean flag from the environment ("true", "1" or "yes" enable it)."""
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Config:
    """Pagination defaults loaded from environment variables."""

    # Defaults used when a caller omits page size / button count
    DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    DEFAULT_BUTTON_COUNT: int = int(os.getenv("DEFAULT_BUTTON_COUNT", "7"))

    # Largest offset or count a calculator may produce (signed 32-bit by default)
    MAX_INTEGER: int = int(os.getenv("PAGINATION_MAX_INTEGER", str(2**31 - 1)))

    # Fail on a current page past the last page; when False, clamp to the last page
    STRICT_PAGE_RANGE: bool = _env_bool("PAGINATION_STRICT", "true")

    # Tag given to the current page in button mappings
    ACTIVE_CLASS: str = "active"

    # Sentinel for a navigation target that is not available
    NOT_AVAILABLE: int = -1


# Global config instance
config = Config()
