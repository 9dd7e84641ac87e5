"""Configuration defaults and validation for myls.

Values reach the core as constructor arguments; nothing is read from the
environment or from files.
"""

from __future__ import annotations


# Maximum number of entries retained per directory listing
DEFAULT_MAX_ENTRIES = 2000

# Directory enumeration parallelism (1 = sequential)
DEFAULT_WORKERS = 1

# Substituted when no operand survives classification
CURRENT_DIRECTORY = "."


def validate_max_entries(value: int) -> int:
    """Validate the per-directory capacity ceiling.

    Args:
        value: Requested capacity.

    Returns:
        The value, unchanged.

    Raises:
        ConfigurationError: If value is not a positive integer.

    Example:
        >>> validate_max_entries(2000)
        2000
    """
    from myls.core.exceptions import ConfigurationError

    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError("max_entries", value)
    return value


def validate_workers(value: int) -> int:
    """Validate the number of enumeration workers.

    Raises:
        ConfigurationError: If value is not a positive integer.
    """
    from myls.core.exceptions import ConfigurationError

    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError("workers", value)
    return value
