"""Short-flag scanning for the myls command line.

Every token beginning with ``-`` is a flag token; each character after the
dash is one option. Tokens may combine options (``-at``) and may appear
anywhere among the operands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from myls.core.exceptions import InvalidOptionError
from myls.core.models import ListingOptions


if TYPE_CHECKING:
    from collections.abc import Iterable


FLAG_PREFIX = "-"


def is_flag(token: str) -> bool:
    """Whether a command-line token is a flag token rather than an operand."""
    return token.startswith(FLAG_PREFIX)


def parse_options(tokens: Iterable[str]) -> ListingOptions:
    """Scan flag tokens for ``-a`` and ``-t``.

    Args:
        tokens: Raw command-line tokens (flags and operands, any order).

    Returns:
        ListingOptions with the flags that were seen.

    Raises:
        InvalidOptionError: On the first unrecognized option character.
    """
    show_all = False
    sort_time = False
    for token in tokens:
        if not is_flag(token):
            continue
        for char in token[1:]:
            if char == "a":
                show_all = True
            elif char == "t":
                sort_time = True
            else:
                raise InvalidOptionError(char)
    return ListingOptions(show_all=show_all, sort_time=sort_time)


def operands_of(tokens: Iterable[str]) -> list[str]:
    """Return the non-flag tokens, in order."""
    return [token for token in tokens if not is_flag(token)]
