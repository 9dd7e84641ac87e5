"""Domain exceptions for myls.

All library errors inherit from MylsError, allowing callers to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations


class MylsError(Exception):
    """Base class for all myls exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class InvalidOptionError(MylsError):
    """Raised when a flag token contains an unrecognized option character.

    Attributes:
        option: The offending option character.
    """

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"myls: invalid option -- {option}")

    @property
    def recovery_hint(self) -> str:
        """List the supported flags."""
        return "Supported options are -a (show hidden) and -t (sort by time)"


class PathAccessError(MylsError):
    """Raised when a filesystem probe, open or stat fails for a path.

    Attributes:
        path: The path that could not be accessed.
        cause: The underlying OSError, if any.
    """

    def __init__(
        self,
        message: str,
        path: str,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the path."""
        return f"Verify the path exists and is readable: {self.path}"


class ConfigurationError(MylsError):
    """Raised for invalid configuration values (capacity, worker count).

    Attributes:
        setting: Name of the offending setting.
        value: The rejected value.
    """

    def __init__(self, setting: str, value: object) -> None:
        self.setting = setting
        self.value = value
        super().__init__(f"Invalid value for {setting}: {value!r}")

    @property
    def recovery_hint(self) -> str:
        """Suggest a valid range."""
        return f"{self.setting} must be a positive integer"
