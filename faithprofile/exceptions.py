"""Error types raised by the scoring engine.

Missing or malformed answers are never errors: they are absorbed as neutral
defaults by the scorers.  The only fatal condition is a broken catalog or
weight table, which must stop the engine before it produces any result.
"""


class FaithProfileError(Exception):
    """Base class for engine errors."""


class ConfigurationError(FaithProfileError):
    """The profile catalog, contribution tables or parameters are unusable."""

    def __init__(self, message: str, problems: list[str] | None = None) -> None:
        self.problems = problems or []
        if self.problems:
            message = f"{message}: " + "; ".join(self.problems)
        super().__init__(message)
