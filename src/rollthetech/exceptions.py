"""Custom exceptions for rollthetech."""


class RollTheTechError(Exception):
    """Base exception for rollthetech."""


class ConfigError(RollTheTechError):
    """Raised when configuration is missing or invalid."""


class FetchError(RollTheTechError):
    """Raised when the markdown document cannot be retrieved."""

    def __init__(self, reason: str = ""):
        self.reason = reason
        message = "MD data request failed"
        super().__init__(f"{message}: {reason}" if reason else message)


class ParseError(RollTheTechError):
    """Raised when the document does not have the expected structure."""

    def __init__(self, reason: str = ""):
        self.reason = reason
        message = "MD parse failed"
        super().__init__(f"{message}: {reason}" if reason else message)


class EmptyTaxonomyError(ParseError):
    """Raised when there is nothing to choose from."""
