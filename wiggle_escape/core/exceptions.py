"""Custom exception hierarchy for board generation."""


class WiggleEscapeError(Exception):
    """Base exception for generator failures."""


class ConfigError(WiggleEscapeError, ValueError):
    """Raised when generator input violates its documented constraints."""


class LevelFormatError(WiggleEscapeError):
    """Raised when a persisted level document cannot be parsed."""


class SolvabilityError(WiggleEscapeError):
    """Raised when a generated board fails its final solvability check."""


class ValidationError(WiggleEscapeError):
    """Raised when the board integrity checks fail."""
