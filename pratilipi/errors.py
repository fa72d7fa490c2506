"""
Error types raised by the similarity engine.

Only InvalidInputError ever reaches a caller of ``analyze``; the other two are
raised by the AI-assisted engine and absorbed by the strategy selector.
"""


class PratilipiError(Exception):
    """Base class for all engine errors."""
    pass


class ConfigurationError(PratilipiError):
    """Raised when the AI backend has no usable credential or a policy file is invalid."""
    pass


class AIBackendError(PratilipiError):
    """Raised when the AI backend times out, fails, or returns an unusable response."""
    pass


class InvalidInputError(PratilipiError):
    """Raised when the candidate idea is missing its title or description."""
    pass
