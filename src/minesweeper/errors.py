"""
Error types for the Minesweeper engine.
"""


class InvalidConfigurationError(ValueError):
    """Raised when a board cannot be built from the given configuration."""
