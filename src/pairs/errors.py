"""Errors raised while building a board."""


class BoardGenerationError(ValueError):
    """Base class for boards that cannot be generated."""


class InvalidDimension(BoardGenerationError):
    """The board side is odd, not positive, or not an integer."""


class AlphabetExhausted(BoardGenerationError):
    """The symbol alphabet holds fewer distinct symbols than the board needs pairs."""
