"""Domain errors."""


class InvalidInputError(ValueError):
    """Raised when caller or store input cannot be interpreted."""
