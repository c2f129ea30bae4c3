"""Domain exceptions."""


class FormatError(ValueError):
    """Raised when lender table text cannot be parsed into records."""
