"""Per-run screening context."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScreeningContext:
    """
    Options for one parse/classify pass.

    Attributes:
        debug: Log parsed headers, sample rows and per-row diagnostics
        delimiter: Field delimiter of the lender table
    """

    debug: bool = False
    delimiter: str = ","


DEFAULT_CONTEXT = ScreeningContext()
