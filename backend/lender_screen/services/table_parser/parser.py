"""Lender table parser producing typed lender records."""

import logging
import math
import re
from typing import List, Optional

from lender_screen.core.exceptions import FormatError
from lender_screen.models.domain.context import DEFAULT_CONTEXT, ScreeningContext
from lender_screen.models.domain.lender import (
    LENDER_NAME,
    Cell,
    LenderRecord,
    NumberCell,
    TextCell,
)
from lender_screen.services.table_parser.line_reader import LineReader

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def infer_cell(raw: str) -> Cell:
    """
    Infer the cell type of a raw field.

    A trimmed, non-empty value that is entirely a finite decimal number
    becomes a NumberCell; anything else is kept as trimmed text.
    """
    value = raw.strip()
    if value and _DECIMAL.fullmatch(value):
        number = float(value)
        if math.isfinite(number):
            return NumberCell(number)
    return TextCell(value)


class TableParser:
    """Parser turning delimited lender table text into LenderRecords."""

    def __init__(self, context: Optional[ScreeningContext] = None):
        """
        Initialize the parser.

        Args:
            context: Screening context (delimiter and debug flag)
        """
        self.context = context or DEFAULT_CONTEXT

    def parse(self, text: str) -> List[LenderRecord]:
        """
        Parse table text into lender records.

        The first non-blank line is the header. Data rows map positionally
        onto the header; rows without a Lender Name are discarded.

        Args:
            text: Full table content

        Returns:
            Lender records in input row order

        Raises:
            FormatError: If the text has fewer than two non-blank lines
        """
        lines = LineReader.split_lines(text or "")
        if len(lines) < 2:
            raise FormatError("CSV must have at least a header row and one data row")

        delimiter = self.context.delimiter
        headers = [h.strip() for h in LineReader.split_fields(lines[0], delimiter)]

        records: List[LenderRecord] = []
        skipped = 0
        for line in lines[1:]:
            fields = LineReader.split_fields(line, delimiter)
            cells = {
                header: infer_cell(fields[index] if index < len(fields) else "")
                for index, header in enumerate(headers)
            }

            name_cell = cells.get(LENDER_NAME)
            if name_cell is None or not str(name_cell).strip():
                skipped += 1
                continue

            records.append(LenderRecord(cells))

        if skipped:
            logger.debug(f"Discarded {skipped} rows without a lender name")

        if self.context.debug:
            logger.info(f"Table headers: {headers}")
            if records:
                logger.info(f"Sample row: {records[0].to_dict()}")

        logger.info(f"Parsed {len(records)} lender records")
        return records


def parse(text: str, context: Optional[ScreeningContext] = None) -> List[LenderRecord]:
    """Parse lender table text with a one-off TableParser."""
    return TableParser(context).parse(text)
