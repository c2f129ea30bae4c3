"""Lender table parsing services."""

from .line_reader import LineReader
from .parser import TableParser, infer_cell, parse

__all__ = ["LineReader", "TableParser", "infer_cell", "parse"]
