"""Quote-aware splitting of delimited text into lines and fields."""

import re
from typing import List

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

QUOTE = '"'


class LineReader:
    """Utility for splitting raw delimited text."""

    @staticmethod
    def split_lines(text: str) -> List[str]:
        """
        Split text on any line-ending style and drop blank lines.

        Args:
            text: Raw table content

        Returns:
            Lines that contain at least one non-whitespace character
        """
        return [line for line in _LINE_BREAK.split(text) if line.strip()]

    @staticmethod
    def split_fields(line: str, delimiter: str = ",") -> List[str]:
        """
        Split one line into trimmed fields.

        A quote toggles the in-quotes state, a doubled quote inside quotes is
        a literal quote, and the delimiter is ignored inside quotes. An
        unterminated quote simply runs to the end of the line.

        Args:
            line: A single line of the table
            delimiter: Field delimiter

        Returns:
            List of trimmed field strings
        """
        fields: List[str] = []
        current: List[str] = []
        in_quotes = False
        i = 0

        while i < len(line):
            char = line[i]

            if char == QUOTE:
                if in_quotes and i + 1 < len(line) and line[i + 1] == QUOTE:
                    current.append(QUOTE)
                    i += 1
                else:
                    in_quotes = not in_quotes
            elif char == delimiter and not in_quotes:
                fields.append("".join(current).strip())
                current = []
            else:
                current.append(char)
            i += 1

        fields.append("".join(current).strip())
        return fields
