"""
Permissive CSV tokenizer

Lines are split first, then each line is scanned character by character.
Quoted fields may contain commas and doubled quotes, but not line breaks:
a quoted newline ends the row like any other.
"""

import re
from typing import List

_LINE_BREAK = re.compile(r"\r?\n")

# Whitespace plus the byte order mark, which spreadsheet exports prepend
_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def parse_csv(csv_text: str) -> List[List[str]]:
    """
    Parse delimited text into rows of string fields

    Args:
        csv_text: Raw CSV content

    Returns:
        List of rows, each a list of stripped field strings. Rows are not
        padded or truncated to a common width.
    """
    rows = []

    for line in _LINE_BREAK.split(csv_text):
        if not _trim(line):
            continue
        rows.append(_parse_line(line))

    return rows


def _parse_line(line: str) -> List[str]:
    """Tokenize a single line; an unterminated quote runs to end of line"""
    row = []
    current = []
    in_quotes = False
    i = 0

    while i < len(line):
        char = line[i]

        if char == '"':
            if in_quotes and line[i + 1:i + 2] == '"':
                current.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == ',' and not in_quotes:
            row.append(_trim(''.join(current)))
            current = []
        else:
            current.append(char)
        i += 1

    row.append(_trim(''.join(current)))
    return row


def _trim(text: str) -> str:
    return _EDGE_SPACE.sub('', text)
