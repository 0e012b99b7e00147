"""2D table of characters drawn into the font image.

One line of the text file is one row, each character of the line is one
column. Rows can have different lengths.
"""

from .cells import ConfigError


class TextTable:
    "read only table of characters, rows are tuples of single characters"

    def __init__(self, rows):
        self.rows = tuple(tuple(row) for row in rows)
        if not self.rows:
            raise ConfigError("text table has no row")

    @property
    def n_rows(self):
        return len(self.rows)

    @property
    def n_columns(self):
        # at least one column, even with only empty rows
        return max(1, max(len(row) for row in self.rows))

    def chars(self):
        "all characters, row by row"
        for row in self.rows:
            yield from row

    def cells(self):
        "(row, column, character) for every non empty cell"
        for row_i, row in enumerate(self.rows):
            for col_i, ch in enumerate(row):
                yield row_i, col_i, ch

    def __repr__(self):
        return "TextTable(%d rows x %d columns)" % (self.n_rows, self.n_columns)


def chomp(line):
    "remove one line terminator"
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def load_text(lines):
    "build a table from lines, only removing line terminators"
    return TextTable(chomp(line) for line in lines)


def read_text(filename, encoding="latin-1"):
    with open(filename, "r", encoding=encoding, newline="") as f:
        return load_text(f)
