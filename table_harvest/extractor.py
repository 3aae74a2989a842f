"""
Flatten one HTML table into records.

Every data cell turns into a group of columns named after its header (or
its position when the table has no header row):

    <base>_content                 text of the cell
    <base>_<attr>                  configured attribute on the cell
    <base>_<tag><i>_content        text of the i-th nested <tag>
    <base>_<tag><i>_<attr>         configured attribute on that element

Columns are registered in the order they are first produced, which makes
the output a pure function of the table markup and the configuration.
Rows that yield nothing but empty cell text are dropped, and so are the
columns only they would have introduced.
"""

from dataclasses import dataclass, field

from loguru import logger

from table_harvest import document
from table_harvest.naming import normalize_name

HEADER_CELL = "th"
CELL_TAGS = ["td", "th"]


@dataclass
class ExtractedTable:
    columns: list = field(default_factory=list)
    records: list = field(default_factory=list)

    @property
    def is_empty(self):
        return not self.records


class ColumnRegistry:
    """Distinct column names in first-seen order."""

    def __init__(self):
        self._names = {}

    def add(self, name):
        self._names.setdefault(name, None)

    def __len__(self):
        return len(self._names)

    def names(self):
        return list(self._names)


def table_rows(table):
    # rows of nested tables belong to those tables
    return [
        row for row in document.find_all(table, "tr")
        if document.owning_table(row) is table
    ]


def row_cells(row):
    return row.find_all(CELL_TAGS, recursive=False)


def split_header(rows):
    """
    Return (headers, data_rows). The first row holding a <th> defines the
    headers; it and everything above it are not data. Without such a row
    all rows are data.
    """
    for position, row in enumerate(rows):
        header_cells = row.find_all(HEADER_CELL, recursive=False)
        if header_cells:
            headers = [normalize_name(document.text_of(cell)) for cell in header_cells]
            return headers, rows[position + 1:]
    return [], rows


def base_column_name(headers, column_index):
    if column_index < len(headers) and headers[column_index]:
        return headers[column_index]
    return f"Column{column_index}"


def cell_fields(cell, base, config):
    """Yield (column, value) pairs for one cell."""
    yield f"{base}_content", document.text_of(cell)

    for attribute in config.attributes:
        value = document.attribute_of(cell, attribute)
        if value:
            yield f"{base}_{attribute}", value

    for tag_name in config.elements:
        for i, element in enumerate(document.find_all(cell, tag_name)):
            prefix = f"{base}_{tag_name}{i}"
            yield f"{prefix}_content", document.text_of(element)
            for attribute in config.attributes:
                value = document.attribute_of(element, attribute)
                if value:
                    yield f"{prefix}_{attribute}", value


def extract_table(table, config):
    headers, data_rows = split_header(table_rows(table))
    registry = ColumnRegistry()
    records = []

    for row in data_rows:
        record = {}
        has_data = False
        for column_index, cell in enumerate(row_cells(row)):
            base = base_column_name(headers, column_index)
            for column, value in cell_fields(cell, base, config):
                # colliding names: last write wins
                record[column] = value
                if value or column != f"{base}_content":
                    has_data = True
        if not has_data:
            continue
        for column in record:
            registry.add(column)
        records.append(record)

    logger.debug(
        f"Extracted {len(records)} records, {len(registry)} columns "
        f"({len(headers)} headers, {len(data_rows)} data rows)"
    )
    return ExtractedTable(columns=registry.names(), records=records)
