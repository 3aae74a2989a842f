import os

import pandas as pd
from loguru import logger

CSV_OPTIONS = {"index": False, "lineterminator": "\n", "encoding": "utf-8"}


def output_filename(base_name, index, table_name=""):
    if table_name:
        return f"{base_name}.table_{index}.{table_name}.csv"
    return f"{base_name}.table_{index}.csv"


def to_frame(table):
    """
    Records as a DataFrame laid out by the column registry. Every value
    stays a string; fields a record lacks are written as empty cells.
    """
    return pd.DataFrame.from_records(table.records, columns=table.columns)


def to_csv(table, path=None):
    """CSV text of the table, or write it to path when one is given."""
    return to_frame(table).to_csv(path, **CSV_OPTIONS)


def write_table(table, base_name, index, table_name, output_dir):
    """Write one table to CSV. Returns the path, or None if there was nothing to write."""
    if table.is_empty:
        return None

    output = os.path.join(output_dir, output_filename(base_name, index, table_name))
    to_csv(table, output)
    logger.debug(f"Wrote {len(table.records)} rows x {len(table.columns)} columns to {output}")
    return output
