from dataclasses import dataclass

from loguru import logger

from table_harvest import document
from table_harvest.naming import normalize_name


@dataclass(frozen=True)
class LocatedTable:
    element: object
    index: int
    name: str = ""


def table_name(table, config):
    """
    Name a table after the nearest preceding sibling that looks like a
    heading. Only the text before the first separator is used, e.g.
    "Sales Q1: figures in EUR" -> "sales_q1".
    """
    heading = document.preceding_match(table, config.header_selector)
    if heading is None:
        return ""
    text = heading.get_text()
    if config.table_name_separator:
        text = text.split(config.table_name_separator, 1)[0]
    return normalize_name(text)


def locate_tables(soup, config):
    """
    Yield a LocatedTable for every table in document order.

    Each table is pruned of script/style/noscript before it is handed
    out. Indices count every table, nested ones included, whether or not
    it ends up producing data.
    """
    for index, table in enumerate(document.find_all(soup, "table")):
        removed = document.prune(table, config.pruned_tags)
        name = table_name(table, config)
        logger.debug(f"Located table {index} (name={name!r}, pruned {removed} tags)")
        yield LocatedTable(element=table, index=index, name=name)
