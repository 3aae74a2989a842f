"""
Document access for the harvester.

Everything the locator and extractor need from a parsed HTML page goes
through the helpers below, so the rest of the package never touches the
BeautifulSoup API directly.
"""

import os

from bs4 import BeautifulSoup
from loguru import logger

from table_harvest.errors import InputPathError

PARSER = "lxml"


def parse_document(markup):
    """
    Parse HTML bytes or text into a query-able tree.

    Bytes are decoded by BeautifulSoup itself (BOM, declared charset,
    then sniffing). Multi-valued attributes such as class are kept as the
    raw attribute string.
    """
    return BeautifulSoup(markup, PARSER, multi_valued_attributes=None)


def read_document(path):
    if not os.path.isfile(path):
        raise InputPathError(f"file not found: {path}")
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise InputPathError(f"cannot read {path}: {e}") from e

    soup = parse_document(data)
    logger.debug(f"Parsed {path} ({len(data)} bytes, encoding {soup.original_encoding})")
    return soup


def find_all(element, tag_name):
    """Descendants of element with the given tag, in document order."""
    return element.find_all(tag_name)


def text_of(element):
    return element.get_text().strip()


def attribute_of(element, name):
    value = element.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def matches(element, selector):
    return element.css.match(selector)


def preceding_match(element, selector):
    """Nearest preceding sibling element matching a CSS selector, or None."""
    if not selector:
        return None
    for sibling in element.find_previous_siblings(True):
        if matches(sibling, selector):
            return sibling
    return None


def prune(element, tag_names):
    removed = element.find_all(list(tag_names))
    # matches may be nested; extract() tolerates already detached tags
    for tag in removed:
        tag.extract()
    return len(removed)


def owning_table(element):
    return element.find_parent("table")
