import pytest
from loguru import logger

from table_harvest.config import HarvestConfig
from table_harvest.document import parse_document


@pytest.fixture()
def config():
    return HarvestConfig()


@pytest.fixture()
def link_config():
    return HarvestConfig(attributes=["href"], elements=["a"])


@pytest.fixture()
def first_table():
    def _first_table(markup):
        return parse_document(markup).find("table")
    return _first_table


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # sinks added by the CLI point at streams pytest closes after each test
    logger.remove()
