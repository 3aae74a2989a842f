from table_harvest.config import HarvestConfig
from table_harvest.extractor import ExtractedTable, extract_table
from table_harvest.locator import LocatedTable, locate_tables
from table_harvest.naming import normalize_name
from table_harvest.pipeline import harvest
from table_harvest.writer import output_filename, write_table

__version__ = "0.1.0"
