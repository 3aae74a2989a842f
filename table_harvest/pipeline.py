import os
from dataclasses import dataclass, field

from loguru import logger

from table_harvest.document import read_document
from table_harvest.errors import InputPathError
from table_harvest.extractor import extract_table
from table_harvest.locator import locate_tables
from table_harvest.writer import write_table

HTML_EXTS = (".html", ".htm")


@dataclass
class FileReport:
    source: str
    written: list = field(default_factory=list)
    tables: int = 0
    skipped: int = 0


@dataclass
class RunReport:
    files: list = field(default_factory=list)
    failures: list = field(default_factory=list)

    @property
    def ok(self):
        return not self.failures

    @property
    def written(self):
        return [path for report in self.files for path in report.written]


def find_html_files(input_path):
    if os.path.isdir(input_path):
        return sorted(
            os.path.join(input_path, f) for f in os.listdir(input_path)
            if f.lower().endswith(HTML_EXTS)
            and os.path.isfile(os.path.join(input_path, f))
        )
    if os.path.isfile(input_path):
        return [input_path]
    raise InputPathError(f"input not found: {input_path}")


def source_base_name(path):
    return os.path.splitext(os.path.basename(path))[0]


def harvest_file(path, output_dir, config):
    """Extract every table of one HTML file into output_dir."""
    soup = read_document(path)
    base_name = source_base_name(path)
    report = FileReport(source=path)

    for located in locate_tables(soup, config):
        report.tables += 1
        table = extract_table(located.element, config)
        output = write_table(table, base_name, located.index, located.name, output_dir)
        if output is None:
            report.skipped += 1
            logger.info(f"No data found in Table {located.index} from {path}")
            continue
        report.written.append(output)
        logger.info(f"Table {located.index} from {path} saved to {output}")

    return report


def harvest(input_path, output_dir, config, keep_going=False):
    """
    Run every HTML file under input_path through the pipeline.

    By default the first failure propagates and ends the run. With
    keep_going, a failing file is recorded in the report and the
    remaining files are still processed.
    """
    files = find_html_files(input_path)
    if not files:
        logger.warning(f"No HTML files found in {input_path}")

    run = RunReport()
    for path in files:
        if not keep_going:
            run.files.append(harvest_file(path, output_dir, config))
            continue
        try:
            run.files.append(harvest_file(path, output_dir, config))
        except Exception as e:
            logger.error(f"[FAILED] {path}: {e}")
            run.failures.append((path, e))

    return run
