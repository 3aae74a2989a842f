import pytest

from table_harvest.extractor import ExtractedTable
from table_harvest.writer import output_filename, to_csv, write_table


@pytest.fixture()
def table():
    return ExtractedTable(
        columns=["name_content", "link_content", "link_a0_href"],
        records=[
            {"name_content": "Alice", "link_content": "Profile", "link_a0_href": "http://x"},
            {"name_content": "Bob, Jr.", "link_content": 'say "hi"'},
            {"name_content": "007", "link_content": "line\nbreak"},
        ],
    )


class TestOutputFilename:
    def test_with_table_name(self):
        assert output_filename("report", 2, "sales_q1") == "report.table_2.sales_q1.csv"

    def test_without_table_name(self):
        assert output_filename("report", 2, "") == "report.table_2.csv"
        assert output_filename("report", 0) == "report.table_0.csv"


class TestToCsv:
    def test_header_follows_registry_order(self, table):
        assert to_csv(table).splitlines()[0] == "name_content,link_content,link_a0_href"

    def test_missing_fields_are_empty_and_values_quoted(self, table):
        text = to_csv(table)
        assert text == (
            "name_content,link_content,link_a0_href\n"
            "Alice,Profile,http://x\n"
            '"Bob, Jr.","say ""hi""",\n'
            '007,"line\nbreak",\n'
        )


class TestWriteTable:
    def test_writes_named_file(self, table, tmp_path):
        path = write_table(table, "report", 2, "sales_q1", str(tmp_path))
        assert path == str(tmp_path / "report.table_2.sales_q1.csv")
        assert (tmp_path / "report.table_2.sales_q1.csv").read_text(encoding="utf-8") == to_csv(table)

    def test_empty_table_writes_nothing(self, tmp_path):
        assert write_table(ExtractedTable(), "report", 0, "", str(tmp_path)) is None
        assert list(tmp_path.iterdir()) == []

    def test_overwrites_existing_file(self, table, tmp_path):
        target = tmp_path / "report.table_0.csv"
        target.write_text("stale", encoding="utf-8")
        write_table(table, "report", 0, "", str(tmp_path))
        assert target.read_text(encoding="utf-8").startswith("name_content,")

    def test_missing_output_directory_raises(self, table, tmp_path):
        with pytest.raises(OSError):
            write_table(table, "report", 0, "", str(tmp_path / "missing"))

    def test_to_csv_writes_path(self, table, tmp_path):
        target = tmp_path / "direct.csv"
        assert to_csv(table, str(target)) is None
        assert target.read_text(encoding="utf-8") == to_csv(table)
