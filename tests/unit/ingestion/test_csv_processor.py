"""
Tests for the supplier CSV ingestion pipeline.
"""

import pytest

from supplier_directory.ingestion import (
    CSVIngestionPipeline,
    EmptyResultError,
    MalformedInputError,
    SchemaError,
    parse_supplier_csv,
)
from supplier_directory.ingestion.column_mapping import resolve_columns
from supplier_directory.ingestion.csv_processor import split_header, split_row


@pytest.fixture
def pipeline():
    return CSVIngestionPipeline()


def test_basic_row(pipeline):
    """Standard headers map straight onto supplier fields."""
    records = pipeline.parse("name,email,city\nAcme Corp,info@acme.test,Boston")

    assert len(records) == 1
    record = records[0]
    assert record.name == "Acme Corp"
    assert record.email == "info@acme.test"
    assert record.city == "Boston"


def test_missing_name_column_is_schema_error(pipeline):
    with pytest.raises(SchemaError) as exc_info:
        pipeline.parse("description,city\nMakes widgets,Boston")

    assert exc_info.value.kind == "schema_error"
    assert exc_info.value.headers == ["description", "city"]
    assert exc_info.value.message == "CSV must contain a name/company_name column"


def test_header_only_is_malformed(pipeline):
    with pytest.raises(MalformedInputError) as exc_info:
        pipeline.parse("name,email,city\n")

    assert exc_info.value.kind == "malformed_input"
    assert exc_info.value.line_count == 1


def test_blank_lines_do_not_count_as_rows(pipeline):
    with pytest.raises(MalformedInputError):
        pipeline.parse("\n\n   \nname,email\n\n  \n")


def test_empty_content_is_malformed(pipeline):
    with pytest.raises(MalformedInputError) as exc_info:
        pipeline.parse("")

    assert exc_info.value.line_count == 0


def test_line_count_checked_before_headers(pipeline):
    """A lone header with no name column is still reported as malformed."""
    with pytest.raises(MalformedInputError):
        pipeline.parse("description,city")


def test_empty_name_only_row_is_empty_result(pipeline):
    with pytest.raises(EmptyResultError) as exc_info:
        pipeline.parse("name,email\n,bademail@x.test")

    assert exc_info.value.kind == "empty_result"
    assert exc_info.value.total_rows == 1
    assert exc_info.value.message == "No valid supplier data found in CSV"


def test_quoted_cell_with_comma_is_split(pipeline):
    """Quoted commas are not respected: only the text before the comma lands in the column."""
    content = 'Company Name,Contact Email,Categories\nWidget Co,sales@widget.test,"Tech, Software"'

    records = pipeline.parse(content)

    assert len(records) == 1
    record = records[0]
    assert record.name == "Widget Co"
    assert record.email == "sales@widget.test"
    assert record.categories == "Tech"
    assert record.category_list() == ["Tech"]


def test_single_valid_row_among_thousands_of_empty_names(pipeline):
    rows = ['""' if i % 2 else '"   "' for i in range(5999)]
    rows.insert(3000, "Needle Supplies")
    content = "name\n" + "\n".join(rows)

    report = pipeline.parse_with_report(content)

    assert [r.name for r in report.records] == ["Needle Supplies"]
    assert report.total_rows == 6000
    assert report.skipped_missing_name == 5999


def test_parse_is_repeatable(pipeline, sample_csv_data):
    first = pipeline.parse(sample_csv_data)
    second = pipeline.parse(sample_csv_data)

    assert [r.model_dump() for r in first] == [r.model_dump() for r in second]


@pytest.mark.parametrize("name_cell", ["", "   ", '""', '"  "'])
def test_blank_names_never_survive(pipeline, name_cell):
    content = f"name,city\nFirst Co,Austin\n{name_cell},Dallas\nLast Co,Denver"

    records = pipeline.parse(content)

    assert [r.name for r in records] == ["First Co", "Last Co"]
    assert all(r.name.strip() for r in records)


def test_row_order_preserved(pipeline):
    names = ["Zeta", "Alpha", "Mid", "Beta"]
    content = "name\n" + "\n".join(names)

    assert [r.name for r in pipeline.parse(content)] == names


def test_alias_priority_beats_column_position(pipeline):
    records = pipeline.parse("business_name,name\nHolding Ltd,Trading Name")

    assert records[0].name == "Trading Name"


def test_bounding_quotes_stripped(pipeline):
    records = pipeline.parse('name,city\n"Acme Corp", "Boston"')

    assert records[0].name == "Acme Corp"
    assert records[0].city == "Boston"


def test_crlf_line_endings(pipeline):
    records = pipeline.parse("name,email\r\nAcme,info@acme.test\r\n")

    assert records[0].name == "Acme"
    assert records[0].email == "info@acme.test"


def test_short_rows_are_skipped(pipeline):
    report = pipeline.parse_with_report("name,email,city\nAcme,a@acme.test\nBolt Co,b@bolt.test,Austin")

    assert [r.name for r in report.records] == ["Bolt Co"]
    assert report.skipped_short_rows == 1
    assert report.skipped_missing_name == 0


def test_extra_cells_are_ignored(pipeline):
    records = pipeline.parse("name,city\nAcme,Boston,unexpected,cells")

    assert records[0].name == "Acme"
    assert records[0].city == "Boston"


def test_empty_cell_differs_from_missing_column(pipeline):
    record = pipeline.parse("name,email\nAcme,")[0]

    assert record.email == ""
    assert record.is_resolved("email")
    assert record.city is None
    assert not record.is_resolved("city")
    assert record.model_dump(exclude_unset=True) == {"name": "Acme", "email": ""}


def test_name_keeps_inner_whitespace(pipeline):
    record = pipeline.parse("name\n  Acme   Corp  ")[0]

    assert record.name == "Acme   Corp"


def test_report_counts(pipeline, sample_csv_data):
    report = pipeline.parse_with_report(sample_csv_data)

    assert report.total_rows == 4
    assert report.accepted_count == 3
    assert report.skipped_missing_name == 1
    assert report.skipped_count == 1
    assert report.unmapped_fields == []
    assert report.warnings == ["Filtered out 1 of 4 data rows"]
    assert [r.name for r in report.records] == ["Northwind Traders", "Contoso Ltd", "Fabrikam"]

    northwind = report.records[0]
    assert northwind.phone == "555-0100"
    assert northwind.description == "Importers of fine foods"
    assert northwind.categories == "Food"


def test_report_stats_list_unmapped_fields(pipeline):
    report = pipeline.parse_with_report("name,email\nAcme,a@acme.test")

    stats = report.get_stats()
    assert stats["accepted"] == 1
    assert stats["unmapped_fields"] == ["phone", "website", "description", "city", "categories"]


def test_module_level_parse():
    records = parse_supplier_csv("company,location\nAcme,Boston")

    assert records[0].name == "Acme"
    assert records[0].city == "Boston"


def test_split_helpers():
    assert split_header(" Name , EMAIL ,City") == ["name", "email", "city"]
    assert split_row(' "Acme" ,  x ,"say ""hi""" ') == ["Acme", "x", 'say ""hi""']


def test_comma_in_quoted_header_splits_column(pipeline):
    """The header line is split like a data row: a quoted comma opens a new column."""
    headers = split_header('"Company, Inc",email')

    assert headers == ['"company', 'inc"', "email"]
    assert resolve_columns(headers)["name"] == 0
    assert resolve_columns(headers)["email"] == 2

    # Two cells no longer cover three header columns
    with pytest.raises(EmptyResultError) as exc_info:
        pipeline.parse('"Company, Inc",email\nAcme Inc,info@acme.test')
    assert exc_info.value.total_rows == 1

    records = pipeline.parse('"Company, Inc",email\nAcme,Inc,info@acme.test')
    assert records[0].name == "Acme"
    assert records[0].email == "info@acme.test"
