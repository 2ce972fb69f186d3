"""
CSV Ingestion Pipeline
Parses uploaded supplier CSV text into validated supplier records.

Header names are matched loosely (see column_mapping), so uploaders do not
need to follow an exact schema. Rows are split naively on commas: quoted
cells containing commas are split into extra columns, and only one pair of
bounding double quotes is stripped from each cell.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..models.supplier import SupplierRecord
from .column_mapping import UNRESOLVED, resolve_columns
from .exceptions import EmptyResultError, MalformedInputError, SchemaError

logger = logging.getLogger(__name__)

OPTIONAL_FIELDS = ("email", "phone", "website", "description", "city", "categories")


@dataclass
class IngestionReport:
    """Result of a parse with row-level diagnostics."""

    records: List[SupplierRecord]
    headers: List[str]
    column_map: Dict[str, int]
    total_rows: int = 0
    skipped_short_rows: int = 0
    skipped_missing_name: int = 0
    warnings: List[str] = field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        return len(self.records)

    @property
    def skipped_count(self) -> int:
        return self.skipped_short_rows + self.skipped_missing_name

    @property
    def unmapped_fields(self) -> List[str]:
        return [name for name, index in self.column_map.items() if index == UNRESOLVED]

    def get_stats(self) -> dict:
        return {
            "total_rows": self.total_rows,
            "accepted": self.accepted_count,
            "skipped_short_rows": self.skipped_short_rows,
            "skipped_missing_name": self.skipped_missing_name,
            "unmapped_fields": self.unmapped_fields,
        }


def split_row(line: str) -> List[str]:
    """
    Split a CSV line into trimmed cell values.

    One leading and one trailing double quote are removed from each cell
    if present; embedded quotes are left as they are.
    """
    values = []
    for raw in line.split(","):
        value = raw.strip()
        if value.startswith('"'):
            value = value[1:]
        if value.endswith('"'):
            value = value[:-1]
        values.append(value)
    return values


def split_header(line: str) -> List[str]:
    """Split the header line into trimmed, lowercased column names."""
    return [cell.strip().lower() for cell in line.split(",")]


class CSVIngestionPipeline:
    """
    Supplier CSV parser.

    Stateless: one instance can be shared and called concurrently.
    """

    def parse(self, content: str) -> List[SupplierRecord]:
        """
        Parse CSV text into supplier records.

        Args:
            content: Full text of the uploaded file

        Returns:
            Records in input row order; every record has a non-empty name

        Raises:
            MalformedInputError: fewer than two non-blank lines
            SchemaError: no header maps to the name field
            EmptyResultError: no row survived validation
        """
        return self.parse_with_report(content).records

    def parse_with_report(self, content: str) -> IngestionReport:
        """Parse CSV text and report how many rows were dropped and why."""
        lines = [line for line in content.split("\n") if line.strip()]
        if len(lines) < 2:
            raise MalformedInputError(len(lines))

        headers = split_header(lines[0])
        column_map = resolve_columns(headers)

        if column_map["name"] == UNRESOLVED:
            logger.info(f"No name column found in headers: {headers}")
            raise SchemaError(headers)

        report = IngestionReport(
            records=[],
            headers=headers,
            column_map=column_map,
            total_rows=len(lines) - 1,
        )

        for row_number, line in enumerate(lines[1:], start=1):
            values = split_row(line)

            if len(values) < len(headers):
                report.skipped_short_rows += 1
                logger.debug(
                    f"Skipping row {row_number}: {len(values)} cells, expected {len(headers)}"
                )
                continue

            record = self._build_record(values, column_map)
            if record is None:
                report.skipped_missing_name += 1
                logger.debug(f"Skipping row {row_number}: empty name")
                continue

            report.records.append(record)

        if report.skipped_count:
            report.warnings.append(f"Filtered out {report.skipped_count} of {report.total_rows} data rows")
            logger.info(
                f"CSV parsed with skipped rows: {report.skipped_short_rows} truncated, "
                f"{report.skipped_missing_name} missing name"
            )

        if not report.records:
            raise EmptyResultError(report.total_rows)

        logger.info(f"Parsed {report.accepted_count} suppliers from {report.total_rows} rows")
        return report

    @staticmethod
    def _build_record(values: List[str], column_map: Dict[str, int]) -> Optional[SupplierRecord]:
        """Build a record from one row, or None if the name cell is blank."""
        name = values[column_map["name"]] or ""
        if not name.strip():
            return None

        data = {"name": name}
        for field_name in OPTIONAL_FIELDS:
            index = column_map[field_name]
            if index != UNRESOLVED:
                data[field_name] = values[index]

        return SupplierRecord(**data)


_default_pipeline = CSVIngestionPipeline()


def parse_supplier_csv(content: str) -> List[SupplierRecord]:
    """Convenience wrapper around CSVIngestionPipeline.parse."""
    return _default_pipeline.parse(content)
