#!/usr/bin/env python3
"""
Supplier Ingestion Script
Runs a supplier CSV file through the ingestion pipeline and reports the result.

Usage:
    python -m supplier_directory.scripts.ingest_suppliers data/suppliers.csv
    python -m supplier_directory.scripts.ingest_suppliers data/suppliers.csv --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from supplier_directory.db import create_store
from supplier_directory.ingestion import (
    CSVIngestionError,
    CSVIngestionPipeline,
    decode_csv_bytes,
    validate_upload,
)
from supplier_directory.ingestion.upload import MAX_UPLOAD_BYTES

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate and ingest supplier data from CSV")
    parser.add_argument("csv_path", type=str, help="Path to CSV file containing supplier data")
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=MAX_UPLOAD_BYTES,
        help="Maximum accepted file size in bytes (default: 5 MiB)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the stored suppliers as JSON on stdout"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log each skipped row"
    )
    return parser


def main(argv=None) -> int:
    """Main function to run CSV ingestion."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger("supplier_directory").setLevel(logging.DEBUG)

    csv_path = Path(args.csv_path)
    if not csv_path.exists():
        logger.error(f"CSV file not found: {csv_path}")
        return 1

    raw = csv_path.read_bytes()
    logger.info(f"Starting ingestion of {csv_path} ({len(raw)} bytes)")

    try:
        validate_upload(csv_path.name, None, len(raw), max_bytes=args.max_bytes)
        report = CSVIngestionPipeline().parse_with_report(decode_csv_bytes(raw))
    except CSVIngestionError as e:
        logger.error(f"Ingestion failed ({e.kind}): {e.message}")
        return 2

    # No persistent database: load into a fresh store to exercise the insert path
    store = create_store(seed_demo_data=False)
    suppliers = store.bulk_insert(report.records)

    stats = report.get_stats()
    logger.info("=" * 60)
    logger.info("INGESTION COMPLETE")
    logger.info("=" * 60)
    logger.info(f"Data rows: {stats['total_rows']}")
    logger.info(f"Suppliers accepted: {stats['accepted']}")
    logger.info(f"Skipped (too few cells): {stats['skipped_short_rows']}")
    logger.info(f"Skipped (missing name): {stats['skipped_missing_name']}")
    if stats["unmapped_fields"]:
        logger.info(f"Columns not found: {', '.join(stats['unmapped_fields'])}")

    if args.json:
        json.dump([s.model_dump(mode="json") for s in suppliers], sys.stdout, indent=2)
        sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
