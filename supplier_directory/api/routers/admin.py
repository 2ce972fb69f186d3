"""
Admin Endpoints
GET /admin/suppliers - List all suppliers
POST /admin/suppliers - Create a supplier
GET /admin/suppliers/{supplier_id} - Fetch one supplier
PATCH /admin/suppliers/{supplier_id} - Update a supplier
DELETE /admin/suppliers/{supplier_id} - Delete a supplier
POST /admin/suppliers/import/preview - Parse a CSV upload without storing it
POST /admin/suppliers/import - Parse a CSV upload and store its suppliers
GET /admin/inquiries - Contact and catalogue requests received

All endpoints require the admin credential (HTTP Basic).
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from ...catalog import SupplierFilters
from ...db import SupplierStore
from ...ingestion import CSVIngestionPipeline, IngestionReport, decode_csv_bytes, validate_upload
from ...models.supplier import Supplier, SupplierCreate, SupplierUpdate
from ..config import APISettings, get_settings
from ..dependencies import get_ingestion_pipeline, get_inquiries, get_supplier_store, require_admin
from ..models.supplier import ImportDiagnostics, ImportPreviewResponse, ImportResponse, ParsedRecord
from ..services.inquiry_service import InquiryService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


class InquiryRecord(BaseModel):
    inquiry_id: str = Field(..., description="Inquiry ID")
    inquiry_type: str = Field(..., description="contact or catalogue")
    supplier_id: str
    supplier_slug: str
    requester: Dict[str, Any] = Field(default_factory=dict)
    received_at: datetime


async def _parse_upload(
    file: UploadFile, settings: APISettings, pipeline: CSVIngestionPipeline
) -> IngestionReport:
    """
    Read an uploaded file, apply the upload checks, and parse it.

    At most one byte past the size limit is read, so an oversized upload is
    rejected without being held in memory. Decoding and parsing run in the
    threadpool.
    """
    limit = settings.max_upload_bytes
    if file.size is not None:
        validate_upload(file.filename, file.content_type, file.size, max_bytes=limit)

    raw = await file.read(limit + 1)
    validate_upload(file.filename, file.content_type, len(raw), max_bytes=limit)

    return await run_in_threadpool(_decode_and_parse, raw, pipeline)


def _decode_and_parse(raw: bytes, pipeline: CSVIngestionPipeline) -> IngestionReport:
    return pipeline.parse_with_report(decode_csv_bytes(raw))


def _diagnostics(report: IngestionReport) -> ImportDiagnostics:
    return ImportDiagnostics(
        total_rows=report.total_rows,
        accepted=report.accepted_count,
        skipped_short_rows=report.skipped_short_rows,
        skipped_missing_name=report.skipped_missing_name,
        unmapped_fields=report.unmapped_fields,
        column_map=report.column_map,
    )


# Supplier CRUD
@router.get("/suppliers", response_model=List[Supplier])
async def admin_list_suppliers(
    search: Optional[str] = Query(None, description="Text to find in name, description or city"),
    store: SupplierStore = Depends(get_supplier_store),
) -> List[Supplier]:
    """List every supplier in store order."""
    return store.list_suppliers(SupplierFilters(search=search or None))


@router.post("/suppliers", response_model=Supplier, status_code=status.HTTP_201_CREATED)
async def create_supplier(
    payload: SupplierCreate, store: SupplierStore = Depends(get_supplier_store)
) -> Supplier:
    """Create a supplier; slug and timestamps are generated."""
    return store.create(payload)


@router.get("/suppliers/{supplier_id}", response_model=Supplier)
async def admin_get_supplier(
    supplier_id: str, store: SupplierStore = Depends(get_supplier_store)
) -> Supplier:
    return store.get(supplier_id)


@router.patch("/suppliers/{supplier_id}", response_model=Supplier)
async def update_supplier(
    supplier_id: str,
    changes: SupplierUpdate,
    store: SupplierStore = Depends(get_supplier_store),
) -> Supplier:
    """Apply a partial update to a supplier."""
    return store.update(supplier_id, changes)


@router.delete("/suppliers/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_supplier(
    supplier_id: str, store: SupplierStore = Depends(get_supplier_store)
) -> Response:
    store.delete(supplier_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# CSV import
@router.post(
    "/suppliers/import/preview",
    response_model=ImportPreviewResponse,
    response_model_exclude_unset=True,
)
async def preview_import(
    file: UploadFile = File(..., description="CSV file of suppliers"),
    settings: APISettings = Depends(get_settings),
    pipeline: CSVIngestionPipeline = Depends(get_ingestion_pipeline),
) -> ImportPreviewResponse:
    """
    Parse an uploaded CSV and return the rows that would be imported.

    Columns the file does not provide are omitted from each record.
    """
    report = await _parse_upload(file, settings, pipeline)

    logger.info(f"Import preview for {file.filename}: {report.get_stats()}")

    return ImportPreviewResponse(
        filename=file.filename,
        records=[ParsedRecord.from_record(r) for r in report.records],
        diagnostics=_diagnostics(report),
    )


@router.post("/suppliers/import", response_model=ImportResponse, status_code=status.HTTP_201_CREATED)
async def import_suppliers(
    file: UploadFile = File(..., description="CSV file of suppliers"),
    settings: APISettings = Depends(get_settings),
    pipeline: CSVIngestionPipeline = Depends(get_ingestion_pipeline),
    store: SupplierStore = Depends(get_supplier_store),
) -> ImportResponse:
    """
    Parse an uploaded CSV and store every valid row as a supplier.

    Failures (wrong file type, too large, no data rows, no name column,
    no valid rows) are returned as errors and nothing is stored.
    """
    report = await _parse_upload(file, settings, pipeline)
    created = store.bulk_insert(report.records)

    logger.info(f"Imported {len(created)} suppliers from {file.filename}")

    return ImportResponse(
        filename=file.filename,
        imported=len(created),
        suppliers=created,
        diagnostics=_diagnostics(report),
    )


# Inquiries
@router.get("/inquiries", response_model=List[InquiryRecord])
async def list_inquiries(
    supplier_id: Optional[str] = Query(None, description="Only inquiries for this supplier"),
    inquiries: InquiryService = Depends(get_inquiries),
) -> List[InquiryRecord]:
    """Contact and catalogue requests, oldest first."""
    return [
        InquiryRecord(
            inquiry_id=i.inquiry_id,
            inquiry_type=i.inquiry_type.value,
            supplier_id=i.supplier_id,
            supplier_slug=i.supplier_slug,
            requester=i.requester,
            received_at=i.received_at,
        )
        for i in inquiries.list(supplier_id)
    ]
