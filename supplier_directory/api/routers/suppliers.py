"""
Supplier Catalogue Endpoints
GET /suppliers - Search, filter, sort and paginate suppliers
GET /suppliers/featured - Suppliers shown on the homepage
GET /suppliers/facets - Available categories and cities
GET /suppliers/{slug} - Supplier detail page
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...catalog import SortOption, SupplierFilters, browse, featured, page_window
from ...db import SupplierStore
from ...models.supplier import Supplier
from ..config import APISettings, get_settings
from ..dependencies import get_request_id, get_supplier_store
from ..models.common import PaginationInfo
from ..models.supplier import FacetsResponse, SupplierListResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/suppliers", tags=["suppliers"])


@router.get("", response_model=SupplierListResponse, status_code=status.HTTP_200_OK)
async def list_suppliers(
    search: Optional[str] = Query(None, max_length=200, description="Text to find in name, description or city"),
    categories: Optional[List[str]] = Query(None, description="Keep suppliers in any of these categories"),
    city: Optional[str] = Query(None, description="Exact city"),
    sort: SortOption = Query(SortOption.NAME_ASC, description="Sort order"),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    limit: Optional[int] = Query(None, ge=1, description="Page size (capped at MAX_PAGE_SIZE)"),
    store: SupplierStore = Depends(get_supplier_store),
    settings: APISettings = Depends(get_settings),
    request_id: str = Depends(get_request_id),
) -> SupplierListResponse:
    """
    Browse the supplier catalogue.

    Filters are applied first, then sorting, then pagination.
    """
    filters = SupplierFilters(search=search or None, categories=categories or None, city=city or None)
    per_page = min(limit or settings.default_page_size, settings.max_page_size)

    result = browse(store.all(), filters=filters, sort_by=sort, page=page, per_page=per_page)

    logger.info(
        f"Catalogue query: search={search!r}, categories={categories}, city={city!r}, "
        f"sort={sort.value}, page={page} -> {result.total} matches",
        extra={"request_id": request_id},
    )

    return SupplierListResponse(
        results=result.items,
        pagination=PaginationInfo(
            page=result.page,
            limit=result.per_page,
            total=result.total,
            total_pages=result.total_pages,
            start_item=result.start_item,
            end_item=result.end_item,
            pages=page_window(result.page, result.total_pages),
        ),
        sort=sort.value,
        sort_label=sort.label,
        filters_applied=not filters.is_empty,
    )


@router.get("/featured", response_model=List[Supplier])
async def featured_suppliers(store: SupplierStore = Depends(get_supplier_store)) -> List[Supplier]:
    """First three suppliers, for the homepage."""
    return featured(store.all())


@router.get("/facets", response_model=FacetsResponse)
async def supplier_facets(store: SupplierStore = Depends(get_supplier_store)) -> FacetsResponse:
    """Categories and cities present in the directory."""
    return FacetsResponse(categories=store.all_categories(), cities=store.all_cities())


@router.get("/{slug}", response_model=Supplier)
async def get_supplier(slug: str, store: SupplierStore = Depends(get_supplier_store)) -> Supplier:
    """
    Supplier detail page.

    Raises:
        404 if no supplier has this slug
    """
    return store.get_by_slug(slug)
