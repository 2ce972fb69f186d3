"""
Catalogue Query
Filter, sort and paginate pipeline behind the public supplier listing.
"""

from typing import Iterable, List, Optional

from ..models.supplier import Supplier
from .filters import SupplierFilters
from .pagination import Page, paginate
from .sorting import SortOption, sort_suppliers

FEATURED_COUNT = 3


def browse(
    suppliers: Iterable[Supplier],
    filters: Optional[SupplierFilters] = None,
    sort_by: SortOption = SortOption.NAME_ASC,
    page: int = 1,
    per_page: int = 20,
) -> Page[Supplier]:
    """Apply filters, then sort, then slice out the requested page."""
    matched = filters.apply(suppliers) if filters else list(suppliers)
    return paginate(sort_suppliers(matched, sort_by), page=page, per_page=per_page)


def featured(suppliers: Iterable[Supplier], count: int = FEATURED_COUNT) -> List[Supplier]:
    """First suppliers in store order, shown on the homepage."""
    return list(suppliers)[:count]
