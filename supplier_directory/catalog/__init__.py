"""
Catalogue Package
Filtering, sorting and pagination for the public listing.
"""

from .filters import SupplierFilters
from .pagination import ELLIPSIS, Page, page_window, paginate
from .query import browse, featured
from .sorting import SortOption, sort_suppliers

__all__ = [
    "SupplierFilters",
    "SortOption",
    "sort_suppliers",
    "Page",
    "paginate",
    "page_window",
    "ELLIPSIS",
    "browse",
    "featured",
]
