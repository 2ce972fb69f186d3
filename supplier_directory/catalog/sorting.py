"""
Supplier Sorting
Sort options offered by the catalogue listing.
"""

from enum import Enum
from typing import Iterable, List

from ..models.supplier import Supplier


class SortOption(str, Enum):
    """Catalogue sort orders."""

    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    NEWEST = "newest"
    OLDEST = "oldest"
    CITY_ASC = "city-asc"
    CITY_DESC = "city-desc"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    SortOption.NAME_ASC: "Alphabetically, A-Z",
    SortOption.NAME_DESC: "Alphabetically, Z-A",
    SortOption.NEWEST: "Newest First",
    SortOption.OLDEST: "Oldest First",
    SortOption.CITY_ASC: "City, A-Z",
    SortOption.CITY_DESC: "City, Z-A",
}


def sort_suppliers(suppliers: Iterable[Supplier], sort_by: SortOption = SortOption.NAME_ASC) -> List[Supplier]:
    """
    Sort suppliers for display.

    Name and city comparisons are case-insensitive; a missing city sorts
    as an empty string. Sorting is stable.
    """
    sort_by = SortOption(sort_by)

    if sort_by in (SortOption.NAME_ASC, SortOption.NAME_DESC):
        key = lambda s: s.name.lower()
    elif sort_by in (SortOption.CITY_ASC, SortOption.CITY_DESC):
        key = lambda s: (s.city or "").lower()
    else:
        key = lambda s: s.created_at

    reverse = sort_by in (SortOption.NAME_DESC, SortOption.CITY_DESC, SortOption.NEWEST)
    return sorted(suppliers, key=key, reverse=reverse)
