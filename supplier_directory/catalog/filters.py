"""
Supplier Filtering
Search, category and city filters for the public catalogue.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..models.supplier import Supplier


@dataclass
class SupplierFilters:
    """
    Filters for listing suppliers.

    - search: case-insensitive substring of name, description or city
    - categories: keep suppliers sharing at least one category
    - city: exact city match
    """

    search: Optional[str] = None
    categories: Optional[List[str]] = None
    city: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.search or self.categories or self.city)

    def matches(self, supplier: Supplier) -> bool:
        """Check whether a supplier passes every active filter."""
        if self.search:
            needle = self.search.lower()
            haystack = (supplier.name, supplier.description or "", supplier.city or "")
            if not any(needle in text.lower() for text in haystack):
                return False

        if self.categories:
            if not set(supplier.categories) & set(self.categories):
                return False

        if self.city:
            if supplier.city != self.city:
                return False

        return True

    def apply(self, suppliers: Iterable[Supplier]) -> List[Supplier]:
        """Filter suppliers, preserving input order."""
        return [s for s in suppliers if self.matches(s)]
