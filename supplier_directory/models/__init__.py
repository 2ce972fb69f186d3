"""
Data Models Package
Supplier records and domain entities.
"""

from .supplier import (
    Supplier,
    SupplierCreate,
    SupplierRecord,
    SupplierUpdate,
    slugify,
    split_categories,
)

__all__ = [
    "Supplier",
    "SupplierCreate",
    "SupplierRecord",
    "SupplierUpdate",
    "slugify",
    "split_categories",
]
