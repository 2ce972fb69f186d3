"""
Supplier Store Package
In-memory persistence for supplier records.
"""

from .session import create_store, get_store, reset_store
from .store import SupplierNotFoundError, SupplierStore

__all__ = [
    "SupplierStore",
    "SupplierNotFoundError",
    "create_store",
    "get_store",
    "reset_store",
]
