"""
Store Session
Provides the process-wide supplier store used by the API and scripts.
"""

import logging
from typing import Optional

from .seed import demo_suppliers
from .store import SupplierStore

logger = logging.getLogger(__name__)

_store: Optional[SupplierStore] = None


def create_store(seed_demo_data: bool = True) -> SupplierStore:
    """Create a new store, optionally loaded with the demo suppliers."""
    store = SupplierStore(demo_suppliers() if seed_demo_data else None)
    logger.info(f"Supplier store created with {len(store)} suppliers")
    return store


def get_store() -> SupplierStore:
    """Get global supplier store (singleton)."""
    global _store
    if _store is None:
        from ..api.config import get_settings

        _store = create_store(seed_demo_data=get_settings().seed_demo_data)
    return _store


def reset_store() -> None:
    """Drop the global store (useful for testing)."""
    global _store
    _store = None
