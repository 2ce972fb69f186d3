"""
Supplier Store
In-memory stand-in for the supplier document collection.
"""

import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union
from uuid import uuid4

from ..catalog.filters import SupplierFilters
from ..models.supplier import Supplier, SupplierCreate, SupplierRecord, SupplierUpdate, slugify

logger = logging.getLogger(__name__)


class SupplierNotFoundError(LookupError):
    """Raised when no supplier matches an id or slug."""

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"Supplier not found: {key}={value}")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SupplierStore:
    """
    Supplier collection held in a list, in insertion order.

    All operations are synchronous; a lock serializes writes so callers on
    different threads (sync routes, the CLI, tests) do not interleave.
    """

    def __init__(self, suppliers: Optional[Iterable[Supplier]] = None):
        self._suppliers: List[Supplier] = list(suppliers or [])
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._suppliers)

    def _materialize(self, data: Dict[str, Any]) -> Supplier:
        """Stamp id, slug and timestamps onto a field dict."""
        now = _utcnow()
        return Supplier(
            **data,
            id=uuid4().hex,
            slug=slugify(data["name"]),
            created_at=now,
            updated_at=now,
        )

    def _index_of(self, supplier_id: str) -> int:
        for index, supplier in enumerate(self._suppliers):
            if supplier.id == supplier_id:
                return index
        raise SupplierNotFoundError("id", supplier_id)

    # === READS ===

    def all(self) -> List[Supplier]:
        return list(self._suppliers)

    def list_suppliers(self, filters: Optional[SupplierFilters] = None) -> List[Supplier]:
        """List suppliers in store order, optionally filtered."""
        if filters is None or filters.is_empty:
            return self.all()
        return filters.apply(self._suppliers)

    def get(self, supplier_id: str) -> Supplier:
        return self._suppliers[self._index_of(supplier_id)]

    def get_by_slug(self, slug: str) -> Supplier:
        for supplier in self._suppliers:
            if supplier.slug == slug:
                return supplier
        raise SupplierNotFoundError("slug", slug)

    def all_categories(self) -> List[str]:
        return sorted({category for s in self._suppliers for category in s.categories})

    def all_cities(self) -> List[str]:
        return sorted({s.city for s in self._suppliers if s.city})

    # === WRITES ===

    def create(self, payload: SupplierCreate) -> Supplier:
        supplier = self._materialize(payload.model_dump())
        with self._lock:
            self._suppliers.append(supplier)
        logger.info(f"Supplier created: id={supplier.id}, slug={supplier.slug}")
        return supplier

    def bulk_insert(self, records: Sequence[SupplierRecord]) -> List[Supplier]:
        """
        Store parsed CSV records.

        Each record gets a fresh id, a slug derived from its name, its
        categories string expanded to a list, and creation timestamps.
        Fields the CSV never provided stay unset.
        """
        created = []
        for record in records:
            data = record.model_dump(exclude_unset=True)
            data["categories"] = record.category_list()
            created.append(self._materialize(data))

        with self._lock:
            self._suppliers.extend(created)

        logger.info(f"Bulk inserted {len(created)} suppliers")
        return created

    def update(self, supplier_id: str, changes: Union[SupplierUpdate, Dict[str, Any]]) -> Supplier:
        """
        Apply a partial update.

        The slug is left as it was, even when the name changes, so existing
        links keep working.
        """
        if not isinstance(changes, SupplierUpdate):
            changes = SupplierUpdate(**changes)
        changes = changes.model_dump(exclude_unset=True)

        with self._lock:
            index = self._index_of(supplier_id)
            current = self._suppliers[index]
            updated = Supplier.model_validate(
                {**current.model_dump(), **changes, "updated_at": _utcnow()}
            )
            self._suppliers[index] = updated

        logger.info(f"Supplier updated: id={supplier_id}, fields={sorted(changes)}")
        return updated

    def delete(self, supplier_id: str) -> None:
        with self._lock:
            index = self._index_of(supplier_id)
            del self._suppliers[index]
        logger.info(f"Supplier deleted: id={supplier_id}")
