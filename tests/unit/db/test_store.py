"""
Tests for the in-memory supplier store.
"""

import pytest

from supplier_directory.catalog import SupplierFilters
from supplier_directory.db import SupplierNotFoundError, SupplierStore, get_store, reset_store
from supplier_directory.ingestion import parse_supplier_csv
from supplier_directory.models import SupplierCreate, SupplierUpdate


def test_seeded_store(seeded_store):
    assert len(seeded_store) == 6
    assert [s.id for s in seeded_store.all()] == ["1", "2", "3", "4", "5", "6"]
    assert seeded_store.get_by_slug("globaltextiles-co").name == "GlobalTextiles Co."


def test_empty_store(empty_store):
    assert len(empty_store) == 0
    assert empty_store.all() == []
    assert empty_store.all_categories() == []


def test_get_missing(seeded_store):
    with pytest.raises(SupplierNotFoundError) as exc_info:
        seeded_store.get("missing")
    assert exc_info.value.key == "id"

    with pytest.raises(SupplierNotFoundError) as exc_info:
        seeded_store.get_by_slug("missing")
    assert exc_info.value.key == "slug"
    assert exc_info.value.value == "missing"


def test_facets(seeded_store):
    assert seeded_store.all_categories() == [
        "Agriculture",
        "Electronics",
        "Fabrics",
        "Food",
        "Manufacturing",
        "Organic",
        "Packaging",
        "Raw Materials",
        "Sustainable Products",
        "Textiles",
    ]
    assert seeded_store.all_cities()[0] == "Boston, MA"
    assert len(seeded_store.all_cities()) == 6


def test_list_with_filters(seeded_store):
    found = seeded_store.list_suppliers(SupplierFilters(categories=["Electronics"]))

    assert [s.name for s in found] == ["TechParts International"]
    assert len(seeded_store.list_suppliers(SupplierFilters())) == 6


def test_create(empty_store):
    supplier = empty_store.create(SupplierCreate(name="Acme Corp", categories="Tech, Food"))

    assert supplier.slug == "acme-corp"
    assert supplier.categories == ["Tech", "Food"]
    assert supplier.id
    assert supplier.created_at == supplier.updated_at
    assert supplier.created_at.tzinfo is not None
    assert empty_store.get(supplier.id) == supplier


def test_bulk_insert_from_csv(empty_store):
    records = parse_supplier_csv("company,industry\nAcme Corp,Tech\nBolt Co,")

    created = empty_store.bulk_insert(records)

    assert [s.name for s in created] == ["Acme Corp", "Bolt Co"]
    assert created[0].categories == ["Tech"]
    assert created[1].categories == []
    assert created[0].email is None
    assert len({s.id for s in created}) == 2
    assert len(empty_store) == 2


def test_update_keeps_slug(seeded_store):
    before = seeded_store.get("1")

    updated = seeded_store.update("1", SupplierUpdate(name="EcoGreen Global", city="Seattle, WA"))

    assert updated.name == "EcoGreen Global"
    assert updated.city == "Seattle, WA"
    assert updated.slug == "ecogreen-materials"
    assert updated.email == before.email
    assert updated.created_at == before.created_at
    assert updated.updated_at > before.updated_at
    assert seeded_store.get("1") == updated


def test_update_from_dict(seeded_store):
    updated = seeded_store.update("2", {"categories": "Electronics, Robotics"})

    assert updated.categories == ["Electronics", "Robotics"]


def test_update_missing(seeded_store):
    with pytest.raises(SupplierNotFoundError):
        seeded_store.update("missing", {"city": "Nowhere"})


def test_delete(seeded_store):
    seeded_store.delete("3")

    assert len(seeded_store) == 5
    with pytest.raises(SupplierNotFoundError):
        seeded_store.get("3")
    with pytest.raises(SupplierNotFoundError):
        seeded_store.delete("3")


def test_global_store_follows_settings(monkeypatch):
    from supplier_directory.api.config import reset_settings

    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    reset_settings()
    reset_store()

    assert len(get_store()) == 0
    assert get_store() is get_store()


def test_store_defaults_to_empty():
    assert len(SupplierStore()) == 0
