"""
Tests for catalogue filtering, sorting and pagination.
"""

import pytest

from supplier_directory.catalog import (
    ELLIPSIS,
    SortOption,
    SupplierFilters,
    browse,
    featured,
    page_window,
    paginate,
    sort_suppliers,
)
from supplier_directory.db.seed import demo_suppliers


@pytest.fixture
def suppliers():
    return demo_suppliers()


def names(suppliers):
    return [s.name for s in suppliers]


# Filters

def test_empty_filters(suppliers):
    filters = SupplierFilters()

    assert filters.is_empty
    assert filters.apply(suppliers) == suppliers


def test_search_is_case_insensitive(suppliers):
    found = SupplierFilters(search="SUSTAINABLE").apply(suppliers)

    assert names(found) == ["EcoGreen Materials", "GlobalTextiles Co.", "Organic Harvest"]


def test_search_covers_city(suppliers):
    assert names(SupplierFilters(search="boston").apply(suppliers)) == ["ChemTech Solutions"]


def test_categories_match_any(suppliers):
    found = SupplierFilters(categories=["Electronics", "Food"]).apply(suppliers)

    assert names(found) == ["TechParts International", "Organic Harvest"]


def test_city_is_exact(suppliers):
    assert names(SupplierFilters(city="Detroit, MI").apply(suppliers)) == ["Precision Metals"]
    assert SupplierFilters(city="Detroit").apply(suppliers) == []


def test_filters_combine(suppliers):
    filters = SupplierFilters(search="metal", categories=["Manufacturing"])

    assert names(filters.apply(suppliers)) == ["Precision Metals"]


# Sorting

def test_sort_by_name(suppliers):
    assert names(sort_suppliers(suppliers, SortOption.NAME_ASC)) == [
        "ChemTech Solutions",
        "EcoGreen Materials",
        "GlobalTextiles Co.",
        "Organic Harvest",
        "Precision Metals",
        "TechParts International",
    ]
    assert names(sort_suppliers(suppliers, SortOption.NAME_DESC))[0] == "TechParts International"


def test_sort_by_date(suppliers):
    newest = names(sort_suppliers(suppliers, SortOption.NEWEST))

    assert newest[0] == "ChemTech Solutions"
    assert newest[-1] == "EcoGreen Materials"
    assert names(sort_suppliers(suppliers, SortOption.OLDEST)) == names(suppliers)


def test_sort_by_city(suppliers):
    assert names(sort_suppliers(suppliers, "city-asc")) == [
        "ChemTech Solutions",
        "Precision Metals",
        "GlobalTextiles Co.",
        "TechParts International",
        "EcoGreen Materials",
        "Organic Harvest",
    ]


def test_sort_missing_city_first(suppliers):
    nomad = suppliers[0].model_copy(update={"city": None, "name": "Nomad Supply"})

    assert sort_suppliers(suppliers + [nomad], SortOption.CITY_ASC)[0] is nomad


def test_sort_does_not_mutate(suppliers):
    original = names(suppliers)
    sort_suppliers(suppliers, SortOption.NAME_DESC)

    assert names(suppliers) == original


def test_sort_labels():
    assert SortOption.NAME_ASC.label == "Alphabetically, A-Z"
    assert SortOption("newest").label == "Newest First"


# Pagination

def test_paginate_last_page():
    page = paginate(list(range(45)), page=3, per_page=20)

    assert page.items == list(range(40, 45))
    assert page.total_pages == 3
    assert page.start_item == 41
    assert page.end_item == 45
    assert page.has_previous
    assert not page.has_next


def test_paginate_past_end():
    page = paginate(list(range(5)), page=4, per_page=2)

    assert page.items == []
    assert page.start_item == 0
    assert page.end_item == 0


def test_paginate_clamps_page():
    page = paginate(list(range(5)), page=0, per_page=2)

    assert page.page == 1
    assert page.items == [0, 1]


def test_paginate_empty():
    page = paginate([], per_page=20)

    assert page.total_pages == 0
    assert not page.has_next


def test_paginate_rejects_bad_page_size():
    with pytest.raises(ValueError):
        paginate([1, 2, 3], per_page=0)


@pytest.mark.parametrize(
    "current,total,expected",
    [
        (1, 0, []),
        (1, 1, [1]),
        (1, 5, [1, 2, ELLIPSIS, 5]),
        (3, 5, [1, 2, 3, 4, 5]),
        (5, 10, [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]),
        (10, 10, [1, ELLIPSIS, 9, 10]),
        (5, 2, [1, 2]),
        (0, 3, [1, 2, 3]),
        (9, 5, [1, ELLIPSIS, 4, 5]),
    ],
)
def test_page_window(current, total, expected):
    assert page_window(current, total) == expected


# Query

def test_browse_filters_then_sorts_then_pages(suppliers):
    result = browse(
        suppliers,
        filters=SupplierFilters(categories=["Manufacturing", "Raw Materials"]),
        sort_by=SortOption.NAME_DESC,
        page=2,
        per_page=2,
    )

    assert result.total == 4
    assert names(result.items) == ["EcoGreen Materials", "ChemTech Solutions"]


def test_featured(suppliers):
    assert names(featured(suppliers)) == [
        "EcoGreen Materials",
        "TechParts International",
        "GlobalTextiles Co.",
    ]
    assert featured([]) == []


def test_window_for_page_past_end(suppliers):
    result = browse(suppliers, page=5, per_page=4)

    assert result.items == []
    assert result.total_pages == 2
    assert page_window(result.page, result.total_pages) == [1, 2]
