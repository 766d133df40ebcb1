from random import Random

from itemstash.browse import (
    MAIN_CATEGORIES,
    NO_DESCRIPTION,
    ItemDetails,
    SortOrder,
    featured,
    filter_items,
    list_entries,
    search,
    sort_items,
)
from itemstash.domain.catalog import LooseCategory
from itemstash.domain.items import Case, Item


def _items(*names: str) -> list[Item]:
    return [Item(item_id=str(idx), name=name) for idx, name in enumerate(names)]


def test_filter_items_is_case_insensitive():
    items = _items("AK-47 | Redline", "AWP | Asiimov", "M4A4 | Howl")
    assert [item.name for item in filter_items(items, "aWp")] == ["AWP | Asiimov"]
    assert filter_items(items, "") == items
    assert filter_items(items, "dragon") == []


def test_sort_items_orders_by_name():
    items = _items("b", "C", "a")
    assert [item.name for item in sort_items(items, SortOrder.NAME_ASC)] == ["a", "b", "C"]
    assert [item.name for item in sort_items(items, "name_desc")] == ["C", "b", "a"]
    assert sort_items(items) == items


def test_search_combines_filter_and_sort():
    items = _items("Glock-18 | Fade", "AK-47 | Fade", "AWP | Dragon Lore")
    result = search(items, "fade", SortOrder.NAME_ASC)
    assert [item.name for item in result] == ["AK-47 | Fade", "Glock-18 | Fade"]


def test_list_entries_sorted_and_skips_empty():
    cases = [Case(name="Zeta", image=None), None, Case(name="alpha", image=None)]
    assert [case.name for case in list_entries(cases)] == ["alpha", "Zeta"]


def test_featured_does_not_mutate_input():
    cases = [Case(name=f"Case {idx}", image=None) for idx in range(10)]
    original = list(cases)
    picks = featured(cases, rng=Random(1))
    assert len(picks) == 4
    assert len({case.name for case in picks}) == 4
    assert cases == original
    assert featured(cases[:2], rng=Random(1)) != []
    assert len(featured(cases[:2])) == 2


def test_item_details_fallbacks(item_factory):
    bare = ItemDetails.from_item(Item(item_id="x", name="Bare"))
    assert bare.description == NO_DESCRIPTION
    assert bare.rarity == "N/A"
    assert bare.category == "N/A"
    assert bare.weapon == "N/A"
    assert bare.color is None

    skin = item_factory.build()
    details = ItemDetails.from_item(skin)
    assert details.rarity == skin.rarity.name
    assert details.color == skin.rarity.color


def test_menu_pages_cover_every_loose_category():
    pages = {entry.page for entry in MAIN_CATEGORIES}
    assert {category.value for category in LooseCategory} <= pages
    assert {"cases", "collections"} <= pages
