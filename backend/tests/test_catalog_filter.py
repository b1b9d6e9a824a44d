"""
Tests for gallery search, filters and sorting
"""
import pytest
from pydantic import ValidationError

from codemurf.data.samples import SAMPLE_TEMPLATES
from codemurf.models.catalog import CatalogItem
from codemurf.services.catalog_filter import (CatalogQuery, Currency, SortKey, apply_query,
                                              filter_items, matches, sort_items)


def _ids(items):
    return [item.id for item in items]


def _item(id, **fields):
    return CatalogItem.model_validate({"id": id, "title": f"Item {id}", **fields})


def test_default_query_keeps_everything():
    """Test that an empty query matches every item"""
    assert len(filter_items(SAMPLE_TEMPLATES, CatalogQuery())) == len(SAMPLE_TEMPLATES)


def test_search_is_case_insensitive_over_title_and_description():
    query = CatalogQuery(search="DASHBOARD")
    assert set(_ids(filter_items(SAMPLE_TEMPLATES, query))) == {"2", "17", "22"}


def test_search_is_trimmed():
    assert CatalogQuery(search="  blog  ").search == "blog"
    assert _ids(filter_items(SAMPLE_TEMPLATES, CatalogQuery(search="  blog "))) == ["5"]


def test_developer_name_only_searched_when_enabled():
    """Test that the hero gallery also matches the developer's name"""
    assert filter_items(SAMPLE_TEMPLATES, CatalogQuery(search="chen")) == []
    query = CatalogQuery(search="chen", search_developer=True)
    assert _ids(filter_items(SAMPLE_TEMPLATES, query)) == ["2"]


def test_category_filter():
    query = CatalogQuery(category="Web Development")
    assert _ids(filter_items(SAMPLE_TEMPLATES, query)) == ["1", "5", "16"]


def test_predicates_are_combined():
    query = CatalogQuery(category="Web Development", difficulty="Easy", plan_type="Free")
    assert _ids(filter_items(SAMPLE_TEMPLATES, query)) == ["1", "5"]


def test_empty_filter_values_mean_all():
    query = CatalogQuery(category="", difficulty=None, item_type="", plan_type=None)
    assert query.category == "All"
    assert query.difficulty == "All"
    assert len(filter_items(SAMPLE_TEMPLATES, query)) == len(SAMPLE_TEMPLATES)


def test_type_and_plan_filters():
    query = CatalogQuery(item_type="Component", plan_type="Free")
    assert _ids(filter_items(SAMPLE_TEMPLATES, query)) == ["13", "24"]

    paid = filter_items(SAMPLE_TEMPLATES, CatalogQuery(plan_type="Paid"))
    assert all(not item.is_free for item in paid)


def test_unknown_category_matches_nothing():
    assert filter_items(SAMPLE_TEMPLATES, CatalogQuery(category="Knitting")) == []


def test_matches_single_item():
    item = _item("x", category="Finance", difficultyLevel="Easy", shortDescription="Budget app")
    assert matches(item, CatalogQuery(search="budget", category="Finance"))
    assert not matches(item, CatalogQuery(difficulty="Tough"))


def test_sort_popular_by_downloads_descending():
    result = sort_items(SAMPLE_TEMPLATES, SortKey.POPULAR)
    assert _ids(result)[:4] == ["1", "7", "13", "3"]
    downloads = [item.downloads for item in result]
    assert downloads == sorted(downloads, reverse=True)


def test_sort_rating_is_stable_for_ties():
    result = sort_items(SAMPLE_TEMPLATES, SortKey.RATING)
    assert _ids(result)[:2] == ["2", "17"]


def test_sort_newest_first():
    result = sort_items(SAMPLE_TEMPLATES, SortKey.NEWEST)
    assert result[0].id == "24"
    assert result[-1].id == "1"


def test_sort_newest_puts_undated_items_last():
    items = [_item("a"), _item("b", createdAt="2024-05-01"), _item("c", createdAt="2023-01-01")]
    assert _ids(sort_items(items, SortKey.NEWEST)) == ["b", "c", "a"]


def test_sort_price_uses_selected_currency():
    items = [
        _item("a", pricingUSD=10, pricingINR=100),
        _item("b", pricingUSD=5, pricingINR=900),
        _item("c", pricingUSD=0, pricingINR=0),
    ]
    assert _ids(sort_items(items, SortKey.PRICE, Currency.USD)) == ["c", "b", "a"]
    assert _ids(sort_items(items, SortKey.PRICE, Currency.INR)) == ["c", "a", "b"]


def test_sort_accepts_plain_strings():
    assert _ids(sort_items(SAMPLE_TEMPLATES, "newest"))[0] == "24"


def test_sort_does_not_mutate_input():
    items = list(SAMPLE_TEMPLATES)
    sort_items(items, SortKey.RATING)
    assert _ids(items) == _ids(SAMPLE_TEMPLATES)


def test_apply_query_filters_then_sorts():
    query = CatalogQuery(category="Web Development", sort_by="rating")
    assert _ids(apply_query(SAMPLE_TEMPLATES, query)) == ["1", "5", "16"]


def test_sort_and_currency_are_case_insensitive():
    query = CatalogQuery(sort_by="Price", currency="INR")
    assert query.sort_by is SortKey.PRICE
    assert query.currency is Currency.INR


def test_unknown_sort_is_rejected():
    with pytest.raises(ValidationError):
        CatalogQuery(sort_by="cheapest")
