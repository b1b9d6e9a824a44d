"""
Search, filter and sort for marketplace galleries.

All predicates are ANDed; "All" (or an empty value) disables a predicate.
Sorting is stable, so ties keep the order of the input list.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, field_validator

from codemurf.data.reference import ALL
from codemurf.models.catalog import CatalogItem


class SortKey(str, Enum):
    """Gallery sort orders"""
    POPULAR = "popular"  # downloads, high to low
    RATING = "rating"  # rating, high to low
    NEWEST = "newest"  # created_at, new to old
    PRICE = "price"  # price, low to high


class Currency(str, Enum):
    USD = "usd"
    INR = "inr"


_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class CatalogQuery(BaseModel):
    """Filter values selected in a gallery"""

    search: str = ""
    category: str = ALL
    difficulty: str = ALL
    item_type: str = ALL
    plan_type: str = ALL
    sort_by: SortKey = SortKey.POPULAR
    currency: Currency = Currency.USD
    # The hero gallery also matches on the developer's name
    search_developer: bool = False

    @field_validator("search", mode="before")
    @classmethod
    def normalize_search(cls, v):
        return (v or "").strip()

    @field_validator("category", "difficulty", "item_type", "plan_type", mode="before")
    @classmethod
    def empty_means_all(cls, v):
        return v or ALL

    @field_validator("sort_by", "currency", mode="before")
    @classmethod
    def lowercase_choice(cls, v):
        return v.lower() if isinstance(v, str) else v


def _matches_search(item: CatalogItem, needle: str, search_developer: bool) -> bool:
    if not needle:
        return True
    needle = needle.lower()
    haystacks = [item.title, item.short_description]
    if search_developer:
        haystacks.append(item.developer_name or "")
    return any(needle in (text or "").lower() for text in haystacks)


def _matches_choice(selected: str, value: Optional[str]) -> bool:
    return selected == ALL or value == selected


def matches(item: CatalogItem, query: CatalogQuery) -> bool:
    """True when the item satisfies every active predicate"""
    return (
        _matches_search(item, query.search, query.search_developer)
        and _matches_choice(query.category, item.category)
        and _matches_choice(query.difficulty, item.difficulty_level)
        and _matches_choice(query.item_type, item.type)
        and _matches_choice(query.plan_type, item.plan_type)
    )


def filter_items(items: Iterable[CatalogItem], query: CatalogQuery) -> List[CatalogItem]:
    return [item for item in items if matches(item, query)]


def sort_items(
    items: Iterable[CatalogItem],
    sort_by: SortKey,
    currency: Currency = Currency.USD,
) -> List[CatalogItem]:
    """Order items by one of the gallery comparators"""
    sort_by = SortKey(sort_by)
    currency = Currency(currency)

    if sort_by is SortKey.POPULAR:
        return sorted(items, key=lambda item: item.downloads, reverse=True)
    if sort_by is SortKey.RATING:
        return sorted(items, key=lambda item: item.rating, reverse=True)
    if sort_by is SortKey.NEWEST:
        return sorted(items, key=lambda item: item.created_at or _OLDEST, reverse=True)
    return sorted(items, key=lambda item: item.price_for(currency.value))


def apply_query(items: Iterable[CatalogItem], query: CatalogQuery) -> List[CatalogItem]:
    """Filter then sort"""
    return sort_items(filter_items(items, query), query.sort_by, query.currency)
