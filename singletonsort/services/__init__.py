"""
SingletonSort services.

List storage, category lookup and common card aggregation.
"""

from singletonsort.services.card_categories import (
    CARD_CATEGORIES,
    CATEGORY_ORDER,
    classify_card,
)
from singletonsort.services.card_list_store import CardListStore
from singletonsort.services.common_cards import BASIC_LANDS, compute_common_cards
from singletonsort.services.storage import (
    InMemoryKeyValueStore,
    KeyValueStore,
    SqlKeyValueStore,
    StorageError,
    dump_card_lists,
    load_card_lists,
)

__all__ = [
    "BASIC_LANDS",
    "CARD_CATEGORIES",
    "CATEGORY_ORDER",
    "CardListStore",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "SqlKeyValueStore",
    "StorageError",
    "classify_card",
    "compute_common_cards",
    "dump_card_lists",
    "load_card_lists",
]
