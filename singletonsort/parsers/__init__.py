from singletonsort.parsers.card_list import (
    EMPTY_LIST_ERROR,
    parse_card_list,
    serialize_card_list,
)

__all__ = [
    "EMPTY_LIST_ERROR",
    "parse_card_list",
    "serialize_card_list",
]
