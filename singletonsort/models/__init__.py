from singletonsort.models.card_list import CardEntry, CardList, CommonCard, ParseResult

__all__ = [
    "CardEntry",
    "CardList",
    "CommonCard",
    "ParseResult",
]
