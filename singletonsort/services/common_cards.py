"""
Common card aggregation.

Finds cards shared by two or more lists. The result is recomputed from
scratch on every call; nothing is cached between calls.
"""

from collections import defaultdict
from collections.abc import Sequence

from singletonsort.models.card_list import CardList, CommonCard
from singletonsort.services.card_categories import classify_card

# Basic lands show up in nearly every list and are never reported
BASIC_LANDS = frozenset({"Plains", "Island", "Swamp", "Mountain", "Forest"})


def compute_common_cards(card_lists: Sequence[CardList]) -> list[CommonCard]:
    """
    Compute the cards that appear in at least two lists.

    Args:
        card_lists: Lists in display order; positions are the reported indices

    Returns:
        CommonCard records sorted by group (ungrouped last), then by name
    """
    if len(card_lists) < 2:
        return []

    indices_by_name: dict[str, set[int]] = defaultdict(set)

    for index, card_list in enumerate(card_lists):
        for card in card_list.cards:
            if card.name in BASIC_LANDS:
                continue
            indices_by_name[card.name].add(index)

    common = [
        CommonCard(
            name=name,
            deck_indices=tuple(sorted(indices)),
            group=classify_card(name),
        )
        for name, indices in indices_by_name.items()
        if len(indices) >= 2
    ]
    common.sort(key=_sort_key)
    return common


def _sort_key(card: CommonCard) -> tuple[bool, str, str, str]:
    """Group first (None sorts last), then case-insensitive name."""
    group = card.group or ""
    return (card.group is None, group.casefold(), card.name.casefold(), card.name)
