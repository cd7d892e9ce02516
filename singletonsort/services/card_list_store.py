"""
Card list store.

Holds the ordered collection of card lists and persists it after every
mutation. Lists are addressed by position only; removing a list shifts
all later positions down by one.

Out-of-range indices are silent no-ops. Storage failures are logged and
never interrupt the in-memory operation.
"""

import logging
from dataclasses import replace

from pydantic import ValidationError

from singletonsort.models.card_list import CardList, CommonCard, ParseResult
from singletonsort.parsers.card_list import parse_card_list, serialize_card_list
from singletonsort.services.common_cards import compute_common_cards
from singletonsort.services.storage import (
    KeyValueStore,
    StorageError,
    dump_card_lists,
    load_card_lists,
)

logger = logging.getLogger(__name__)


class CardListStore:
    """
    Ordered collection of named card lists.

    Construct one instance at startup; it loads any previously saved
    lists from the given storage.
    """

    def __init__(self, storage: KeyValueStore, storage_key: str) -> None:
        self.storage = storage
        self.storage_key = storage_key
        self._card_lists: list[CardList] = []
        self._errors: list[str] = []
        self._load()

    def __len__(self) -> int:
        return len(self._card_lists)

    # --- Read surface ---

    @property
    def card_lists(self) -> tuple[CardList, ...]:
        """Copies of the stored lists; changing them does not affect the store."""
        return tuple(_copy(card_list) for card_list in self._card_lists)

    @property
    def errors(self) -> tuple[str, ...]:
        return tuple(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def common_cards(self) -> list[CommonCard]:
        """Cards shared by two or more lists, recomputed on every read."""
        return compute_common_cards(self._card_lists)

    # --- Mutations ---

    def add_from_text(self, text: str, name: str | None = None) -> ParseResult:
        """
        Parse text and append the resulting list.

        Args:
            text: Card list text
            name: List name. Defaults to "List <position>".

        Returns:
            The parse result. On failure the collection is untouched and
            the parse errors are recorded.
        """
        self._errors = []

        list_name = name if name is not None else f"List {len(self._card_lists) + 1}"
        result = parse_card_list(text, name=list_name)

        if result.success and result.card_list is not None:
            self._card_lists.append(_copy(result.card_list))
            logger.info(
                "Added card list '%s' with %d cards",
                list_name,
                result.card_list.total_cards,
            )
            self._save()
        else:
            self._errors = list(result.errors)
            logger.debug("Rejected card list with %d errors", len(result.errors))

        return result

    def remove(self, index: int) -> None:
        if not self._in_bounds(index):
            return
        removed = self._card_lists.pop(index)
        logger.info("Removed card list '%s' at index %d", removed.name, index)
        self._save()

    def clear_all(self) -> None:
        self._card_lists = []
        self._errors = []
        self._erase()

    def clear_errors(self) -> None:
        self._errors = []

    def toggle_collapsed(self, index: int) -> None:
        """Flip the collapsed flag. Display state only, so nothing is saved."""
        if not self._in_bounds(index):
            return
        card_list = self._card_lists[index]
        card_list.is_collapsed = not card_list.is_collapsed

    def rename(self, index: int, new_name: str) -> None:
        """Rename a list. Callers are expected to reject blank names."""
        if not self._in_bounds(index):
            return
        self._card_lists[index].name = new_name
        self._save()

    def serialize_at(self, index: int) -> str | None:
        if not self._in_bounds(index):
            return None
        return serialize_card_list(self._card_lists[index])

    # --- Persistence ---

    def _in_bounds(self, index: int) -> bool:
        # Negative indices are rejected rather than wrapping around
        return 0 <= index < len(self._card_lists)

    def _load(self) -> None:
        try:
            document = self.storage.load(self.storage_key)
        except StorageError:
            logger.exception("Failed to load card lists from storage")
            return

        if not document:
            return

        try:
            self._card_lists = load_card_lists(document)
        except ValidationError as e:
            logger.warning("Ignoring malformed stored card lists: %s", e)
            return

        logger.info("Loaded %d card lists from storage", len(self._card_lists))

    def _save(self) -> None:
        try:
            self.storage.save(self.storage_key, dump_card_lists(self._card_lists))
        except StorageError:
            logger.exception("Failed to save card lists to storage")

    def _erase(self) -> None:
        try:
            self.storage.erase(self.storage_key)
        except StorageError:
            logger.exception("Failed to clear card lists from storage")


def _copy(card_list: CardList) -> CardList:
    # Entries are frozen, so copying the list object is enough
    return replace(card_list, cards=list(card_list.cards))
