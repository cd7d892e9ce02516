"""
Key-value persistence for card lists.

The list store only needs three calls: load, save and erase. Backends
raise StorageError on failure; the store decides what to do with it.
"""

from typing import Protocol

from pydantic import BaseModel, Field, TypeAdapter
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from singletonsort.db.operations import delete_value, get_value, put_value
from singletonsort.models.card_list import CardEntry, CardList


class StorageError(Exception):
    """Raised when a storage backend cannot read, write or delete a value."""


class KeyValueStore(Protocol):
    """Minimal string key-value storage."""

    def load(self, key: str) -> str | None: ...

    def save(self, key: str, value: str) -> None: ...

    def erase(self, key: str) -> None: ...


class InMemoryKeyValueStore:
    """Dict-backed store. Contents are lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self.values.get(key)

    def save(self, key: str, value: str) -> None:
        self.values[key] = value

    def erase(self, key: str) -> None:
        self.values.pop(key, None)


class SqlKeyValueStore:
    """
    Store backed by the `stored_values` table.

    Each call runs in its own transaction.
    """

    def __init__(self, factory: sessionmaker[Session]) -> None:
        self.factory = factory

    def load(self, key: str) -> str | None:
        try:
            with self.factory() as session:
                return get_value(session, key)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load '{key}': {e}") from e

    def save(self, key: str, value: str) -> None:
        try:
            with self.factory() as session, session.begin():
                put_value(session, key, value)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to save '{key}': {e}") from e

    def erase(self, key: str) -> None:
        try:
            with self.factory() as session, session.begin():
                delete_value(session, key)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to erase '{key}': {e}") from e


# --- Stored document format ---


class StoredCardEntry(BaseModel):
    """One card entry as stored."""

    quantity: int = Field(..., gt=0)
    name: str = Field(..., min_length=1)


class StoredCardList(BaseModel):
    """One card list as stored. Total is derived, so it is not stored."""

    name: str
    cards: list[StoredCardEntry] = Field(default_factory=list)
    is_collapsed: bool = False


_stored_lists = TypeAdapter(list[StoredCardList])


def dump_card_lists(card_lists: list[CardList]) -> str:
    """Encode card lists as a JSON document."""
    stored = [
        StoredCardList(
            name=card_list.name,
            cards=[StoredCardEntry(quantity=c.quantity, name=c.name) for c in card_list.cards],
            is_collapsed=card_list.is_collapsed,
        )
        for card_list in card_lists
    ]
    return _stored_lists.dump_json(stored).decode()


def load_card_lists(document: str) -> list[CardList]:
    """
    Decode a JSON document written by dump_card_lists.

    Raises:
        pydantic.ValidationError: If the document is malformed
    """
    stored = _stored_lists.validate_json(document)
    return [
        CardList(
            name=item.name,
            cards=[CardEntry(quantity=c.quantity, name=c.name) for c in item.cards],
            is_collapsed=item.is_collapsed,
        )
        for item in stored
    ]
