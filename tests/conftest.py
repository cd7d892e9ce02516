import pytest

from singletonsort.services.card_list_store import CardListStore
from singletonsort.services.storage import InMemoryKeyValueStore

STORAGE_KEY = "test-card-lists"


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def store(storage: InMemoryKeyValueStore) -> CardListStore:
    return CardListStore(storage, STORAGE_KEY)


@pytest.fixture
def commander_list_text() -> str:
    """Sample commander list for testing."""
    return """1 Sol Ring
1 Command Tower
1 Polluted Delta
1 Watery Grave
30 Island"""
