"""
Card list API endpoints.

Exposes the card list store: add, remove, rename, collapse and clear
lists, read parse errors, export lists, and read the common cards.

Handlers are async so store calls run one at a time on the event loop.
"""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, field_validator

from singletonsort.models.card_list import CardList, CommonCard, ParseResult
from singletonsort.scrapers.moxfield import MoxfieldClient, MoxfieldError, deck_to_text
from singletonsort.services.card_list_store import CardListStore

router = APIRouter(prefix="/lists", tags=["lists"])


def get_store(request: Request) -> CardListStore:
    """Dependency that provides the application's card list store."""
    store: CardListStore = request.app.state.store
    return store


def get_moxfield_client() -> MoxfieldClient:
    """Dependency that provides a Moxfield client."""
    return MoxfieldClient()


StoreDep = Annotated[CardListStore, Depends(get_store)]


# --- Request / response models ---


class CardEntryResponse(BaseModel):
    quantity: int
    name: str


class CardListResponse(BaseModel):
    """One card list with its derived total."""

    name: str
    cards: list[CardEntryResponse] = Field(default_factory=list)
    total_cards: int = 0
    is_collapsed: bool = False


class LibraryResponse(BaseModel):
    """Current state of the store."""

    lists: list[CardListResponse] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    has_errors: bool = False


class ParseResponse(BaseModel):
    """Result of adding a list from text."""

    success: bool
    card_list: CardListResponse | None = None
    errors: list[str] = Field(default_factory=list)


class CommonCardResponse(BaseModel):
    name: str
    deck_indices: list[int]
    group: str | None = None


class AddListRequest(BaseModel):
    """Request model for adding a card list from text."""

    text: str = Field(
        ...,
        description="Card list text, one 'quantity name' entry per line",
        examples=["1 Sol Ring\n1 Command Tower"],
    )
    name: str | None = Field(
        default=None,
        description="List name. Defaults to 'List <position>'.",
    )


class RenameRequest(BaseModel):
    """Request model for renaming a card list."""

    name: str = Field(..., description="New list name")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("List name must not be blank")
        return value


class MoxfieldImportRequest(BaseModel):
    """Request model for importing a Moxfield deck."""

    deck: str = Field(
        ...,
        min_length=1,
        description="Moxfield deck ID or URL",
        examples=["https://moxfield.com/decks/oEWXWHM5eEGMmopExLWRCA"],
    )


# --- Conversions ---


def _card_list_response(card_list: CardList) -> CardListResponse:
    return CardListResponse(
        name=card_list.name,
        cards=[CardEntryResponse(quantity=c.quantity, name=c.name) for c in card_list.cards],
        total_cards=card_list.total_cards,
        is_collapsed=card_list.is_collapsed,
    )


def _library_response(store: CardListStore) -> LibraryResponse:
    return LibraryResponse(
        lists=[_card_list_response(card_list) for card_list in store.card_lists],
        errors=list(store.errors),
        has_errors=store.has_errors,
    )


def _parse_response(result: ParseResult) -> ParseResponse:
    return ParseResponse(
        success=result.success,
        card_list=_card_list_response(result.card_list) if result.card_list else None,
        errors=result.errors,
    )


def _common_card_response(card: CommonCard) -> CommonCardResponse:
    return CommonCardResponse(
        name=card.name,
        deck_indices=list(card.deck_indices),
        group=card.group,
    )


def _add_or_reject(store: CardListStore, text: str, name: str | None) -> ParseResponse:
    result = store.add_from_text(text, name=name)
    if not result.success:
        raise HTTPException(
            status_code=422,
            detail={"errors": result.errors},
        )
    return _parse_response(result)


# --- Endpoints ---


@router.get("", response_model=LibraryResponse)
async def get_lists(store: StoreDep) -> LibraryResponse:
    """Get all card lists and the current parse errors."""
    return _library_response(store)


@router.post("", response_model=ParseResponse, status_code=status.HTTP_201_CREATED)
async def add_list(request: AddListRequest, store: StoreDep) -> ParseResponse:
    """
    Add a card list from text.

    Returns 422 with the per-line parse errors if the text is invalid.
    The errors are also kept on the store until cleared.
    """
    return _add_or_reject(store, request.text, request.name)


@router.delete("", response_model=LibraryResponse)
async def clear_lists(store: StoreDep) -> LibraryResponse:
    """Remove every card list and clear errors."""
    store.clear_all()
    return _library_response(store)


@router.delete("/errors", response_model=LibraryResponse)
async def clear_errors(store: StoreDep) -> LibraryResponse:
    store.clear_errors()
    return _library_response(store)


@router.get("/common", response_model=list[CommonCardResponse])
async def get_common_cards(store: StoreDep) -> list[CommonCardResponse]:
    """
    Get cards shared by two or more lists.

    Basic lands are excluded. Grouped cards come first, ordered by group
    and then by name.
    """
    return [_common_card_response(card) for card in store.common_cards]


@router.post(
    "/import/moxfield",
    response_model=ParseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def import_moxfield_deck(
    request: MoxfieldImportRequest,
    store: StoreDep,
    client: Annotated[MoxfieldClient, Depends(get_moxfield_client)],
) -> ParseResponse:
    """
    Fetch a Moxfield deck and add it as a card list.

    The list is named after the deck. Returns 502 if Moxfield cannot be reached.
    """
    try:
        deck = await client.fetch_deck(request.deck)
    except MoxfieldError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.message,
        ) from e

    name = deck.get("name") or None
    return _add_or_reject(store, deck_to_text(deck), name)


@router.delete("/{index}", response_model=LibraryResponse)
async def remove_list(index: int, store: StoreDep) -> LibraryResponse:
    """Remove the list at an index. Out-of-range indices change nothing."""
    store.remove(index)
    return _library_response(store)


@router.patch("/{index}", response_model=LibraryResponse)
async def rename_list(index: int, request: RenameRequest, store: StoreDep) -> LibraryResponse:
    store.rename(index, request.name)
    return _library_response(store)


@router.post("/{index}/toggle", response_model=LibraryResponse)
async def toggle_list(index: int, store: StoreDep) -> LibraryResponse:
    store.toggle_collapsed(index)
    return _library_response(store)


@router.get("/{index}/export", response_class=PlainTextResponse)
async def export_list(index: int, store: StoreDep) -> Response:
    """Download a list as a plain text file named after the list."""
    text = store.serialize_at(index)
    if text is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No card list at index {index}",
        )

    filename = f"{store.card_lists[index].name}.txt"
    return PlainTextResponse(
        text,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
