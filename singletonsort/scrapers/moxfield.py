"""
Moxfield deck fetcher.

Fetches public decks from the unofficial Moxfield API and turns them into
card list text the parser understands.

Note: The API is unofficial and may change without notice.
"""

import re
from typing import Any

import httpx

from singletonsort.config import settings

USER_AGENT = "SingletonSort/0.1"

# Boards included in the card list text, in output order
DECK_BOARDS = ("commanders", "mainboard")

DECK_URL_PATTERN = re.compile(r"moxfield\.com/decks/([^/?#]+)")


class MoxfieldError(Exception):
    """Raised when a deck cannot be fetched."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def extract_deck_id(deck_id_or_url: str) -> str:
    """
    Extract the deck ID from a Moxfield URL.

    Examples:
        "https://moxfield.com/decks/abc123?foo=1" -> "abc123"
        "abc123" -> "abc123"
    """
    match = DECK_URL_PATTERN.search(deck_id_or_url)
    if match:
        return match.group(1)
    return deck_id_or_url.strip()


def deck_to_text(deck: dict[str, Any]) -> str:
    """
    Convert a Moxfield deck payload to card list text.

    Commanders come first, then the mainboard. Entries missing a card
    name or a positive quantity are skipped.
    """
    lines: list[str] = []

    for board_name in DECK_BOARDS:
        board = deck.get(board_name) or {}
        for entry in (board.get("cards") or {}).values():
            name = (entry.get("card") or {}).get("name")
            quantity = entry.get("quantity", 0)
            if not name or not isinstance(quantity, int) or quantity <= 0:
                continue
            lines.append(f"{quantity} {name}")

    return "\n".join(lines)


class MoxfieldClient:
    """Client for the Moxfield deck API."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        """
        Initialize the Moxfield client.

        Args:
            base_url: API base URL. Defaults to settings.moxfield_url.
            timeout: Request timeout in seconds. Defaults to settings.moxfield_timeout.
        """
        self.base_url = (base_url or settings.moxfield_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.moxfield_timeout

    async def fetch_deck(self, deck_id_or_url: str) -> dict[str, Any]:
        """
        Fetch a deck by ID or URL.

        Raises:
            MoxfieldError: If the request fails or returns an error status
        """
        deck_id = extract_deck_id(deck_id_or_url)
        if not deck_id:
            raise MoxfieldError("Deck ID is empty")

        url = f"{self.base_url}/v2/decks/all/{deck_id}"

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, headers={"User-Agent": USER_AGENT}
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                data: dict[str, Any] = response.json()
        except httpx.HTTPStatusError as e:
            raise MoxfieldError(
                f"Moxfield returned {e.response.status_code} for deck {deck_id}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise MoxfieldError(f"Failed to fetch deck {deck_id}: {e}") from e
        except ValueError as e:
            raise MoxfieldError(f"Invalid response for deck {deck_id}") from e

        return data
