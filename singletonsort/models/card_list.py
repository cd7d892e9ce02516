from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CardEntry:
    """
    One parsed line of a card list.

    Attributes:
        quantity: Number of copies (always positive)
        name: Card name exactly as written; compared case-sensitively
    """

    quantity: int
    name: str

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got {self.quantity}")
        if not self.name:
            raise ValueError("Card name must not be empty")


@dataclass
class CardList:
    """
    A named, ordered card list.

    Duplicate lines are kept as separate entries. `is_collapsed` is a
    display hint only and has no effect on aggregation.
    """

    name: str
    cards: list[CardEntry] = field(default_factory=list)
    is_collapsed: bool = False

    @property
    def total_cards(self) -> int:
        """Sum of quantities over all entries."""
        return sum(card.quantity for card in self.cards)


@dataclass
class ParseResult:
    """Outcome of parsing a block of card list text."""

    success: bool
    card_list: CardList | None
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CommonCard:
    """
    A card that appears in two or more lists.

    Attributes:
        name: Card name
        deck_indices: Ascending positions of the lists containing the card
        group: Category name (e.g. "Fetch Lands"), None if ungrouped
    """

    name: str
    deck_indices: tuple[int, ...]
    group: str | None = None
