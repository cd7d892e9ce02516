"""
Parser for plain card list text.

Format:
    <quantity> <card name>

Example:
    1 Sol Ring
    1 Command Tower
    30 Forest

Every line is checked; problems are reported per line instead of
stopping at the first bad line.
"""

import re

from singletonsort.models.card_list import CardEntry, CardList, ParseResult

# Pattern: "4 Lightning Bolt"
# Groups: (quantity, card_name)
# Quantity is ASCII digits only; \d would also accept other scripts' digits
CARD_LINE_PATTERN = re.compile(r"^([0-9]+)\s+(.+)$")

EMPTY_LIST_ERROR = "Card list is empty"


def parse_card_list(text: str, name: str = "") -> ParseResult:
    """
    Parse card list text into a CardList.

    Args:
        text: Raw text, one "quantity name" entry per line
        name: Name given to the resulting CardList

    Returns:
        ParseResult. `card_list` is None only when the input is empty or
        whitespace; otherwise it holds every valid entry even when other
        lines produced errors.
    """
    if not text or not text.strip():
        return ParseResult(success=False, card_list=None, errors=[EMPTY_LIST_ERROR])

    errors: list[str] = []
    cards: list[CardEntry] = []

    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()

        # Skip empty lines
        if not line:
            continue

        match = CARD_LINE_PATTERN.match(line)
        if not match:
            errors.append(f'Line {line_number}: Invalid format - "{line}"')
            continue

        try:
            quantity = int(match.group(1))
        except ValueError:
            # Digit run longer than the interpreter's int conversion limit
            errors.append(f'Line {line_number}: Invalid format - "{line}"')
            continue

        card_name = match.group(2).strip()

        if quantity <= 0:
            errors.append(f"Line {line_number}: Quantity must be positive")
            continue

        if not card_name:
            errors.append(f"Line {line_number}: Card name is empty")
            continue

        cards.append(CardEntry(quantity=quantity, name=card_name))

    return ParseResult(
        success=not errors,
        card_list=CardList(name=name, cards=cards),
        errors=errors,
    )


def serialize_card_list(card_list: CardList) -> str:
    """
    Convert a CardList back to text.

    Output parses back to the same entries in the same order.
    """
    return "\n".join(f"{card.quantity} {card.name}" for card in card_list.cards)
