"""
Card category lookup.

Maps card names to a named group (kinds of dual lands) using fixed
membership tables. Tables are checked in priority order and the first
table containing the name wins.
"""

ORIGINAL_DUALS = frozenset(
    {
        "Badlands",
        "Bayou",
        "Plateau",
        "Savannah",
        "Scrubland",
        "Taiga",
        "Tropical Island",
        "Tundra",
        "Underground Sea",
        "Volcanic Island",
    }
)

FETCH_LANDS = frozenset(
    {
        "Arid Mesa",
        "Bloodstained Mire",
        "Flooded Strand",
        "Marsh Flats",
        "Misty Rainforest",
        "Polluted Delta",
        "Prismatic Vista",
        "Scalding Tarn",
        "Verdant Catacombs",
        "Windswept Heath",
        "Wooded Foothills",
    }
)

SHOCK_LANDS = frozenset(
    {
        "Blood Crypt",
        "Breeding Pool",
        "Godless Shrine",
        "Hallowed Fountain",
        "Overgrown Tomb",
        "Sacred Foundry",
        "Steam Vents",
        "Stomping Ground",
        "Temple Garden",
        "Watery Grave",
    }
)

FAST_LANDS = frozenset(
    {
        "Blackcleave Cliffs",
        "Blooming Marsh",
        "Botanical Sanctum",
        "Concealed Courtyard",
        "Copperline Gorge",
        "Darkslick Shores",
        "Inspiring Vantage",
        "Razorverge Thicket",
        "Seachrome Coast",
        "Spirebluff Canal",
    }
)

CHECK_LANDS = frozenset(
    {
        "Clifftop Retreat",
        "Dragonskull Summit",
        "Drowned Catacomb",
        "Glacial Fortress",
        "Hinterland Harbor",
        "Isolated Chapel",
        "Rootbound Crag",
        "Sulfur Falls",
        "Sunpetal Grove",
        "Woodland Cemetery",
    }
)

PAIN_LANDS = frozenset(
    {
        "Adarkar Wastes",
        "Battlefield Forge",
        "Brushland",
        "Caves of Koilos",
        "Karplusan Forest",
        "Llanowar Wastes",
        "Shivan Reef",
        "Sulfurous Springs",
        "Underground River",
        "Yavimaya Coast",
    }
)

TRIOMES = frozenset(
    {
        "Indatha Triome",
        "Jetmir's Oasis",
        "Ketria Triome",
        "Raffine's Tower",
        "Raugrin Triome",
        "Savai Triome",
        "Spara's Headquarters",
        "Xander's Lounge",
        "Zagoth Triome",
        "Ziatora's Proving Ground",
    }
)

# Order matters - first match wins
CARD_CATEGORIES: tuple[tuple[str, frozenset[str]], ...] = (
    ("Original Duals", ORIGINAL_DUALS),
    ("Fetch Lands", FETCH_LANDS),
    ("Shock Lands", SHOCK_LANDS),
    ("Fast Lands", FAST_LANDS),
    ("Check Lands", CHECK_LANDS),
    ("Pain Lands", PAIN_LANDS),
    ("Triomes", TRIOMES),
)

CATEGORY_ORDER: tuple[str, ...] = tuple(group for group, _ in CARD_CATEGORIES)


def classify_card(name: str) -> str | None:
    """
    Return the category group for a card name.

    Matching is exact and case-sensitive. Returns None for ungrouped cards.
    """
    for group, members in CARD_CATEGORIES:
        if name in members:
            return group
    return None
