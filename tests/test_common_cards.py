from singletonsort.models.card_list import CardList
from singletonsort.parsers.card_list import parse_card_list
from singletonsort.services.card_categories import (
    CARD_CATEGORIES,
    CATEGORY_ORDER,
    FETCH_LANDS,
    classify_card,
)
from singletonsort.services.common_cards import BASIC_LANDS, compute_common_cards


def make_list(text: str, name: str = "") -> CardList:
    card_list = parse_card_list(text, name=name).card_list
    assert card_list is not None
    return card_list


class TestClassifyCard:
    def test_fetch_land(self) -> None:
        assert classify_card("Polluted Delta") == "Fetch Lands"

    def test_shock_land(self) -> None:
        assert classify_card("Watery Grave") == "Shock Lands"

    def test_original_dual(self) -> None:
        assert classify_card("Underground Sea") == "Original Duals"

    def test_ungrouped(self) -> None:
        assert classify_card("Sol Ring") is None

    def test_exact_match_only(self) -> None:
        assert classify_card("polluted delta") is None
        assert classify_card("Polluted Delta ") is None

    def test_every_fetch_land_classified(self) -> None:
        for name in FETCH_LANDS:
            assert classify_card(name) == "Fetch Lands"

    def test_tables_do_not_overlap(self) -> None:
        seen: set[str] = set()
        for _, members in CARD_CATEGORIES:
            assert not seen & members
            seen |= members

    def test_category_order(self) -> None:
        assert CATEGORY_ORDER[0] == "Original Duals"
        assert "Fetch Lands" in CATEGORY_ORDER
        assert len(CATEGORY_ORDER) == len(CARD_CATEGORIES)


class TestComputeCommonCards:
    def test_no_lists(self) -> None:
        assert compute_common_cards([]) == []

    def test_single_list(self) -> None:
        """One list never has common cards, even with duplicate lines."""
        assert compute_common_cards([make_list("1 Sol Ring\n1 Sol Ring")]) == []

    def test_card_in_two_lists(self) -> None:
        common = compute_common_cards([make_list("1 Sol Ring"), make_list("1 Sol Ring")])

        assert len(common) == 1
        assert common[0].name == "Sol Ring"
        assert common[0].deck_indices == (0, 1)
        assert common[0].group is None

    def test_excludes_basic_lands(self) -> None:
        common = compute_common_cards([make_list("1 Forest"), make_list("1 Forest")])

        assert common == []

    def test_excludes_every_basic_land(self) -> None:
        text = "\n".join(f"10 {name}" for name in BASIC_LANDS)

        assert compute_common_cards([make_list(text), make_list(text)]) == []

    def test_snow_basics_are_not_excluded(self) -> None:
        common = compute_common_cards(
            [make_list("1 Snow-Covered Forest"), make_list("1 Snow-Covered Forest")]
        )

        assert [c.name for c in common] == ["Snow-Covered Forest"]

    def test_indices_deduplicated(self) -> None:
        """Repeated lines in one list contribute one index."""
        common = compute_common_cards(
            [make_list("1 Sol Ring\n1 Sol Ring"), make_list("1 Sol Ring")]
        )

        assert common[0].deck_indices == (0, 1)

    def test_indices_ascending(self) -> None:
        lists = [
            make_list("1 Sol Ring"),
            make_list("1 Arcane Signet"),
            make_list("1 Sol Ring\n1 Arcane Signet"),
        ]

        common = compute_common_cards(lists)
        by_name = {c.name: c for c in common}

        assert by_name["Sol Ring"].deck_indices == (0, 2)
        assert by_name["Arcane Signet"].deck_indices == (1, 2)

    def test_case_sensitive_names(self) -> None:
        common = compute_common_cards([make_list("1 Sol Ring"), make_list("1 sol ring")])

        assert common == []

    def test_fetch_land_group(self) -> None:
        common = compute_common_cards(
            [make_list("1 Misty Rainforest"), make_list("1 Misty Rainforest")]
        )

        assert common[0].group == "Fetch Lands"

    def test_grouped_cards_sort_before_ungrouped(self) -> None:
        text = "1 Arcane Signet\n1 Scalding Tarn\n1 Zuran Orb\n1 Steam Vents"
        common = compute_common_cards([make_list(text), make_list(text)])

        assert [(c.group, c.name) for c in common] == [
            ("Fetch Lands", "Scalding Tarn"),
            ("Shock Lands", "Steam Vents"),
            (None, "Arcane Signet"),
            (None, "Zuran Orb"),
        ]

    def test_names_sorted_case_insensitively(self) -> None:
        text = "1 zombie token maker\n1 Arcane Signet\n1 Mana Crypt"
        common = compute_common_cards([make_list(text), make_list(text)])

        assert [c.name for c in common] == [
            "Arcane Signet",
            "Mana Crypt",
            "zombie token maker",
        ]

    def test_recomputed_after_removal(self) -> None:
        """Indices reflect the current positions of the lists."""
        lists = [
            make_list("1 Mana Crypt"),
            make_list("1 Sol Ring"),
            make_list("1 Sol Ring"),
        ]
        assert compute_common_cards(lists)[0].deck_indices == (1, 2)

        del lists[0]

        assert compute_common_cards(lists)[0].deck_indices == (0, 1)

    def test_same_input_same_output(self) -> None:
        lists = [make_list("1 Sol Ring\n1 Bayou"), make_list("1 Bayou\n1 Sol Ring")]

        assert compute_common_cards(lists) == compute_common_cards(lists)
