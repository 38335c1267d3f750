from deckdiff.models.deck import ParsedEntry
from deckdiff.models.diff import ChangeType, DiffEntry
from deckdiff.services.sorting import (
    display_rank,
    is_commander,
    is_land,
    name_collation_key,
    sort_entries,
)


def _entry(name: str, *categories: str) -> ParsedEntry:
    return ParsedEntry(quantity=1, card_name=name, categories=categories)


class TestCategoryDetection:
    def test_commander_substring_case_insensitive(self) -> None:
        assert is_commander(["Commander"])
        assert is_commander(["commander{top}"])
        assert is_commander(["Ramp", "Partner COMMANDER"])
        assert not is_commander(["Ramp"])
        assert not is_commander([])

    def test_land_substring_case_insensitive(self) -> None:
        assert is_land(["Land"])
        assert is_land(["Utility Lands"])
        assert is_land(["MDFC land"])
        assert not is_land(["Removal"])

    def test_rank_keys(self) -> None:
        assert display_rank(["Commander"]) == (False, False)
        assert display_rank(["Commander", "Land"]) == (False, True)
        assert display_rank([]) == (True, False)
        assert display_rank(["Land"]) == (True, True)


class TestSortEntries:
    def test_commander_then_other_then_land(self) -> None:
        entries = [
            _entry("Command Tower", "Land"),
            _entry("Sol Ring"),
            _entry("Atraxa, Praetors' Voice", "Commander"),
            _entry("Counterspell"),
        ]

        result = sort_entries(entries)

        assert [e.card_name for e in result] == [
            "Atraxa, Praetors' Voice",
            "Counterspell",
            "Sol Ring",
            "Command Tower",
        ]

    def test_alphabetical_within_tier_ignores_case(self) -> None:
        entries = [_entry("banana"), _entry("Cherry"), _entry("Apple")]

        assert [e.card_name for e in sort_entries(entries)] == ["Apple", "banana", "Cherry"]

    def test_land_commander_after_other_commanders(self) -> None:
        entries = [_entry("Arbor", "Commander", "Land"), _entry("Zur", "Commander")]

        assert [e.card_name for e in sort_entries(entries)] == ["Zur", "Arbor"]

    def test_land_commander_before_non_commanders(self) -> None:
        entries = [_entry("Birds of Paradise"), _entry("Arbor", "Commander", "Land")]

        assert [e.card_name for e in sort_entries(entries)] == ["Arbor", "Birds of Paradise"]

    def test_ligatures_sort_as_spelled_out(self) -> None:
        entries = [_entry("Zombie"), _entry("Æther Vial"), _entry("Birds of Paradise")]

        assert [e.card_name for e in sort_entries(entries)] == [
            "Æther Vial",
            "Birds of Paradise",
            "Zombie",
        ]

    def test_ligature_collates_with_plain_spelling(self) -> None:
        assert name_collation_key("Æther Vial")[0] == name_collation_key("Aether Vial")[0]
        assert name_collation_key("Straße")[0] == "strasse"

    def test_accents_sort_with_base_letter(self) -> None:
        entries = [_entry("Zombie"), _entry("Éowyn"), _entry("Dark Ritual")]

        assert [e.card_name for e in sort_entries(entries)] == ["Dark Ritual", "Éowyn", "Zombie"]

    def test_order_independent_of_input_order(self) -> None:
        entries = [
            _entry("Forest", "Land"),
            _entry("Island", "Land"),
            _entry("Sol Ring", "Artifact"),
            _entry("Arcane Signet", "Ramp"),
            _entry("Kenrith", "Commander"),
        ]

        forward = sort_entries(entries)
        backward = sort_entries(reversed(entries))

        assert forward == backward
        assert sort_entries(forward) == forward

    def test_case_variants_have_total_order(self) -> None:
        assert name_collation_key("Sol Ring") != name_collation_key("sol ring")

    def test_sorts_diff_entries(self) -> None:
        entries = [
            DiffEntry("Forest", 1, 2, ChangeType.MODIFIED, ("Land",)),
            DiffEntry("Sol Ring", 1, 2, ChangeType.MODIFIED),
        ]

        assert [e.card_name for e in sort_entries(entries)] == ["Sol Ring", "Forest"]

    def test_input_is_not_mutated(self) -> None:
        entries = [_entry("Forest", "Land"), _entry("Sol Ring")]

        sort_entries(entries)

        assert entries[0].card_name == "Forest"
