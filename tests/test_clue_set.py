"""
Tests for the Clue Set
Ordered, duplicate-free storage of collected clues.
"""

import pytest
from detective_quest.clue_set import ClueSet


CLUES = [
    "pegada de lama",
    "lenço rasgado com monograma",
    "faca com impressao parcial",
    "marcador de livro dobrado",
    "nota ameaçadora",
    "fio de tecido azul",
    "guilhotina de cabelo (fiapo)",
]


class TestInsert:
    """Test inserting clues."""

    def test_insert_into_empty_set(self):
        """First insertion creates the root."""
        clues = ClueSet()
        assert clues.insert("pegada de lama") == True
        assert clues.root.clue == "pegada de lama"
        assert len(clues) == 1

    def test_duplicate_is_rejected(self):
        """Inserting the same clue again creates no new node."""
        clues = ClueSet()
        clues.insert("nota ameaçadora")
        assert clues.insert("nota ameaçadora") == False
        assert len(clues) == 1

    def test_insert_twice_same_as_once(self):
        """Repeated insertion leaves contents and order unchanged."""
        once = ClueSet()
        twice = ClueSet()
        for clue in CLUES:
            once.insert(clue)
            twice.insert(clue)
            twice.insert(clue)

        assert list(once.in_order()) == list(twice.in_order())
        for clue in CLUES:
            assert once.contains(clue) == twice.contains(clue)

    @pytest.mark.parametrize("bad", ["", None])
    def test_empty_clue_is_ignored(self, bad):
        """Empty or missing clues are silently ignored."""
        clues = ClueSet()
        assert clues.insert(bad) == False
        assert len(clues) == 0
        assert clues.root is None

    def test_bst_ordering(self):
        """Smaller clues go left, larger go right."""
        clues = ClueSet()
        clues.insert("m")
        clues.insert("a")
        clues.insert("z")
        assert clues.root.left.clue == "a"
        assert clues.root.right.clue == "z"

    def test_comparison_is_case_sensitive(self):
        """Clues differing only in case are distinct."""
        clues = ClueSet()
        assert clues.insert("Pegada de lama") == True
        assert clues.insert("pegada de lama") == True
        assert len(clues) == 2


class TestContains:
    """Test membership checks."""

    def test_contains_inserted(self):
        clues = ClueSet()
        for clue in CLUES:
            clues.insert(clue)
        for clue in CLUES:
            assert clues.contains(clue)
            assert clue in clues

    def test_not_inserted_is_absent(self):
        """Clues never inserted are never reported."""
        clues = ClueSet()
        for clue in CLUES:
            clues.insert(clue)
        assert clues.contains("fio de lã cinza") == False
        assert "Pegada de lama" not in clues
        assert clues.contains("") == False

    def test_empty_set_contains_nothing(self):
        assert ClueSet().contains("pegada de lama") == False


class TestInOrder:
    """Test alphabetical traversal."""

    def test_strictly_ascending(self):
        """Traversal is sorted with no repeats, whatever the insertion order."""
        clues = ClueSet()
        for clue in CLUES + list(reversed(CLUES)):
            clues.insert(clue)

        listed = list(clues.in_order())
        assert listed == sorted(set(CLUES))
        assert all(a < b for a, b in zip(listed, listed[1:]))

    def test_traversal_is_restartable(self):
        """Each call starts from scratch."""
        clues = ClueSet()
        for clue in CLUES:
            clues.insert(clue)
        assert list(clues.in_order()) == list(clues.in_order())
        assert list(clues) == list(clues.in_order())

    def test_traversal_does_not_mutate(self):
        clues = ClueSet()
        for clue in CLUES:
            clues.insert(clue)
        list(clues.in_order())
        assert len(clues) == len(CLUES)

    def test_empty_traversal(self):
        assert list(ClueSet().in_order()) == []

    def test_degenerate_tree_does_not_recurse(self):
        """Sorted insertion makes a linked list; traversal still works."""
        clues = ClueSet()
        items = [f"pista {i:05d}" for i in range(1500)]
        for item in items:
            clues.insert(item)
        assert clues.height() == 1500
        assert list(clues.in_order()) == items

    def test_height_depends_on_insertion_order(self):
        balanced = ClueSet()
        for clue in ["b", "a", "c"]:
            balanced.insert(clue)
        chain = ClueSet()
        for clue in ["a", "b", "c"]:
            chain.insert(clue)
        assert balanced.height() == 2
        assert chain.height() == 3
        assert list(balanced) == list(chain)
