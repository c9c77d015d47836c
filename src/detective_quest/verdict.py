"""
Verdict Engine - Decides whether an accusation holds up.

Cross-references the collected clues with the suspect index: every
collected clue that points at the accused counts as evidence. The
accusation stands when the evidence reaches ACCUSATION_THRESHOLD.
Names are compared exactly (no case folding, no trimming).
"""

import logging
from dataclasses import dataclass, field
from typing import Tuple

from detective_quest.clue_set import ClueSet
from detective_quest.suspect_index import SuspectIndex


logger = logging.getLogger(__name__)

ACCUSATION_THRESHOLD = 2


@dataclass(frozen=True)
class AccusationResult:
    """Outcome of a single accusation. Derived on demand, never stored in the structures."""
    accused: str
    count: int
    threshold: int = ACCUSATION_THRESHOLD
    matching_clues: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> bool:
        return self.count >= self.threshold


@dataclass(frozen=True)
class VerdictEngine:
    """Stateless evidence counter. Borrows the clue set and index read-only."""
    threshold: int = ACCUSATION_THRESHOLD

    def tally(self, clues: ClueSet, index: SuspectIndex, accused: str) -> int:
        """
        Count collected clues that implicate the accused.

        Args:
            clues: Clues collected during exploration
            index: Clue -> suspect associations
            accused: Name of the accused, compared by exact equality

        Returns:
            Number of matching clues
        """
        return len(self._matching(clues, index, accused))

    def judge(self, clues: ClueSet, index: SuspectIndex, accused: str) -> AccusationResult:
        """Tally the evidence and package it with the verdict."""
        matching = self._matching(clues, index, accused)
        result = AccusationResult(
            accused=accused,
            count=len(matching),
            threshold=self.threshold,
            matching_clues=matching,
        )
        logger.debug(
            f"Verdict for {accused!r}: {result.count}/{self.threshold} "
            f"({'succeeded' if result.succeeded else 'insufficient evidence'})"
        )
        return result

    def _matching(self, clues: ClueSet, index: SuspectIndex, accused: str) -> Tuple[str, ...]:
        return tuple(clue for clue in clues.in_order() if index.lookup(clue) == accused)


_default_engine = VerdictEngine()


def tally(clues: ClueSet, index: SuspectIndex, accused: str) -> int:
    """Count matching clues using the standard threshold engine."""
    return _default_engine.tally(clues, index, accused)


def judge(clues: ClueSet, index: SuspectIndex, accused: str) -> AccusationResult:
    """Judge an accusation using the standard threshold engine."""
    return _default_engine.judge(clues, index, accused)
