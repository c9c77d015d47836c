"""Detective Quest - explore the mansion, collect clues, accuse a suspect."""

from detective_quest.clue_set import ClueSet
from detective_quest.suspect_index import SuspectIndex, djb2
from detective_quest.verdict import (
    ACCUSATION_THRESHOLD,
    AccusationResult,
    VerdictEngine,
    judge,
    tally,
)

__all__ = [
    "ACCUSATION_THRESHOLD",
    "AccusationResult",
    "ClueSet",
    "SuspectIndex",
    "VerdictEngine",
    "djb2",
    "judge",
    "tally",
]
