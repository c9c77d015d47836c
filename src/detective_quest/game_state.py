"""
Game State Management for Detective Quest

The mansion is a fixed binary tree of rooms. From any room the player
may go left, go right, or stop exploring.

Key rules implemented:
- The player starts in the Hall de Entrada
- Entering a room collects its clue automatically (each clue only once)
- Collected clues are stored alphabetically with no duplicates
- After exploring, the player accuses one suspect by name
- The accusation stands only if enough collected clues point at that suspect
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, List

from detective_quest.clue_set import ClueSet
from detective_quest.suspect_index import SuspectIndex
from detective_quest.verdict import AccusationResult, VerdictEngine


logger = logging.getLogger(__name__)


class Room(Enum):
    HALL = "Hall de Entrada"
    LIVING_ROOM = "Sala de Estar"
    LIBRARY = "Biblioteca"
    GARDEN = "Jardim"
    CORRIDOR = "Corredor"
    STUDY = "Escritório"
    KITCHEN = "Cozinha"
    BEDROOM = "Quarto"
    CELLAR = "Porão"


class Direction(Enum):
    LEFT = "e"    # esquerda
    RIGHT = "d"   # direita
    QUIT = "s"    # sair


# ============================================================================
# MANSION LAYOUT
# The mansion is a binary tree rooted at the entrance hall:
#
#                       Hall de Entrada
#                      /               \
#             Sala de Estar             Corredor
#              /        \              /        \
#       Biblioteca     Jardim     Escritório    Cozinha
#                                   /               \
#                               Quarto             Porão
# ============================================================================

START_ROOM = Room.HALL

# Format: { Room: (left child, right child) }
ROOM_PATHS = {
    Room.HALL: (Room.LIVING_ROOM, Room.CORRIDOR),
    Room.LIVING_ROOM: (Room.LIBRARY, Room.GARDEN),
    Room.CORRIDOR: (Room.STUDY, Room.KITCHEN),
    Room.STUDY: (Room.BEDROOM, None),
    Room.KITCHEN: (None, Room.CELLAR),
}

# Clue left in each room. Rooms missing here hold nothing.
ROOM_CLUES = {
    Room.HALL: "pegada de lama",
    Room.LIVING_ROOM: "lenço rasgado com monograma",
    Room.LIBRARY: "marcador de livro dobrado",
    Room.GARDEN: "fio de tecido azul",
    Room.STUDY: "nota ameaçadora",
    Room.KITCHEN: "faca com impressao parcial",
    Room.BEDROOM: "guilhotina de cabelo (fiapo)",
    Room.CELLAR: "fio de lã cinza",  # not linked to anyone
}

# Which suspect each clue points at (clue, suspect)
SUSPECT_TABLE = [
    ("pegada de lama", "Carlos"),
    ("lenço rasgado com monograma", "Ana"),
    ("faca com impressao parcial", "Carlos"),
    ("marcador de livro dobrado", "Beatriz"),
    ("nota ameaçadora", "Daniel"),
    ("fio de tecido azul", "Ana"),
    ("guilhotina de cabelo (fiapo)", "Beatriz"),
]

SUSPECTS = ["Ana", "Beatriz", "Carlos", "Daniel"]


@dataclass
class RoomNode:
    """A room in the mansion tree."""
    room: Room
    clue: Optional[str] = None  # None when there is no clue or it was collected
    left: Optional["RoomNode"] = None
    right: Optional["RoomNode"] = None

    @property
    def name(self) -> str:
        return self.room.value

    def child(self, direction: Direction) -> Optional["RoomNode"]:
        if direction == Direction.LEFT:
            return self.left
        if direction == Direction.RIGHT:
            return self.right
        return None


def build_mansion(
    start: Room = START_ROOM,
    paths: Optional[dict] = None,
    clues: Optional[dict] = None,
) -> RoomNode:
    """
    Build the room tree from the layout tables.

    Args:
        start: The root room
        paths: { Room: (left, right) } (defaults to ROOM_PATHS)
        clues: { Room: clue text } (defaults to ROOM_CLUES)

    Returns:
        The root RoomNode
    """
    paths = ROOM_PATHS if paths is None else paths
    clues = ROOM_CLUES if clues is None else clues

    root = RoomNode(start, clues.get(start))
    pending = [root]
    seen = {start}
    while pending:
        node = pending.pop()
        left, right = paths.get(node.room, (None, None))
        for room, attr in ((left, "left"), (right, "right")):
            if room is None:
                continue
            if room in seen:
                raise ValueError(f"Room {room.value} appears twice in the mansion layout")
            seen.add(room)
            child = RoomNode(room, clues.get(room))
            setattr(node, attr, child)
            pending.append(child)
    return root


def parse_choice(text: Optional[str]) -> Optional[Direction]:
    """
    Read a navigation choice from raw input.

    Only the first non-blank character matters, case-insensitively:
    'e' goes left, 'd' goes right, 's' stops exploring.
    """
    if not text:
        return None
    stripped = text.strip()
    if not stripped:
        return None
    first = stripped[0].lower()
    for direction in Direction:
        if direction.value == first:
            return direction
    return None


@dataclass
class GameState:
    """Main game state manager for one playthrough."""
    root: Optional[RoomNode] = None
    current: Optional[RoomNode] = None
    clues: ClueSet = field(default_factory=ClueSet)
    suspect_index: SuspectIndex = field(default_factory=SuspectIndex)
    verdict_engine: VerdictEngine = field(default_factory=VerdictEngine)
    visited: list[Room] = field(default_factory=list)
    exploring: bool = False
    accusation: Optional[AccusationResult] = None
    last_found: Optional[str] = None  # Clue picked up on the latest room entry

    def setup_game(
        self,
        paths: Optional[dict] = None,
        room_clues: Optional[dict] = None,
        suspect_table: Optional[List[Tuple[str, str]]] = None,
    ) -> None:
        """Build the mansion and suspect index, then enter the first room."""
        self.root = build_mansion(START_ROOM, paths, room_clues)
        self.suspect_index = SuspectIndex().build(
            SUSPECT_TABLE if suspect_table is None else suspect_table
        )
        self.clues = ClueSet()
        self.visited = []
        self.accusation = None
        self.exploring = True
        self._enter(self.root)

    def _enter(self, node: RoomNode) -> Optional[str]:
        self.current = node
        self.visited.append(node.room)
        self.last_found = self.collect_clue()
        return self.last_found

    def collect_clue(self) -> Optional[str]:
        """
        Pick up the clue in the current room, if any.

        The room is emptied afterwards so revisiting it yields nothing.

        Returns:
            The clue collected, or None
        """
        if self.current is None or not self.current.clue:
            return None
        clue = self.current.clue
        self.current.clue = None
        if self.clues.insert(clue):
            logger.debug(f"Collected clue in {self.current.name}: {clue!r}")
        return clue

    def get_available_moves(self) -> list[Direction]:
        """Directions with a room behind them, plus QUIT while exploring."""
        if not self.exploring or self.current is None:
            return []
        moves = []
        if self.current.left is not None:
            moves.append(Direction.LEFT)
        if self.current.right is not None:
            moves.append(Direction.RIGHT)
        moves.append(Direction.QUIT)
        return moves

    def move(self, direction: Direction) -> Tuple[bool, str]:
        """
        Move the player one room left or right, or stop exploring.

        Returns:
            (success, message)
        """
        if not self.exploring or self.current is None:
            return (False, "Exploration is over")

        if direction == Direction.QUIT:
            self.finish_exploration()
            return (True, "Exploration finished by the player.")

        target = self.current.child(direction)
        if target is None:
            side = "left" if direction == Direction.LEFT else "right"
            return (False, f"There is no path to the {side} of {self.current.name}.")

        logger.debug(f"Moving {direction.name} from {self.current.name} to {target.name}")
        clue = self._enter(target)
        if clue:
            return (True, f"Entered {target.name} and found a clue: \"{clue}\"")
        return (True, f"Entered {target.name}. No new clue here.")

    def finish_exploration(self) -> None:
        self.exploring = False

    def make_accusation(self, accused: Optional[str]) -> Optional[AccusationResult]:
        """
        Accuse a suspect using the clues collected so far.

        A blank name aborts the accusation and returns None.
        Accusations are only allowed once exploration has ended.
        """
        if self.root is None:
            raise ValueError("The game has not been set up")
        if self.exploring:
            raise ValueError("Finish exploring the mansion before making an accusation")

        name = (accused or "").strip()
        if not name:
            logger.debug("Accusation aborted (blank name)")
            return None

        self.accusation = self.verdict_engine.judge(self.clues, self.suspect_index, name)
        return self.accusation

    def get_game_summary(self) -> str:
        """Get a summary of the current game state."""
        location = self.current.name if self.current else "Outside the mansion"
        status = "Exploring" if self.exploring else "Exploration finished"
        summary = f"=== Detective Quest ===\n"
        summary += f"Location: {location}\n"
        summary += f"Status: {status}\n"
        summary += f"Rooms visited: {len(self.visited)}\n"
        summary += f"Clues collected: {len(self.clues)}\n"
        for clue in self.clues.in_order():
            summary += f"  - {clue}\n"
        if self.accusation:
            verdict = "SUCCEEDED" if self.accusation.succeeded else "insufficient evidence"
            summary += (
                f"Accusation: {self.accusation.accused} "
                f"({self.accusation.count}/{self.accusation.threshold}) - {verdict}\n"
            )
        return summary


# Global game state instance
_game_state: Optional[GameState] = None


def get_game_state() -> GameState:
    """Get or create the global game state."""
    global _game_state
    if _game_state is None:
        _game_state = GameState()
    return _game_state


def reset_game_state() -> GameState:
    """Reset the global game state."""
    global _game_state
    _game_state = GameState()
    return _game_state
