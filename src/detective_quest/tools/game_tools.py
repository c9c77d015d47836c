"""
Custom CrewAI Tools for Detective Quest
Tools for the detective agent to explore the mansion and accuse a suspect.

Exploration Rules:
- The mansion is a binary tree: from each room you can only go left or right
- Entering a room collects its clue automatically
- There is no way back up; finish exploring when you are done
- The accusation needs at least 2 collected clues pointing at the suspect
"""

import sys
from crewai.tools import tool
from detective_quest.game_state import get_game_state, Direction, SUSPECTS
from detective_quest.verdict import ACCUSATION_THRESHOLD


def _describe_exits(game_state) -> str:
    node = game_state.current
    left = f"{node.left.name}" if node.left else "not available"
    right = f"{node.right.name}" if node.right else "not available"
    return f"   ⬅️ Left: {left}\n   ➡️ Right: {right}"


@tool("Look Around")
def look_around() -> str:
    """
    Describe the room you are in and where you can go from here.

    Returns:
        Current room, number of clues collected, and the available paths
    """
    game_state = get_game_state()

    if game_state.current is None:
        return "Error: The game has not been set up"

    result = f"📍 You are in the {game_state.current.name}\n"
    result += f"   Clues collected so far: {len(game_state.clues)}\n"
    if not game_state.exploring:
        result += "\nExploration is over. Make your accusation."
        return result

    result += f"\n🚪 Paths:\n{_describe_exits(game_state)}"
    return result


def _move(direction: Direction) -> str:
    game_state = get_game_state()

    if game_state.current is None:
        return "Error: The game has not been set up"

    success, message = game_state.move(direction)
    if not success:
        return f"⚠️ {message}"

    sys.stdout.write(f"    🚶 {message}\n")
    sys.stdout.flush()

    if game_state.exploring:
        message += f"\n\n🚪 Paths:\n{_describe_exits(game_state)}"
    return message


@tool("Move Left")
def move_left() -> str:
    """
    Walk through the left door of the current room.
    Any clue in the next room is collected automatically.

    Returns:
        The room entered and any clue found there
    """
    return _move(Direction.LEFT)


@tool("Move Right")
def move_right() -> str:
    """
    Walk through the right door of the current room.
    Any clue in the next room is collected automatically.

    Returns:
        The room entered and any clue found there
    """
    return _move(Direction.RIGHT)


@tool("Finish Exploration")
def finish_exploration() -> str:
    """
    Stop exploring the mansion. Required before making an accusation.

    Returns:
        Confirmation and the collected clues
    """
    game_state = get_game_state()
    if game_state.current is None:
        return "Error: The game has not been set up"
    if not game_state.exploring:
        return "Exploration was already finished."

    game_state.finish_exploration()
    return "🏁 Exploration finished.\n\n" + _format_clues(game_state)


def _format_clues(game_state) -> str:
    if not game_state.clues:
        return "No clues were collected."
    result = f"🔎 Collected clues ({len(game_state.clues)}, alphabetical):\n"
    for clue in game_state.clues.in_order():
        result += f"  - {clue}\n"
    return result.rstrip("\n")


@tool("List Collected Clues")
def list_collected_clues() -> str:
    """
    List every clue collected so far in alphabetical order.

    Returns:
        The collected clues
    """
    return _format_clues(get_game_state())


@tool("Accuse Suspect")
def accuse_suspect(suspect: str) -> str:
    """
    Accuse one suspect by exact name.

    The accusation stands only if at least 2 collected clues point at
    that suspect. Call "Finish Exploration" first.

    Args:
        suspect: Name of the suspect (Ana, Beatriz, Carlos or Daniel)

    Returns:
        The number of matching clues and the verdict
    """
    game_state = get_game_state()

    if game_state.current is None:
        return "Error: The game has not been set up"

    try:
        result = game_state.make_accusation(suspect)
    except ValueError as e:
        return f"⚠️ {str(e)}"

    if result is None:
        return f"Accusation aborted. Valid suspects: {', '.join(SUSPECTS)}"

    sys.stdout.write(f"\n    ⚖️ Accused: {result.accused} ({result.count} matching clue(s))\n")
    sys.stdout.flush()

    if result.succeeded:
        return (
            f"🎉 CORRECT! {result.count} clues point at {result.accused} "
            f"(needed {ACCUSATION_THRESHOLD}). The accusation stands!"
        )
    return (
        f"❌ Insufficient evidence: only {result.count} clue(s) point at "
        f"{result.accused} (needed {ACCUSATION_THRESHOLD})."
    )


@tool("Get Game Status")
def get_game_status() -> str:
    """
    Get the current game status: location, visited rooms and collected clues.

    Returns:
        Current game state summary
    """
    return get_game_state().get_game_summary()
