from detective_quest.tools.game_tools import (
    look_around,
    move_left,
    move_right,
    finish_exploration,
    list_collected_clues,
    accuse_suspect,
    get_game_status,
)

__all__ = [
    "look_around",
    "move_left",
    "move_right",
    "finish_exploration",
    "list_collected_clues",
    "accuse_suspect",
    "get_game_status",
]
