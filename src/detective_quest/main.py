#!/usr/bin/env python
"""
Detective Quest
Main entry point: explore the mansion yourself, or let an AI detective do it.
"""

import os
import sys
import time
import logging
import traceback

# Disable CrewAI tracing before importing crewai
os.environ["CREWAI_TRACING_ENABLED"] = "false"

from dotenv import load_dotenv

from detective_quest.game_state import (
    get_game_state,
    reset_game_state,
    parse_choice,
    Direction,
    GameState,
)
from detective_quest.crew import DetectiveQuestCrew, create_investigation_crew


logger = logging.getLogger(__name__)


def configure_logging():
    """Set up logging from DETECTIVE_DEBUG (DEBUG when truthy, WARNING otherwise)."""
    debug = os.environ.get("DETECTIVE_DEBUG", "").lower() in ("1", "true", "yes")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def get_error_details(exception):
    """
    Extract detailed error information from an exception.

    Args:
        exception: The exception to analyze

    Returns:
        A formatted string with error details
    """
    error_info = []
    error_info.append(f"Type: {type(exception).__name__}")
    error_info.append(f"Message: {str(exception)}")

    if exception.__cause__:
        error_info.append(f"Caused by: {type(exception.__cause__).__name__}: {exception.__cause__}")

    # HTTP status codes (common in API errors)
    if hasattr(exception, 'status_code'):
        error_info.append(f"Status Code: {exception.status_code}")
    if hasattr(exception, 'response'):
        response = exception.response
        if hasattr(response, 'status_code'):
            error_info.append(f"Response Status: {response.status_code}")
        if hasattr(response, 'text'):
            text = response.text[:500] if len(response.text) > 500 else response.text
            error_info.append(f"Response Body: {text}")

    return " | ".join(error_info)


def retry_with_backoff(func, max_retries=3, base_delay=5):
    """
    Retry a function with exponential backoff.

    Args:
        func: Callable to retry
        max_retries: Maximum number of retry attempts
        base_delay: Base delay in seconds (will be multiplied exponentially)

    Returns:
        The result of the function call

    Raises:
        The last exception if all retries fail
    """
    last_exception = None
    debug_mode = os.environ.get("DETECTIVE_DEBUG", "").lower() in ("1", "true", "yes")

    for attempt in range(max_retries + 1):
        try:
            result = func()
            if result is None or (hasattr(result, 'raw') and not result.raw):
                raise ValueError(f"Empty or None response from LLM (result type: {type(result).__name__})")
            return result
        except Exception as e:
            last_exception = e
            error_details = get_error_details(e)

            if debug_mode:
                logger.error(f"Attempt {attempt + 1} failed with exception:", exc_info=True)

            if attempt < max_retries:
                delay = base_delay * (2 ** attempt)
                sys.stdout.write(f"\n⚠️ Attempt {attempt + 1}/{max_retries + 1} failed\n")
                sys.stdout.write(f"   📋 Error: {error_details}\n")
                sys.stdout.write(f"🔄 Retrying in {delay} seconds...\n")
                sys.stdout.flush()
                time.sleep(delay)
            else:
                sys.stdout.write(f"\n❌ All {max_retries + 1} attempts failed\n")
                sys.stdout.write(f"   📋 Final Error: {error_details}\n")
                if debug_mode:
                    for line in traceback.format_exception(type(e), e, e.__traceback__):
                        sys.stdout.write(f"      {line}")
                sys.stdout.flush()
    raise last_exception


def print_collected_clues(game_state: GameState):
    """Print the collected clues in alphabetical order."""
    print("\n--- Collected clues (alphabetical) ---")
    if not game_state.clues:
        print("No clues were collected.")
        return
    for clue in game_state.clues.in_order():
        print(f"- {clue}")


def show_room(game_state: GameState):
    """Print the current room, any clue just found, and the paths out."""
    node = game_state.current
    print(f"\n📍 You are in: {node.name}")
    if game_state.last_found:
        print(f"🔎 You found a clue here! -> \"{game_state.last_found}\"")
    else:
        print("No new clue in this room.")

    left = f"[e] Left ({node.left.name})" if node.left else "[e] Left (not available)"
    right = f"[d] Right ({node.right.name})" if node.right else "[d] Right (not available)"
    print(f"Options: {left}  {right}  [s] Stop and review clues")


def explore(game_state: GameState, read=None):
    """
    Run the interactive exploration loop until the player stops.

    Args:
        game_state: A game that has been set up
        read: Prompt function (input() by default)
    """
    print("Exploration started. Type 'e' for left, 'd' for right, 's' to stop.")
    show_room(game_state)

    while game_state.exploring:
        try:
            raw = (read or input)("Choice: ")
        except EOFError:
            print("\nInput closed. Ending exploration.")
            game_state.finish_exploration()
            break

        direction = parse_choice(raw)
        if direction is None:
            print("Invalid input. Use 'e', 'd' or 's'.")
            continue

        success, message = game_state.move(direction)
        if not success:
            print(f"⚠️ {message}")
            continue

        if direction == Direction.QUIT:
            print(message)
        else:
            show_room(game_state)


def accuse(game_state: GameState, read=None):
    """
    Ask for the accused suspect and print the verdict.

    Returns:
        The AccusationResult, or None if the player left the name blank
    """
    print("\n⚖️ Time to accuse. Who is the culprit? (leave blank to give up)")
    try:
        name = (read or input)("Suspect: ")
    except EOFError:
        name = ""

    result = game_state.make_accusation(name)
    if result is None:
        print("Accusation aborted.")
        return None

    print(f"Clues pointing at {result.accused}: {result.count}")
    for clue in result.matching_clues:
        print(f"  - {clue}")
    if result.succeeded:
        print(f"🎉 The accusation stands! {result.accused} is the culprit.")
    else:
        print(f"❌ Insufficient evidence against {result.accused} "
              f"(needed {result.threshold}).")
    return result


def run_game(read=None):
    """
    Play one interactive game in the console.

    Args:
        read: Prompt function (input() by default)
    """
    print("\n" + "=" * 60)
    print("🔍 DETECTIVE QUEST: CLUE HUNT IN THE MANSION 🔍")
    print("=" * 60)
    print("You start in the 'Hall de Entrada'. Explore (e/d) and collect clues; type 's' to stop.\n")

    game_state = reset_game_state()
    game_state.setup_game()

    explore(game_state, read)
    print_collected_clues(game_state)
    accuse(game_state, read)

    print("\nThanks for playing! Good investigating.")
    return game_state


def run_ai_game():
    """Let the AI detective explore the mansion and accuse a suspect."""
    print("\n" + "=" * 60)
    print("🤖 DETECTIVE QUEST: AI DETECTIVE")
    print("=" * 60 + "\n")

    game_state = reset_game_state()
    game_state.setup_game()

    investigation = create_investigation_crew(DetectiveQuestCrew())

    try:
        result = retry_with_backoff(investigation.kickoff)
        sys.stdout.write("\n📝 Detective's report:\n")
        sys.stdout.write("-" * 40 + "\n")
        sys.stdout.write(str(result.raw if hasattr(result, 'raw') else result) + "\n")
        sys.stdout.flush()
    except Exception as e:
        sys.stdout.write(f"\n❌ The investigation failed: {e}\n")
        sys.stdout.flush()

    print("\n📊 FINAL STATE:")
    print("-" * 40)
    print(get_game_state().get_game_summary())
    return game_state


def main():
    """Main entry point."""
    load_dotenv()
    configure_logging()

    mode = sys.argv[1] if len(sys.argv) > 1 else "play"
    try:
        if mode == "play":
            run_game()
        elif mode == "ai":
            if not os.getenv("GOOGLE_API_KEY"):
                print("❌ Error: GOOGLE_API_KEY environment variable not set.")
                print("Please create a .env file with your Google API key:")
                print("  GOOGLE_API_KEY=your-key-here")
                sys.exit(1)
            run_ai_game()
        else:
            print("Usage: python -m detective_quest.main [play|ai]")
    except MemoryError:
        logger.critical("Out of memory; aborting.")
        sys.exit(1)


if __name__ == "__main__":
    main()
