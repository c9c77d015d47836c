"""
Detective Quest Crew - an LLM detective plays the mansion.
This module defines the CrewAI crew for the AI detective mode.
"""

import os

from crewai import Agent, Crew, Process, Task
from crewai.project import CrewBase, agent, task

from detective_quest.tools import (
    look_around,
    move_left,
    move_right,
    finish_exploration,
    list_collected_clues,
    accuse_suspect,
    get_game_status,
)


# Everything the detective needs: walking the mansion, reviewing clues, accusing
DETECTIVE_TOOLS = [
    look_around,
    move_left,
    move_right,
    finish_exploration,
    list_collected_clues,
    accuse_suspect,
    get_game_status,
]


@CrewBase
class DetectiveQuestCrew:
    """Detective Quest crew with a single detective."""

    agents_config = "config/agents.yaml"
    tasks_config = "config/tasks.yaml"

    @agent
    def detective(self) -> Agent:
        """The detective exploring the mansion."""
        config = dict(self.agents_config["detective"])  # type: ignore[index]
        llm_override = os.environ.get("DETECTIVE_LLM")
        if llm_override:
            config["llm"] = llm_override
        return Agent(
            config=config,
            tools=DETECTIVE_TOOLS,
            verbose=False,
        )

    @task
    def investigate_mansion_task(self) -> Task:
        """Explore, collect clues, then accuse."""
        return Task(
            config=self.tasks_config["investigate_mansion_task"],  # type: ignore[index]
        )


def create_investigation_crew(detective_crew: DetectiveQuestCrew) -> Crew:
    """
    Create a single-run crew for one playthrough.

    Args:
        detective_crew: Source of the detective agent and the investigation task

    Returns:
        A crew that explores the mansion and makes one accusation
    """
    detective = detective_crew.detective()
    investigation_task = detective_crew.investigate_mansion_task()
    investigation_task.agent = detective

    return Crew(
        agents=[detective],
        tasks=[investigation_task],
        process=Process.sequential,
        verbose=False,
        tracing=False,
    )
