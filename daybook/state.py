"""
Application state containers.

The main app and the bot app each own an independent group of stores. Both
are built once at startup and handed to the HTTP layer.
"""

from dataclasses import dataclass, field
from typing import Dict

from .bot_store import BotGoalStore, BotTaskStore
from .comment_store import SEED_COMMENTS, CommentStore
from .goal_store import GoalStore
from .task_store import TaskStore


@dataclass
class AppState:
    """Stores for the main app."""
    tasks: TaskStore = field(default_factory=TaskStore)
    comments: CommentStore = field(default_factory=CommentStore)
    goals: GoalStore = field(default_factory=GoalStore)

    def counts(self) -> Dict[str, int]:
        return {
            "tasks": len(self.tasks),
            "comments": len(self.comments),
            "goals": len(self.goals),
        }


@dataclass
class BotAppState:
    """Stores for the assistant integration."""
    tasks: BotTaskStore = field(default_factory=BotTaskStore)
    goals: BotGoalStore = field(default_factory=BotGoalStore)

    def counts(self) -> Dict[str, int]:
        return {
            "bot_tasks": len(self.tasks),
            "bot_goals": len(self.goals),
        }


def build_app_state(seed_comments: bool = True) -> AppState:
    """Create the main-app stores, optionally with the demo comments."""
    comments = CommentStore(SEED_COMMENTS if seed_comments else None)
    return AppState(comments=comments)


def build_bot_state() -> BotAppState:
    return BotAppState()
