"""
Daybook Productivity API
Version 1.0.0

In-memory stores for tasks, comments, goals and the assistant ("bot")
integration, served over HTTP by ``api_server``.
"""

__version__ = "1.0.0"
__author__ = "jetgause"

from daybook.exceptions import NotFoundError
from daybook.models import BotGoal, BotTask, Comment, DateResponse, Goal, SubGoal, Task
from daybook.state import AppState, BotAppState, build_app_state, build_bot_state

__all__ = [
    # Models
    "Task",
    "Comment",
    "Goal",
    "SubGoal",
    "BotTask",
    "BotGoal",
    "DateResponse",
    # State
    "AppState",
    "BotAppState",
    "build_app_state",
    "build_bot_state",
    "NotFoundError",
]
