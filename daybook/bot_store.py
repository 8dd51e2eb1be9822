"""
Bot Stores
==========

Task and goal stores backing the assistant integration. They are
independent of the main-app stores and share no ids with them.

Author: jetgause
Created: 2025-12-11
"""

import copy
import logging
import threading
import uuid
from typing import List, Optional

from .exceptions import NotFoundError
from .models import BotGoal, BotTask

logger = logging.getLogger(__name__)


class BotTaskStore:
    """
    Ordered, lock-guarded collection of BotTask records.

    Unlike the main TaskStore, bot tasks can be fully updated and deleted.
    Ids come from a counter that never goes backwards, so an id freed by a
    delete is not handed out again.
    """

    def __init__(self, tasks: Optional[List[BotTask]] = None):
        self._tasks: List[BotTask] = [copy.deepcopy(t) for t in tasks or []]
        self._next_id = max((t.id or 0 for t in self._tasks), default=0) + 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list_tasks(self) -> List[BotTask]:
        """Snapshot of all bot tasks in insertion order."""
        with self._lock:
            return copy.deepcopy(self._tasks)

    def add_task(self, task: BotTask) -> BotTask:
        """Store a new bot task; completed and is_pomodoro are kept as given."""
        new_task = copy.deepcopy(task)
        with self._lock:
            new_task.id = self._next_id
            self._next_id += 1
            self._tasks.append(new_task)
            logger.info("Bot task %s added (pomodoro=%s)", new_task.id, new_task.is_pomodoro)
            return copy.deepcopy(new_task)

    def update_task(self, task_id: int, replacement: BotTask) -> BotTask:
        """
        Overwrite title, completed and is_pomodoro of a bot task.

        Args:
            task_id: Id of the task to update
            replacement: New field values (its id is ignored)

        Returns:
            The updated task

        Raises:
            NotFoundError: If no bot task has this id
        """
        with self._lock:
            task = self._get(task_id)
            task.title = replacement.title
            task.completed = replacement.completed
            task.is_pomodoro = replacement.is_pomodoro
            logger.info("Bot task %s updated", task_id)
            return copy.deepcopy(task)

    def complete_task(self, task_id: int) -> BotTask:
        """Mark a bot task completed and return it."""
        with self._lock:
            task = self._get(task_id)
            task.completed = True
            logger.info("Bot task %s completed", task_id)
            return copy.deepcopy(task)

    def delete_task(self, task_id: int) -> None:
        """
        Remove a bot task.

        Raises:
            NotFoundError: If no bot task has this id
        """
        with self._lock:
            task = self._get(task_id)
            self._tasks.remove(task)
            logger.info("Bot task %s deleted", task_id)

    def _get(self, task_id: int) -> BotTask:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError("BotTask", task_id)


class BotGoalStore:
    """Ordered, lock-guarded collection of BotGoal records."""

    def __init__(self, goals: Optional[List[BotGoal]] = None):
        self._goals: List[BotGoal] = [copy.deepcopy(g) for g in goals or []]
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._goals)

    def list_goals(self) -> List[BotGoal]:
        with self._lock:
            return copy.deepcopy(self._goals)

    def add_goal(self, goal: BotGoal) -> BotGoal:
        """Store a bot goal under a fresh UUID, discarding any id it carried."""
        new_goal = copy.deepcopy(goal)
        new_goal.id = uuid.uuid4()
        with self._lock:
            self._goals.append(new_goal)
            logger.info("Bot goal %s added", new_goal.id)
            return copy.deepcopy(new_goal)
