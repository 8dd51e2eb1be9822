"""
Goal Store
==========

In-memory goals with embedded sub-goals. Goals are keyed by random UUIDs
and only their progress can change after creation.

Author: jetgause
Created: 2025-12-11
"""

import copy
import logging
import threading
import uuid
from typing import List, Optional

from .exceptions import NotFoundError
from .models import Goal

logger = logging.getLogger(__name__)


class GoalStore:
    """Ordered, lock-guarded collection of Goal records."""

    def __init__(self, goals: Optional[List[Goal]] = None):
        """Initialize the GoalStore."""
        self._goals: List[Goal] = [copy.deepcopy(g) for g in goals or []]
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._goals)

    def list_goals(self) -> List[Goal]:
        """Snapshot of all goals in insertion order."""
        with self._lock:
            return copy.deepcopy(self._goals)

    def create_goal(
        self,
        title: str,
        description: str,
        priority: str,
        due_date: str
    ) -> Goal:
        """
        Create a new goal.

        Args:
            title: Goal title
            description: Goal description
            priority: Priority label
            due_date: Due date string, stored as given

        Returns:
            Created Goal with a fresh UUID, zero progress and no sub-goals
        """
        goal = Goal(
            id=uuid.uuid4(),
            title=title,
            description=description,
            priority=priority,
            due_date=due_date,
            progress=0,
            sub_goals=[],
        )

        with self._lock:
            self._goals.append(goal)
            logger.info("Goal %s created", goal.id)
            return copy.deepcopy(goal)

    def update_progress(self, goal_id: uuid.UUID, progress: int) -> Goal:
        """
        Overwrite a goal's progress value.

        Sub-goals are left untouched and not consulted.

        Raises:
            NotFoundError: If no goal has this id
        """
        with self._lock:
            goal = next((g for g in self._goals if g.id == goal_id), None)
            if goal is None:
                raise NotFoundError("Goal", goal_id)
            goal.progress = progress
            logger.info("Goal %s progress set to %s", goal_id, progress)
            return copy.deepcopy(goal)
