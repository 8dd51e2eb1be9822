"""
Task Store
==========

In-memory store for main-app tasks.

Features:
- Sequential integer ids from a store-owned counter
- Symbolic date keywords resolved once, at insertion time
- Completion by id

Author: jetgause
Created: 2025-12-11
"""

import copy
import logging
import threading
from datetime import date
from typing import Callable, List, Optional

from .date_utils import resolve_task_date
from .exceptions import NotFoundError
from .models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered, lock-guarded collection of Task records.

    Every operation holds the store lock for its whole duration and returns
    copies, so callers never share state with the store.
    """

    def __init__(
        self,
        tasks: Optional[List[Task]] = None,
        clock: Callable[[], date] = date.today
    ):
        """
        Initialize the TaskStore.

        Args:
            tasks: Initial records, kept in order (ids must already be set)
            clock: Source of "today" for date keywords
        """
        self._tasks: List[Task] = [copy.deepcopy(t) for t in tasks or []]
        self._next_id = max((t.id or 0 for t in self._tasks), default=0) + 1
        self._clock = clock
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list_tasks(self) -> List[Task]:
        """Snapshot of all tasks in insertion order."""
        with self._lock:
            return copy.deepcopy(self._tasks)

    def add_task(self, task: Task) -> Task:
        """
        Store a new task.

        The caller's id is ignored. ``date`` is resolved against the store
        clock when it is a symbolic keyword and kept verbatim otherwise.

        Args:
            task: Task to add

        Returns:
            The stored task, with its id and resolved date
        """
        logger.debug("Received task: %r", task)
        new_task = copy.deepcopy(task)
        new_task.date = resolve_task_date(task.date, self._clock())

        with self._lock:
            new_task.id = self._next_id
            self._next_id += 1
            self._tasks.append(new_task)
            logger.info("Task %s added (date=%s)", new_task.id, new_task.date)
            return copy.deepcopy(new_task)

    def complete_task(self, task_id: int) -> List[Task]:
        """
        Mark a task completed.

        An unknown id raises instead of being ignored, matching
        BotTaskStore.complete_task.

        Returns:
            The full updated task list

        Raises:
            NotFoundError: If no task has this id
        """
        with self._lock:
            task = self._find(task_id)
            if task is None:
                raise NotFoundError("Task", task_id)
            task.completed = True
            logger.info("Task %s completed", task_id)
            return copy.deepcopy(self._tasks)

    def _find(self, task_id: int) -> Optional[Task]:
        return next((t for t in self._tasks if t.id == task_id), None)
