"""
Daybook Data Models
===================

Core records held by the in-memory stores:
- Tasks and comments for the main app
- Goals with embedded sub-goals
- Bot tasks and bot goals for the assistant integration

Records are plain dataclasses; ``dataclasses-json`` provides ``to_dict()``
and ``from_dict()`` for the HTTP layer.

Author: jetgause
Created: 2025-12-10
"""

from dataclasses import dataclass, field
from typing import List, Optional
import uuid

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class Task:
    """
    A main-app task.

    Attributes:
        id: Store-assigned identifier (None until stored)
        title: Task title
        date: Concrete date string, or a symbolic keyword before insertion
        completed: Completion flag
        priority: Free-form priority label
    """
    id: Optional[int] = None
    title: str = ""
    date: str = ""
    completed: bool = False
    priority: str = ""


@dataclass_json
@dataclass
class Comment:
    """A titled comment."""
    id: Optional[int] = None
    title: str = ""
    content: str = ""


@dataclass_json
@dataclass
class SubGoal:
    """
    A step inside a Goal.

    No operation creates sub-goals yet; the shape is serialized with its
    parent goal.
    """
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    title: str = ""
    completed: bool = False
    progress: int = 0


@dataclass_json
@dataclass
class Goal:
    """
    A long-running goal.

    Attributes:
        id: Random UUID assigned on creation
        title: Goal title
        description: Longer description
        priority: Free-form priority label
        due_date: Due date string, stored as given
        progress: Progress value in 0-255
        sub_goals: Ordered sub-goals
    """
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    title: str = ""
    description: str = ""
    priority: str = ""
    due_date: str = ""
    progress: int = 0
    sub_goals: List[SubGoal] = field(default_factory=list)


@dataclass_json
@dataclass
class BotTask:
    """A task created through the assistant integration."""
    id: Optional[int] = None
    title: str = ""
    completed: bool = False
    is_pomodoro: bool = False


@dataclass_json
@dataclass
class BotGoal:
    """A simplified goal created through the assistant integration."""
    id: Optional[uuid.UUID] = None
    title: str = ""
    progress: int = 0


@dataclass_json
@dataclass
class DateResponse:
    """Calendar date split into its parts."""
    day: int
    month: int
    year: int
