"""
Comment Store - in-memory comments with replace-by-id updates
"""

import copy
import logging
import threading
from typing import List, Optional

from .exceptions import NotFoundError
from .models import Comment

logger = logging.getLogger(__name__)

SEED_COMMENTS = [
    Comment(id=1, title="Market research", content="Find my keynote attached..."),
    Comment(id=2, title="Market research", content="I've added the data..."),
]


class CommentStore:
    """Ordered, lock-guarded collection of Comment records."""

    def __init__(self, comments: Optional[List[Comment]] = None):
        self._comments: List[Comment] = [copy.deepcopy(c) for c in comments or []]
        self._next_id = max((c.id or 0 for c in self._comments), default=0) + 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._comments)

    def list_comments(self) -> List[Comment]:
        """Snapshot of all comments in insertion order."""
        with self._lock:
            return copy.deepcopy(self._comments)

    def add_comment(self, comment: Comment) -> Comment:
        """Store a new comment under the next id and return it."""
        new_comment = copy.deepcopy(comment)
        with self._lock:
            new_comment.id = self._next_id
            self._next_id += 1
            self._comments.append(new_comment)
            logger.info("Comment %s added", new_comment.id)
            return copy.deepcopy(new_comment)

    def update_comment(self, comment_id: int, replacement: Comment) -> Comment:
        """
        Replace a comment's title and content.

        Any id carried by ``replacement`` is ignored; the stored record keeps
        ``comment_id``.

        Raises:
            NotFoundError: If no comment has this id
        """
        with self._lock:
            existing = next((c for c in self._comments if c.id == comment_id), None)
            if existing is None:
                raise NotFoundError("Comment", comment_id)
            existing.title = replacement.title
            existing.content = replacement.content
            logger.info("Comment %s updated", comment_id)
            return copy.deepcopy(existing)
