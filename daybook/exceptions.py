"""
Daybook exceptions.
"""

from typing import Any


class NotFoundError(ValueError):
    """Raised when a store lookup by id finds no matching record."""

    def __init__(self, collection: str, record_id: Any):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection} {record_id} not found")
