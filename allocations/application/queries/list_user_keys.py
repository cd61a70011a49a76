"""
ListUserKeysQuery.

Query to list every key issued to a user.
"""
from dataclasses import dataclass


@dataclass
class ListUserKeysQuery:
    """Query for a user's issued keys."""

    user_id: str
