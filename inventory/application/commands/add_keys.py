"""
AddKeysCommand.

Command to stock a batch of candidate keys into a tier.
"""
from dataclasses import dataclass
from typing import List


@dataclass
class AddKeysCommand:
    """Command to bulk-add keys to a tier's pool."""

    tier: str
    keys: List[str]
