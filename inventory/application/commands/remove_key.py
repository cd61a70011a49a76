"""
RemoveKeyCommand.

Command to withdraw an available key from a tier.
"""
from dataclasses import dataclass


@dataclass
class RemoveKeyCommand:
    """Command to remove a key from a tier's pool."""

    tier: str
    key: str
