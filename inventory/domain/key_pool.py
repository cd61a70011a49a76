"""
Key pool domain objects.

A pool is the set of currently available keys of one tier.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from core.domain.value_objects import MAX_KEY_LENGTH, Tier
from inventory.domain.key import Key


def normalize_candidates(lines: Iterable[str]) -> List[str]:
    """
    Trim submitted lines and drop the empty ones.

    Args:
        lines: Raw candidate keys, one per entry

    Returns:
        Non-empty trimmed candidates in submission order
    """
    candidates = []
    for line in lines:
        if line is None:
            continue
        value = line.strip()
        if not value:
            continue
        if len(value) > MAX_KEY_LENGTH:
            raise ValueError(f"Key longer than {MAX_KEY_LENGTH} characters")
        candidates.append(value)
    return candidates


def split_batch(candidates: Iterable[str]) -> Tuple[List[str], int]:
    """
    Separate first occurrences from repeats inside one batch.

    Returns:
        Tuple of (distinct values in first-seen order, repeat count)
    """
    seen = set()
    distinct = []
    repeats = 0
    for value in candidates:
        if value in seen:
            repeats += 1
            continue
        seen.add(value)
        distinct.append(value)
    return distinct, repeats


@dataclass(frozen=True)
class IngestResult:
    """Outcome of one bulk add."""

    tier: Tier
    added: int
    duplicates: int

    @property
    def submitted(self) -> int:
        return self.added + self.duplicates


@dataclass(frozen=True)
class KeyPool:
    """Point-in-time view of one tier's available keys."""

    tier: Tier
    keys: Tuple[Key, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.keys)

    def values(self) -> List[str]:
        """Key strings in the pool's stable display order."""
        return [str(key.value) for key in self.keys]

    def __contains__(self, value: str) -> bool:
        return any(str(key.value) == value for key in self.keys)
