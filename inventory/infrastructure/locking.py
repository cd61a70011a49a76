"""
Per-tier critical sections.

A tier's critical section combines a process-local lock with a row lock
on the tier's KeyPool row, so writers in one process queue on the mutex
and writers in other processes queue on the database.
"""
import contextlib
import logging
import threading
from typing import Dict, Iterator

from django.db import transaction

from core.domain.value_objects import Tier
from inventory.infrastructure.models import KeyPool as KeyPoolModel

logger = logging.getLogger(__name__)


class TierLocks:
    """One mutex per tier, plus the global dedup mutex."""

    def __init__(self):
        self._locks: Dict[Tier, threading.Lock] = {tier: threading.Lock() for tier in Tier}
        self.dedup = threading.Lock()

    def lock_for(self, tier: Tier) -> threading.Lock:
        return self._locks[tier]

    @contextlib.contextmanager
    def hold(self, tier: Tier) -> Iterator[None]:
        """Hold the tier mutex for the duration of the block."""
        lock = self._locks[tier]
        lock.acquire()
        try:
            yield
        finally:
            lock.release()


tier_locks = TierLocks()


@contextlib.contextmanager
def exclusive(tier: Tier) -> Iterator[KeyPoolModel]:
    """
    Enter the tier's critical section.

    Must be used from synchronous code; nothing inside may await.
    Lock order is tier mutex, then database row, then the dedup mutex.

    Usage:
        with exclusive(Tier.ONE_DAY):
            # read and write the tier's keys
            pass
    """
    with tier_locks.hold(tier):
        with transaction.atomic():
            # pylint: disable=no-member
            pool, created = KeyPoolModel.objects.select_for_update().get_or_create(
                tier=tier.value
            )
            if created:
                logger.info("Created key pool", extra={"tier": tier.value})
            yield pool
