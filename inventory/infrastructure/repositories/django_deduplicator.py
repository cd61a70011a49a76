"""
Django implementation of the Deduplicator port.

Backed by the SeenKey table; its primary key is the final arbiter when two
ingests race on the same value.
"""
import logging
from typing import List, Sequence

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction

from core.domain.value_objects import Tier
from inventory.infrastructure.locking import tier_locks
from inventory.infrastructure.models import SeenKey as SeenKeyModel
from inventory.ports.deduplicator import Deduplicator

logger = logging.getLogger(__name__)

LOOKUP_CHUNK_SIZE = 500


class DjangoDeduplicator(Deduplicator):
    """Django ORM implementation of Deduplicator."""

    def _known(self, values: Sequence[str]) -> set:
        known = set()
        for start in range(0, len(values), LOOKUP_CHUNK_SIZE):
            chunk = values[start:start + LOOKUP_CHUNK_SIZE]
            known.update(
                SeenKeyModel.objects.filter(value__in=chunk).values_list(  # pylint: disable=no-member
                    "value", flat=True
                )
            )
        return known

    def _claim_one_by_one(self, tier: Tier, values: Sequence[str]) -> List[str]:
        claimed = []
        for value in values:
            try:
                with transaction.atomic():
                    SeenKeyModel.objects.create(  # pylint: disable=no-member
                        value=value, first_tier=tier.value
                    )
            except IntegrityError:
                logger.debug("Key claimed concurrently, counted as duplicate")
                continue
            claimed.append(value)
        return claimed

    def claim(self, tier: Tier, values: Sequence[str]) -> List[str]:
        """
        Record the values that were never seen before.

        Args:
            tier: Tier the values are being ingested into
            values: Distinct candidate values

        Returns:
            The subset of values this call recorded, in input order
        """
        if not values:
            return []

        with tier_locks.dedup:
            known = self._known(values)
            fresh = [value for value in values if value not in known]
            if not fresh:
                return []
            try:
                with transaction.atomic():
                    SeenKeyModel.objects.bulk_create(  # pylint: disable=no-member
                        [SeenKeyModel(value=value, first_tier=tier.value) for value in fresh]
                    )
                return fresh
            except IntegrityError:
                # Another process recorded some of these values in between.
                return self._claim_one_by_one(tier, fresh)

    @sync_to_async
    def is_seen(self, value: str) -> bool:
        """
        Check whether a value was ever accepted.

        Args:
            value: Key string

        Returns:
            True if the value is known
        """
        return SeenKeyModel.objects.filter(value=value).exists()  # pylint: disable=no-member

    @sync_to_async
    def count(self) -> int:
        """
        Count every value ever accepted.

        Returns:
            Size of the memory
        """
        return SeenKeyModel.objects.count()  # pylint: disable=no-member
