"""
Django implementation of PoolRegistry port.

Every mutation runs as one synchronous function inside the tier's critical
section (see inventory.infrastructure.locking) and is handed to a worker
thread with sync_to_async.
"""
import logging
from typing import Dict, Iterable, List, Optional

from asgiref.sync import sync_to_async
from django.db.models import Count
from django.utils import timezone

from core.domain.exceptions import KeyAlreadyAssignedError, KeyNotFoundError
from core.domain.value_objects import KeyStatus, KeyValue, Tier
from inventory.domain.key import Key
from inventory.domain.key_pool import IngestResult, KeyPool, normalize_candidates, split_batch
from inventory.infrastructure.locking import exclusive
from inventory.infrastructure.models import PoolKey as PoolKeyModel
from inventory.ports.deduplicator import Deduplicator
from inventory.ports.pool_registry import PoolRegistry

logger = logging.getLogger(__name__)

INSERT_BATCH_SIZE = 500


class DjangoPoolRegistry(PoolRegistry):
    """
    Django ORM implementation of PoolRegistry.

    This adapter:
    1. Serializes writers of a tier behind the tier's critical section
    2. Consults the Deduplicator before stocking any key
    3. Converts PoolKey rows to Key entities
    """

    def __init__(self, deduplicator: Deduplicator):
        self.deduplicator = deduplicator

    def _to_domain(self, model: PoolKeyModel) -> Key:
        """
        Convert Django model to domain entity.

        Args:
            model: Django PoolKey model

        Returns:
            Key domain entity
        """
        return Key(
            value=KeyValue(model.value),
            tier=Tier(model.pool_id),
            status=KeyStatus(model.status),
            added_at=model.added_at,
            status_changed_at=model.status_changed_at,
        )

    def _apply_status(self, model: PoolKeyModel, key: Key) -> None:
        model.status = key.status.value
        model.status_changed_at = key.status_changed_at
        model.save(update_fields=["status", "status_changed_at"])

    def _available(self, tier: Tier):
        return PoolKeyModel.objects.filter(  # pylint: disable=no-member
            pool_id=tier.value, status=KeyStatus.AVAILABLE.value
        )

    def _ingest(self, tier: Tier, candidates: List[str]) -> IngestResult:
        distinct, repeats = split_batch(candidates)
        added_at = timezone.now()

        with exclusive(tier) as pool:
            fresh = self.deduplicator.claim(tier, distinct)
            PoolKeyModel.objects.bulk_create(  # pylint: disable=no-member
                [
                    PoolKeyModel(
                        value=value,
                        pool=pool,
                        status=KeyStatus.AVAILABLE.value,
                        added_at=added_at,
                    )
                    for value in fresh
                ],
                batch_size=INSERT_BATCH_SIZE,
            )

        result = IngestResult(
            tier=tier,
            added=len(fresh),
            duplicates=repeats + len(distinct) - len(fresh),
        )
        logger.info(
            "Keys ingested",
            extra={
                "tier": tier.value,
                "added": result.added,
                "duplicates": result.duplicates,
            },
        )
        return result

    async def add_many(self, tier: Tier, candidate_keys: Iterable[str]) -> IngestResult:
        """
        Ingest candidate keys into a tier.

        Args:
            tier: Target tier
            candidate_keys: Raw lines; blank lines are ignored

        Returns:
            IngestResult with added and duplicate counts
        """
        candidates = normalize_candidates(candidate_keys)
        if not candidates:
            return IngestResult(tier=tier, added=0, duplicates=0)
        return await sync_to_async(self._ingest)(tier, candidates)

    def _remove(self, tier: Tier, key_value: str) -> Key:
        with exclusive(tier):
            model = PoolKeyModel.objects.filter(  # pylint: disable=no-member
                pool_id=tier.value, value=key_value
            ).first()

            if model is None or model.status == KeyStatus.REMOVED.value:
                raise KeyNotFoundError(f"Key not found in tier {tier.value}")
            if model.status == KeyStatus.ASSIGNED.value:
                raise KeyAlreadyAssignedError(f"Key already assigned in tier {tier.value}")

            key = self._to_domain(model).remove()
            self._apply_status(model, key)

        logger.info("Key removed", extra={"tier": tier.value, "key": key.hint})
        return key

    async def remove(self, tier: Tier, key_value: str) -> Key:
        """
        Withdraw an available key from a tier.

        Args:
            tier: Tier holding the key
            key_value: Key string

        Returns:
            The removed Key

        Raises:
            KeyNotFoundError: If the key is not available in the tier
            KeyAlreadyAssignedError: If the key was already issued
        """
        return await sync_to_async(self._remove)(tier, key_value.strip())

    def take_available(self, tier: Tier) -> Optional[Key]:
        """
        Mark one available key of the tier as assigned.

        The caller must already hold ``exclusive(tier)``.

        Args:
            tier: Tier to draw from

        Returns:
            The assigned Key, or None if the pool is empty
        """
        model = self._available(tier).order_by("id").first()
        if model is None:
            return None
        key = self._to_domain(model).assign()
        self._apply_status(model, key)
        return key

    @sync_to_async
    def get_pool(self, tier: Tier) -> KeyPool:
        """
        Snapshot the available keys of a tier.

        Args:
            tier: Tier to inspect

        Returns:
            KeyPool in insertion order
        """
        models = self._available(tier).order_by("id")
        return KeyPool(tier=tier, keys=tuple(self._to_domain(model) for model in models))

    @sync_to_async
    def list_available(self, tier: Tier) -> List[Key]:
        """
        List available keys of a tier.

        Args:
            tier: Tier to inspect

        Returns:
            List of Key entities in insertion order
        """
        return [self._to_domain(model) for model in self._available(tier).order_by("id")]

    @sync_to_async
    def available_count(self, tier: Tier) -> int:
        return self._available(tier).count()

    @sync_to_async
    def available_counts(self) -> Dict[Tier, int]:
        """
        Count available keys of every tier in one read.

        Returns:
            Mapping of tier to available count
        """
        rows = (
            PoolKeyModel.objects.filter(status=KeyStatus.AVAILABLE.value)  # pylint: disable=no-member
            .values("pool_id")
            .annotate(total=Count("id"))
            .order_by()
        )
        return {Tier(row["pool_id"]): row["total"] for row in rows}
