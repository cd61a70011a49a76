"""
Integration tests for the pool registry and the deduplicator.
"""

import asyncio

import pytest
from django.db import IntegrityError
from django.utils import timezone

from core.domain.exceptions import KeyAlreadyAssignedError, KeyNotFoundError
from core.domain.value_objects import KeyStatus, Tier
from inventory.infrastructure.models import KeyPool
from inventory.infrastructure.models import PoolKey as PoolKeyModel


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
@pytest.mark.asyncio
class TestPoolRegistry:
    """Integration tests for DjangoPoolRegistry."""

    async def test_add_many_counts_added_and_duplicates(self, pool_registry):
        """Test repeats inside the batch count as duplicates."""
        result = await pool_registry.add_many(Tier.ONE_DAY, ["A", "B", "A", "C", "B"])

        assert result.added == 3
        assert result.duplicates == 2
        pool = await pool_registry.get_pool(Tier.ONE_DAY)
        assert pool.values() == ["A", "B", "C"]

    async def test_trim_and_blank_lines(self, pool_registry):
        result = await pool_registry.add_many(Tier.SEVEN_DAYS, ["  K-1  ", "", "   ", "K-1", "K-2\n"])

        assert (result.added, result.duplicates) == (2, 1)
        assert (await pool_registry.get_pool(Tier.SEVEN_DAYS)).values() == ["K-1", "K-2"]

    async def test_empty_batch(self, pool_registry, deduplicator):
        result = await pool_registry.add_many(Tier.ONE_DAY, ["", "  "])

        assert (result.added, result.duplicates) == (0, 0)
        assert await deduplicator.count() == 0

    async def test_duplicates_across_tiers(self, pool_registry):
        """Test a key stocked in one tier is rejected by every other tier."""
        await pool_registry.add_many(Tier.ONE_DAY, ["SHARED"])

        result = await pool_registry.add_many(Tier.THIRTY_DAYS, ["SHARED", "OWN"])

        assert (result.added, result.duplicates) == (1, 1)
        assert "SHARED" not in await pool_registry.get_pool(Tier.THIRTY_DAYS)

    async def test_keys_are_case_sensitive(self, pool_registry):
        result = await pool_registry.add_many(Tier.ONE_DAY, ["abc", "ABC"])
        assert result.added == 2

    async def test_removed_key_is_never_restocked(self, pool_registry, deduplicator):
        """Test the dedup memory outlives removal."""
        await pool_registry.add_many(Tier.ONE_DAY, ["GONE", "STAYS"])
        await pool_registry.remove(Tier.ONE_DAY, "GONE")

        result = await pool_registry.add_many(Tier.ONE_DAY, ["GONE"])

        assert (result.added, result.duplicates) == (0, 1)
        assert await deduplicator.is_seen("GONE")
        assert (await pool_registry.get_pool(Tier.ONE_DAY)).values() == ["STAYS"]

    async def test_remove_unknown_key(self, pool_registry):
        with pytest.raises(KeyNotFoundError):
            await pool_registry.remove(Tier.ONE_DAY, "NEVER-ADDED")

    async def test_remove_from_wrong_tier(self, pool_registry):
        await pool_registry.add_many(Tier.ONE_DAY, ["K-1"])

        with pytest.raises(KeyNotFoundError):
            await pool_registry.remove(Tier.SEVEN_DAYS, "K-1")

    async def test_remove_twice(self, pool_registry):
        await pool_registry.add_many(Tier.ONE_DAY, ["K-1"])
        await pool_registry.remove(Tier.ONE_DAY, "K-1")

        with pytest.raises(KeyNotFoundError):
            await pool_registry.remove(Tier.ONE_DAY, "K-1")

    async def test_remove_trims_input(self, pool_registry):
        await pool_registry.add_many(Tier.ONE_DAY, ["K-1"])

        removed = await pool_registry.remove(Tier.ONE_DAY, "  K-1 ")

        assert removed.status == KeyStatus.REMOVED

    async def test_assigned_key_cannot_be_removed(self, pool_registry, assignment_ledger):
        await pool_registry.add_many(Tier.ONE_DAY, ["K-1"])
        await assignment_ledger.allocate(Tier.ONE_DAY, "order-1", "user-1", "vpn")

        with pytest.raises(KeyAlreadyAssignedError):
            await pool_registry.remove(Tier.ONE_DAY, "K-1")

    async def test_available_counts(self, pool_registry):
        await pool_registry.add_many(Tier.ONE_DAY, ["A", "B"])
        await pool_registry.add_many(Tier.THIRTY_DAYS, ["C"])
        await pool_registry.remove(Tier.ONE_DAY, "A")

        counts = await pool_registry.available_counts()

        assert counts == {Tier.ONE_DAY: 1, Tier.THIRTY_DAYS: 1}
        assert await pool_registry.available_count(Tier.SEVEN_DAYS) == 0

    async def test_same_batch_into_every_tier(self, pool_registry, deduplicator):
        """Test one batch offered to every tier is stocked once."""
        batch = [f"RACE-{n}" for n in range(20)]

        results = await asyncio.gather(
            pool_registry.add_many(Tier.ONE_DAY, batch),
            pool_registry.add_many(Tier.SEVEN_DAYS, batch),
            pool_registry.add_many(Tier.THIRTY_DAYS, batch),
        )

        assert sum(result.added for result in results) == 20
        assert sum(result.duplicates for result in results) == 40
        assert await deduplicator.count() == 20

    async def test_large_batch(self, pool_registry):
        batch = [f"BULK-{n:05d}" for n in range(1200)]

        result = await pool_registry.add_many(Tier.THIRTY_DAYS, batch)

        assert result.added == 1200
        assert await pool_registry.available_count(Tier.THIRTY_DAYS) == 1200


@pytest.mark.django_db
@pytest.mark.integration
class TestPoolModels:
    """Model-level checks for the inventory tables."""

    def test_key_value_is_unique(self):
        """Test a value can exist in one pool row only."""
        pool = KeyPool.objects.create(tier=Tier.ONE_DAY.value)
        other = KeyPool.objects.create(tier=Tier.SEVEN_DAYS.value)
        PoolKeyModel.objects.create(value="K-1", pool=pool, added_at=timezone.now())

        with pytest.raises(IntegrityError):
            PoolKeyModel.objects.create(value="K-1", pool=other, added_at=timezone.now())
