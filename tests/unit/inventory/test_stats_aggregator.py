"""
Unit tests for StatsAggregator domain service.
"""
import pytest

from core.domain.value_objects import Tier
from inventory.domain.services import StatsAggregator


class StubRegistry:
    def __init__(self, counts):
        self.counts = counts

    async def available_counts(self):
        return self.counts


class StubLedger:
    def __init__(self, counts):
        self.counts = counts

    async def assigned_counts(self):
        return self.counts


@pytest.mark.asyncio
class TestStatsAggregator:
    """Tests for StatsAggregator service."""

    async def test_every_tier_reported(self):
        """Test tiers without keys report zero."""
        stats = await StatsAggregator.collect(
            StubRegistry({Tier.ONE_DAY: 2}), StubLedger({Tier.SEVEN_DAYS: 1})
        )

        assert stats.available == {Tier.ONE_DAY: 2, Tier.SEVEN_DAYS: 0, Tier.THIRTY_DAYS: 0}
        assert stats.assigned == {Tier.ONE_DAY: 0, Tier.SEVEN_DAYS: 1, Tier.THIRTY_DAYS: 0}

    async def test_totals(self):
        stats = await StatsAggregator.collect(
            StubRegistry({Tier.ONE_DAY: 2, Tier.THIRTY_DAYS: 5}),
            StubLedger({Tier.ONE_DAY: 3, Tier.SEVEN_DAYS: 4}),
        )

        assert stats.total_available == 7
        assert stats.total_assigned == 7

    async def test_empty_inventory(self):
        stats = await StatsAggregator.collect(StubRegistry({}), StubLedger({}))

        assert stats.total_assigned == 0
        assert set(stats.available) == set(Tier)
