"""
Unit tests for Key domain entity.
"""
import pytest

from core.domain.value_objects import KeyStatus, KeyValue, Tier
from inventory.domain.key import Key, mask_key


class TestKeyEntity:
    """Tests for Key domain entity."""

    def test_create_key(self):
        """Test creating a key entity."""
        key = Key.create(value="AAAA-1111", tier=Tier.ONE_DAY)

        assert key.value == KeyValue("AAAA-1111")
        assert key.tier == Tier.ONE_DAY
        assert key.status == KeyStatus.AVAILABLE
        assert key.is_available
        assert key.added_at is not None
        assert key.status_changed_at is None

    def test_assign_returns_new_instance(self):
        """Test assigning a key leaves the original untouched."""
        key = Key.create(value="AAAA-1111", tier=Tier.ONE_DAY)

        assigned = key.assign()

        assert assigned.status == KeyStatus.ASSIGNED
        assert assigned.status_changed_at is not None
        assert key.status == KeyStatus.AVAILABLE

    def test_remove(self):
        key = Key.create(value="AAAA-1111", tier=Tier.SEVEN_DAYS)

        removed = key.remove()

        assert removed.status == KeyStatus.REMOVED
        assert not removed.is_available

    def test_assigned_key_cannot_be_removed(self):
        """Test an issued key stays issued."""
        assigned = Key.create(value="AAAA-1111", tier=Tier.ONE_DAY).assign()

        with pytest.raises(ValueError, match="Cannot remove"):
            assigned.remove()

    def test_removed_key_cannot_be_assigned(self):
        removed = Key.create(value="AAAA-1111", tier=Tier.ONE_DAY).remove()

        with pytest.raises(ValueError, match="Cannot assign"):
            removed.assign()

    def test_hint_masks_value(self):
        key = Key.create(value="SECRET-KEY-9876", tier=Tier.ONE_DAY)
        assert key.hint == "****9876"

    def test_mask_short_values(self):
        assert mask_key("abc") == "****"
