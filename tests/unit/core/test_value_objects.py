"""
Unit tests for core value objects.
"""
from datetime import timedelta

import pytest

from core.domain.exceptions import DomainException, InvalidTierError
from core.domain.value_objects import MAX_KEY_LENGTH, KeyStatus, KeyValue, Tier


class TestKeyValue:
    """Tests for KeyValue value object."""

    def test_valid_key(self):
        """Test valid key creation."""
        key = KeyValue("AAAA-BBBB-CCCC")
        assert str(key) == "AAAA-BBBB-CCCC"
        assert key.value == "AAAA-BBBB-CCCC"

    def test_keys_are_case_sensitive(self):
        """Test that keys differing only in case are distinct."""
        assert KeyValue("abc-123") != KeyValue("ABC-123")

    def test_equal_keys_hash_alike(self):
        """Test value equality and hashing."""
        assert KeyValue("K-1") == KeyValue("K-1")
        assert len({KeyValue("K-1"), KeyValue("K-1")}) == 1

    def test_invalid_key_empty(self):
        """Test invalid empty key."""
        with pytest.raises(ValueError, match="cannot be empty"):
            KeyValue("")

    def test_invalid_key_blank(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            KeyValue("   ")

    def test_invalid_key_untrimmed(self):
        """Test that callers must trim before building a key."""
        with pytest.raises(ValueError, match="surrounding whitespace"):
            KeyValue(" K-1 ")

    def test_invalid_key_too_long(self):
        with pytest.raises(ValueError, match="too long"):
            KeyValue("K" * (MAX_KEY_LENGTH + 1))


class TestTier:
    """Tests for Tier enum."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("1 day", Tier.ONE_DAY),
            ("7 days", Tier.SEVEN_DAYS),
            ("30 days", Tier.THIRTY_DAYS),
        ],
    )
    def test_parse_label(self, label, expected):
        """Test resolving tiers from their labels."""
        assert Tier.parse(label) is expected

    def test_parse_passes_members_through(self):
        assert Tier.parse(Tier.ONE_DAY) is Tier.ONE_DAY

    @pytest.mark.parametrize("label", ["", "2 days", "7 Days", "7days", None])
    def test_parse_unknown_label(self, label):
        """Test unknown tiers are rejected with a domain error."""
        with pytest.raises(InvalidTierError) as exc_info:
            Tier.parse(label)

        assert isinstance(exc_info.value, DomainException)
        assert exc_info.value.code == "INVALID_TIER"

    def test_durations(self):
        """Test validity granted by each tier."""
        assert Tier.ONE_DAY.duration == timedelta(days=1)
        assert Tier.SEVEN_DAYS.duration == timedelta(days=7)
        assert Tier.THIRTY_DAYS.duration == timedelta(days=30)

    def test_str(self):
        assert str(Tier.SEVEN_DAYS) == "7 days"
        assert str(KeyStatus.AVAILABLE) == "available"
