"""Property-based tests for creator stats.

Stats are created lazily with the same defaults every time, and edits are
validated before they are stored.
"""

import string

import pytest
from hypothesis import given, settings, strategies as st

from streamora.core.exceptions import InputValidationError
from streamora.core.store import RecordStore
from streamora.modules.creator.models import CpmRank, CreatorStats, MonetizationPlan
from streamora.modules.creator.schemas import CreatorStatsResponse, CreatorStatsUpdate
from streamora.modules.creator.service import CreatorStatsService

handle_strategy = st.text(alphabet=string.ascii_letters + string.digits, min_size=3, max_size=16)


class TestLazyDefaults:
    """Property tests for first-read defaults."""

    @given(handle=handle_strategy)
    @settings(max_examples=50)
    def test_first_read_defaults(self, handle: str) -> None:
        """*For any* new handle, stats SHALL read as zero/false defaults."""
        stats = CreatorStatsService(RecordStore.in_memory()).get_stats(handle)

        assert stats.handle == handle
        assert stats.total_views == 0
        assert stats.subscriber_count == 0
        assert stats.total_earnings == 0.0
        assert stats.strikes == 0
        assert stats.cpm_rank == CpmRank.BRONZE
        assert stats.monetization_plan == MonetizationPlan.STANDARD
        assert not stats.is_monetized
        assert not stats.monetization_approved
        assert not stats.monetization_requested

    @given(handle=handle_strategy)
    @settings(max_examples=30)
    def test_defaults_are_deterministic_and_not_persisted(self, handle: str) -> None:
        """*For any* handle, repeated reads SHALL agree and SHALL NOT write."""
        store = RecordStore.in_memory()
        service = CreatorStatsService(store)

        assert service.get_stats(handle) == service.get_stats(handle)
        assert store.entries("user_stats") == {}


class TestStatsEditor:
    """Tests for admin stats edits."""

    @given(
        views=st.integers(min_value=0, max_value=10**9),
        subscribers=st.integers(min_value=0, max_value=10**7),
    )
    @settings(max_examples=30)
    def test_update_only_touches_given_fields(self, views: int, subscribers: int) -> None:
        """*For any* partial edit, fields not given SHALL keep their values."""
        service = CreatorStatsService(RecordStore.in_memory())
        service.update_stats("alice", CreatorStatsUpdate(total_earnings=42.5))

        stats = service.update_stats(
            "alice", CreatorStatsUpdate(total_views=views, subscriber_count=subscribers)
        )

        assert stats.total_views == views
        assert stats.subscriber_count == subscribers
        assert stats.total_earnings == 42.5

    def test_malformed_record_reads_as_defaults(self) -> None:
        store = RecordStore.in_memory()
        store.put_entry("user_stats", "alice", {"handle": "alice", "strikes": "many"})

        assert CreatorStatsService(store).get_stats("alice") == CreatorStats.default_for("alice")

    def test_negative_values_rejected(self) -> None:
        with pytest.raises(ValueError):
            CreatorStatsUpdate(subscriber_count=-1)

    def test_ad_pin_not_in_response(self) -> None:
        stats = CreatorStats(handle="alice", ad_pin="1234", paypal_email="a@pay.com")
        response = CreatorStatsResponse.model_validate(stats.model_dump())

        assert "ad_pin" not in response.model_dump()
        assert response.paypal_email == "a@pay.com"

    def test_list_stats_only_stored(self) -> None:
        service = CreatorStatsService(RecordStore.in_memory())
        service.get_stats("ghost")
        service.update_stats("alice", CreatorStatsUpdate(total_views=10))

        assert list(service.list_stats()) == ["alice"]

    def test_invalid_merged_record_raises_input_validation(self) -> None:
        service = CreatorStatsService(RecordStore.in_memory())
        unchecked = CreatorStatsUpdate.model_construct(total_views=-5)

        with pytest.raises(InputValidationError):
            service.update_stats("alice", unchecked)
