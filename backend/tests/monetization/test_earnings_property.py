"""Property-based tests for ad rates, revenue shares and earnings."""

import pytest
from hypothesis import given, settings, strategies as st

from streamora.core.exceptions import InputValidationError
from streamora.core.store import RecordStore
from streamora.modules.creator.models import CpmRank, MonetizationPlan
from streamora.modules.creator.repository import CreatorStatsRepository
from streamora.modules.monetization.models import CPM_RATES, REVENUE_SHARES
from streamora.modules.monetization.service import (
    MonetizationService,
    compute_cpm_rate,
    compute_creator_earnings,
    compute_revenue_share,
)

rank_strategy = st.sampled_from(list(CpmRank))
plan_strategy = st.sampled_from(list(MonetizationPlan))


class TestRateTables:
    """Tests for the CPM and revenue share tables."""

    def test_every_rank_has_a_rate(self) -> None:
        assert set(CPM_RATES) == set(CpmRank)
        assert [compute_cpm_rate(r) for r in CpmRank] == [3.0, 5.0, 8.0, 10.0]

    def test_every_plan_has_a_share(self) -> None:
        assert set(REVENUE_SHARES) == set(MonetizationPlan)
        assert compute_revenue_share(MonetizationPlan.STANDARD) == 0.55
        assert compute_revenue_share(MonetizationPlan.PREMIUM) == 0.70

    def test_string_values_accepted(self) -> None:
        assert compute_cpm_rate("gold") == 8.0
        assert compute_revenue_share("premium") == 0.70

    def test_unknown_values_rejected(self) -> None:
        with pytest.raises(InputValidationError):
            compute_cpm_rate("platinum")
        with pytest.raises(InputValidationError):
            compute_revenue_share("enterprise")

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            CPM_RATES[CpmRank.BRONZE] = 100.0


class TestCreatorEarnings:
    """Property tests for the earnings formula."""

    @given(
        views=st.integers(min_value=0, max_value=10**9),
        rank=rank_strategy,
        plan=plan_strategy,
    )
    @settings(max_examples=100)
    def test_formula(self, views: int, rank: CpmRank, plan: MonetizationPlan) -> None:
        """*For any* views, rank and plan, earnings SHALL be views/1000 * CPM * share."""
        expected = round(views / 1000 * CPM_RATES[rank] * REVENUE_SHARES[plan], 2)
        assert compute_creator_earnings(views, rank, plan) == expected

    @given(views=st.integers(min_value=1000, max_value=10**8), rank=rank_strategy)
    @settings(max_examples=50)
    def test_premium_plan_pays_more(self, views: int, rank: CpmRank) -> None:
        """*For any* positive views, the premium plan SHALL pay at least the standard plan."""
        standard = compute_creator_earnings(views, rank, MonetizationPlan.STANDARD)
        premium = compute_creator_earnings(views, rank, MonetizationPlan.PREMIUM)
        assert premium >= standard

    def test_negative_views_rejected(self) -> None:
        with pytest.raises(InputValidationError):
            compute_creator_earnings(-1, CpmRank.BRONZE, MonetizationPlan.STANDARD)


class TestEarningsReport:
    """Tests for the per-creator earnings report."""

    def test_report_reflects_rank_plan_and_threshold(self) -> None:
        store = RecordStore.in_memory()
        CreatorStatsRepository(store).update(
            "alice",
            cpm_rank=CpmRank.GOLD,
            monetization_plan=MonetizationPlan.PREMIUM,
            total_earnings=100.0,
        )

        report = MonetizationService(store, min_payout_amount=100.0).earnings_report("alice")

        assert report.cpm_rate == 8.0
        assert report.creator_share == 0.70
        assert report.platform_share == 0.30
        assert report.can_request_payout

    def test_new_creator_report(self) -> None:
        report = MonetizationService(
            RecordStore.in_memory(), min_payout_amount=100.0
        ).earnings_report("newbie")

        assert report.cpm_rank == CpmRank.BRONZE
        assert report.cpm_rate == 3.0
        assert report.platform_share == 0.45
        assert not report.can_request_payout
