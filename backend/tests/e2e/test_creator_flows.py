"""End-to-end tests for creator flows.

Tests complete flows across the identity, monetization, moderation and
notification services sharing one store:
- Request, approval and activation of monetization
- Eligibility by subscriber count alone
- Escalation through all three strikes
"""

from hypothesis import given, settings, strategies as st

from streamora.core.store import RecordStore
from streamora.modules.creator.repository import CreatorStatsRepository
from streamora.modules.identity.service import IdentityDirectory
from streamora.modules.moderation.models import STRIKE_MESSAGES
from streamora.modules.moderation.service import ModerationService
from streamora.modules.monetization.models import Decision
from streamora.modules.monetization.service import MonetizationService
from streamora.modules.notification.models import NotificationCategory
from streamora.modules.notification.service import NotificationService
from streamora.modules.video.models import VideoType
from streamora.modules.video.schemas import VideoCreate
from streamora.modules.video.service import VideoService


def make_monetization(store: RecordStore) -> MonetizationService:
    return MonetizationService(store, min_subscribers=100, min_views=1000, min_payout_amount=100.0)


class TestMonetizationFlow:
    """Request, approve, activate, then pay out."""

    def test_alice_request_approve_activate(self) -> None:
        store = RecordStore.in_memory()
        session = IdentityDirectory(store, admin_handle="SHUBOWNER2026").register(
            "Alice", "alice", "wonderland"
        )
        monetization = make_monetization(store)

        request = monetization.request_monetization(session.secret_handle, session.public_name)
        assert not monetization.eligibility_report("alice").eligible

        monetization.resolve_monetization_request(request.id, Decision.APPROVED)
        stats = monetization.activate_monetization("alice", "alice@x.com", "1234")

        assert stats.is_monetized
        inbox = NotificationService(store).inbox("alice")
        monetization_notes = [
            n for n in inbox
            if n.category == NotificationCategory.MONETIZATION and n.target_handle == "alice"
        ]
        assert len(monetization_notes) == 1

    def test_activated_creator_requests_payout(self) -> None:
        store = RecordStore.in_memory()
        CreatorStatsRepository(store).update("alice", subscriber_count=120, total_earnings=250.0)
        monetization = make_monetization(store)

        monetization.activate_monetization("alice", "alice@x.com", "1234")
        payout = monetization.request_payout("alice", "Alice")
        monetization.resolve_payout_request(payout.id, Decision.APPROVED)

        assert payout.paypal_email == "alice@x.com"
        assert payout.amount == 250.0
        assert NotificationService(store).inbox("alice")[0].category == NotificationCategory.PAYMENT


class TestEligibilityFlow:
    """Eligibility without any admin involvement."""

    @given(subscribers=st.integers(min_value=100, max_value=10**6))
    @settings(max_examples=20)
    def test_bob_eligible_by_subscribers(self, subscribers: int) -> None:
        """*For any* subscriber count of 100 or more, bob SHALL be eligible unapproved."""
        store = RecordStore.in_memory()
        stats = CreatorStatsRepository(store).update("bob", subscriber_count=subscribers)

        assert not stats.monetization_approved
        assert make_monetization(store).evaluate_eligibility(stats)

    def test_bob_with_150_subscribers(self) -> None:
        store = RecordStore.in_memory()
        stats = CreatorStatsRepository(store).update("bob", subscriber_count=150)

        assert make_monetization(store).evaluate_eligibility(stats)


class TestStrikeFlow:
    """Escalation from first warning to suspension."""

    def test_carol_three_strikes(self) -> None:
        store = RecordStore.in_memory()
        CreatorStatsRepository(store).update("carol", subscriber_count=500)
        make_monetization(store).activate_monetization("carol", "carol@x.com", "9999")

        videos = VideoService(store)
        videos.publish("carol", "Carol", VideoCreate(title="First"))
        videos.publish("carol", "Carol", VideoCreate(type=VideoType.SHORT, title="Quick"))
        videos.publish("dave", "Dave", VideoCreate(title="Unrelated"))

        moderation = ModerationService(store)
        for level in (1, 2, 3):
            moderation.issue_strike("carol", level)

        stats = CreatorStatsRepository(store).get("carol")
        assert stats.strikes == 3
        assert not stats.is_monetized
        assert videos.list_by_uploader("carol") == []
        assert len(videos.list_by_uploader("dave")) == 1

        strike_notes = [
            n for n in NotificationService(store).inbox("carol")
            if n.category == NotificationCategory.STRIKE
        ]
        assert len({n.id for n in strike_notes}) == 3
        assert [n.message for n in reversed(strike_notes)] == [
            STRIKE_MESSAGES[1],
            STRIKE_MESSAGES[2],
            STRIKE_MESSAGES[3],
        ]
