"""Property-based tests for subscriptions and site events."""

import string

import pytest
from hypothesis import given, settings, strategies as st

from streamora.core.exceptions import InputValidationError
from streamora.core.store import RecordStore
from streamora.modules.site.models import THEME_EVENT_NAMES, SiteTheme
from streamora.modules.site.service import SiteService

handle_strategy = st.text(alphabet=string.ascii_lowercase, min_size=3, max_size=8)


class TestSubscriptions:
    """Property tests for subscription toggling."""

    @given(toggles=st.integers(min_value=1, max_value=7))
    @settings(max_examples=20)
    def test_toggle_parity(self, toggles: int) -> None:
        """*For any* number of toggles, the subscriber SHALL be subscribed iff it is odd."""
        service = SiteService(RecordStore.in_memory())

        for _ in range(toggles):
            result = service.toggle_subscription("viewer", "alice")

        assert result == (toggles % 2 == 1)
        assert service.is_subscribed("viewer", "alice") == result

    @given(creators=st.lists(handle_strategy, unique=True, max_size=6))
    @settings(max_examples=30)
    def test_subscriptions_keep_order(self, creators: list[str]) -> None:
        """*For any* creators followed, the list SHALL keep follow order."""
        service = SiteService(RecordStore.in_memory())
        subscriber = "zz-viewer"

        for creator in creators:
            service.toggle_subscription(subscriber, creator)

        assert service.subscriptions(subscriber) == creators
        assert service.subscriptions("someone-else") == []

    def test_self_subscription_rejected(self) -> None:
        service = SiteService(RecordStore.in_memory())

        with pytest.raises(InputValidationError):
            service.toggle_subscription("alice", "alice")


class TestSiteEvents:
    """Tests for the site-wide event."""

    @given(theme=st.sampled_from(list(SiteTheme)))
    @settings(max_examples=10)
    def test_start_uses_theme_name(self, theme: SiteTheme) -> None:
        """*For any* theme, an unnamed event SHALL take the theme's event name."""
        service = SiteService(RecordStore.in_memory())

        event = service.start_event(theme)

        assert event.name == THEME_EVENT_NAMES[theme]
        assert event.active
        assert service.active_event() == event

    def test_new_event_replaces_running_one(self) -> None:
        service = SiteService(RecordStore.in_memory())
        service.start_event("holiday")

        event = service.start_event("golden", "Launch Week")

        assert service.active_event().id == event.id
        assert service.active_event().name == "Launch Week"

    def test_stop(self) -> None:
        service = SiteService(RecordStore.in_memory())
        assert service.stop_event() is False

        service.start_event(SiteTheme.DARK_EVENT)

        assert service.stop_event() is True
        assert service.active_event() is None

    def test_unknown_theme_rejected(self) -> None:
        with pytest.raises(InputValidationError):
            SiteService(RecordStore.in_memory()).start_event("neon")
