"""Unit tests for card state, date formatting and the category lookup."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from conftest import make_event
from adapters.web.components import (
    card_state,
    category_options,
    format_event_date,
    format_form_date,
    render_event_card,
    render_event_form,
    render_navbar,
)
from core.domain.constants import CATEGORIES, get_category_display
from core.domain.models import EventCategory, Profile, UserRole

UTC = timezone.utc


class TestCardState:
    @pytest.mark.parametrize(
        "registered, registered_count, disabled, label",
        [
            (False, 3, False, "Register Now"),
            (True, 3, True, "Registered"),
            (False, 10, True, "Event Full"),
            (True, 10, True, "Registered"),
        ],
    )
    def test_disabled_is_registered_or_full(self, registered, registered_count, disabled, label):
        event = make_event(capacity=10, registered_count=registered_count)
        state = card_state(event, registered)
        assert state.disabled is disabled
        assert state.button_label == label

    def test_spots_left(self):
        state = card_state(make_event(capacity=10, registered_count=7), False)
        assert state.spots_left == 3
        assert state.is_full is False

    def test_over_capacity_counts_as_full(self):
        assert card_state(make_event(capacity=5, registered_count=6), False).is_full is True


class TestEventCard:
    def test_open_event_shows_spots_left(self):
        html = render_event_card(make_event(capacity=10, registered_count=9), False, UTC)
        assert "9 / 10 registered" in html
        assert "(1 spots left)" in html
        assert "disabled" not in html

    def test_full_event_has_badge_and_no_spots_annotation(self):
        html = render_event_card(make_event(capacity=10, registered_count=10), False, UTC)
        assert "10 / 10 registered" in html
        assert "spots left" not in html
        assert ">Full<" in html
        assert "Event Full" in html

    def test_text_is_escaped(self):
        html = render_event_card(make_event(title="<script>x</script>"), False, UTC)
        assert "<script>x</script>" not in html
        assert "&lt;script&gt;" in html


class TestDates:
    def test_display_format(self):
        value = datetime(2024, 1, 15, 14, 0, tzinfo=UTC)
        assert format_event_date(value, UTC) == "Mon, Jan 15, 2024, 02:00 PM"

    def test_display_uses_timezone(self):
        value = datetime(2024, 1, 15, 14, 0, tzinfo=UTC)
        assert format_event_date(value, ZoneInfo("America/New_York")) == "Mon, Jan 15, 2024, 09:00 AM"

    def test_form_value_has_minute_precision(self):
        value = datetime(2024, 1, 15, 14, 5, 33, tzinfo=UTC)
        assert format_form_date(value, UTC) == "2024-01-15T14:05"


class TestCategories:
    def test_lookup_covers_every_category(self):
        assert set(CATEGORIES) == set(EventCategory)
        for info in CATEGORIES.values():
            assert {"icon", "color", "background", "label_en"} <= set(info)

    def test_labels(self):
        assert get_category_display(EventCategory.TECH_FEST) == "Tech Fest"
        assert get_category_display(EventCategory.SEMINAR) == "Seminar"

    def test_options_mark_selection(self):
        html = category_options("concert", include_all=True)
        assert '<option value="all">All Categories</option>' in html
        assert '<option value="concert" selected>Concert</option>' in html


class TestNavbar:
    def test_admin_entry_only_when_allowed(self):
        profile = Profile(id=make_event().id, email="a@b.c", full_name="Ann", role=UserRole.USER)
        assert "Admin Dashboard" not in render_navbar("events", profile, show_admin=False)
        assert "Admin Dashboard" in render_navbar("events", profile, show_admin=True)

    def test_current_view_is_highlighted(self):
        html = render_navbar("my-registrations", None, show_admin=False)
        assert '<a href="/?view=my-registrations" class="active">' in html
        assert '<a href="/?view=events">' in html


class TestEventForm:
    def test_edit_form_posts_event_id(self):
        event = make_event()
        html = render_event_form({"title": event.title}, event.id)
        assert "Edit Event" in html
        assert f'<input type="hidden" name="event_id" value="{event.id}">' in html

    def test_create_form_has_no_event_id(self):
        html = render_event_form({})
        assert "Create New Event" in html
        assert 'name="event_id"' not in html
