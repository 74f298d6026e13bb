"""
Event listing view - all events, the user's registered set, filters, and registration.
"""

import logging
from datetime import tzinfo
from html import escape
from typing import List, Optional, Set
from uuid import UUID
from core.domain.models import AuthUser, Event
from core.domain.constants import CATEGORY_ALL
from core.services.event_service import EventService, filter_events
from core.services.registration_service import RegistrationService
from adapters.web.components import render_event_card, category_options
from locales import t

logger = logging.getLogger(__name__)


class EventListView:
    """Local state of the listing: events, registered ids, and filter inputs"""

    name = "events"

    def __init__(
        self,
        event_service: EventService,
        registration_service: RegistrationService,
        user: Optional[AuthUser],
        tz: tzinfo,
    ):
        self.event_service = event_service
        self.registration_service = registration_service
        self.user = user
        self.tz = tz
        self.events: List[Event] = []
        self.registered_ids: Set[UUID] = set()
        self.search_term = ""
        self.category = CATEGORY_ALL
        self.visible_events: List[Event] = []

    async def load(self) -> None:
        await self._load_events()
        await self._load_registrations()
        self._refilter()

    async def _load_events(self) -> None:
        try:
            self.events = await self.event_service.list_events()
        except Exception as e:
            logger.error(f"Error loading events: {e}")
            self.events = []

    async def _load_registrations(self) -> None:
        if not self.user:
            return
        try:
            self.registered_ids = await self.registration_service.get_registered_event_ids(self.user.id)
        except Exception as e:
            logger.error(f"Error loading registrations: {e}")

    def set_filters(self, search_term: Optional[str] = None, category: Optional[str] = None) -> None:
        if search_term is not None:
            self.search_term = search_term.strip()
        if category is not None:
            self.category = category or CATEGORY_ALL
        self._refilter()

    def _refilter(self) -> None:
        self.visible_events = filter_events(self.events, self.search_term, self.category)

    def is_registered(self, event_id: UUID) -> bool:
        return event_id in self.registered_ids

    async def register(self, event_id: UUID) -> Optional[str]:
        """
        Register the user for an event. Returns an alert message on failure.
        The local count is bumped only when the backend counter moved.
        """
        if not self.user:
            return None

        try:
            result = await self.registration_service.register(event_id, self.user.id)
        except Exception as e:
            logger.error(f"Error registering for event: {e}")
            return t("register_failed")

        self.registered_ids = self.registered_ids | {event_id}
        if not result.count_updated:
            return t("register_count_failed")

        self.events = [
            e.model_copy(update={"registered_count": e.registered_count + 1}) if e.id == event_id else e
            for e in self.events
        ]
        self._refilter()
        return None

    def render(self) -> str:
        if self.visible_events:
            cards = "\n".join(
                render_event_card(e, self.is_registered(e.id), self.tz) for e in self.visible_events
            )
            listing = f'<div class="grid">{cards}</div>'
        else:
            listing = f'<div class="empty">{escape(t("events_empty"))}</div>'

        return f"""<main>
<h1>{escape(t("events_title"))}</h1>
<form class="filters" method="get" action="/">
  <input type="text" name="q" value="{escape(self.search_term)}" placeholder="{escape(t("events_search_placeholder"))}">
  <select name="category">{category_options(self.category, include_all=True)}</select>
  <button type="submit">{escape(t("events_filter_button"))}</button>
</form>
{listing}
</main>"""
