"""
Event service - business logic for event operations.
"""

import logging
from typing import Optional, List, Iterable
from uuid import UUID
from core.domain.models import Event, EventBase, EventCreate, EventUpdate
from core.domain.constants import CATEGORY_ALL
from core.interfaces.repositories import IEventRepository

logger = logging.getLogger(__name__)


def filter_events(events: Iterable[Event], search_term: str = "", category: str = CATEGORY_ALL) -> List[Event]:
    """
    Apply the listing filters.
    Search is a case-insensitive substring match on title, description or location;
    category is an exact match unless it is the "all" wildcard.
    """
    filtered = list(events)

    if search_term:
        needle = search_term.lower()
        filtered = [
            e for e in filtered
            if needle in e.title.lower()
            or needle in e.description.lower()
            or needle in e.location.lower()
        ]

    if category and category != CATEGORY_ALL:
        filtered = [e for e in filtered if e.category.value == category]

    return filtered


class EventService:
    """Service for event-related operations"""

    def __init__(self, event_repo: IEventRepository):
        self.event_repo = event_repo

    async def list_events(self) -> List[Event]:
        """All events, soonest first"""
        return await self.event_repo.list_all()

    async def get_event(self, event_id: UUID) -> Optional[Event]:
        return await self.event_repo.get_by_id(event_id)

    async def create_event(self, form: EventBase, created_by: Optional[UUID]) -> Event:
        """Create a new event owned by created_by"""
        event_data = EventCreate(**form.model_dump(), created_by=created_by)
        event = await self.event_repo.create(event_data)
        logger.info(f"[EVENT_SERVICE] Created event {event.id} '{event.title}'")
        return event

    async def update_event(self, event_id: UUID, form: EventBase) -> Optional[Event]:
        """Update the single event row identified by event_id"""
        event = await self.event_repo.update(event_id, EventUpdate(**form.model_dump()))
        logger.info(f"[EVENT_SERVICE] Updated event {event_id}")
        return event

    async def save_event(
        self,
        form: EventBase,
        existing: Optional[Event] = None,
        created_by: Optional[UUID] = None,
    ) -> Optional[Event]:
        """Insert when there is no existing event, otherwise update it"""
        if existing:
            return await self.update_event(existing.id, form)
        return await self.create_event(form, created_by)

