"""
Registration service - the seat bookkeeping protocol.

Registering inserts a confirmed row and then asks the backend to bump
events.registered_count; cancelling flips the row to cancelled and asks the
backend to lower the count. The two steps are not transactional: the first
step's failure propagates, the second step's outcome is reported as a flag.
"""

import logging
from typing import List, Set
from uuid import UUID
from core.domain.models import (
    RegistrationCreate, RegistrationStatus, RegistrationResult, RegisteredEvent,
)
from core.interfaces.repositories import IEventRepository, IRegistrationRepository

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for registration-related operations"""

    def __init__(self, registration_repo: IRegistrationRepository, event_repo: IEventRepository):
        self.registration_repo = registration_repo
        self.event_repo = event_repo

    async def get_registered_event_ids(self, user_id: UUID) -> Set[UUID]:
        """IDs of events the user holds a confirmed registration for"""
        registrations = await self.registration_repo.get_user_registrations(user_id)
        return {r.event_id for r in registrations}

    async def get_user_registrations(self, user_id: UUID) -> List[RegisteredEvent]:
        """Confirmed registrations joined with their events"""
        registrations = await self.registration_repo.get_user_registrations(user_id)
        if not registrations:
            return []

        # first registration wins when an event was registered twice
        by_event = {}
        for r in registrations:
            by_event.setdefault(r.event_id, r)
        events = await self.event_repo.get_by_ids(by_event.keys())

        return [
            RegisteredEvent(
                event=event,
                registration_id=by_event[event.id].id,
                status=by_event[event.id].status,
            )
            for event in events
            if event.id in by_event
        ]

    async def register(self, event_id: UUID, user_id: UUID) -> RegistrationResult:
        """
        Insert a confirmed registration, then increment the event's counter.
        Raises if the insert fails; a failed increment leaves the registration
        in place and returns count_updated=False.
        """
        registration = await self.registration_repo.create(
            RegistrationCreate(event_id=event_id, user_id=user_id)
        )
        logger.info(f"[REGISTRATION] User {user_id} registered for event {event_id}")

        try:
            await self.event_repo.increment_registered_count(event_id)
        except Exception as e:
            logger.error(f"[REGISTRATION] Failed to increment count for event {event_id}: {e}")
            return RegistrationResult(registration=registration, count_updated=False)

        return RegistrationResult(registration=registration, count_updated=True)

    async def cancel(self, registration_id: UUID, event_id: UUID) -> bool:
        """
        Mark a registration cancelled, then decrement the event's counter.
        Raises if the status update fails; returns whether the counter moved.
        """
        await self.registration_repo.update_status(registration_id, RegistrationStatus.CANCELLED)
        logger.info(f"[REGISTRATION] Cancelled registration {registration_id}")

        try:
            await self.event_repo.decrement_registered_count(event_id)
        except Exception as e:
            logger.error(f"[REGISTRATION] Failed to decrement count for event {event_id}: {e}")
            return False

        return True
