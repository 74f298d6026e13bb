"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL -> in-memory, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Iterable
from uuid import UUID
from core.domain.models import (
    Event, EventCreate, EventUpdate,
    Registration, RegistrationCreate, RegistrationStatus,
    Profile,
)


class IEventRepository(ABC):
    """Interface for event data access"""

    @abstractmethod
    async def list_all(self) -> List[Event]:
        """Get all events ordered by event date ascending"""
        pass

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, event_ids: Iterable[UUID]) -> List[Event]:
        """Get events whose ID is in the given set"""
        pass

    @abstractmethod
    async def create(self, event_data: EventCreate) -> Event:
        """Create a new event"""
        pass

    @abstractmethod
    async def update(self, event_id: UUID, event_data: EventUpdate) -> Optional[Event]:
        """Update a single event row"""
        pass

    @abstractmethod
    async def increment_registered_count(self, event_id: UUID) -> None:
        """Call the backend procedure that adds one to registered_count"""
        pass

    @abstractmethod
    async def decrement_registered_count(self, event_id: UUID) -> None:
        """Call the backend procedure that removes one from registered_count"""
        pass


class IRegistrationRepository(ABC):
    """Interface for registration data access"""

    @abstractmethod
    async def create(self, registration_data: RegistrationCreate) -> Registration:
        """Insert a registration row"""
        pass

    @abstractmethod
    async def get_user_registrations(
        self, user_id: UUID, status: RegistrationStatus = RegistrationStatus.CONFIRMED
    ) -> List[Registration]:
        """Get a user's registrations with the given status"""
        pass

    @abstractmethod
    async def update_status(self, registration_id: UUID, status: RegistrationStatus) -> None:
        """Set the status of a registration"""
        pass


class IProfileRepository(ABC):
    """Interface for profile data access"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[Profile]:
        """Get the profile of an auth user"""
        pass
