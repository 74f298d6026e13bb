"""Pytest fixtures for EventHub tests: in-memory repositories and auth gateway."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, List, Optional
from uuid import UUID, uuid4

import pytest

from core.domain.models import (
    AuthUser,
    Event,
    EventCategory,
    EventCreate,
    EventUpdate,
    Profile,
    Registration,
    RegistrationCreate,
    RegistrationStatus,
    UserRole,
)
from core.interfaces.auth import AuthStateListener, IAuthGateway
from core.interfaces.repositories import (
    IEventRepository,
    IProfileRepository,
    IRegistrationRepository,
)
from core.services import AuthContext, EventService, RegistrationService


class BackendError(Exception):
    """Stands in for a failed Supabase call."""


class InMemoryEventRepository(IEventRepository):
    def __init__(self):
        self.rows: Dict[UUID, Event] = {}
        self.rpc_calls: List[tuple] = []
        self.updated_ids: List[UUID] = []
        self.fail_list = False
        self.fail_rpc = False
        self.fail_write = False

    def add(self, event: Event) -> Event:
        self.rows[event.id] = event
        return event

    async def list_all(self) -> List[Event]:
        if self.fail_list:
            raise BackendError("list failed")
        return sorted(self.rows.values(), key=lambda e: e.event_date)

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        return self.rows.get(event_id)

    async def get_by_ids(self, event_ids: Iterable[UUID]) -> List[Event]:
        wanted = set(event_ids)
        return [e for e in self.rows.values() if e.id in wanted]

    async def create(self, event_data: EventCreate) -> Event:
        if self.fail_write:
            raise BackendError("insert failed")
        event = Event(id=uuid4(), registered_count=0, **event_data.model_dump())
        return self.add(event)

    async def update(self, event_id: UUID, event_data: EventUpdate) -> Optional[Event]:
        if self.fail_write:
            raise BackendError("update failed")
        current = self.rows.get(event_id)
        if not current:
            return None
        self.updated_ids.append(event_id)
        self.rows[event_id] = current.model_copy(update=event_data.model_dump())
        return self.rows[event_id]

    def _bump(self, name: str, event_id: UUID, delta: int) -> None:
        self.rpc_calls.append((name, event_id))
        if self.fail_rpc:
            raise BackendError(f"{name} failed")
        event = self.rows[event_id]
        self.rows[event_id] = event.model_copy(
            update={"registered_count": event.registered_count + delta}
        )

    async def increment_registered_count(self, event_id: UUID) -> None:
        self._bump("increment_registered_count", event_id, 1)

    async def decrement_registered_count(self, event_id: UUID) -> None:
        self._bump("decrement_registered_count", event_id, -1)


class InMemoryRegistrationRepository(IRegistrationRepository):
    def __init__(self):
        self.rows: Dict[UUID, Registration] = {}
        self.fail_create = False
        self.fail_update = False
        self.fail_list = False
        self.list_calls = 0

    async def create(self, registration_data: RegistrationCreate) -> Registration:
        if self.fail_create:
            raise BackendError("insert failed")
        registration = Registration(id=uuid4(), **registration_data.model_dump())
        self.rows[registration.id] = registration
        return registration

    async def get_user_registrations(
        self, user_id: UUID, status: RegistrationStatus = RegistrationStatus.CONFIRMED
    ) -> List[Registration]:
        self.list_calls += 1
        if self.fail_list:
            raise BackendError("select failed")
        return [r for r in self.rows.values() if r.user_id == user_id and r.status == status]

    async def update_status(self, registration_id: UUID, status: RegistrationStatus) -> None:
        if self.fail_update:
            raise BackendError("update failed")
        self.rows[registration_id] = self.rows[registration_id].model_copy(update={"status": status})


class InMemoryProfileRepository(IProfileRepository):
    def __init__(self):
        self.rows: Dict[UUID, Profile] = {}

    async def get_by_id(self, user_id: UUID) -> Optional[Profile]:
        return self.rows.get(user_id)


class FakeAuthGateway(IAuthGateway):
    """Email/password accounts held in a dict; notifies listeners like the SDK does."""

    def __init__(self, accounts: Dict[str, tuple]):
        self.accounts = accounts  # email -> (password, AuthUser)
        self.current: Optional[AuthUser] = None
        self.listeners: List[AuthStateListener] = []

    def _emit(self, event: str) -> None:
        for listener in list(self.listeners):
            listener(event, self.current)

    async def sign_in(self, email: str, password: str) -> AuthUser:
        account = self.accounts.get(email)
        if not account or account[0] != password:
            raise BackendError("Invalid login credentials")
        self.current = account[1]
        self._emit("SIGNED_IN")
        return self.current

    async def sign_out(self) -> None:
        self.current = None
        self._emit("SIGNED_OUT")

    async def get_current_user(self) -> Optional[AuthUser]:
        return self.current

    def subscribe(self, listener: AuthStateListener) -> Callable[[], None]:
        self.listeners.append(listener)
        return lambda: self.listeners.remove(listener)


def make_event(
    title: str = "Intro to Python",
    category: EventCategory = EventCategory.WORKSHOP,
    capacity: int = 10,
    registered_count: int = 0,
    days_from_now: int = 7,
    description: str = "Hands-on session",
    location: str = "Room 101",
) -> Event:
    return Event(
        id=uuid4(),
        title=title,
        description=description,
        category=category,
        location=location,
        event_date=datetime(2030, 3, 1, 14, 0, tzinfo=timezone.utc) + timedelta(days=days_from_now),
        capacity=capacity,
        registered_count=registered_count,
    )


@pytest.fixture
def event_repo():
    return InMemoryEventRepository()


@pytest.fixture
def registration_repo():
    return InMemoryRegistrationRepository()


@pytest.fixture
def profile_repo():
    return InMemoryProfileRepository()


@pytest.fixture
def event_service(event_repo):
    return EventService(event_repo=event_repo)


@pytest.fixture
def registration_service(registration_repo, event_repo):
    return RegistrationService(registration_repo=registration_repo, event_repo=event_repo)


@pytest.fixture
def user():
    return AuthUser(id=uuid4(), email="ada@example.com")


@pytest.fixture
def admin_user():
    return AuthUser(id=uuid4(), email="admin@example.com")


@pytest.fixture
def accounts(user, admin_user, profile_repo):
    profile_repo.rows[user.id] = Profile(id=user.id, email=user.email, full_name="Ada Lovelace")
    profile_repo.rows[admin_user.id] = Profile(
        id=admin_user.id, email=admin_user.email, full_name="Grace Admin", role=UserRole.ADMIN
    )
    return {
        user.email: ("secret", user),
        admin_user.email: ("admin-secret", admin_user),
    }


@pytest.fixture
def auth_gateway(accounts):
    return FakeAuthGateway(accounts)


@pytest.fixture
def auth_context(auth_gateway, profile_repo):
    return AuthContext(auth_gateway, profile_repo)
