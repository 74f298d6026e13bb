"""
Domain models - the core of business logic.
These models are transport-agnostic (web views, scripts, tests).
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID
from enum import Enum


# === ENUMS ===

class EventCategory(str, Enum):
    SEMINAR = "seminar"
    WORKSHOP = "workshop"
    TECH_FEST = "tech_fest"
    CONCERT = "concert"


class RegistrationStatus(str, Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


# === EVENT ===

class EventBase(BaseModel):
    """Fields editable from the admin form"""
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: EventCategory
    location: str = Field(min_length=1)
    event_date: datetime
    capacity: int = Field(ge=1)

    @field_validator('title', 'description', 'location', mode='before')
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class EventCreate(EventBase):
    """Data for creating an event"""
    created_by: Optional[UUID] = None


class EventUpdate(EventBase):
    """Data for updating an event (never touches created_by or registered_count)"""
    pass


class Event(BaseModel):
    """Full event model"""
    id: UUID
    title: str
    description: str = ""
    category: EventCategory
    location: str = ""
    event_date: datetime
    capacity: int
    registered_count: int = 0
    image_url: Optional[str] = None
    created_by: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @property
    def spots_left(self) -> int:
        return self.capacity - self.registered_count

    @property
    def is_full(self) -> bool:
        return self.spots_left <= 0


# === REGISTRATION ===

class RegistrationCreate(BaseModel):
    """Data for creating a registration"""
    event_id: UUID
    user_id: UUID
    status: RegistrationStatus = RegistrationStatus.CONFIRMED


class Registration(BaseModel):
    """Full registration model"""
    id: UUID
    event_id: UUID
    user_id: Optional[UUID] = None  # not selected by every query
    status: RegistrationStatus = RegistrationStatus.CONFIRMED
    registered_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RegisteredEvent(BaseModel):
    """Event joined client-side with the user's registration for it"""
    event: Event
    registration_id: UUID
    status: RegistrationStatus


class RegistrationResult(BaseModel):
    """Outcome of the register -> increment sequence"""
    registration: Registration
    count_updated: bool


# === PROFILE ===

class Profile(BaseModel):
    """Application-level identity record, mirrors the auth user"""
    id: UUID
    email: str
    full_name: str = ""
    role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class AuthUser(BaseModel):
    """Signed-in backend identity"""
    id: UUID
    email: Optional[str] = None
