from core.services.event_service import EventService, filter_events
from core.services.registration_service import RegistrationService
from core.services.auth_context import AuthContext

__all__ = [
    "EventService",
    "filter_events",
    "RegistrationService",
    "AuthContext",
]
