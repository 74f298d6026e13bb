"""
Web loader - builds the per-session object graph on top of Supabase.
"""

from zoneinfo import ZoneInfo
from config.settings import Settings, settings as default_settings

# Infrastructure
from infrastructure.database import (
    create_backend_client,
    SupabaseEventRepository,
    SupabaseRegistrationRepository,
    SupabaseProfileRepository,
    SupabaseAuthGateway,
)

# Core services
from core.services import EventService, RegistrationService, AuthContext
from adapters.web.session import UserSession, SessionFactory


def build_session(settings: Settings = default_settings) -> UserSession:
    """One Supabase client per browser session, shared by its repositories."""
    client = create_backend_client(settings)

    # === REPOSITORIES ===
    event_repo = SupabaseEventRepository(client)
    registration_repo = SupabaseRegistrationRepository(client)
    profile_repo = SupabaseProfileRepository(client)

    # === BUSINESS SERVICES ===
    event_service = EventService(event_repo=event_repo)
    registration_service = RegistrationService(
        registration_repo=registration_repo,
        event_repo=event_repo,
    )
    auth = AuthContext(SupabaseAuthGateway(client), profile_repo)

    return UserSession(
        auth=auth,
        event_service=event_service,
        registration_service=registration_service,
        tz=ZoneInfo(settings.display_timezone),
    )


def session_factory(settings: Settings = default_settings) -> SessionFactory:
    return lambda: build_session(settings)
