"""
Per-browser sessions.

A UserSession owns one auth context, the services bound to that user's
backend client, and the currently mounted view. The SessionRegistry is the
process-wide holder; it is started and stopped with the web application.
"""

import logging
import secrets
import time
from datetime import tzinfo
from typing import Callable, Dict, List, Optional
from config.features import features
from core.domain.constants import VIEW_EVENTS, VIEW_MY_REGISTRATIONS, VIEW_ADMIN, VIEWS
from core.services.auth_context import AuthContext
from core.services.event_service import EventService
from core.services.registration_service import RegistrationService
from adapters.web.views import EventListView, MyRegistrationsView, AdminDashboardView

logger = logging.getLogger(__name__)


class UserSession:
    """State of one browser: auth, services, current view, pending alerts"""

    def __init__(
        self,
        auth: AuthContext,
        event_service: EventService,
        registration_service: RegistrationService,
        tz: tzinfo,
    ):
        self.auth = auth
        self.event_service = event_service
        self.registration_service = registration_service
        self.tz = tz
        self.current_view = VIEW_EVENTS
        self.view = None
        self.alerts: List[str] = []
        self.last_seen = time.monotonic()

    async def start(self) -> None:
        await self.auth.start()

    def stop(self) -> None:
        self.auth.stop()
        self.view = None

    def touch(self) -> None:
        self.last_seen = time.monotonic()

    @property
    def can_admin(self) -> bool:
        return features.ADMIN_DASHBOARD_ENABLED and self.auth.is_admin

    def alert(self, message: Optional[str]) -> None:
        if message:
            self.alerts.append(message)

    def pop_alerts(self) -> List[str]:
        alerts, self.alerts = self.alerts, []
        return alerts

    def _make_view(self, name: str):
        user = self.auth.user
        if name == VIEW_MY_REGISTRATIONS:
            return MyRegistrationsView(self.registration_service, user, self.tz)
        if name == VIEW_ADMIN:
            return AdminDashboardView(self.event_service, user, self.tz)
        return EventListView(self.event_service, self.registration_service, user, self.tz)

    async def navigate(self, name: str):
        """Unmount the current view and mount (load) the requested one"""
        if name not in VIEWS:
            name = VIEW_EVENTS
        if name == VIEW_ADMIN and not self.can_admin:
            name = VIEW_EVENTS
        self.current_view = name
        self.view = self._make_view(name)
        await self.view.load()
        return self.view

    async def mounted(self, name: Optional[str] = None):
        """The mounted view, mounting it first when missing or of another kind"""
        name = name or self.current_view
        if self.view is None or self.view.name != name:
            return await self.navigate(name)
        return self.view

    def reset(self) -> None:
        """Forget view state (after sign-in or sign-out)"""
        self.current_view = VIEW_EVENTS
        self.view = None
        self.alerts = []


SessionFactory = Callable[[], UserSession]


class SessionRegistry:
    """
    Process-wide map of session id -> UserSession.

    Only signed-in browsers are registered: a session is built and started by
    open_session() for a sign-in attempt and added once that attempt succeeds.
    The map is capped; the least recently seen session is closed to make room.
    """

    def __init__(
        self,
        factory: SessionFactory,
        idle_seconds: int = 12 * 3600,
        max_sessions: int = 1000,
    ):
        self._factory = factory
        self._idle_seconds = idle_seconds
        self._max_sessions = max_sessions
        self._sessions: Dict[str, UserSession] = {}
        self._running = False

    def __len__(self) -> int:
        return len(self._sessions)

    async def start(self) -> None:
        self._running = True
        logger.info("[SESSIONS] Registry started")

    async def stop(self) -> None:
        for session in self._sessions.values():
            session.stop()
        count = len(self._sessions)
        self._sessions.clear()
        self._running = False
        logger.info(f"[SESSIONS] Registry stopped ({count} sessions closed)")

    def get(self, session_id: Optional[str]) -> Optional[UserSession]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    async def open_session(self) -> UserSession:
        """Build and start a session without registering it"""
        if not self._running:
            raise RuntimeError("Session registry is not running")
        session = self._factory()
        await session.start()
        return session

    def add(self, session: UserSession) -> str:
        """Register a started session and return its new id"""
        self.prune()
        while len(self._sessions) >= self._max_sessions:
            oldest = min(self._sessions, key=lambda sid: self._sessions[sid].last_seen)
            logger.info("[SESSIONS] Session limit reached, closing least recently seen")
            self.drop(oldest)

        session_id = secrets.token_urlsafe(32)
        session.touch()
        self._sessions[session_id] = session
        logger.debug(f"[SESSIONS] Registered session ({len(self._sessions)} active)")
        return session_id

    def drop(self, session_id: Optional[str]) -> None:
        session = self._sessions.pop(session_id, None) if session_id else None
        if session:
            session.stop()

    def prune(self) -> int:
        """Close sessions idle for longer than the limit"""
        cutoff = time.monotonic() - self._idle_seconds
        stale = [sid for sid, s in self._sessions.items() if s.last_seen < cutoff]
        for sid in stale:
            self.drop(sid)
        if stale:
            logger.info(f"[SESSIONS] Pruned {len(stale)} idle sessions")
        return len(stale)
