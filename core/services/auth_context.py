"""
Auth context - holds the signed-in user and profile for one client session.

start() subscribes to the gateway's auth state changes and resolves the
current session; stop() unsubscribes. Views get the context injected and
read user/profile/loading from it.
"""

import logging
from typing import Callable, Optional
from core.domain.models import AuthUser, Profile
from core.interfaces.auth import IAuthGateway
from core.interfaces.repositories import IProfileRepository

logger = logging.getLogger(__name__)

SIGNED_OUT = "SIGNED_OUT"


class AuthContext:
    """Current user/profile with a subscribe-on-start, unsubscribe-on-stop lifecycle"""

    def __init__(self, gateway: IAuthGateway, profile_repo: IProfileRepository):
        self.gateway = gateway
        self.profile_repo = profile_repo
        self.user: Optional[AuthUser] = None
        self.profile: Optional[Profile] = None
        self.loading = True
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._profile_stale = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_admin(self) -> bool:
        return bool(self.profile and self.profile.is_admin)

    @property
    def started(self) -> bool:
        return self._unsubscribe is not None

    async def start(self) -> None:
        """Subscribe to auth changes and load the current session"""
        if self.started:
            return
        self._unsubscribe = self.gateway.subscribe(self._on_auth_change)
        try:
            self.user = await self.gateway.get_current_user()
            if self.user:
                await self.load_profile()
        except Exception as e:
            logger.error(f"[AUTH] Failed to restore session: {e}")
            self.user = None
            self.profile = None
        finally:
            self.loading = False

    def stop(self) -> None:
        """Drop the auth subscription"""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    async def sign_in(self, email: str, password: str) -> None:
        """Sign in and load the user's profile. Raises on bad credentials."""
        self.user = await self.gateway.sign_in(email, password)
        await self.load_profile()
        logger.info(f"[AUTH] Signed in {self.user.email}")

    async def sign_out(self) -> None:
        await self.gateway.sign_out()
        self.user = None
        self.profile = None

    async def load_profile(self) -> Optional[Profile]:
        if not self.user:
            self.profile = None
            return None
        try:
            self.profile = await self.profile_repo.get_by_id(self.user.id)
        except Exception as e:
            logger.error(f"[AUTH] Failed to load profile for {self.user.id}: {e}")
            self.profile = None
        self._profile_stale = False
        return self.profile

    async def refresh(self) -> None:
        """Reload the profile if an auth change arrived since it was loaded"""
        if self._profile_stale:
            await self.load_profile()

    def _on_auth_change(self, event: str, user: Optional[AuthUser]) -> None:
        # May run on the SDK's worker thread; only plain attribute writes here.
        logger.debug(f"[AUTH] State change: {event}")
        if event == SIGNED_OUT or user is None:
            self.user = None
            self.profile = None
            return
        if self.user is None or self.user.id != user.id:
            self._profile_stale = True
        self.user = user
