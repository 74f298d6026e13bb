"""
Supabase implementation of the auth gateway.
"""

from typing import Callable, Optional
from supabase import Client
from core.domain.models import AuthUser
from core.interfaces.auth import IAuthGateway, AuthStateListener
from infrastructure.database.supabase_client import run_sync


def _to_auth_user(user) -> Optional[AuthUser]:
    if user is None:
        return None
    return AuthUser(id=user.id, email=getattr(user, "email", None))


class SupabaseAuthGateway(IAuthGateway):
    """Wraps client.auth of a per-session Supabase client"""

    def __init__(self, client: Client):
        self._client = client

    @run_sync
    def _sign_in_sync(self, email: str, password: str):
        return self._client.auth.sign_in_with_password({"email": email, "password": password})

    async def sign_in(self, email: str, password: str) -> AuthUser:
        response = await self._sign_in_sync(email, password)
        user = _to_auth_user(response.user)
        if user is None:
            raise ValueError("Sign-in returned no user")
        return user

    @run_sync
    def _sign_out_sync(self) -> None:
        self._client.auth.sign_out()

    async def sign_out(self) -> None:
        await self._sign_out_sync()

    @run_sync
    def _get_session_sync(self):
        return self._client.auth.get_session()

    async def get_current_user(self) -> Optional[AuthUser]:
        session = await self._get_session_sync()
        return _to_auth_user(session.user) if session else None

    def subscribe(self, listener: AuthStateListener) -> Callable[[], None]:
        def on_change(event, session):
            listener(str(event), _to_auth_user(session.user) if session else None)

        subscription = self._client.auth.on_auth_state_change(on_change)
        return subscription.unsubscribe
