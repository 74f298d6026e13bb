"""
Auth gateway interface - sign-in, sign-out and session change notifications.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional
from core.domain.models import AuthUser


# Called with (event_name, user or None) on every auth state change
AuthStateListener = Callable[[str, Optional[AuthUser]], None]


class IAuthGateway(ABC):
    """Interface for the backend auth subsystem"""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthUser:
        """Sign in with email and password"""
        pass

    @abstractmethod
    async def sign_out(self) -> None:
        """End the current session"""
        pass

    @abstractmethod
    async def get_current_user(self) -> Optional[AuthUser]:
        """Get the user of the current session, if any"""
        pass

    @abstractmethod
    def subscribe(self, listener: AuthStateListener) -> Callable[[], None]:
        """Register a listener; returns a function that unsubscribes it"""
        pass
