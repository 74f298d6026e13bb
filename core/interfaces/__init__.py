from core.interfaces.repositories import (
    IEventRepository,
    IRegistrationRepository,
    IProfileRepository,
)
from core.interfaces.auth import IAuthGateway, AuthStateListener

__all__ = [
    # Repositories
    "IEventRepository",
    "IRegistrationRepository",
    "IProfileRepository",
    # Auth
    "IAuthGateway",
    "AuthStateListener",
]
