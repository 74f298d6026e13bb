from infrastructure.database.event_repository import SupabaseEventRepository
from infrastructure.database.registration_repository import SupabaseRegistrationRepository
from infrastructure.database.profile_repository import SupabaseProfileRepository
from infrastructure.database.auth_gateway import SupabaseAuthGateway
from infrastructure.database.supabase_client import create_backend_client, run_sync

__all__ = [
    "SupabaseEventRepository",
    "SupabaseRegistrationRepository",
    "SupabaseProfileRepository",
    "SupabaseAuthGateway",
    "create_backend_client",
    "run_sync",
]
