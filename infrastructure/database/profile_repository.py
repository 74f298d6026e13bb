"""
Supabase implementation of Profile repository.
"""

from typing import Optional
from uuid import UUID
from supabase import Client
from core.domain.models import Profile, UserRole
from core.interfaces.repositories import IProfileRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseProfileRepository(IProfileRepository):
    """Supabase implementation of profile repository"""

    def __init__(self, client: Client):
        self._client = client

    def _to_model(self, data: dict) -> Profile:
        """Convert database row to Profile model"""
        return Profile(
            id=data["id"],
            email=data.get("email") or "",
            full_name=data.get("full_name") or "",
            role=UserRole(data.get("role") or "user"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    @run_sync
    def _get_by_id_sync(self, user_id: UUID) -> Optional[dict]:
        response = self._client.table("profiles").select("*").eq("id", str(user_id)).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, user_id: UUID) -> Optional[Profile]:
        data = await self._get_by_id_sync(user_id)
        return self._to_model(data) if data else None
