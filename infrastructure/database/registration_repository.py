"""
Supabase implementation of Registration repository.
"""

from typing import List
from uuid import UUID
from supabase import Client
from core.domain.models import Registration, RegistrationCreate, RegistrationStatus
from core.interfaces.repositories import IRegistrationRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseRegistrationRepository(IRegistrationRepository):
    """Supabase implementation of registration repository"""

    def __init__(self, client: Client):
        self._client = client

    def _to_model(self, data: dict) -> Registration:
        """Convert database row to Registration model"""
        return Registration(
            id=data["id"],
            event_id=data["event_id"],
            user_id=data.get("user_id"),
            status=RegistrationStatus(data.get("status", "confirmed")),
            registered_at=data.get("registered_at"),
        )

    @run_sync
    def _create_sync(self, registration_data: RegistrationCreate) -> dict:
        data = {
            "event_id": str(registration_data.event_id),
            "user_id": str(registration_data.user_id),
            "status": registration_data.status.value,
        }
        response = self._client.table("registrations").insert([data]).execute()
        return response.data[0]

    async def create(self, registration_data: RegistrationCreate) -> Registration:
        data = await self._create_sync(registration_data)
        return self._to_model(data)

    @run_sync
    def _get_user_registrations_sync(self, user_id: UUID, status: RegistrationStatus) -> List[dict]:
        response = self._client.table("registrations")\
            .select("id, event_id, status")\
            .eq("user_id", str(user_id))\
            .eq("status", status.value)\
            .execute()
        return response.data or []

    async def get_user_registrations(
        self, user_id: UUID, status: RegistrationStatus = RegistrationStatus.CONFIRMED
    ) -> List[Registration]:
        data = await self._get_user_registrations_sync(user_id, status)
        return [self._to_model(d) for d in data]

    @run_sync
    def _update_status_sync(self, registration_id: UUID, status: RegistrationStatus) -> None:
        self._client.table("registrations")\
            .update({"status": status.value})\
            .eq("id", str(registration_id))\
            .execute()

    async def update_status(self, registration_id: UUID, status: RegistrationStatus) -> None:
        await self._update_status_sync(registration_id, status)
