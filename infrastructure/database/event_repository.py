"""
Supabase implementation of Event repository.
"""

import logging
from typing import Optional, List, Iterable
from uuid import UUID
from supabase import Client
from config.features import features
from core.domain.models import Event, EventCreate, EventUpdate
from core.domain.constants import RPC_INCREMENT_COUNT, RPC_DECREMENT_COUNT
from core.interfaces.repositories import IEventRepository
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)


def _event_payload(event_data) -> dict:
    """Serialize form fields for insert/update"""
    return {
        "title": event_data.title,
        "description": event_data.description,
        "category": event_data.category.value,
        "location": event_data.location,
        "event_date": event_data.event_date.isoformat(),
        "capacity": event_data.capacity,
    }


class SupabaseEventRepository(IEventRepository):
    """Supabase implementation of event repository"""

    def __init__(self, client: Client):
        self._client = client

    def _to_model(self, data: dict) -> Event:
        """Convert database row to Event model"""
        return Event(
            id=data["id"],
            title=data["title"],
            description=data.get("description") or "",
            category=data["category"],
            location=data.get("location") or "",
            event_date=data["event_date"],
            capacity=data["capacity"],
            registered_count=data.get("registered_count") or 0,
            image_url=data.get("image_url"),
            created_by=data.get("created_by"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    @run_sync
    def _list_all_sync(self) -> List[dict]:
        response = self._client.table("events").select("*")\
            .order("event_date", desc=False)\
            .execute()
        if features.LOG_DB_RESPONSES:
            logger.debug(f"[EVENT_REPO] list_all returned {len(response.data or [])} rows")
        return response.data or []

    async def list_all(self) -> List[Event]:
        data = await self._list_all_sync()
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, event_id: UUID) -> Optional[dict]:
        response = self._client.table("events").select("*").eq("id", str(event_id)).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        data = await self._get_by_id_sync(event_id)
        return self._to_model(data) if data else None

    @run_sync
    def _get_by_ids_sync(self, event_ids: List[str]) -> List[dict]:
        response = self._client.table("events").select("*")\
            .in_("id", event_ids)\
            .execute()
        return response.data or []

    async def get_by_ids(self, event_ids: Iterable[UUID]) -> List[Event]:
        ids = [str(i) for i in event_ids]
        if not ids:
            return []
        data = await self._get_by_ids_sync(ids)
        return [self._to_model(d) for d in data]

    @run_sync
    def _create_sync(self, event_data: EventCreate) -> dict:
        data = _event_payload(event_data)
        data["created_by"] = str(event_data.created_by) if event_data.created_by else None
        response = self._client.table("events").insert([data]).execute()
        return response.data[0]

    async def create(self, event_data: EventCreate) -> Event:
        data = await self._create_sync(event_data)
        return self._to_model(data)

    @run_sync
    def _update_sync(self, event_id: UUID, event_data: EventUpdate) -> Optional[dict]:
        response = self._client.table("events").update(_event_payload(event_data))\
            .eq("id", str(event_id))\
            .execute()
        return response.data[0] if response.data else None

    async def update(self, event_id: UUID, event_data: EventUpdate) -> Optional[Event]:
        data = await self._update_sync(event_id, event_data)
        return self._to_model(data) if data else None

    @run_sync
    def _call_counter_rpc_sync(self, name: str, event_id: UUID) -> None:
        self._client.rpc(name, {"event_id": str(event_id)}).execute()

    async def increment_registered_count(self, event_id: UUID) -> None:
        await self._call_counter_rpc_sync(RPC_INCREMENT_COUNT, event_id)

    async def decrement_registered_count(self, event_id: UUID) -> None:
        await self._call_counter_rpc_sync(RPC_DECREMENT_COUNT, event_id)
