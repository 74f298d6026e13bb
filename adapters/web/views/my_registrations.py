"""
My registrations view - the user's confirmed registrations with cancellation.
"""

import json
import logging
from datetime import tzinfo
from html import escape
from typing import List, Optional
from uuid import UUID
from core.domain.models import AuthUser, RegisteredEvent
from core.services.registration_service import RegistrationService
from adapters.web.components import format_event_date
from locales import t

logger = logging.getLogger(__name__)


class MyRegistrationsView:
    name = "my-registrations"

    def __init__(self, registration_service: RegistrationService, user: Optional[AuthUser], tz: tzinfo):
        self.registration_service = registration_service
        self.user = user
        self.tz = tz
        self.registrations: List[RegisteredEvent] = []

    async def load(self) -> None:
        if not self.user:
            return
        try:
            self.registrations = await self.registration_service.get_user_registrations(self.user.id)
        except Exception as e:
            logger.error(f"Error loading registrations: {e}")

    async def cancel(self, registration_id: UUID, event_id: UUID) -> Optional[str]:
        """
        Cancel a registration. Returns an alert message on failure.
        The entry leaves the local list only when the backend counter moved.
        """
        try:
            count_updated = await self.registration_service.cancel(registration_id, event_id)
        except Exception as e:
            logger.error(f"Error cancelling registration: {e}")
            return t("cancel_failed")

        if not count_updated:
            return t("cancel_count_failed")

        self.registrations = [r for r in self.registrations if r.registration_id != registration_id]
        return None

    def _render_entry(self, entry: RegisteredEvent) -> str:
        event = entry.event
        confirm = escape(f"return confirm({json.dumps(t('cancel_confirm'))});")
        return f"""<div class="card" id="registration-{entry.registration_id}">
  <div class="row">
    <div>
      <h3>{escape(event.title)}</h3>
      <p class="desc">{escape(event.description)}</p>
      <div class="meta">📅 {escape(format_event_date(event.event_date, self.tz))}</div>
      <div class="meta">📍 {escape(event.location)}</div>
      <div class="meta">👥 {escape(t("card_registered_count", registered=event.registered_count, capacity=event.capacity))}</div>
    </div>
    <form method="post" action="/registrations/{entry.registration_id}/cancel" onsubmit="{confirm}">
      <input type="hidden" name="event_id" value="{event.id}">
      <button type="submit" class="danger">✕ {escape(t("cancel_button"))}</button>
    </form>
  </div>
</div>"""

    def render(self) -> str:
        if self.registrations:
            body = "\n".join(self._render_entry(r) for r in self.registrations)
        else:
            body = f'<div class="card empty">{escape(t("my_registrations_empty"))}</div>'
        return f"""<main>
<h1>{escape(t("my_registrations_title"))}</h1>
{body}
</main>"""
