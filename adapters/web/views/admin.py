"""
Admin dashboard view - event table plus the create/edit form.
"""

import logging
from datetime import datetime, tzinfo
from html import escape
from typing import Dict, List, Optional
from uuid import UUID
from core.domain.models import AuthUser, Event, EventBase, EventCategory
from core.domain.constants import FORM_DATETIME_FORMAT
from core.services.event_service import EventService
from adapters.web.components import (
    render_event_form, format_event_date, format_form_date, category_badge,
)
from locales import t

logger = logging.getLogger(__name__)

FORM_FIELDS = ("title", "description", "category", "location", "event_date", "capacity")


def form_values_from_event(event: Event, tz: tzinfo) -> Dict[str, str]:
    """Pre-populate the form from an event's current values"""
    return {
        "title": event.title,
        "description": event.description,
        "category": event.category.value,
        "location": event.location,
        "event_date": format_form_date(event.event_date, tz),
        "capacity": str(event.capacity),
    }


def parse_event_form(values: Dict[str, str], tz: tzinfo) -> EventBase:
    """
    Build the event payload from raw form strings.
    Raises ValueError (pydantic's ValidationError included) on missing or malformed fields.
    """
    raw_date = (values.get("event_date") or "").strip()
    event_date = datetime.strptime(raw_date, FORM_DATETIME_FORMAT).replace(tzinfo=tz)
    return EventBase(
        title=values.get("title", ""),
        description=values.get("description", ""),
        category=values.get("category", ""),
        location=values.get("location", ""),
        event_date=event_date,
        capacity=int((values.get("capacity") or "").strip()),
    )


class AdminDashboardView:
    name = "admin"

    def __init__(self, event_service: EventService, user: Optional[AuthUser], tz: tzinfo):
        self.event_service = event_service
        self.user = user
        self.tz = tz
        self.events: List[Event] = []
        self.form_open = False
        self.editing: Optional[Event] = None
        self.form_values: Dict[str, str] = {}

    async def load(self) -> None:
        try:
            self.events = await self.event_service.list_events()
        except Exception as e:
            logger.error(f"Error loading events: {e}")
            self.events = []

    def find_event(self, event_id: UUID) -> Optional[Event]:
        return next((e for e in self.events if e.id == event_id), None)

    def open_create(self) -> None:
        self.form_open = True
        self.editing = None
        self.form_values = {"category": EventCategory.SEMINAR.value}

    def open_edit(self, event_id: UUID) -> Optional[str]:
        event = self.find_event(event_id)
        if not event:
            return t("event_not_found")
        self.form_open = True
        self.editing = event
        self.form_values = form_values_from_event(event, self.tz)
        return None

    def close_form(self) -> None:
        self.form_open = False
        self.editing = None
        self.form_values = {}

    async def submit(self, values: Dict[str, str], event_id: Optional[UUID] = None) -> Optional[str]:
        """
        Insert or update from the posted form. Returns an alert message on failure.
        The posted event_id decides between update and insert; without it the
        form creates a new event, whatever form this view had open before.
        """
        existing = None
        if event_id is not None:
            try:
                existing = self.find_event(event_id) or await self.event_service.get_event(event_id)
            except Exception as e:
                logger.error(f"Error loading event {event_id}: {e}")
                return t("save_failed")
            if existing is None:
                return t("event_not_found")

        self.form_open = True
        self.editing = existing
        self.form_values = {k: str(values.get(k, "")) for k in FORM_FIELDS}
        try:
            form = parse_event_form(self.form_values, self.tz)
        except ValueError as e:
            # ValidationError subclasses ValueError
            logger.info(f"[ADMIN] Rejected event form: {e}")
            return t("form_invalid")

        try:
            await self.event_service.save_event(
                form,
                existing=existing,
                created_by=self.user.id if self.user else None,
            )
        except Exception as e:
            logger.error(f"Error saving event: {e}")
            return t("save_failed")

        self.close_form()
        await self.load()
        return None

    def _render_table(self) -> str:
        if not self.events:
            return f'<div class="card empty">{escape(t("admin_empty"))}</div>'
        rows = "\n".join(
            f"<tr><td>{escape(e.title)}</td>"
            f"<td>{category_badge(e.category)}</td>"
            f"<td>{escape(format_event_date(e.event_date, self.tz))}</td>"
            f"<td>{e.registered_count} / {e.capacity}</td>"
            f'<td><a href="/admin/events/{e.id}/edit">{escape(t("admin_edit_button"))}</a></td></tr>'
            for e in self.events
        )
        return f"""<div class="card"><table>
<tr><th>{escape(t("admin_col_title"))}</th><th>{escape(t("admin_col_category"))}</th><th>{escape(t("admin_col_date"))}</th><th>{escape(t("admin_col_registered"))}</th><th></th></tr>
{rows}
</table></div>"""

    def render(self) -> str:
        form = render_event_form(self.form_values, self.editing.id if self.editing else None) if self.form_open else ""
        return f"""<main>
<div class="row">
  <h1>{escape(t("admin_title"))}</h1>
  <a href="/admin/events/new"><button type="button">＋ {escape(t("admin_create_button"))}</button></a>
</div>
{form}
{self._render_table()}
</main>"""
