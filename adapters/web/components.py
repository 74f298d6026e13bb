"""
HTML building blocks shared by the views: page shell, navbar, event card, event form.
"""

import json
from dataclasses import dataclass
from datetime import datetime, tzinfo
from html import escape
from typing import Iterable, Optional
from uuid import UUID
from core.domain.models import Event, EventCategory, Profile
from core.domain.constants import (
    CATEGORIES, VIEW_EVENTS, VIEW_MY_REGISTRATIONS, VIEW_ADMIN, FORM_DATETIME_FORMAT,
    get_category_display,
)
from locales import t


PAGE_CSS = """
  body { font-family: -apple-system, BlinkMacSystemFont, sans-serif; margin: 0; background: #f9fafb; color: #111827; }
  nav { background: #fff; border-bottom: 1px solid #e5e7eb; }
  .nav-inner { max-width: 1100px; margin: 0 auto; padding: 0 16px; height: 64px; display: flex; align-items: center; justify-content: space-between; }
  .brand { font-size: 1.25em; font-weight: bold; }
  .nav-links { display: flex; align-items: center; gap: 20px; }
  .nav-links a { color: #4b5563; text-decoration: none; font-size: 0.9em; }
  .nav-links a.active { color: #2563eb; font-weight: 600; }
  .nav-user { border-left: 1px solid #e5e7eb; padding-left: 20px; display: flex; gap: 12px; align-items: center; }
  main { max-width: 1100px; margin: 0 auto; padding: 24px 16px; }
  .filters { display: flex; gap: 12px; margin-bottom: 24px; }
  .filters input[type=text] { flex: 1; }
  input, select, textarea { padding: 8px 10px; border: 1px solid #d1d5db; border-radius: 8px; font: inherit; }
  button { padding: 8px 16px; border: none; border-radius: 8px; font: inherit; cursor: pointer; background: #2563eb; color: #fff; }
  button:disabled { cursor: not-allowed; }
  button.secondary { background: #fff; color: #374151; border: 1px solid #d1d5db; }
  button.danger { background: #fef2f2; color: #dc2626; }
  button.linklike { background: none; color: #4b5563; padding: 0; }
  .grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(300px, 1fr)); gap: 20px; }
  .card { background: #fff; border-radius: 8px; box-shadow: 0 1px 3px rgba(0,0,0,.1); padding: 20px; margin-bottom: 12px; }
  .card h3 { margin: 8px 0; }
  .card .desc { color: #4b5563; font-size: 0.9em; }
  .meta { color: #4b5563; font-size: 0.9em; margin: 4px 0; }
  .badge { display: inline-block; padding: 2px 10px; border-radius: 999px; font-size: 0.75em; font-weight: 600; }
  .badge.full { background: #fee2e2; color: #b91c1c; float: right; }
  .spots { color: #16a34a; font-weight: 600; }
  .card button { width: 100%; margin-top: 12px; }
  .card button.registered { background: #dcfce7; color: #15803d; }
  .card button.full { background: #f3f4f6; color: #9ca3af; }
  .empty { text-align: center; color: #6b7280; padding: 48px 0; }
  .row { display: flex; justify-content: space-between; align-items: flex-start; gap: 16px; }
  .form-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; }
  label { display: block; font-size: 0.85em; color: #374151; margin: 10px 0 4px; }
  form.stacked input, form.stacked textarea, form.stacked select { width: 100%; box-sizing: border-box; }
  table { width: 100%; border-collapse: collapse; }
  th, td { text-align: left; padding: 8px; border-bottom: 1px solid #e5e7eb; }
  th { color: #6b7280; font-weight: normal; }
"""


@dataclass
class CardState:
    """Derived display state of an event card"""
    is_registered: bool
    is_full: bool
    spots_left: int
    disabled: bool
    button_label: str
    button_class: str


def card_state(event: Event, is_registered: bool) -> CardState:
    """Button is disabled when the user holds a seat or the event is full"""
    is_full = event.is_full
    if is_registered:
        label, css = t("card_button_registered"), "registered"
    elif is_full:
        label, css = t("card_button_full"), "full"
    else:
        label, css = t("card_button_register"), ""
    return CardState(
        is_registered=is_registered,
        is_full=is_full,
        spots_left=event.spots_left,
        disabled=is_registered or is_full,
        button_label=label,
        button_class=css,
    )


def format_event_date(value: datetime, tz: tzinfo) -> str:
    """e.g. 'Mon, Jan 15, 2024, 02:00 PM' in the display timezone"""
    local = value.astimezone(tz)
    return f"{local:%a, %b} {local.day}, {local.year}, {local:%I:%M %p}"


def format_form_date(value: datetime, tz: tzinfo) -> str:
    """Value for a datetime-local input"""
    return value.astimezone(tz).strftime(FORM_DATETIME_FORMAT)


def category_badge(category: EventCategory) -> str:
    info = CATEGORIES[category]
    return (
        f'<span class="badge" style="background:{info["background"]};color:{info["color"]}">'
        f'{info["icon"]} {escape(get_category_display(category))}</span>'
    )


def category_options(selected: str, include_all: bool = False) -> str:
    options = []
    if include_all:
        options.append(("all", t("events_category_all")))
    options.extend((c.value, get_category_display(c)) for c in EventCategory)
    return "\n".join(
        f'<option value="{value}"{" selected" if value == selected else ""}>{escape(label)}</option>'
        for value, label in options
    )


def render_alerts(alerts: Iterable[str]) -> str:
    """Blocking browser alerts, shown once on page load"""
    return "".join(f"<script>alert({json.dumps(a)});</script>" for a in alerts)


def render_page(body: str, alerts: Iterable[str] = (), title: Optional[str] = None) -> str:
    page_title = escape(title or t("app_name"))
    return f"""<!DOCTYPE html>
<html><head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{page_title}</title>
<style>{PAGE_CSS}</style>
</head><body>
{body}
{render_alerts(alerts)}
</body></html>"""


def render_navbar(current_view: str, profile: Optional[Profile], show_admin: bool) -> str:
    def link(view: str, label_key: str) -> str:
        css = ' class="active"' if view == current_view else ""
        return f'<a href="/?view={view}"{css}>{escape(t(label_key))}</a>'

    links = [link(VIEW_EVENTS, "nav_events"), link(VIEW_MY_REGISTRATIONS, "nav_my_registrations")]
    if show_admin:
        links.append(link(VIEW_ADMIN, "nav_admin"))

    name = escape(profile.full_name) if profile else ""
    return f"""<nav><div class="nav-inner">
  <span class="brand">📅 {escape(t("app_name"))}</span>
  <div class="nav-links">
    {"".join(links)}
    <div class="nav-user">
      <span>👤 {name}</span>
      <form method="post" action="/logout"><button class="linklike" type="submit">{escape(t("nav_sign_out"))}</button></form>
    </div>
  </div>
</div></nav>"""


def render_event_card(event: Event, is_registered: bool, tz: tzinfo) -> str:
    state = card_state(event, is_registered)
    full_badge = f'<span class="badge full">{escape(t("card_full"))}</span>' if state.is_full else ""
    spots = "" if state.is_full else f' <span class="spots">{escape(t("card_spots_left", spots=state.spots_left))}</span>'
    disabled = " disabled" if state.disabled else ""
    return f"""<div class="card" id="event-{event.id}">
  {category_badge(event.category)}{full_badge}
  <h3>{escape(event.title)}</h3>
  <p class="desc">{escape(event.description)}</p>
  <div class="meta">📅 {escape(format_event_date(event.event_date, tz))}</div>
  <div class="meta">📍 {escape(event.location)}</div>
  <div class="meta">👥 {escape(t("card_registered_count", registered=event.registered_count, capacity=event.capacity))}{spots}</div>
  <form method="post" action="/events/{event.id}/register">
    <button type="submit" class="{state.button_class}"{disabled}>{escape(state.button_label)}</button>
  </form>
</div>"""


def render_event_form(values: dict, event_id: Optional[UUID] = None) -> str:
    """Admin create/edit form; values are the raw field strings. An edit form posts event_id."""
    def v(key: str) -> str:
        return escape(str(values.get(key, "")))

    is_edit = event_id is not None
    heading = t("form_edit_title") if is_edit else t("form_create_title")
    submit = t("form_update_submit") if is_edit else t("form_create_submit")
    hidden_id = f'<input type="hidden" name="event_id" value="{event_id}">' if is_edit else ""
    return f"""<div class="card">
  <div class="row">
    <h2>{escape(heading)}</h2>
    <form method="post" action="/admin/events/cancel"><button class="linklike" type="submit">✕</button></form>
  </div>
  <form class="stacked" method="post" action="/admin/events">
    {hidden_id}
    <label>{escape(t("form_title"))}</label>
    <input type="text" name="title" value="{v("title")}" required>
    <label>{escape(t("form_description"))}</label>
    <textarea name="description" rows="3" required>{v("description")}</textarea>
    <div class="form-grid">
      <div>
        <label>{escape(t("form_category"))}</label>
        <select name="category" required>{category_options(str(values.get("category", "seminar")))}</select>
      </div>
      <div>
        <label>{escape(t("form_capacity"))}</label>
        <input type="number" name="capacity" min="1" value="{v("capacity")}" required>
      </div>
    </div>
    <label>{escape(t("form_location"))}</label>
    <input type="text" name="location" value="{v("location")}" required>
    <label>{escape(t("form_event_date"))}</label>
    <input type="datetime-local" name="event_date" value="{v("event_date")}" required>
    <div style="margin-top:16px; text-align:right">
      <button type="submit" class="secondary" formaction="/admin/events/cancel" formnovalidate>{escape(t("form_cancel"))}</button>
      <button type="submit">{escape(submit)}</button>
    </div>
  </form>
</div>"""


def render_sign_in(email: str = "") -> str:
    return f"""<main style="max-width:400px">
<div class="card">
  <h2>{escape(t("sign_in_title"))}</h2>
  <form class="stacked" method="post" action="/login">
    <label>{escape(t("sign_in_email"))}</label>
    <input type="email" name="email" value="{escape(email)}" required>
    <label>{escape(t("sign_in_password"))}</label>
    <input type="password" name="password" required>
    <div style="margin-top:16px"><button type="submit">{escape(t("sign_in_button"))}</button></div>
  </form>
</div>
</main>"""


def render_loading() -> str:
    return f'<main><div class="empty">{escape(t("loading"))}</div></main>'
