"""
Domain constants - categories, view names, and other static data.
Centralized here for easy modification and future localization.
"""

from core.domain.models import EventCategory

# Wildcard for the category filter
CATEGORY_ALL = "all"

# Display data per category: icon, badge colours, label
CATEGORIES = {
    EventCategory.SEMINAR: {"icon": "🎓", "color": "#1d4ed8", "background": "#dbeafe", "label_en": "Seminar"},
    EventCategory.WORKSHOP: {"icon": "💼", "color": "#15803d", "background": "#dcfce7", "label_en": "Workshop"},
    EventCategory.TECH_FEST: {"icon": "⚡", "color": "#c2410c", "background": "#ffedd5", "label_en": "Tech Fest"},
    EventCategory.CONCERT: {"icon": "🎵", "color": "#be185d", "background": "#fce7f3", "label_en": "Concert"},
}

# Views reachable from the navbar
VIEW_EVENTS = "events"
VIEW_MY_REGISTRATIONS = "my-registrations"
VIEW_ADMIN = "admin"
VIEWS = (VIEW_EVENTS, VIEW_MY_REGISTRATIONS, VIEW_ADMIN)

# Remote procedures that adjust events.registered_count
RPC_INCREMENT_COUNT = "increment_registered_count"
RPC_DECREMENT_COUNT = "decrement_registered_count"

# datetime-local input format (minute precision)
FORM_DATETIME_FORMAT = "%Y-%m-%dT%H:%M"


def get_category_display(category: EventCategory, lang: str = "en") -> str:
    """Get display text for a category"""
    info = CATEGORIES.get(category)
    if not info:
        return category.value.replace("_", " ").capitalize()
    return info.get(f"label_{lang}", info["label_en"])
