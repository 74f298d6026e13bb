from adapters.web.views.event_list import EventListView
from adapters.web.views.my_registrations import MyRegistrationsView
from adapters.web.views.admin import AdminDashboardView

__all__ = [
    "EventListView",
    "MyRegistrationsView",
    "AdminDashboardView",
]
