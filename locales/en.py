"""English UI strings."""

EN_STRINGS = {
    # === APP ===
    "app_name": "EventHub",
    "loading": "Loading...",

    # === NAVBAR ===
    "nav_events": "Browse Events",
    "nav_my_registrations": "My Registrations",
    "nav_admin": "Admin Dashboard",
    "nav_sign_out": "Sign Out",

    # === SIGN IN ===
    "sign_in_title": "Sign in to EventHub",
    "sign_in_email": "Email",
    "sign_in_password": "Password",
    "sign_in_button": "Sign In",
    "sign_in_failed": "Invalid email or password.",

    # === EVENT LIST ===
    "events_title": "Discover Events",
    "events_search_placeholder": "Search events...",
    "events_filter_button": "Filter",
    "events_category_all": "All Categories",
    "events_empty": "No events found.",
    "register_failed": "Failed to register for event. Please try again.",
    "register_count_failed": "You are registered, but the seat count could not be updated. Please refresh later.",

    # === EVENT CARD ===
    "card_full": "Full",
    "card_registered_count": "{registered} / {capacity} registered",
    "card_spots_left": "({spots} spots left)",
    "card_button_registered": "Registered",
    "card_button_full": "Event Full",
    "card_button_register": "Register Now",

    # === MY REGISTRATIONS ===
    "my_registrations_title": "My Registrations",
    "my_registrations_empty": "You haven't registered for any events yet.",
    "cancel_button": "Cancel",
    "cancel_confirm": "Are you sure you want to cancel this registration?",
    "cancel_failed": "Failed to cancel registration. Please try again.",
    "cancel_count_failed": "Your registration was cancelled, but the seat count could not be updated.",

    # === ADMIN ===
    "admin_title": "Admin Dashboard",
    "admin_create_button": "Create Event",
    "admin_edit_button": "Edit",
    "admin_empty": "No events yet. Create the first one.",
    "admin_col_title": "Title",
    "admin_col_category": "Category",
    "admin_col_date": "Date",
    "admin_col_registered": "Registered",

    # === EVENT FORM ===
    "form_create_title": "Create New Event",
    "form_edit_title": "Edit Event",
    "form_title": "Title",
    "form_description": "Description",
    "form_category": "Category",
    "form_capacity": "Capacity",
    "form_location": "Location",
    "form_event_date": "Event Date & Time",
    "form_cancel": "Cancel",
    "form_create_submit": "Create Event",
    "form_update_submit": "Update Event",
    "form_invalid": "Please fill in every field. Capacity must be a whole number of at least 1.",
    "save_failed": "Failed to save event. Please try again.",
    "event_not_found": "Event not found.",
}
