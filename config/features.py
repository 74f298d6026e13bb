"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === ADMIN ===
    ADMIN_DASHBOARD_ENABLED: bool = os.getenv("ADMIN_DASHBOARD_ENABLED", "true").lower() == "true"

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_DB_RESPONSES: bool = os.getenv("LOG_DB_RESPONSES", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "admin_dashboard_enabled": cls.ADMIN_DASHBOARD_ENABLED,
            "debug_mode": cls.DEBUG_MODE,
            "log_db_responses": cls.LOG_DB_RESPONSES,
        }


# Shortcut
features = Features()
