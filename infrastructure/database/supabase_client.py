"""
Supabase client factory and the sync-to-async bridge used by the repositories.

Clients are created per browser session with the anon key, so the backend's
row-level security evaluates each user's own JWT.
"""

import asyncio
import concurrent.futures
from functools import wraps
from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions
from config.settings import Settings, settings as default_settings


def create_backend_client(settings: Settings = default_settings) -> Client:
    """New Supabase client for one session. Raises RuntimeError without credentials."""
    if not settings.has_supabase_credentials:
        raise RuntimeError("Supabase credentials not configured (SUPABASE_URL, SUPABASE_ANON_KEY)")

    options = None
    if settings.db_schema != "public":
        options = ClientOptions(schema=settings.db_schema)
    if options is None:
        return create_client(settings.supabase_url, settings.supabase_anon_key)
    return create_client(settings.supabase_url, settings.supabase_anon_key, options=options)


# Shared by every session's repositories; bounded so a burst of page loads
# cannot starve the loop's default executor.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="eventhub-db",
)


def run_sync(func):
    """
    Run a blocking supabase-py call on the database pool and await the result.
    Exceptions raised by the call propagate to the awaiting coroutine.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper
