"""
EventHub - Main entry point.

Event discovery and registration web app on top of Supabase.
"""

import asyncio
import logging
import sys
from aiohttp import web
from config.settings import settings
from config.features import features
from adapters.web.app import create_web_app
from adapters.web.loader import session_factory

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("eventhub.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE or settings.debug:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
    # Silence noisy HTTP debug logs
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)


async def main():
    """Main function - starts the web server and runs until interrupted."""

    logger.info("=== EventHub Starting ===")
    logger.info("Feature Flags:")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    if not settings.has_supabase_credentials:
        logger.error(
            "Supabase credentials not configured!\n"
            "   Required env vars: SUPABASE_URL, SUPABASE_ANON_KEY (or SUPABASE_KEY)\n"
            f"   SUPABASE_URL: {'set' if settings.supabase_url else 'MISSING'}\n"
            f"   SUPABASE_ANON_KEY: {'set' if settings.supabase_anon_key else 'MISSING'}\n"
            "   Hint: check your .env"
        )
        sys.exit(1)

    app = create_web_app(
        session_factory(settings),
        session_cookie=settings.session_cookie,
        idle_seconds=settings.session_idle_seconds,
        max_sessions=settings.max_sessions,
    )
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.host, settings.port)
    await site.start()
    logger.info(f"EventHub running on http://{settings.host}:{settings.port} ({settings.env})")

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        logger.info("Web server stopped.")


def run():
    """Console entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("EventHub stopped by user (Ctrl+C)")
    except SystemExit as e:
        sys.exit(e.code)


if __name__ == "__main__":
    run()
