"""CLI entry point for running the finance tracker API server."""

import argparse
import asyncio
import logging
import sys

import uvicorn

from .config import settings

logger = logging.getLogger(__name__)


async def init_db() -> None:
    """Create all tables that do not exist yet."""
    from .db.engine import engine
    from .db.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


def main() -> None:
    """Run the finance tracker API server."""
    parser = argparse.ArgumentParser(description="Finance Tracker API Server")
    parser.add_argument("--host", default=settings.host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--init-db", action="store_true", help="Create database tables and exit")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.init_db:
        logger.info("Initializing database...")
        asyncio.run(init_db())
        logger.info("Database initialized")
        return

    uvicorn.run(
        "finance_tracker.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload or args.debug,
        log_level="debug" if args.debug else "info",
    )


if __name__ == "__main__":
    main()
