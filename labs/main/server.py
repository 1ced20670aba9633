"""
Server Entry Point - Main Layer

Starts the API with uvicorn. With ``--root`` the root company, user and role
described by the ROOT_* settings are seeded first.
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

import uvicorn

from labs.domain.entities.errors import DomainError
from labs.main.config import AppSettings, get_settings
from labs.main.container import init_container
from labs.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="labs-api", description="Labs HR API")
    parser.add_argument(
        "--root",
        action="store_true",
        help="seed the root company, user and role before starting",
    )
    return parser.parse_args(argv)


def seed_root(settings: AppSettings) -> bool:
    """Seed the root account. Returns False when seeding failed."""
    container = init_container(settings)
    use_case = container.seed_root_use_case()
    try:
        result = asyncio.run(
            use_case.execute(
                settings.root.company, settings.root.user, settings.root.role
            )
        )
    except DomainError as e:
        logger.error("root.seed.failed", error=e.message, **e.details)
        return False
    finally:
        container.mongo_database().close()

    logger.info("root.seed.done", user_id=str(result.id))
    return True


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    if args.root and not seed_root(settings):
        sys.exit(1)

    uvicorn.run(
        "labs.main.app:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        log_config=None,
    )
