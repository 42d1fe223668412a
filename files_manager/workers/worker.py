# files_manager/workers/worker.py
import asyncio
from typing import List, Optional

from loguru import logger
from saq import Queue, Worker

from files_manager.core.config import Settings, get_settings
from files_manager.core.logging import configure_logging
from files_manager.models.database import create_session_factory
from files_manager.services.mailer import Mailer
from files_manager.services.queue import EMAIL_QUEUE, THUMBNAIL_QUEUE
from files_manager.workers.notifications import send_welcome_email
from files_manager.workers.thumbnails import generate_thumbnails


def context_startup(session_factory, mailer: Mailer):
    """saq startup hook filling the shared job context."""

    async def startup(ctx):
        ctx["session_factory"] = session_factory
        ctx["mailer"] = mailer

    return startup


def build_workers(settings: Settings, session_factory=None, mailer: Optional[Mailer] = None) -> List[Worker]:
    """One saq Worker per queue, sharing a job context with db and mail handles."""
    session_factory = session_factory or create_session_factory(settings.database_url)
    mailer = mailer or Mailer.from_settings(settings)
    startup = context_startup(session_factory, mailer)

    thumbnails = Worker(
        Queue.from_url(settings.redis_url, name=THUMBNAIL_QUEUE),
        functions=[generate_thumbnails],
        concurrency=settings.worker_concurrency,
        startup=startup,
    )
    emails = Worker(
        Queue.from_url(settings.redis_url, name=EMAIL_QUEUE),
        functions=[send_welcome_email],
        concurrency=settings.worker_concurrency,
        startup=startup,
    )
    return [thumbnails, emails]


async def run(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    workers = build_workers(settings)

    for worker in workers:
        await worker.queue.connect()
    logger.info(f"Workers started for {THUMBNAIL_QUEUE!r} and {EMAIL_QUEUE!r}")

    try:
        await asyncio.gather(*(worker.start() for worker in workers))
    finally:
        for worker in workers:
            await worker.stop()
        logger.info("Workers stopped")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
