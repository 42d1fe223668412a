# files_manager/services/queue.py
from typing import Any, Optional

from loguru import logger
from saq import Queue

THUMBNAIL_QUEUE = "thumbnail generation"
EMAIL_QUEUE = "email dispatch"


class JobQueue:
    """
    A saq queue bound to one task.

    `enqueue` is fire-and-forget for the request path: a broker failure is
    logged and the caller carries on without the job.
    """

    def __init__(self, queue: Queue, function: str, **job_options: Any):
        self.queue = queue
        self.function = function
        self.job_options = job_options

    @classmethod
    def from_url(cls, url: str, name: str, function: str, **job_options: Any) -> "JobQueue":
        return cls(Queue.from_url(url, name=name), function, **job_options)

    async def connect(self) -> None:
        await self.queue.connect()

    async def disconnect(self) -> None:
        await self.queue.disconnect()

    async def enqueue(self, **job_data: Any) -> Optional[str]:
        try:
            job = await self.queue.enqueue(self.function, **self.job_options, **job_data)
        except Exception:
            logger.exception(f"Could not enqueue {self.function} on {self.queue.name}")
            return None

        if job is None:
            return None
        logger.info(f"Enqueued {self.function} job {job.key}")
        return job.key
