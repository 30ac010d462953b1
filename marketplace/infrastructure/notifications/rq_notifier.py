"""
Name: RQ Approval Notifier

Responsibilities:
  - Enqueue "customer pending approval" jobs to Redis using RQ

Collaborators:
  - worker.jobs.notify_pending_approval_job (job entry point)
"""

from redis import Redis
from rq import Queue, Retry

from ...crosscutting.logger import logger
from ...domain.entities import User

APPROVAL_JOB_PATH = "marketplace.worker.jobs.notify_pending_approval_job"


class RQApprovalNotifier:
    """R: ApprovalNotifier that hands the notification to a background worker."""

    def __init__(
        self,
        redis_url: str | None = None,
        queue_name: str = "customer-approvals",
        retry_max_attempts: int = 3,
        retry_intervals: list[int] | None = None,
        queue: Queue | None = None,
    ):
        if queue is None:
            if not redis_url:
                raise ValueError("redis_url or queue is required")
            queue = Queue(queue_name, connection=Redis.from_url(redis_url))
        self._queue = queue
        self._retry = Retry(max=retry_max_attempts, interval=retry_intervals or 0)

    def notify(self, user: User) -> None:
        job = self._queue.enqueue(
            APPROVAL_JOB_PATH,
            str(user.id),
            user.email,
            retry=self._retry,
        )
        logger.info(
            "Approval notification enqueued",
            extra={"user_id": str(user.id), "job_id": job.id},
        )
