"""
Name: RQ Worker Entrypoint

Responsibilities:
  - Start an RQ worker on the customer approval queue
"""

from redis import Redis
from rq import Worker

from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger


def main() -> None:
    settings = get_settings()
    if not settings.redis_url:
        raise SystemExit("REDIS_URL is required to run the worker")

    redis_conn = Redis.from_url(settings.redis_url)
    logger.info(
        "Worker starting",
        extra={"queue": settings.approval_queue_name},
    )
    worker = Worker([settings.approval_queue_name], connection=redis_conn)
    try:
        worker.work(with_scheduler=False)
    finally:
        logger.info("Worker shutdown")


if __name__ == "__main__":
    main()
