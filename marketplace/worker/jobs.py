"""
Name: Background Job Definitions

Responsibilities:
  - Entry points for RQ jobs
"""

from uuid import UUID

from rq import get_current_job

from ..crosscutting.context import clear_context, job_id_var
from ..crosscutting.logger import logger


def notify_pending_approval_job(user_id: str, email: str) -> None:
    """R: RQ job announcing a customer that waits for CSR approval."""
    job = get_current_job()
    job_id_var.set(job.id if job else "")

    try:
        try:
            customer_id = UUID(user_id)
        except ValueError:
            logger.error(
                "Invalid user_id for approval job",
                extra={"user_id": user_id},
            )
            return

        logger.info(
            "New customer registration pending approval",
            extra={"user_id": str(customer_id), "email": email},
        )
    finally:
        clear_context()
