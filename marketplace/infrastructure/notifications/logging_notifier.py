"""
Name: Logging Approval Notifier

Responsibilities:
  - Log pending customer registrations (local development, no Redis)
"""

from ...crosscutting.logger import logger
from ...domain.entities import User


class LoggingApprovalNotifier:
    """R: ApprovalNotifier that only writes a log line."""

    def notify(self, user: User) -> None:
        logger.info(
            "New customer registration pending approval",
            extra={"user_id": str(user.id), "email": user.email},
        )
