"""Approval notification adapters."""

from .logging_notifier import LoggingApprovalNotifier
from .rq_notifier import RQApprovalNotifier

__all__ = ["LoggingApprovalNotifier", "RQApprovalNotifier"]
