"""
Name: Background Job Tests

Responsibilities:
  - Approval job logs the pending customer with the RQ job id
  - Invalid ids are logged, not raised
  - Job context is cleared afterwards
"""

import logging
from unittest.mock import MagicMock, patch
from uuid import uuid4

import pytest

from marketplace.crosscutting.context import job_id_var
from marketplace.worker.jobs import notify_pending_approval_job


pytestmark = pytest.mark.unit


def test_notify_job_logs_pending_customer():
    user_id = uuid4()
    seen_job_ids = []

    with patch(
        "marketplace.worker.jobs.get_current_job", return_value=MagicMock(id="job-7")
    ), patch("marketplace.worker.jobs.logger") as mock_logger:
        mock_logger.info.side_effect = lambda *a, **k: seen_job_ids.append(
            job_id_var.get()
        )
        notify_pending_approval_job(str(user_id), "c@example.com")

    mock_logger.info.assert_called_once()
    assert mock_logger.info.call_args.kwargs["extra"] == {
        "user_id": str(user_id),
        "email": "c@example.com",
    }
    assert seen_job_ids == ["job-7"]
    assert job_id_var.get() == ""


def test_notify_job_outside_worker_has_no_job_id():
    with patch("marketplace.worker.jobs.get_current_job", return_value=None):
        notify_pending_approval_job(str(uuid4()), "c@example.com")

    assert job_id_var.get() == ""


def test_notify_job_with_invalid_id_logs_error(caplog):
    with patch("marketplace.worker.jobs.get_current_job", return_value=None):
        with caplog.at_level(logging.ERROR, logger="marketplace"):
            notify_pending_approval_job("not-a-uuid", "c@example.com")

    assert any(
        record.getMessage() == "Invalid user_id for approval job"
        for record in caplog.records
    )
