"""
Name: Request/Job Context (ContextVars)

Responsibilities:
  - Store request-scoped data (request_id, job_id)
  - Enable structured logging with correlation ids

Collaborators:
  - logger.py: Reads context for log enrichment
  - worker/jobs.py: Sets job_id while a background job runs

Notes:
  - contextvars are async-safe (isolated per request)
  - Default empty string (never None) for JSON serialization
"""

from contextvars import ContextVar

# R: Request identifier - set by the calling API layer
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# R: RQ job identifier - set by worker jobs
job_id_var: ContextVar[str] = ContextVar("job_id", default="")


def get_context_dict() -> dict:
    """
    R: Get current context as dict for log enrichment.

    Returns:
        Dict with non-empty context values only
    """
    ctx = {}

    if val := request_id_var.get():
        ctx["request_id"] = val
    if val := job_id_var.get():
        ctx["job_id"] = val

    return ctx


def clear_context() -> None:
    """R: Reset all context vars."""
    request_id_var.set("")
    job_id_var.set("")
