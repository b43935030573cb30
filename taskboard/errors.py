from __future__ import annotations

from typing import Any, Optional


class TaskboardError(Exception):
    """Base class for errors surfaced to the caller as an HTTP status."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFound(TaskboardError):
    status_code = 404
    code = "not_found"


class Conflict(TaskboardError):
    status_code = 409
    code = "conflict"


class BadRequest(TaskboardError):
    status_code = 400
    code = "bad_request"


class Unauthorized(TaskboardError):
    status_code = 401
    code = "unauthorized"
