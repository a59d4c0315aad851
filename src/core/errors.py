from __future__ import annotations
from typing import Optional


class ServiceError(Exception):
    """Base error; ``status_code`` is the HTTP status the endpoints answer with."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class UpstreamError(ServiceError):
    """A remote dependency answered with a non-2xx status or an unusable body."""

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class InternalError(ServiceError):
    pass
