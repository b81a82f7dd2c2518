"""Custom errors with tracking IDs."""

from utils.timestamp import format_timestamp
from utils.ksuid import generate_ksuid


class BaseCourtError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class ConfigError(BaseCourtError):
    """Invalid or unreadable configuration."""

    def __init__(self, message, key=None, path=None, **kwargs):
        context = kwargs.pop("context", {})
        if key:
            context["key"] = key
        if path:
            context["path"] = str(path)
        super().__init__(message, context=context, **kwargs)
