from utils.ksuid import generate_ksuid
from utils.timestamp import now_micros, format_timestamp
from core.errors import BaseCourtError, ConfigError

__all__ = [
    "generate_ksuid",
    "now_micros",
    "format_timestamp",
    "BaseCourtError",
    "ConfigError",
]
