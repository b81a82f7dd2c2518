import json
from pathlib import Path

from core.errors import ConfigError
from court.arena import COURT_HEIGHT, COURT_WIDTH, check_size
from internal.logging import LogLevel

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class ArenaConfig:
    __slots__ = ("width", "height")

    def __init__(self, width=COURT_WIDTH, height=COURT_HEIGHT):
        check_size(width, height)
        self.width = width
        self.height = height


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        try:
            LogLevel.parse(level)
        except KeyError as exc:
            raise ConfigError(f"unknown log level {level!r}", key="logging", cause=exc) from exc
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("arena", "server", "logging")

    def __init__(self, arena=None, server=None, logging=None):
        self.arena = arena or ArenaConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        if not isinstance(d, dict):
            raise ConfigError("config must be a JSON object", context={"type": type(d).__name__})
        return cls(
            _section(ArenaConfig, d, "arena"),
            _section(ServerConfig, d, "server"),
            _section(LoggingConfig, d, "logging"),
        )


def _section(section_cls, d, key):
    try:
        return section_cls(**d.get(key, {}))
    except TypeError as exc:
        raise ConfigError(f"invalid {key} section", key=key, cause=exc) from exc


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        try:
            data = json.load(file)
        except json.JSONDecodeError as exc:
            raise ConfigError("malformed config file", path=config_path, cause=exc) from exc
    if not isinstance(data, dict):
        raise ConfigError("config must be a JSON object", path=config_path)
    return Config.from_dict(data)
