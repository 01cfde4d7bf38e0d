"""shescape options, configuration and logging."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, TextIO

import structlog

try:
    import tomllib
except ImportError:
    import tomli as tomllib

USER_CONFIG = Path.home() / ".shescape" / "config.toml"
ENV_CONFIG = "SHESCAPE_CONFIG"


class ConfigError(ValueError):
    """A config file could not be used."""


@dataclass(frozen=True)
class Options:
    """Options for a single escape or quote call."""

    interpolation: bool = False
    shell: bool | str | None = None
    """A shell name or path. None, False and True mean the platform default."""


@dataclass
class Config:
    """Defaults for the command line, loaded from TOML config files.

    None means "not set" so that later files only override what they set.
    """

    shell: str | None = None
    interpolation: bool | None = None
    log: Path | None = None  # None = no logging
    verbose: bool | None = None


# Expected TOML type per key
_CONFIG_TYPES: dict[str, type] = {
    "shell": str,
    "interpolation": bool,
    "log": str,
    "verbose": bool,
}


# === Config Loading ===


def parse_config(text: str, source: str = "<config>") -> Config:
    """Parse the contents of a TOML config file."""
    try:
        data: dict[str, Any] = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{source}: {e}") from e

    for key, value in data.items():
        expected = _CONFIG_TYPES.get(key)
        if expected is None:
            raise ConfigError(f"{source}: unknown setting {key!r}")
        if not isinstance(value, expected):
            raise ConfigError(
                f"{source}: {key!r} must be a {expected.__name__}, "
                f"got {type(value).__name__}"
            )

    log = data.get("log")
    return Config(
        shell=data.get("shell"),
        interpolation=data.get("interpolation"),
        log=Path(log).expanduser() if log is not None else None,
        verbose=data.get("verbose"),
    )


def _merge_configs(base: Config, overlay: Config) -> Config:
    """Merge overlay config into base. Settings in overlay win if set."""
    changes = {
        f.name: getattr(overlay, f.name)
        for f in fields(overlay)
        if getattr(overlay, f.name) is not None
    }
    return replace(base, **changes)


def load_config(env: Mapping[str, str]) -> Config:
    """Load config from ~/.shescape/config.toml and $SHESCAPE_CONFIG.

    The file named by $SHESCAPE_CONFIG must exist, the user config is
    optional.
    """
    config = Config()

    # 1. User config (lowest priority)
    if USER_CONFIG.is_file():
        user_config = parse_config(USER_CONFIG.read_text(), str(USER_CONFIG))
        config = _merge_configs(config, user_config)

    # 2. Environment config
    env_path = env.get(ENV_CONFIG)
    if env_path:
        path = Path(env_path).expanduser()
        try:
            text = path.read_text()
        except OSError as e:
            raise ConfigError(f"{path}: {e.strerror or e}") from e
        config = _merge_configs(config, parse_config(text, str(path)))

    return config


# === Logging ===

_logger: structlog.BoundLogger | None = None
_log_file: TextIO | None = None


def configure_logging(log: Path | None, verbose: bool = False) -> None:
    """Configure logging to a JSON lines file. Call once at startup.

    With no log file every log call is a no-op, the library never writes to
    stdout on its own.
    """
    global _logger, _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None
    if log is None:
        _logger = None
        return

    log.parent.mkdir(parents=True, exist_ok=True)
    _log_file = log.open("a", encoding="utf-8")
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        logger_factory=structlog.WriteLoggerFactory(file=_log_file),
        cache_logger_on_first_use=False,
    )
    _logger = structlog.get_logger()


def log_event(level: str, event: str, **kwargs: Any) -> None:
    """Log an event. No-op if logging not configured."""
    if _logger is None:
        return
    getattr(_logger, level)(event, **kwargs)
