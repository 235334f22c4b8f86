"""
Configuration Loader - Load and validate configuration from YAML.

Only presentation and logging are configurable. Board size, speeds and
controls are fixed by the game.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict

logger = logging.getLogger(__name__)


@dataclass
class DisplayConfig:
    """Overlay window settings."""
    cell_size: int = 25
    padding: int = 40
    render_fps: int = 60
    title: str = "Snake Game"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if data is None:
        return cls()

    if not isinstance(data, dict):
        raise ValueError(f"{cls.__name__} section must be a mapping, got {data!r}")

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Unknown keys are ignored
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_log_level(level: Any) -> str:
    """
    Normalise a logging level name.

    Returns:
        The upper-case level name

    Raises:
        ValueError: If level is not a standard logging level
    """
    name = str(level).upper()
    if logging.getLevelName(name) not in range(0, 51):
        raise ValueError(f"logging.level is not a logging level: {level!r}")
    return name


def _validate(config: Config) -> Config:
    display = config.display
    for name in ("cell_size", "render_fps"):
        value = getattr(display, name)
        if not _is_int(value) or value <= 0:
            raise ValueError(f"display.{name} must be a positive integer, got {value!r}")
    if not _is_int(display.padding) or display.padding < 0:
        raise ValueError(f"display.padding must be a non-negative integer, got {display.padding!r}")
    validate_log_level(config.logging.level)
    return config


def _find_config_file() -> Optional[Path]:
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
    ]
    for path in possible_paths:
        if path.is_file():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml in the
            working directory, then the project root)

    Returns:
        Config object with all settings

    Raises:
        ValueError: If a setting has an invalid value
    """
    path = Path(config_path) if config_path is not None else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if not data:
        return Config()

    config = Config()

    if 'display' in data:
        config.display = _dict_to_dataclass(data['display'], DisplayConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    logger.debug("Loaded config from %s", path)
    return _validate(config)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
