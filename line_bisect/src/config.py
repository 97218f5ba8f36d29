"""
Configuration management for Line Bisect.

Handles loading, saving, and validating configuration settings.
"""

import codecs
import os
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field, asdict

from dotenv import load_dotenv

from .constants import DECODE_ERROR_POLICIES, DEFAULT_DECODE_ERRORS, DEFAULT_ENCODING, LOG_LEVELS
from ..utils.logger_setup import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "LINE_BISECT"

# Load environment variables from .env file in tool's directory
TOOL_ROOT = Path(__file__).parent.parent.parent
ENV_FILE = TOOL_ROOT / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE)


@dataclass
class SearchConfig:
    """How probed lines are decoded."""
    encoding: str = DEFAULT_ENCODING
    errors: str = DEFAULT_DECODE_ERRORS

    def __post_init__(self):
        """Environment variables override file values."""
        self.encoding = os.getenv(f"{ENV_PREFIX}_ENCODING", self.encoding)
        self.errors = os.getenv(f"{ENV_PREFIX}_DECODE_ERRORS", self.errors)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    file: Optional[str] = None
    console: bool = False

    def __post_init__(self):
        """Environment variables override file values."""
        self.level = os.getenv(f"{ENV_PREFIX}_LOG_LEVEL", self.level)

        log_file_env = os.getenv(f"{ENV_PREFIX}_LOG_FILE")
        if log_file_env:  # Only set if env var is not empty
            self.file = log_file_env


@dataclass
class Config:
    """Main configuration class."""
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create Config from dictionary."""
        return cls(
            search=SearchConfig(**(data.get('search') or {})),
            logging=LoggingConfig(**(data.get('logging') or {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            'search': asdict(self.search),
            'logging': asdict(self.logging),
        }


class ConfigManager:
    """Manages configuration loading, saving, and resolution."""

    DEFAULT_CONFIG_DIR = ".line-bisect"
    DEFAULT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_root: Optional[str] = None):
        """
        Initialize ConfigManager.

        Args:
            project_root: Directory holding .line-bisect/. If None, uses current directory.
        """
        self.project_root = Path(project_root or os.getcwd())
        self.config_dir = self.project_root / self.DEFAULT_CONFIG_DIR
        self.config_file = self.config_dir / self.DEFAULT_CONFIG_FILE

    def load(self) -> Config:
        """
        Load configuration from file or create default.

        Returns:
            Loaded or default configuration
        """
        if self.config_file.exists():
            return self._load_from_file()
        return Config()

    def _load_from_file(self) -> Config:
        """Load configuration from YAML file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            data = self._resolve_env_vars(data)
            return Config.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError, AttributeError) as e:
            logger.warning(f"Error loading config file: {e}")
            logger.info("Using default configuration.")
            return Config()

    def save(self, config: Config):
        """
        Save configuration to file.

        Args:
            config: Configuration to save
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    def init_config(self, overwrite: bool = False) -> bool:
        """
        Initialize configuration file with defaults.

        Args:
            overwrite: Whether to overwrite existing config

        Returns:
            True if config was created/updated, False otherwise
        """
        if self.config_file.exists() and not overwrite:
            logger.info(f"Configuration already exists at: {self.config_file}")
            return False

        self.save(Config())

        logger.info(f"Configuration initialized at: {self.config_file}")
        return True

    def _resolve_env_vars(self, data: Any) -> Any:
        """
        Recursively resolve environment variables in configuration.

        Supports ${VAR_NAME} syntax.
        """
        if isinstance(data, dict):
            return {k: self._resolve_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):
            if data.startswith('${') and data.endswith('}'):
                var_name = data[2:-1]
                return os.environ.get(var_name, data)
        return data

    def validate(self, config: Config) -> List[str]:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        try:
            codecs.lookup(config.search.encoding)
        except LookupError:
            errors.append(f"Unknown encoding: {config.search.encoding}")

        if config.search.errors not in DECODE_ERROR_POLICIES:
            errors.append(f"Invalid decode error policy: {config.search.errors}")

        if str(config.logging.level).upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {config.logging.level}")

        return errors
