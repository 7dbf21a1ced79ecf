"""
Configuration loader for the Okta group assignment job.
Reads envs/.env files for secrets and a JSON file for runtime settings.
"""

import json
import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from ..errors import ConfigurationError
from ..models import ExecutionContext


class ConfigLoader:
    """Loads and validates configuration from .env and JSON files."""

    def __init__(self, config_file: str = "configs/config.json", environment: str = None,
                 base_path: Optional[Path] = None):
        """
        Initialize config loader.

        Args:
            config_file: Path to configuration file, relative to base_path
            environment: Environment ("eu", "us", "beta", "local")
            base_path: Project root holding envs/ and configs/
        """
        self.config_file = config_file
        self.config = {}
        self.environment = environment or "us"
        self.base_path = Path(base_path) if base_path else Path(__file__).parent.parent.parent
        self.logger = logging.getLogger("okta_group_assign.config")
        self._load_environment_config()
        self._load_config()
        self._validate_config()

    def _load_environment_config(self):
        """Load envs/.env, then the file for the selected environment."""
        main_env_path = self.base_path / 'envs' / '.env'
        if main_env_path.exists():
            load_dotenv(main_env_path, override=False)
            self.logger.info(f"Loaded main env config from {main_env_path}")

            env_from_file = os.getenv('OKTA_ENVIRONMENT')
            if env_from_file:
                self.environment = env_from_file

        env_file_path = self.base_path / 'envs' / f'.env.{self.environment}'
        if env_file_path.exists():
            load_dotenv(env_file_path, override=True)
            self.logger.info(f"Loaded {self.environment} specific config from {env_file_path}")
        else:
            self.logger.debug(f"Environment config file not found: {env_file_path}")

    def _load_config(self):
        """Load configuration from JSON file."""
        config_path = self.base_path / self.config_file
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                self.config = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file {config_path} not found") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {config_path}: {e}") from e

    def _validate_config(self):
        """Validate required configuration sections."""
        if not isinstance(self.config, dict):
            raise ConfigurationError(f"Configuration file {self.config_file} must contain a JSON object")
        for section in ("environment",):
            if section not in self.config:
                raise ConfigurationError(f"Missing required configuration section: {section}")

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path (e.g., "environment.log_level")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self.config
        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def get_okta_domain(self) -> Optional[str]:
        """OKTA_DOMAIN from the environment, else okta.domain from the JSON file."""
        return os.getenv("OKTA_DOMAIN") or self.get("okta.domain")

    def is_debug_mode(self) -> bool:
        return self.get("environment.debug", False)

    def build_context(self) -> ExecutionContext:
        """Build the execution context a job framework would hand to the hooks."""
        secrets: Dict[str, str] = {}
        api_token = os.getenv("OKTA_API_TOKEN")
        if api_token:
            secrets["OKTA_API_TOKEN"] = api_token

        env = {"ENVIRONMENT": self.environment}
        okta_domain = self.get_okta_domain()
        if okta_domain:
            env["OKTA_DOMAIN"] = okta_domain

        return ExecutionContext(secrets=secrets, env=env, outputs={})

    def setup_logging(self):
        """Setup logging based on configuration."""
        log_level = self.get("environment.log_level", "INFO")
        debug = self.is_debug_mode()

        level = getattr(logging, str(log_level).upper(), logging.INFO)
        format_str = "%(asctime)s - %(levelname)s - %(message)s" if debug else "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            handlers=[logging.StreamHandler()]
        )
        logging.getLogger("okta_group_assign").setLevel(level)
