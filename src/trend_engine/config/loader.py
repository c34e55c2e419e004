"""
Configuration loader with YAML + environment variable support.

Loads and validates configuration files from the config/ directory.
Supports:
- Loading from YAML files
- ${VAR} / ${VAR:default} placeholders
- Environment variable overrides
- Pydantic validation
- Caching
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv
import logging

from .settings import AppConfig


logger = logging.getLogger(__name__)

# Repository root (src/trend_engine/config/loader.py -> repo)
PROJECT_ROOT = Path(__file__).resolve().parents[3]

load_dotenv(PROJECT_ROOT / ".env")

# Environment variable -> (section, key, converter)
ENV_OVERRIDES = {
    "LOG_LEVEL": ("system", "log_level", str),
    "LOG_FILE": ("system", "log_file", str),
    "JSON_LOGS": ("system", "json_logs", lambda v: v.strip().lower() in ("1", "true", "yes")),
    "TREND_ALPHA_FAST": ("engine", "alpha_fast", float),
    "TREND_ALPHA_SLOW": ("engine", "alpha_slow", float),
    "TREND_IMBALANCE_THRESHOLD": ("engine", "imbalance_threshold", float),
    "TREND_STARTING_CAPITAL": ("engine", "starting_capital", float),
    "TREND_TICKS": ("feeds", "ticks", int),
}


# ============================================================================
# ConfigLoader - Main Configuration Loader
# ============================================================================

class ConfigLoader:
    """
    Configuration loader with YAML + environment variable support.

    Features:
    - Loads configuration from YAML files
    - Overrides with environment variables
    - Validates using Pydantic models
    - Caches loaded configurations
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_dir: Configuration directory (defaults to $TREND_CONFIG_DIR
                        or PROJECT_ROOT/config)
        """
        env_dir = os.getenv("TREND_CONFIG_DIR")
        self.config_dir = Path(config_dir or env_dir or (PROJECT_ROOT / "config"))
        self._cache: Dict[str, AppConfig] = {}
        logger.debug(f"ConfigLoader initialized with config_dir: {self.config_dir}")

    def load_yaml(self, config_name: str) -> Dict[str, Any]:
        """
        Load a YAML configuration file.

        Args:
            config_name: Name of the config file (without .yaml extension)

        Returns:
            Dictionary containing configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        config_path = self.config_dir / f"{config_name}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        logger.debug(f"Loading YAML config from: {config_path}")

        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}

        return self._replace_env_vars(config)

    def _replace_env_vars(self, config: Any) -> Any:
        """
        Recursively replace environment variable placeholders in config.

        Placeholders format: ${ENV_VAR_NAME} or ${ENV_VAR_NAME:default_value}
        """
        if isinstance(config, dict):
            return {k: self._replace_env_vars(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._replace_env_vars(item) for item in config]
        elif isinstance(config, str):
            if config.startswith("${") and config.endswith("}"):
                env_expr = config[2:-1]

                if ":" in env_expr:
                    var_name, default_value = env_expr.split(":", 1)
                    return os.getenv(var_name.strip(), default_value.strip())
                else:
                    var_name = env_expr.strip()
                    value = os.getenv(var_name)
                    if value is None:
                        logger.warning(f"Environment variable {var_name} not set, using empty string")
                        return ""
                    return value

        return config

    def load_app_config(self, use_cache: bool = True) -> AppConfig:
        """
        Load complete application configuration.

        Args:
            use_cache: Use cached config if available

        Returns:
            Validated AppConfig instance

        Raises:
            pydantic.ValidationError: If the merged configuration is invalid
        """
        cache_key = "app_config"

        if use_cache and cache_key in self._cache:
            logger.debug("Returning cached app config")
            return self._cache[cache_key]

        config_data: Dict[str, Any] = {}
        try:
            config_data.update(self.load_yaml("config"))
        except FileNotFoundError:
            logger.warning(f"config.yaml not found in {self.config_dir}, using defaults")

        config_data = self._apply_env_overrides(config_data)

        try:
            app_config = AppConfig(**config_data)
            logger.debug("Application configuration loaded and validated successfully")
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

        if use_cache:
            self._cache[cache_key] = app_config

        return app_config

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Example: TREND_ALPHA_FAST=0.5 sets engine.alpha_fast
        """
        for env_name, (section, key, convert) in ENV_OVERRIDES.items():
            if env_val := os.getenv(env_name):
                try:
                    value = convert(env_val)
                except ValueError as e:
                    raise ValueError(f"Invalid value for {env_name}: {env_val!r}") from e
                config.setdefault(section, {})
                config[section][key] = value

        return config

    def reload(self) -> AppConfig:
        """Reload configuration from disk, bypassing the cache."""
        logger.info("Reloading configuration from disk")
        self._cache.clear()
        return self.load_app_config(use_cache=False)

    def clear_cache(self):
        """Clear the configuration cache."""
        self._cache.clear()


# ============================================================================
# Global ConfigLoader Instance
# ============================================================================

_global_loader: Optional[ConfigLoader] = None


def get_config_loader() -> ConfigLoader:
    """
    Get or create global ConfigLoader instance.

    Returns:
        Global ConfigLoader instance
    """
    global _global_loader
    if _global_loader is None:
        _global_loader = ConfigLoader()
    return _global_loader


def get_app_config(use_cache: bool = True) -> AppConfig:
    """
    Get complete application configuration.

    Args:
        use_cache: Use cached config if available

    Returns:
        Validated AppConfig instance
    """
    loader = get_config_loader()
    return loader.load_app_config(use_cache=use_cache)
