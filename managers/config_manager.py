"""
AuroraSync Server - Configuration Manager

Handles loading and saving server configuration from/to config.json.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any, Union

# Configure logging
logger = logging.getLogger(__name__)


# Environment variable that overrides the config file location
CONFIG_PATH_ENV = "AURORASYNC_CONFIG"

# Default configuration values
DEFAULT_CONFIG = {
    "host": "0.0.0.0",
    "port": 5050,
    "backup_root": "Backups/Received",
    "metadata_path": "Backups/metadata.json",
    "log_level": "INFO",
    "log_dir": "logs"
}


class ConfigManager:
    """
    Manages server configuration.

    Responsibilities:
    - Load/save config.json (current directory unless overridden)
    - Fill in defaults for missing keys
    - Provide configuration values to other modules
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Path to config.json; falls back to $AURORASYNC_CONFIG,
                         then to config.json in the current directory
        """
        if config_file is None:
            config_file = os.environ.get(CONFIG_PATH_ENV) or Path.cwd() / "config.json"

        self.config_file = Path(config_file)
        self.config: Dict[str, Any] = {}

    def load_config(self) -> Dict[str, Any]:
        """
        Load configuration from config.json.
        Creates default config if file doesn't exist.

        Returns:
            Configuration dictionary
        """
        if self.config_file.exists():
            logger.debug(f"Loading configuration from {self.config_file}")
            with open(self.config_file, 'r', encoding='utf-8') as f:
                self.config = json.load(f)
            # Merge with defaults for any missing keys
            for key, value in DEFAULT_CONFIG.items():
                if key not in self.config:
                    self.config[key] = value
            logger.info("Configuration loaded successfully")
        else:
            logger.info(f"Configuration file not found, creating default at {self.config_file}")
            self.config = DEFAULT_CONFIG.copy()
            self.save_config()

        return self.config

    def save_config(self):
        """Save current configuration to config.json."""
        logger.debug(f"Saving configuration to {self.config_file}")
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=2)
        logger.debug("Configuration saved successfully")

    def get(self, key: str, default=None) -> Any:
        """
        Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self.config.get(key, default)
