#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
config.py - Configuration management for mmd2en

This module centralizes configuration settings loaded from multiple sources:
1. Default values
2. Configuration file
3. Environment variables (a .env file in the working directory is honoured)
"""

import os
import sys
import copy
import yaml
from typing import Dict, Any, Optional

from dotenv import load_dotenv


class Config:
    """
    Configuration manager for mmd2en.

    This class provides a unified interface for all settings,
    with prioritized loading from multiple sources.
    """

    # Default configuration values
    DEFAULTS = {
        # General settings
        "verbose": False,

        # External tools
        "sed_command": "sed",
        "mdls_command": "mdls",

        # The Spotlight index only exists on macOS
        "spotlight_enabled": sys.platform == "darwin",

        # Target key -> filesystem attribute(s)
        "file_properties": {
            "created": "birthtime",
            "modified": "mtime",
        },

        # Target key -> Spotlight attribute(s)
        "spotlight_properties": {
            "title": "kMDItemTitle",
            "source": "kMDItemWhereFroms",
            "tags": ["kMDItemUserTags", "kMDItemKeywords"],
        },
    }

    # Map config keys to environment variable names
    ENV_MAPPING = {
        "verbose": "MMD2EN_VERBOSE",
        "sed_command": "MMD2EN_SED",
        "mdls_command": "MMD2EN_MDLS",
        "spotlight_enabled": "MMD2EN_SPOTLIGHT",
    }

    def __init__(self, config_file: Optional[str] = None, use_env: bool = True):
        """
        Initialize the configuration manager.

        Args:
            config_file: Path to a configuration file to load from
            use_env: Whether to overlay environment variables
        """
        # Start with default configuration
        self._config = copy.deepcopy(self.DEFAULTS)

        # Load from configuration file if specified
        if config_file:
            self.load_from_file(config_file)
        else:
            # Try to load from default locations
            default_locations = [
                os.path.join(os.getcwd(), "mmd2en.yaml"),
                os.path.expanduser("~/.config/mmd2en/config.yaml"),
            ]
            for path in default_locations:
                if os.path.exists(path):
                    self.load_from_file(path)
                    break

        if use_env:
            self.load_from_env()

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a YAML file.

        Args:
            config_file: Path to the configuration file
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Error loading configuration from {config_file}: {str(e)}", file=sys.stderr)
            return

        if isinstance(config_data, dict):
            # Update configuration with file values
            for key, value in config_data.items():
                if key in self._config:
                    self._config[key] = value
            if self._config["verbose"]:
                print(f"[VERBOSE] Loaded configuration from {config_file}", file=sys.stderr)

    def load_from_env(self) -> None:
        """Load configuration from environment variables."""
        load_dotenv()

        for config_key, env_var in self.ENV_MAPPING.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                # Convert to appropriate type
                if isinstance(self.DEFAULTS[config_key], bool):
                    value = value.lower() in ('true', 'yes', '1')

                self._config[config_key] = value

    def __getitem__(self, key: str) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key

        Returns:
            The configured value for the key
        """
        return self._config.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._config[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value with a default fallback.

        Args:
            key: Configuration key
            default: Default value if key is not found

        Returns:
            The configured value or default
        """
        return self._config.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """
        Get a dictionary representation of the configuration.

        Returns:
            Dictionary containing all configuration values
        """
        return self._config.copy()


# Global configuration instance
config = Config()
