#!/usr/bin/env python3
"""
Settings loader for Inkwell.
Supports configuration from inkwell.yml, inkwell.yaml, or inkwell.json files.
"""

import os
import json
import logging
import yaml
from typing import Dict, Any, Optional


class InkwellSettings:
    """Load and manage Inkwell configuration settings."""

    # Default configuration
    DEFAULT_SETTINGS = {
        'content': 'content',
        'templates': 'templates',
        'output': 'output',
        'log_file': None,
        'quiet': False,
    }

    # Config file names to look for (in order of preference)
    CONFIG_FILES = ['inkwell.yml', 'inkwell.yaml', 'inkwell.json']

    def __init__(self, config_dir: str = None):
        """
        Initialize settings loader.

        Args:
            config_dir: Directory to look for config files. Defaults to current directory.
        """
        self.config_dir = config_dir or os.getcwd()
        self.settings = self.DEFAULT_SETTINGS.copy()
        self.config_file_path = None
        self.logger = logging.getLogger('Inkwell.settings')

    def load_settings(self) -> Dict[str, Any]:
        """
        Load settings from configuration file if it exists.

        Returns:
            Dictionary of configuration settings

        Raises:
            ValueError: The configuration file is malformed
        """
        config_file = self._find_config_file()

        if config_file:
            self.config_file_path = config_file
            loaded_settings = self._load_config_file(config_file)
            if loaded_settings:
                unknown = set(loaded_settings) - set(self.DEFAULT_SETTINGS)
                if unknown:
                    self.logger.warning(f"Ignoring unknown settings: {', '.join(sorted(unknown))}")
                self.settings.update({k: v for k, v in loaded_settings.items() if k not in unknown})
            self.logger.info(f"Loaded configuration from: {os.path.relpath(config_file)}")

        return self.settings.copy()

    def _find_config_file(self) -> Optional[str]:
        """
        Find the first available configuration file.

        Returns:
            Path to config file or None if not found
        """
        for filename in self.CONFIG_FILES:
            config_path = os.path.join(self.config_dir, filename)
            if os.path.exists(config_path):
                return config_path
        return None

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Dictionary of configuration settings
        """
        file_ext = os.path.splitext(config_path)[1].lower()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if file_ext in ['.yml', '.yaml']:
                    loaded = yaml.safe_load(f) or {}
                elif file_ext == '.json':
                    loaded = json.load(f) or {}
                else:
                    raise ValueError(f"Unsupported config file format: {file_ext}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")
        except PermissionError:
            raise PermissionError(f"Permission denied reading configuration file: {config_path}")

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file {config_path} must contain a mapping")
        return loaded

    def create_sample_config(self, file_format: str = 'yml') -> str:
        """
        Create a sample configuration file.

        Args:
            file_format: Format for config file ('yml', 'yaml', or 'json')

        Returns:
            Path to created sample config file
        """
        if file_format not in ['yml', 'yaml', 'json']:
            raise ValueError(f"Unsupported config file format: {file_format}")

        filename = f'inkwell.{file_format}'
        config_path = os.path.join(self.config_dir, filename)

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                if file_format in ['yml', 'yaml']:
                    f.write("# Inkwell Configuration File\n\n")
                    f.write("# Markdown posts with YAML front matter\n")
                    f.write("content: content\n")
                    f.write("# layout.tmpl, index.tmpl, post.tmpl, tag.tmpl and static assets\n")
                    f.write("templates: templates\n")
                    f.write("# Removed and rebuilt on every run\n")
                    f.write("output: output\n\n")
                    f.write("# Logging\n")
                    f.write("log_file: null\n")
                    f.write("quiet: false\n")
                elif file_format == 'json':
                    sample_config = dict(self.DEFAULT_SETTINGS)
                    json.dump(sample_config, f, indent=2)
        except PermissionError:
            raise PermissionError(f"Permission denied creating configuration file: {config_path}")

        return config_path

    def merge_with_args(self, args_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge configuration settings with command-line arguments.
        Command-line arguments take precedence over config file settings.

        Args:
            args_dict: Dictionary of command-line arguments

        Returns:
            Merged configuration dictionary
        """
        merged = self.settings.copy()

        # Override with non-None command line arguments
        for key, value in args_dict.items():
            if value is not None and key in self.DEFAULT_SETTINGS:
                if key in ('content', 'templates', 'output', 'log_file'):
                    value = os.path.expanduser(value)
                merged[key] = value

        return merged
