import os
import json
import click
from typing import Dict, Any

from revtree.utils.exceptions import InvalidConfigException


class ConfigManager:
    """
    Manages configuration for revtree, supporting persistent storage and manipulation.
    """
    DEFAULT_CONFIG = {
        # Tree population
        'expand_depth': 1,          # Directory levels expanded before display (None for unlimited)
        'strict': True,             # Fail on malformed listing lines instead of skipping them

        # Display settings
        'icons': True,              # Show file, folder and submodule icons
        'icons_path': None,         # Custom icons file path
        'color': True,              # Enable colored output
        'theme': 'default',         # UI theme name
        'theme_path': None,         # Custom theme file path

        # Export settings
        'output_format': 'text',    # Output format: 'text', 'json', 'markdown' or 'html'
        'output_file': None,        # Output file path for exports
        'log_path': None,           # Log file path
    }

    INT_KEYS = ['expand_depth']
    BOOL_KEYS = ['strict', 'icons', 'color']
    OUTPUT_FORMATS = ['text', 'json', 'markdown', 'html']

    @classmethod
    def _get_config_path(cls) -> str:
        """
        Get the path to the configuration file.
        Supports cross-platform config storage.
        """
        config_dir = os.path.expanduser('~/.config/revtree')
        os.makedirs(config_dir, exist_ok=True)
        return os.path.join(config_dir, 'config.json')

    @classmethod
    def load_config(cls) -> Dict[str, Any]:
        """
        Load configuration from file, merging with defaults.
        """
        config_path = cls._get_config_path()
        try:
            with open(config_path, 'r') as f:
                saved_config = json.load(f)
                return {**cls.DEFAULT_CONFIG, **saved_config}
        except (FileNotFoundError, json.JSONDecodeError):
            return cls.DEFAULT_CONFIG.copy()

    @classmethod
    def save_config(cls, config: Dict[str, Any]):
        """
        Save configuration to file.
        """
        config_path = cls._get_config_path()
        # Remove keys with default values
        clean_config = {
            k: v for k, v in config.items()
            if v != cls.DEFAULT_CONFIG.get(k)
        }

        with open(config_path, 'w') as f:
            json.dump(clean_config, f, indent=4)

    @classmethod
    def reset_config(cls):
        """
        Reset configuration to default values.
        """
        config_path = cls._get_config_path()
        try:
            os.remove(config_path)
        except FileNotFoundError:
            pass

    @classmethod
    def update_config(cls, updates: Dict[str, Any]):
        """
        Update specific configuration values.
        """
        current_config = cls.load_config()
        current_config.update({k: v for k, v in updates.items() if v is not None})
        cls.save_config(current_config)

    @classmethod
    def convert_value(cls, key: str, value: str) -> Any:
        """Convert a command line string to the type stored under ``key``"""
        if key not in cls.DEFAULT_CONFIG:
            raise InvalidConfigException(f"Unknown configuration key: {key}")
        if key in cls.INT_KEYS:
            if value.lower() in ['none', 'unlimited']:
                return None
            try:
                converted = int(value)
            except ValueError:
                raise InvalidConfigException(f"Invalid value for {key}: {value}")
            if converted < 0:
                raise InvalidConfigException(f"{key} must not be negative")
            return converted
        if key in cls.BOOL_KEYS:
            return value.lower() in ['true', '1', 'yes']
        if key == 'output_format' and value not in cls.OUTPUT_FORMATS:
            raise InvalidConfigException(f"Unsupported output format: {value}")
        return value


def config_command(action, key=None, value=None):
    """
    Handle configuration management CLI actions.
    """
    if action == 'view':
        config = ConfigManager.load_config()
        for k, v in config.items():
            click.echo(f"{k}: {v}")

    elif action == 'reset':
        ConfigManager.reset_config()
        click.echo("Configuration reset to default.")

    elif action == 'set':
        if not key or value is None:
            click.echo("Error: Both key and value are required.")
            return

        try:
            value = ConfigManager.convert_value(key, value)
        except InvalidConfigException as e:
            click.echo(f"Error: {e.detail}")
            return

        # update_config drops None values, unlimited depth is stored explicitly
        config = ConfigManager.load_config()
        config[key] = value
        ConfigManager.save_config(config)
        click.echo(f"Set {key} to {value}")
