"""
Configuration loading utilities
Loads logging settings from config/logging.json with .env overrides
"""

import os
import json
from dotenv import load_dotenv


DEFAULT_LOGGING_CONFIG = {
    "log_to_console": True,
    "timestamp_format": "%Y-%m-%d %H:%M:%S",
    "error_report_file": "error_report.log"
}

# Environment variables that override logging.json keys
ENV_VAR_MAP = {
    'log_to_console': 'FORM_HELPERS_LOG_TO_CONSOLE',
    'timestamp_format': 'FORM_HELPERS_TIMESTAMP_FORMAT',
    'error_report_file': 'FORM_HELPERS_ERROR_REPORT_FILE'
}


def get_project_root():
    """Get absolute path to the project root (two levels above the package)"""
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def get_config_path(filename):
    """Get absolute path to a config file"""
    return os.path.join(get_project_root(), 'config', filename)


def load_logging_config(config_path=None):
    """
    Load logging configuration from config/logging.json

    Args:
        config_path: Optional explicit path to a JSON config file

    Returns:
        dict: Logging configuration with defaults and env overrides applied
    """
    if config_path is None:
        config_path = get_config_path('logging.json')

    config = dict(DEFAULT_LOGGING_CONFIG)

    try:
        if os.path.exists(config_path):
            with open(config_path, 'r', encoding='utf-8') as f:
                # Merge with defaults
                config.update(json.load(f))
    except Exception as e:
        print(f"Error loading logging config: {str(e)}")

    load_dotenv(os.path.join(get_project_root(), '.env'))

    for key in ENV_VAR_MAP:
        config[key] = get_setting_from_env(key, config[key])

    return config


def get_setting_from_env(key, default_value):
    """
    Get a setting from its environment variable or use default

    Args:
        key: Config key (e.g. 'log_to_console')
        default_value: Value from the config file or defaults

    Returns:
        Setting value; booleans are parsed from 'true'/'false'/'1'/'0'
    """
    env_var = ENV_VAR_MAP.get(key)
    if not env_var:
        return default_value

    raw = os.getenv(env_var)
    if raw is None or raw == '':
        return default_value

    if isinstance(default_value, bool):
        return raw.strip().lower() in ('1', 'true', 'yes', 'on')

    return raw
