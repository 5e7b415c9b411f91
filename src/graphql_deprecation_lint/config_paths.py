"""Configuration path handling for the rule options file.

Resolution follows the XDG Base Directory Specification for user-specific
configuration files.
"""

import os
from pathlib import Path
from typing import Optional

import platformdirs

from .logging import LogEvent, log_warning

# Application name used for directory paths
APP_NAME = "graphql-deprecation-lint"

# Environment variable names
ENV_CONFIG_PATH = "DEPRECATION_DATE_CONFIG_PATH"

# Default filenames
RULE_OPTIONS_FILENAME = "require-deprecation-date.yml"


def get_user_config_dir() -> Path:
    """Get the path to the user's config directory for this application."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_rule_options_path() -> Optional[str]:
    """Get the path to the rule options file, respecting XDG specification.

    Returns:
        Path to the options file, or None when no file is configured
    """
    # 1. Check environment variable
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path and Path(env_path).is_file():
        return env_path
    if env_path:
        log_warning(
            LogEvent.CONFIGURATION,
            "Ignoring options path from environment, file does not exist",
            variable=ENV_CONFIG_PATH,
            path=env_path,
        )

    # 2. Check user config directory
    user_path = get_user_config_dir() / RULE_OPTIONS_FILENAME
    if user_path.is_file():
        return str(user_path)

    # 3. No file, built-in defaults apply
    return None
