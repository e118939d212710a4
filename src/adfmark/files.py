import os
from pathlib import Path

from adfmark.constants import CONFIG_FILE_ENV_VAR, CONFIG_FILE_FILE_NAME, LOGGER_NAME


def get_config_directory() -> Path:
    """Returns the directory holding the configuration file, following the XDG base directory convention."""

    if xdg_config_home := os.getenv('XDG_CONFIG_HOME'):
        return Path(xdg_config_home) / LOGGER_NAME
    return Path.home() / '.config' / LOGGER_NAME


def get_config_file() -> Path:
    """Returns the path of the configuration file. `ADFMARK_CONFIG_FILE` takes precedence over the default location."""

    if config_file := os.getenv(CONFIG_FILE_ENV_VAR):
        return Path(config_file).resolve()
    return get_config_directory() / CONFIG_FILE_FILE_NAME
