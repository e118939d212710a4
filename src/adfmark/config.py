from contextvars import ContextVar
import logging

from pydantic import ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from adfmark.exceptions import ConfigurationException
from adfmark.files import get_config_file


class ApplicationConfiguration(BaseSettings):
    """The configuration of the adfmark library.

    The converter itself takes no options; the configuration only controls how the library logs.
    """

    log_file: str | None = None
    """The filename of the log file to use. When this is not set (default) or is an empty string logging to a file is
    disabled."""
    log_level: str = 'WARNING'
    """The log level to use. Use Python's `logging` names: `CRITICAL`, `FATAL`, `ERROR`, `WARN`, `WARNING`, `INFO`,
    `DEBUG` and `NOTSET`."""

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Ensure the log level is one of the names known to the logging module."""
        if isinstance(v, str):
            v = v.strip().upper()
            if v in logging.getLevelNamesMapping():
                return v
        raise ValueError(f'Unknown log level: {v!r}')

    model_config = SettingsConfigDict(
        extra='ignore',
        validate_assignment=True,
        env_prefix='ADFMARK_',
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings, dotenv_settings)

        # values from the environment take precedence over the config file
        if (conf_file := get_config_file()).exists():
            sources += (YamlConfigSettingsSource(settings_cls, yaml_file=conf_file),)
        return sources


CONFIGURATION: ContextVar[ApplicationConfiguration] = ContextVar('configuration')


def get_configuration() -> ApplicationConfiguration:
    """Returns the active configuration, loading it from the environment and the config file on first use.

    Raises:
        ConfigurationException: if the environment or the configuration file hold invalid values
    """

    try:
        return CONFIGURATION.get()
    except LookupError:
        pass

    try:
        configuration = ApplicationConfiguration()
    except ValidationError as e:
        raise ConfigurationException(
            'Configuration validation error. Make sure your config file is correct.',
            extra={'errors': [f'{error.get("loc")}: {error.get("msg")}' for error in e.errors()]},
        ) from e

    CONFIGURATION.set(configuration)
    return configuration
