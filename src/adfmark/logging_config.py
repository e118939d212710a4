import logging
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from adfmark.config import ApplicationConfiguration, get_configuration
from adfmark.constants import LOGGER_NAME


def setup_logging(configuration: ApplicationConfiguration | None = None) -> logging.Logger:
    """Configures the library logger from the configuration.

    When a log file is configured its records are written as JSON lines. A log file that cannot be opened is reported
    as a warning and logging carries on without it.

    Args:
        configuration: the configuration to apply; the active configuration when not given

    Returns:
        The library logger
    """

    configuration = configuration or get_configuration()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(configuration.log_level)

    if not configuration.log_file:
        return logger

    log_file = Path(configuration.log_file).resolve()

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_file):
            handler.setLevel(configuration.log_level)
            return logger

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file)
    except OSError as e:
        logger.warning(f'Failed to create log file handler: {e}')
    else:
        fh.setLevel(configuration.log_level)
        fh.setFormatter(
            JsonFormatter('%(asctime)s %(levelname)s %(message)s %(lineno)s %(module)s %(pathname)s ')
        )
        logger.addHandler(fh)

    return logger
