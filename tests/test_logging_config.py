import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from adfmark.config import ApplicationConfiguration
from adfmark.constants import LOGGER_NAME
from adfmark.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    handlers = list(logger.handlers)

    yield logger

    for handler in logger.handlers:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def _file_handlers(logger):
    return [handler for handler in logger.handlers if isinstance(handler, logging.FileHandler)]


class TestSetupLogging:
    def test_uses_active_configuration(self, mock_configuration):
        mock_configuration.log_level = 'ERROR'

        logger = setup_logging()

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.ERROR
        assert _file_handlers(logger) == []

    def test_writes_json_lines(self, tmp_path):
        log_file = tmp_path / 'logs' / 'adfmark.log'

        logger = setup_logging(ApplicationConfiguration(log_file=str(log_file), log_level='INFO'))
        logger.info('converted document')

        (handler,) = _file_handlers(logger)
        assert isinstance(handler.formatter, JsonFormatter)

        record = json.loads(log_file.read_text().splitlines()[-1])
        assert record['message'] == 'converted document'
        assert record['levelname'] == 'INFO'

    def test_handler_is_not_added_twice(self, tmp_path):
        log_file = str(tmp_path / 'adfmark.log')

        setup_logging(ApplicationConfiguration(log_file=log_file, log_level='INFO'))
        logger = setup_logging(ApplicationConfiguration(log_file=log_file, log_level='DEBUG'))

        (handler,) = _file_handlers(logger)
        assert handler.level == logging.DEBUG

    def test_empty_log_file_disables_file_logging(self):
        logger = setup_logging(ApplicationConfiguration(log_file='', log_level='INFO'))

        assert _file_handlers(logger) == []

    def test_unusable_log_file_is_reported(self, tmp_path, caplog):
        blocker = tmp_path / 'not-a-directory'
        blocker.write_text('')

        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            logger = setup_logging(ApplicationConfiguration(log_file=str(blocker / 'adfmark.log')))

        assert _file_handlers(logger) == []
        assert 'Failed to create log file handler' in caplog.text

    def test_exported_from_package(self):
        import adfmark

        assert adfmark.setup_logging is setup_logging
        assert 'setup_logging' in adfmark.__all__
