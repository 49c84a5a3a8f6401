# -*- coding: utf-8 -*-

import logging
import os
import sys

from promise_demo.common import log
import promise_demo.common.path


class TestLogContext(object):

    def test_context_writes_log_file(self, monkeypatch, tmpdir):
        monkeypatch.setattr(promise_demo.common.path, 'get_log_dir',
                            lambda: str(tmpdir))
        root_logger = logging.getLogger()
        handlers = list(root_logger.handlers)

        with log.Context('test.log'):
            assert sys.excepthook is log._excepthook
            logging.getLogger('promise_demo.test').debug('Hello log file')

        assert root_logger.handlers == handlers
        assert sys.excepthook is not log._excepthook
        with open(os.path.join(str(tmpdir), 'test.log')) as log_file:
            assert 'Hello log file' in log_file.read()

    def test_context_without_log_dir(self, monkeypatch, tmpdir):
        """If the file can't be created, only the console is used."""
        missing_dir = os.path.join(str(tmpdir), 'missing', 'dir')
        monkeypatch.setattr(promise_demo.common.path, 'get_log_dir',
                            lambda: missing_dir)

        with log.Context('test.log') as context:
            assert len(context._handlers) == 1


class TestLogLevels(object):

    def teardown_method(self, method):
        logging.getLogger('promise_demo').setLevel(logging.NOTSET)
        logging.getLogger('promise_demo.promise').setLevel(logging.NOTSET)

    def test_debug_mode(self):
        log.set_debug_mode(True)
        assert logging.getLogger('promise_demo').level == logging.DEBUG
        log.set_debug_mode(False)
        assert logging.getLogger('promise_demo').level == logging.INFO

    def test_set_logs_level(self):
        log.set_logs_level({'promise_demo': 'warning',
                            'promise_demo.promise': '10'})
        assert logging.getLogger('promise_demo').level == logging.WARNING
        assert logging.getLogger('promise_demo.promise').level == \
            logging.DEBUG

    def test_set_invalid_logs_level(self, caplog):
        with caplog.at_level(logging.WARNING):
            log.set_logs_level({'promise_demo': 'not a level'})
        assert 'Invalid log level' in caplog.text
