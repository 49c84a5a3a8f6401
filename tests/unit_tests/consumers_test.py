# -*- coding: utf-8 -*-

from datetime import datetime

from promise_demo.consumers import callback_consumer, sequential_consumer
from promise_demo.operation import start
from promise_demo.outcome import OutcomeGenerator
from promise_demo.promise import Promise


def _generator(ms):
    return OutcomeGenerator(lambda: datetime(2026, 10, 18, 8, 30, 0,
                                             ms * 1000))


class TestCallbackConsumer(object):

    def test_fulfilled_operation(self, loop):
        lines = []
        op = start(0.001, _generator(7), loop=loop)

        chain = callback_consumer(op, lines.append)
        assert lines == []

        loop.run_until_complete(chain)
        assert len(lines) == 2
        assert lines[0] == '8:30:0.7 : success - (promise call)'
        assert lines[1].endswith(' :     Finally! - (promise call)')

    def test_failed_operation(self, loop):
        lines = []
        op = start(0.001, _generator(9), loop=loop)

        loop.run_until_complete(callback_consumer(op, lines.append))
        assert lines[0] == '8:30:0.9 : failure - (promise call)'
        assert 'Finally!' in lines[1]

    def test_operation_raising_exception(self, loop):
        lines = []
        op = start(0.001, _generator(15), loop=loop)

        loop.run_until_complete(callback_consumer(op, lines.append))
        assert lines[0] == '8:30:0.15 : exception - (promise call)'
        assert 'Finally!' in lines[1]

    def test_cancelled_operation(self, loop):
        lines = []
        op = start(1, _generator(7), loop=loop)
        chain = callback_consumer(op, lines.append)
        op.cancel()

        loop.run_until_complete(chain)
        assert 'cancelled' in lines[0]
        assert 'Finally!' in lines[1]

    def test_attach_to_settled_operation(self, loop):
        """The consumer attached after the settlement still gets the value."""
        lines = []
        op = start(0.001, _generator(7), loop=loop)
        loop.run_until_complete(op)

        chain = callback_consumer(op, lines.append)
        assert lines == []
        loop.run_until_complete(chain)
        assert lines[0] == '8:30:0.7 : success - (promise call)'
        assert len(lines) == 2


class TestSequentialConsumer(object):

    def test_fulfilled_operation(self, loop):
        lines = []
        op = start(0.001, _generator(7), loop=loop)

        loop.run_until_complete(sequential_consumer(op, lines.append))
        assert len(lines) == 2
        assert lines[0] == '8:30:0.7 : success - (async call)'
        assert lines[1].endswith(' :     Finally! - (async call)')

    def test_failed_operation(self, loop):
        lines = []
        op = start(0.001, _generator(9), loop=loop)

        loop.run_until_complete(sequential_consumer(op, lines.append))
        assert lines[0] == '8:30:0.9 : failure - (async call)'
        assert 'Finally!' in lines[1]

    def test_operation_raising_exception(self, loop):
        lines = []
        op = start(0.001, _generator(15), loop=loop)

        loop.run_until_complete(sequential_consumer(op, lines.append))
        assert lines[0] == '8:30:0.15 : exception - (async call)'
        assert 'Finally!' in lines[1]

    def test_cancelled_operation(self, loop):
        lines = []
        op = start(1, _generator(7), loop=loop)
        op.cancel()

        loop.run_until_complete(sequential_consumer(op, lines.append))
        assert 'cancelled' in lines[0]
        assert 'Finally!' in lines[1]


class TestBothConsumers(object):

    def test_same_operation(self, loop):
        """Both consumers observe the same settlement, each exactly once."""
        lines = []
        op = start(0.001, _generator(9), loop=loop)

        chain = callback_consumer(op, lines.append)
        loop.run_until_complete(
            sequential_consumer(op, lines.append))
        loop.run_until_complete(chain)

        promise_lines = [line for line in lines
                         if line.endswith('(promise call)')]
        async_lines = [line for line in lines if line.endswith('(async call)')]
        assert len(lines) == 4
        assert promise_lines[0] == '8:30:0.9 : failure - (promise call)'
        assert 'Finally!' in promise_lines[1]
        assert async_lines[0] == '8:30:0.9 : failure - (async call)'
        assert 'Finally!' in async_lines[1]

    def test_any_rejection_reason(self, loop):
        """Both consumers write a rejection, whatever its exception type."""
        promise_lines = []
        async_lines = []
        p = Promise.reject(ValueError('bad'), loop=loop)

        chain = callback_consumer(p, promise_lines.append)
        loop.run_until_complete(sequential_consumer(p, async_lines.append))
        loop.run_until_complete(chain)

        assert promise_lines[0] == 'bad - (promise call)'
        assert 'Finally!' in promise_lines[1]
        assert async_lines[0] == 'bad - (async call)'
        assert 'Finally!' in async_lines[1]
        assert len(async_lines) == 2
