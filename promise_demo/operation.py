# -*- coding: utf-8 -*-

import logging

from .outcome import OutcomeGenerator, is_successful
from .promise import CancelledError, Promise

_logger = logging.getLogger(__name__)

# Delay before the work is executed, in seconds.
DEFAULT_DELAY = 2.0


class Rejection(Exception):
    """Reason of a rejected DeferredOperation.

    Failed outcomes and errors raised by the work are both converted into a
    Rejection; consumers don't have to distinguish them.

    Attributes:
        message (str): message of the failed outcome, or of the error.
    """

    def __init__(self, message):
        Exception.__init__(self, message)
        self.message = message


class DeferredOperation(Promise):
    """Promise of the outcome of a delayed, unreliable, operation.

    The work is scheduled on the event loop at creation, and executed after
    `delay` seconds. The constructor returns immediately, the operation being
    still pending.

    When the work is done, the operation is fulfilled with the outcome's
    message if it's a success. Otherwise, it's rejected with a `Rejection`
    carrying either the outcome's message, or the message of the error raised
    by the work.
    """

    def __init__(self, delay=None, generator=None, loop=None):
        """
        Args:
            delay (float, optional): delay before the work, in seconds.
                Default to DEFAULT_DELAY.
            generator (OutcomeGenerator, optional): unit of work.
            loop (AbstractEventLoop, optional): default to the running loop.
        """
        self.delay = DEFAULT_DELAY if delay is None else delay
        self._generator = generator or OutcomeGenerator()
        self._timer = None
        self._fulfill = None
        self._reject = None
        Promise.__init__(self, self._start_timer, loop=loop, _name='OPERATION')

    def _start_timer(self, fulfill, reject):
        self._fulfill = fulfill
        self._reject = reject
        try:
            self._timer = self._loop.call_later(self.delay, self._do_work)
        except Exception as error:
            _logger.warning('Unable to schedule %r', self, exc_info=True)
            return reject(Rejection(str(error)))
        _logger.debug('%r scheduled in %ss', self, self.delay)

    def _do_work(self):
        self._timer = None
        try:
            outcome = self._generator.generate()
        except Exception as error:
            return self._reject(Rejection(str(error)))

        if is_successful(outcome.message):
            self._fulfill(outcome.message)
        else:
            self._reject(Rejection(outcome.message))

    def cancel(self):
        """Abort the operation if the work has not been done yet.

        The operation is rejected with a `CancelledError`.

        Returns:
            boolean: True if the operation has been cancelled; False if it was
                already settled.
        """
        if self._timer is None:
            return False
        self._timer.cancel()
        self._timer = None
        _logger.debug('Cancel %r', self)
        self._reject(CancelledError('Operation cancelled before completion'))
        return True


def start(delay=None, generator=None, loop=None):
    """Start a new operation.

    Returns:
        DeferredOperation: the operation, not settled yet.
    """
    return DeferredOperation(delay=delay, generator=generator, loop=loop)
