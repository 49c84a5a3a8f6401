# -*- coding: utf-8 -*-

import asyncio
import logging

from .errors import InvalidStateError
from .util import is_thenable

_logger = logging.getLogger(__name__)


class Promise(object):
    """It represents an operation expected to be completed in the future.

    A Promise is used for asynchronous computation. It contains a value not yet
    known when the Promise is created. It allows to set callbacks who will be
    called as soon as the result is known. It's a "promise" of a future value.

    A Promise is bound to an asyncio event loop. Callbacks are never executed
    by the call who registers them: they are queued on the loop, in their
    registration order, and run at the next loop iteration. It's true even if
    the Promise is already settled when the callback is added.

    The Promise is not thread-safe: all methods must be called from the
    thread running the event loop.
    """

    PENDING = 'pending'
    FULFILLED = 'fulfilled'
    REJECTED = 'rejected'

    def __init__(self, executor, loop=None, _name=None, _previous=None):
        """Constructor of the Promise.

        Generate the two callbacks for the executor, then call the `executor`.
        It means the executor will be fully executed before the the constructor
        returns.
        If the executor raises an exception, it's caught and the Promise is
        rejected with this exception.

        Args:
            executor (callable): Takes 2 callable arguments:
                The first one, `on_fulfilled()` should be called when the
                Promise is fulfilled (ie the tasks is done) and must accept the
                result's value as its only argument.
                The second, `on_rejected()`, should be called when an error
                occurs. Its argument should be an instance of `Exception`.
            loop (AbstractEventLoop, optional): loop used to execute the
                callbacks. By default, the running loop.
            _name (str): if set, name used when converted to text.
        """
        self._loop = loop or asyncio.get_running_loop()
        self._state = self.PENDING
        self._result = None
        self._error = None
        self._name = _name or getattr(executor, '__name__', '???')
        self._previous = _previous

        self._callbacks = []
        self._errbacks = []

        try:
            executor(self._on_fulfilled, self._on_rejected)
        except Exception as error:
            self._on_rejected(error)

    @property
    def state(self):
        """str: one of PENDING, FULFILLED or REJECTED."""
        return self._state

    def _on_fulfilled(self, result):
        if self._state != self.PENDING:
            _logger.warning('Try to fulfill Promise %r already settled. '
                            'New result will be ignored: %r', self, result)
            return
        self._result = result
        self._state = self.FULFILLED
        _logger.debug('%r fulfilled', self)

        for callback in self._callbacks:
            self._schedule(callback, result)

        # Free the references
        self._callbacks = None
        self._errbacks = None

    def _on_rejected(self, error):
        if self._state != self.PENDING:
            _logger.warning('Try to reject Promise %r already settled. '
                            'New error will be ignored: %r', self, error)
            return
        if not isinstance(error, BaseException):
            # The value is chained like any error. Only the conversion into
            # a raised exception (by `result()` or `await`) will fail.
            _logger.warning('Promise %r rejected with non-exception value: '
                            '%r', self, error)
        self._error = error
        self._state = self.REJECTED
        _logger.debug('%r rejected: %r', self, error)

        for errback in self._errbacks:
            self._schedule(errback, error, is_errback=True)

        # Free the references
        self._callbacks = None
        self._errbacks = None

    def result(self):
        """Returns the result of a settled Promise.

        Returns:
            *: value encapsulated, defined by the operation.
        Raises:
            InvalidStateError: if the promise is not settled yet.
            *: If the promise is rejected, the rejection cause is raised.
        """
        if self._state == self.PENDING:
            raise InvalidStateError('%r is not settled yet' % self)
        elif self._state == self.REJECTED:
            raise _as_exception(self._error)
        return self._result

    def exception(self):
        """Returns the error of a settled Promise.

        Returns:
            Exception: the error causing the rejection of the Promise.
            None: if the promise is fulfilled.
        Raises:
            InvalidStateError: if the promise is not settled yet.
        """
        if self._state == self.PENDING:
            raise InvalidStateError('%r is not settled yet' % self)
        return self._error

    def then(self, on_fulfilled=None, on_rejected=None):
        """Create a new promise from callbacks called when this one is settled.

        If the promise is fulfilled, the `on_fulfilled` callback will be
        called. Otherwise (the promise has been rejected), the `on_rejected`
        callback is called.
        In any case, the callback will define the state of the returned
        Promise. If the callback raises an exception, the new Promise is
        rejected. The callback can returns:
        - A value: the new promise will be fulfilled with this value.
        - Another Promise, or any object with a `then` method: when fulfilled
            or rejected, will transfer its status (state and result/error) to
            the Promise returned by this method.

        If a callback is not defined, the state of the "self promise" is
        transferred at the new promise (the state and the value/error).

        Args:
            on_fulfilled (callable, optional):  This callback will receive the
                result of the original promise as argument.
            on_rejected (callable, optional): This callback will receive the
                exception raised by the original promise as argument.
        Returns:
            Promise<*>: new promise depending of self.
        """

        def chained_executor(fulfilled, rejected):

            def callback(result):
                if on_fulfilled is None:
                    return fulfilled(result)
                try:
                    new_result = on_fulfilled(result)
                except Exception as error:
                    return rejected(error)

                if is_thenable(new_result):
                    new_result.then(fulfilled, rejected)
                else:
                    fulfilled(new_result)

            def errback(error):
                if on_rejected is None:
                    return rejected(error)
                try:
                    result = on_rejected(error)
                except Exception as new_error:
                    return rejected(new_error)

                if is_thenable(result):
                    result.then(fulfilled, rejected)
                else:
                    fulfilled(result)

            self._add_callback(callback)
            self._add_errback(errback)

        if not on_rejected:
            name = '%s' % getattr(on_fulfilled, '__name__', '???')
        elif not on_fulfilled:
            name = '<None, %s>' % getattr(on_rejected, '__name__', '???')
        else:
            name = '<%s, %s>' % (getattr(on_fulfilled, '__name__', '???'),
                                 getattr(on_rejected, '__name__', '???'))
        return Promise(chained_executor, loop=self._loop, _name=name,
                       _previous=self)

    def catch(self, on_rejected):
        """Create a new promise with a callback called when an error occurs.

        Alias of `self.then(None, on_rejected)`

        Args:
            on_rejected (callable): Must take an argument instance of Exception
                (or one of its subclass). Will be called if `self` is rejected.
        returns:
            Promise<*>: new Promise chained to `self`. If `self` is fulfilled,
                the promised value will be the same as `self`. Otherwise, the
                value returned by the `on_rejected()` callback.
        """
        return self.then(None, on_rejected)

    def finally_(self, on_settled):
        """Create a new promise with a callback called once `self` is settled.

        The callback is called without argument, whatever the way the promise
        is settled. The returned Promise keeps the state and the value (or
        error) of `self`, unless `on_settled()` raises an exception: in that
        case, the new Promise is rejected with it.

        Args:
            on_settled (callable): takes no argument.
        Returns:
            Promise<*>: new Promise chained to `self`.
        """
        def finally_fulfilled(result):
            on_settled()
            return result

        def finally_rejected(error):
            on_settled()
            raise _as_exception(error)

        return self.then(finally_fulfilled, finally_rejected)

    def safeguard(self):
        """Catch all errors and log them with the most details possible.

        This method is aimed to protect the program from uncaught rejected
        Promise. If no error handler has been set (via then() or catch()), the
        default behavior is to do nothing, and thus, errors are silently
        ignored.
        Calling `safeguard()` after all chains are set will catch these errors,
        and log them as ERROR with the maximum of details possible.
        """
        def guard(error):
            if isinstance(error, BaseException):
                _logger.error('[SAFEGUARD] %s', self, exc_info=error)
            else:
                _logger.error('[SAFEGUARD] %s: %r', self, error)

        self._add_errback(guard)

    def __await__(self):
        """Suspend the awaiting coroutine until the Promise is settled.

        The coroutine resumes with the fulfilled value, or the rejection
        error is raised at the `await` point.
        """
        future = self._loop.create_future()

        def callback(result):
            if not future.done():
                future.set_result(result)

        def errback(error):
            if not future.done():
                future.set_exception(_as_exception(error))

        self._add_callback(callback)
        self._add_errback(errback)
        return future.__await__()

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self._inner_print())

    def _inner_print(self):
        if self._state == self.REJECTED:
            state = 'R'
        elif self._state == self.FULFILLED:
            state = 'F'
        else:
            state = 'P'

        if self._previous:
            return '%s -> %s %s' % (self._previous._inner_print(), self._name,
                                    state)
        return '%s %s' % (self._name, state)

    @classmethod
    def resolve(cls, value, loop=None):
        """Create a promise who resolves the selected value.

        Args:
            value: result of the promise. If it's a promise, it's returned as
                is.
            loop (AbstractEventLoop, optional)
        Returns:
            Promise: new Promise already fulfilled, containing the value
                passed in parameter.
        """
        if is_thenable(value):
            return value
        return Promise(lambda ok, error: ok(value), loop=loop,
                       _name='RESOLVE')

    @classmethod
    def reject(cls, reason, loop=None):
        """Create a Promise rejected for the reason specified.

        Args:
            reason: Exception set to the Promise
            loop (AbstractEventLoop, optional)
        Returns:
            Promise: new Promise already rejected.
        """
        return Promise(lambda ok, error: error(reason), loop=loop,
                       _name='REJECT')

    @staticmethod
    def _exec_callback(callback, value, is_errback=False):
        try:
            callback(value)
        except Exception:
            if is_errback:
                _logger.exception("Promise errback raise an exception!")
            else:
                _logger.exception("Promise callback raise an exception!")

    def _schedule(self, callback, value, is_errback=False):
        self._loop.call_soon(self._exec_callback, callback, value, is_errback)

    def _add_callback(self, callback):
        if self._state == self.PENDING:
            self._callbacks.append(callback)
        elif self._state == self.FULFILLED:
            self._schedule(callback, self._result)

    def _add_errback(self, errback):
        if self._state == self.PENDING:
            self._errbacks.append(errback)
        elif self._state == self.REJECTED:
            self._schedule(errback, self._error, is_errback=True)


def _as_exception(error):
    if isinstance(error, BaseException):
        return error
    return TypeError('Promise rejected with non-exception value: %r'
                     % (error,))
