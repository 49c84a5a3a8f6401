# -*- coding: utf-8 -*-

"""Simulation of an unreliable unit of work.

Each call to `OutcomeGenerator.generate()` ends in one of three ways, chosen
from the millisecond part of the current time:

- divisible by 5: an `OutcomeError` is raised ("exception");
- else divisible by 3: a FAILURE outcome is returned ("failure");
- else: a SUCCESS outcome is returned ("success").

A value divisible by both 5 and 3 (like 15) always raises, as the first test
wins.
"""

from datetime import datetime
import logging

from .common.timefmt import at_time

_logger = logging.getLogger(__name__)

SUCCESS = 'success'
FAILURE = 'failure'
EXCEPTION = 'exception'


class Outcome(object):
    """Result of one unit of work. Immutable once created.

    Attributes:
        kind (str): one of SUCCESS, FAILURE or EXCEPTION.
        message (str): time label followed by the kind.
            Ex: "9:5:3.7 : success"
    """

    __slots__ = ('_kind', '_message')

    def __init__(self, kind, message):
        self._kind = kind
        self._message = message

    @property
    def kind(self):
        return self._kind

    @property
    def message(self):
        return self._message

    def __repr__(self):
        return 'Outcome(%s, %r)' % (self._kind, self._message)


class OutcomeError(Exception):
    """Raised by the unit of work instead of returning an outcome.

    Attributes:
        outcome (Outcome): the EXCEPTION outcome. Its message is also the
            message of the error.
    """

    def __init__(self, outcome):
        Exception.__init__(self, outcome.message)
        self.outcome = outcome


class OutcomeGenerator(object):
    """Produces the outcome of a simulated, unreliable, operation."""

    def __init__(self, clock=None):
        """
        Args:
            clock (callable, optional): returns the current time, as a
                `datetime`. Default to `datetime.now`.
        """
        self._clock = clock or datetime.now

    def generate(self):
        """Do the (simulated) work.

        Returns:
            Outcome: a SUCCESS or a FAILURE outcome.
        Raises:
            OutcomeError: when the work "crashes".
        """
        now = self._clock()
        ms = now.microsecond // 1000
        label = at_time(now)

        if ms % 5 == 0:
            _logger.debug('ms=%s: raise an exception', ms)
            raise OutcomeError(Outcome(EXCEPTION, '%s : %s' % (label,
                                                               EXCEPTION)))
        elif ms % 3 == 0:
            return Outcome(FAILURE, '%s : %s' % (label, FAILURE))
        return Outcome(SUCCESS, '%s : %s' % (label, SUCCESS))


def is_successful(message):
    """Tell if the message of an outcome denotes a success."""
    return SUCCESS in message
