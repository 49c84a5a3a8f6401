# -*- coding: utf-8 -*-


class PromiseError(Exception):
    """Base class of the errors raised by the promise module."""
    pass


class InvalidStateError(PromiseError):
    """The Promise is not in a state allowing the operation requested.

    Typically raised when asking for the result of a pending Promise.
    """
    pass


class CancelledError(PromiseError):
    """The operation has been cancelled before being completed."""
    pass
