# -*- coding: utf-8 -*-

from .errors import CancelledError, InvalidStateError, PromiseError
from .promise import Promise
from .util import is_cancellable, is_thenable

__all__ = ['is_cancellable', 'is_thenable', 'CancelledError',
           'InvalidStateError', 'Promise', 'PromiseError']
