# -*- coding: utf-8 -*-

"""Two ways of observing the same operation.

`callback_consumer()` registers handlers on the operation, and returns at
once. `sequential_consumer()` is a coroutine suspended until the operation is
settled.

Both write their messages using the `echo` callable (default: `print()`).
"""

import logging

from .common.timefmt import at_time

_logger = logging.getLogger(__name__)


def callback_consumer(operation, echo=print):
    """Observe the operation using chained callbacks.

    Args:
        operation (Promise): operation to observe.
        echo (callable): receives each line of text.
    Returns:
        Promise: end of the chain, fulfilled once the final handler is done.
    """

    def on_fulfilled(result):
        echo('%s - (promise call)' % result)

    def on_rejected(error):
        echo('%s - (promise call)' % error)

    def on_settled():
        echo('%s :     Finally! - (promise call)' % at_time())

    chain = operation.then(on_fulfilled) \
        .catch(on_rejected) \
        .finally_(on_settled)
    chain.safeguard()
    return chain


async def sequential_consumer(operation, echo=print):
    """Observe the operation by awaiting it.

    Every rejection is written, whatever its reason, like the callbacks of
    `callback_consumer()` do.

    Args:
        operation (Promise): operation to observe.
        echo (callable): receives each line of text.
    """
    try:
        result = await operation
        echo('%s - (async call)' % result)
    except Exception as error:
        echo('%s - (async call)' % error)
    finally:
        echo('%s :     Finally! - (async call)' % at_time())
    _logger.debug('Sequential consumer of %r done', operation)
