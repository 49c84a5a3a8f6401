# -*- coding: utf-8 -*-

import asyncio
import logging

from .common.timefmt import at_time
from .consumers import callback_consumer, sequential_consumer
from .operation import start
from .promise import is_cancellable

_logger = logging.getLogger(__name__)


async def run(delay=None, share_operation=False, timeout=None, echo=print,
              generator=None):
    """Start the operations, observe them, and wait until both are handled.

    The "done calling" lines are always written before any output of the
    consumers: starting an operation, or attaching a consumer, never blocks.

    Args:
        delay (float, optional): delay of each operation, in seconds.
        share_operation (boolean): if True, both consumers observe the same
            operation. Otherwise, each one starts its own.
        timeout (float, optional): if set, operations still pending after
            this delay are cancelled.
        echo (callable): receives each line of text.
        generator (OutcomeGenerator, optional): unit of work of the
            operations.
    """
    loop = asyncio.get_running_loop()

    first = start(delay, generator)
    chain = callback_consumer(first, echo)
    echo('%s : done calling promise_function()' % at_time())

    second = first if share_operation else start(delay, generator)
    task = loop.create_task(sequential_consumer(second, echo))
    echo('%s : done calling async method' % at_time())

    watchdogs = []
    if timeout is not None:
        for operation in {first, second}:
            if is_cancellable(operation):
                watchdogs.append(loop.call_later(timeout, operation.cancel))

    try:
        await asyncio.gather(chain, task)
    finally:
        for handle in watchdogs:
            handle.cancel()
    _logger.debug('Demonstration over')
