# -*- coding: utf-8 -*-

from .__version__ import __version__  # noqa

import asyncio
import logging

from .common import log
from .common import config
from . import demo


def main():
    """Entry point of the demonstration."""

    # Start log and load config
    with log.Context():
        logger = logging.getLogger(__name__)

        config.load()
        log.set_debug_mode(config.get('debug_mode'))
        log.set_logs_level(config.get('log_levels'))

        logger.debug('Start demonstration, version %s', __version__)
        asyncio.run(demo.run(delay=config.get('delay'),
                             share_operation=config.get('share_operation'),
                             timeout=config.get('timeout')))
    return 0


if __name__ == "__main__":
    main()
