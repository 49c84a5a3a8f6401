# -*- coding: utf-8 -*-

import asyncio
import pytest


@pytest.fixture
def loop(request):
    """Create a new event loop, not running.

    Tests drive it with ``loop.run_until_complete()``. The fixture
    automatically closes the loop at the end of the test.
    """
    event_loop = asyncio.new_event_loop()
    request.addfinalizer(event_loop.close)
    return event_loop
