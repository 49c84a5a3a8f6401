# -*- coding: utf-8 -*-

from datetime import datetime
import re

from promise_demo.common.timefmt import at_time


class TestAtTime(object):

    def test_no_padding(self):
        assert at_time(datetime(2026, 1, 2, 9, 5, 3, 7000)) == '9:5:3.7'

    def test_two_digits_fields(self):
        date = datetime(2026, 1, 2, 23, 59, 58, 999999)
        assert at_time(date) == '23:59:58.999'

    def test_midnight(self):
        assert at_time(datetime(2026, 1, 2)) == '0:0:0.0'

    def test_default_is_now(self):
        assert re.match(r'^\d{1,2}:\d{1,2}:\d{1,2}\.\d{1,3}$', at_time())
