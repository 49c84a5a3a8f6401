# -*- coding: utf-8 -*-
"""Formatting of time labels used in the demonstration output."""

from datetime import datetime


def at_time(date=None):
    """Format a point in time as "H:M:S.ms".

    Fields are not zero-padded: 9 hours, 5 minutes, 3 seconds and 7
    milliseconds gives "9:5:3.7".

    Args:
        date (datetime, optional): time to format. Default to now.
    Returns:
        str: the formatted time.
    """
    if date is None:
        date = datetime.now()
    return '%s:%s:%s.%s' % (date.hour, date.minute, date.second,
                            date.microsecond // 1000)
