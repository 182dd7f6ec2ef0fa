"""Local time formatting."""

import datetime

from dateutil import tz


def format_local_time(moment=None):
    """
    Format a moment as 'YYYY/MM/DD HH:MM:SS.mmm +HHMM'.

    Args:
        moment (datetime.datetime, optional): Timezone-aware time. Defaults to now
            in the local timezone.

    Returns:
        str: Formatted time
    """
    if moment is None:
        moment = datetime.datetime.now(tz.tzlocal())
    millis = moment.microsecond // 1000
    return f"{moment:%Y/%m/%d %H:%M:%S}.{millis:03d} {moment:%z}"
