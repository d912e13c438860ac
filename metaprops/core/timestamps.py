"""
Local time zone marker for timestamps read as machine-local clock values
"""

import time
from datetime import datetime, timedelta, tzinfo

ZERO = timedelta(0)


class LocalTimezone(tzinfo):
    """The zone of the machine running the tool.

    Providers tag clock values that are known to be local (EXIF dates, for
    example) with ``LOCAL``. The formatter strips the tag instead of
    printing the machine's offset.
    """

    def _is_dst(self, dt: datetime) -> bool:
        stamp = time.mktime((dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second,
                             dt.weekday(), 0, -1))
        return time.localtime(stamp).tm_isdst > 0

    def utcoffset(self, dt):
        if self._is_dst(dt):
            return timedelta(seconds=-time.altzone)
        return timedelta(seconds=-time.timezone)

    def dst(self, dt):
        if self._is_dst(dt):
            return timedelta(seconds=time.timezone - time.altzone)
        return ZERO

    def tzname(self, dt):
        return time.tzname[self._is_dst(dt)]

    def __repr__(self):
        return "LOCAL"


LOCAL = LocalTimezone()


def is_local(value: datetime) -> bool:
    return isinstance(value.tzinfo, LocalTimezone)
