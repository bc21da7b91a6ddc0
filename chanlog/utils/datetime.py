import datetime as _datetime
import enum

ISO8601_FORMAT_DT = "%Y-%m-%dT%H:%M:%S"
DATE_STAMP = "%Y%m%d"

class TimeSpec(enum.Enum):
    NORMAL = 1
    MILLISECOND = 2

def now() -> _datetime.datetime:
    return _datetime.datetime.now()

def iso8601_format(dt: _datetime.datetime, timespec: TimeSpec=TimeSpec.NORMAL
        ) -> str:
    dt_format = dt.strftime(ISO8601_FORMAT_DT)

    ms_format = ""
    if timespec == TimeSpec.MILLISECOND:
        ms_format = ".%s" % str(int(dt.microsecond/1000)).zfill(3)

    return "%s%s" % (dt_format, ms_format)

def date_stamp(dt: _datetime.datetime) -> str:
    return dt.strftime(DATE_STAMP)
