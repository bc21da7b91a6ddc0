import threading
from . import datetime, decorators, errors, io, parse

from .decorators import export, hook, kwarg
from .settings import FlagSetting, Setting
from .errors import EventError, EventNotEnoughArgsError, EventUsageError

def is_main_thread() -> bool:
    return threading.current_thread() is threading.main_thread()
