import datetime, logging, logging.handlers, os, sys, typing
from chanlog import utils

TRACE = logging.DEBUG-1
LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR
}
FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_FILENAME = "chanlog.log"

class Formatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        return utils.datetime.iso8601_format(
            datetime.datetime.fromtimestamp(record.created),
            utils.datetime.TimeSpec.MILLISECOND)

class Log(object):
    """
    chanlog's own diagnostics. `level` applies to stdout; when `directory`
    is given, everything down to trace also goes to chanlog.log there,
    rotated at midnight.
    """
    def __init__(self, level: str, directory: typing.Optional[str]=None):
        if not level.lower() in LEVELS:
            raise ValueError("Unknown log level '%s'" % level)

        logging.addLevelName(TRACE, "TRACE")
        self.logger = logging.getLogger("chanlog")
        self.logger.setLevel(TRACE)
        # only one Log's handlers are live at a time
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        outputs: typing.List[typing.Tuple[logging.Handler, int]] = [
            (logging.StreamHandler(sys.stdout), LEVELS[level.lower()])]
        if not directory == None:
            os.makedirs(directory, exist_ok=True)
            outputs.append((logging.handlers.TimedRotatingFileHandler(
                os.path.join(directory, LOG_FILENAME), when="midnight",
                backupCount=7, encoding="utf8"), TRACE))

        formatter = Formatter(FORMAT)
        for handler, handler_level in outputs:
            handler.setLevel(handler_level)
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def _log(self, level: int, message: str, params: typing.Sequence,
            kwargs: dict):
        self.logger.log(level, message, *params, **kwargs)

    def trace(self, message: str, params: typing.Sequence=(), **kwargs):
        self._log(TRACE, message, params, kwargs)
    def debug(self, message: str, params: typing.Sequence=(), **kwargs):
        self._log(logging.DEBUG, message, params, kwargs)
    def info(self, message: str, params: typing.Sequence=(), **kwargs):
        self._log(logging.INFO, message, params, kwargs)
    def warn(self, message: str, params: typing.Sequence=(), **kwargs):
        self._log(logging.WARNING, message, params, kwargs)
    def error(self, message: str, params: typing.Sequence=(), **kwargs):
        self._log(logging.ERROR, message, params, kwargs)
