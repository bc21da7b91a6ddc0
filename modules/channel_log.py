#--depends-on vars

import dataclasses, datetime, os.path, re, typing
from chanlog import IRCEvent, ModuleManager, utils

HELP = "Logs all activities in a channel."

DEFAULT_LOG_PATH = os.curdir
DEFAULT_TIMESTAMP_FMT = "%H:%M:%S"

@dataclasses.dataclass
class LogSettings(object):
    ignore_pattern: typing.Optional[str] = None
    log_path: str = DEFAULT_LOG_PATH
    timestamp_fmt: str = DEFAULT_TIMESTAMP_FMT
    ignore_bot: bool = True
    ignore_joinpart: bool = False

# stored value for each setting when nothing has been set yet
DEFAULTS = {
    "user_log_path": DEFAULT_LOG_PATH,
    "user_timestamp_fmt": DEFAULT_TIMESTAMP_FMT,
    "user_ignore_bot": 1,
    "user_ignore_joinpart": 0
}

def should_log(message: IRCEvent.ChannelEvent, settings: LogSettings,
        nickname: str) -> bool:
    if isinstance(message, IRCEvent.ChatMessage):
        if settings.ignore_bot and (message.who == nickname or
                message.address == nickname):
            return False
        # re.error from a bad pattern is left to propagate
        if (settings.ignore_pattern and
                re.search(settings.ignore_pattern, message.body)):
            return False
        return True
    elif isinstance(message, (IRCEvent.JoinEvent, IRCEvent.PartEvent)):
        return not settings.ignore_joinpart
    raise TypeError("Unknown event %r" % message)

def message_text(message: IRCEvent.ChannelEvent) -> str:
    if isinstance(message, IRCEvent.ChatMessage):
        return "<%s> %s" % (message.who, message.body)
    elif isinstance(message, IRCEvent.JoinEvent):
        return "JOIN: %s" % message.who
    elif isinstance(message, IRCEvent.PartEvent):
        return "PART: %s" % message.who
    raise TypeError("Unknown event %r" % message)

def format_line(channel: str, text: str, timestamp_fmt: str,
        now: datetime.datetime) -> str:
    return "[%s %s] %s" % (channel, now.strftime(timestamp_fmt), text)

def log_filename(log_path: str, channel: str, now: datetime.datetime) -> str:
    """
    `<log_path>/<channel without one leading #>_<YYYYMMDD>.log`.
    os.path.sep is replaced with "," (forbidden in channel names) so a
    channel can't write outside of `log_path`.
    """
    if channel.startswith("#"):
        channel = channel[1:]
    channel = channel.replace(os.path.sep, ",")
    return os.path.join(log_path, "%s_%s.log" % (channel,
        utils.datetime.date_stamp(now)))

@utils.export("set", utils.Setting("ignore_pattern",
    "Don't log messages matching this regular expression",
    example="^!"))
@utils.export("set", utils.Setting("log_path",
    "Directory channel logs are written to", example="/var/log/irc"))
@utils.export("set", utils.Setting("timestamp_fmt",
    "strftime() format of each line's timestamp", example="%H:%M"))
@utils.export("set", utils.FlagSetting("ignore_bot",
    "Don't log messages from or addressed to me"))
@utils.export("set", utils.FlagSetting("ignore_joinpart",
    "Don't log joins and parts"))
class Module(ModuleManager.BaseModule):
    def on_load(self):
        for setting, default in DEFAULTS.items():
            if self.get_setting(setting) == None:
                self.set_setting(setting, default)
        self._appender = utils.io.FileAppender()

    def help(self):
        return HELP

    def _settings(self) -> LogSettings:
        # read on every event so changes apply immediately
        return LogSettings(
            ignore_pattern=self.get_setting("user_ignore_pattern", None),
            log_path=self.get_setting("user_log_path", DEFAULT_LOG_PATH),
            timestamp_fmt=self.get_setting("user_timestamp_fmt",
                DEFAULT_TIMESTAMP_FMT),
            ignore_bot=bool(self.get_setting("user_ignore_bot", 1)),
            ignore_joinpart=bool(self.get_setting("user_ignore_joinpart", 0)))

    def _now(self) -> datetime.datetime:
        return utils.datetime.now()

    def _log(self, message: IRCEvent.ChannelEvent):
        settings = self._settings()
        if not should_log(message, settings, self.bot.nickname):
            self.log.trace("not logging %r", [message])
            return

        now = self._now()
        line = format_line(message.channel, message_text(message),
            settings.timestamp_fmt, now)
        filename = log_filename(settings.log_path, message.channel, now)
        self._appender.append(filename, line)

    @utils.hook("seen")
    def seen(self, event):
        self._log(event["message"])

    @utils.hook("chanjoin")
    def chanjoin(self, event):
        self._log(event["message"])

    @utils.hook("chanpart")
    def chanpart(self, event):
        self._log(event["message"])
