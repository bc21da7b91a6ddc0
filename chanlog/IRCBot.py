import os, typing
from chanlog import (Config, Database, EventManager, IRCEvent, Logging,
    ModuleManager, utils)

VERSION: str = ""
with open(os.path.join(os.path.dirname(__file__), "VERSION"), "r"
        ) as version_file:
    VERSION = "v%s" % version_file.read().strip()

# event name each record type is dispatched under
DISPATCH_EVENTS = {
    IRCEvent.ChatMessage: "seen",
    IRCEvent.JoinEvent: "chanjoin",
    IRCEvent.PartEvent: "chanpart"
}

class Bot(object):
    def __init__(self, directory: str, config: Config.Config,
            database: Database.Database, events: EventManager.Events,
            log: Logging.Log, modules: ModuleManager.ModuleManager):
        self.directory = directory
        self.config = config
        self.database = database
        self._events = events
        self.log = log
        self.modules = modules

    @property
    def nickname(self) -> str:
        return self.config.get("nickname")

    def load_modules(self):
        self.modules.load_modules(self)

    def dispatch(self, message: IRCEvent.ChannelEvent) -> typing.List[
            typing.Any]:
        event_name = DISPATCH_EVENTS.get(type(message), None)
        if event_name == None:
            raise TypeError("Can't dispatch %r" % message)
        # hook errors (I/O, bad ignore patterns) propagate to the caller
        return self._events.on(event_name).call(message=message)

    def command(self, command: str, args: typing.List[str]=[]
            ) -> typing.Optional[str]:
        events = self._events.on("command").on(command)
        hooks = events.get_hooks()
        if not hooks:
            return "Unknown command '%s'" % command

        min_args = hooks[0].get_kwarg("min_args", 0)
        if len(args) < min_args:
            usage = hooks[0].get_kwarg("usage", None)
            if usage:
                return str(utils.EventUsageError("%s %s" % (command, usage)))
            return str(utils.EventNotEnoughArgsError(min_args))

        try:
            return events.call_for_result(args=args)
        except utils.EventError as e:
            return str(e)
