import argparse, json, os, platform, sys, typing
from chanlog import (Config, Database, EventManager, IRCBot, IRCEvent,
    Logging, ModuleManager)

DIRECTORY = os.path.dirname(os.path.realpath(__file__))
CORE_MODULES = os.path.join(DIRECTORY, "core_modules")

def _extra_modules() -> typing.List[str]:
    # a source checkout keeps modules/ beside the package, an install has
    # them as the chanlog_modules package
    checkout = os.path.join(os.path.dirname(DIRECTORY), "modules")
    if os.path.isdir(checkout):
        return [checkout]
    try:
        import chanlog_modules
    except ImportError:
        return []
    return list(chanlog_modules.__path__)

def make_bot(config: Config.Config, database_location: str, log: Logging.Log,
        extra_modules: typing.Optional[typing.List[str]]=None) -> IRCBot.Bot:
    if extra_modules == None:
        extra_modules = _extra_modules()

    database = Database.Database(log, database_location)
    events = EventManager.EventRoot(log).wrap()
    modules = ModuleManager.ModuleManager(events, log, CORE_MODULES,
        extra_modules)
    return IRCBot.Bot(DIRECTORY, config, database, events, log, modules)

def replay(bot: IRCBot.Bot, lines: typing.Iterable[str],
        stdout: typing.TextIO) -> int:
    """
    Feed JSON-lines events and commands to the bot.

    Returns the number of lines that failed; a failed line is logged and
    the replay carries on with the next one.
    """
    failed = 0
    for i, line in enumerate(lines):
        line = line.strip()
        if not line:
            continue

        try:
            data = json.loads(line)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
        except ValueError as e:
            bot.log.error("line %d: invalid JSON: %s", [i+1, str(e)])
            failed += 1
            continue

        try:
            if data.get("type") == "command":
                reply = bot.command(data.get("command", ""),
                    [str(arg) for arg in data.get("args", [])])
                if reply:
                    stdout.write("%s\n" % reply)
            else:
                bot.dispatch(IRCEvent.from_dict(data))
        except Exception:
            bot.log.error("line %d: failed to handle %r", [i+1, data],
                exc_info=True)
            failed += 1
    return failed

def arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        description="Replay IRC channel events into chanlog's modules")

    arg_parser.add_argument("--version", "-v", action="store_true")

    arg_parser.add_argument("--config", "-c",
        help="Location of the INI config file",
        default=os.path.join(os.getcwd(), "chanlog.conf"))

    arg_parser.add_argument("--database", "-d",
        help="Location of the sqlite3 database file",
        default=os.path.join(os.getcwd(), "chanlog.db"))

    arg_parser.add_argument("--log-dir", "-l",
        help="Location of the log directory",
        default=os.path.join(os.getcwd(), "logs"))

    arg_parser.add_argument("--verbose", "-V", action="store_true")
    arg_parser.add_argument("--log-level", "-L")
    arg_parser.add_argument("--no-logging", "-N", action="store_true")

    arg_parser.add_argument("--input", "-i",
        help="JSON-lines file of events to replay (default: stdin)")
    return arg_parser

def main(argv: typing.Optional[typing.List[str]]=None,
        stdin: typing.TextIO=sys.stdin, stdout: typing.TextIO=sys.stdout
        ) -> int:
    args = arg_parser().parse_args(argv)

    if args.version:
        stdout.write("chanlog %s\n" % IRCBot.VERSION)
        return 0

    log_level = args.log_level
    if not log_level:
        log_level = "debug" if args.verbose else "info"

    log = Logging.Log(log_level,
        None if args.no_logging else args.log_dir)
    log.info("Starting chanlog %s (Python v%s)",
        [IRCBot.VERSION, platform.python_version()])

    config = Config.Config(args.config).load()
    bot = make_bot(config, args.database, log)
    bot.load_modules()

    try:
        if args.input:
            with open(args.input, encoding="utf8") as input_file:
                failed = replay(bot, input_file, stdout)
        else:
            failed = replay(bot, stdin, stdout)
    finally:
        bot.database.close()

    if failed:
        log.warn("%d line(s) failed", [failed])
        return 1
    return 0
