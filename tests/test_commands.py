"""
help and vars core modules, driven through Bot.command
"""

from chanlog import IRCEvent

def test_help_lists_modules(bot):
    assert bot.command("help") == ("Loaded modules: channel_log, help, vars. "
        "Use 'help <module>' for more")

def test_help_module(bot):
    assert bot.command("help", ["channel_log"]) == (
        "Logs all activities in a channel.")

def test_help_module_without_help(bot):
    assert bot.command("help", ["vars"]) == "No help for vars"

def test_help_unknown_module(bot):
    assert bot.command("help", ["nope"]) == "No such module 'nope'"

def test_unknown_command(bot):
    assert bot.command("dance") == "Unknown command 'dance'"

def test_set_string(bot):
    assert bot.command("set", ["channel_log", "log_path", "/tmp"]) == (
        "Set channel_log.log_path to '/tmp'")
    module = bot.modules.from_name("channel_log").module
    assert module.get_setting("user_log_path") == "/tmp"

def test_set_joins_value_words(bot):
    bot.command("set", ["channel_log", "timestamp_fmt", "%d", "%H:%M"])
    module = bot.modules.from_name("channel_log").module
    assert module.get_setting("user_timestamp_fmt") == "%d %H:%M"

def test_set_flag_stored_as_int(bot):
    assert bot.command("set", ["channel_log", "ignore_bot", "off"]) == (
        "Set channel_log.ignore_bot to off")
    module = bot.modules.from_name("channel_log").module
    assert module.get_setting("user_ignore_bot") == 0

    bot.command("set", ["channel_log", "ignore_joinpart", "yes"])
    assert module.get_setting("user_ignore_joinpart") == 1

def test_set_invalid_flag(bot):
    assert bot.command("set", ["channel_log", "ignore_bot", "maybe"]) == (
        "Invalid value for ignore_bot. Example: 1")

def test_set_pattern_not_validated(bot):
    assert bot.command("set", ["channel_log", "ignore_pattern", "("]) == (
        "Set channel_log.ignore_pattern to '('")

def test_set_unknown_variable(bot):
    assert bot.command("set", ["channel_log", "colour", "red"]) == (
        "channel_log has no variable 'colour'")

def test_set_unknown_module(bot):
    assert bot.command("set", ["nope", "log_path", "/tmp"]) == (
        "No such module 'nope'")

def test_set_not_enough_args(bot):
    assert bot.command("set", ["channel_log"]) == (
        "Not enough arguments, usage: set <module> <variable> <value>")

def test_get(bot):
    assert bot.command("get", ["channel_log", "timestamp_fmt"]) == (
        "channel_log.timestamp_fmt = '%H:%M:%S'")
    assert bot.command("get", ["channel_log", "ignore_pattern"]) == (
        "channel_log.ignore_pattern is unset")

def test_unset(bot):
    bot.command("set", ["channel_log", "ignore_pattern", "^!"])
    assert bot.command("unset", ["channel_log", "ignore_pattern"]) == (
        "Unset channel_log.ignore_pattern")
    module = bot.modules.from_name("channel_log").module
    assert module.get_setting("user_ignore_pattern") == None

def test_vars(bot):
    assert bot.command("vars", ["channel_log"]) == ("channel_log: "
        "ignore_bot=on, ignore_joinpart=off, ignore_pattern=(unset), "
        "log_path='.', timestamp_fmt='%H:%M:%S'")

def test_vars_module_without_variables(bot):
    assert bot.command("vars", ["help"]) == "help has no variables"

def test_set_then_log(bot, channel_log, read_log, log_dir):
    bot.command("set", ["channel_log", "ignore_joinpart", "on"])
    bot.dispatch(IRCEvent.JoinEvent("#botzone", "bob"))
    bot.command("set", ["channel_log", "ignore_joinpart", "off"])
    bot.dispatch(IRCEvent.PartEvent("#botzone", "bob"))
    assert read_log() == ["[#botzone 09:21:37] PART: bob"]
