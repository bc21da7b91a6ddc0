import datetime, os
import pytest
from chanlog import Config, EventManager, Logging, start

ROOT = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
MODULES = os.path.join(ROOT, "modules")

NICKNAME = "botbot"
FIXED_NOW = datetime.datetime(2024, 3, 9, 9, 21, 37)

@pytest.fixture
def log():
    return Logging.Log("warn")

@pytest.fixture
def events(log):
    return EventManager.EventRoot(log).wrap()

@pytest.fixture
def config(tmp_path):
    config = Config.Config(str(tmp_path / "chanlog.conf"))
    config["nickname"] = NICKNAME
    return config

@pytest.fixture
def bot(config, log):
    bot = start.make_bot(config, ":memory:", log, [MODULES])
    bot.load_modules()
    yield bot
    bot.database.close()

@pytest.fixture
def log_dir(tmp_path):
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    return log_dir

@pytest.fixture
def channel_log(bot, log_dir, monkeypatch):
    """The loaded channel_log module, logging into `log_dir` at FIXED_NOW"""
    module = bot.modules.from_name("channel_log").module
    module.set_setting("user_log_path", str(log_dir))
    monkeypatch.setattr(module, "_now", lambda: FIXED_NOW)
    return module

@pytest.fixture
def read_log(log_dir):
    def _read(name="botzone"):
        path = log_dir / ("%s_20240309.log" % name)
        if not path.exists():
            return []
        return path.read_text(encoding="utf8").splitlines()
    return _read
