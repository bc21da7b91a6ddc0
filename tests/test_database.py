import pytest
from chanlog import Database

@pytest.fixture
def database(log):
    database = Database.Database(log, ":memory:")
    yield database
    database.close()

def test_get_default(database):
    assert database.module_settings.get("channel_log", "user_log_path") == None
    assert database.module_settings.get("channel_log", "user_log_path",
        ".") == "."

def test_set_get_json_values(database):
    settings = database.module_settings
    settings.set("channel_log", "user_log_path", "/tmp")
    settings.set("channel_log", "user_ignore_bot", 1)
    assert settings.get("channel_log", "user_log_path") == "/tmp"
    assert settings.get("channel_log", "user_ignore_bot") == 1

def test_set_replaces(database):
    settings = database.module_settings
    settings.set("channel_log", "user_log_path", "/tmp")
    settings.set("channel_log", "user_log_path", "/var/log")
    assert settings.get("channel_log", "user_log_path") == "/var/log"

def test_names_are_case_insensitive(database):
    database.module_settings.set("Channel_Log", "User_Log_Path", "/tmp")
    assert database.module_settings.get("channel_log",
        "user_log_path") == "/tmp"

def test_scoped_to_module(database):
    database.module_settings.set("channel_log", "user_log_path", "/tmp")
    assert database.module_settings.get("vars", "user_log_path") == None

def test_find_prefix(database):
    settings = database.module_settings
    settings.set("channel_log", "user_log_path", "/tmp")
    settings.set("channel_log", "user_ignore_bot", 0)
    settings.set("channel_log", "internal", True)
    assert settings.find_prefix("channel_log", "user_") == [
        ("user_ignore_bot", 0), ("user_log_path", "/tmp")]

def test_delete(database):
    database.module_settings.set("channel_log", "user_log_path", "/tmp")
    database.module_settings.delete("channel_log", "user_log_path")
    assert database.module_settings.get("channel_log", "user_log_path",
        "gone") == "gone"

def test_file_database_persists(log, tmp_path):
    location = str(tmp_path / "chanlog.db")
    database = Database.Database(log, location)
    database.module_settings.set("channel_log", "user_log_path", "/tmp")
    database.close()

    database = Database.Database(log, location)
    assert database.module_settings.get("channel_log",
        "user_log_path") == "/tmp"
    database.close()
