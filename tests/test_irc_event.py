import pytest
from chanlog import IRCEvent

def test_from_dict_message():
    event = IRCEvent.from_dict({"type": "message", "channel": "#botzone",
        "who": "bob", "body": "Foobar!", "address": "botbot"})
    assert event == IRCEvent.ChatMessage("#botzone", "bob", "Foobar!",
        "botbot")

def test_from_dict_message_defaults():
    event = IRCEvent.from_dict({"type": "message", "channel": "#botzone",
        "who": "bob"})
    assert event.body == ""
    assert event.address == None

@pytest.mark.parametrize("type_name,event_type", [
    ("join", IRCEvent.JoinEvent), ("part", IRCEvent.PartEvent)])
def test_from_dict_joinpart(type_name, event_type):
    event = IRCEvent.from_dict({"type": type_name, "channel": "#botzone",
        "who": "bob", "body": "ignored"})
    assert event == event_type("#botzone", "bob")

def test_from_dict_unknown_type():
    with pytest.raises(ValueError):
        IRCEvent.from_dict({"type": "kick", "channel": "#botzone",
            "who": "bob"})

def test_from_dict_missing_fields():
    with pytest.raises(ValueError):
        IRCEvent.from_dict({"type": "join", "channel": "#botzone"})
