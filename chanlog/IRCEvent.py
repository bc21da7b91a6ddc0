import dataclasses, typing

@dataclasses.dataclass
class ChannelEvent(object):
    channel: str
    who: str

@dataclasses.dataclass
class ChatMessage(ChannelEvent):
    body: str = ""
    # set when the message was directed at a nickname ("nick: hello")
    address: typing.Optional[str] = None

@dataclasses.dataclass
class JoinEvent(ChannelEvent):
    pass

@dataclasses.dataclass
class PartEvent(ChannelEvent):
    pass

EVENT_TYPES: typing.Dict[str, typing.Type[ChannelEvent]] = {
    "message": ChatMessage,
    "join": JoinEvent,
    "part": PartEvent
}

def from_dict(data: typing.Dict[str, typing.Any]) -> ChannelEvent:
    type_name = data.get("type", "")
    if not type_name in EVENT_TYPES:
        raise ValueError("Unknown event type '%s'" % type_name)
    if not data.get("channel") or not data.get("who"):
        raise ValueError("Events need both 'channel' and 'who'")

    if type_name == "message":
        return ChatMessage(data["channel"], data["who"],
            data.get("body", ""), data.get("address", None))
    return EVENT_TYPES[type_name](data["channel"], data["who"])
