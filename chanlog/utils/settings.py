import typing

class Setting(object):
    """
    A variable a module lets users change. `parse` turns user input into
    the stored value, returning None when the input isn't valid.
    """
    def __init__(self, name: str, help: str=None,
            example: typing.Optional[str]=None):
        self.name = name
        self.help = help
        self.example = example

    def parse(self, value: str) -> typing.Any:
        return value

    def format(self, value: typing.Any) -> str:
        return repr(value)

    def get_example(self) -> typing.Optional[str]:
        if self.example == None:
            return None
        return "Example: %s" % self.example

TRUE_WORDS = {"1", "on", "true", "y", "yes"}
FALSE_WORDS = {"0", "off", "false", "n", "no"}

class FlagSetting(Setting):
    """On/off, stored as 1 or 0"""
    def __init__(self, name: str, help: str=None,
            example: typing.Optional[str]="1"):
        Setting.__init__(self, name, help, example)

    def parse(self, value: str) -> typing.Optional[int]:
        word = value.strip().lower()
        if word in TRUE_WORDS:
            return 1
        elif word in FALSE_WORDS:
            return 0
        return None

    def format(self, value: typing.Any) -> str:
        return "on" if value else "off"
