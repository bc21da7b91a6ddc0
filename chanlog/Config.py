import configparser, os, typing

SECTION = "chanlog"
DEFAULTS = {
    "nickname": "chanlog"
}

class Config(object):
    """The `[chanlog]` section of an INI file. A missing file is empty."""
    def __init__(self, location: str):
        self.location = location
        self._values: typing.Dict[str, str] = {}

    def load(self) -> "Config":
        parser = configparser.ConfigParser(interpolation=None)
        if os.path.isfile(self.location):
            with open(self.location, encoding="utf8") as config_file:
                parser.read_file(config_file)

        self._values = {}
        if parser.has_section(SECTION):
            self._values = {key: value for key, value in
                parser.items(SECTION) if value}
        return self

    def __getitem__(self, key: str) -> str:
        return self._values[key]
    def __setitem__(self, key: str, value: str):
        self._values[key] = value
    def __contains__(self, key: str) -> bool:
        return key in self._values

    def get(self, key: str, default: typing.Any=None) -> typing.Any:
        if key in self._values:
            return self._values[key]
        return DEFAULTS.get(key, default)
