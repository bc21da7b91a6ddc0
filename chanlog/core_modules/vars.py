import typing
from chanlog import ModuleManager, utils

# user-settable variables live under this prefix in each module's store
PREFIX = "user_"

class Module(ModuleManager.BaseModule):
    def _target(self, name: str) -> ModuleManager.LoadedModule:
        loaded = self.bot.modules.from_name(name)
        if loaded == None:
            raise utils.EventError("No such module '%s'" % name)
        return loaded

    def _settings(self, loaded: ModuleManager.LoadedModule
            ) -> typing.Dict[str, utils.Setting]:
        return {setting.name.lower(): setting for setting in
            loaded.get_exports("set")}

    def _setting(self, loaded: ModuleManager.LoadedModule, name: str
            ) -> utils.Setting:
        settings = self._settings(loaded)
        if not name.lower() in settings:
            raise utils.EventError("%s has no variable '%s'" %
                (loaded.name, name))
        return settings[name.lower()]

    @utils.hook("command.set", min_args=3)
    @utils.kwarg("usage", "<module> <variable> <value>")
    def set_var(self, event):
        loaded = self._target(event["args"][0])
        setting = self._setting(loaded, event["args"][1])

        raw_value = " ".join(event["args"][2:])
        value = setting.parse(raw_value)
        if value == None:
            example = setting.get_example()
            raise utils.EventError("Invalid value for %s%s" % (setting.name,
                (". %s" % example) if example else ""))

        loaded.module.set_setting("%s%s" % (PREFIX, setting.name), value)
        self.log.debug("%s.%s set to %r", [loaded.name, setting.name, value])
        return "Set %s.%s to %s" % (loaded.name, setting.name,
            setting.format(value))

    @utils.hook("command.unset", min_args=2)
    @utils.kwarg("usage", "<module> <variable>")
    def unset_var(self, event):
        loaded = self._target(event["args"][0])
        setting = self._setting(loaded, event["args"][1])

        loaded.module.del_setting("%s%s" % (PREFIX, setting.name))
        return "Unset %s.%s" % (loaded.name, setting.name)

    @utils.hook("command.get", min_args=2)
    @utils.kwarg("usage", "<module> <variable>")
    def get_var(self, event):
        loaded = self._target(event["args"][0])
        setting = self._setting(loaded, event["args"][1])

        value = loaded.module.get_setting("%s%s" % (PREFIX, setting.name))
        if value == None:
            return "%s.%s is unset" % (loaded.name, setting.name)
        return "%s.%s = %s" % (loaded.name, setting.name,
            setting.format(value))

    @utils.hook("command.vars", min_args=1)
    @utils.kwarg("usage", "<module>")
    def list_vars(self, event):
        loaded = self._target(event["args"][0])
        settings = self._settings(loaded)
        if not settings:
            return "%s has no variables" % loaded.name

        stored = dict(loaded.module.find_settings(PREFIX))
        out = []
        for name, setting in sorted(settings.items()):
            value = stored.get("%s%s" % (PREFIX, name), None)
            out.append("%s=%s" % (setting.name,
                "(unset)" if value == None else setting.format(value)))
        return "%s: %s" % (loaded.name, ", ".join(out))
