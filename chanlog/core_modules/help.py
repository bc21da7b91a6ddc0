from chanlog import ModuleManager, utils

class Module(ModuleManager.BaseModule):
    @utils.hook("command.help")
    @utils.kwarg("usage", "[module]")
    def on_help(self, event):
        if not event["args"]:
            names = sorted(module.name for module in
                self.bot.modules.modules.values())
            return "Loaded modules: %s. Use 'help <module>' for more" % (
                ", ".join(names))

        name = event["args"][0]
        loaded = self.bot.modules.from_name(name)
        if loaded == None:
            raise utils.EventError("No such module '%s'" % name)

        module_help = loaded.module.help()
        if not module_help:
            return "No help for %s" % loaded.name
        return module_help
