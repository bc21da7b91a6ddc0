import dataclasses, glob, importlib.util, inspect, os, sys, typing, uuid
from chanlog import EventManager, Logging, utils

class ModuleException(Exception):
    pass
class ModuleNotFoundException(ModuleException):
    pass
class ModuleNameCollisionException(ModuleException):
    pass
class ModuleLoadException(ModuleException):
    pass
class ModuleCircularDependency(ModuleException):
    pass
class ModuleDependencyNotFulfilled(ModuleException):
    def __init__(self, module: str, dependency: str):
        ModuleException.__init__(self, "%s depends on missing module %s" %
            (module, dependency))
        self.module = module
        self.dependency = dependency

@dataclasses.dataclass
class ModuleDefinition(object):
    name: str
    filename: str
    dependencies: typing.List[str]
    is_core: bool

@dataclasses.dataclass
class BaseModule(object):
    definition: ModuleDefinition
    bot: typing.Any
    events: EventManager.Events
    log: Logging.Log

    def on_load(self):
        pass

    def help(self) -> typing.Optional[str]:
        return None

    # stored under this module's name, so modules can share setting names
    def get_setting(self, setting: str, default: typing.Any=None
            ) -> typing.Any:
        return self.bot.database.module_settings.get(self.definition.name,
            setting, default)
    def set_setting(self, setting: str, value: typing.Any):
        self.bot.database.module_settings.set(self.definition.name,
            setting, value)
    def del_setting(self, setting: str):
        self.bot.database.module_settings.delete(self.definition.name,
            setting)
    def find_settings(self, prefix: str
            ) -> typing.List[typing.Tuple[str, typing.Any]]:
        return self.bot.database.module_settings.find_prefix(
            self.definition.name, prefix)

@dataclasses.dataclass
class LoadedModule(object):
    name: str
    module: BaseModule
    context: str
    import_name: str
    exports: typing.Dict[str, typing.List[typing.Any]]

    def get_exports(self, key: str) -> typing.List[typing.Any]:
        return self.exports.get(key, [])[:]

class ModuleManager(object):
    """
    Finds `<name>.py` files in the core module directory and then each
    extra directory, and loads their `Module` classes. A name found in an
    earlier directory hides the same name further on.
    """
    def __init__(self, events: EventManager.Events, log: Logging.Log,
            core_modules: str, extra_modules: typing.List[str]):
        self.events = events
        self.log = log
        self._directories = [core_modules]+extra_modules
        self.modules: typing.Dict[str, LoadedModule] = {}

    def _define(self, filename: str, is_core: bool) -> ModuleDefinition:
        name = os.path.splitext(os.path.basename(filename))[0].lower()
        dependencies = [value for flag, value in
            utils.parse.hashflags(filename) if flag == "depends-on" and value]
        return ModuleDefinition(name, filename, sorted(dependencies), is_core)

    def list_modules(self) -> typing.Dict[str, ModuleDefinition]:
        definitions: typing.Dict[str, ModuleDefinition] = {}
        for i, directory in enumerate(self._directories):
            for filename in sorted(glob.glob(os.path.join(directory, "*.py"))):
                if os.path.basename(filename).startswith("_"):
                    continue
                definition = self._define(filename, i == 0)
                definitions.setdefault(definition.name, definition)
        return definitions

    def find_module(self, name: str) -> ModuleDefinition:
        for i, directory in enumerate(self._directories):
            filename = os.path.join(directory, "%s.py" % name)
            if os.path.isfile(filename):
                return self._define(filename, i == 0)
        raise ModuleNotFoundException(name)

    def from_name(self, name: str) -> typing.Optional[LoadedModule]:
        return self.modules.get(name.lower(), None)

    def _import(self, definition: ModuleDefinition, import_name: str
            ) -> typing.Type[BaseModule]:
        import_spec = importlib.util.spec_from_file_location(import_name,
            definition.filename)
        if import_spec == None or import_spec.loader == None:
            raise ModuleLoadException("Can't import module '%s'" %
                definition.name)

        module = importlib.util.module_from_spec(import_spec)
        sys.modules[import_name] = module
        import_spec.loader.exec_module(module)

        module_class = getattr(module, "Module", None)
        if not inspect.isclass(module_class):
            raise ModuleLoadException("Module '%s' has no Module class" %
                definition.name)
        return module_class

    def load_module(self, bot: typing.Any, definition: ModuleDefinition
            ) -> LoadedModule:
        if definition.name in self.modules:
            raise ModuleNameCollisionException("Module '%s' is already "
                "loaded" % definition.name)
        for dependency in definition.dependencies:
            if not dependency in self.modules:
                raise ModuleDependencyNotFulfilled(definition.name,
                    dependency)

        context = uuid.uuid4().hex
        import_name = "chanlog_module_%s_%s" % (definition.name, context)
        events = self.events.new_context(context)
        try:
            module_class = self._import(definition, import_name)
            module_object = module_class(definition, bot, events, self.log)
            module_object.on_load()

            # hooks only go live once on_load() has succeeded
            for _, method in inspect.getmembers(module_object,
                    inspect.ismethod):
                for event, kwargs in utils.decorators.get_hooks(method):
                    events.on(event).hook(method, **kwargs)
        except Exception as e:
            events.purge_context(context)
            sys.modules.pop(import_name, None)
            self.log.error("Failed to load module '%s': %s",
                [definition.name, str(e)])
            raise

        loaded = LoadedModule(definition.name, module_object, context,
            import_name, utils.decorators.get_exports(module_class))
        self.modules[loaded.name] = loaded
        self.log.debug("Loaded module '%s'", [loaded.name])
        return loaded

    def _load_order(self, definitions: typing.List[ModuleDefinition]
            ) -> typing.List[ModuleDefinition]:
        """
        Dependencies before the modules that depend on them, otherwise by
        name.
        """
        waiting = {definition.name: definition for definition in definitions}
        for definition in definitions:
            for dependency in definition.dependencies:
                if not dependency in waiting:
                    raise ModuleDependencyNotFulfilled(definition.name,
                        dependency)

        ordered: typing.List[ModuleDefinition] = []
        while waiting:
            placed = {definition.name for definition in ordered}
            ready = sorted(name for name, definition in waiting.items()
                if set(definition.dependencies) <= placed)
            if not ready:
                raise ModuleCircularDependency("Circular dependency between: "
                    "%s" % ", ".join(sorted(waiting)))
            ordered.extend(waiting.pop(name) for name in ready)
        return ordered

    def load_modules(self, bot: typing.Any):
        for definition in self._load_order(list(
                self.list_modules().values())):
            self.load_module(bot, definition)
