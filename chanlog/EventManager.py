import time, typing
from chanlog import Logging, utils

class Event(object):
    def __init__(self, name: str, kwargs: typing.Dict[str, typing.Any]):
        self.name = name
        self.kwargs = kwargs

    def __getitem__(self, key: str) -> typing.Any:
        return self.kwargs[key]
    def get(self, key: str, default: typing.Any=None) -> typing.Any:
        return self.kwargs.get(key, default)

class Hook(object):
    def __init__(self, name: str, function: typing.Callable[[Event],
            typing.Any], context: typing.Optional[str],
            kwargs: typing.Dict[str, typing.Any]):
        self.name = name
        self.function = function
        self.context = context
        self.kwargs = kwargs

    def get_kwarg(self, name: str, default: typing.Any=None) -> typing.Any:
        return self.kwargs.get(name, default)

class EventRoot(object):
    """
    Every hook, keyed by lowercase dotted event name (e.g. "command.set"),
    in the order they were added.
    """
    def __init__(self, log: Logging.Log):
        self.log = log
        self._hooks: typing.Dict[str, typing.List[Hook]] = {}

    def wrap(self) -> "Events":
        return Events(self, [], None)

    def add(self, hook: Hook):
        self._hooks.setdefault(hook.name, []).append(hook)
    def hooks(self, name: str) -> typing.List[Hook]:
        return self._hooks.get(name, [])[:]

    def purge(self, context: str):
        for name, hooks in list(self._hooks.items()):
            hooks = [hook for hook in hooks if not hook.context == context]
            if hooks:
                self._hooks[name] = hooks
            else:
                del self._hooks[name]

    def call(self, name: str, kwargs: typing.Dict[str, typing.Any]
            ) -> typing.List[typing.Any]:
        if not utils.is_main_thread():
            raise RuntimeError("Can't call events outside of the main thread")

        hooks = self.hooks(name)
        if not hooks:
            return []

        start = time.monotonic()
        event = Event(name, kwargs)
        # exceptions from a hook go straight back to the caller
        returns = [hook.function(event) for hook in hooks]
        self.log.trace("%s: %d hook(s) took %.3fs",
            [name, len(hooks), time.monotonic()-start])
        return returns

class Events(object):
    """
    An event name on an EventRoot. Hooks added through an Events made
    with new_context() belong to that context.
    """
    def __init__(self, root: EventRoot, path: typing.List[str],
            context: typing.Optional[str]):
        self._root = root
        self._path = path
        self._context = context

    @property
    def name(self) -> str:
        return ".".join(self._path)

    def on(self, name: str) -> "Events":
        return Events(self._root, self._path+name.lower().split("."),
            self._context)
    def new_context(self, context: str) -> "Events":
        return Events(self._root, self._path, context)

    def hook(self, function: typing.Callable[[Event], typing.Any],
            **kwargs) -> Hook:
        hook = Hook(self.name, function, self._context, kwargs)
        self._root.add(hook)
        return hook
    def get_hooks(self) -> typing.List[Hook]:
        return self._root.hooks(self.name)

    def call(self, **kwargs) -> typing.List[typing.Any]:
        return self._root.call(self.name, kwargs)
    def call_for_result(self, default: typing.Any=None, **kwargs
            ) -> typing.Any:
        for returned in self.call(**kwargs):
            if not returned == None:
                return returned
        return default

    def purge_context(self, context: str):
        self._root.purge(context)
