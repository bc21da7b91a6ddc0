import typing

# attribute names the decorators leave on functions and Module classes
HOOKS = "_chanlog_hooks"
KWARGS = "_chanlog_kwargs"
EXPORTS = "_chanlog_exports"

def hook(event: str, **kwargs):
    """Call the decorated Module method whenever `event` is called"""
    def _decorate(func):
        func.__dict__.setdefault(HOOKS, []).append((event, kwargs))
        return func
    return _decorate

def kwarg(key: str, value: typing.Any):
    """Extra kwarg for every @hook on the decorated method"""
    def _decorate(func):
        func.__dict__.setdefault(KWARGS, {})[key] = value
        return func
    return _decorate

def export(key: str, value: typing.Any):
    """Publish `value` under `key` for other modules (e.g. "set")"""
    def _decorate(cls):
        # vars() so a subclass starts with none of its parent's exports
        if not EXPORTS in vars(cls):
            setattr(cls, EXPORTS, [])
        getattr(cls, EXPORTS).insert(0, (key, value))
        return cls
    return _decorate

def get_hooks(func: typing.Any) -> typing.List[typing.Tuple[str, dict]]:
    func = getattr(func, "__func__", func)
    shared = getattr(func, KWARGS, {})
    return [(event, dict(shared, **kwargs)) for event, kwargs in
        getattr(func, HOOKS, [])]

def get_exports(cls: type) -> typing.Dict[str, typing.List[typing.Any]]:
    exports: typing.Dict[str, typing.List[typing.Any]] = {}
    for key, value in vars(cls).get(EXPORTS, []):
        exports.setdefault(key, []).append(value)
    return exports
