"""Deep, cycle-safe freezing of object graphs.

Instances of ordinary classes are locked in place: their class is swapped for
a cached subclass refusing ``__setattr__`` and ``__delattr__``, so
``freeze(obj) is obj``. Python offers no way to lock a built-in container in
place, so mutable mappings, sequences and sets are replaced by the
:class:`FrozenDict`, :class:`FrozenList` and :class:`FrozenSet` counterparts.
A counterpart is registered before its items are frozen, which reproduces
cycles and shared nodes in the frozen graph.
"""
import types
from collections.abc import MutableMapping, MutableSequence, MutableSet
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Iterator

from lambpy.errors import FrozenError
from lambpy.logger import get_logger

__all__ = ["FrozenDict", "FrozenList", "FrozenSet", "freeze", "is_frozen"]

logger = get_logger(__name__)

FROZEN_MARKER = "__lambpy_frozen__"

_SCALARS = (type(None), bool, int, float, complex, str, bytes, Decimal, Fraction, range, Enum)
_OPAQUE = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    types.MappingProxyType,
)
_MISSING = object()


def _refuse(self, *args, **kwargs):
    raise FrozenError(f"{type(self).__name__} object is frozen")


def _check_empty(frozen):
    if frozen:
        _refuse(frozen)


class FrozenDict(dict):
    """A ``dict`` whose mutators raise :class:`~lambpy.errors.FrozenError`."""
    __slots__ = ()
    __lambpy_frozen__ = True

    __setitem__ = __delitem__ = __ior__ = _refuse
    clear = pop = popitem = setdefault = update = _refuse

    def __repr__(self):
        return f"FrozenDict({dict.__repr__(self)})"

    # items travel as state so the empty container is memoized first
    def __reduce__(self):
        return type(self), (), dict(self)

    def __setstate__(self, state):
        _check_empty(self)
        dict.update(self, state)


class FrozenList(list):
    """A ``list`` whose mutators raise :class:`~lambpy.errors.FrozenError`."""
    __slots__ = ()
    __lambpy_frozen__ = True

    __setitem__ = __delitem__ = __iadd__ = __imul__ = _refuse
    append = extend = insert = pop = remove = clear = sort = reverse = _refuse

    def __repr__(self):
        return f"FrozenList({list.__repr__(self)})"

    def __reduce__(self):
        return type(self), (), list(self)

    def __setstate__(self, state):
        _check_empty(self)
        list.extend(self, state)


class FrozenSet(set):
    """A ``set`` whose mutators raise :class:`~lambpy.errors.FrozenError`."""
    __slots__ = ()
    __lambpy_frozen__ = True

    __ior__ = __iand__ = __isub__ = __ixor__ = _refuse
    add = discard = remove = pop = clear = update = _refuse
    intersection_update = difference_update = symmetric_difference_update = _refuse

    def __repr__(self):
        return f"FrozenSet({set.__repr__(self)})"

    def __reduce__(self):
        return type(self), (), set(self)

    def __setstate__(self, state):
        _check_empty(self)
        set.update(self, state)


def _refuse_setattr(self, name, value):
    raise FrozenError(f"{type(self).__name__} object is frozen, can't set {name!r}")


def _refuse_delattr(self, name):
    raise FrozenError(f"{type(self).__name__} object is frozen, can't delete {name!r}")


_FROZEN_TYPES: dict[type, type] = {}


def _frozen_type(cls: type) -> type | None:
    """Cached subclass of *cls* refusing attribute mutation, None if *cls* can't be subclassed."""
    frozen = _FROZEN_TYPES.get(cls)
    if frozen is None:
        namespace = {
            "__slots__": (),
            "__setattr__": _refuse_setattr,
            "__delattr__": _refuse_delattr,
            FROZEN_MARKER: True,
            "__module__": cls.__module__,
            "__qualname__": cls.__qualname__,
        }
        try:
            frozen = type(cls)(cls.__name__, (cls,), namespace)
        except TypeError:
            return None
        frozen = _FROZEN_TYPES.setdefault(cls, frozen)
    return frozen


def _is_frozen_node(value: Any) -> bool:
    return isinstance(value, _SCALARS) or getattr(type(value), FROZEN_MARKER, False)


def _attributes(value: Any) -> Iterator[tuple[str, Any, bool]]:
    """Yield ``(name, value, in_dict)`` for the instance attributes of *value*."""
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        for name, attr in list(instance_dict.items()):
            yield name, attr, True
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{cls.__name__.lstrip('_')}{name}"
            attr = getattr(value, name, _MISSING)
            if attr is not _MISSING:
                yield name, attr, False


def _has_attributes(value: Any) -> bool:
    if isinstance(getattr(value, "__dict__", None), dict):
        return True
    return any(cls.__dict__.get("__slots__") for cls in type(value).__mro__)


def _rebuild_tuple(cls, items):
    if cls is tuple:
        return tuple(items)
    if hasattr(cls, "_make"):
        return cls._make(items)
    return cls(items)


class _Freezer:
    """One freezing pass. ``visited`` maps ``id(node)`` to ``(node, frozen_node)``.

    Holding the original node keeps its id from being reused while the pass
    runs.
    """

    def __init__(self) -> None:
        self.visited: dict[int, tuple[Any, Any]] = {}
        self.instances: list[Any] = []
        self._open_tuples: set[int] = set()
        self._stale = False

    def freeze(self, value: Any) -> Any:
        seen = self.visited.get(id(value))
        if seen is not None:
            if id(value) in self._open_tuples:
                self._stale = True
            return seen[1]
        if _is_frozen_node(value) or isinstance(value, _OPAQUE):
            return value
        return self._visit(value)

    def result(self, value: Any, frozen: Any) -> Any:
        """The final frozen form of the root *value*, after relinking back-edges."""
        if not self._stale:
            return frozen
        self._relink()
        return self.visited.get(id(value), (value, frozen))[1]

    def _visit(self, value: Any) -> Any:
        if isinstance(value, MutableMapping):
            return self._freeze_mapping(value)
        if isinstance(value, MutableSet):
            return self._freeze_set(value)
        if isinstance(value, bytearray):
            frozen = bytes(value)
            self.visited[id(value)] = (value, frozen)
            return frozen
        if isinstance(value, MutableSequence):
            return self._freeze_sequence(value)
        if isinstance(value, tuple):
            return self._freeze_tuple(value)
        if isinstance(value, frozenset):
            self.visited[id(value)] = (value, value)
            for item in value:
                self.freeze(item)
            return value
        if _has_attributes(value):
            return self._lock_instance(value)
        self.visited[id(value)] = (value, value)
        return value

    def _freeze_mapping(self, value):
        frozen = FrozenDict()
        self.visited[id(value)] = (value, frozen)
        for key, item in list(value.items()):
            dict.__setitem__(frozen, key, self.freeze(item))
        return frozen

    def _freeze_sequence(self, value):
        frozen = FrozenList()
        self.visited[id(value)] = (value, frozen)
        for item in list(value):
            list.append(frozen, self.freeze(item))
        return frozen

    def _freeze_set(self, value):
        frozen = FrozenSet()
        self.visited[id(value)] = (value, frozen)
        for item in list(value):
            set.add(frozen, self.freeze(item))
        return frozen

    def _freeze_tuple(self, value):
        # a back-edge reaching this tuple before it is rebuilt gets the original, see _relink
        self.visited[id(value)] = (value, value)
        self._open_tuples.add(id(value))
        try:
            items = [self.freeze(item) for item in value]
        finally:
            self._open_tuples.discard(id(value))
        if all(new is old for new, old in zip(items, value)):
            return value
        frozen = _rebuild_tuple(type(value), items)
        self.visited[id(value)] = (value, frozen)
        return frozen

    def _lock_instance(self, value):
        self.visited[id(value)] = (value, value)
        self.instances.append(value)
        for name, attr, in_dict in _attributes(value):
            frozen_attr = self.freeze(attr)
            if frozen_attr is not attr:
                _write_attribute(value, name, frozen_attr, in_dict)
        frozen_type = _frozen_type(type(value))
        if frozen_type is None:
            logger.debug("%s can't be subclassed, left unlocked", type(value).__qualname__)
            return value
        try:
            object.__setattr__(value, "__class__", frozen_type)
        except TypeError:
            logger.debug("%s instances can't change class, left unlocked", type(value).__qualname__)
        return value

    def _relink(self):
        """Swap the originals captured by back-edges for the rebuilt tuples.

        Tuples can't be patched, so a tuple holding a replaced tuple is
        rebuilt again until none is left. Tuples only nest acyclically, so this
        ends. Frozen counterparts and locked instances are then patched in
        place.
        """
        replaced: dict[int, Any] = {}
        outdated = []  # keeps the ids in ``replaced`` from being reused
        for old, new in self.visited.values():
            if isinstance(old, tuple) and new is not old:
                replaced[id(old)] = new

        def current(item):
            return replaced.get(id(item), item)

        changed = True
        while changed:
            changed = False
            for key, (old, new) in list(self.visited.items()):
                if not isinstance(new, tuple):
                    continue
                items = [current(item) for item in new]
                if all(a is b for a, b in zip(items, new)):
                    continue
                rebuilt = _rebuild_tuple(type(new), items)
                outdated.append(new)
                replaced[id(old)] = replaced[id(new)] = rebuilt
                self.visited[key] = (old, rebuilt)
                changed = True

        for _, new in self.visited.values():
            if isinstance(new, FrozenDict):
                for key, item in list(dict.items(new)):
                    dict.__setitem__(new, key, current(item))
            elif isinstance(new, FrozenList):
                for index, item in enumerate(list(new)):
                    list.__setitem__(new, index, current(item))
        for instance in self.instances:
            for name, attr, in_dict in _attributes(instance):
                if current(attr) is not attr:
                    _write_attribute(instance, name, current(attr), in_dict)
        logger.debug("relinked %d rebuilt tuple(s) reached by back-edges", len(replaced))


def _write_attribute(instance, name, value, in_dict):
    if in_dict:
        instance.__dict__[name] = value
    else:
        object.__setattr__(instance, name, value)


def freeze(value: Any) -> Any:
    """Make *value* and everything reachable from it immutable.

    Scalars and already frozen values are returned as they are. Instances are
    locked in place and returned; mutable built-in containers are replaced by
    frozen counterparts, so always use the returned value.

    >>> class Config: pass
    >>> config = Config()
    >>> config.hosts = ["a", "b"]
    >>> config.itself = config
    >>> freeze(config) is config
    True
    >>> config.hosts
    FrozenList(['a', 'b'])
    """
    freezer = _Freezer()
    frozen = freezer.result(value, freezer.freeze(value))
    logger.debug("froze %d node(s) reachable from %s", len(freezer.visited), type(value).__qualname__)
    return frozen


def is_frozen(value: Any) -> bool:
    """Whether *value* itself can't be mutated.

    Tuples and frozensets are frozen when all their items are.
    """
    if _is_frozen_node(value):
        return True
    if isinstance(value, (tuple, frozenset)):
        return all(is_frozen(item) for item in value)
    return False
