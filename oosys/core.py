"""Core datastructures for oosys.

An entity is a table of named slots plus a link to its super entity. Every
attribute read and write on an entity goes through `read` and `write`
below, which consult the slots directly and hand the rest over to the
`getproperty` and `setproperty` hooks visible from the entity.

    >>> e = Entity()
    >>> e.x = 1
    >>> e.x
    1
    >>> e.y is None
    True
    >>> child = Entity(e)
    >>> child.x, child.super is e
    (1, True)
"""
import types

import simplejson

from oosys import config


class OOException(Exception):
    def __init__(self, **kw):
        kw.setdefault('error', 'unknown')
        self.d = kw
        Exception.__init__(self)

    def __str__(self):
        return simplejson.dumps(self.d, sort_keys=True)

    def dict(self):
        return dict(self.d)


class ReadOnlyProperty(OOException, AttributeError):
    """Raised when assigning to a property that has a getter but no setter.

    >>> e = ReadOnlyProperty(key="area")
    >>> e.dict()["error"], isinstance(e, AttributeError)
    ('read_only_property', True)
    """

    def __init__(self, **kw):
        kw.setdefault(
            'message', 'trying to set read only property "%s"' % kw.get('key')
        )
        OOException.__init__(self, error='read_only_property', **kw)


class BadSuper(OOException, TypeError):
    def __init__(self, **kw):
        kw.setdefault('message', 'super must be an entity or None')
        OOException.__init__(self, error='bad_super', **kw)


class ChainTooDeep(OOException, RuntimeError):
    def __init__(self, **kw):
        kw.setdefault('message', 'super chain deeper than %s levels' % kw.get('depth'))
        OOException.__init__(self, error='chain_too_deep', **kw)


class NotHooked(OOException, LookupError):
    def __init__(self, **kw):
        OOException.__init__(self, error='not_hooked', **kw)


class Nothing:
    """Marker for "not defined at this level".

    A `getproperty` hook returns it to let the read continue with the super
    entity.

    >>> nothing
    <nothing>
    >>> bool(nothing)
    False
    """

    def __bool__(self):
        return False

    def __repr__(self):
        return "<nothing>"


nothing = Nothing()


class Method:
    """Marker base class for callables stored in slots.

    Like plain functions, instances are bound to the receiver by `bind` when
    they are read from an entity.
    """


class Entity:
    """A class or an instance; both are the same record.

    Python attribute access on an entity is interpreted by the object
    model, so the class carries no public methods of its own. The methods
    every entity answers to live in the slots of the root entity (see
    oosys.objects).

    Subclasses of Entity act as dispatch configurations: they can carry
    Python operators (`__add__`, `__len__`, ...) which apply to every entity
    of that type.
    """

    __slots__ = ('_slots', '_super', '__weakref__')

    # __getitem__ would otherwise make entities iterable by index
    __iter__ = None

    def __init__(self, super=None, slots=None):
        if super is not None and not isinstance(super, Entity):
            raise BadSuper(value=repr(super))
        object.__setattr__(self, '_super', super)
        object.__setattr__(self, '_slots', dict(slots or {}))

    def __getattr__(self, key):
        if key in ('_slots', '_super') or (key.startswith('__') and key.endswith('__')):
            raise AttributeError(key)
        return read(self, key)

    def __setattr__(self, key, value):
        write(self, key, value)

    def __delattr__(self, key):
        try:
            del self._slots[key]
        except KeyError:
            raise AttributeError(key)

    def __getitem__(self, key):
        return read(self, key)

    def __setitem__(self, key, value):
        write(self, key, value)

    def __call__(self, *a, **kw):
        return read(self, 'create')(*a, **kw)

    def __repr__(self):
        return "<entity: %s>" % repr(lookup(self, 'classname'))


def bind(value, receiver):
    """Binds functions found in slots to the receiver of the read."""
    if isinstance(value, (types.FunctionType, Method)):
        return types.MethodType(value, receiver)
    elif isinstance(value, staticmethod):
        return value.__func__
    else:
        return value


def iter_chain(entity):
    """Yields entity, its super, the super's super and so on up to a root.

    Raises ChainTooDeep when more than `config.max_depth` levels are found.
    """
    level = entity
    depth = 0
    while level is not None:
        if depth >= config.max_depth:
            raise ChainTooDeep(depth=depth)
        yield level
        level = level._super
        depth += 1


def rawget(entity, key, default=None):
    return entity._slots.get(key, default)


def rawset(entity, key, value):
    entity._slots[key] = value


def rawdel(entity, key):
    del entity._slots[key]


def has_slot(entity, key):
    return key in entity._slots


def lookup(entity, key, default=None):
    """Finds the nearest slot named key following super links, without
    running any property logic.

        >>> a = Entity(None, {'x': 1})
        >>> b = Entity(a, {'y': 2})
        >>> lookup(b, 'x'), lookup(b, 'y'), lookup(b, 'z')
        (1, 2, None)
    """
    for level in iter_chain(entity):
        if key in level._slots:
            return level._slots[key]
    return default


def read(entity, key, bound=True):
    """Reads property `key` of entity.

    Each level of the chain is asked in turn: its own slot first, then the
    `getproperty` hook visible from that level. The first level which
    defines the key provides the value. When `bound` is true, functions
    found in slots are bound to entity.
    """
    if key == 'super':
        return entity._super

    for level in iter_chain(entity):
        slots = level._slots
        if key in slots:
            value = slots[key]
            return bind(value, entity) if bound else value

        getproperty = lookup(level, 'getproperty')
        if getproperty is not None:
            value = getproperty(level, key)
            if value is not nothing:
                return value
    return None


def write(entity, key, value):
    """Writes property `key` of entity.

    Writes never go up the chain: the entity itself receives the value,
    either as a slot or through its `setproperty` hook.
    """
    if key == 'super':
        if value is not None and not isinstance(value, Entity):
            raise BadSuper(value=repr(value))
        object.__setattr__(entity, '_super', value)
    elif key in entity._slots:
        entity._slots[key] = value
    else:
        setproperty = lookup(entity, 'setproperty')
        if setproperty is None:
            entity._slots[key] = value
        else:
            setproperty(entity, key, value)


if __name__ == "__main__":
    import doctest

    doctest.testmod()
