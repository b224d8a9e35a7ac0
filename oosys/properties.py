"""Virtual and stored properties.

A property is declared by naming convention on the entity that owns it:

  * `get_<name>` (and optionally `set_<name>`): virtual property. Reads call
    the getter, writes call the setter or fail when there is none.
  * `set_<name>` without a getter: stored property. Writes call the setter
    and then remember the value in the entity's `state`; reads return the
    remembered value.

`getproperty` and `setproperty` are the default resolution hooks installed
on the root entity. They look at one entity only; climbing the chain on
reads is done by oosys.core.read.

    >>> from oosys.core import Entity
    >>> e = Entity(None, {'getproperty': getproperty, 'setproperty': setproperty})
    >>> e.set_color = lambda self, value: None
    >>> e.color = 'red'
    >>> e.color, e.state.color
    ('red', 'red')
"""
import logging

import web

from oosys import hooks
from oosys.core import ReadOnlyProperty, nothing, rawget, rawset, read

logger = logging.getLogger("oosys.properties")

# assignments to these prefixes install hooks instead of storing a value
hook_commands = [
    ('before_', 'beforehook'),
    ('after_', 'afterhook'),
    ('override_', 'overridehook'),
]


def classify(entity, key):
    """Tells what kind of property `key` is on entity itself.

    Returns None for plain slots, otherwise a storage with kind
    ('virtual' or 'stored'), getter and setter.

        >>> from oosys.core import Entity
        >>> e = Entity(None, {'get_area': len, 'set_name': len})
        >>> classify(e, 'area').kind, classify(e, 'name').kind
        ('virtual', 'stored')
        >>> classify(e, 'area').setter is None
        True
        >>> classify(e, 'size') is None
        True
    """
    if not isinstance(key, str):
        return None

    getter = rawget(entity, 'get_' + key)
    setter = rawget(entity, 'set_' + key)
    if getter is not None:
        return web.storage(kind='virtual', getter=getter, setter=setter)
    elif setter is not None:
        return web.storage(kind='stored', getter=None, setter=setter)
    else:
        return None


def getproperty(self, key):
    prop = classify(self, key)
    if prop is None:
        return nothing
    elif prop.kind == 'virtual':
        return prop.getter(self, key)
    else:
        state = rawget(self, 'state')
        return state.get(key) if state is not None else None


def setproperty(self, key, value):
    prop = classify(self, key)
    if prop is not None:
        if prop.kind == 'virtual':
            if prop.setter is None:
                raise ReadOnlyProperty(key=key)
            prop.setter(self, value)
        else:
            state = rawget(self, 'state')
            if state is None:
                state = web.storage()
                rawset(self, 'state', state)
            # if the setter fails, the property is not updated
            prop.setter(self, value)
            state[key] = value
        return

    if isinstance(key, str):
        for prefix, installer in hook_commands:
            if key.startswith(prefix):
                method_name = web.lstrips(key, prefix)
                install = read(self, installer) or _default_installer(self, installer)
                install(method_name, value)
                return

    rawset(self, key, value)


def _default_installer(self, installer):
    f = getattr(hooks, installer)
    return lambda method_name, hook: f(self, method_name, hook)


def gen_properties(self, names, getter=None, setter=None):
    """Installs `get_<name>`/`set_<name>` for every name in names, delegating
    to the generic getter(self, name) and setter(self, name, value).

        >>> from oosys.core import Entity
        >>> e = Entity(None, {'getproperty': getproperty, 'setproperty': setproperty})
        >>> gen_properties(e, ['width', 'height'], lambda self, name: name.upper())
        >>> e.width, e.height
        ('WIDTH', 'HEIGHT')
    """
    names = list(names)
    for name in names:
        if getter:
            self['get_' + name] = _make_getter(getter, name)
        if setter:
            self['set_' + name] = _make_setter(setter, name)
    logger.debug("generated properties %s on %r", names, self)


def _make_getter(getter, name):
    def get(self, key=None):
        return getter(self, name)
    return get


def _make_setter(setter, name):
    def set(self, value):
        return setter(self, name, value)
    return set


if __name__ == "__main__":
    import doctest

    doctest.testmod()
