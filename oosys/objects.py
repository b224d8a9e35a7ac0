"""The root entity and the construction API.

    >>> Point = new_class(classname='Point')
    >>> def init(self, x=0, y=0):
    ...     self.x = x
    ...     self.y = y
    >>> Point.init = init
    >>> p = Point(1, 2)
    >>> p.x, p.y, p.classname, p.super is Point
    (1, 2, 'Point', True)
    >>> Point.super is root
    True
"""
from oosys import chain, hooks, introspect, static
from oosys.core import Entity
from oosys.properties import gen_properties, getproperty, setproperty


def subclass(self, classname=''):
    """Returns a new class whose super is self."""
    return type(self)(self, {'classname': classname})


def init(self, *a, **kw):
    pass


def create(self, *a, **kw):
    """Returns a new instance of self, initialized by calling its init
    method with the given arguments.
    """
    o = type(self)(self)
    o.init(*a, **kw)
    return o


instantiate = create

# every other entity inherits from root, directly or indirectly
root = Entity(
    None,
    {
        'classname': 'object',
        'subclass': subclass,
        'init': init,
        'create': create,
        'getproperty': getproperty,
        'setproperty': setproperty,
        'gen_properties': gen_properties,
        'beforehook': hooks.beforehook,
        'afterhook': hooks.afterhook,
        'overridehook': hooks.overridehook,
        'unhook': hooks.unhook,
        'allpairs': chain.allpairs,
        'properties': chain.properties,
        'inherit': static.inherit,
        'detach': static.detach,
        'inspect': introspect.print_report,
    },
)


def new_class(parent=None, classname='', dispatch=None):
    """Creates a class.

    The class is a subclass of parent, or of root when no parent is given.
    `dispatch` is an Entity subclass to use for the new class instead of the
    parent's type; everything created from the class shares it.
    """
    if parent is None:
        parent = root

    if dispatch is None:
        cls = parent.subclass()
    else:
        cls = dispatch(parent)
    cls.classname = classname
    return cls


if __name__ == "__main__":
    import doctest

    doctest.testmod()
