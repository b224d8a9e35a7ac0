"""Walking the inheritance chain.
"""
import web

from oosys.core import iter_chain


def allpairs(self):
    """Yields (key, value, level) for every slot of self, then of self.super
    and so on up to the root. A key defined on several levels is yielded once
    per level, the most specific level first.

        >>> from oosys.core import Entity
        >>> a = Entity(None, {'x': 1, 'y': 2})
        >>> b = Entity(a, {'x': 10})
        >>> [(k, v, level is b) for k, v, level in allpairs(b)]
        [('x', 10, True), ('x', 1, False), ('y', 2, False)]
    """
    for level in iter_chain(self):
        # snapshot, callers may write to the entity while iterating
        for key, value in list(level._slots.items()):
            yield key, value, level


def properties(self):
    """Returns all properties of self including the inherited ones. The value
    found on the most specific level wins.

        >>> from oosys.core import Entity
        >>> a = Entity(None, {'x': 1, 'y': 2})
        >>> b = Entity(a, {'x': 10})
        >>> sorted(properties(b).items())
        [('x', 10), ('y', 2)]
    """
    values = web.storage()
    for key, value, level in allpairs(self):
        if key not in values:
            values[key] = value
    return values


enumerate = allpairs
flatten = properties


if __name__ == "__main__":
    import doctest

    doctest.testmod()
