"""Static inheritance: copying properties instead of linking to them.
"""
import logging

import web

from oosys.chain import properties
from oosys.core import has_slot, rawset

logger = logging.getLogger("oosys.static")

# entries of a dispatch configuration's class dict that are not operators
_type_internals = {
    '__module__',
    '__qualname__',
    '__doc__',
    '__dict__',
    '__weakref__',
    '__slots__',
    '__annotations__',
    '__init__',
    '__firstlineno__',
    '__static_attributes__',
}


def inherit(self, other, override=False):
    """Copies the properties of other (including inherited ones) into self.

    Properties self already has are kept unless override is true. The
    classname and the super link of self are never changed.
    """
    for key, value in properties(other).items():
        if key == 'classname':
            continue
        if override or not has_slot(self, key):
            if key == 'state' and isinstance(value, dict):
                # state belongs to one entity only
                value = web.storage(value)
            rawset(self, key, value)

    src, dst = type(other), type(self)
    if src is not dst:
        _inherit_dispatch(src, dst, override)

    logger.debug("%r inherited from %r (override=%s)", self, other, override)


def _inherit_dispatch(src, dst, override):
    """Copies Python operators defined by the dispatch configuration src to dst."""
    for name, value in list(vars(src).items()):
        if not (name.startswith('__') and name.endswith('__')):
            continue
        if name in _type_internals:
            continue
        if override or name not in vars(dst):
            setattr(dst, name, value)


def detach(self):
    """Makes self independent of its super: everything self inherits
    dynamically is copied into it and the super link is cut.
    """
    super = self.super
    if super is None:
        return

    self.inherit(super)
    # instances have no classname of their own
    self.classname = self.classname
    self.super = None
    logger.debug("%r detached from %r", self, super)
