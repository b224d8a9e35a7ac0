"""oosys: object system with virtual properties and method hooks."""

__version__ = "0.1dev"

import web

from oosys import config
from oosys.chain import allpairs, enumerate, flatten  # noqa: F401
from oosys.core import (  # noqa: F401
    BadSuper,
    ChainTooDeep,
    Entity,
    NotHooked,
    OOException,
    ReadOnlyProperty,
    nothing,
)
from oosys.hooks import afterhook, beforehook, overridehook, unhook  # noqa: F401
from oosys.introspect import print_report, report_lines  # noqa: F401
from oosys.objects import create, instantiate, new_class, root, subclass  # noqa: F401
from oosys.properties import gen_properties  # noqa: F401
from oosys.static import detach, inherit  # noqa: F401


def load_config(config_file):
    """Updates oosys.config with the settings of a YAML file."""
    import yaml

    def storify(d):
        if isinstance(d, dict):
            return web.storage((k, storify(v)) for k, v in d.items())
        elif isinstance(d, list):
            return [storify(x) for x in d]
        else:
            return d

    with open(config_file) as f:
        runtime_config = yaml.safe_load(f) or {}

    for k, v in runtime_config.items():
        setattr(config, k, storify(v))
