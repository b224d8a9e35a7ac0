"""Inspecting entities.

The report lists, for self and each of its supers, the properties and slots
defined on that level (and not overridden by a more specific one) together
with their current values:

    from self (Circle):
       area (r)        	78.5
       radius (rw)     	5
    from super #1 (Shape):
       draw            	<function draw>
"""
from oosys import config
from oosys.chain import allpairs
from oosys.core import iter_chain, read
from oosys.utils import prepr

# getter/setter letters to access mode
props_conv = {'g': 'r', 's': 'w', 'gs': 'rw', 'sg': 'rw'}

# slots which are part of the object model, not user data
hidden_keys = ['super', 'state', 'classname']


def _header(self, level, depth):
    if level is self:
        name = 'self'
    else:
        name = 'super #%d' % depth

    classname = read(level, 'classname')
    if classname:
        name += ' (%s)' % classname
    return 'from %s:' % name


def report_lines(self, formatter=None):
    """Yields the lines of the inspect report of self."""
    formatter = formatter or config.get('report_formatter') or prepr
    width = config.get('pad_width', 16)

    depths = {}
    for depth, level in enumerate(iter_chain(self)):
        depths[id(level)] = depth

    levels = []  # [level, ...] in chain order
    keys = {}  # {id(level): set of plain keys}
    props = {}  # {id(level): {prop: 'g' | 's' | 'gs' | 'sg'}}
    sources = {}  # {key: level where the key is first seen}

    for key, value, level in allpairs(self):
        sources.setdefault(key, level)
        if id(level) not in keys:
            levels.append(level)
            keys[id(level)] = set()
            props[id(level)] = {}

        if sources[key] is not level:
            continue

        if isinstance(key, str) and key.startswith(('get_', 'set_')):
            prop = key[4:]
            props[id(level)][prop] = props[id(level)].get(prop, '') + key[0]
        elif key not in hidden_keys:
            keys[id(level)].add(key)

    for level in levels:
        yield _header(self, level, depths[id(level)])
        level_props = props[id(level)]
        for name in sorted(level_props, key=str):
            label = '%s (%s)' % (name, props_conv[level_props[name]])
            value = read(level, name, bound=False)
            yield '   ' + label.ljust(width) + '\t' + formatter(value)
        for name in sorted(keys[id(level)], key=str):
            value = read(level, name, bound=False)
            yield '   ' + str(name).ljust(width) + '\t' + formatter(value)


def print_report(self, sink=None, formatter=None):
    """Writes the inspect report of self, one line at a time, to sink
    (print by default).
    """
    sink = sink or print
    for line in report_lines(self, formatter):
        sink(line)


inspect = print_report
