"""Method hooks.

A hook customizes a method without touching its definition. Installing a
hook on an entity captures the method the entity currently sees (its own or
an inherited one) and installs a MethodChain in the entity's own slot:

  * before: hook(self, *args) runs first and returns the arguments for the
    original method.
  * after: hook(result) receives the result of the original method and
    returns the new result.
  * override: hook(self, inner, *args) gets the original method and decides
    whether and how to call it.

Hooks installed on the same entity stack up, the most recent one outermost.

    >>> from oosys.core import Entity
    >>> e = Entity(None, {'greet': lambda self, name: 'hello ' + name})
    >>> beforehook(e, 'greet', lambda self, name: name.upper())
    >>> afterhook(e, 'greet', lambda result: result + '!')
    >>> e.greet('bob')
    'hello BOB!'
    >>> unhook(e, 'greet')
    >>> e.greet('bob')
    'hello BOB'
"""
import logging

from oosys.core import Method, NotHooked, has_slot, nothing, rawdel, rawget, rawset, read

logger = logging.getLogger("oosys.hooks")


def noop(self, *a, **kw):
    pass


def _arguments(result):
    """Converts the return value of a before hook to positional arguments.

        >>> _arguments(None), _arguments((1, 2)), _arguments([1, 2])
        ((), (1, 2), ([1, 2],))
    """
    if result is None:
        return ()
    elif isinstance(result, tuple):
        return result
    else:
        return (result,)


class Stage:
    kind = None

    def __init__(self, hook):
        self.hook = hook

    def wrap(self, inner):
        raise NotImplementedError

    def __repr__(self):
        return "<%s: %r>" % (self.kind, self.hook)


class Before(Stage):
    kind = 'before'

    def wrap(self, inner):
        hook = self.hook

        def method(self, *a, **kw):
            return inner(self, *_arguments(hook(self, *a, **kw)), **kw)

        return method


class After(Stage):
    kind = 'after'

    def wrap(self, inner):
        hook = self.hook

        def method(self, *a, **kw):
            return hook(inner(self, *a, **kw))

        return method


class Override(Stage):
    kind = 'override'

    def wrap(self, inner):
        hook = self.hook

        def method(self, *a, **kw):
            return hook(self, inner, *a, **kw)

        return method


class MethodChain(Method):
    """A method made of a base implementation wrapped by hook stages.

    Chains are never modified in place; adding or removing a stage makes a
    new chain, so whoever captured a chain keeps calling the same thing.

        >>> chain = MethodChain('add', lambda self, x: x + 1)
        >>> chain = chain.push(After(lambda result: result * 10))
        >>> chain(None, 1)
        20
        >>> chain.pop()(None, 1)
        2
        >>> chain
        <method 'add': after>
    """

    def __init__(self, name, base, stages=(), replaced=nothing, owner=None):
        self.name = name
        self.base = base
        self.stages = tuple(stages)
        # own slot value the chain took the place of, nothing if inherited
        self.replaced = replaced
        # entity the chain was installed on; inherit may copy it elsewhere
        self.owner = owner

    def _replace(self, stages):
        return MethodChain(self.name, self.base, stages, self.replaced, self.owner)

    def push(self, stage):
        return self._replace(self.stages + (stage,))

    def pop(self):
        return self._replace(self.stages[:-1])

    def compose(self):
        f = self.base
        for stage in self.stages:
            f = stage.wrap(f)
        return f

    def __call__(self, receiver, *a, **kw):
        return self.compose()(receiver, *a, **kw)

    def __repr__(self):
        kinds = ", ".join(stage.kind for stage in self.stages)
        return "<method %s: %s>" % (repr(self.name), kinds)


def _receiverless(f):
    """Adapts a static method to the (self, *args) calling convention of stages."""

    def method(self, *a, **kw):
        return f(*a, **kw)

    return method


def install(self, method_name, stage):
    """Installs stage on top of method_name on self."""
    own = rawget(self, method_name)
    if isinstance(own, MethodChain):
        chain = own.push(stage)
    else:
        method = read(self, method_name, bound=False)
        if method is None:
            method = noop
        elif isinstance(method, staticmethod):
            method = _receiverless(method.__func__)
        elif not callable(method):
            logger.warning("hooking non-callable %r.%s: %r", self, method_name, method)
        replaced = own if has_slot(self, method_name) else nothing
        chain = MethodChain(method_name, method, (stage,), replaced, self)

    rawset(self, method_name, chain)
    logger.debug("installed %s hook on %r.%s", stage.kind, self, method_name)


def beforehook(self, method_name, hook):
    install(self, method_name, Before(hook))


def afterhook(self, method_name, hook):
    install(self, method_name, After(hook))


def overridehook(self, method_name, hook):
    install(self, method_name, Override(hook))


def unhook(self, method_name):
    """Removes the most recently installed hook of method_name on self.

    When the last hook goes away, the method the entity had before hooking
    is restored. A chain that was copied to self by inherit, or whose owner
    has been detached since, is replaced by the method it was hooked on,
    since that method can no longer be found through super.
    """
    chain = rawget(self, method_name)
    if not isinstance(chain, MethodChain):
        raise NotHooked(method=method_name)

    if len(chain.stages) > 1:
        rawset(self, method_name, chain.pop())
    elif chain.replaced is not nothing:
        rawset(self, method_name, chain.replaced)
    elif chain.owner is self and self.super is not None:
        rawdel(self, method_name)
    else:
        rawset(self, method_name, chain.base)
    logger.debug("removed %s hook from %r.%s", chain.stages[-1].kind, self, method_name)


if __name__ == "__main__":
    import doctest

    doctest.testmod()
