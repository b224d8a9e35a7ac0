import oosys
from oosys.core import Entity, rawget


class TestAllPairs:
    def test_order(self):
        A = oosys.new_class(classname='A')
        A.x = 1
        B = A.subclass()
        B.x = 2
        B.y = 3

        pairs = [(k, v, level) for k, v, level in oosys.allpairs(B) if k in ('x', 'y')]
        assert pairs == [('x', 2, B), ('y', 3, B), ('x', 1, A)]

    def test_ends_at_root(self):
        A = oosys.new_class()
        levels = []
        for k, v, level in oosys.enumerate(A):
            if level not in levels:
                levels.append(level)
        assert levels == [A, oosys.root]

    def test_lazy(self):
        A = oosys.new_class()
        A.x = 1
        pairs = A.allpairs()
        assert next(pairs)[2] is A

    def test_values_are_unbound(self):
        A = oosys.new_class()
        f = lambda self: 1
        A.f = f
        assert ('f', f, A) in list(oosys.allpairs(A))


class TestProperties:
    def test_first_seen_wins(self):
        A = oosys.new_class(classname='A')
        A.x = 1
        A.y = 1
        B = A.subclass()
        B.x = 2

        props = B.properties()
        assert props.x == 2
        assert props['y'] == 1
        assert props.classname == ''
        assert props.subclass is rawget(oosys.root, 'subclass')
        assert oosys.flatten(B) == props


class TestInherit:
    def setup_method(self, method):
        self.A = oosys.new_class(classname='A')
        self.A.x = 'a.x'
        self.A.y = 'a.y'
        self.B = oosys.new_class(classname='B')
        self.B.x = 'b.x'

    def test_no_override(self):
        self.B.inherit(self.A)
        assert rawget(self.B, 'x') == 'b.x'
        assert rawget(self.B, 'y') == 'a.y'
        assert self.B.classname == 'B'
        assert self.B.super is oosys.root

    def test_override(self):
        C = self.A.subclass()
        oosys.inherit(self.B, C, True)
        assert rawget(self.B, 'x') == 'a.x'
        assert self.B.classname == 'B'
        assert self.B.super is oosys.root

    def test_copies_inherited_properties(self):
        C = self.A.subclass()
        D = oosys.new_class()
        D.inherit(C)
        assert rawget(D, 'x') == 'a.x'
        assert rawget(D, 'init') is rawget(oosys.root, 'init')

    def test_state_is_copied(self):
        self.A.set_z = lambda self, value: None
        self.A.z = 1
        self.B.inherit(self.A)
        assert self.B.z == 1
        assert self.B.state is not self.A.state

        self.B.z = 2
        assert (self.A.z, self.B.z) == (1, 2)

    def test_plain_state_is_copied_as_is(self):
        self.A.state = 'plain'
        self.B.inherit(self.A)
        assert rawget(self.B, 'state') == 'plain'

    def test_dispatch_operators(self):
        class Vector(Entity):
            __slots__ = ()

            def __add__(self, other):
                return self.n + other.n

        class Other(Entity):
            __slots__ = ()

        V = oosys.new_class(dispatch=Vector)
        V.n = 1
        O = oosys.new_class(dispatch=Other)
        O.n = 2
        O.inherit(V)
        assert O + V == 3
        assert Other.__add__ is Vector.__add__
        assert '__init__' not in vars(Other)


class TestDetach:
    def test_detach(self):
        A = oosys.new_class(classname='A')
        A.x = 1
        A.f = lambda self: 'f'
        B = A.subclass()
        B.x = 2
        before = oosys.flatten(B)

        B.detach()
        assert B.super is None
        assert oosys.flatten(B) == before
        assert B.x == 2
        assert B.f() == 'f'
        assert B.subclass().super is B

        A.y = 'later'
        A.f = lambda self: 'changed'
        assert B.y is None
        assert B.f() == 'f'

    def test_instance_keeps_classname(self):
        A = oosys.new_class(classname='A')
        a = A()
        assert rawget(a, 'classname') is None
        a.detach()
        assert rawget(a, 'classname') == 'A'
        assert a.classname == 'A'

    def test_detach_root(self):
        A = oosys.new_class()
        A.detach()
        A.detach()
        assert A.super is None
