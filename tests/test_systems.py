import math
import unittest

from attractors.systems import SystemCatalog, Parameters, BUILTIN_SYSTEMS, peterDeJong, henon


class TestParameters(unittest.TestCase):

    def test_mapping(self):
        p = Parameters(a=1, b=0.5)
        assert p["a"] == 1.0 and isinstance(p["a"], float)
        assert len(p) == 2
        assert set(p) == {"a", "b"}
        assert p == {"a": 1.0, "b": 0.5}
        assert Parameters.fromMapping({"a": 1, "b": 0.5}) == p
        assert hash(Parameters(b=0.5, a=1)) == hash(p)

    def test_immutable(self):
        p = Parameters(a=1)
        with self.assertRaises(TypeError):
            p["a"] = 2


class TestBuiltinSystems(unittest.TestCase):

    def test_peter_de_jong(self):
        p = Parameters(a=-0.89567065, b=1.59095860, c=1.8515863, d=2.1974306)
        x, y = peterDeJong((1.0, 1.0), p)
        assert math.isclose(x, math.sin(p["a"]) - math.cos(p["b"]))
        assert math.isclose(y, math.sin(p["c"]) - math.cos(p["d"]))

    def test_henon(self):
        assert henon((0.0, 0.0), Parameters(a=1.4, b=0.3)) == (1.0, 0.0)
        assert henon((1.0, 0.0), Parameters(a=1.4, b=0.3)) == (1 - 1.4, 0.3)

    def test_all_systems_iterate(self):
        for system in BUILTIN_SYSTEMS:
            for parameters in system.parameterSets:
                x, y = system.iterate(system.initialPoint, parameters)
                assert math.isfinite(x) and math.isfinite(y), system.name


class TestSystemCatalog(unittest.TestCase):

    def setUp(self):
        self.catalog = SystemCatalog()

    def test_layout(self):
        assert self.catalog.systemCount() == 7
        assert self.catalog.names()[0] == "Peter de Jong"
        assert self.catalog.names()[-1] == "Custom"
        assert self.catalog.indexOf("Hénon") == 3
        assert self.catalog.isCustomSystem(6)
        assert not self.catalog.isCustomSystem(0)
        with self.assertRaises(KeyError):
            self.catalog.indexOf("Lorenz")

    def test_custom_parameter_set_appended(self):
        for i, system in enumerate(BUILTIN_SYSTEMS):
            sets = self.catalog.parameterSets(i)
            assert len(sets) == len(system.parameterSets) + 1
            assert sets[-1] == system.parameterSets[-1]
            assert self.catalog.customParameterSetIndex(i) == len(sets) - 1

    def test_set_custom_parameters(self):
        before = [len(self.catalog.parameterSets(i)) for i in range(self.catalog.systemCount())]
        self.catalog.setCustomParameters(3, {"a": 1.4, "b": 0.3})
        after = [len(self.catalog.parameterSets(i)) for i in range(self.catalog.systemCount())]
        assert before == after
        assert self.catalog.parameterSet(3, 4) == Parameters(a=1.4, b=0.3)
        # other systems untouched
        assert self.catalog.parameterSet(0, 8) == BUILTIN_SYSTEMS[0].parameterSets[-1]
        # built-ins are not shared with other catalogs
        assert SystemCatalog().parameterSet(3, 4) == BUILTIN_SYSTEMS[3].parameterSets[-1]

    def test_set_custom_iterate(self):
        def fn(point, p):
            return point[0] + 1, point[1]

        self.catalog.setCustomIterate(fn)
        assert self.catalog.system(6).iterate is fn
        assert self.catalog.customIterate() is fn
        assert self.catalog.system(0).iterate is peterDeJong
        assert BUILTIN_SYSTEMS[6].iterate is not fn
        assert self.catalog.systemCount() == 7

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            self.catalog.system(7)
        with self.assertRaises(IndexError):
            self.catalog.system(-1)
        with self.assertRaises(IndexError):
            self.catalog.parameterSet(2, 2)
