import doctest

import pytest

modules = [
    "oosys.chain",
    "oosys.core",
    "oosys.hooks",
    "oosys.objects",
    "oosys.properties",
    "oosys.utils",
]


@pytest.mark.parametrize('module', modules)
def test_doctest(module):
    mod = __import__(module, None, None, ['x'])
    finder = doctest.DocTestFinder()
    tests = finder.find(mod, mod.__name__)
    for test in tests:
        runner = doctest.DocTestRunner(verbose=True)
        failures, tries = runner.run(test)
        if failures:
            pytest.fail("doctest failed: " + test.name)
