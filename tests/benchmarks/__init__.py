"""Benchmarks package, uses pytest-benchmark.

Not part of the default ``testpaths``; run explicitly::

    pytest tests/benchmarks/ -v --benchmark-sort=median
    pytest tests/benchmarks/ --benchmark-disable   # as plain functional tests
"""
