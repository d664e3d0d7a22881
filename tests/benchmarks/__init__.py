"""Benchmarks package (pytest-benchmark).

Benchmark modules are named ``bench_*.py`` so the default test run skips
them. Run with::

    pytest tests/benchmarks/ -o python_files='bench_*.py' -v
    pytest tests/benchmarks/ -o python_files='bench_*.py' --benchmark-sort=median

To run them as plain functional checks::

    pytest tests/benchmarks/ -o python_files='bench_*.py' --benchmark-disable
"""
