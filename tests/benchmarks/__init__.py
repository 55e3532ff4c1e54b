"""Performance benchmarks for jsfuzzgen.

Benchmarks use pytest-benchmark to track generation and printing throughput.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
