"""Core utilities shared across syntax and generation layers.

Both the syntax layer (tree model, printing) and the generation layer
(dispatch, generators) depend on these utilities. Isolating them here keeps
a clean dependency graph:

    core <- syntax <- generation

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded
    RandomSource: Seedable PRNG shared by one generation run

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError
from .random_source import RandomSource

__all__ = ["DepthGuard", "DepthLimitExceededError", "RandomSource"]
