"""Run orchestration: load a graph document, run an algorithm, report.

This package backs the command-line interface, including configuration
and result types.
"""

from monograph.engine.config import ALGORITHMS, RunConfig, RunResult
from monograph.engine.runner import run_algorithm

__all__ = [
    "ALGORITHMS",
    "RunConfig",
    "RunResult",
    "run_algorithm",
]
