"""
Hypothesis test backends.

Available backends:
    CPUHypothesisBackend: CPU reference implementation
"""

from scorestats.hypothesis.backends.cpu import CPUHypothesisBackend

__all__ = [
    "CPUHypothesisBackend",
]
