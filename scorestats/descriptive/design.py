"""
DescriptiveDesign: data wrapper for descriptive statistics.

Wraps a single sample and provides validation and metadata for
the descriptive statistics pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from scorestats.core.validation import to_sample


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Wraps a private float64 copy of one non-empty, finite sample.
    Immutable after construction.

    Construction:
        DescriptiveDesign.from_array(sample)
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str

    @classmethod
    def from_array(cls, sample: ArrayLike, *, name: str = "sample") -> DescriptiveDesign:
        """
        Build DescriptiveDesign from array-like data.

        Parameters
        ----------
        sample : array-like
            1D sequence of real numbers. Lists, tuples, numpy arrays and
            pandas Series (via ``.values``) are accepted.
        name : str
            Parameter name used in error messages.

        Raises
        ------
        InvalidInputError
            If the sample is empty, not 1D, non-numeric or non-finite.
        """
        if hasattr(sample, 'values') and not callable(sample.values):
            sample = sample.values
        data = to_sample(sample, name)
        data.flags.writeable = False
        return cls(_data=data, _n=int(data.shape[0]), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Sample values in input order (read-only)."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"DescriptiveDesign(n={self._n})"
