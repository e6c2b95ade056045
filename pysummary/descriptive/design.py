"""
DescriptiveDesign: data wrapper for describe().

Wraps a 1D data vector and provides validation and metadata for
the descriptive statistics pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pysummary.core.exceptions import ValidationError
from pysummary.core.validation import check_1d, check_array


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Wraps a data vector of n observations that may contain NaN values.
    NaN is not removed: it propagates into every statistic, as IEEE
    arithmetic dictates. Immutable after construction.

    Construction:
        DescriptiveDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str | None

    @classmethod
    def from_array(cls, data) -> DescriptiveDesign:
        """
        Build DescriptiveDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D data vector. Can be a numpy array, a list, a pandas Series,
            or any array-like with a .values attribute.
        """
        if hasattr(data, 'values') and not isinstance(data, np.ndarray):
            name = getattr(data, 'name', None)
            name = str(name) if name is not None else None
            raw = data.values
        else:
            name = None
            raw = data

        data_array = np.asarray(check_array(raw, 'data'), dtype=np.float64)
        check_1d(data_array, 'data')

        return cls._build(data_array, name=name)

    @classmethod
    def _build(
        cls,
        data: NDArray,
        name: str | None = None,
    ) -> DescriptiveDesign:
        """Internal builder with validation."""
        n = data.shape[0]

        if n < 1:
            raise ValidationError(f"Need at least 1 observation, got {n}")

        # Check for inf values (NaN is allowed and propagates)
        inf_mask = np.isinf(data)
        if np.any(inf_mask):
            raise ValidationError(
                f"Data contains infinite values (first at index {int(np.argmax(inf_mask))})"
            )

        return cls(_data=data, _n=n, _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Data vector (n,), may contain NaN."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str | None:
        """Series name, or None if not available."""
        return self._name

    @property
    def n_missing(self) -> int:
        """Number of NaN values."""
        return int(np.sum(np.isnan(self._data)))

    @property
    def has_missing(self) -> bool:
        """Whether data has any NaN values."""
        return bool(np.any(np.isnan(self._data)))

    def __repr__(self) -> str:
        missing = f", missing={self.n_missing}" if self.has_missing else ""
        return f"DescriptiveDesign(n={self._n}{missing})"
