"""
Z-score view over a sequence.

A z-score expresses a value as signed multiples of the standard deviation
from the mean: (x - mean) / sd. The view is lazy and non-owning: it holds
a reference to the wrapped sequence and recomputes the transform on every
access. Nothing is materialised.

The view offers exactly the traversal the wrapped sequence offers.
Forward iteration is always available; indexing, reversed() and len()
exist only when the wrapped sequence supports them. The matching view
class is assembled once per capability set at construction time.

If the data is a sample of a larger population rather than the whole
population, the values produced are technically t statistics, since the
mean and standard deviation are only estimates. The mechanics are the
same; only the interpretation differs.
"""

from __future__ import annotations

import math
import warnings
from functools import lru_cache
from typing import Any, Iterable, Iterator

from pysummary.core.capabilities import (
    CAPABILITY_BIDIRECTIONAL,
    CAPABILITY_FORWARD,
    CAPABILITY_KNOWN_LENGTH,
    CAPABILITY_RANDOM_ACCESS,
    CAPABILITY_REPEATABLE,
    capabilities_of,
)
from pysummary.core.exceptions import ValidationError
from pysummary.moments._common import ieee_div
from pysummary.moments.solvers import mean_stdev


class ZScore:
    """
    Forward-iterable z-score view.

    Construct with z_score(), which picks the subclass matching the
    wrapped sequence's capabilities.
    """

    _capabilities: frozenset[str] = frozenset({CAPABILITY_FORWARD})

    def __init__(self, data: Iterable[Any], mean: float, sd: float):
        self._data = data
        self._mean = float(mean)
        self._sd = float(sd)
        self._inv_sd = ieee_div(1.0, self._sd)

    def _z(self, element: Any) -> float:
        return (float(element) - self._mean) * self._inv_sd

    def __iter__(self) -> Iterator[float]:
        for element in self._data:
            yield self._z(element)

    @property
    def mean(self) -> float:
        """Mean subtracted from every element."""
        return self._mean

    @property
    def sd(self) -> float:
        """Standard deviation every element is divided by."""
        return self._sd

    def supports(self, capability: str) -> bool:
        """
        Check if this view supports a given capability.

        Unknown capabilities return False, never raise.
        """
        return capability in self._capabilities

    def __repr__(self) -> str:
        caps = ", ".join(sorted(self._capabilities))
        return f"{type(self).__name__}(mean={self._mean!r}, sd={self._sd!r}, capabilities=[{caps}])"


class _RandomAccess:
    def __getitem__(self, index):
        if isinstance(index, slice):
            return z_score(self._data[index], self._mean, self._sd)
        return self._z(self._data[index])


class _Bidirectional:
    def __reversed__(self) -> Iterator[float]:
        for element in reversed(self._data):
            yield self._z(element)


class _KnownLength:
    def __len__(self) -> int:
        return len(self._data)


_MIXINS = (
    (CAPABILITY_RANDOM_ACCESS, _RandomAccess, 'RandomAccess'),
    (CAPABILITY_BIDIRECTIONAL, _Bidirectional, 'Bidirectional'),
    (CAPABILITY_KNOWN_LENGTH, _KnownLength, 'Sized'),
)


@lru_cache(maxsize=None)
def _view_class(capabilities: frozenset[str]) -> type[ZScore]:
    bases = [mixin for cap, mixin, _ in _MIXINS if cap in capabilities]
    if not bases:
        return ZScore

    name = "".join(label for cap, _, label in _MIXINS if cap in capabilities) + "ZScore"
    return type(name, (*bases, ZScore), {'_capabilities': capabilities})


def z_score(
    data: Iterable[Any],
    mean: float | None = None,
    sd: float | None = None,
) -> ZScore:
    """
    Lazy z-score view of `data`.

    Parameters
    ----------
    data : iterable
        Values convertible to float. Indexing, reversed() and len() on the
        view are available exactly when `data` supports them.
    mean, sd : float, optional
        Precomputed mean and standard deviation. Supply both or neither.
        If neither is given, both are computed from `data` up front, which
        iterates the whole sequence once, so `data` must be re-iterable.

    Returns
    -------
    ZScore view

    Raises
    ------
    ValidationError
        If data is not iterable, only one of mean/sd is given, or the
        parameters must be computed from a one-shot iterator.
    """
    caps = capabilities_of(data)
    if CAPABILITY_FORWARD not in caps:
        raise ValidationError(
            f"data: expected an iterable of numbers, got {type(data).__name__}"
        )

    if (mean is None) != (sd is None):
        raise ValidationError(
            "z_score: supply both mean and sd, or neither "
            f"(got mean={mean!r}, sd={sd!r})"
        )

    if mean is None:
        if CAPABILITY_REPEATABLE not in caps:
            raise ValidationError(
                "data: computing mean and sd consumes a one-shot iterator; "
                "pass a re-iterable sequence or precomputed mean and sd"
            )
        msd = mean_stdev(data)
        mean, sd = msd.mean, msd.stdev

    if sd == 0 or math.isnan(sd):
        warnings.warn(
            f"z_score: standard deviation is {sd!r}; z-scores will not be finite",
            RuntimeWarning,
            stacklevel=2,
        )

    return _view_class(caps)(data, mean, sd)
