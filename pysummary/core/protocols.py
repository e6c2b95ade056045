"""
Core protocols for pysummary.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Values, not objects: accumulators return new instances instead of
      mutating themselves
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type
A = TypeVar('A', bound='Accumulator')


@runtime_checkable
class Accumulator(Protocol):
    """
    Minimal protocol for an online (streaming) statistic.

    An accumulator holds O(1) state summarising every observation it has
    seen. A freshly constructed accumulator has count 0 and is the identity
    element of merge().

    Implementations: Mean, GeometricMean, MeanSD, Summary.
    """

    @property
    def count(self) -> int:
        """Number of observations seen."""
        ...

    def put(self: A, element: float) -> A:
        """Return a new accumulator that has also seen `element`."""
        ...

    def merge(self: A, other: A) -> A:
        """
        Return the accumulator of the union of both observation sets.

        Merging with a zero-count accumulator returns an equal accumulator.
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a design and produce a parameter payload.

    Backends are stateless: all configuration is passed via the design
    or at construction time. This makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{domain}'
        Examples: 'cpu_descriptive'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the statistical computation.

        Args:
            design: Validated data container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If design is invalid for this backend
        """
        ...
