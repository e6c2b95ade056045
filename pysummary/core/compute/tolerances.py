"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different accumulation orders:
- CPU FP64 (reference): sequential one-element-at-a-time accumulation
  compared against a closed-form or library reference
- Lane-reordered: lane-batched accumulation compared against sequential
  accumulation; only the rounding order differs

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Sequential accumulation against a reference value
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, sequential accumulation',
)

# Lane-batched against sequential: same mathematics, different rounding order
LANE_REORDERED = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='lane_reordered',
    description='CPU double precision, lane-batched accumulation order',
)

# Published reference values quoted to four significant digits
APPROX = ToleranceTier(
    rtol=1e-3,
    atol=1e-4,
    name='approx',
    description='Four significant digits, for published reference values',
)


def select_tolerance(lane_batched: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a given accumulation order."""
    if lane_batched:
        return LANE_REORDERED
    return CPU_FP64
