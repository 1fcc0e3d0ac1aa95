"""Block sampling, batched sampling and averaging shared by the strategies."""

from .aggregation import average, format_units
from .blocks import compute_blocks
from .planner import SampleMatrix, fetch_samples

__all__ = [
    "SampleMatrix",
    "average",
    "compute_blocks",
    "fetch_samples",
    "format_units",
]
