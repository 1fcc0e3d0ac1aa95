"""sdvote-twavp - time-weighted average voting power strategies."""

__version__ = "0.0.1"

from .strategies import STRATEGIES, get_strategy
from .twavp import average, compute_blocks

__all__ = ["STRATEGIES", "average", "compute_blocks", "get_strategy"]
