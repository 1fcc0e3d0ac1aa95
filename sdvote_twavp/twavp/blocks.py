"""
Historical block selection for time-weighted averages.

The sampled heights are evenly spread over the window and end at the
snapshot block.
"""

import asyncio
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, List, Union

from sdvote_twavp.shared.constants import TwavpConstants
from sdvote_twavp.shared.exceptions import ConfigurationException


def _round_half_away_from_zero(value: float) -> int:
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def compute_blocks(
    current_block: int,
    sample_count: int,
    window_days: float,
    seconds_per_block: float = TwavpConstants.DEFAULT_SECONDS_PER_BLOCK,
) -> List[int]:
    """
    Compute the block heights to sample, oldest first.

    Args:
        current_block: Snapshot block, the last sampled height
        sample_count: Number of heights to return (at least 2)
        window_days: Length of the window in days
        seconds_per_block: Average block time of the chain

    Returns:
        List of sample_count heights. Heights are not clamped, a window
        longer than the chain history yields negative heights.

    Example:
        >>> compute_blocks(1000000, 3, 1)
        [992800, 996400, 1000000]
    """
    if sample_count < TwavpConstants.MIN_SAMPLES:
        raise ConfigurationException(
            f"At least {TwavpConstants.MIN_SAMPLES} samples are required, "
            f"got {sample_count}"
        )

    if seconds_per_block <= 0:
        raise ConfigurationException(
            f"Block time must be positive, got {seconds_per_block}"
        )

    blocks_per_day = TwavpConstants.SECONDS_PER_DAY / seconds_per_block
    total_window_blocks = blocks_per_day * window_days
    block_interval = total_window_blocks / (sample_count - 1)

    return [
        _round_half_away_from_zero(
            current_block - total_window_blocks + block_interval * i
        )
        for i in range(sample_count)
    ]


async def resolve_snapshot_block(
    provider: Any, snapshot: Union[int, str]
) -> int:
    """Return the snapshot block, asking the chain head for "latest"."""
    if isinstance(snapshot, int) and not isinstance(snapshot, bool):
        return snapshot
    if snapshot != TwavpConstants.LATEST:
        raise ConfigurationException(
            f"Invalid snapshot {snapshot!r}: expected a block number "
            f"or '{TwavpConstants.LATEST}'"
        )

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, provider.get_block_number)


def sample_window(
    current_block: int,
    sample_count: int,
    window_days: float,
    seconds_per_block: float,
) -> List[int]:
    """compute_blocks, rejecting windows that start before genesis."""
    blocks = compute_blocks(
        current_block, sample_count, window_days, seconds_per_block
    )
    if blocks[0] < 0:
        raise ConfigurationException(
            f"Sampling window of {window_days} days reaches before genesis "
            f"from block {current_block}"
        )
    return blocks
