"""
sdvote-balanceof-twavp-pool

Voting power from the time-weighted gauge balance of each address. The
bot address instead receives the sdToken liquidity held by the configured
pools at the most recent height.
"""

from typing import Any, Dict, List, Optional, Sequence

from sdvote_twavp.shared.constants import AbiConstants
from sdvote_twavp.shared.logging import get_logger
from sdvote_twavp.shared.services.multicall_service import (
    BatchExecutor,
    ContractCall,
    MulticallExecutor,
)
from sdvote_twavp.strategies.models import PoolBalanceOptions, Snapshot
from sdvote_twavp.twavp.aggregation import average, format_units
from sdvote_twavp.twavp.blocks import resolve_snapshot_block, sample_window
from sdvote_twavp.twavp.planner import (
    SampleMatrix,
    fetch_samples,
    plan_batches,
)

author = "pierremarsotlyon1"
version = "0.0.1"

_logger = get_logger(__name__)


def build_calls(addresses: Sequence[str], opts: PoolBalanceOptions):
    """Return (per-height calls, final-height calls placed last)."""
    per_height = [
        ContractCall(opts.sd_token_gauge, "balanceOf", (address,))
        for address in addresses
    ]
    final_suffix = [
        ContractCall(pool, "balances", (opts.index_sd_token_in_pool,))
        for pool in opts.pools
    ]
    return per_height, final_suffix


def liquidity_vote_fee(samples: SampleMatrix, address_count: int) -> float:
    """Sum of the pool balances at the most recent height, in tokens."""
    # Pool reads follow the per-address reads at the final height
    final_row = samples.rows[samples.final_index]
    return sum(
        format_units(balance, 18) for balance in final_row[address_count:]
    )


def is_bot(address: str, bot_address: str) -> bool:
    return address.lower() == bot_address.lower()


async def strategy(
    space: Optional[str],
    network: Any,
    provider: Any,
    addresses: Sequence[str],
    options: Dict[str, Any],
    snapshot: Snapshot,
    executor: Optional[BatchExecutor] = None,
) -> Dict[str, float]:
    """
    Compute the voting power of every address.

    Same arguments as the gauge-ratio strategy. Balances of regular
    addresses are converted with the "decimals" option, pool balances
    always with 18 decimals.
    """
    opts = PoolBalanceOptions.from_dict(options)
    if not addresses:
        return {}
    executor = executor or MulticallExecutor(provider)

    current_block = await resolve_snapshot_block(provider, snapshot)
    blocks = sample_window(
        current_block,
        opts.number_of_blocks,
        opts.days_interval,
        opts.seconds_per_block,
    )
    _logger.info(
        "Sampling %d addresses and %d pools for space %s on network %s "
        "at blocks %s",
        len(addresses),
        len(opts.pools),
        space,
        network,
        blocks,
    )

    per_height, final_suffix = build_calls(addresses, opts)
    samples = await fetch_samples(
        executor,
        AbiConstants.POOL_BALANCE,
        plan_batches(blocks, per_height, final_calls_after=final_suffix),
    )

    fee = liquidity_vote_fee(samples, len(addresses))

    scores: Dict[str, float] = {}
    for i, address in enumerate(addresses):
        if is_bot(address, opts.bot_address):
            scores[address] = fee
            continue

        balances: List[int] = samples.column(i)
        scores[address] = format_units(
            average(balances, address, opts.whitelisted), opts.decimals
        )
    return scores
