"""
sd-vote-boost-twavp-vsdtoken

Voting power from the time-weighted vsdToken share of each address,
scaled by the booster's working balance over the gauge working supply.

    ratio_h     = balanceOf(address)_h // totalSupply_h     (per height)
    avg_ratio   = average(ratio_h)                           (whitelist aware)
    vp          = avg_ratio * working_balances(booster) / working_supply

working_supply and working_balances(booster) are read at the most recent
height only.
"""

from typing import Any, Dict, List, Optional, Sequence

from sdvote_twavp.shared.constants import AbiConstants
from sdvote_twavp.shared.logging import get_logger
from sdvote_twavp.shared.services.multicall_service import (
    BatchExecutor,
    ContractCall,
    MulticallExecutor,
)
from sdvote_twavp.strategies.models import GaugeRatioOptions, Snapshot
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

# Reads placed before the per-address reads at the final height
_WORKING_SUPPLY = 0
_GAUGE_TOTAL_SUPPLY = 1
_FINAL_PREFIX = 2

# Reads per address at every height: balanceOf, totalSupply
_CALLS_PER_ADDRESS = 2


def build_calls(addresses: Sequence[str], opts: GaugeRatioOptions):
    """Return (per-height calls, final-height calls placed first)."""
    per_height: List[ContractCall] = []
    for address in addresses:
        per_height.append(
            ContractCall(opts.vsd_token_contract, "balanceOf", (address,))
        )
        per_height.append(ContractCall(opts.vsd_token_contract, "totalSupply"))

    final_prefix = [
        ContractCall(opts.sd_token_gauge, "working_supply"),
        ContractCall(opts.sd_token_gauge, "working_balances", (opts.booster,)),
    ]
    return per_height, final_prefix


def _ratio(balance: int, total_supply: int) -> int:
    # An empty vsdToken supply at a height counts as a zero share
    if total_supply == 0:
        return 0
    return balance // total_supply


def address_ratios(samples: SampleMatrix, address_index: int) -> List[int]:
    """Per-height balanceOf // totalSupply for one address, oldest first."""
    ratios = []
    for height_index in range(len(samples)):
        offset = _FINAL_PREFIX if height_index == samples.final_index else 0
        base = offset + address_index * _CALLS_PER_ADDRESS
        ratios.append(
            _ratio(
                samples.value(height_index, base),
                samples.value(height_index, base + 1),
            )
        )
    return ratios


def compute_voting_power(
    average_ratio: int, working_supply: int, gauge_total_supply: int
) -> float:
    if working_supply == 0:
        return 0.0
    return (
        format_units(average_ratio, 18) * format_units(gauge_total_supply, 18)
    ) / format_units(working_supply, 18)


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

    Args:
        space: Space identifier, informational only
        network: Chain id the addresses live on
        provider: Chain client exposing get_block_number()
        addresses: Addresses to score
        options: Space options (camelCase keys)
        snapshot: Block number or "latest"
        executor: BatchExecutor, defaults to a multicall on provider

    Returns:
        Dict mapping each address to its voting power, in input order
    """
    opts = GaugeRatioOptions.from_dict(options)
    if not addresses:
        return {}
    executor = executor or MulticallExecutor(provider)

    current_block = await resolve_snapshot_block(provider, snapshot)
    blocks = sample_window(
        current_block,
        opts.sample_step,
        opts.sample_size,
        opts.seconds_per_block,
    )
    _logger.info(
        "Sampling %d addresses for space %s on network %s at blocks %s",
        len(addresses),
        space,
        network,
        blocks,
    )

    per_height, final_prefix = build_calls(addresses, opts)
    samples = await fetch_samples(
        executor,
        AbiConstants.VSDTOKEN_GAUGE,
        plan_batches(blocks, per_height, final_calls_before=final_prefix),
    )

    working_supply = samples.value(samples.final_index, _WORKING_SUPPLY)
    gauge_total_supply = samples.value(
        samples.final_index, _GAUGE_TOTAL_SUPPLY
    )

    scores: Dict[str, float] = {}
    for i, address in enumerate(addresses):
        average_ratio = average(
            address_ratios(samples, i), address, opts.whitelisted
        )
        scores[address] = compute_voting_power(
            average_ratio, working_supply, gauge_total_supply
        )
    return scores
