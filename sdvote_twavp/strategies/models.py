"""
Typed option sets for the TWAVP strategies.

Options arrive as the camelCase dictionaries stored in the space
configuration. They are parsed and validated here, before any network
activity, so a bad configuration never costs an RPC call.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from eth_utils import is_address

from sdvote_twavp.shared.constants import TwavpConstants
from sdvote_twavp.shared.exceptions import ConfigurationException

Snapshot = Union[int, str]  # Block number or TwavpConstants.LATEST


# =============================================================================
# FIELD HELPERS
# =============================================================================


def _require(options: Dict[str, Any], key: str) -> Any:
    if key not in options or options[key] is None:
        raise ConfigurationException(f"Missing required option: {key}")
    return options[key]


def _address(options: Dict[str, Any], key: str) -> str:
    value = _require(options, key)
    if not isinstance(value, str) or not is_address(value):
        raise ConfigurationException(
            f"Invalid option {key}: {value!r} is not a valid address"
        )
    return value


def _number(options: Dict[str, Any], key: str, default: Any = None) -> float:
    value = options.get(key, default)
    if value is None:
        raise ConfigurationException(f"Missing required option: {key}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationException(
            f"Invalid option {key}: {value!r} is not a number"
        )
    if not math.isfinite(value):
        raise ConfigurationException(
            f"Invalid option {key}: {value!r} is not finite"
        )
    return value


def _integer(options: Dict[str, Any], key: str, default: Any = None) -> int:
    value = _number(options, key, default)
    if int(value) != value:
        raise ConfigurationException(
            f"Invalid option {key}: {value!r} is not an integer"
        )
    return int(value)


def _whitelist(options: Dict[str, Any]) -> List[str]:
    entries = options.get("whiteListedAddress") or []
    if not isinstance(entries, list) or not all(
        isinstance(entry, str) for entry in entries
    ):
        raise ConfigurationException(
            "Invalid option whiteListedAddress: expected a list of addresses"
        )
    return list(entries)


# =============================================================================
# GUARDS
# =============================================================================


def check_sample_count(sample_count: int) -> None:
    """Cap on the number of sampled heights, one multicall each."""
    if sample_count > TwavpConstants.MAX_SAMPLES:
        raise ConfigurationException(
            f"maximum of {TwavpConstants.MAX_SAMPLES} call"
        )
    if sample_count < TwavpConstants.MIN_SAMPLES:
        raise ConfigurationException(
            f"minimum of {TwavpConstants.MIN_SAMPLES} call"
        )


def check_window(key: str, window_days: float) -> None:
    """The window reaches back from the snapshot, never forward."""
    if window_days < 0:
        raise ConfigurationException(
            f"Invalid option {key}: window of {window_days} days is negative"
        )


def check_whitelist(whitelist: List[str]) -> None:
    if len(whitelist) > TwavpConstants.MAX_WHITELIST:
        raise ConfigurationException(
            f"maximum of {TwavpConstants.MAX_WHITELIST} whitelisted address"
        )


# =============================================================================
# OPTION SETS
# =============================================================================


@dataclass
class GaugeRatioOptions:
    """Options of the vsdToken / gauge working-supply strategy."""

    sample_step: int  # Number of sampled heights
    sample_size: float  # Window length in days
    vsd_token_contract: str  # vsdToken, read for balanceOf/totalSupply
    sd_token_gauge: str  # Gauge, read for working supply/balances
    booster: str  # Account whose working balance is the gauge total
    whitelisted: List[str] = field(default_factory=list)
    seconds_per_block: float = TwavpConstants.DEFAULT_SECONDS_PER_BLOCK

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> "GaugeRatioOptions":
        # Caps first, they are the cheapest and most common mistakes
        sample_step = _integer(options, "sampleStep")
        check_sample_count(sample_step)
        whitelisted = _whitelist(options)
        check_whitelist(whitelisted)
        sample_size = _number(options, "sampleSize")
        check_window("sampleSize", sample_size)

        return cls(
            sample_step=sample_step,
            sample_size=sample_size,
            vsd_token_contract=_address(options, "vsdTokenContract"),
            sd_token_gauge=_address(options, "sdTokenGauge"),
            booster=_address(options, "booster"),
            whitelisted=whitelisted,
            seconds_per_block=_number(
                options,
                "blockPerSec",
                TwavpConstants.DEFAULT_SECONDS_PER_BLOCK,
            ),
        )


@dataclass
class PoolBalanceOptions:
    """Options of the gauge balance + pool liquidity strategy."""

    number_of_blocks: int  # Number of sampled heights
    days_interval: float  # Window length in days
    seconds_per_block: float  # "blockPerSec" in the space config
    sd_token_gauge: str  # Gauge, read for balanceOf
    pools: List[str]  # Pools holding sdToken liquidity
    index_sd_token_in_pool: int  # Coin index of sdToken in every pool
    bot_address: str  # Receives the pool liquidity as voting power
    decimals: int = TwavpConstants.DEFAULT_DECIMALS
    whitelisted: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> "PoolBalanceOptions":
        number_of_blocks = _integer(options, "twavpNumberOfBlocks")
        check_sample_count(number_of_blocks)
        whitelisted = _whitelist(options)
        check_whitelist(whitelisted)
        days_interval = _number(options, "twavpDaysInterval")
        check_window("twavpDaysInterval", days_interval)

        pools = options.get("pools") or []
        if not isinstance(pools, list):
            raise ConfigurationException(
                "Invalid option pools: expected a list of addresses"
            )
        for pool in pools:
            if not isinstance(pool, str) or not is_address(pool):
                raise ConfigurationException(
                    f"Invalid option pools: {pool!r} is not a valid address"
                )

        return cls(
            number_of_blocks=number_of_blocks,
            days_interval=days_interval,
            seconds_per_block=_number(options, "blockPerSec"),
            sd_token_gauge=_address(options, "sdTokenGauge"),
            pools=list(pools),
            # Only needed when there is a pool to read
            index_sd_token_in_pool=_integer(
                options, "indexSdTokenInPool", None if pools else 0
            ),
            bot_address=_address(options, "botAddress"),
            decimals=_integer(
                options, "decimals", TwavpConstants.DEFAULT_DECIMALS
            ),
            whitelisted=whitelisted,
        )
