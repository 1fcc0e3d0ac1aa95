"""TWAVP voting strategies, addressable by their space name."""

from types import ModuleType
from typing import Dict

from sdvote_twavp.shared.exceptions import ConfigurationException
from sdvote_twavp.strategies import gauge_ratio, pool_balance

STRATEGIES: Dict[str, ModuleType] = {
    "sd-vote-boost-twavp-vsdtoken": gauge_ratio,
    "sdvote-balanceof-twavp-pool": pool_balance,
}


def get_strategy(name: str) -> ModuleType:
    """Return the strategy module registered under name."""
    if name not in STRATEGIES:
        raise ConfigurationException(
            f"Unknown strategy: {name}. Must be one of {sorted(STRATEGIES)}"
        )
    return STRATEGIES[name]
