"""All constants for the project"""

import os

from dotenv import load_dotenv

from sdvote_twavp.shared.exceptions import ConfigurationException

load_dotenv()


class TwavpConstants:
    """Global class constants for block sampling and averaging"""

    # Each sample is one multicall, keep the RPC cost bounded
    MAX_SAMPLES = 5
    MIN_SAMPLES = 2
    MAX_WHITELIST = 20

    SECONDS_PER_DAY = 86400
    DEFAULT_SECONDS_PER_BLOCK = 12
    DEFAULT_DECIMALS = 18

    # Snapshot sentinel for "use the current chain head"
    LATEST = "latest"


class AbiConstants:
    """Method signatures used by the strategies, in w3multicall notation"""

    VSDTOKEN_GAUGE = {
        "balanceOf": "balanceOf(address)(uint256)",
        "totalSupply": "totalSupply()(uint256)",
        "working_supply": "working_supply()(uint256)",
        "working_balances": "working_balances(address)(uint256)",
    }

    POOL_BALANCE = {
        "balanceOf": "balanceOf(address)(uint256)",
        "balances": "balances(uint256)(uint256)",
    }


class GlobalConstants:
    """Global class constants for the project"""

    CHAIN_ID_TO_RPC = {
        1: os.getenv("ETHEREUM_MAINNET_RPC_URL") or None,
        10: os.getenv("OPTIMISM_MAINNET_RPC_URL") or None,
        42161: os.getenv("ARBITRUM_MAINNET_RPC_URL") or None,
        8453: os.getenv("BASE_MAINNET_RPC_URL") or None,
        137: os.getenv("POLYGON_MAINNET_RPC_URL") or None,
        56: os.getenv("BSC_MAINNET_RPC_URL") or None,
    }

    @staticmethod
    def get_rpc_url(chain_id: int) -> str:
        """Get RPC URL for specified chain"""
        chain_id = int(chain_id)
        rpc_url = GlobalConstants.CHAIN_ID_TO_RPC.get(chain_id)
        if not rpc_url:
            raise ConfigurationException(
                f"No RPC URL configured for chain {chain_id}"
            )
        return rpc_url
