"""
Web3 Service module for reading chain state.

This module provides a Web3Service class that manages one connection per
chain and exposes the chain-head lookup the strategies need to resolve a
"latest" snapshot.
"""

from web3 import Web3

from sdvote_twavp.shared.constants import GlobalConstants


class Web3Service:
    """
    A service class for managing Web3 connections.

    Instances are cached per chain id through get_instance().
    """

    def __init__(
        self,
        chain_id: int,
        rpc_url: str,
    ):
        """
        Initialize the Web3Service.

        Args:
            chain_id (int): The chain ID to use.
            rpc_url (str): The RPC URL to use.
        """
        self.chain_id = chain_id
        self.w3 = self._initialize_web3(rpc_url)

    def _initialize_web3(self, rpc_url: str) -> Web3:
        """Initialize Web3 instance with middleware if needed"""
        w3 = Web3(Web3.HTTPProvider(rpc_url))

        # Add POA middleware for non-mainnet chains
        if self.chain_id != 1:
            from web3.middleware import geth_poa_middleware

            w3.middleware_onion.inject(geth_poa_middleware, layer=0)

        return w3

    @classmethod
    def get_instance(cls, chain_id: int) -> "Web3Service":
        """Get or create a Web3Service instance for a specific chain"""
        if not hasattr(cls, "_instances"):
            cls._instances = {}

        if chain_id not in cls._instances:
            rpc_url = GlobalConstants.get_rpc_url(chain_id)
            cls._instances[chain_id] = cls(chain_id, rpc_url)

        return cls._instances[chain_id]

    def get_block_number(self) -> int:
        """Get the current chain head block number"""
        return self.w3.eth.block_number
