"""
Batched read-only contract calls pinned to a block number.

The strategies describe their reads as ContractCall tuples and hand them to
a BatchExecutor together with a method-name -> signature map. The default
executor packs them into a single W3Multicall round-trip.
"""

import asyncio
from typing import Any, Dict, List, NamedTuple, Protocol, Sequence

from eth_utils import is_address, to_checksum_address
from w3multicall.multicall import W3Multicall

from sdvote_twavp.shared.exceptions import (
    BatchExecutionException,
    ConfigurationException,
)
from sdvote_twavp.shared.logging import get_logger
from sdvote_twavp.shared.services.web3_service import Web3Service

_logger = get_logger(__name__)


class ContractCall(NamedTuple):
    """A single read: contract address, method name and arguments."""

    contract: str
    method: str
    args: tuple = ()


class BatchExecutor(Protocol):
    """Executes one batch of reads at a given block.

    Returns one decoded value per call, in call order. Methods with a
    single return value decode to a scalar.
    """

    async def execute_batch(
        self,
        abi: Dict[str, str],
        calls: Sequence[ContractCall],
        block_number: int,
    ) -> List[Any]: ...


def _checksum_arg(arg: Any) -> Any:
    if isinstance(arg, str) and is_address(arg):
        return to_checksum_address(arg)
    return arg


class MulticallExecutor:
    """BatchExecutor backed by w3multicall."""

    def __init__(self, web3_service: Web3Service):
        self.web3_service = web3_service

    def _build_multicall(
        self, abi: Dict[str, str], calls: Sequence[ContractCall]
    ) -> W3Multicall:
        multicall = W3Multicall(self.web3_service.w3)
        for call in calls:
            signature = abi.get(call.method)
            if signature is None:
                raise ConfigurationException(
                    f"Method {call.method} is not part of the strategy ABI"
                )
            multicall.add(
                W3Multicall.Call(
                    to_checksum_address(call.contract),
                    signature,
                    [_checksum_arg(arg) for arg in call.args],
                )
            )
        return multicall

    async def execute_batch(
        self,
        abi: Dict[str, str],
        calls: Sequence[ContractCall],
        block_number: int,
    ) -> List[Any]:
        multicall = self._build_multicall(abi, calls)

        try:
            # multicall.call blocks on the RPC, keep it off the event loop
            loop = asyncio.get_running_loop()
            results = await loop.run_in_executor(
                None, multicall.call, block_number
            )
        except Exception as e:
            _logger.debug(
                "Multicall of %d calls failed at block %d: %s",
                len(calls),
                block_number,
                e,
            )
            raise BatchExecutionException(
                f"Multicall failed at block {block_number}: {e}",
                block_number,
            ) from e

        return list(results)
