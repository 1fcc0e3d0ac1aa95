"""
Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests.
"""

from typing import Any, Callable, Dict, List, Sequence
from unittest.mock import MagicMock

import pytest

from sdvote_twavp.shared.services.multicall_service import ContractCall


class FakeExecutor:
    """
    In-memory BatchExecutor.

    The responder receives (call, block_number) and returns the decoded
    value for that call. Every executed batch is recorded.
    """

    def __init__(self, responder: Callable[[ContractCall, int], Any]):
        self.responder = responder
        self.batches: List[Dict[str, Any]] = []

    async def execute_batch(
        self,
        abi: Dict[str, str],
        calls: Sequence[ContractCall],
        block_number: int,
    ) -> List[Any]:
        self.batches.append(
            {"abi": abi, "calls": list(calls), "block_number": block_number}
        )
        return [self.responder(call, block_number) for call in calls]


@pytest.fixture
def make_executor():
    """Factory for FakeExecutor instances."""
    return FakeExecutor


@pytest.fixture
def mock_provider():
    """Chain client whose head is block 21000000."""
    provider = MagicMock()
    provider.get_block_number.return_value = 21000000
    return provider


@pytest.fixture
def vsd_token_address() -> str:
    return "0xC128468b7Ce63eA702C1f104D55A2566b13D3ABD"


@pytest.fixture
def gauge_address() -> str:
    return "0x7e1444ba99DcdFFe8fBDb42C02FB0DA4aAaCE4d5"


@pytest.fixture
def booster_address() -> str:
    return "0x52f541764E6e90eeBc5c21Ff570De0e2D63766B6"


@pytest.fixture
def bot_address() -> str:
    return "0x44087E105137a5095c008AaB6a6530182821F2F0"


@pytest.fixture
def pool_addresses() -> List[str]:
    return [
        "0x3669C421b77340B2979d1A00a792CC2ee0FcE737",
        "0xe60eB8098B34eD775ac44B1ddE864e098C6d7f37",
    ]


@pytest.fixture
def user_addresses() -> List[str]:
    return [
        "0xD533a949740bb3306d119CC777fa900bA034cd52",
        "0x2F50D538606Fa9EDD2B11E2446BEb18C9D5846bB",
    ]


@pytest.fixture
def gauge_ratio_options(
    vsd_token_address, gauge_address, booster_address
) -> Dict[str, Any]:
    """Options of the gauge-ratio strategy, 2 samples over 1 day."""
    return {
        "sampleStep": 2,
        "sampleSize": 1,
        "vsdTokenContract": vsd_token_address,
        "sdTokenGauge": gauge_address,
        "booster": booster_address,
        "whiteListedAddress": [],
    }


@pytest.fixture
def pool_balance_options(
    gauge_address, pool_addresses, bot_address
) -> Dict[str, Any]:
    """Options of the pool-balance strategy, 3 samples over 2 days."""
    return {
        "twavpNumberOfBlocks": 3,
        "twavpDaysInterval": 2,
        "blockPerSec": 12,
        "sdTokenGauge": gauge_address,
        "pools": pool_addresses,
        "indexSdTokenInPool": 1,
        "botAddress": bot_address,
        "decimals": 18,
        "whiteListedAddress": [],
    }


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
