from eth_utils import is_address, to_checksum_address

from sdvote_twavp.shared.constants import GlobalConstants, TwavpConstants


def validate_eth_address(address: str, param_name: str = "address") -> str:
    """Validate and return checksum ethereum address"""
    if not address or not isinstance(address, str):
        raise ValueError(
            f"Invalid {param_name}: address must be a non-empty string"
        )
    if not is_address(address):
        raise ValueError(
            f"Invalid {param_name}: {address} is not a valid Ethereum address"
        )
    return to_checksum_address(address)


def validate_chain_id(chain_id: int) -> None:
    """Validate chain ID"""
    valid_chain_ids = set(GlobalConstants.CHAIN_ID_TO_RPC)
    if chain_id not in valid_chain_ids:
        raise ValueError(
            f"Invalid chain_id: {chain_id}. Must be one of {valid_chain_ids}"
        )


def validate_snapshot(snapshot: str):
    """Parse a snapshot argument: a block number or "latest"."""
    if snapshot.lower() == TwavpConstants.LATEST:
        return TwavpConstants.LATEST
    try:
        block = int(snapshot)
    except ValueError:
        raise ValueError(
            f"Invalid snapshot: {snapshot}. Must be a block number or "
            f"'{TwavpConstants.LATEST}'"
        )
    if block < 0:
        raise ValueError(f"Invalid snapshot: {snapshot} is negative")
    return block
