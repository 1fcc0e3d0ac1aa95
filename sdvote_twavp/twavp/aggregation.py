"""Per-address reduction of sampled on-chain amounts."""

from decimal import Decimal
from typing import Collection, Sequence


def average(
    samples: Sequence[int], address: str, whitelist: Collection[str]
) -> int:
    """
    Reduce the samples of one address to a single amount.

    Whitelisted addresses are exempt from averaging and keep their most
    recent sample. Membership is an exact match against the stored
    entries. Everyone else gets the truncated integer mean.
    """
    if not samples:
        return 0

    if address in whitelist:
        return samples[-1]

    return sum(samples) // len(samples)


def format_units(amount: int, decimals: int = 18) -> float:
    """Convert a fixed-point on-chain amount to a float."""
    return float(Decimal(amount) / (Decimal(10) ** decimals))
