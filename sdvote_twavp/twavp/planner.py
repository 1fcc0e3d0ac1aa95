"""
Per-height batch planning and execution.

Every sampled height gets the same per-address reads. The final (most
recent) height can carry extra one-off reads, placed either before or
after the per-address reads. Results come back as a SampleMatrix indexed
by (height_index, call_index).
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from sdvote_twavp.shared.exceptions import MalformedBatchException
from sdvote_twavp.shared.logging import get_logger
from sdvote_twavp.shared.services.multicall_service import (
    BatchExecutor,
    ContractCall,
)

_logger = get_logger(__name__)


@dataclass(frozen=True)
class BatchPlan:
    """The reads to execute at one block height."""

    block_number: int
    calls: Tuple[ContractCall, ...]


@dataclass(frozen=True)
class SampleMatrix:
    """Raw results of every batch, in block order."""

    block_numbers: Tuple[int, ...]
    rows: Tuple[Tuple[Any, ...], ...]

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def final_index(self) -> int:
        return len(self.rows) - 1

    def value(self, height_index: int, call_index: int) -> Any:
        return self.rows[height_index][call_index]

    def column(self, call_index: int) -> List[Any]:
        """The result of the same call across every height, oldest first."""
        return [row[call_index] for row in self.rows]


def plan_batches(
    block_numbers: Sequence[int],
    per_height_calls: Sequence[ContractCall],
    final_calls_before: Sequence[ContractCall] = (),
    final_calls_after: Sequence[ContractCall] = (),
) -> List[BatchPlan]:
    """Build one BatchPlan per block, extra reads only at the last one."""
    plans = []
    last = len(block_numbers) - 1
    for i, block_number in enumerate(block_numbers):
        if i == last:
            calls = (
                tuple(final_calls_before)
                + tuple(per_height_calls)
                + tuple(final_calls_after)
            )
        else:
            calls = tuple(per_height_calls)
        plans.append(BatchPlan(block_number=block_number, calls=calls))
    return plans


async def _run_batch(
    executor: BatchExecutor, abi: Dict[str, str], plan: BatchPlan
) -> Tuple[Any, ...]:
    _logger.debug(
        "Executing %d calls at block %d", len(plan.calls), plan.block_number
    )
    results = await executor.execute_batch(
        abi, list(plan.calls), plan.block_number
    )
    if len(results) != len(plan.calls):
        raise MalformedBatchException(
            plan.block_number, len(plan.calls), len(results)
        )
    return tuple(results)


async def fetch_samples(
    executor: BatchExecutor,
    abi: Dict[str, str],
    plans: Sequence[BatchPlan],
) -> SampleMatrix:
    """
    Execute every batch concurrently and collect the results.

    asyncio.gather keeps the results in plan order, so row i always
    belongs to plans[i]. Any failure aborts the whole fetch.
    """
    rows = await asyncio.gather(
        *(_run_batch(executor, abi, plan) for plan in plans)
    )
    return SampleMatrix(
        block_numbers=tuple(plan.block_number for plan in plans),
        rows=tuple(rows),
    )
