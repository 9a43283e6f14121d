"""CycleUpdater contract wrapper."""

from typing import Any, Dict, Optional, Union

from ..core.types import CycleInfo, InterestPreview, PendingTransaction
from ..core.units import to_int
from .base import BaseContract

IntLike = Union[int, str]


class CycleUpdater(BaseContract):
    """Interest cycle bookkeeping: cycle indexes, rate factors and interest previews."""

    async def start_new_cycle(
        self,
        current_cycle: IntLike,
        current_cycle_interest: IntLike,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        """
        Start a new cycle (owner only).

        Args:
            current_cycle: Current cycle index, checked by the contract
            current_cycle_interest: Interest generated in the current cycle,
                scaled by SCALING_FACTOR
            options: Transaction parameters
        """
        return await self._transact(
            "start new cycle", "startNewCycle",
            to_int(current_cycle, "current_cycle"),
            to_int(current_cycle_interest, "current_cycle_interest"),
            options=options
        )

    async def get_current_cycle_index(self) -> str:
        index = await self._call("get current cycle index", "getCurrentCycleIndex")
        return str(index)

    async def get_cycle(self, index: IntLike) -> CycleInfo:
        cycle = await self._call("get cycle", "getCycle", to_int(index, "index"))
        start_time, rate_factor, interest_snapshot = cycle
        return CycleInfo(
            start_time=str(start_time),
            rate_factor=str(rate_factor),
            interest_snapshot=str(interest_snapshot)
        )

    async def get_accumulated_interest(self) -> str:
        """Accumulated interest up to the last completed cycle."""
        interest = await self._call("get accumulated interest", "getAccumulatedInterest")
        return str(interest)

    async def interest_preview(
        self,
        balance: IntLike,
        last_modified_cycle: IntLike,
        last_modified_time: IntLike,
        factor: IntLike
    ) -> InterestPreview:
        """Preview the interest owed for a balance since its last modification."""
        result = await self._call(
            "preview interest", "interestPreview",
            to_int(balance, "balance"),
            to_int(last_modified_cycle, "last_modified_cycle"),
            to_int(last_modified_time, "last_modified_time"),
            to_int(factor, "factor")
        )
        return InterestPreview(
            finalized_interest=str(result[0]),
            updated_factor=str(result[1])
        )

    async def estimate_debt_by_factor(self, debt_factor: IntLike) -> str:
        """Debt estimate from the last completed cycle's rate factor."""
        debt = await self._call(
            "estimate debt by factor", "estimateDebtByFactor", to_int(debt_factor, "debt_factor")
        )
        return str(debt)

    async def get_scaling_factor(self) -> str:
        factor = await self._call("get scaling factor", "SCALING_FACTOR")
        return str(factor)
