"""DebtorManager contract wrapper."""

from typing import Any, Dict, Optional, Union

from ..core.types import DebtorParams, HealthCheckResult, MinerDebtorSnapshot, PendingTransaction
from ..core.units import to_int
from .base import BaseContract

IntLike = Union[int, str]


def _health_check_result(result: Any) -> HealthCheckResult:
    return HealthCheckResult(
        collateral_ratio=str(result[0]),
        pass_min_collateral_ratio_check=bool(result[1]),
        pass_margin_buffered_collateral_ratio_check=bool(result[2]),
        interest_reserve_adjusted=str(result[3])
    )


class DebtorManager(BaseContract):
    """
    Registry of debtor contracts and their collateral parameters.

    Collateral ratios are passed and returned as raw integers in the
    contract's own scale.
    """

    async def create_debtor(self, options: Optional[Dict[str, Any]] = None) -> PendingTransaction:
        """Create a debtor contract for the sender."""
        return await self._transact("create debtor", "createDebtor", options=options)

    async def set_valuation_service(
        self,
        valuation_service: str,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        return await self._transact(
            "set valuation service", "setValuationService", valuation_service, options=options
        )

    async def set_default_debtor_params(
        self,
        params: DebtorParams,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        """Set the parameters used for debtors without custom ones (owner only)."""
        return await self._transact(
            "set default debtor params", "setDefaultDebtorParams",
            (int(params.min_collateral_ratio), int(params.margin_buffered_collateral_ratio)),
            options=options
        )

    async def set_custom_debtor_params(
        self,
        debtor: str,
        min_collateral_ratio: IntLike,
        margin_buffered_collateral_ratio: IntLike,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        return await self._transact(
            "set custom debtor params", "setCustomDebtorParams",
            debtor,
            to_int(min_collateral_ratio, "min_collateral_ratio"),
            to_int(margin_buffered_collateral_ratio, "margin_buffered_collateral_ratio"),
            options=options
        )

    async def get_debtor_params(self, debtor_address: str) -> DebtorParams:
        params = await self._call("get debtor params", "getDebtorParams", debtor_address)
        return DebtorParams(
            min_collateral_ratio=params[0],
            margin_buffered_collateral_ratio=params[1]
        )

    async def get_default_debtor_params(self) -> DebtorParams:
        params = await self._call("get default debtor params", "defaultDebtorParams")
        return DebtorParams(
            min_collateral_ratio=params[0],
            margin_buffered_collateral_ratio=params[1]
        )

    async def get_debtor(self, owner: str) -> str:
        """Debtor contract address owned by ``owner``."""
        return await self._call("get debtor", "getDebtor", owner)

    async def health_check(self, debtor: str) -> HealthCheckResult:
        result = await self._call("run health check", "healthCheck", debtor)
        return _health_check_result(result)

    async def health_check_simulation(
        self,
        miner_debtor: MinerDebtorSnapshot,
        collateral_value_in_debtor_contract: IntLike,
        min_collateral_ratio: IntLike,
        margin_buffered_collateral_ratio: IntLike
    ) -> HealthCheckResult:
        """Run the health check against hypothetical debtor state and parameters."""
        result = await self._call(
            "run health check simulation", "healthCheckSimulation",
            miner_debtor.to_abi(),
            to_int(collateral_value_in_debtor_contract, "collateral_value_in_debtor_contract"),
            to_int(min_collateral_ratio, "min_collateral_ratio"),
            to_int(margin_buffered_collateral_ratio, "margin_buffered_collateral_ratio")
        )
        return _health_check_result(result)

    async def set_cycle_updater(
        self,
        new_cycle_updater: str,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        return await self._transact(
            "set cycle updater", "setCycleUpdater", new_cycle_updater, options=options
        )

    async def miner_token(self) -> str:
        """Address of the miner token this manager mints against."""
        return await self._call("get miner token address", "minerToken")
