"""ValuationService contract wrapper."""

from typing import List, Union

from ..core.units import to_int
from .base import BaseContract

IntLike = Union[int, str]


class ValuationService(BaseContract):
    """Collateral whitelist, loan-to-value ratios and collateral valuation."""

    async def query_whitelist(self, loan_asset: str) -> List[str]:
        """Collateral tokens accepted for a loan asset."""
        return list(await self._call("query whitelist", "queryWhitelist", loan_asset))

    async def get_ltv(self, collateral_asset: str, loan_asset: str) -> str:
        ltv = await self._call("get LTV", "LTV", collateral_asset, loan_asset)
        return str(ltv)

    async def calculate_collateral_value(
        self,
        collateral_asset: str,
        amount: IntLike,
        loan_asset: str
    ) -> str:
        value = await self._call(
            "calculate collateral value", "calculateCollateralValue",
            collateral_asset, to_int(amount, "amount"), loan_asset
        )
        return str(value)

    async def get_price_oracle(self) -> str:
        return await self._call("get price oracle", "priceOracle")

    async def get_scale_factor(self) -> str:
        scale_factor = await self._call("get scale factor", "SCALE_FACTOR")
        return str(scale_factor)
