"""MinerOracle contract wrapper."""

from typing import Any, Dict, Optional, Union

from ..core.types import PendingTransaction
from ..core.units import to_int
from .base import BaseContract

IntLike = Union[int, str]

# Prices are USD with 8 decimals.
PRICE_DECIMALS = 8


class MinerOracle(BaseContract):
    """Owner-maintained USD prices for miner tokens."""

    async def set_token_price(
        self,
        miner_token: str,
        price: IntLike,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        """Set a token's unit price (owner only). ``price`` carries 8 decimals."""
        return await self._transact(
            "set token price", "setTokenPrice", miner_token, to_int(price, "price"), options=options
        )

    async def query_price(self, miner_token: str, amount: IntLike) -> str:
        """USD value, with 8 decimals, of ``amount`` raw token units."""
        value = await self._call("query price", "queryPrice", miner_token, to_int(amount, "amount"))
        return str(value)

    async def get_stored_price(self, miner_token: str) -> str:
        """Stored price per 1e18 token units."""
        price = await self._call("get stored price", "price", miner_token)
        return str(price)
