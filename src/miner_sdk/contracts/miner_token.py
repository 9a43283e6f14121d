"""MinerToken contract wrapper."""

from typing import Any, Dict, Optional

from ..core.types import CreditorInfo, DebtorInfo, PendingTransaction, TimeStamp
from ..core.units import Amount, format_token_amount, parse_token_amount
from .base import BaseContract


def _time_stamp(raw: Any) -> TimeStamp:
    return TimeStamp(last_modified_cycle=raw[0], last_modified_time=raw[1])


class MinerToken(BaseContract):
    """Miner token: debtor and creditor accounting, mint, burn and interest claims."""

    async def is_debtor(self, debtor_address: str) -> bool:
        return await self._call("check debtor status", "isDebtor", debtor_address)

    async def get_debtor(self, debtor_address: str) -> DebtorInfo:
        debtor = await self._call("get debtor info", "getDebtor", debtor_address)
        return DebtorInfo(
            time_stamp=_time_stamp(debtor[0]),
            outstanding_balance=format_token_amount(debtor[1]),
            debt_factor=str(debtor[2])
        )

    async def get_creditor(self, creditor_address: str) -> CreditorInfo:
        creditor = await self._call("get creditor info", "getCreditor", creditor_address)
        return CreditorInfo(
            time_stamp=_time_stamp(creditor[0]),
            interest_factor=str(creditor[1]),
            interest=format_token_amount(creditor[2])
        )

    async def mint(
        self,
        debtor_address: str,
        amount: Amount,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        """Mint tokens for a debtor. ``amount`` is in whole tokens, e.g. "1.5"."""
        return await self._transact(
            "mint tokens", "mint", debtor_address, parse_token_amount(amount), options=options
        )

    async def burn(self, amount: Amount, options: Optional[Dict[str, Any]] = None) -> PendingTransaction:
        return await self._transact("burn tokens", "burn", parse_token_amount(amount), options=options)

    async def claim(self, amount: Amount, options: Optional[Dict[str, Any]] = None) -> PendingTransaction:
        """Claim accrued interest."""
        return await self._transact("claim interest", "claim", parse_token_amount(amount), options=options)

    async def balance_of(self, address: str) -> str:
        balance = await self._call("get balance", "balanceOf", address)
        return format_token_amount(balance)

    async def total_supply(self) -> str:
        supply = await self._call("get total supply", "totalSupply")
        return format_token_amount(supply)
