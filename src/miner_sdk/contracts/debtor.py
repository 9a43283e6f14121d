"""Debtor contract wrapper."""

from typing import Any, Dict, Optional, Union

from web3 import Web3

from ..core.exceptions import ContractCallError
from ..core.types import PendingTransaction
from ..core.units import Amount, format_token_amount, parse_token_amount
from .base import BaseContract

ERC20_BALANCE_OF_ABI = [
    {
        "constant": True,
        "inputs": [{"name": "account", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    }
]

CallData = Union[str, bytes]


class Debtor(BaseContract):
    """
    A single debtor contract holding reserve and collateral.

    Owner operations (``remove_reserve``, ``mint``, ``remove_collateral``,
    ``delegate_call``) are rejected by the contract if they would leave the
    debtor unhealthy. ``liquidate`` only succeeds against an unhealthy debtor
    that ends up margined.
    """

    async def get_debtor_manager(self) -> str:
        return await self._call("get debtor manager", "debtorManager")

    async def get_version(self) -> int:
        return await self._call("get version", "VERSION")

    async def add_reserve(self, amount: Amount, options: Optional[Dict[str, Any]] = None) -> PendingTransaction:
        return await self._transact("add reserve", "addReserve", parse_token_amount(amount), options=options)

    async def remove_reserve(
        self,
        to: str,
        amount: Amount,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        return await self._transact(
            "remove reserve", "removeReserve", to, parse_token_amount(amount), options=options
        )

    async def mint(self, amount: Amount, options: Optional[Dict[str, Any]] = None) -> PendingTransaction:
        return await self._transact("mint", "mint", parse_token_amount(amount), options=options)

    async def remove_collateral(
        self,
        token: str,
        to: str,
        amount: Amount,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        return await self._transact(
            "remove collateral", "removeCollateral", token, to, parse_token_amount(amount),
            options=options
        )

    async def delegate_call(
        self,
        action: str,
        data: CallData,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        """Execute ``data`` against an action contract in the debtor's context."""
        return await self._transact(
            "execute delegate call", "delegateCall", action, data, options=options
        )

    async def liquidate(
        self,
        liquidator_action: str,
        data: CallData,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        return await self._transact(
            "liquidate", "liquidate", liquidator_action, data, options=options
        )

    async def get_token_balance(self, token_address: str) -> str:
        """Balance of an ERC20 token held by this debtor contract."""
        try:
            token = self.w3.eth.contract(
                address=Web3.to_checksum_address(token_address),
                abi=ERC20_BALANCE_OF_ABI
            )
            balance = await token.functions.balanceOf(self.address).call()
        except Exception as e:
            raise ContractCallError(
                f"Failed to get token balance: {e}",
                operation="get token balance"
            ) from e
        return format_token_amount(balance)
