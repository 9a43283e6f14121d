"""BatchTransfer contract wrapper."""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from ..core.exceptions import ValidationError
from ..core.types import PendingTransaction
from ..core.units import Amount, parse_token_amount, to_int
from .base import BaseContract


def _parse_amounts(amounts: Sequence[Amount]) -> List[int]:
    # Decimals and strings with a decimal point are whole-token amounts; anything else is raw units.
    parsed = []
    for amount in amounts:
        if isinstance(amount, Decimal) or (isinstance(amount, str) and "." in amount):
            parsed.append(parse_token_amount(amount, field="amounts"))
        else:
            parsed.append(to_int(amount, "amounts"))
    return parsed


class BatchTransfer(BaseContract):
    """Send several ERC20 tokens to one recipient in a single transaction."""

    def _validate(self, tokens: Sequence[str], amounts: Sequence[Amount]) -> None:
        if len(tokens) != len(amounts):
            raise ValidationError(
                f"tokens and amounts must have the same length ({len(tokens)} != {len(amounts)})",
                field="amounts",
                value=list(amounts)
            )

    async def batch_transfer(
        self,
        tokens: Sequence[str],
        amounts: Sequence[Amount],
        to: str,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        self._validate(tokens, amounts)
        return await self._transact(
            "batch transfer tokens", "batchTransfer",
            list(tokens), _parse_amounts(amounts), to,
            options=options
        )

    async def estimate_batch_transfer_gas(
        self,
        tokens: Sequence[str],
        amounts: Sequence[Amount],
        to: str
    ) -> int:
        self._validate(tokens, amounts)
        return await self.estimate_gas("batchTransfer", list(tokens), _parse_amounts(amounts), to)
