"""Core type definitions for the Miner SDK."""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _integer_string(v: Any) -> str:
    try:
        int(v)
    except (TypeError, ValueError):
        raise ValueError(f'Value must be a valid integer string: {v}')
    return str(v)


class TimeStamp(BaseModel):
    """Cycle and time of the last change to a debtor or creditor."""
    model_config = ConfigDict(frozen=True)

    last_modified_cycle: str
    last_modified_time: str

    @field_validator('last_modified_cycle', 'last_modified_time', mode='before')
    @classmethod
    def validate_integer(cls, v):
        return _integer_string(v)


class DebtorInfo(BaseModel):
    """Debtor record held by the miner token."""
    model_config = ConfigDict(frozen=True)

    time_stamp: TimeStamp
    outstanding_balance: str  # formatted token amount
    debt_factor: str


class CreditorInfo(BaseModel):
    """Creditor record held by the miner token."""
    model_config = ConfigDict(frozen=True)

    time_stamp: TimeStamp
    interest_factor: str
    interest: str  # formatted token amount


class CycleInfo(BaseModel):
    """One interest cycle."""
    model_config = ConfigDict(frozen=True)

    start_time: str
    rate_factor: str
    interest_snapshot: str


class InterestPreview(BaseModel):
    """Result of a cycle updater interest preview."""
    model_config = ConfigDict(frozen=True)

    finalized_interest: str
    updated_factor: str


class DebtorParams(BaseModel):
    """Collateral ratio parameters for a debtor."""
    model_config = ConfigDict(frozen=True)

    min_collateral_ratio: str
    margin_buffered_collateral_ratio: str

    @field_validator('min_collateral_ratio', 'margin_buffered_collateral_ratio', mode='before')
    @classmethod
    def validate_ratio(cls, v):
        return _integer_string(v)


class HealthCheckResult(BaseModel):
    """Outcome of a debtor health check."""
    model_config = ConfigDict(frozen=True)

    collateral_ratio: str
    pass_min_collateral_ratio_check: bool
    pass_margin_buffered_collateral_ratio_check: bool
    interest_reserve_adjusted: str


class MinerDebtorSnapshot(BaseModel):
    """Debtor state fed into a health check simulation. Values are raw integers."""
    model_config = ConfigDict(frozen=True)

    last_modified_cycle: int
    last_modified_time: int
    outstanding_balance: int
    debt_factor: int
    interest_reserve: int

    def to_abi(self) -> dict:
        """Struct layout expected by the debtor manager contract."""
        return {
            'timeStamp': {
                'lastModifiedCycle': self.last_modified_cycle,
                'lastModifiedTime': self.last_modified_time,
            },
            'outStandingBalance': self.outstanding_balance,
            'debtFactor': self.debt_factor,
            'interestReserve': self.interest_reserve,
        }


@dataclass
class PendingTransaction:
    """A submitted transaction that can be awaited for confirmation."""
    hash: str
    _waiter: Callable[[str, int], Awaitable[Any]] = field(repr=False)
    confirmations: int = 1

    async def wait(self, confirmations: Optional[int] = None) -> Any:
        """Wait for the transaction receipt."""
        if confirmations is None:
            confirmations = self.confirmations
        return await self._waiter(self.hash, confirmations)
