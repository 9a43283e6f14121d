"""Contract wrappers and the contract factory for the Miner SDK."""

from .base import BaseContract
from .factory import ContractFactory
from .miner_token import MinerToken
from .cycle_updater import CycleUpdater
from .debtor_manager import DebtorManager
from .debtor import Debtor
from .valuation_service import ValuationService
from .miner_oracle import MinerOracle
from .batch_transfer import BatchTransfer

__all__ = [
    "BaseContract",
    "ContractFactory",
    "MinerToken",
    "CycleUpdater",
    "DebtorManager",
    "Debtor",
    "ValuationService",
    "MinerOracle",
    "BatchTransfer",
]
