"""
Miner SDK for Python

A Python SDK for the miner token lending protocol: multi-network contract
address resolution, contract handle creation and async wrappers for the
protocol's contracts.
"""

__version__ = "0.1.0"

# Core configuration and types
from .core.config import MinerSDKConfig
from .core.networks import NetworkId, DEFAULT_NETWORK
from .core.types import (
    TimeStamp,
    DebtorInfo,
    CreditorInfo,
    CycleInfo,
    InterestPreview,
    DebtorParams,
    HealthCheckResult,
    MinerDebtorSnapshot,
    PendingTransaction,
)

# Address resolution
from .core.addresses import AddressRegistry, ContractName, DEFAULT_VARIANT

# Provider and helpers
from .core.provider import create_web3
from .core.units import format_token_amount, parse_token_amount, format_percentage, to_int
from .core.retry import retry

# Contracts
from .contracts import (
    BaseContract,
    ContractFactory,
    MinerToken,
    CycleUpdater,
    DebtorManager,
    Debtor,
    ValuationService,
    MinerOracle,
    BatchTransfer,
)

# High-level client
from .client import MinerClient

# Exceptions
from .core.exceptions import (
    MinerSDKError,
    ConfigurationError,
    ValidationError,
    ContractCallError,
    TransactionError,
)

# Main exports for public API
__all__ = [
    # Version info
    "__version__",

    # Configuration
    "MinerSDKConfig",
    "NetworkId",
    "DEFAULT_NETWORK",
    "create_web3",

    # Core types
    "TimeStamp",
    "DebtorInfo",
    "CreditorInfo",
    "CycleInfo",
    "InterestPreview",
    "DebtorParams",
    "HealthCheckResult",
    "MinerDebtorSnapshot",
    "PendingTransaction",

    # Addresses
    "AddressRegistry",
    "ContractName",
    "DEFAULT_VARIANT",

    # Contracts
    "BaseContract",
    "ContractFactory",
    "MinerToken",
    "CycleUpdater",
    "DebtorManager",
    "Debtor",
    "ValuationService",
    "MinerOracle",
    "BatchTransfer",

    # Client
    "MinerClient",

    # Helpers
    "format_token_amount",
    "parse_token_amount",
    "format_percentage",
    "to_int",
    "retry",

    # Exceptions
    "MinerSDKError",
    "ConfigurationError",
    "ValidationError",
    "ContractCallError",
    "TransactionError",
]
