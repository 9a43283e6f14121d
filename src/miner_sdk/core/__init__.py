"""
Core module for Miner SDK.

This module contains the configuration, networks, address registry, types,
exceptions and unit helpers that the contract wrappers build on.
"""

from .config import MinerSDKConfig
from .networks import NetworkId, DEFAULT_NETWORK, network_name
from .addresses import (
    AddressRegistry,
    AddressScope,
    ContractAddresses,
    ContractName,
    DEFAULT_VARIANT,
    DEPLOYED_ADDRESSES,
)
from .types import (
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
from .exceptions import (
    MinerSDKError,
    ConfigurationError,
    ValidationError,
    ContractCallError,
    TransactionError,
)
from .units import format_token_amount, parse_token_amount, format_percentage, to_int
from .retry import retry
from .provider import create_web3

__all__ = [
    # Configuration
    "MinerSDKConfig",
    "create_web3",

    # Networks
    "NetworkId",
    "DEFAULT_NETWORK",
    "network_name",

    # Addresses
    "AddressRegistry",
    "AddressScope",
    "ContractAddresses",
    "ContractName",
    "DEFAULT_VARIANT",
    "DEPLOYED_ADDRESSES",

    # Types
    "TimeStamp",
    "DebtorInfo",
    "CreditorInfo",
    "CycleInfo",
    "InterestPreview",
    "DebtorParams",
    "HealthCheckResult",
    "MinerDebtorSnapshot",
    "PendingTransaction",

    # Exceptions
    "MinerSDKError",
    "ConfigurationError",
    "ValidationError",
    "ContractCallError",
    "TransactionError",

    # Helpers
    "format_token_amount",
    "parse_token_amount",
    "format_percentage",
    "to_int",
    "retry",
]
