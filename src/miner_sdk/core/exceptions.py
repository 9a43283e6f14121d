"""Custom exceptions for the Miner SDK."""

from typing import Optional, Any, Dict


class MinerSDKError(Exception):
    """Base exception for all Miner SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MinerSDKError):
    """Configuration is invalid or missing."""
    pass


class ValidationError(MinerSDKError):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.field = field
        self.value = value


class ContractCallError(MinerSDKError):
    """A call against a deployed contract or the provider failed."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.operation = operation


class TransactionError(ContractCallError):
    """Transaction submission or confirmation failed."""

    def __init__(
        self,
        message: str,
        tx_hash: Optional[str] = None,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, operation=operation, details=details)
        self.tx_hash = tx_hash
