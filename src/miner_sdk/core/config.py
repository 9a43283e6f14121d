"""Configuration management for Miner SDK."""

import os
from dataclasses import dataclass

from .networks import NetworkId, DEFAULT_NETWORK


@dataclass(frozen=True)
class MinerSDKConfig:
    """Configuration for Miner SDK."""
    rpc_url: str
    network: int = DEFAULT_NETWORK
    request_timeout: float = 30.0
    max_retries: int = 3
    retry_delay: float = 1.0
    receipt_timeout: float = 120.0
    poll_interval: float = 2.0
    confirmations: int = 1

    @classmethod
    def from_env(cls) -> 'MinerSDKConfig':
        """Load configuration from environment variables."""
        return cls(
            rpc_url=os.environ.get('MINER_SDK_RPC_URL', 'https://sepolia.base.org'),
            network=int(os.environ.get('MINER_SDK_NETWORK', str(int(DEFAULT_NETWORK)))),
            request_timeout=float(os.environ.get('REQUEST_TIMEOUT', '30.0')),
            max_retries=int(os.environ.get('MAX_RETRIES', '3')),
            retry_delay=float(os.environ.get('RETRY_DELAY', '1.0')),
            receipt_timeout=float(os.environ.get('RECEIPT_TIMEOUT', '120.0')),
            poll_interval=float(os.environ.get('POLL_INTERVAL', '2.0')),
            confirmations=int(os.environ.get('CONFIRMATIONS', '1'))
        )

    @classmethod
    def base_mainnet(cls) -> 'MinerSDKConfig':
        """Base mainnet configuration."""
        return cls(
            rpc_url="https://mainnet.base.org",
            network=NetworkId.BASE_MAINNET
        )

    @classmethod
    def base_sepolia(cls) -> 'MinerSDKConfig':
        """Base Sepolia testnet configuration."""
        return cls(
            rpc_url="https://sepolia.base.org",
            network=NetworkId.BASE_SEPOLIA
        )

    @classmethod
    def localhost(cls) -> 'MinerSDKConfig':
        """Local development node configuration."""
        return cls(
            rpc_url="http://127.0.0.1:8545",
            network=NetworkId.LOCALHOST,
            poll_interval=0.5
        )
