"""Provider construction for the Miner SDK."""

import logging

from aiohttp import ClientTimeout
from web3 import AsyncHTTPProvider, AsyncWeb3

from .config import MinerSDKConfig
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_web3(config: MinerSDKConfig) -> AsyncWeb3:
    """
    Create an async web3 connection for the configured RPC endpoint.

    Raises:
        ConfigurationError: If no RPC URL is configured
    """
    if not config.rpc_url:
        raise ConfigurationError("RPC URL is not configured", details={'field': 'rpc_url'})

    provider = AsyncHTTPProvider(
        config.rpc_url,
        request_kwargs={'timeout': ClientTimeout(total=config.request_timeout)}
    )
    logger.debug(f"Created provider for {config.rpc_url} (network {config.network})")
    return AsyncWeb3(provider)
