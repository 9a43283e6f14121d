"""Main MinerClient interface for the Miner SDK."""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

from web3 import AsyncWeb3

from .core.addresses import AddressRegistry
from .core.config import MinerSDKConfig
from .core.provider import create_web3
from .core.retry import retry
from .contracts.factory import ContractFactory

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MinerClient:
    """
    High-level entry point for the protocol contracts.

    Owns the configuration, the web3 connection, the address registry and the
    contract factory, so applications build them once and share them.

    Example:
        ```python
        async def read_cycle():
            async with MinerClient(MinerSDKConfig.base_sepolia()) as client:
                updater = client.factory.create_wrapper(
                    CycleUpdater, ContractName.CYCLE_UPDATER, CYCLE_UPDATER_ABI
                )
                index = await client.with_retry(updater.get_current_cycle_index)
                print(f"Current cycle: {index}")
        ```
    """

    def __init__(
        self,
        config: Optional[MinerSDKConfig] = None,
        registry: Optional[AddressRegistry] = None,
        w3: Optional[AsyncWeb3] = None
    ):
        """
        Initialize a MinerClient.

        Args:
            config: SDK configuration (read from the environment if not provided)
            registry: Address registry (read from the environment if not provided)
            w3: Existing web3 connection; created from ``config`` if not provided
        """
        self.config = config or MinerSDKConfig.from_env()
        self.registry = registry if registry is not None else AddressRegistry.from_env()
        self.w3 = w3 if w3 is not None else create_web3(self.config)
        self.factory = ContractFactory(self.w3, self.config.network, self.registry, self.config)
        self._closed = False

        logger.info(f"Initialized MinerClient on network {self.network_name}")

    async def __aenter__(self):
        if self._closed:
            raise RuntimeError("Client has been closed")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Close the provider's HTTP session."""
        if self._closed:
            return
        disconnect = getattr(self.w3.provider, "disconnect", None)
        if disconnect is not None:
            await disconnect()
        self._closed = True

    @property
    def network(self) -> int:
        return self.factory.network

    @property
    def network_name(self) -> str:
        return self.factory.get_network_name()

    def set_network(self, network: int) -> None:
        """Select the network for contracts created from now on."""
        self.factory.set_network(network)

    async def with_retry(self, fn: Callable[[], Awaitable[T]]) -> T:
        """Run a provider call with the configured retry policy."""
        return await retry(
            fn,
            max_retries=self.config.max_retries,
            base_delay=self.config.retry_delay
        )

    def __repr__(self) -> str:
        status = "closed" if self._closed else "open"
        return f"MinerClient(network='{self.network_name}', status='{status}')"
