"""Factory for network-bound contract handles."""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from web3 import AsyncWeb3, Web3

from ..core.addresses import AddressRegistry, ContractKey, DEFAULT_VARIANT
from ..core.config import MinerSDKConfig
from ..core.exceptions import ConfigurationError
from ..core.networks import DEFAULT_NETWORK, network_name
from .base import BaseContract

logger = logging.getLogger(__name__)

W = TypeVar("W", bound=BaseContract)

GLOBAL_SCOPE = "GLOBAL"


class ContractFactory:
    """
    Creates contract handles for the currently selected network.

    Addresses come from an explicit argument or from the address registry.
    Every call builds a fresh handle; handles are stateless wrappers over an
    address, so nothing is cached.
    """

    def __init__(
        self,
        w3: AsyncWeb3,
        network: int = DEFAULT_NETWORK,
        registry: Optional[AddressRegistry] = None,
        config: Optional[MinerSDKConfig] = None
    ):
        self.w3 = w3
        self.network = network
        self.registry = registry if registry is not None else AddressRegistry.from_env()
        self.config = config

    def create_contract(
        self,
        contract_name: ContractKey,
        abi: List[Dict[str, Any]],
        address: Optional[str] = None
    ) -> Any:
        """
        Create a contract handle for a logical contract name.

        Args:
            contract_name: Logical contract name
            abi: Contract ABI
            address: Contract address; resolved from the registry if not given

        Raises:
            ConfigurationError: If no address resolves or the address is malformed
        """
        contract_address = address or self.get_contract_address(contract_name)
        return self._bind(contract_name, contract_address, abi)

    def create_token_variant(
        self,
        variant_name: str,
        abi: List[Dict[str, Any]],
        address: Optional[str] = None
    ) -> Any:
        """
        Create a handle for a miner token variant.

        Raises:
            ConfigurationError: If no address resolves or the address is malformed
        """
        contract_address = address or self.registry.resolve_token_variant_address(
            variant_name or DEFAULT_VARIANT, self.network
        )
        return self._bind(variant_name, contract_address, abi)

    def create_wrapper(
        self,
        wrapper_cls: Type[W],
        contract_name: ContractKey,
        abi: List[Dict[str, Any]],
        address: Optional[str] = None
    ) -> W:
        """Create one of the contract wrappers, resolving its address like create_contract."""
        contract_address = self._checksum(
            contract_name, address or self.get_contract_address(contract_name)
        )
        return wrapper_cls(contract_address, abi, self.w3, self.config)

    def get_contract_address(self, contract_name: ContractKey) -> str:
        """Address of a logical contract on the current network, or ""."""
        return self.registry.resolve_contract_address(self.network, contract_name)

    def get_network_name(self) -> str:
        """Name of the current network, or GLOBAL for ids without a known name."""
        return network_name(self.network) or GLOBAL_SCOPE

    def set_network(self, network: int) -> None:
        """Select the network for handles created from now on."""
        logger.info(f"Switching contract factory from network {self.network} to {network}")
        self.network = network

    def _checksum(self, contract_name: ContractKey, address: str) -> str:
        if not address:
            logger.warning(f"Contract address not found for {contract_name} on network {self.network}")
            raise ConfigurationError(
                f"Contract address not found for {contract_name} on network {self.network}",
                details={'contract': str(contract_name), 'network': self.network}
            )
        try:
            return Web3.to_checksum_address(address)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid address {address!r} for {contract_name}: {e}",
                details={'contract': str(contract_name), 'address': address}
            ) from e

    def _bind(self, contract_name: ContractKey, address: str, abi: List[Dict[str, Any]]) -> Any:
        checksum_address = self._checksum(contract_name, address)
        logger.debug(f"Binding {contract_name} at {checksum_address} on network {self.network}")
        return self.w3.eth.contract(address=checksum_address, abi=abi)
