"""Contract address registry for the Miner SDK."""

import json
import logging
import os
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Union

from .exceptions import ConfigurationError
from .networks import NetworkId, network_name

logger = logging.getLogger(__name__)

DEFAULT_VARIANT = "DEFAULT"


class ContractName(str, Enum):
    """Logical names of the protocol's singleton contracts."""
    MINER_TOKEN = "MINER_TOKEN"
    VALUATION_SERVICE = "VALUATION_SERVICE"
    DEBTOR_MANAGER = "DEBTOR_MANAGER"
    CYCLE_UPDATER = "CYCLE_UPDATER"
    PRICE_ORACLE = "PRICE_ORACLE"
    VALUATION_ORACLE = "VALUATION_ORACLE"

    def __str__(self) -> str:
        return self.value


ContractKey = Union[ContractName, str]


@dataclass(frozen=True)
class ContractAddresses:
    """Addresses of the logical contracts in one scope. Empty means not deployed."""
    miner_token: str = ""
    valuation_service: str = ""
    debtor_manager: str = ""
    cycle_updater: str = ""
    price_oracle: str = ""
    valuation_oracle: str = ""

    def get(self, contract_name: ContractKey) -> str:
        """Address for a logical contract name, or "" if the name is unknown."""
        try:
            name = ContractName(contract_name)
        except ValueError:
            return ""
        return getattr(self, name.name.lower())

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> 'ContractAddresses':
        """Build from a mapping keyed by logical contract name."""
        return cls(**{
            name.name.lower(): values.get(name.value, "") or ""
            for name in ContractName
        })


def _default_variants() -> Dict[str, str]:
    return {DEFAULT_VARIANT: ""}


@dataclass
class AddressScope:
    """One partition of the address table: fixed contracts plus token variants."""
    contracts: ContractAddresses = field(default_factory=ContractAddresses)
    token_variants: Dict[str, str] = field(default_factory=_default_variants)


# Known deployments, keyed by network name.
DEPLOYED_ADDRESSES: Dict[str, Dict[str, str]] = {
    NetworkId.BASE_SEPOLIA.name: {
        ContractName.CYCLE_UPDATER.value: "0xB40C5De773828Aea6E22989730aaac872A8FD639",
    },
    NetworkId.BASE_MAINNET.name: {},
}


def _parse_variants(environ: Mapping[str, str], key: str) -> Dict[str, str]:
    raw = environ.get(key, "")
    if not raw.strip():
        return {}
    try:
        variants = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"{key} must be a JSON object of variant name to address: {e}",
            details={'key': key}
        ) from e
    if not isinstance(variants, dict):
        raise ConfigurationError(
            f"{key} must be a JSON object of variant name to address",
            details={'key': key}
        )
    return {str(name): str(address or "") for name, address in variants.items()}


class AddressRegistry:
    """
    Resolves (network, contract name) pairs to deployed contract addresses.

    The registry holds one global scope and one scope per network. Lookups
    prefer a non-empty network-specific entry and fall back to the global
    scope. Lookups never raise: an empty string means "not found" and callers
    must check for it.

    Token variants are additional miner token deployments keyed by a free-form
    name (for example ``"F(BTC,20)"``). They are the only part of the table
    that may change after construction, through ``register_token_variant``.
    """

    def __init__(
        self,
        global_scope: Optional[AddressScope] = None,
        network_scopes: Optional[Dict[str, AddressScope]] = None
    ):
        self._global = global_scope or AddressScope()
        self._networks: Dict[str, AddressScope] = dict(network_scopes or {})
        self._lock = threading.Lock()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AddressRegistry':
        """
        Build the registry from the built-in deployments and environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ConfigurationError: If a variants key does not hold a JSON object
        """
        if environ is None:
            environ = os.environ

        global_scope = AddressScope(
            contracts=ContractAddresses.from_mapping({
                name.value: environ.get(f"{name.value}_ADDRESS", "")
                for name in ContractName
            })
        )
        global_scope.token_variants.update(_parse_variants(environ, "MINER_TOKEN_VARIANTS"))

        network_scopes: Dict[str, AddressScope] = {}
        for net_name, deployed in DEPLOYED_ADDRESSES.items():
            values = dict(deployed)
            for name in ContractName:
                override = environ.get(f"{net_name}_{name.value}_ADDRESS", "")
                if override:
                    values[name.value] = override
            scope = AddressScope(contracts=ContractAddresses.from_mapping(values))
            scope.token_variants.update(
                _parse_variants(environ, f"{net_name}_MINER_TOKEN_VARIANTS")
            )
            network_scopes[net_name] = scope

        return cls(global_scope, network_scopes)

    def _scope_key(self, network_id: int) -> str:
        name = network_name(network_id)
        if name:
            return name
        try:
            return f"CHAIN_{int(network_id)}"
        except (TypeError, ValueError, OverflowError):
            # Ids that are not integers still get a scope of their own.
            return f"CHAIN_{network_id}"

    def _scope_for(self, network_id: Optional[int]) -> Optional[AddressScope]:
        if network_id is None:
            return None
        return self._networks.get(self._scope_key(network_id))

    def resolve_contract_address(
        self,
        network_id: Optional[int],
        contract_name: ContractKey
    ) -> str:
        """
        Resolve a logical contract name on a network.

        Args:
            network_id: Chain id; None or an unknown id uses the global scope only
            contract_name: Logical contract name

        Returns:
            The network-specific address if non-empty, else the global address
            (which may be "")
        """
        scope = self._scope_for(network_id)
        if scope is not None:
            address = scope.contracts.get(contract_name)
            if address:
                return address
        address = self._global.contracts.get(contract_name)
        if not address:
            logger.debug(f"No address for {contract_name} on network {network_id}")
        return address

    def resolve_token_variant_address(
        self,
        variant_name: str = DEFAULT_VARIANT,
        network_id: Optional[int] = None
    ) -> str:
        """
        Resolve a miner token variant.

        Order: network variant, global variant, then for ``DEFAULT`` only the
        legacy ``MINER_TOKEN`` field (network, then global).
        """
        scope = self._scope_for(network_id)
        if scope is not None:
            address = scope.token_variants.get(variant_name, "")
            if address:
                return address

        address = self._global.token_variants.get(variant_name, "")
        if address:
            return address

        if variant_name == DEFAULT_VARIANT:
            if scope is not None and scope.contracts.miner_token:
                return scope.contracts.miner_token
            return self._global.contracts.miner_token

        return ""

    def list_variant_addresses(self, network_id: Optional[int] = None) -> Dict[str, str]:
        """
        Variant mapping for a network, or the global mapping.

        The returned dict is the registry's live mapping, not a copy.
        """
        scope = self._scope_for(network_id)
        if scope is not None:
            return scope.token_variants
        return self._global.token_variants

    def list_resolved_variant_names(self, network_id: Optional[int] = None) -> List[str]:
        """Variant names with a non-empty address, in insertion order."""
        return [
            name for name, address in self.list_variant_addresses(network_id).items()
            if address
        ]

    def register_token_variant(
        self,
        variant_name: str,
        address: str,
        network_id: Optional[int] = None
    ) -> None:
        """
        Register or overwrite a miner token variant.

        Without a network id the variant goes into the global scope. A network
        without a scope gets one. The address is stored as given.
        """
        with self._lock:
            if network_id is None:
                scope = self._global
            else:
                key = self._scope_key(network_id)
                scope = self._networks.get(key)
                if scope is None:
                    scope = AddressScope()
                    self._networks[key] = scope
            scope.token_variants[variant_name] = address

        logger.info(f"Registered token variant {variant_name!r} -> {address} (network {network_id})")
