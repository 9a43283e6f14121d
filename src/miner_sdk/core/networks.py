"""Supported networks for the Miner SDK."""

from enum import IntEnum
from typing import Optional


class NetworkId(IntEnum):
    """Chain ids of the networks the protocol is deployed on."""
    BASE_MAINNET = 8453
    BASE_SEPOLIA = 84532
    LOCALHOST = 31337


DEFAULT_NETWORK = NetworkId.BASE_SEPOLIA


def network_name(network_id: Optional[int]) -> Optional[str]:
    """
    Map a chain id to its network name.

    Returns None for ids that are not a known NetworkId. Never raises.
    """
    if network_id is None:
        return None
    try:
        return NetworkId(int(network_id)).name
    except (TypeError, ValueError, OverflowError):
        return None
