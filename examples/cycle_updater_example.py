#!/usr/bin/env python3
"""
Cycle Updater Example: Reading Interest Cycles and Token Variants

This example demonstrates:
- Building a MinerClient from environment configuration
- Resolving contract and token variant addresses
- Reading cycle state through the CycleUpdater wrapper
- Retrying provider calls

Requirements:
- MINER_SDK_RPC_URL pointing at a Base Sepolia endpoint (defaults to the public one)
- Optional MINER_TOKEN_VARIANTS, e.g. '{"F(BTC,20)": "0x..."}'
"""

import asyncio
import logging
from pathlib import Path
import sys

# Add the src directory to the path so we can import the SDK modules
project_dir = Path(__file__).parent.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

from miner_sdk import (
    ContractName,
    CycleUpdater,
    MinerClient,
    MinerSDKConfig,
    MinerSDKError,
    format_token_amount,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

CYCLE_UPDATER_ABI = [
    {
        "inputs": [],
        "name": "getCurrentCycleIndex",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"name": "cycleIndex", "type": "uint256"}],
        "name": "getCycle",
        "outputs": [
            {"name": "startTime", "type": "uint256"},
            {"name": "rateFactor", "type": "uint256"},
            {"name": "interestSnapshot", "type": "uint256"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getAccumulatedInterest",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]


def example_address_resolution(client: MinerClient):
    """Show how addresses resolve on the selected network."""
    print("\n=== Address Resolution ===")
    print(f"Network: {client.network_name} ({client.network})")

    for name in ContractName:
        address = client.registry.resolve_contract_address(client.network, name)
        print(f"  {name}: {address or '(not configured)'}")

    variants = client.registry.list_resolved_variant_names(client.network)
    print(f"Token variants: {variants or 'none'}")


async def example_read_cycle(client: MinerClient):
    """Read the current cycle from the cycle updater."""
    print("\n=== Current Cycle ===")

    updater = client.factory.create_wrapper(
        CycleUpdater, ContractName.CYCLE_UPDATER, CYCLE_UPDATER_ABI
    )

    try:
        index = await client.with_retry(updater.get_current_cycle_index)
        cycle = await client.with_retry(lambda: updater.get_cycle(index))
        interest = await client.with_retry(updater.get_accumulated_interest)

        print(f"Cycle index: {index}")
        print(f"Started at: {cycle.start_time}")
        print(f"Rate factor: {cycle.rate_factor}")
        print(f"Accumulated interest: {format_token_amount(interest)}")
    except MinerSDKError as e:
        logger.error(f"Failed to read cycle: {e}")


async def main():
    config = MinerSDKConfig.from_env()

    async with MinerClient(config) as client:
        example_address_resolution(client)
        await example_read_cycle(client)


if __name__ == "__main__":
    asyncio.run(main())
