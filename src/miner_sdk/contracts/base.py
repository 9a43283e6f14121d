"""Base contract wrapper for the Miner SDK."""

import asyncio
import inspect
import logging
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from web3 import AsyncWeb3
from web3.exceptions import TransactionNotFound

from ..core.config import MinerSDKConfig
from ..core.exceptions import ContractCallError, TransactionError
from ..core.types import PendingTransaction

logger = logging.getLogger(__name__)

DEFAULT_RECEIPT_TIMEOUT = 120.0
DEFAULT_POLL_INTERVAL = 2.0

Listener = Tuple[Callable[[Any], Any], "asyncio.Task[None]"]


class BaseContract:
    """
    Common functionality for the protocol contract wrappers.

    Wraps a web3 contract handle. Read calls go through ``_call`` and
    state-changing calls through ``_transact``; both convert any provider
    failure into a ``ContractCallError`` whose message names the attempted
    operation.
    """

    def __init__(
        self,
        address: str,
        abi: List[Dict[str, Any]],
        w3: AsyncWeb3,
        config: Optional[MinerSDKConfig] = None
    ):
        self.address = address
        self.abi = abi
        self.w3 = w3
        self.config = config
        self.contract = w3.eth.contract(address=address, abi=abi)
        self._listeners: Dict[str, List[Listener]] = {}
        self._stopping: Set["asyncio.Task[None]"] = set()

    @property
    def receipt_timeout(self) -> float:
        return self.config.receipt_timeout if self.config else DEFAULT_RECEIPT_TIMEOUT

    @property
    def poll_interval(self) -> float:
        return self.config.poll_interval if self.config else DEFAULT_POLL_INTERVAL

    @property
    def default_confirmations(self) -> int:
        return self.config.confirmations if self.config else 1

    def get_contract(self) -> Any:
        """Get the underlying web3 contract handle."""
        return self.contract

    def get_address(self) -> str:
        """Get the contract address."""
        return self.address

    async def _call(self, operation: str, method: str, *args: Any) -> Any:
        try:
            return await getattr(self.contract.functions, method)(*args).call()
        except Exception as e:
            raise ContractCallError(f"Failed to {operation}: {e}", operation=operation) from e

    async def _transact(
        self,
        operation: str,
        method: str,
        *args: Any,
        options: Optional[Dict[str, Any]] = None
    ) -> PendingTransaction:
        try:
            tx_hash = await getattr(self.contract.functions, method)(*args).transact(options or {})
        except Exception as e:
            raise TransactionError(f"Failed to {operation}: {e}", operation=operation) from e

        tx_hash = _hex(tx_hash)
        logger.info(f"Submitted {method} on {self.address}: {tx_hash}")
        return PendingTransaction(
            hash=tx_hash,
            _waiter=self.wait_for_transaction,
            confirmations=self.default_confirmations
        )

    async def estimate_gas(
        self,
        method: str,
        *params: Any,
        options: Optional[Dict[str, Any]] = None
    ) -> int:
        """
        Estimate gas for a contract method.

        Raises:
            ContractCallError: If the estimate fails
        """
        try:
            return await getattr(self.contract.functions, method)(*params).estimate_gas(options)
        except Exception as e:
            raise ContractCallError(
                f"Gas estimation failed for {method}: {e}",
                operation="estimate_gas"
            ) from e

    async def get_transaction_receipt(self, tx_hash: str) -> Optional[Any]:
        """
        Get a transaction receipt, or None if the transaction is still pending.

        Raises:
            ContractCallError: If the provider call fails
        """
        try:
            return await self.w3.eth.get_transaction_receipt(tx_hash)
        except TransactionNotFound:
            return None
        except Exception as e:
            raise ContractCallError(
                f"Failed to get transaction receipt: {e}",
                operation="get_transaction_receipt"
            ) from e

    async def _current_block(self) -> int:
        return await self.w3.eth.block_number

    async def wait_for_transaction(self, tx_hash: str, confirmations: int = 1) -> Any:
        """
        Wait until a transaction is mined and has the requested confirmations.

        Args:
            tx_hash: Transaction hash
            confirmations: Number of blocks, including the inclusion block

        Returns:
            The transaction receipt

        Raises:
            TransactionError: If waiting fails or the transaction reverted
        """
        try:
            receipt = await self.w3.eth.wait_for_transaction_receipt(
                tx_hash,
                timeout=self.receipt_timeout,
                poll_latency=self.poll_interval
            )
            if confirmations > 1:
                target = receipt['blockNumber'] + confirmations - 1
                while await self._current_block() < target:
                    await asyncio.sleep(self.poll_interval)
        except Exception as e:
            raise TransactionError(f"Transaction failed: {e}", tx_hash=tx_hash) from e

        if receipt['status'] == 0:
            raise TransactionError("Transaction failed: reverted", tx_hash=tx_hash)
        return receipt

    def on(
        self,
        event_name: str,
        callback: Callable[[Any], Any],
        poll_interval: Optional[float] = None
    ) -> Callable[[], None]:
        """
        Listen to a contract event.

        Logs emitted after subscription are passed to ``callback``, which may
        be a plain function or a coroutine function. Must be called with a
        running event loop.

        Returns:
            A function that removes this listener
        """
        event = getattr(self.contract.events, event_name)
        interval = poll_interval if poll_interval is not None else self.poll_interval
        task = asyncio.get_running_loop().create_task(
            self._poll_events(event_name, event, callback, interval)
        )
        self._listeners.setdefault(event_name, []).append((callback, task))
        logger.debug(f"Listening for {event_name} on {self.address}")

        def unsubscribe() -> None:
            self.off(event_name, callback)

        return unsubscribe

    def off(self, event_name: str, callback: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove one listener, or all listeners for the event when no callback is given."""
        remaining = []
        for listener, task in self._listeners.get(event_name, []):
            if callback is None or listener is callback:
                task.cancel()
                self._stopping.add(task)
                task.add_done_callback(self._stopping.discard)
            else:
                remaining.append((listener, task))
        if remaining:
            self._listeners[event_name] = remaining
        else:
            self._listeners.pop(event_name, None)

    def remove_all_listeners(self) -> None:
        """Cancel every event subscription."""
        for event_name in list(self._listeners):
            self.off(event_name)

    async def aclose(self) -> None:
        """Cancel every event subscription and wait for the polling tasks to exit."""
        self.remove_all_listeners()
        if self._stopping:
            await asyncio.gather(*self._stopping, return_exceptions=True)

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, []))

    async def _poll_events(
        self,
        event_name: str,
        event: Any,
        callback: Callable[[Any], Any],
        interval: float
    ) -> None:
        from_block = None
        while True:
            try:
                latest = await self._current_block()
                if from_block is None:
                    from_block = latest + 1
                elif latest >= from_block:
                    logs = await event.get_logs(from_block=from_block, to_block=latest)
                    for log in logs:
                        result = callback(log)
                        if inspect.isawaitable(result):
                            await result
                    from_block = latest + 1
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(f"Polling {event_name} on {self.address} failed: {e}")
            await asyncio.sleep(interval)


def _hex(tx_hash: Any) -> str:
    if isinstance(tx_hash, (bytes, bytearray)):
        return "0x" + bytes(tx_hash).hex()
    return str(tx_hash)
