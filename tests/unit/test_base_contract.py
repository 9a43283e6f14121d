"""Unit tests for BaseContract."""

import asyncio

import pytest
from unittest.mock import AsyncMock, Mock, patch
from web3.exceptions import TransactionNotFound

from miner_sdk.contracts.base import BaseContract
from miner_sdk.core.config import MinerSDKConfig
from miner_sdk.core.exceptions import ContractCallError, TransactionError
from miner_sdk.core.types import PendingTransaction

ADDRESS = "0x1234567890123456789012345678901234567890"
ABI = [{"name": "testMethod", "type": "function"}]


@pytest.fixture
def mock_contract():
    return Mock()


@pytest.fixture
def w3(mock_contract):
    """Mock web3 connection whose eth.contract returns the mock contract."""
    w3 = Mock()
    w3.eth.contract.return_value = mock_contract
    w3.eth.get_transaction_receipt = AsyncMock()
    w3.eth.wait_for_transaction_receipt = AsyncMock()
    return w3


@pytest.fixture
def config():
    return MinerSDKConfig(
        rpc_url="http://127.0.0.1:8545",
        receipt_timeout=5.0,
        poll_interval=0.01
    )


@pytest.fixture
def base_contract(w3, config):
    return BaseContract(ADDRESS, ABI, w3, config)


class TestConstructor:
    """Test BaseContract construction."""

    def test_properties(self, base_contract, w3, mock_contract):
        assert base_contract.address == ADDRESS
        assert base_contract.abi is ABI
        assert base_contract.w3 is w3
        w3.eth.contract.assert_called_once_with(address=ADDRESS, abi=ABI)

    def test_get_contract(self, base_contract, mock_contract):
        assert base_contract.get_contract() is mock_contract

    def test_get_address(self, base_contract):
        assert base_contract.get_address() == ADDRESS

    def test_defaults_without_config(self, w3):
        contract = BaseContract(ADDRESS, ABI, w3)
        assert contract.receipt_timeout == 120.0
        assert contract.poll_interval == 2.0
        assert contract.default_confirmations == 1


class TestEstimateGas:
    """Test gas estimation passthrough."""

    async def test_estimate_gas(self, base_contract, mock_contract):
        mock_contract.functions.testMethod.return_value.estimate_gas = AsyncMock(return_value=100000)

        result = await base_contract.estimate_gas("testMethod", "param1", "param2")

        mock_contract.functions.testMethod.assert_called_once_with("param1", "param2")
        assert result == 100000

    async def test_estimate_gas_failure(self, base_contract, mock_contract):
        mock_contract.functions.testMethod.return_value.estimate_gas = AsyncMock(
            side_effect=Exception("Gas estimation failed")
        )

        with pytest.raises(ContractCallError) as exc_info:
            await base_contract.estimate_gas("testMethod")

        assert str(exc_info.value) == "Gas estimation failed for testMethod: Gas estimation failed"
        assert isinstance(exc_info.value.__cause__, Exception)


class TestTransactionReceipt:
    """Test receipt retrieval."""

    async def test_get_receipt(self, base_contract, w3):
        receipt = {"status": 1, "blockNumber": 12345}
        w3.eth.get_transaction_receipt.return_value = receipt

        result = await base_contract.get_transaction_receipt("0xtx123")

        w3.eth.get_transaction_receipt.assert_called_once_with("0xtx123")
        assert result == receipt

    async def test_pending_receipt_is_none(self, base_contract, w3):
        w3.eth.get_transaction_receipt.side_effect = TransactionNotFound("pending")
        assert await base_contract.get_transaction_receipt("0xtx123") is None

    async def test_receipt_failure(self, base_contract, w3):
        w3.eth.get_transaction_receipt.side_effect = Exception("Receipt not found")

        with pytest.raises(ContractCallError) as exc_info:
            await base_contract.get_transaction_receipt("0xtx123")

        assert str(exc_info.value) == "Failed to get transaction receipt: Receipt not found"


class TestWaitForTransaction:
    """Test confirmation waiting."""

    async def test_default_confirmations(self, base_contract, w3):
        receipt = {"status": 1, "blockNumber": 12345}
        w3.eth.wait_for_transaction_receipt.return_value = receipt

        result = await base_contract.wait_for_transaction("0xtx123")

        w3.eth.wait_for_transaction_receipt.assert_called_once_with(
            "0xtx123", timeout=5.0, poll_latency=0.01
        )
        assert result == receipt

    async def test_waits_for_confirmation_depth(self, base_contract, w3):
        receipt = {"status": 1, "blockNumber": 100}
        w3.eth.wait_for_transaction_receipt.return_value = receipt

        with patch.object(base_contract, "_current_block", AsyncMock(side_effect=[100, 101, 102])) as block:
            result = await base_contract.wait_for_transaction("0xtx123", 3)

        assert result == receipt
        assert block.await_count == 3

    async def test_wait_failure(self, base_contract, w3):
        w3.eth.wait_for_transaction_receipt.side_effect = Exception("timed out")

        with pytest.raises(TransactionError) as exc_info:
            await base_contract.wait_for_transaction("0xtx123")

        assert str(exc_info.value) == "Transaction failed: timed out"
        assert exc_info.value.tx_hash == "0xtx123"

    async def test_reverted_transaction(self, base_contract, w3):
        w3.eth.wait_for_transaction_receipt.return_value = {"status": 0, "blockNumber": 1}

        with pytest.raises(TransactionError):
            await base_contract.wait_for_transaction("0xtx123")


class TestTransact:
    """Test the shared transaction path."""

    async def test_returns_pending_transaction(self, base_contract, mock_contract, w3):
        mock_contract.functions.testMethod.return_value.transact = AsyncMock(
            return_value=bytes.fromhex("ab" * 32)
        )
        w3.eth.wait_for_transaction_receipt.return_value = {"status": 1, "blockNumber": 1}

        pending = await base_contract._transact("test", "testMethod", 1, options={"gas": 21000})

        mock_contract.functions.testMethod.return_value.transact.assert_called_once_with({"gas": 21000})
        assert isinstance(pending, PendingTransaction)
        assert pending.hash == "0x" + "ab" * 32

        receipt = await pending.wait()
        assert receipt["status"] == 1
        w3.eth.wait_for_transaction_receipt.assert_called_once()

    async def test_explicit_zero_confirmations_are_passed_through(self):
        waiter = AsyncMock(return_value={"status": 1})
        pending = PendingTransaction(hash="0xabc", _waiter=waiter, confirmations=3)

        await pending.wait(0)
        await pending.wait()

        assert [call.args for call in waiter.await_args_list] == [("0xabc", 0), ("0xabc", 3)]

    async def test_transact_failure(self, base_contract, mock_contract):
        mock_contract.functions.testMethod.return_value.transact = AsyncMock(side_effect=Exception("nonce too low"))

        with pytest.raises(TransactionError) as exc_info:
            await base_contract._transact("run test", "testMethod")

        assert str(exc_info.value) == "Failed to run test: nonce too low"
        assert exc_info.value.operation == "run test"


class TestEventHandling:
    """Test event subscriptions."""

    async def test_on_delivers_new_logs(self, base_contract, mock_contract):
        log = {"event": "Transfer", "blockNumber": 11}
        mock_contract.events.Transfer.get_logs = AsyncMock(return_value=[log])
        received = []

        with patch.object(base_contract, "_current_block", AsyncMock(side_effect=[10, 11, 11, 11, 11, 11])):
            unsubscribe = base_contract.on("Transfer", received.append, poll_interval=0.01)
            await asyncio.sleep(0.05)
            unsubscribe()

        assert received == [log]
        mock_contract.events.Transfer.get_logs.assert_awaited_once_with(from_block=11, to_block=11)
        assert base_contract.listener_count("Transfer") == 0

    async def test_async_callback(self, base_contract, mock_contract):
        log = {"event": "Transfer"}
        mock_contract.events.Transfer.get_logs = AsyncMock(return_value=[log])
        callback = AsyncMock()

        with patch.object(base_contract, "_current_block", AsyncMock(side_effect=[1, 2, 2, 2, 2, 2])):
            base_contract.on("Transfer", callback, poll_interval=0.01)
            await asyncio.sleep(0.05)
            base_contract.off("Transfer", callback)

        callback.assert_awaited_once_with(log)

    async def test_off_removes_only_given_callback(self, base_contract):
        first, second = Mock(), Mock()

        with patch.object(base_contract, "_current_block", AsyncMock(return_value=1)):
            base_contract.on("Transfer", first)
            base_contract.on("Transfer", second)
            assert base_contract.listener_count("Transfer") == 2

            base_contract.off("Transfer", first)
            assert base_contract.listener_count("Transfer") == 1

            base_contract.remove_all_listeners()
            assert base_contract.listener_count("Transfer") == 0

    async def test_polling_errors_do_not_stop_listener(self, base_contract, mock_contract):
        log = {"event": "Transfer"}
        mock_contract.events.Transfer.get_logs = AsyncMock(side_effect=[Exception("rpc down"), [log]])
        received = []

        with patch.object(base_contract, "_current_block", AsyncMock(side_effect=[1, 2, 3, 3, 3, 3, 3])):
            base_contract.on("Transfer", received.append, poll_interval=0.01)
            await asyncio.sleep(0.06)
            base_contract.remove_all_listeners()

        assert received == [log]

    async def test_aclose_waits_for_polling_tasks(self, base_contract):
        with patch.object(base_contract, "_current_block", AsyncMock(return_value=1)):
            base_contract.on("Transfer", Mock(), poll_interval=0.01)
            removed = Mock()
            base_contract.on("Approval", removed, poll_interval=0.01)
            tasks = [task for listeners in base_contract._listeners.values() for _, task in listeners]
            await asyncio.sleep(0.02)

            base_contract.off("Approval", removed)
            await base_contract.aclose()

        assert len(tasks) == 2
        assert all(task.done() for task in tasks)
        assert base_contract.listener_count("Transfer") == 0
        assert not base_contract._stopping
