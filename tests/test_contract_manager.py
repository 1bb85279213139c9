"""
Unit Tests for Contract Handles
"""

import pytest
from unittest.mock import Mock
from hexbytes import HexBytes

from notenook.blockchain import (
    ContractHandle,
    NoteNookContract,
    Signer,
    TransactionFailedError,
)

OWNER = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'
USER = '0x70997970C51812dc3A010C7d01b50e0d17dc79C8'


@pytest.fixture
def w3():
    w3 = Mock()
    w3.eth.wait_for_transaction_receipt.return_value = {'status': 1}
    return w3


@pytest.fixture
def contract():
    """Mock web3 Contract"""
    contract = Mock()
    contract.address = '0x5FbDB2315678afecb367f032d93F642f64180aa3'
    return contract


@pytest.fixture
def user(w3):
    signer = Signer(w3, USER)
    signer.transact = Mock(return_value=HexBytes(b'\x02' * 32))
    return signer


class TestContractHandle:
    """Test ContractHandle"""

    def test_call_without_signer(self, w3, contract):
        contract.functions.owner.return_value.call.return_value = OWNER
        handle = NoteNookContract(w3, contract)

        assert handle.owner() == OWNER
        contract.functions.owner.return_value.call.assert_called_once_with()

    def test_call_scoped_to_signer(self, w3, contract, user):
        contract.functions.isRegistered.return_value.call.return_value = True
        handle = NoteNookContract(w3, contract, signer=user)

        assert handle.is_registered() is True
        contract.functions.isRegistered.return_value.call.assert_called_once_with({'from': USER})

    def test_connect_returns_new_handle(self, w3, contract, user):
        owner = Signer(w3, OWNER)
        handle = NoteNookContract(w3, contract, signer=owner, receipt={'status': 1}, confirmation_timeout=9)

        connected = handle.connect(user)

        assert isinstance(connected, NoteNookContract)
        assert connected.signer is user
        assert connected.contract is contract
        assert connected.deployment_receipt == {'status': 1}
        assert connected.confirmation_timeout == 9
        assert handle.signer is owner

    def test_transact_waits_for_receipt(self, w3, contract, user):
        handle = NoteNookContract(w3, contract, signer=user, confirmation_timeout=3)

        receipt = handle.register("Asir")

        assert receipt == {'status': 1}
        contract.functions.register.assert_called_once_with("Asir")
        user.transact.assert_called_once_with(contract.functions.register.return_value, value=0)
        w3.eth.wait_for_transaction_receipt.assert_called_once_with(
            HexBytes(b'\x02' * 32),
            timeout=3
        )

    def test_transact_without_signer_raises(self, w3, contract):
        handle = ContractHandle(w3, contract)

        with pytest.raises(ValueError):
            handle.transact('register', "Asir")

    def test_failed_receipt_raises(self, w3, contract, user):
        w3.eth.wait_for_transaction_receipt.return_value = {'status': 0}
        handle = NoteNookContract(w3, contract, signer=user)

        with pytest.raises(TransactionFailedError) as exc_info:
            handle.register("Asir")

        assert exc_info.value.receipt == {'status': 0}

    def test_deposit_attaches_value(self, w3, contract, user):
        handle = NoteNookContract(w3, contract, signer=user)

        handle.deposit(1000)

        user.transact.assert_called_once_with(contract.functions.deposit.return_value, value=1000)

    def test_balance_of_accepts_signer(self, w3, contract, user):
        contract.functions.balanceOf.return_value.call.return_value = 0
        handle = NoteNookContract(w3, contract)

        assert handle.balance_of(user) == 0
        assert handle.balance_of(USER.lower()) == 0

        calls = contract.functions.balanceOf.call_args_list
        assert [c.args for c in calls] == [(USER,), (USER,)]

    def test_at_checksums_address(self, w3):
        ContractHandle.at(w3, USER.lower(), abi=[])

        w3.eth.contract.assert_called_once_with(address=USER, abi=[])
