"""
Contract Manager
Caller-scoped handles over deployed contracts
"""

from typing import List, Optional, Union
from web3 import Web3
from web3.logs import DISCARD
from loguru import logger

from .errors import TransactionFailedError
from .wallet_manager import Signer

DEFAULT_CONFIRMATION_TIMEOUT = 120


class ContractHandle:
    """
    Reference to a deployed contract, optionally bound to a signer

    Reads are sent ``from`` the bound signer so caller-scoped views answer
    for that identity. Writes are signed by it.
    """

    def __init__(
        self,
        w3: Web3,
        contract,
        signer: Optional[Signer] = None,
        receipt=None,
        confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT
    ):
        """
        Initialize Contract Handle

        Args:
            w3: Web3 instance
            contract: web3 Contract bound to an address
            signer: Identity used for calls and transactions
            receipt: Deployment receipt, when this handle came from a deploy
            confirmation_timeout: Seconds to wait for transaction receipts
        """
        self.w3 = w3
        self.contract = contract
        self.signer = signer
        self.deployment_receipt = receipt
        self.confirmation_timeout = confirmation_timeout

    @classmethod
    def at(cls, w3: Web3, address: str, abi: List, signer: Optional[Signer] = None, **kwargs):
        """Attach to a contract that is already deployed"""
        contract = w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
        logger.debug(f"Attached to contract at {contract.address}")
        return cls(w3, contract, signer=signer, **kwargs)

    @property
    def address(self) -> str:
        return self.contract.address

    def connect(self, signer: Signer):
        """
        Get a handle on the same contract bound to another signer

        The original handle keeps its signer.
        """
        return self.__class__(
            self.w3,
            self.contract,
            signer=signer,
            receipt=self.deployment_receipt,
            confirmation_timeout=self.confirmation_timeout
        )

    def call(self, fn_name: str, *args):
        """Run a read-only call"""
        fn = getattr(self.contract.functions, fn_name)(*args)

        if self.signer is None:
            return fn.call()

        return fn.call({'from': self.signer.address})

    def transact(self, fn_name: str, *args, value: int = 0):
        """
        Send a state-changing call and wait for it to be mined

        Args:
            fn_name: Contract function name
            *args: Function arguments
            value: Wei to attach

        Returns:
            Transaction receipt
        """
        if self.signer is None:
            raise ValueError(f"Cannot send {fn_name}: no signer connected")

        fn = getattr(self.contract.functions, fn_name)(*args)
        tx_hash = self.signer.transact(fn, value=value)

        logger.debug(f"{fn_name} sent from {self.signer.address}: {tx_hash.hex()}")

        receipt = self.w3.eth.wait_for_transaction_receipt(
            tx_hash,
            timeout=self.confirmation_timeout
        )

        if receipt['status'] != 1:
            logger.error(f"{fn_name} failed: {tx_hash.hex()}")
            raise TransactionFailedError(f"{fn_name} transaction {tx_hash.hex()} failed", receipt)

        return receipt

    def get_events(self, event_name: str, receipt) -> List:
        """Decode this contract's events of one type from a receipt"""
        event = getattr(self.contract.events, event_name)()
        return list(event.process_receipt(receipt, errors=DISCARD))


class NoteNookContract(ContractHandle):
    """
    NoteNook user registry

    Registration and balances are keyed by the caller, so use
    ``connect(signer)`` to act as a given identity.
    """

    def owner(self) -> str:
        return self.call('owner')

    def balance_of(self, account: Union[str, Signer]) -> int:
        """Native token balance credited to an account, in wei"""
        if isinstance(account, Signer):
            account = account.address
        return self.call('balanceOf', Web3.to_checksum_address(account))

    def is_registered(self) -> bool:
        """Whether the connected signer has registered"""
        return self.call('isRegistered')

    def register(self, name: str):
        receipt = self.transact('register', name)
        logger.info(f"Registered {self.signer.address} as {name!r}")
        return receipt

    def user_name(self, account: Union[str, Signer]) -> str:
        if isinstance(account, Signer):
            account = account.address
        return self.call('getUserName', Web3.to_checksum_address(account))

    def deposit(self, amount: int):
        return self.transact('deposit', value=amount)

    def withdraw(self, amount: int):
        return self.transact('withdraw', amount)
