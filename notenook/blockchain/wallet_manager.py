"""
Wallet Manager
Supplies the signer identities used to deploy and call contracts
"""

from typing import List, Optional
from web3 import Web3
from eth_account import Account
from loguru import logger

# Headroom added on top of the node's gas estimate
GAS_BUFFER = 1.2


class Signer:
    """
    An identity able to authorize transactions

    With a local eth-account ``account`` transactions are signed in-process
    and sent raw. Without one the node holds the key (Hardhat/Anvil
    development accounts, eth-tester) and signs on ``transact``.
    """

    def __init__(self, w3: Web3, address: str, account=None):
        self.w3 = w3
        self.address = Web3.to_checksum_address(address)
        self.account = account

    @classmethod
    def from_key(cls, w3: Web3, private_key: str) -> "Signer":
        account = Account.from_key(private_key)
        return cls(w3, account.address, account)

    @property
    def is_local(self) -> bool:
        return self.account is not None

    def transact(self, contract_call, value: int = 0) -> bytes:
        """
        Send a contract function call or constructor from this signer

        Args:
            contract_call: Bound ContractFunction or ContractConstructor
            value: Wei to attach

        Returns:
            Transaction hash
        """
        tx_params = {'from': self.address, 'value': value}

        if not self.is_local:
            return contract_call.transact(tx_params)

        gas_estimate = contract_call.estimate_gas(tx_params)
        tx_params.update({
            'gas': int(gas_estimate * GAS_BUFFER),
            'nonce': self.w3.eth.get_transaction_count(self.address, 'pending'),
            'chainId': self.w3.eth.chain_id
        })

        transaction = contract_call.build_transaction(tx_params)

        try:
            signed_tx = self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

        return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

    def __eq__(self, other) -> bool:
        if isinstance(other, Signer):
            return self.address == other.address
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.address)

    def __repr__(self) -> str:
        kind = 'local' if self.is_local else 'node'
        return f"Signer({self.address}, {kind})"


class WalletManager:
    """
    Resolves the available signers, deployer first

    Configured private keys take precedence. With none configured the
    node's own accounts are used, in the order the node reports them.
    """

    def __init__(self, w3: Web3, private_keys: Optional[List[str]] = None):
        self.w3 = w3
        self.private_keys = list(private_keys or [])
        self._signers = None

    def get_signers(self) -> List[Signer]:
        if self._signers is not None:
            return self._signers

        if self.private_keys:
            signers = [Signer.from_key(self.w3, key) for key in self.private_keys]
            logger.info(f"Loaded {len(signers)} local signer(s)")
        else:
            signers = [Signer(self.w3, address) for address in self.w3.eth.accounts]
            logger.info(f"Using {len(signers)} node-managed account(s)")

        self._signers = signers
        return signers

    def get_deployer(self) -> Signer:
        """
        Get the signer that deploys contracts

        Raises:
            ValueError: if no signer is available
        """
        signers = self.get_signers()

        if not signers:
            raise ValueError("No signer available: set PRIVATE_KEYS or use a node with unlocked accounts")

        return signers[0]
