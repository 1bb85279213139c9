"""
Contract Deployer
Deploys compiled contracts and waits for on-chain confirmation
"""

from typing import Dict, Sequence
from web3 import Web3
from web3.exceptions import TimeExhausted
from loguru import logger

from .contract_manager import ContractHandle, DEFAULT_CONFIRMATION_TIMEOUT
from .errors import DeploymentError
from .wallet_manager import Signer


class ContractDeployer:
    """
    Deploys contracts from their compiled artifacts
    """

    def __init__(self, w3: Web3, confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT):
        """
        Initialize Contract Deployer

        Args:
            w3: Web3 instance
            confirmation_timeout: Seconds to wait for the deployment receipt
        """
        self.w3 = w3
        self.confirmation_timeout = confirmation_timeout

    def deploy(
        self,
        artifact: Dict,
        signer: Signer,
        handle_class=ContractHandle,
        constructor_args: Sequence = ()
    ):
        """
        Deploy a contract and block until it is confirmed

        Args:
            artifact: Compiled artifact with 'abi' and 'bytecode'
            signer: Deploying identity, recorded by the contract as msg.sender
            handle_class: ContractHandle subclass to return
            constructor_args: Constructor arguments

        Returns:
            Handle on the deployed contract, connected to the signer

        Raises:
            DeploymentError: if sending, confirmation or execution fails
        """
        name = artifact.get('contractName', 'contract')
        abi = artifact['abi']
        bytecode = artifact.get('bytecode')

        if not bytecode or bytecode == '0x':
            raise DeploymentError(f"{name} artifact has no bytecode (abstract contract or interface?)")

        logger.info(f"Deploying {name} from {signer.address}...")

        factory = self.w3.eth.contract(abi=abi, bytecode=bytecode)

        try:
            tx_hash = signer.transact(factory.constructor(*constructor_args))
        except Exception as e:
            logger.error(f"Error sending deployment transaction: {e}")
            raise DeploymentError(f"Failed to send {name} deployment: {e}") from e

        logger.info(f"Transaction sent: {tx_hash.hex()}")
        logger.info("Waiting for confirmation...")

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash,
                timeout=self.confirmation_timeout
            )
        except TimeExhausted as e:
            logger.error(f"Deployment not confirmed after {self.confirmation_timeout}s")
            raise DeploymentError(f"{name} deployment {tx_hash.hex()} was not confirmed") from e

        if receipt['status'] != 1 or not receipt['contractAddress']:
            logger.error("Deployment failed")
            logger.error(f"Transaction hash: {tx_hash.hex()}")
            raise DeploymentError(f"{name} deployment {tx_hash.hex()} failed")

        contract_address = receipt['contractAddress']

        logger.success(f"{name} deployed at {contract_address}")
        logger.debug(f"Gas used: {receipt['gasUsed']}")

        contract = self.w3.eth.contract(address=contract_address, abi=abi)

        return handle_class(
            self.w3,
            contract,
            signer=signer,
            receipt=receipt,
            confirmation_timeout=self.confirmation_timeout
        )
