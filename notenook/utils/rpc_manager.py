"""
RPC Manager
Creates and verifies the Web3 connection used by scripts and tests
"""

from typing import Optional
from web3 import Web3, EthereumTesterProvider
from loguru import logger

from .config import Settings


class RPCManager:
    """
    Owns the Web3 instance for a NoteNook session

    An HTTP node (Hardhat, Anvil, a testnet RPC) is used unless the RPC URL
    is ``tester``, which selects the in-process eth-tester chain.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.w3 = None

    def _create_web3(self) -> Web3:
        if self.settings.use_tester:
            logger.info("Using in-process eth-tester chain")
            return Web3(EthereumTesterProvider())

        logger.info(f"Connecting to {self.settings.rpc_url}")
        return Web3(Web3.HTTPProvider(self.settings.rpc_url))

    def get_web3(self) -> Web3:
        """
        Get a connected Web3 instance, creating it on first use

        Returns:
            Web3 instance

        Raises:
            ConnectionError: if the node does not respond
        """
        if self.w3 is not None:
            return self.w3

        w3 = self._create_web3()

        if not w3.is_connected():
            logger.error(f"Failed to connect to {self.settings.rpc_url}")
            raise ConnectionError(f"Failed to connect to {self.settings.rpc_url}")

        logger.success(f"Connected (chain id: {w3.eth.chain_id}, block: {w3.eth.block_number})")

        self.w3 = w3
        return w3

    def is_healthy(self) -> bool:
        """Check if the current connection still responds"""
        try:
            return self.w3 is not None and self.w3.is_connected()
        except Exception:
            return False
