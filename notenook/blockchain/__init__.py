"""
Blockchain Interaction Package
Handles contract artifacts, signers, deployment and contract calls
"""

from .errors import (
    NoteNookError,
    ArtifactError,
    ArtifactNotFoundError,
    DeploymentError,
    TransactionFailedError,
)
from .artifacts import load_artifact, compile_contract, get_artifact
from .wallet_manager import Signer, WalletManager
from .contract_manager import ContractHandle, NoteNookContract
from .deployer import ContractDeployer

__all__ = [
    'NoteNookError',
    'ArtifactError',
    'ArtifactNotFoundError',
    'DeploymentError',
    'TransactionFailedError',
    'load_artifact',
    'compile_contract',
    'get_artifact',
    'Signer',
    'WalletManager',
    'ContractHandle',
    'NoteNookContract',
    'ContractDeployer'
]
