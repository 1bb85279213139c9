"""
Smart Contract Deployment Script
Deploys the NoteNook contract and reports its address
"""

import sys
from typing import Optional
from loguru import logger

from notenook.blockchain import ContractDeployer, NoteNookContract, WalletManager, get_artifact
from notenook.utils import RPCManager, Settings, setup_logging


def deploy_contract(settings: Optional[Settings] = None) -> NoteNookContract:
    """Deploy NoteNook contract"""
    settings = settings or Settings()

    logger.info("Starting contract deployment...")

    w3 = RPCManager(settings).get_web3()

    deployer = WalletManager(w3, settings.private_keys).get_deployer()
    logger.info(f"Deploying from: {deployer.address}")

    balance = w3.eth.get_balance(deployer.address)
    logger.info(f"Account balance: {w3.from_wei(balance, 'ether')} ETH")

    artifact = get_artifact(
        settings.contract_name,
        artifacts_dir=settings.artifacts_dir,
        contracts_dir=settings.contracts_dir,
        auto_compile=settings.auto_compile,
        solc_version=settings.solc_version,
        evm_version=settings.evm_version
    )

    return ContractDeployer(w3, settings.confirmation_timeout).deploy(
        artifact,
        deployer,
        handle_class=NoteNookContract
    )


def main() -> int:
    logging_ready = False

    try:
        settings = Settings()
        setup_logging(settings.log_level, settings.log_file)
        logging_ready = True

        contract = deploy_contract(settings)
    except Exception as e:
        if not logging_ready:
            setup_logging()
        logger.error(f"Deployment failed: {e!r}")
        return 1

    print("Contract Deployer:", contract.signer.address)
    print("Contract address:", contract.address)
    return 0


if __name__ == "__main__":
    sys.exit(main())
