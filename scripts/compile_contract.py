"""
Contract Compile Script
Builds artifacts/contracts/<Name>.sol/<Name>.json from contracts/
"""

import sys
from loguru import logger

from notenook.blockchain import compile_contract
from notenook.utils import Settings, setup_logging


def main() -> int:
    logging_ready = False

    try:
        settings = Settings()
        setup_logging(settings.log_level, settings.log_file)
        logging_ready = True

        compile_contract(
            settings.contract_name,
            contracts_dir=settings.contracts_dir,
            artifacts_dir=settings.artifacts_dir,
            solc_version=settings.solc_version,
            evm_version=settings.evm_version
        )
    except Exception as e:
        if not logging_ready:
            setup_logging()
        logger.error(f"Compilation failed: {e!r}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
