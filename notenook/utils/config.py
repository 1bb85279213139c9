"""
Settings
Runtime configuration loaded from the environment (.env supported)
"""

import math
import os
from typing import Dict, List, Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_RPC_URL = "http://127.0.0.1:8545"
TESTER_RPC_URL = "tester"

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def _env_bool(name: str, value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == '':
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _env_keys(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [key.strip() for key in value.split(',') if key.strip()]


class Settings:
    """
    NoteNook tooling configuration

    Values come from the process environment. Pass ``environ`` to read
    from a different mapping (tests do).
    """

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        env = os.environ if environ is None else environ

        # Network
        self.rpc_url = env.get('NOTENOOK_RPC_URL') or DEFAULT_RPC_URL
        self.private_keys = _env_keys(env.get('PRIVATE_KEYS'))

        # Contract build
        self.contract_name = env.get('CONTRACT_NAME') or 'NoteNook'
        self.contracts_dir = env.get('CONTRACTS_DIR') or 'contracts'
        self.artifacts_dir = env.get('ARTIFACTS_DIR') or 'artifacts'
        self.auto_compile = _env_bool('AUTO_COMPILE', env.get('AUTO_COMPILE'), True)
        self.solc_version = env.get('SOLC_VERSION') or '0.8.24'
        self.evm_version = env.get('EVM_VERSION') or 'paris'

        # Confirmation
        timeout = env.get('CONFIRMATION_TIMEOUT') or '120'
        try:
            self.confirmation_timeout = float(timeout)
        except ValueError:
            raise ValueError(f"CONFIRMATION_TIMEOUT must be a number, got {timeout!r}") from None

        if not math.isfinite(self.confirmation_timeout) or self.confirmation_timeout <= 0:
            raise ValueError(f"CONFIRMATION_TIMEOUT must be a positive finite number, got {timeout!r}")

        # Logging
        self.log_level = (env.get('LOG_LEVEL') or 'INFO').upper()
        self.log_file = env.get('LOG_FILE') or None

    @property
    def use_tester(self) -> bool:
        """True when the in-process eth-tester chain is selected"""
        return self.rpc_url.strip().lower() == TESTER_RPC_URL

    def __repr__(self) -> str:
        # Never print private keys
        return (
            f"Settings(rpc_url={self.rpc_url!r}, contract_name={self.contract_name!r}, "
            f"signers={len(self.private_keys)}, artifacts_dir={self.artifacts_dir!r})"
        )
