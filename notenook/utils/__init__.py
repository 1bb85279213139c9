"""
Utilities Package
Configuration, logging and RPC connection helpers
"""

from .config import Settings
from .logger_config import setup_logging
from .rpc_manager import RPCManager

__all__ = [
    'Settings',
    'setup_logging',
    'RPCManager'
]
