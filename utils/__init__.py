"""
Utilities Package
Configuration, RPC connection and gas pricing
"""

from .gas_calculator import GasCalculator
from .rpc_manager import RPCManager
from .config import load_config

__all__ = [
    'GasCalculator',
    'RPCManager',
    'load_config'
]
