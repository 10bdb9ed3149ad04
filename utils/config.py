"""
Configuration loading
.env for secrets and endpoints, JSON file for deployment settings
"""

import json
import os
from typing import Dict

from dotenv import load_dotenv
from loguru import logger


DEFAULT_CONFIG_PATH = "config/deploy_config.json"

DEFAULT_CONFIG = {
    'artifacts_dir': 'artifacts',
    'default_network': 'localhost',
    'networks': {
        'localhost': {
            'name': 'Hardhat localhost',
            'chain_id': 31337,
            'endpoints': [
                {
                    'name': 'Local node',
                    'http_url_env': 'LOCALHOST_RPC_URL',
                    'default_url': 'http://127.0.0.1:8545',
                    'priority': 1
                }
            ]
        }
    },
    'gas_settings': {
        'gas_limit_buffer': 1.2,
        'max_gas_price_gwei': 200,
        'priority_fee_gwei': 2
    },
    'confirmation': {
        'timeout_seconds': 300,
        'poll_interval_seconds': 1.0,
        'required_confirmations': 1
    },
    'rpc_timeout_seconds': 30
}


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict:
    """
    Load deployment configuration

    Sections missing from the file keep their defaults.

    Args:
        config_path: JSON config file

    Returns:
        Config dict
    """
    load_dotenv()

    config = json.loads(json.dumps(DEFAULT_CONFIG))

    if os.path.exists(config_path):
        with open(config_path, 'r') as f:
            file_config = json.load(f)

        for key, value in file_config.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict) and key != 'networks':
                config[key].update(value)
            else:
                config[key] = value

        logger.debug(f"Loaded config from {config_path}")
    else:
        logger.warning(f"Config file {config_path} not found, using defaults")

    return config
