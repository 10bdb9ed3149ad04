"""
RPC Manager
Connects to the target network with prioritised endpoint fallback
"""

import os
from typing import Dict, List, Optional
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

from blockchain.exceptions import NetworkConnectionError

load_dotenv()


class RPCManager:
    """
    Endpoint fallback for one network

    Endpoints are tried in priority order; the first one that is connected
    and reports the expected chain id is used for the whole deployment.
    """

    def __init__(self, config: Dict, network: Optional[str] = None):
        """
        Initialize RPC Manager

        Args:
            config: Deployment configuration
            network: Network name (defaults to DEPLOY_NETWORK, then config default)
        """
        self.network_name = network or os.getenv('DEPLOY_NETWORK') or config['default_network']

        self.known_networks = sorted(config['networks'])
        self.network = config['networks'].get(self.network_name, {})
        self.chain_id = self.network.get('chain_id')
        self.request_timeout = config.get('rpc_timeout_seconds', 30)

        self.endpoints = self._init_endpoints()
        self.w3 = None
        self.current_endpoint = None

        logger.info(
            f"RPC Manager initialized for {self.network.get('name', self.network_name)} "
            f"with {len(self.endpoints)} endpoints"
        )

    def _init_endpoints(self) -> List[Dict]:
        """Resolve endpoint URLs from environment or defaults"""
        endpoints = []

        for endpoint in sorted(self.network.get('endpoints', []), key=lambda e: e.get('priority', 99)):
            url = os.getenv(endpoint.get('http_url_env', '')) or endpoint.get('default_url')

            if url:
                endpoints.append({'name': endpoint.get('name', url), 'http_url': url})
            else:
                logger.debug(f"Endpoint {endpoint.get('name')} not configured, skipping")

        return endpoints

    def get_web3(self) -> Web3:
        """
        Get connected Web3 instance

        Returns:
            Web3 instance

        Raises:
            NetworkConnectionError: no endpoint usable
        """
        if self.w3 is not None:
            return self.w3

        if not self.network:
            raise NetworkConnectionError(
                f"Unknown network '{self.network_name}' "
                f"(configured: {', '.join(self.known_networks)})"
            )

        for endpoint in self.endpoints:
            w3 = self._connect(endpoint)
            if w3 is not None:
                self.w3 = w3
                self.current_endpoint = endpoint['name']
                return w3

        raise NetworkConnectionError(
            f"Could not connect to network '{self.network_name}' "
            f"(tried {len(self.endpoints)} endpoints)"
        )

    def _connect(self, endpoint: Dict) -> Optional[Web3]:
        """Connect to one endpoint and verify its chain id"""
        try:
            w3 = Web3(Web3.HTTPProvider(
                endpoint['http_url'],
                request_kwargs={'timeout': self.request_timeout}
            ))

            if not w3.is_connected():
                logger.warning(f"Failed to connect to {endpoint['name']}")
                return None

            chain_id = w3.eth.chain_id
            if self.chain_id is not None and chain_id != self.chain_id:
                logger.warning(
                    f"{endpoint['name']} reports chain id {chain_id}, expected {self.chain_id}"
                )
                return None

            logger.success(f"Connected to {endpoint['name']} (chain id {chain_id})")
            return w3

        except Exception as e:
            logger.error(f"Error connecting to {endpoint['name']}: {e}")
            return None
