"""
Wallet Manager
Selects the account that signs and pays for deployments
"""

import os
from typing import Dict, Optional
from web3 import Web3
from eth_account import Account
from loguru import logger
from dotenv import load_dotenv

from .exceptions import WalletError

load_dotenv()


class DeployerWallet:
    """
    Deployer account:
    - DEPLOYER_PRIVATE_KEY set: local key, transactions signed in-process
    - otherwise: first unlocked account of the node (Hardhat / Anvil dev accounts)
    """

    def __init__(self, w3: Web3, private_key: Optional[str] = None):
        """
        Initialize deployer wallet

        Args:
            w3: Web3 instance
            private_key: Hex private key (defaults to DEPLOYER_PRIVATE_KEY)
        """
        self.w3 = w3
        private_key = private_key or os.getenv('DEPLOYER_PRIVATE_KEY')

        if private_key:
            try:
                self.account = Account.from_key(private_key)
            except Exception as e:
                raise WalletError(f"Invalid DEPLOYER_PRIVATE_KEY: {e}") from e
            self.address = self.account.address
        else:
            self.account = None
            accounts = w3.eth.accounts

            if not accounts:
                raise WalletError(
                    "DEPLOYER_PRIVATE_KEY not set and node has no unlocked accounts"
                )
            self.address = Web3.to_checksum_address(accounts[0])

        logger.info(f"Deployer wallet: {self.address}")

    @property
    def uses_local_key(self) -> bool:
        return self.account is not None

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the local key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        if not self.uses_local_key:
            raise WalletError("Node-managed account, transactions are signed by the node")

        return self.account.sign_transaction(transaction)

    def get_balance(self) -> int:
        """Native balance in wei"""
        return self.w3.eth.get_balance(self.address)
