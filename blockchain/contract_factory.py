"""
Contract Factory
Deploys contract templates and tracks deployments until confirmed
"""

import asyncio
import time
from typing import Dict, Optional

from web3 import Web3
from web3.exceptions import TransactionNotFound
from loguru import logger

from utils.gas_calculator import GasCalculator
from .artifact_registry import ArtifactRegistry, ContractTemplate
from .exceptions import (
    ConfirmationError,
    ConfirmationTimeoutError,
    DeploymentError,
    DeploymentSubmissionError,
)
from .transaction_builder import TransactionBuilder
from .wallet_manager import DeployerWallet


DEFAULT_CONFIRMATION_SETTINGS = {
    'timeout_seconds': 300,
    'poll_interval_seconds': 1.0,
    'required_confirmations': 1
}


class DeploymentHandle:
    """
    Pending deployment of one contract
    """

    def __init__(
        self,
        w3: Web3,
        template: ContractTemplate,
        tx_hash: bytes,
        confirmation: Optional[Dict] = None
    ):
        """
        Initialize deployment handle

        Args:
            w3: Web3 instance
            template: Deployed template
            tx_hash: Deployment transaction hash
            confirmation: timeout_seconds, poll_interval_seconds, required_confirmations
        """
        self.w3 = w3
        self.template = template
        self.tx_hash = tx_hash

        settings = {**DEFAULT_CONFIRMATION_SETTINGS, **(confirmation or {})}
        self.timeout = float(settings['timeout_seconds'])
        self.poll_interval = float(settings['poll_interval_seconds'])
        self.required_confirmations = max(int(settings['required_confirmations']), 1)

        self.receipt = None
        self._address = None

    @property
    def address(self) -> Optional[str]:
        """Contract address, None until confirmed"""
        return self._address

    @property
    def contract(self):
        """Contract instance bound to the confirmed address"""
        if self._address is None:
            return None
        return self.w3.eth.contract(address=self._address, abi=self.template.abi)

    async def wait_for_deployment(self) -> str:
        """
        Wait until the deployment is mined, confirmed and has code

        Returns:
            Checksummed contract address

        Raises:
            ConfirmationTimeoutError: not confirmed within timeout
            ConfirmationError: reverted, no code, or node error while polling
        """
        if self._address is not None:
            return self._address

        tx_hex = _hex(self.tx_hash)
        deadline = time.monotonic() + self.timeout

        logger.info(f"Waiting for confirmation of {tx_hex}...")

        try:
            while True:
                receipt = self._get_receipt()

                if receipt is not None:
                    if receipt['status'] != 1:
                        raise ConfirmationError(
                            f"Deployment transaction {tx_hex} reverted "
                            f"(block {receipt['blockNumber']})"
                        )

                    confirmations = self.w3.eth.block_number - receipt['blockNumber'] + 1
                    if confirmations >= self.required_confirmations:
                        break

                    logger.debug(f"{confirmations}/{self.required_confirmations} confirmations")

                if time.monotonic() >= deadline:
                    raise ConfirmationTimeoutError(
                        f"Deployment transaction {tx_hex} not confirmed "
                        f"after {self.timeout:.0f}s"
                    )

                await asyncio.sleep(self.poll_interval)

            address = receipt.get('contractAddress')
            if not address:
                raise ConfirmationError(f"Receipt of {tx_hex} has no contract address")

            address = Web3.to_checksum_address(address)
            if len(self.w3.eth.get_code(address)) == 0:
                raise ConfirmationError(f"No contract code at {address} after deployment")

        except DeploymentError:
            raise
        except Exception as e:
            raise ConfirmationError(f"Error confirming {tx_hex}: {e}") from e

        self.receipt = receipt
        self._address = address

        logger.debug(f"Gas used: {receipt.get('gasUsed')}")
        return address

    def _get_receipt(self):
        try:
            return self.w3.eth.get_transaction_receipt(self.tx_hash)
        except TransactionNotFound:
            return None


class ContractFactory:
    """
    Deploys one contract template from the deployer wallet
    """

    def __init__(
        self,
        w3: Web3,
        template: ContractTemplate,
        wallet: DeployerWallet,
        transaction_builder: TransactionBuilder,
        confirmation: Optional[Dict] = None
    ):
        self.w3 = w3
        self.template = template
        self.wallet = wallet
        self.transaction_builder = transaction_builder
        self.confirmation = confirmation

    def deploy(self, *constructor_args) -> DeploymentHandle:
        """
        Submit deployment transaction

        Args:
            *constructor_args: Constructor arguments, in ABI order

        Returns:
            DeploymentHandle for the submitted transaction

        Raises:
            DeploymentSubmissionError: transaction could not be built or was rejected
        """
        name = self.template.name

        try:
            contract = self.w3.eth.contract(abi=self.template.abi, bytecode=self.template.bytecode)
            constructor = contract.constructor(*constructor_args)

            transaction = self.transaction_builder.build_deployment_tx(
                constructor,
                self.wallet.address
            )

            max_cost = GasCalculator.max_cost_wei(transaction)
            balance = self.wallet.get_balance()
            if balance < max_cost:
                raise DeploymentSubmissionError(
                    f"Insufficient balance for deployment of {name}: "
                    f"have {Web3.from_wei(balance, 'ether')}, "
                    f"need up to {Web3.from_wei(max_cost, 'ether')}"
                )

            logger.info(f"Estimated deployment cost: up to {Web3.from_wei(max_cost, 'ether')}")

            if self.wallet.uses_local_key:
                signed_tx = self.wallet.sign_transaction(transaction)
                tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
            else:
                tx_hash = self.w3.eth.send_transaction(transaction)

        except DeploymentError:
            raise
        except Exception as e:
            raise DeploymentSubmissionError(f"Deployment of {name} rejected: {e}") from e

        logger.info(f"Transaction sent: {_hex(tx_hash)}")

        return DeploymentHandle(self.w3, self.template, tx_hash, self.confirmation)


class ContractProvider:
    """
    Looks up contract factories by name

    The network connection, deployer wallet and transaction builder are
    created on first use and shared by every factory.
    """

    def __init__(self, registry: ArtifactRegistry, rpc_manager, config: Dict):
        """
        Initialize Contract Provider

        Args:
            registry: Artifact registry
            rpc_manager: RPC manager for the target network
            config: Deployment configuration
        """
        self.registry = registry
        self.rpc_manager = rpc_manager
        self.config = config

        self.w3 = None
        self.wallet = None
        self.transaction_builder = None

    def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Get deployable factory for a template

        Args:
            name: Bare or fully qualified contract name

        Returns:
            ContractFactory
        """
        template = self.registry.resolve(name)

        if self.w3 is None:
            w3 = self.rpc_manager.get_web3()
            self.wallet = DeployerWallet(w3)
            self.transaction_builder = TransactionBuilder(w3, GasCalculator(w3, self.config))
            self.w3 = w3

        return ContractFactory(
            self.w3,
            template,
            self.wallet,
            self.transaction_builder,
            self.config.get('confirmation')
        )


def _hex(tx_hash) -> str:
    return tx_hash if isinstance(tx_hash, str) else Web3.to_hex(tx_hash)
