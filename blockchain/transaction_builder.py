"""
Transaction Builder
Constructs contract deployment transactions
"""

from typing import Dict
from web3 import Web3
from loguru import logger

from utils.gas_calculator import GasCalculator


class TransactionBuilder:
    """
    Builds deployment transactions: nonce, gas limit, fees and chain id
    """

    def __init__(self, w3: Web3, gas_calculator: GasCalculator):
        """
        Initialize Transaction Builder

        Args:
            w3: Web3 instance
            gas_calculator: Gas calculator for limits and fees
        """
        self.w3 = w3
        self.gas_calculator = gas_calculator

    def build_deployment_tx(self, constructor, sender: str) -> Dict:
        """
        Build transaction for a contract constructor call

        Args:
            constructor: web3 ContractConstructor with arguments bound
            sender: Deployer address

        Returns:
            Transaction dict

        Raises:
            Whatever the node raises for gas estimation (constructor revert,
            invalid arguments)
        """
        # Include pending transactions
        nonce = self.w3.eth.get_transaction_count(sender, 'pending')

        gas_estimate = constructor.estimate_gas({'from': sender})
        gas_limit = self.gas_calculator.buffered_gas_limit(gas_estimate)

        fee_params = self.gas_calculator.get_fee_params()

        transaction = constructor.build_transaction({
            'from': sender,
            'nonce': nonce,
            'gas': gas_limit,
            'chainId': self.w3.eth.chain_id,
            **fee_params
        })

        logger.info(f"Gas estimate: {gas_estimate}, gas limit: {gas_limit}")
        logger.debug(f"Deployment transaction nonce: {nonce}, fees: {fee_params}")

        return transaction
