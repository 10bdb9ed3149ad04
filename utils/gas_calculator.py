"""
Gas Calculator
Fee parameters and gas limits for deployment transactions
"""

from typing import Dict
from web3 import Web3
from loguru import logger


DEFAULT_GAS_SETTINGS = {
    'gas_limit_buffer': 1.2,
    'max_gas_price_gwei': 200,
    'priority_fee_gwei': 2
}


class GasCalculator:
    """
    Calculates gas limit and fees for a deployment
    Uses EIP-1559 fees when the chain reports a base fee, legacy gasPrice otherwise
    """

    def __init__(self, w3: Web3, config: Dict):
        """
        Initialize Gas Calculator

        Args:
            w3: Web3 instance
            config: Deployment configuration
        """
        self.w3 = w3

        gas_settings = {**DEFAULT_GAS_SETTINGS, **config.get('gas_settings', {})}
        self.gas_limit_buffer = max(float(gas_settings['gas_limit_buffer']), 1.0)
        self.max_gas_price_gwei = gas_settings['max_gas_price_gwei']
        self.priority_fee_gwei = gas_settings['priority_fee_gwei']

    @property
    def max_gas_price_wei(self) -> int:
        return int(Web3.to_wei(self.max_gas_price_gwei, 'gwei'))

    def buffered_gas_limit(self, gas_estimate: int) -> int:
        """
        Apply safety buffer to a gas estimate

        Args:
            gas_estimate: Gas estimated by the node

        Returns:
            Gas limit, never below the estimate
        """
        return max(int(gas_estimate * self.gas_limit_buffer), int(gas_estimate))

    def get_fee_params(self) -> Dict[str, int]:
        """
        Get fee parameters for the next transaction

        Returns:
            {'maxFeePerGas', 'maxPriorityFeePerGas'} or {'gasPrice'} in wei
        """
        latest_block = self.w3.eth.get_block('latest')
        base_fee_wei = latest_block.get('baseFeePerGas')

        if base_fee_wei is None:
            gas_price_wei = min(int(self.w3.eth.gas_price), self.max_gas_price_wei)
            logger.debug(f"Legacy gas price: {Web3.from_wei(gas_price_wei, 'gwei')} gwei")
            return {'gasPrice': gas_price_wei}

        return self.eip1559_fees(int(base_fee_wei))

    def eip1559_fees(self, base_fee_wei: int) -> Dict[str, int]:
        """
        Max fee = base fee * 2 + tip, capped at max_gas_price_gwei

        Args:
            base_fee_wei: Base fee of the latest block

        Returns:
            Dict with gas parameters in wei
        """
        priority_fee_wei = int(Web3.to_wei(self.priority_fee_gwei, 'gwei'))
        max_fee_wei = min(base_fee_wei * 2 + priority_fee_wei, self.max_gas_price_wei)

        return {
            'maxFeePerGas': max_fee_wei,
            'maxPriorityFeePerGas': min(priority_fee_wei, max_fee_wei)
        }

    @staticmethod
    def max_cost_wei(transaction: Dict) -> int:
        """Upper bound of the fee paid by a transaction"""
        fee_per_gas = transaction.get('maxFeePerGas', transaction.get('gasPrice', 0))
        return int(transaction.get('gas', 0)) * int(fee_per_gas)
