"""
System Check Script
Verifies configuration, network, artifacts and deployer balance before deploying
Run: python -m scripts.check_system
"""

import os
import sys
from web3 import Web3
from loguru import logger

from blockchain.artifact_registry import ArtifactRegistry
from blockchain.exceptions import DeploymentError
from blockchain.wallet_manager import DeployerWallet
from deployment.runner import TEMPLATE_NAME
from utils.config import DEFAULT_CONFIG_PATH, load_config
from utils.rpc_manager import RPCManager

MIN_DEPLOYER_BALANCE_ETH = 0.01


def check_configuration(config_path: str = DEFAULT_CONFIG_PATH):
    """Check config file and network selection"""
    logger.info("Checking configuration...")

    if not os.path.exists(config_path):
        logger.warning(f"  {config_path} not found - using built-in defaults")
    else:
        logger.success(f"  ✓ {config_path}")

    network = os.getenv('DEPLOY_NETWORK')
    if network:
        logger.info(f"  DEPLOY_NETWORK: {network}")
    else:
        logger.info("  DEPLOY_NETWORK not set - using config default")

    if os.getenv('DEPLOYER_PRIVATE_KEY'):
        logger.success("  ✓ DEPLOYER_PRIVATE_KEY set")
    else:
        logger.info("  DEPLOYER_PRIVATE_KEY not set - node accounts will be used")

    return True


def check_artifacts(config):
    """Check that the contract template is compiled"""
    logger.info("Checking contract artifacts...")

    registry = ArtifactRegistry(config['artifacts_dir'])

    try:
        template = registry.resolve(TEMPLATE_NAME)
    except DeploymentError as e:
        logger.error(f"  ✗ {e}")
        logger.info("  Run 'npx hardhat compile' first")
        return False

    logger.success(f"  ✓ {template.qualified_name}")
    return True


def check_network(rpc_manager: RPCManager):
    """Check RPC connection"""
    logger.info("Checking RPC connection...")

    try:
        w3 = rpc_manager.get_web3()
    except DeploymentError as e:
        logger.error(f"  ✗ {e}")
        return False

    logger.success(
        f"  ✓ {rpc_manager.current_endpoint}: block {w3.eth.block_number}"
    )
    return True


def check_deployer_balance(rpc_manager: RPCManager):
    """Check deployer account and balance"""
    logger.info("Checking deployer balance...")

    if rpc_manager.w3 is None:
        logger.warning("No RPC connection - skipping balance check")
        return False

    try:
        wallet = DeployerWallet(rpc_manager.w3)
    except DeploymentError as e:
        logger.error(f"  ✗ {e}")
        return False

    balance = Web3.from_wei(wallet.get_balance(), 'ether')
    logger.info(f"  Deployer {wallet.address}: {balance:.4f} ETH")

    if balance < MIN_DEPLOYER_BALANCE_ETH:
        logger.warning(f"  ⚠ Deployer balance low (need at least {MIN_DEPLOYER_BALANCE_ETH} ETH)")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def main():
    """Run all system checks"""
    logger.info("=" * 70)
    logger.info("VotingSystem Deployment Check")
    logger.info("=" * 70)

    config = load_config()
    rpc_manager = RPCManager(config)

    checks = [
        ("Configuration", lambda: check_configuration()),
        ("Contract Artifacts", lambda: check_artifacts(config)),
        ("RPC Connection", lambda: check_network(rpc_manager)),
        ("Deployer Balance", lambda: check_deployer_balance(rpc_manager))
    ]

    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func()
            results.append((name, result))
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            results.append((name, False))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy")
        logger.info("Deploy: python deploy.py")
        return 0
    else:
        logger.error("❌ Not ready - fix issues above")
        return 1


if __name__ == "__main__":
    sys.exit(main())
