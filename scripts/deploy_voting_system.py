"""
VotingSystem Deployment Script
Deploys VotingSystem with candidates Alice, Bob and Charlie
Run: python deploy.py (or python -m scripts.deploy_voting_system)
"""

import asyncio
import sys
from loguru import logger

from deployment.runner import DeploymentRunner
from utils.config import load_config

# Configure logging
logger.remove()
logger.add(
    sys.stderr,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    level="INFO"
)
logger.add(
    "data/logs/deploy.log",
    rotation="1 day",
    retention="7 days",
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
    level="DEBUG"
)


async def main() -> int:
    """Main entry point"""
    runner = DeploymentRunner.from_config(load_config())
    return await runner.run()


if __name__ == "__main__":
    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        exit_code = 1
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        exit_code = 1

    sys.exit(exit_code)
