"""
Deployment Runner
Deploys the VotingSystem contract with the fixed candidate list
"""

from enum import Enum
from typing import Dict, Sequence

from loguru import logger

from blockchain.artifact_registry import ArtifactRegistry
from blockchain.contract_factory import ContractProvider
from utils.rpc_manager import RPCManager


TEMPLATE_NAME = "VotingSystem"

CANDIDATE_NAMES = ("Alice", "Bob", "Charlie")


class DeploymentState(Enum):
    NOT_STARTED = "not_started"
    DEPLOYING = "deploying"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class DeploymentRunner:
    """
    Resolve template -> submit deployment -> await confirmation

    Each step raises its own error kind; run() is the only place errors are caught.
    """

    def __init__(
        self,
        provider,
        template_name: str = TEMPLATE_NAME,
        candidate_names: Sequence[str] = CANDIDATE_NAMES
    ):
        """
        Initialize Deployment Runner

        Args:
            provider: Object with get_contract_factory(name)
            template_name: Contract template to deploy
            candidate_names: Constructor argument
        """
        self.provider = provider
        self.template_name = template_name
        self.candidate_names = tuple(candidate_names)

        self.state = DeploymentState.NOT_STARTED
        self.address = None

    @classmethod
    def from_config(cls, config: Dict) -> "DeploymentRunner":
        """Build runner backed by Hardhat artifacts and the configured network"""
        registry = ArtifactRegistry(config['artifacts_dir'])
        rpc_manager = RPCManager(config)
        return cls(ContractProvider(registry, rpc_manager, config))

    async def deploy(self) -> str:
        """
        Deploy the template

        Returns:
            Deployed contract address

        Raises:
            TemplateNotFoundError, DeploymentSubmissionError, ConfirmationError
        """
        self.state = DeploymentState.DEPLOYING

        factory = self.provider.get_contract_factory(self.template_name)

        deployment = factory.deploy(list(self.candidate_names))
        logger.info(f"Deploying {self.template_name}...")

        address = await deployment.wait_for_deployment()

        self.address = address
        self.state = DeploymentState.CONFIRMED
        return address

    async def run(self) -> int:
        """
        Deploy and report

        Returns:
            Process exit code: 0 on success, 1 on any error
        """
        try:
            address = await self.deploy()
        except Exception as e:
            self.state = DeploymentState.FAILED
            logger.opt(exception=e).error(
                f"{self.template_name} deployment failed - {type(e).__name__}: {e}"
            )
            return 1

        print(f"{self.template_name} deployed to: {address}")
        return 0
