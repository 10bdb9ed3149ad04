"""
Blockchain Interaction Package
Handles artifact lookup, deployment transactions and confirmation tracking
"""

from .exceptions import (
    DeploymentError,
    TemplateNotFoundError,
    AmbiguousTemplateError,
    DeploymentSubmissionError,
    ConfirmationError,
    ConfirmationTimeoutError,
    NetworkConnectionError,
    WalletError,
)
from .artifact_registry import ArtifactRegistry, ContractTemplate
from .contract_factory import ContractProvider, ContractFactory, DeploymentHandle
from .transaction_builder import TransactionBuilder
from .wallet_manager import DeployerWallet

__all__ = [
    'DeploymentError',
    'TemplateNotFoundError',
    'AmbiguousTemplateError',
    'DeploymentSubmissionError',
    'ConfirmationError',
    'ConfirmationTimeoutError',
    'NetworkConnectionError',
    'WalletError',
    'ArtifactRegistry',
    'ContractTemplate',
    'ContractProvider',
    'ContractFactory',
    'DeploymentHandle',
    'TransactionBuilder',
    'DeployerWallet'
]
