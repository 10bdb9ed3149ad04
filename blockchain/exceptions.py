"""
Deployment Errors
Each step of a deployment fails with its own error kind
"""


class DeploymentError(Exception):
    """Base class for all deployment failures"""


class TemplateNotFoundError(DeploymentError):
    """Contract template was never compiled, is malformed or is abstract"""


class AmbiguousTemplateError(TemplateNotFoundError):
    """Bare contract name matches more than one artifact"""


class DeploymentSubmissionError(DeploymentError):
    """Network rejected the deployment transaction"""


class ConfirmationError(DeploymentError):
    """Deployment transaction failed or was never confirmed"""


class ConfirmationTimeoutError(ConfirmationError):
    """No confirmation within the configured timeout"""


class NetworkConnectionError(DeploymentError):
    """No usable RPC endpoint"""


class WalletError(DeploymentError):
    """No deployer account available"""
