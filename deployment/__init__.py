"""
Deployment Package
Runner for the VotingSystem contract deployment
"""

from .runner import DeploymentRunner, DeploymentState, CANDIDATE_NAMES, TEMPLATE_NAME

__all__ = ['DeploymentRunner', 'DeploymentState', 'CANDIDATE_NAMES', 'TEMPLATE_NAME']
