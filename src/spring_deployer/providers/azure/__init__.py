"""
Azure Spring Apps provider package.
"""

from .provider import AzureSpringProvider
from .spring_app_client import SpringAppClient
from .spring_deployment_client import SpringDeploymentClient

__all__ = ["AzureSpringProvider", "SpringAppClient", "SpringDeploymentClient"]
