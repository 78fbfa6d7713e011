"""
Deployment client for Azure Spring Apps.

A SpringDeploymentClient is bound to one deployment name of one app. It is
obtained from SpringAppClient.get_deployment_client(), which resolves an
empty name to the app's active deployment (or "default").
"""

from typing import Optional, TYPE_CHECKING

from spring_deployer.core.context import DeploymentConfiguration
from spring_deployer.providers.base import BaseSpringClient
from spring_deployer.providers.azure.models import (
    ResourceUploadDefinition,
    SpringApp,
    SpringDeployment,
    deployment_from_resource,
    deployment_to_resource,
)

if TYPE_CHECKING:
    from spring_deployer.core.context import SpringConfiguration
    from spring_deployer.providers.azure.spring_app_client import SpringAppClient


class SpringDeploymentClient(BaseSpringClient):
    """
    Client for a single deployment.

    Attributes:
        app_client: The SpringAppClient this deployment belongs to
        deployment_name: Name of the deployment
    """

    def __init__(self, app_client: 'SpringAppClient', deployment_name: str):
        super().__init__(app_client.app_platform, app_client.settings)
        self.app_client = app_client
        self.deployment_name = deployment_name

    def get_deployment(self) -> Optional[SpringDeployment]:
        """Return the deployment snapshot, or None if it does not exist."""
        return self.app_client.get_deployment_by_name(self.deployment_name)

    def exists(self) -> bool:
        return self.get_deployment() is not None

    def create_or_update_deployment(
        self,
        upload: ResourceUploadDefinition,
        configuration: 'SpringConfiguration'
    ) -> SpringDeployment:
        """
        Point the deployment at an uploaded artifact, creating it if needed.

        Args:
            upload: Result of SpringAppClient.upload_artifact()
            configuration: Runtime version and deployment settings

        Returns:
            The deployment as returned by the service
        """
        settings = configuration.deployment or DeploymentConfiguration()
        deployment_resource = deployment_to_resource(
            relative_path=upload.relative_path,
            runtime_version=configuration.runtime_version,
            cpu=settings.cpu,
            memory_in_gb=settings.memory_in_gb,
            instance_count=settings.instance_count,
            jvm_options=settings.jvm_options,
            environment=settings.environment,
        )

        if self.exists():
            self._log_resource_update("Deployment", self.deployment_name)
            poller = self.app_platform.deployments.begin_update(
                resource_group_name=self.resource_group,
                service_name=self.cluster_name,
                app_name=self.app_name,
                deployment_name=self.deployment_name,
                deployment_resource=deployment_resource
            )
        else:
            self._log_resource_creation("Deployment", self.deployment_name)
            poller = self.app_platform.deployments.begin_create_or_update(
                resource_group_name=self.resource_group,
                service_name=self.cluster_name,
                app_name=self.app_name,
                deployment_name=self.deployment_name,
                deployment_resource=deployment_resource
            )
        return deployment_from_resource(poller.result())

    def activate(self) -> SpringApp:
        """Make this deployment the app's active deployment."""
        return self.app_client.activate_deployment(self.deployment_name)
