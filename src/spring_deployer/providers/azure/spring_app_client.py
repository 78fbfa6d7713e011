"""
Spring app client for Azure Spring Apps.

SpringAppClient wraps the AppPlatformManagementClient for a single app:
create/update the app from configuration, activate a deployment, list
deployments and upload build artifacts.

Every method re-fetches what it needs; nothing is cached between calls.
SDK errors (azure.core.exceptions.AzureError) propagate unchanged.

Usage:
    client = SpringAppClient(app_platform, ClientSettings(...))
    app = client.create_or_update_app(client.get_app_or_none(), config)
    upload = client.upload_artifact("target/app.jar")
    client.activate_deployment("green")
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, List, Optional, Union, TYPE_CHECKING

from azure.core.exceptions import ResourceNotFoundError

from spring_deployer import constants as CONSTANTS
from spring_deployer.logger import logger
from spring_deployer.providers.base import BaseSpringClient
from spring_deployer.providers.azure.models import (
    AppProperties,
    PersistentDiskConfig,
    ResourceUploadDefinition,
    SpringApp,
    SpringDeployment,
    app_from_resource,
    app_to_resource,
    deployment_from_resource,
    upload_definition_from_resource,
)
from spring_deployer.providers.azure.storage import upload_file_to_storage

if TYPE_CHECKING:
    from spring_deployer.core.context import ClientSettings, SpringConfiguration
    from spring_deployer.providers.azure.spring_deployment_client import SpringDeploymentClient


class SpringAppClient(BaseSpringClient):
    """
    Client for one app inside an Azure Spring Apps service.

    Attributes:
        app_platform: AppPlatformManagementClient
        settings: ClientSettings naming the resource group, service and app
    """

    def __init__(self, app_platform: Any, settings: 'ClientSettings'):
        super().__init__(app_platform, settings)

    # ==========================================
    # App create / update
    # ==========================================

    def create_or_update_app(self, app: Optional[SpringApp], configuration: 'SpringConfiguration') -> SpringApp:
        """
        Create the app when no snapshot is given, otherwise update it.

        Args:
            app: Existing app snapshot, or None if the app does not exist yet
            configuration: Source of the public flag and persistent storage setting

        Returns:
            The app as returned by the service
        """
        if app is None:
            return self.create_app(configuration)
        return self.update_app(app, configuration)

    def create_app(self, configuration: 'SpringConfiguration') -> SpringApp:
        """Create the app with properties built from configuration."""
        properties = self.merge_configuration_into_properties(configuration, AppProperties())

        self._log_resource_creation("Spring App", self.app_name)
        poller = self.app_platform.apps.begin_create_or_update(
            resource_group_name=self.resource_group,
            service_name=self.cluster_name,
            app_name=self.app_name,
            app_resource=app_to_resource(properties)
        )
        return app_from_resource(poller.result())

    def update_app(self, app: SpringApp, configuration: 'SpringConfiguration') -> SpringApp:
        """Merge configuration into the app's properties and update it."""
        properties = self.merge_configuration_into_properties(configuration, app.properties)
        return self.update_app_properties(app, properties)

    def update_app_properties(self, app: SpringApp, properties: AppProperties) -> SpringApp:
        """
        Send properties as the app's new state.

        Args:
            app: Snapshot of the app being updated (used for its name in logs)
            properties: Properties to send

        Returns:
            The app as returned by the service
        """
        self._log_resource_update("Spring App", app.name or self.app_name)
        poller = self.app_platform.apps.begin_update(
            resource_group_name=self.resource_group,
            service_name=self.cluster_name,
            app_name=self.app_name,
            app_resource=app_to_resource(properties)
        )
        return app_from_resource(poller.result())

    # ==========================================
    # Deployments
    # ==========================================

    def activate_deployment(self, deployment_name: str) -> SpringApp:
        """
        Make deployment_name the app's active deployment.

        The update call is issued even when the deployment is already active.

        Returns:
            The app as returned by the service
        """
        app = self.get_app()
        properties = app.properties
        if properties.active_deployment_name != deployment_name:
            logger.info(
                f"Switching active deployment of {self.app_name}: "
                f"{properties.active_deployment_name} -> {deployment_name}"
            )
            properties = replace(properties, active_deployment_name=deployment_name)
        return self.update_app_properties(app, properties)

    def get_deployments(self) -> List[SpringDeployment]:
        """
        List all deployments of the app.

        Iterating the SDK pager fetches every page in order; the result is a
        plain list.
        """
        pager = self.app_platform.deployments.list(
            resource_group_name=self.resource_group,
            service_name=self.cluster_name,
            app_name=self.app_name
        )
        return [deployment_from_resource(resource) for resource in pager]

    def get_deployment_by_name(self, deployment_name: str) -> Optional[SpringDeployment]:
        """Return the first deployment named deployment_name, or None."""
        for deployment in self.get_deployments():
            if deployment.name == deployment_name:
                return deployment
        self._log_resource_not_found("Deployment", deployment_name)
        return None

    def get_active_deployment_name(self) -> Optional[str]:
        return self.get_app().properties.active_deployment_name

    def resolve_deployment_name(self, requested_name: Optional[str]) -> str:
        """
        Decide which deployment a command targets.

        A non-empty requested_name is returned as is, without calling Azure.
        Otherwise the app's active deployment is used, and "default" when the
        app has none.
        """
        if requested_name:
            return requested_name

        # TODO: raise when more than one deployment reports active=True
        active_deployment_name = self.get_active_deployment_name()
        if active_deployment_name:
            logger.debug(f"No deployment name given, using active deployment '{active_deployment_name}'")
            return active_deployment_name
        return CONSTANTS.DEFAULT_DEPLOYMENT_NAME

    def get_deployment_client(self, deployment_name: Optional[str] = None) -> 'SpringDeploymentClient':
        """Return a SpringDeploymentClient bound to the resolved deployment name."""
        from spring_deployer.providers.azure.spring_deployment_client import SpringDeploymentClient

        return SpringDeploymentClient(self, self.resolve_deployment_name(deployment_name))

    # ==========================================
    # Artifacts
    # ==========================================

    def upload_artifact(self, artifact: Union[str, Path]) -> ResourceUploadDefinition:
        """
        Upload a build artifact to the storage slot reserved for the app.

        Args:
            artifact: Local path of the jar to upload

        Returns:
            The upload definition; its relative_path is what deployments reference
        """
        resource = self.app_platform.apps.get_resource_upload_url(
            resource_group_name=self.resource_group,
            service_name=self.cluster_name,
            app_name=self.app_name
        )
        upload_definition = upload_definition_from_resource(resource)
        upload_file_to_storage(artifact, upload_definition.upload_url)
        return upload_definition

    # ==========================================
    # App lookups
    # ==========================================

    def get_app(self) -> SpringApp:
        """Fetch the app, refreshing its status on the service side."""
        resource = self.app_platform.apps.get(
            resource_group_name=self.resource_group,
            service_name=self.cluster_name,
            app_name=self.app_name,
            sync_status=CONSTANTS.APP_SYNC_STATUS
        )
        return app_from_resource(resource)

    def get_app_or_none(self) -> Optional[SpringApp]:
        """Fetch the app, or return None if it does not exist yet."""
        try:
            return self.get_app()
        except ResourceNotFoundError:
            self._log_resource_not_found("Spring App", self.app_name)
            return None

    def get_application_url(self) -> Optional[str]:
        return self.get_app().properties.url

    def is_public(self) -> bool:
        return self.get_app().properties.public

    # ==========================================
    # Configuration merge
    # ==========================================

    @staticmethod
    def merge_configuration_into_properties(
        configuration: 'SpringConfiguration',
        properties: AppProperties
    ) -> AppProperties:
        """
        Apply configuration to app properties.

        With persistent storage enabled, an existing disk is kept and a
        missing one gets the default (50 GB at /persistent). With persistent
        storage disabled the disk is cleared. The public flag is copied from
        configuration.

        Returns:
            A new AppProperties; the input is not modified
        """
        persistent_disk = None
        if _is_persistent_storage_enabled(configuration):
            persistent_disk = _get_persistent_disk_or_default(properties)
        return replace(properties, persistent_disk=persistent_disk, public=configuration.is_public)


def _is_persistent_storage_enabled(configuration: Optional['SpringConfiguration']) -> bool:
    return configuration is not None and configuration.is_persistent_storage_enabled()


def _get_persistent_disk_or_default(properties: AppProperties) -> PersistentDiskConfig:
    if properties.persistent_disk is not None:
        return properties.persistent_disk
    return PersistentDiskConfig.default()
