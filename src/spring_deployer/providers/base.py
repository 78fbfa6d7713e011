"""
Shared base classes for provider implementations.

Contents:
    - BaseProvider: SDK client storage with an initialization guard
    - BaseSpringClient: Common state and logging helpers for Spring clients
"""

from typing import Any, Optional, TYPE_CHECKING
from spring_deployer.logger import logger

if TYPE_CHECKING:
    from spring_deployer.core.context import ClientSettings


class BaseProvider:
    """
    Base class for the cloud provider wrapper.

    Subclasses fill self._clients and set self._initialized in
    initialize_clients(); reading clients before that raises.
    """

    name: str = ""

    def __init__(self):
        """Initialize base provider state."""
        self._clients: dict = {}
        self._initialized: bool = False

    @property
    def clients(self) -> dict:
        """Return initialized SDK clients."""
        if not self._initialized:
            raise RuntimeError(
                "Provider not initialized. Call initialize_clients() first."
            )
        return self._clients

    @property
    def initialized(self) -> bool:
        return self._initialized


class BaseSpringClient:
    """
    State shared by the app and deployment clients.

    Attributes:
        app_platform: AppPlatformManagementClient (or a test double)
        settings: Identifiers of the target service and app
    """

    def __init__(self, app_platform: Any, settings: 'ClientSettings'):
        self.app_platform = app_platform
        self.settings = settings

    @property
    def resource_group(self) -> str:
        return self.settings.resource_group

    @property
    def cluster_name(self) -> str:
        return self.settings.cluster_name

    @property
    def app_name(self) -> str:
        return self.settings.app_name

    def _log_resource_creation(self, resource_type: str, resource_name: str) -> None:
        """
        Log a resource creation event.

        Args:
            resource_type: Type of resource (e.g., "Spring App", "Deployment")
            resource_name: Name of the resource being created
        """
        logger.info(f"Creating {resource_type}: {resource_name}")

    def _log_resource_update(self, resource_type: str, resource_name: str) -> None:
        """
        Log a resource update event.

        Args:
            resource_type: Type of resource
            resource_name: Name of the resource being updated
        """
        logger.info(f"Updating {resource_type}: {resource_name}")

    def _log_resource_not_found(self, resource_type: str, resource_name: Optional[str]) -> None:
        """
        Log that a lookup matched nothing.

        Args:
            resource_type: Type of resource
            resource_name: Name that was looked up
        """
        logger.info(f"{resource_type} not found: {resource_name}")
