"""
Deployment configuration and context classes.

Configuration is parsed once into dataclasses and passed explicitly to the
clients. Nothing here talks to Azure.

Classes:
    DeploymentConfiguration: The "deployment" block of config_spring.json
    SpringConfiguration: The whole of config_spring.json
    ClientSettings: Identifiers a SpringAppClient needs to address an app
    DeploymentContext: Project path + configuration + initialized provider
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, TYPE_CHECKING

from spring_deployer import constants as CONSTANTS

if TYPE_CHECKING:
    from spring_deployer.providers.azure.provider import AzureSpringProvider


@dataclass
class DeploymentConfiguration:
    """
    Settings for a single deployment of the app.
    
    Attributes:
        deployment_name: Target deployment; empty means "use the active one"
        cpu: Number of vCPUs per instance
        memory_in_gb: Memory per instance
        instance_count: Number of instances
        jvm_options: JVM options string passed to the runtime
        environment: Environment variables for the deployment
        enable_persistent_storage: Attach a persistent disk to the app
    """
    
    deployment_name: Optional[str] = None
    cpu: int = 1
    memory_in_gb: int = 1
    instance_count: int = 1
    jvm_options: Optional[str] = None
    environment: Dict[str, str] = field(default_factory=dict)
    enable_persistent_storage: bool = False


@dataclass
class SpringConfiguration:
    """
    Parsed contents of config_spring.json.
    
    Attributes:
        resource_group: Resource group holding the Spring Apps service
        cluster_name: Name of the Azure Spring Apps service instance
        app_name: Name of the app inside the service
        is_public: Whether the app gets a public endpoint
        runtime_version: Runtime for deployments (e.g., "Java_11")
        mode: "DEBUG" enables debug logging
        deployment: Optional deployment settings
    """
    
    resource_group: str
    cluster_name: str
    app_name: str
    is_public: bool = False
    runtime_version: str = CONSTANTS.DEFAULT_RUNTIME_VERSION
    mode: str = "PRODUCTION"
    deployment: Optional[DeploymentConfiguration] = None
    
    def is_persistent_storage_enabled(self) -> bool:
        """Return True if the deployment block asks for a persistent disk."""
        return self.deployment is not None and self.deployment.enable_persistent_storage
    
    def get_deployment_name(self) -> Optional[str]:
        """Return the configured deployment name, or None if not set."""
        if self.deployment is None:
            return None
        return self.deployment.deployment_name or None


@dataclass
class ClientSettings:
    """Identifiers needed to address one Spring app."""
    
    subscription_id: str
    resource_group: str
    cluster_name: str
    app_name: str
    
    @classmethod
    def from_configuration(cls, configuration: SpringConfiguration, subscription_id: str) -> "ClientSettings":
        return cls(
            subscription_id=subscription_id,
            resource_group=configuration.resource_group,
            cluster_name=configuration.cluster_name,
            app_name=configuration.app_name,
        )


@dataclass
class DeploymentContext:
    """
    Everything a CLI command needs for one project.
    
    Attributes:
        project_path: Directory holding the config files
        config: Parsed SpringConfiguration
        provider: Initialized AzureSpringProvider, if any
    """
    
    project_path: Path
    config: SpringConfiguration
    provider: Optional["AzureSpringProvider"] = None
