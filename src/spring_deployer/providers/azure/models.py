"""
Snapshot types for Azure Spring Apps resources.

The management service owns apps and deployments. The dataclasses here are
point-in-time copies handed to callers; converting back to SDK models only
happens right before an update call.

Conversions:
    - app_from_resource / deployment_from_resource / upload_definition_from_resource:
      SDK object -> snapshot (attribute access only, no SDK import)
    - app_to_resource / deployment_to_resource: snapshot -> SDK model
      (imports azure.mgmt.appplatform lazily)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from spring_deployer import constants as CONSTANTS


@dataclass(frozen=True)
class PersistentDiskConfig:
    """Persistent disk attached to an app."""

    size_in_gb: int
    mount_path: str

    @classmethod
    def default(cls) -> "PersistentDiskConfig":
        return cls(
            size_in_gb=CONSTANTS.DEFAULT_PERSISTENT_DISK_SIZE,
            mount_path=CONSTANTS.DEFAULT_PERSISTENT_DISK_MOUNT_PATH
        )


@dataclass
class AppProperties:
    """
    Properties of a Spring app.

    Only public, active_deployment_name, https_only and persistent_disk are
    sent back on create/update; the rest are read-only on the service side.
    """

    public: bool = False
    active_deployment_name: Optional[str] = None
    url: Optional[str] = None
    fqdn: Optional[str] = None
    https_only: Optional[bool] = None
    provisioning_state: Optional[str] = None
    persistent_disk: Optional[PersistentDiskConfig] = None


@dataclass
class SpringApp:
    """Fetched snapshot of a Spring app."""

    name: str
    properties: AppProperties = field(default_factory=AppProperties)


@dataclass
class SpringDeployment:
    """Fetched snapshot of a deployment under an app."""

    name: str
    app_name: Optional[str] = None
    active: bool = False
    status: Optional[str] = None
    provisioning_state: Optional[str] = None
    relative_path: Optional[str] = None


@dataclass(frozen=True)
class ResourceUploadDefinition:
    """Where to upload an artifact and how the service refers to it afterwards."""

    upload_url: str
    relative_path: str


# ==========================================
# SDK -> snapshot
# ==========================================

def _enum_value(value: Any) -> Optional[str]:
    """Return the string form of an SDK enum (or plain string) value."""
    if value is None:
        return None
    return getattr(value, "value", value)


def _disk_from_resource(disk: Any) -> Optional[PersistentDiskConfig]:
    if disk is None:
        return None
    return PersistentDiskConfig(size_in_gb=disk.size_in_gb, mount_path=disk.mount_path)


def app_from_resource(resource: Any) -> SpringApp:
    """Build a SpringApp snapshot from an SDK AppResource."""
    props = resource.properties
    if props is None:
        return SpringApp(name=resource.name)
    return SpringApp(
        name=resource.name,
        properties=AppProperties(
            public=bool(props.public),
            active_deployment_name=props.active_deployment_name,
            url=props.url,
            fqdn=props.fqdn,
            https_only=props.https_only,
            provisioning_state=_enum_value(props.provisioning_state),
            persistent_disk=_disk_from_resource(props.persistent_disk),
        )
    )


def deployment_from_resource(resource: Any) -> SpringDeployment:
    """Build a SpringDeployment snapshot from an SDK DeploymentResource."""
    props = resource.properties
    if props is None:
        return SpringDeployment(name=resource.name)
    source = props.source
    return SpringDeployment(
        name=resource.name,
        app_name=props.app_name,
        active=bool(props.active),
        status=_enum_value(props.status),
        provisioning_state=_enum_value(props.provisioning_state),
        relative_path=source.relative_path if source is not None else None,
    )


def upload_definition_from_resource(resource: Any) -> ResourceUploadDefinition:
    """Build a ResourceUploadDefinition from the SDK response."""
    return ResourceUploadDefinition(upload_url=resource.upload_url, relative_path=resource.relative_path)


# ==========================================
# snapshot -> SDK
# ==========================================

def app_to_resource(properties: AppProperties) -> Any:
    """
    Build the SDK AppResource sent on create/update.

    Args:
        properties: Properties to send

    Returns:
        azure.mgmt.appplatform AppResource for the pinned API version
    """
    from azure.mgmt.appplatform.v2020_07_01.models import AppResource, AppResourceProperties, PersistentDisk

    disk = None
    if properties.persistent_disk is not None:
        disk = PersistentDisk(
            size_in_gb=properties.persistent_disk.size_in_gb,
            mount_path=properties.persistent_disk.mount_path
        )

    return AppResource(
        properties=AppResourceProperties(
            public=properties.public,
            active_deployment_name=properties.active_deployment_name,
            https_only=properties.https_only,
            persistent_disk=disk,
        )
    )


def deployment_to_resource(
    relative_path: str,
    runtime_version: str,
    cpu: int,
    memory_in_gb: int,
    instance_count: int,
    jvm_options: Optional[str] = None,
    environment: Optional[Dict[str, str]] = None
) -> Any:
    """
    Build the SDK DeploymentResource for a jar uploaded to relative_path.

    Returns:
        azure.mgmt.appplatform DeploymentResource for the pinned API version
    """
    from azure.mgmt.appplatform.v2020_07_01.models import (
        DeploymentResource,
        DeploymentResourceProperties,
        DeploymentSettings,
        Sku,
        UserSourceInfo,
    )

    return DeploymentResource(
        properties=DeploymentResourceProperties(
            source=UserSourceInfo(type=CONSTANTS.ARTIFACT_SOURCE_TYPE, relative_path=relative_path),
            deployment_settings=DeploymentSettings(
                cpu=cpu,
                memory_in_gb=memory_in_gb,
                jvm_options=jvm_options,
                environment_variables=environment or None,
                runtime_version=runtime_version,
            )
        ),
        sku=Sku(capacity=instance_count)
    )
