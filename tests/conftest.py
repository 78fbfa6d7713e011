import os
import pytest
from unittest.mock import MagicMock

from spring_deployer.core.context import ClientSettings, DeploymentConfiguration, SpringConfiguration


@pytest.fixture(scope="function", autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables to prevent accidental cloud calls."""
    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "test-subscription-123")
    monkeypatch.setenv("AZURE_TENANT_ID", "testing")
    monkeypatch.setenv("AZURE_CLIENT_ID", "testing")
    monkeypatch.setenv("AZURE_CLIENT_SECRET", "testing")


@pytest.fixture
def client_settings():
    return ClientSettings(
        subscription_id="test-subscription-123",
        resource_group="rg-spring",
        cluster_name="spring-cluster",
        app_name="gateway",
    )


@pytest.fixture
def spring_config():
    """A configuration with a public app and persistent storage disabled."""
    return SpringConfiguration(
        resource_group="rg-spring",
        cluster_name="spring-cluster",
        app_name="gateway",
        is_public=True,
        runtime_version="Java_11",
        deployment=DeploymentConfiguration(
            deployment_name="green",
            cpu=2,
            memory_in_gb=4,
            instance_count=3,
            jvm_options="-Xmx2g",
            environment={"SPRING_PROFILES_ACTIVE": "prod"},
            enable_persistent_storage=False,
        ),
    )


@pytest.fixture
def make_app_resource():
    """
    Factory for SDK-shaped AppResource doubles.

    Every attribute read by the snapshot conversion is set explicitly so that
    MagicMock does not invent values for them.
    """
    def _make(name="gateway", active_deployment_name=None, public=False, url=None, disk=None):
        resource = MagicMock()
        resource.name = name
        resource.properties.public = public
        resource.properties.active_deployment_name = active_deployment_name
        resource.properties.url = url
        resource.properties.fqdn = None
        resource.properties.https_only = False
        resource.properties.provisioning_state = "Succeeded"
        if disk is None:
            resource.properties.persistent_disk = None
        else:
            resource.properties.persistent_disk.size_in_gb = disk[0]
            resource.properties.persistent_disk.mount_path = disk[1]
        return resource
    return _make


@pytest.fixture
def make_deployment_resource():
    """Factory for SDK-shaped DeploymentResource doubles."""
    def _make(name, active=False, status="Running", relative_path=None):
        resource = MagicMock()
        resource.name = name
        resource.properties.app_name = "gateway"
        resource.properties.active = active
        resource.properties.status = status
        resource.properties.provisioning_state = "Succeeded"
        resource.properties.source.relative_path = relative_path
        return resource
    return _make


@pytest.fixture
def mock_app_platform():
    """AppPlatformManagementClient double."""
    return MagicMock()
