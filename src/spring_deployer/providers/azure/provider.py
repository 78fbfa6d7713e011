"""
Azure Spring Apps provider.

This module owns credential selection and construction of the management
SDK client used by SpringAppClient.

SDK Clients Initialized:
    - AppPlatformManagementClient: Apps, deployments and upload URLs

Usage:
    from spring_deployer.providers.azure.provider import AzureSpringProvider
    
    provider = AzureSpringProvider()
    provider.initialize_clients(credentials)
    app_client = provider.create_app_client(config)
"""

import os
from typing import Any, Dict, TYPE_CHECKING

from spring_deployer import constants as CONSTANTS
from spring_deployer.logger import logger
from spring_deployer.providers.base import BaseProvider

if TYPE_CHECKING:
    from spring_deployer.core.context import SpringConfiguration
    from spring_deployer.providers.azure.spring_app_client import SpringAppClient


class AzureSpringProvider(BaseProvider):
    """
    Holds the Azure credential and the AppPlatformManagementClient.
    
    Attributes:
        name: Provider identifier ("azure")
        subscription_id: Azure subscription of the Spring Apps service
        clients: {"appplatform": AppPlatformManagementClient}
    """
    
    name: str = "azure"
    
    def __init__(self):
        """Initialize Azure provider."""
        super().__init__()
        self._subscription_id: str = ""
    
    @property
    def subscription_id(self) -> str:
        """Get the Azure subscription ID."""
        return self._subscription_id
    
    @property
    def app_platform(self) -> Any:
        """Get the AppPlatformManagementClient."""
        return self.clients["appplatform"]
    
    def initialize_clients(self, credentials: dict) -> None:
        """
        Initialize Azure SDK clients.
        
        Args:
            credentials: Azure credentials dictionary with:
                - azure_subscription_id: Azure subscription ID (REQUIRED, or
                  AZURE_SUBSCRIPTION_ID in the environment)
                - azure_tenant_id: Azure AD tenant ID (optional)
                - azure_client_id: Service principal client ID (optional)
                - azure_client_secret: Service principal secret (optional)
        
        Raises:
            ValueError: If no subscription ID is available
        """
        subscription_id = credentials.get("azure_subscription_id") or os.environ.get("AZURE_SUBSCRIPTION_ID")
        if not subscription_id:
            raise ValueError(
                "Missing required credential 'azure_subscription_id'. "
                f"Provide it in {CONSTANTS.CONFIG_CREDENTIALS_AZURE_FILE} "
                "or via the AZURE_SUBSCRIPTION_ID environment variable."
            )
        self._subscription_id = subscription_id
        
        credential = self._get_credential(credentials)
        self._initialize_sdk_clients(credential)
        
        self._initialized = True
        logger.debug(f"Azure clients initialized for subscription {subscription_id}")
    
    def _get_credential(self, credentials: dict) -> Any:
        """Get Azure credential for SDK clients."""
        from azure.identity import DefaultAzureCredential, ClientSecretCredential
        
        client_id = credentials.get("azure_client_id")
        client_secret = credentials.get("azure_client_secret")
        tenant_id = credentials.get("azure_tenant_id")
        
        if client_id and client_secret and tenant_id:
            return ClientSecretCredential(
                tenant_id=tenant_id,
                client_id=client_id,
                client_secret=client_secret
            )
        else:
            return DefaultAzureCredential()
    
    def _initialize_sdk_clients(self, credential: Any) -> None:
        """Initialize the App Platform management client."""
        from azure.mgmt.appplatform import AppPlatformManagementClient
        
        self._clients["appplatform"] = AppPlatformManagementClient(
            credential=credential,
            subscription_id=self._subscription_id,
            api_version=CONSTANTS.APP_PLATFORM_API_VERSION
        )
    
    def create_app_client(self, configuration: 'SpringConfiguration') -> 'SpringAppClient':
        """
        Build a SpringAppClient for the app named in the configuration.
        
        Raises:
            RuntimeError: If initialize_clients() has not been called
        """
        from spring_deployer.core.context import ClientSettings
        from spring_deployer.providers.azure.spring_app_client import SpringAppClient
        
        settings = ClientSettings.from_configuration(configuration, self.subscription_id)
        return SpringAppClient(self.app_platform, settings)
