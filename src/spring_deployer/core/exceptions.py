"""
Custom exceptions for the Spring deployer.

Remote failures raised by the Azure SDK (azure.core.exceptions.AzureError and
its subclasses) are not wrapped; they reach the caller unchanged. The classes
below cover the local side: configuration and project setup.

Exception Hierarchy:
    DeploymentError (base)
    └── ConfigurationError - Invalid or missing configuration
"""

from typing import Optional


class DeploymentError(Exception):
    """
    Base exception for all deployer errors raised by this package.
    
    Attributes:
        message: Human-readable error description
    """
    
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(DeploymentError):
    """
    Raised when configuration is invalid or missing required fields.
    
    This typically occurs when:
    - config_spring.json is missing from the project directory
    - A config file has invalid JSON
    - A required field (resource_group, cluster_name, app_name) is missing or empty
    - The artifact passed on the command line does not exist
    
    Example:
        >>> load_spring_config(Path("/tmp/empty"))
        ConfigurationError: Required configuration file not found: config_spring.json (file: /tmp/empty/config_spring.json)
    """
    
    def __init__(self, message: str, config_file: Optional[str] = None):
        self.config_file = config_file
        if config_file:
            message = f"{message} (file: {config_file})"
        super().__init__(message)
