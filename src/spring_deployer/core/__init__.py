"""
Core abstractions for the Spring deployer.

Modules:
    context: Configuration dataclasses and DeploymentContext
    config_loader: Configuration loading utilities
    exceptions: Custom exception types

Usage:
    from spring_deployer.core import load_spring_config, ClientSettings
    
    config = load_spring_config(Path("./my-project"))
    settings = ClientSettings.from_configuration(config, subscription_id)
"""

from .context import ClientSettings, DeploymentConfiguration, DeploymentContext, SpringConfiguration
from .config_loader import load_credentials, load_spring_config
from .exceptions import ConfigurationError, DeploymentError

__all__ = [
    # Context
    "ClientSettings",
    "DeploymentConfiguration",
    "DeploymentContext",
    "SpringConfiguration",
    # Loading
    "load_credentials",
    "load_spring_config",
    # Exceptions
    "DeploymentError",
    "ConfigurationError",
]
