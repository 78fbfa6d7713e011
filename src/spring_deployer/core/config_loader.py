"""
Configuration loading utilities.

This module loads a project's configuration from JSON files.

Files:
    1. config_spring.json - App coordinates and deployment settings (required)
    2. config_credentials_azure.json - Azure credentials (optional)

Usage:
    from spring_deployer.core.config_loader import load_spring_config
    
    config = load_spring_config(project_path=Path("./my-project"))
"""

import json
from pathlib import Path
from typing import Any, Dict

from spring_deployer import constants as CONSTANTS
from .context import DeploymentConfiguration, SpringConfiguration
from .exceptions import ConfigurationError


def _load_json_file(file_path: Path, required: bool = True) -> Dict[str, Any]:
    """
    Load a JSON file and return its contents as a dictionary.
    
    Args:
        file_path: Path to the JSON file
        required: If True, raise error when file is missing. If False, return empty dict.
    
    Returns:
        Parsed JSON content as dictionary
    
    Raises:
        ConfigurationError: If file is missing (when required) or has invalid JSON
    """
    if not file_path.exists():
        if required:
            raise ConfigurationError(
                f"Required configuration file not found: {file_path.name}",
                config_file=str(file_path)
            )
        return {}
    
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in configuration file: {e}",
            config_file=str(file_path)
        )
    
    if not isinstance(content, dict):
        raise ConfigurationError(
            "Configuration file must contain a JSON object",
            config_file=str(file_path)
        )
    return content


def _parse_deployment(raw: Dict[str, Any], config_file: str) -> DeploymentConfiguration:
    """Build a DeploymentConfiguration from the "deployment" block."""
    if not isinstance(raw, dict):
        raise ConfigurationError("'deployment' must be a JSON object", config_file=config_file)
    
    environment = raw.get("environment") or {}
    if not isinstance(environment, dict):
        raise ConfigurationError("'deployment.environment' must be a JSON object", config_file=config_file)
    
    return DeploymentConfiguration(
        deployment_name=raw.get("deployment_name") or None,
        cpu=int(raw.get("cpu", 1)),
        memory_in_gb=int(raw.get("memory_in_gb", 1)),
        instance_count=int(raw.get("instance_count", 1)),
        jvm_options=raw.get("jvm_options") or None,
        environment={str(k): str(v) for k, v in environment.items()},
        enable_persistent_storage=bool(raw.get("enable_persistent_storage", False)),
    )


def load_spring_config(project_path: Path) -> SpringConfiguration:
    """
    Load config_spring.json from a project directory.
    
    Args:
        project_path: Path to the project directory containing config files
    
    Returns:
        SpringConfiguration with all loaded settings
    
    Raises:
        ConfigurationError: If the file is missing, invalid, or lacks a required field
    
    Example:
        config = load_spring_config(Path("./my-project"))
        print(config.app_name)  # "gateway"
    """
    config_path = project_path / CONSTANTS.CONFIG_SPRING_FILE
    raw = _load_json_file(config_path, required=True)
    
    for field_name in CONSTANTS.REQUIRED_SPRING_CONFIG_FIELDS:
        if field_name not in raw:
            raise ConfigurationError(
                f"Missing required field '{field_name}' in {CONSTANTS.CONFIG_SPRING_FILE}",
                config_file=str(config_path)
            )
        if not raw[field_name]:
            raise ConfigurationError(
                f"Field '{field_name}' in {CONSTANTS.CONFIG_SPRING_FILE} is required and cannot be empty",
                config_file=str(config_path)
            )
    
    deployment = None
    if raw.get("deployment") is not None:
        deployment = _parse_deployment(raw["deployment"], str(config_path))
    
    return SpringConfiguration(
        resource_group=raw["resource_group"],
        cluster_name=raw["cluster_name"],
        app_name=raw["app_name"],
        is_public=bool(raw.get("is_public", False)),
        runtime_version=raw.get("runtime_version") or CONSTANTS.DEFAULT_RUNTIME_VERSION,
        mode=raw.get("mode", "PRODUCTION"),
        deployment=deployment,
    )


def load_credentials(project_path: Path) -> Dict[str, Any]:
    """
    Load Azure credentials for a project.
    
    Args:
        project_path: Path to the project directory
    
    Returns:
        Credentials dictionary, empty if config_credentials_azure.json is absent
    
    Note:
        The file is optional so that the subscription can also come from
        the AZURE_SUBSCRIPTION_ID environment variable and the credential
        from DefaultAzureCredential (Azure CLI login, managed identity, ...).
    """
    return _load_json_file(
        project_path / CONSTANTS.CONFIG_CREDENTIALS_AZURE_FILE,
        required=False
    )
