"""
Spring Deployer - CLI Entry Point.

This module provides the interactive CLI for managing a Spring app on Azure
Spring Apps. It is bound to a project directory holding config_spring.json
(and optionally config_credentials_azure.json).
"""

import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from azure.core.exceptions import AzureError

from spring_deployer import constants as CONSTANTS
from spring_deployer.logger import logger, print_stack_trace, configure_logger_from_file
from spring_deployer.core.config_loader import load_spring_config, load_credentials
from spring_deployer.core.context import DeploymentContext
from spring_deployer.core.exceptions import ConfigurationError, DeploymentError
from spring_deployer.providers.azure.provider import AzureSpringProvider
from spring_deployer.providers.azure.spring_app_client import SpringAppClient


# ==========================================
# Configuration & Context Management
# ==========================================

# Current project state
_current_project: Path = Path(CONSTANTS.DEFAULT_PROJECT_PATH)
_current_context: Optional[DeploymentContext] = None


def _create_context(project_path: Path) -> DeploymentContext:
    """
    Create a DeploymentContext for a project directory.

    Args:
        project_path: Directory containing the config files

    Returns:
        Context with configuration loaded and the Azure provider initialized
    """
    config = load_spring_config(project_path)
    credentials = load_credentials(project_path)
    configure_logger_from_file(project_path / CONSTANTS.CONFIG_SPRING_FILE)

    provider = AzureSpringProvider()
    provider.initialize_clients(credentials)

    return DeploymentContext(
        project_path=project_path,
        config=config,
        provider=provider,
    )


def set_active_project(project_path: str) -> None:
    """Set the currently active project directory."""
    global _current_project, _current_context

    if not project_path:
        raise ValueError("Invalid project path.")

    target_path = Path(project_path)
    if not target_path.is_dir():
        raise ValueError(f"Project directory '{project_path}' does not exist.")

    _current_project = target_path
    _current_context = None  # Lazy initialization


def get_context() -> DeploymentContext:
    """Get the current deployment context, creating if needed."""
    global _current_context
    if _current_context is None:
        _current_context = _create_context(_current_project)
    return _current_context


def get_app_client(context: DeploymentContext) -> SpringAppClient:
    return context.provider.create_app_client(context.config)


# ==========================================
# Command Helpers
# ==========================================

def help_menu():
    print("""
Available commands:

App commands:
  create_or_update_app        - Creates the app, or updates its public flag and persistent disk.
  app_status                  - Shows the app's URL, public flag and active deployment.

Deployment commands:
  deploy <artifact> <o:name>  - Uploads the artifact to the named deployment (default: active one)
                                and activates it. Creates app and deployment if missing.
  upload <artifact>           - Uploads an artifact and prints its relative path.
  activate <name>             - Makes the named deployment the active one.
  list_deployments            - Lists all deployments of the app.
  get_deployment <name>       - Shows a single deployment.
  resolve_deployment <o:name> - Shows which deployment a command would target.

Other commands:
  info_config                 - Shows the loaded configuration.
  set_project <path>          - Sets the active project directory.
  help                        - Show this help menu.
  exit                        - Exit the program.
""")


def _require_artifact(path: str) -> Path:
    artifact = Path(path)
    if not artifact.is_file():
        raise ConfigurationError(f"Artifact not found: {path}")
    return artifact


# ==========================================
# Command Handlers
# ==========================================

def handle_info_config(context: DeploymentContext) -> None:
    """Show configuration."""
    print(json.dumps(asdict(context.config), indent=2))


def handle_app_status(client: SpringAppClient) -> None:
    """Show the app's URL, public flag and active deployment."""
    app = client.get_app()
    print(f"App: {app.name}")
    print(f"URL: {app.properties.url}")
    print(f"Public: {app.properties.public}")
    print(f"Active deployment: {app.properties.active_deployment_name}")
    if app.properties.persistent_disk:
        disk = app.properties.persistent_disk
        print(f"Persistent disk: {disk.size_in_gb} GB at {disk.mount_path}")


def handle_create_or_update_app(client: SpringAppClient, context: DeploymentContext) -> None:
    app = client.create_or_update_app(client.get_app_or_none(), context.config)
    logger.info(f"✓ App '{app.name}' is up to date")


def handle_list_deployments(client: SpringAppClient) -> None:
    deployments = client.get_deployments()
    if not deployments:
        print("No deployments.")
        return
    for deployment in deployments:
        marker = "*" if deployment.active else " "
        print(f"{marker} {deployment.name} (status={deployment.status}, provisioning={deployment.provisioning_state})")


def handle_get_deployment(client: SpringAppClient, deployment_name: str) -> None:
    deployment = client.get_deployment_by_name(deployment_name)
    if deployment is None:
        print(f"Deployment '{deployment_name}' not found.")
        return
    print(json.dumps(asdict(deployment), indent=2))


def handle_upload(client: SpringAppClient, artifact_path: str) -> None:
    upload = client.upload_artifact(_require_artifact(artifact_path))
    print(f"Uploaded to: {upload.relative_path}")


def handle_deploy(client: SpringAppClient, context: DeploymentContext, artifact_path: str,
                  deployment_name: Optional[str] = None) -> None:
    """
    Full deployment: app, artifact, deployment, activation.

    The deployment name falls back to config_spring.json, then to the
    app's active deployment, then to "default".
    """
    artifact = _require_artifact(artifact_path)

    client.create_or_update_app(client.get_app_or_none(), context.config)
    upload = client.upload_artifact(artifact)

    deployment_client = client.get_deployment_client(deployment_name or context.config.get_deployment_name())
    deployment_client.create_or_update_deployment(upload, context.config)
    app = deployment_client.activate()

    logger.info(f"✓ Deployment '{deployment_client.deployment_name}' is active on '{app.name}'")
    if app.properties.url:
        logger.info(f"  URL: {app.properties.url}")


def handle_activate(client: SpringAppClient, deployment_name: str) -> None:
    app = client.activate_deployment(deployment_name)
    logger.info(f"✓ Active deployment of '{app.name}' is now '{app.properties.active_deployment_name}'")


def handle_resolve_deployment(client: SpringAppClient, deployment_name: Optional[str]) -> None:
    print(client.resolve_deployment_name(deployment_name))


def handle_command(command: str, args: list, context: DeploymentContext) -> None:
    """
    Dispatch a command that needs an initialized context.

    Raises:
        ValueError: If the command is unknown or arguments are missing
    """
    if command == "info_config":
        handle_info_config(context)
        return

    client = get_app_client(context)

    if command == "app_status":
        handle_app_status(client)
    elif command == "create_or_update_app":
        handle_create_or_update_app(client, context)
    elif command == "list_deployments":
        handle_list_deployments(client)
    elif command == "get_deployment":
        if not args:
            raise ValueError("Usage: get_deployment <name>")
        handle_get_deployment(client, args[0])
    elif command == "upload":
        if not args:
            raise ValueError("Usage: upload <artifact>")
        handle_upload(client, args[0])
    elif command == "deploy":
        if not args:
            raise ValueError("Usage: deploy <artifact> <o:name>")
        handle_deploy(client, context, args[0], args[1] if len(args) > 1 else None)
    elif command == "activate":
        if not args:
            raise ValueError("Usage: activate <name>")
        handle_activate(client, args[0])
    elif command == "resolve_deployment":
        handle_resolve_deployment(client, args[0] if args else None)
    else:
        raise ValueError(f"Unknown command '{command}'. Type 'help' for commands.")


# ==========================================
# Main Loop
# ==========================================

def main():
    if len(sys.argv) > 1:
        try:
            set_active_project(sys.argv[1])
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    logger.info("Welcome to the Spring Deployer. Type 'help' for commands.")

    while True:
        try:
            user_input = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("Goodbye!")
            break

        if not user_input:
            continue

        parts = user_input.split()
        command = parts[0]
        args = parts[1:]

        if command == "help":
            help_menu()
            continue

        elif command == "exit":
            print("Goodbye!")
            break

        elif command == "set_project":
            if not args:
                print("Error: Project path required.")
                continue
            try:
                set_active_project(args[0])
                print(f"Active project set to: {_current_project}")
            except ValueError as e:
                print(f"Error: {e}")
            continue

        try:
            handle_command(command, args, get_context())
        except (ValueError, RuntimeError, DeploymentError) as e:
            print(f"Error: {e}")
        except AzureError as e:
            logger.error(f"Azure request failed: {e}")
            print_stack_trace()
        except Exception as e:
            print(f"Error: {e}")
            print_stack_trace()

    return 0


if __name__ == "__main__":
    sys.exit(main())
