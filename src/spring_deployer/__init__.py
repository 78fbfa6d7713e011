"""
Spring Deployer.

Creates, updates and activates deployments of Spring apps on Azure Spring
Apps, and uploads build artifacts for them.
"""

__version__ = "0.1.0"
