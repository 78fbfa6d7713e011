"""
Provider implementations package.

Package Structure:
    providers/
    ├── __init__.py         # This file
    ├── base.py             # BaseProvider with client storage and logging helpers
    └── azure/              # Azure Spring Apps implementation
        ├── provider.py     # AzureSpringProvider (credential + SDK client)
        ├── models.py       # Snapshot dataclasses and SDK conversions
        ├── storage.py      # Artifact upload to blob storage
        ├── spring_app_client.py
        └── spring_deployment_client.py
"""
