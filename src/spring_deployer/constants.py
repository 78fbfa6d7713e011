# ==========================================
# 1. Configuration Filenames
# ==========================================
CONFIG_SPRING_FILE = "config_spring.json"
CONFIG_CREDENTIALS_AZURE_FILE = "config_credentials_azure.json"

# Keys that must be present and non-empty in config_spring.json
REQUIRED_SPRING_CONFIG_FIELDS = ["resource_group", "cluster_name", "app_name"]

# ==========================================
# 2. Azure Spring Apps
# ==========================================
APP_PLATFORM_API_VERSION = "2020-07-01"

DEFAULT_DEPLOYMENT_NAME = "default"
DEFAULT_PERSISTENT_DISK_SIZE = 50
DEFAULT_PERSISTENT_DISK_MOUNT_PATH = "/persistent"

# apps.get(..., sync_status) value that refreshes the app status from the service
APP_SYNC_STATUS = "true"

DEFAULT_RUNTIME_VERSION = "Java_8"
ARTIFACT_SOURCE_TYPE = "Jar"

# ==========================================
# 3. CLI
# ==========================================
DEFAULT_PROJECT_PATH = "."
