"""Fixed names and prefixes shared by the server modules."""

PROJECT_NAME = "dagstore"
API_V1_STR = "/api/v1"
SCHEMA_VERSION = "v1"
