"""
Metadata service configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys
from typing import Optional

from pydantic import Field
from services.common.core.config import BaseAppConfig

from .models import HostPaths


class MetadataConfig(BaseAppConfig):
    """
    Configuration management for the function metadata service.
    """

    # Path settings
    SCRIPT_ROOT_PATH: str = Field(
        default="/home/site/wwwroot", description="Root directory of function scripts"
    )
    TEST_DATA_PATH: str = Field(
        default="", description="Directory of per-function test data (empty disables it)"
    )
    VFS_ROOT_PATH: str = Field(
        default="", description="Root of /admin/vfs hrefs (defaults to the script root)"
    )
    LOG_CONFIG_PATH: str = Field(
        default="/app/config/metadata_log.yaml", description="Logging definition file path"
    )

    # URL settings
    HTTP_ROUTE_PREFIX: str = Field(default="api", description="Route prefix of HTTP triggers")
    BASE_URL: str = Field(
        default="", description="Base URL for hrefs (defaults to the request base URL)"
    )

    # Test data inlining
    # Kept as a string: only an explicit "0" turns capping off.
    TEST_DATA_CAP_ENABLED: str = Field(default="1", description="Cap inline test data ('0' = off)")
    MAX_TEST_DATA_INLINE_LENGTH: int = Field(
        default=4096, ge=0, description="Max test data length returned inline"
    )

    # FastAPI settings
    root_path: str = Field(default="", description="API root path (for proxy)")

    # model_config is inherited

    @property
    def test_data_capping_enabled(self) -> bool:
        return self.TEST_DATA_CAP_ENABLED.strip() != "0"

    @property
    def vfs_root_path(self) -> str:
        return self.VFS_ROOT_PATH or self.SCRIPT_ROOT_PATH

    def host_paths(self) -> HostPaths:
        test_data_path: Optional[str] = self.TEST_DATA_PATH or None
        return HostPaths(root_script_path=self.SCRIPT_ROOT_PATH, test_data_path=test_data_path)


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = MetadataConfig()
except Exception as e:
    # Fail fast on invalid settings.
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
