"""
Settings model for imagebox configuration.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

IMAGEBOX_ENV_FILENAME = "imagebox.env"


class ImageBoxSettings(BaseSettings):
    """
    Settings model for imagebox via environment variables (``IMAGEBOX_`` prefix)
    or other settings sources supported by `pydantic-settings`.
    """

    DEFAULT_IMAGE_TYPE: str = Field(default="PNG", description="Image type used when none is given")
    RESOURCE_PATHS: Optional[str] = Field(
        default=None, description="Roots for classpath:// and resource:// URIs, os.pathsep separated"
    )
    DOWNLOAD_DIR: Optional[str] = Field(default=None, description="Directory for downloaded resources")
    HTTP_TIMEOUT: float = Field(default=30.0, description="Timeout for resource downloads, seconds")
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="IMAGEBOX_",
        env_file=IMAGEBOX_ENV_FILENAME,
        extra="ignore",
    )

    def get_resource_paths(self) -> List[Path]:
        """Get the configured resource roots in search order."""
        if not self.RESOURCE_PATHS:
            return []
        return [Path(p).expanduser() for p in self.RESOURCE_PATHS.split(os.pathsep) if p.strip()]


@lru_cache(maxsize=1)
def get_settings() -> ImageBoxSettings:
    return ImageBoxSettings()
