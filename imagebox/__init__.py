"""
Public package interface for imagebox.

The package binds a file name and an image type (``PNG`` or ``Dummy``) to a
Pillow image handle and forwards load/store/display to the type's driver.
"""

from __future__ import annotations

from imagebox.config.settings import ImageBoxSettings, get_settings
from imagebox.domain.image import Image
from imagebox.domain.types import ImageInfo, ImageType
from imagebox.drivers import DummyImageDriver, ImageDriver, PngImageDriver
from imagebox.exceptions import (
    ImageBoxError,
    ImageFormatError,
    InvalidArgumentError,
    ResourceNotFoundError,
)
from imagebox.io.log import configure_logging
from imagebox.io.resources import ResourceLoader, Resolver

__all__ = [
    "Image",
    "ImageInfo",
    "ImageType",
    "ImageDriver",
    "DummyImageDriver",
    "PngImageDriver",
    "ResourceLoader",
    "Resolver",
    "ImageBoxSettings",
    "get_settings",
    "configure_logging",
    "ImageBoxError",
    "ImageFormatError",
    "InvalidArgumentError",
    "ResourceNotFoundError",
]
