"""
Closed set of supported image types, each bound to the driver handling it.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Any, BinaryIO, Mapping, Optional

from PIL import Image as PILImage

from imagebox.drivers import DummyImageDriver, ImageDriver, PngImageDriver
from imagebox.drivers.base import PathLike


class ImageType(str, enum.Enum):
    PNG = "PNG"
    DUMMY = "Dummy"

    @classmethod
    def _missing_(cls, value: object) -> Optional["ImageType"]:
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None

    @classmethod
    def for_extension(cls, extension: str) -> "ImageType":
        """Find the image type whose canonical extension is ``extension`` (".png" or "png")."""
        ext = extension.lower()
        if not ext.startswith("."):
            ext = "." + ext
        for member in cls:
            if member.file_extension == ext:
                return member
        raise ValueError(f"No image type for file extension: {extension}")

    @property
    def driver(self) -> ImageDriver:
        return _DRIVERS[self]

    @property
    def file_extension(self) -> str:
        """File extension for the image type, e.g. '.png'."""
        return self.driver.file_extension

    @property
    def mime_type(self) -> str:
        return self.driver.mime_type

    def load(self, file_name: PathLike) -> PILImage.Image:
        return self.driver.load(file_name)

    def store(self, file_name: PathLike, handle: Any) -> None:
        self.driver.store(file_name, handle)

    def display(self, handle: Any, stream: Optional[BinaryIO] = None) -> None:
        """Write the encoded image to ``stream``, raw to stdout by default."""
        self.driver.display(handle, stream)

    def accepts(self, handle: Any) -> bool:
        return self.driver.accepts(handle)

    def release(self, handle: Any) -> None:
        self.driver.release(handle)

    def __str__(self) -> str:
        return self.value


_DRIVERS: Mapping[ImageType, ImageDriver] = MappingProxyType(
    {
        ImageType.PNG: PngImageDriver(),
        ImageType.DUMMY: DummyImageDriver(),
    }
)
